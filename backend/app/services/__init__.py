"""Business logic services."""

from app.services.family_tree import FamilyNode, build_family_tree
from app.services.horse_service import HorseService
from app.services.horse_validator import HorseValidator
from app.services.image_service import ImageService
from app.services.owner_service import OwnerService

__all__ = [
    "FamilyNode",
    "build_family_tree",
    "HorseService",
    "HorseValidator",
    "ImageService",
    "OwnerService",
]
