"""Data access repositories."""

from app.repositories.base import BaseRepository
from app.repositories.horse_repository import AncestorRow, HorseRepository, HorseSearchFilters
from app.repositories.image_repository import ImageRepository
from app.repositories.owner_repository import OwnerRepository

__all__ = [
    "BaseRepository",
    "HorseRepository",
    "HorseSearchFilters",
    "AncestorRow",
    "OwnerRepository",
    "ImageRepository",
]
