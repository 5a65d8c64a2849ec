"""SQLAlchemy models."""

from app.models.horse import Horse, Sex
from app.models.image import Image
from app.models.owner import Owner

__all__ = [
    "Horse",
    "Owner",
    "Image",
    "Sex",
]
