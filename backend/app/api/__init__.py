"""API routers."""

from app.api.horses import router as horses_router
from app.api.images import router as images_router
from app.api.owners import router as owners_router

__all__ = [
    "horses_router",
    "owners_router",
    "images_router",
]
