"""Blog app."""

from src.apps.blog.routers.admin_router import router as admin_router
from src.apps.blog.routers.post_router import router as post_router

__all__ = ["admin_router", "post_router"]
