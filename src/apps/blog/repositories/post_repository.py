"""Post repository."""

from src.core.bases.base_repository import BaseRepository
from src.apps.blog.models.post import Post


class PostRepository(BaseRepository[Post]):
    """Post store addressed by slug."""

    model = Post
    lookup_field = "slug"
    order_by = "title"
