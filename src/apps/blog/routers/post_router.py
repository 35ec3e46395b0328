"""Public post routes."""

from fastapi import Query

from src.core.database import get_session
from src.core.bases.base_router import BaseRouter
from src.apps.blog.services.post_service import PostService
from src.apps.blog.repositories.post_repository import PostRepository
from src.apps.blog.schemas.post import PostSummary


def get_post_repository():
    """Get post repository instance."""
    return PostRepository(get_session)  # type:ignore


def get_post_service():
    """Get post service instance."""
    repository = get_post_repository()
    return PostService(repository)


def to_summary(post) -> PostSummary:
    return PostSummary(slug=post.slug, title=post.title)


class PostRouter(BaseRouter):
    """Post router class."""

    def __init__(self):
        super().__init__(
            service=get_post_service(),
            prefix="/posts",
            tags=["Posts"],
        )

    def _register_routes(self) -> None:
        self._register_list()
        self._register_view()

    def _register_list(self) -> None:
        """Register GET /posts route with pagination."""
        @self.router.get(
            "",
            summary="List posts",
            responses={200: {"description": "Posts retrieved successfully"}},
        )
        async def list_posts(
            page: int = Query(1, ge=1),
            per_page: int = Query(10, ge=1, le=100),
        ):
            result = await self.service.get_list(page=page, per_page=per_page)
            return self.respond(result, serializer=to_summary)

    def _register_view(self) -> None:
        """Register GET /posts/{slug} route."""
        @self.router.get(
            "/{slug}",
            summary="Render a post",
            responses={
                200: {"description": "Post title and rendered HTML"},
                404: {"description": "Post not found"},
            },
        )
        async def view_post(slug: str):
            return self.respond(await self.service.get_view(slug))


# Router instance
router = PostRouter().get_router()
