"""Post service."""

import logging

from src.core.bases.base_service import BaseService
from src.core.exceptions import invariant
from src.core.results import Invalid, NotFound, Ok, Redirect, ServiceResult
from src.apps.accounts.schemas.user import AdminPrincipal
from src.apps.blog.models.post import Post
from src.apps.blog.repositories.post_repository import PostRepository
from src.apps.blog.schemas.post import (
    NEW_POST_SLUG,
    PostEditor,
    PostIntent,
    PostRead,
    PostSubmission,
    PostView,
)
from src.apps.blog.services.markdown_service import render_markdown

logger = logging.getLogger(__name__)

ADMIN_INDEX_PATH = "/posts/admin"


class PostService(BaseService[Post]):
    """Public post views and the admin editor."""

    not_found_message = 'The post with the slug "{key}" doesn\'t exist!'

    def __init__(self, repository: PostRepository):
        super().__init__(repository)

    async def get_view(self, slug: str) -> ServiceResult:
        """Resolve a slug to its title and rendered HTML."""
        invariant(slug, "Slug is required")

        result = await self.get(slug)
        if isinstance(result, NotFound):
            return result

        post = result.data
        view = PostView(title=post.title, html=render_markdown(post.markdown))
        return Ok(view, message="Post retrieved successfully")

    async def load_editor(self, admin: AdminPrincipal, slug: str) -> ServiceResult:
        """Load a post for editing, or the blank template for ``new``."""
        invariant(slug, "Slug is required")

        if slug == NEW_POST_SLUG:
            return Ok(PostEditor(is_new=True, actions=[PostIntent.CREATE]))

        result = await self.get(slug)
        if isinstance(result, NotFound):
            return result

        return Ok(
            PostEditor(
                post=PostRead.model_validate(result.data, from_attributes=True),
                is_new=False,
                actions=[PostIntent.DELETE, PostIntent.UPDATE],
            )
        )

    async def submit(
        self, admin: AdminPrincipal, slug: str, submission: PostSubmission
    ) -> ServiceResult:
        """Apply an editor submission.

        Delete needs nothing but the path slug and succeeds whether or not the
        post exists. Create and update validate the submitted fields first;
        update writes the submitted slug too, so a post can be renamed.
        """
        invariant(slug, "Slug is required")

        if submission.is_delete:
            result = await self.delete(slug)
            logger.info(
                "Post %r %s by %s",
                slug,
                "deleted" if result.data else "already absent",
                admin.email,
            )
            return Redirect(ADMIN_INDEX_PATH)

        validation = submission.validate_fields()
        if isinstance(validation, Invalid):
            logger.debug("Rejected post submission for %r: %s", slug, validation.errors)
            return validation

        fields = validation.fields.model_dump()
        if slug == NEW_POST_SLUG:
            await self.create(fields)
            logger.info("Post %r created by %s", fields["slug"], admin.email)
            return Redirect(ADMIN_INDEX_PATH)

        result = await self.update(slug, fields)
        if isinstance(result, NotFound):
            return result

        if fields["slug"] != slug:
            logger.info("Post %r renamed to %r by %s", slug, fields["slug"], admin.email)
        else:
            logger.info("Post %r updated by %s", slug, admin.email)
        return Redirect(ADMIN_INDEX_PATH)
