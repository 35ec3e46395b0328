"""Admin editor routes. Every route requires the admin principal."""

from typing import Optional

from fastapi import Depends, Form

from src.core.bases.base_router import BaseRouter
from src.core.response.handlers import success_response
from src.apps.accounts.dependencies import require_admin
from src.apps.accounts.schemas.user import AdminPrincipal
from src.apps.blog.routers.post_router import get_post_service
from src.apps.blog.schemas.post import NEW_POST_SLUG, PostSubmission
from src.apps.blog.services.post_service import ADMIN_INDEX_PATH


class AdminPostRouter(BaseRouter):
    """Admin post router class."""

    def __init__(self):
        super().__init__(
            service=get_post_service(),
            prefix=ADMIN_INDEX_PATH,
            tags=["Admin"],
        )

    def _register_routes(self) -> None:
        self._register_index()
        self._register_load()
        self._register_submit()

    def _register_index(self) -> None:
        @self.router.get(
            "",
            summary="Admin index",
            responses={302: {"description": "Not signed in as admin"}},
        )
        async def admin_index(admin: AdminPrincipal = Depends(require_admin)):
            return success_response(
                data={"links": {"create": f"{ADMIN_INDEX_PATH}/{NEW_POST_SLUG}"}},
            )

    def _register_load(self) -> None:
        @self.router.get(
            "/{slug}",
            summary="Load a post into the editor",
            responses={
                200: {"description": "Post, or the blank template for 'new'"},
                302: {"description": "Not signed in as admin"},
                404: {"description": "Post not found"},
            },
        )
        async def load_post(slug: str, admin: AdminPrincipal = Depends(require_admin)):
            return self.respond(await self.service.load_editor(admin, slug))

    def _register_submit(self) -> None:
        @self.router.post(
            "/{slug}",
            summary="Create, update or delete a post",
            responses={
                302: {"description": "Saved, or not signed in as admin"},
                400: {"description": "Validation error"},
                404: {"description": "Post not found"},
            },
        )
        async def submit_post(
            slug: str,
            intent: Optional[str] = Form(None),
            title: Optional[str] = Form(None),
            new_slug: Optional[str] = Form(None, alias="slug"),
            markdown: Optional[str] = Form(None),
            admin: AdminPrincipal = Depends(require_admin),
        ):
            submission = PostSubmission(
                intent=intent, title=title, slug=new_slug, markdown=markdown
            )
            return self.respond(await self.service.submit(admin, slug, submission))


router = AdminPostRouter().get_router()
