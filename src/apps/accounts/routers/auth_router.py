"""Login and logout routes."""

from typing import Optional

from fastapi import Depends, Form, Query, Request, status
from fastapi.responses import RedirectResponse

from src.core.bases.base_router import BaseRouter
from src.core.response.handlers import success_response
from src.core.results import Ok, Redirect
from src.apps.accounts.dependencies import (
    SESSION_USER_KEY,
    get_auth_service,
    get_current_user,
)
from src.apps.accounts.models.user import User
from src.apps.accounts.schemas.user import LoginSubmission
from src.apps.accounts.services.auth_service import AuthService, safe_redirect


class AuthRouter(BaseRouter):
    """Auth router class."""

    def __init__(self):
        super().__init__(service=get_auth_service(), tags=["Auth"])

    def _register_routes(self) -> None:
        self._register_login_form()
        self._register_login()
        self._register_logout()

    def _register_login_form(self) -> None:
        @self.router.get("/login", summary="Login form")
        async def login_form(
            redirect_to: Optional[str] = Query(None),
            user: Optional[User] = Depends(get_current_user),
        ):
            return success_response(
                data={
                    "fields": ["email", "password"],
                    "redirect_to": safe_redirect(redirect_to),
                    "user": AuthService.to_read(user) if user else None,
                }
            )

    def _register_login(self) -> None:
        @self.router.post(
            "/login",
            summary="Sign in",
            responses={
                302: {"description": "Signed in, redirecting"},
                400: {"description": "Invalid credentials"},
            },
        )
        async def login(
            request: Request,
            email: Optional[str] = Form(None),
            password: Optional[str] = Form(None),
            redirect_to: Optional[str] = Form(None),
        ):
            submission = LoginSubmission(email=email, password=password, redirect_to=redirect_to)
            result = await self.service.login(submission)
            if isinstance(result, Ok):
                request.session.clear()
                request.session[SESSION_USER_KEY] = result.data.id
                result = Redirect(safe_redirect(submission.redirect_to))
            return self.respond(result)

    def _register_logout(self) -> None:
        @self.router.post("/logout", summary="Sign out")
        async def logout(request: Request):
            request.session.clear()
            return RedirectResponse("/", status_code=status.HTTP_302_FOUND)


router = AuthRouter().get_router()
