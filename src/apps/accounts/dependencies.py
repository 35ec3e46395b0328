"""Session guard dependencies."""

from typing import Optional
from urllib.parse import urlencode

from fastapi import Depends, Request

from src.core.database import get_session
from src.core.exceptions import UnauthorizedException
from src.apps.accounts.models.user import User
from src.apps.accounts.repositories.user_repository import UserRepository
from src.apps.accounts.schemas.user import AdminPrincipal
from src.apps.accounts.services.auth_service import AuthService

SESSION_USER_KEY = "user_id"
LOGIN_PATH = "/login"


def get_user_repository():
    """Get user repository instance."""
    return UserRepository(get_session)  # type:ignore


def get_auth_service():
    """Get auth service instance."""
    return AuthService(get_user_repository())


async def get_current_user(
    request: Request, service: AuthService = Depends(get_auth_service)
) -> Optional[User]:
    user_id = request.session.get(SESSION_USER_KEY)
    if user_id is None:
        return None

    user = await service.get_user(user_id)
    if user is None:
        # the account behind this session is gone
        request.session.pop(SESSION_USER_KEY, None)
    return user


async def require_user(
    request: Request, user: Optional[User] = Depends(get_current_user)
) -> User:
    if user is None:
        target = request.url.path
        if request.url.query:
            target = f"{target}?{request.url.query}"
        raise UnauthorizedException(
            redirect_to=f"{LOGIN_PATH}?{urlencode({'redirect_to': target})}"
        )
    return user


async def require_admin(user: User = Depends(require_user)) -> AdminPrincipal:
    """Resolve the admin principal or halt the request with a redirect home."""
    principal = AuthService.admin_principal(user)
    if principal is None:
        raise UnauthorizedException(redirect_to="/", detail="Admin access required")
    return principal
