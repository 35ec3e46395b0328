"""Password authentication and user management."""

import logging
from typing import Optional

import bcrypt

from src.core.bases.base_service import BaseService
from src.core.config import settings
from src.core.results import Invalid, NotFound, Ok, ServiceResult
from src.apps.accounts.models.user import User
from src.apps.accounts.repositories.user_repository import UserRepository
from src.apps.accounts.schemas.user import (
    MAX_PASSWORD_BYTES,
    AdminPrincipal,
    LoginSubmission,
    UserRead,
)

logger = logging.getLogger(__name__)


def hash_password(password: str) -> str:
    """Hash a password using bcrypt"""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))


def safe_redirect(target: Optional[str], default: str = "/") -> str:
    """Only follow same-site absolute paths."""
    if not target or not target.startswith("/") or target[1:2] in ("/", "\\"):
        return default
    return target


class AuthService(BaseService[User]):
    not_found_message = "User {key} not found"

    def __init__(self, repository: UserRepository):
        super().__init__(repository)

    async def register_user(self, email: str, password: str) -> User:
        email = email.strip().lower()
        if not password or len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must be 1 to {MAX_PASSWORD_BYTES} bytes long")

        result = await self.create({"email": email, "password_hash": hash_password(password)})
        logger.info("Registered user %s", email)
        return result.data

    async def authenticate(self, email: str, password: str) -> Optional[User]:
        users = await self.repository.get_many(email=email.strip().lower(), limit=1)
        if not users or not verify_password(password, users[0].password_hash):
            return None
        return users[0]

    async def login(self, submission: LoginSubmission) -> ServiceResult:
        """Check submitted credentials. On success the data is the signed-in user."""
        validation = submission.validate_fields()
        if isinstance(validation, Invalid):
            return validation

        credentials = validation.fields
        user = await self.authenticate(credentials.email, credentials.password)
        if user is None:
            logger.warning("Failed login for %s", credentials.email)
            return Invalid(
                errors={"email": "Invalid email or password", "password": None},
                detail="Invalid email or password",
            )

        logger.info("User %s signed in", user.email)
        return Ok(user, message="Signed in")

    async def get_user(self, user_id: int) -> Optional[User]:
        result = await self.get(user_id)
        if isinstance(result, NotFound):
            return None
        return result.data

    @staticmethod
    def to_read(user: User) -> UserRead:
        return UserRead(id=user.id, email=user.email, is_admin=settings.is_admin_email(user.email))

    @staticmethod
    def admin_principal(user: User) -> Optional[AdminPrincipal]:
        if not settings.is_admin_email(user.email):
            return None
        return AdminPrincipal(user_id=user.id, email=user.email)
