"""User repository."""

from src.core.bases.base_repository import BaseRepository
from src.apps.accounts.models.user import User


class UserRepository(BaseRepository[User]):
    """User repository class."""

    model = User
