"""User model."""

from sqlmodel import Field
from src.core.database import BaseModel


class User(BaseModel, table=True):
    """A user who can sign in. Emails are stored lower-cased."""

    __tablename__ = "accounts_users"  # type: ignore
    email: str = Field(index=True, unique=True)
    password_hash: str = Field()
