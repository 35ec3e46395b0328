"""Post model."""

from sqlmodel import Field
from src.core.database import BaseModel


class Post(BaseModel, table=True):
    """A blog post, addressed by its unique slug."""

    __tablename__ = "blog_posts"  # type: ignore
    slug: str = Field(index=True, unique=True)
    title: str = Field()
    markdown: str = Field()
