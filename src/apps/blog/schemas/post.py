"""Post schemas."""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel

from src.core.results import Invalid, Valid, ValidationResult

NEW_POST_SLUG = "new"
RESERVED_SLUGS = frozenset({NEW_POST_SLUG, "admin"})


class PostIntent(str, Enum):
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


class PostFields(BaseModel):
    """The editable content of a post."""
    title: str
    slug: str
    markdown: str


class PostRead(PostFields):
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class PostSummary(BaseModel):
    slug: str
    title: str


class PostView(BaseModel):
    """A post ready for display: its title and rendered HTML."""
    title: str
    html: str


class PostEditor(BaseModel):
    """Editor payload. ``post`` is None for the blank creation template."""
    post: Optional[PostRead] = None
    is_new: bool
    actions: List[PostIntent]


class PostSubmission(BaseModel):
    """A submitted editor form, parsed once at the request boundary.

    Fields are kept as received; :meth:`validate_fields` decides whether they form
    a post.
    """

    intent: Optional[str] = None
    title: Optional[str] = None
    slug: Optional[str] = None
    markdown: Optional[str] = None

    @property
    def is_delete(self) -> bool:
        return self.intent == PostIntent.DELETE.value

    def validate_fields(self) -> ValidationResult[PostFields]:
        errors = {
            "title": None if self.title else "Title is required",
            "slug": None if self.slug else "Slug is required",
            "markdown": None if self.markdown else "Markdown is required",
        }

        if self.slug in RESERVED_SLUGS:
            errors["slug"] = f'Slug "{self.slug}" is reserved'

        if self.intent is not None and self.intent not in {i.value for i in PostIntent}:
            errors["intent"] = "Intent must be one of create, update, delete"

        if any(errors.values()):
            return Invalid(errors=errors)

        return Valid(PostFields(title=self.title, slug=self.slug, markdown=self.markdown))
