"""Outcome types returned by services and dispatched by routers."""

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, Optional, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    data: T
    message: Optional[str] = None


@dataclass(frozen=True)
class NotFound:
    detail: str


@dataclass(frozen=True)
class Invalid:
    """Field-keyed validation messages; fields without an error map to None."""

    errors: Dict[str, Optional[str]] = field(default_factory=dict)
    detail: str = "Validation failed"


@dataclass(frozen=True)
class Redirect:
    location: str


ServiceResult = Union[Ok[Any], NotFound, Invalid, Redirect]


@dataclass(frozen=True)
class Valid(Generic[T]):
    fields: T


ValidationResult = Union[Valid[T], Invalid]
