"""
Tagged result values returned by kernel services.

Services never raise for expected outcomes; they return ``Ok`` or ``Err`` and
the API layer maps the error kind onto an HTTP status.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, List, TypeVar, Union

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Failure taxonomy shared by all write and read paths."""
    NOT_FOUND = "not_found"
    FORBIDDEN = "forbidden"
    UNAUTHENTICATED = "unauthenticated"
    VALIDATION_FAILED = "validation_failed"
    INTERNAL = "internal"


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying a value."""

    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    """Failed outcome carrying an error kind and a user-facing message."""

    kind: ErrorKind
    message: str

    @property
    def ok(self) -> bool:
        return False


Result = Union[Ok[T], Err]


def not_found(resource: str) -> Err:
    return Err(ErrorKind.NOT_FOUND, f"{resource.capitalize()} not found")


def forbidden(action: str, resource: str) -> Err:
    return Err(ErrorKind.FORBIDDEN, f"Unauthorized to {action} this {resource}")


def unauthenticated() -> Err:
    return Err(ErrorKind.UNAUTHENTICATED, "Not authenticated")


def validation_failed(message: str) -> Err:
    return Err(ErrorKind.VALIDATION_FAILED, message)


def internal(message: str) -> Err:
    return Err(ErrorKind.INTERNAL, message)


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of a listing plus the pre-pagination match count."""

    items: List[T] = field(default_factory=list)
    total: int = 0
    page: int = 1
    page_size: int = 15

    @property
    def last_page(self) -> int:
        return max(1, math.ceil(self.total / self.page_size))

    @property
    def has_more(self) -> bool:
        return (self.page * self.page_size) < self.total
