"""
Outcome contract for record store operations.

Store operations never raise on expected failures. They return a
`StoreResult` holding either a value or a `StoreError`, and the caller decides
how to present it.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ErrorKind(str, enum.Enum):
    VALIDATION = "ValidationError"
    DUPLICATE_EMAIL = "DuplicateEmailError"
    NOT_FOUND = "NotFoundError"


@dataclass(frozen=True)
class StoreError:
    kind: ErrorKind
    message: str

    def __str__(self) -> str:
        return self.message


class StoreOperationError(Exception):
    """Raised by `StoreResult.unwrap` when the operation failed."""

    def __init__(self, error: StoreError):
        super().__init__(error.message)
        self.error = error

    @property
    def kind(self) -> ErrorKind:
        return self.error.kind


@dataclass(frozen=True)
class StoreResult(Generic[T]):
    value: Optional[T] = None
    error: Optional[StoreError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "StoreResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> "StoreResult[T]":
        return cls(error=StoreError(kind=kind, message=message))

    def unwrap(self) -> T:
        if self.error is not None:
            raise StoreOperationError(self.error)
        return self.value  # type: ignore[return-value]


__all__ = [
    "ErrorKind",
    "StoreError",
    "StoreOperationError",
    "StoreResult",
]
