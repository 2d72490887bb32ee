"""
Typed outcomes returned by stores and the token service.

Expected failures (missing record, bad input, bad credentials, database
errors) travel as values instead of exceptions. The HTTP layer turns a
``Failure`` into a status code in exactly one place, see
``authors_api.core.errors.error_response``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    VALIDATION = "validation"
    UNAUTHORIZED = "unauthorized"
    STORE_FAILURE = "store_failure"


def describe_validation_errors(errors: list[dict]) -> str:
    parts = []
    for error in errors:
        location = ".".join(str(part) for part in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts)


@dataclass(frozen=True)
class Failure:
    kind: ErrorKind
    message: str
    details: str | None = None


@dataclass(frozen=True)
class Result(Generic[T]):
    value: T | None = None
    error: Failure | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T | None = None) -> Result[T]:
        return cls(value=value)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str, details: str | None = None) -> Result[T]:
        return cls(error=Failure(kind=kind, message=message, details=details))

    @classmethod
    def not_found(cls, message: str) -> Result[T]:
        return cls.failure(ErrorKind.NOT_FOUND, message)

    @classmethod
    def invalid(cls, message: str, details: str | None = None) -> Result[T]:
        return cls.failure(ErrorKind.VALIDATION, message, details)

    @classmethod
    def unauthorized(cls, message: str) -> Result[T]:
        return cls.failure(ErrorKind.UNAUTHORIZED, message)

    @classmethod
    def store_failure(cls, message: str, details: str | None = None) -> Result[T]:
        return cls.failure(ErrorKind.STORE_FAILURE, message, details)
