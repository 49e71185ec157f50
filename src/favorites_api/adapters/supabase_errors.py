"""Translation of Supabase/PostgREST errors into domain errors."""

from collections.abc import Callable
from typing import TypeVar

from postgrest.exceptions import APIError

from favorites_api.domain.errors import DuplicateRecordError

_UNIQUE_VIOLATION = "23505"

T = TypeVar("T")


def is_unique_violation(exc: APIError) -> bool:
    """Return True when PostgREST reports a Postgres unique violation."""
    return str(getattr(exc, "code", "")) == _UNIQUE_VIOLATION


def execute_write(operation: Callable[[], T]) -> T:
    """Run a write, raising DuplicateRecordError on unique violations."""
    try:
        return operation()
    except APIError as exc:
        if is_unique_violation(exc):
            raise DuplicateRecordError(exc.message or None) from exc
        raise
