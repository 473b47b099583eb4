"""
Result type returned by guarded service operations.

A guarded operation either succeeds with a value or fails with one of the
named failures from ``apps.core.exceptions``. Failures are returned, not
raised, so the HTTP layer can map each kind to a response code.
"""
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

from apps.core.exceptions import StorefrontException

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    value: Optional[T] = None
    error: Optional[StorefrontException] = None

    @classmethod
    def success(cls, value: Any = None) -> "Result":
        return cls(value=value)

    @classmethod
    def failure(cls, error: StorefrontException) -> "Result":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the value, raising the failure if there is one."""
        if self.error is not None:
            raise self.error
        return self.value
