"""Explicit success/failure results for collaborator calls."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from wedexpense.logging.logger import Log

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T


@dataclass(frozen=True)
class Failure:
    operation: str
    error: Exception

    @property
    def message(self) -> str:
        return f"{self.operation} failed: {self.error}"


Outcome = Success[T] | Failure


def attempt(operation: str, call: Callable[[], T]) -> Outcome[T]:
    """Run ``call`` and wrap its result or exception as an outcome."""
    try:
        return Success(call())
    except Exception as exc:  # noqa: BLE001
        failure = Failure(operation=operation, error=exc)
        Log.warning(failure.message)
        return failure
