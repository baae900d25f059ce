"""Error-as-value result type for calls that cross an external boundary.

Search queries, gateway calls and the concurrent branches of a pipeline run
all return an Outcome instead of raising, so the caller decides which default
applies on the failure branch:

    outcome = await executor.search(query)
    results = outcome.unwrap_or([])
"""

from dataclasses import dataclass
from typing import Any, Awaitable, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Either a value or an error message, never both."""

    value: Optional[T] = None
    error: Optional[str] = None

    def __post_init__(self) -> None:
        if self.error is not None and self.value is not None:
            raise ValueError("Outcome cannot carry both a value and an error")

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "Outcome[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: Any) -> "Outcome[T]":
        message = str(error) or type(error).__name__
        return cls(error=message)

    def unwrap_or(self, default: T) -> T:
        """Return the value, or ``default`` if this outcome is a failure."""
        if self.error is not None:
            return default
        return self.value  # type: ignore[return-value]


async def settle(awaitable: Awaitable[T]) -> Outcome[T]:
    """Await ``awaitable`` and capture any exception as a failed Outcome."""
    try:
        return Outcome.success(await awaitable)
    except Exception as e:
        return Outcome.failure(e)
