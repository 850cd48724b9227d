from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from .errors import EazyRestError

T = TypeVar("T")


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """Result of one call delivered to a callback-mode completion.

    Holds either a decoded value or an error, never both.
    """

    value: Optional[T] = None
    error: Optional[EazyRestError] = None

    def __post_init__(self) -> None:
        if self.value is not None and self.error is not None:
            raise ValueError("An outcome holds either a value or an error")

    @classmethod
    def success(cls, value: T) -> "Outcome[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: EazyRestError) -> "Outcome[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        """Return the decoded value, or raise the error."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]
