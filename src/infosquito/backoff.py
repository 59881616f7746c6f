"""Capped exponential backoff used between broker connection attempts."""

from collections.abc import Iterator

from pydantic import BaseModel, Field, model_validator

INITIAL_DELAY_SECONDS = 5.0
MAX_DELAY_SECONDS = 320.0


class BackoffPolicy(BaseModel, frozen=True):
    """
    Produces an increasing, capped sequence of delays in seconds.

    The nth delay is ``min(max_delay, initial_delay * multiplier ** n)``.
    """

    initial_delay: float = Field(default=INITIAL_DELAY_SECONDS, gt=0)
    max_delay: float = Field(default=MAX_DELAY_SECONDS, gt=0)
    multiplier: float = Field(default=2.0, ge=1)

    @model_validator(mode="after")
    def _check_bounds(self) -> "BackoffPolicy":
        if self.max_delay < self.initial_delay:
            raise ValueError("max_delay must not be smaller than initial_delay")
        return self

    def next_delay(self, current: float) -> float:
        """Returns the delay that follows ``current``."""
        return min(self.max_delay, current * self.multiplier)

    def delays(self) -> Iterator[float]:
        """Yields the delay sequence forever, starting at ``initial_delay``."""
        delay = self.initial_delay
        while True:
            yield delay
            delay = self.next_delay(delay)

    def delay_for(self, attempt: int) -> float:
        """Returns the delay for a zero-based attempt number."""
        if attempt < 0:
            raise ValueError("attempt must be non-negative")
        try:
            return min(self.max_delay, self.initial_delay * self.multiplier**attempt)
        except OverflowError:
            return self.max_delay
