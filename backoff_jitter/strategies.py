from __future__ import annotations

import logging

from .backoff import exp_cap
from .base import BackoffStrategy
from .models import BackoffConfig

logger = logging.getLogger(__name__)


class FullJitter(BackoffStrategy):
    """Full jitter: a uniform draw from [0, min(cap, base * 2^attempt))."""

    name = "full jitter"

    def next(self, attempt: int) -> int:
        ceiling = exp_cap(self.base, self.cap, attempt)
        if ceiling <= 0:
            return 0
        return self._config.random(ceiling)


class EqualJitter(BackoffStrategy):
    """Equal jitter: keep half of the exponential backoff, randomize the other half.

    The result lies in [backoff // 2, backoff]."""

    name = "equal jitter"

    def next(self, attempt: int) -> int:
        backoff = exp_cap(self.base, self.cap, attempt)
        if backoff <= 0:
            return 0

        half = backoff // 2
        span = backoff - half
        if span <= 0:
            return half
        return half + self._config.random(span)


class ExponentialBackoff(BackoffStrategy):
    """Plain capped exponential backoff. Deterministic; the random source is ignored."""

    name = "exponential"
    requires_random = False

    def next(self, attempt: int) -> int:
        return exp_cap(self.base, self.cap, attempt)


class DecorrelatedJitter(BackoffStrategy):
    """Decorrelated jitter: min(cap, uniform[base, previous * 3)).

    Each delay is derived from the one before it, so an instance belongs to
    a single retry sequence and must not be shared between threads. Passing
    an attempt below 1, or calling reset(), starts the sequence over."""

    name = "decorrelated jitter"

    def __init__(self, config: BackoffConfig) -> None:
        super().__init__(config)
        self._sleep = config.base

    @property
    def last_delay(self) -> int:
        return self._sleep

    def reset(self) -> None:
        """Forget the previous delay so the next call behaves like a fresh instance."""
        self._sleep = self.base
        logger.debug("decorrelated jitter reset to base=%d", self.base)

    def next(self, attempt: int) -> int:
        # attempt only matters as a reset signal
        if attempt < 1:
            self.reset()

        if self._sleep <= 0:
            logger.warning("decorrelated jitter state %d is not positive, resetting to base", self._sleep)
            self._sleep = self.base

        lower = self.base
        upper = min(max(self._sleep * 3, lower), self.cap)
        if upper <= lower:
            # no room to jitter
            self._sleep = lower
            return self._sleep

        candidate = lower + self._config.random(upper - lower)
        if candidate <= 0:
            candidate = lower
        elif candidate > self.cap:
            candidate = self.cap

        self._sleep = candidate
        return self._sleep
