from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from .errors import InvalidConfigError
from .models import BackoffConfig

logger = logging.getLogger(__name__)


class BackoffStrategy(ABC):
    """Abstract base class for retry delay strategies.

    A strategy turns an attempt number into a non-negative integer delay in
    whatever unit the caller chose for base and cap. Configuration is
    validated once here; after construction next() never fails."""

    name = "backoff"
    requires_random = True

    def __init__(self, config: BackoffConfig) -> None:
        problems = config.problems(require_random=self.requires_random)
        if problems:
            raise InvalidConfigError(self.name, problems)
        self._config = config
        logger.debug("built %s strategy base=%d cap=%d", self.name, config.base, config.cap)

    @property
    def base(self) -> int:
        return self._config.base

    @property
    def cap(self) -> int:
        return self._config.cap

    @abstractmethod
    def next(self, attempt: int) -> int:
        """Return the delay to wait before the given attempt."""
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(base={self.base}, cap={self.cap})"
