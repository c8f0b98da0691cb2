from __future__ import annotations

from typing import List, Sequence


class InvalidConfigError(ValueError):
    """Raised when a strategy is built from an unusable BackoffConfig.

    All violated preconditions are reported together so callers can fix
    them in one pass."""

    def __init__(self, strategy: str, problems: Sequence[str]) -> None:
        self.strategy = strategy
        self.problems: List[str] = list(problems)
        super().__init__(f"invalid {strategy} config: {'; '.join(self.problems)}")
