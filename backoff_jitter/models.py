from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional

# f(n) -> integer uniformly drawn from [0, n). Never called with n <= 0.
RandomSource = Callable[[int], int]


@dataclass(frozen=True)
class BackoffConfig:
    base: int
    cap: int
    random: Optional[RandomSource] = None

    def problems(self, require_random: bool = True) -> List[str]:
        """Return every violated precondition, or an empty list if the config is usable."""
        found: List[str] = []
        if self.base <= 0:
            found.append("base must be > 0")
        if self.cap <= 0:
            found.append("cap must be > 0")
        if require_random and self.random is None:
            found.append("random source is required")
        return found
