from __future__ import annotations

from typing import Dict, List, Optional, Type

from .base import BackoffStrategy
from .models import BackoffConfig, RandomSource
from .strategies import DecorrelatedJitter, EqualJitter, ExponentialBackoff, FullJitter


class StrategyFactory:
    """Factory for creating backoff strategies by name.

    Every call to create() returns a new instance. Strategies are never
    cached because DecorrelatedJitter keeps per-sequence state.
    """

    _DEFAULT_KINDS: Dict[str, Type[BackoffStrategy]] = {
        "full": FullJitter,
        "equal": EqualJitter,
        "exponential": ExponentialBackoff,
        "decorrelated": DecorrelatedJitter,
    }

    def __init__(self, kinds: Optional[Dict[str, Type[BackoffStrategy]]] = None) -> None:
        self._kinds: Dict[str, Type[BackoffStrategy]] = dict(self._DEFAULT_KINDS)
        if kinds:
            self._kinds.update(kinds)

    def kinds(self) -> List[str]:
        return sorted(self._kinds)

    def create(self, kind: str, config: BackoffConfig) -> BackoffStrategy:
        try:
            strategy_cls = self._kinds[kind.lower()]
        except KeyError:
            raise ValueError(f"Unknown backoff kind: {kind}") from None
        return strategy_cls(config)


def new_strategy(kind: str, base: int, cap: int, random: Optional[RandomSource] = None) -> BackoffStrategy:
    """Build a single strategy without holding on to a factory."""
    return StrategyFactory().create(kind, BackoffConfig(base=base, cap=cap, random=random))
