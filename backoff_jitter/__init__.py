"""Retry delay computation package.

Provides the exponential-cap primitive, the jitter strategies built on it,
and a factory for constructing strategies by name. Nothing here sleeps or
retries; callers decide what to do with the returned delay.

Key modules:
    backoff     -- exp_cap, the min(base * 2^attempt, cap) primitive
    base        -- BackoffStrategy abstract base class
    strategies  -- FullJitter, EqualJitter, ExponentialBackoff, DecorrelatedJitter
    factory     -- StrategyFactory and new_strategy helpers
    models      -- BackoffConfig dataclass and the RandomSource contract
    errors      -- InvalidConfigError
"""
from __future__ import annotations

from .backoff import exp_cap
from .base import BackoffStrategy
from .errors import InvalidConfigError
from .factory import StrategyFactory, new_strategy
from .models import BackoffConfig, RandomSource
from .strategies import DecorrelatedJitter, EqualJitter, ExponentialBackoff, FullJitter

__all__ = [
    "BackoffConfig",
    "BackoffStrategy",
    "DecorrelatedJitter",
    "EqualJitter",
    "ExponentialBackoff",
    "FullJitter",
    "InvalidConfigError",
    "RandomSource",
    "StrategyFactory",
    "exp_cap",
    "new_strategy",
]
