"""Tests for the StrategyFactory class."""

import unittest

from backoff_jitter.errors import InvalidConfigError
from backoff_jitter.factory import StrategyFactory, new_strategy
from backoff_jitter.models import BackoffConfig
from backoff_jitter.strategies import (
    DecorrelatedJitter,
    EqualJitter,
    ExponentialBackoff,
    FullJitter,
)


def _max_random(n: int) -> int:
    return n - 1


class TestStrategyFactory(unittest.TestCase):
    """Verify that the factory creates the correct strategy type."""

    def setUp(self):
        """Set up shared factory and config."""
        self.factory = StrategyFactory()
        self.config = BackoffConfig(base=100, cap=10000, random=_max_random)

    def test_creates_each_kind(self):
        """Each registered name should produce its strategy class."""
        expected = {
            "full": FullJitter,
            "equal": EqualJitter,
            "exponential": ExponentialBackoff,
            "decorrelated": DecorrelatedJitter,
        }
        for kind, strategy_cls in expected.items():
            with self.subTest(kind=kind):
                self.assertIsInstance(self.factory.create(kind, self.config), strategy_cls)

    def test_kind_is_case_insensitive(self):
        """Names are matched regardless of case."""
        self.assertIsInstance(self.factory.create("Full", self.config), FullJitter)

    def test_returns_new_instance_each_call(self):
        """Decorrelated state must not leak between retry sequences."""
        first = self.factory.create("decorrelated", self.config)
        second = self.factory.create("decorrelated", self.config)
        self.assertIsNot(first, second)
        first.next(1)
        self.assertEqual(second.last_delay, 100)

    def test_unknown_kind_raises_error(self):
        """An unrecognized kind should raise ValueError."""
        with self.assertRaises(ValueError) as ctx:
            self.factory.create("unknown", self.config)
        self.assertIn("unknown", str(ctx.exception))

    def test_kinds_lists_registered_names(self):
        """kinds() should list every built-in name."""
        self.assertEqual(self.factory.kinds(), ["decorrelated", "equal", "exponential", "full"])

    def test_custom_kind_registration(self):
        """Extra kinds passed at construction are available."""
        factory = StrategyFactory(kinds={"plain": ExponentialBackoff})
        self.assertIn("plain", factory.kinds())
        self.assertIsInstance(factory.create("plain", self.config), ExponentialBackoff)


class TestNewStrategy(unittest.TestCase):
    """Verify the new_strategy convenience helper."""

    def test_builds_from_arguments(self):
        """Arguments are packed into a BackoffConfig."""
        strategy = new_strategy("equal", 100, 10000, _max_random)
        self.assertEqual(strategy.next(3), 799)

    def test_validation_errors_propagate(self):
        """Invalid arguments surface as InvalidConfigError."""
        with self.assertRaises(InvalidConfigError):
            new_strategy("full", 0, 100)


if __name__ == "__main__":
    unittest.main()
