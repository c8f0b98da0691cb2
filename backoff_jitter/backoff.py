from __future__ import annotations


def exp_cap(base: int, cap: int, attempt: int) -> int:
    """Return min(base * 2^attempt, cap), or 0 when any input is out of range.

    Doubles one step at a time and stops at cap as soon as the next doubling
    would reach it, so large attempts never build huge intermediates."""
    if base <= 0 or cap <= 0 or attempt < 0:
        return 0

    backoff = base
    for _ in range(attempt):
        if backoff >= cap - backoff:
            return cap
        backoff *= 2
    return min(backoff, cap)
