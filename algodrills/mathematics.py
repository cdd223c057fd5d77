"""Small number exercises: exponentiation, bit counting and the birthday paradox."""

from __future__ import annotations

_DAYS_IN_YEAR = 365


def exponentiate(base: int, exponent: int) -> int:
    """Compute ``base ** exponent`` in logarithmic time by squaring."""
    if exponent < 0:
        raise ValueError(f"exponent must be non-negative, got {exponent}")
    if exponent == 0:
        return 1
    result = exponentiate(base, exponent // 2)
    result *= result
    if exponent & 1:
        result *= base
    return result


def count_set_bits(value: int) -> int:
    """Count the one bits in ``value`` taken as a 32-bit unsigned integer."""
    return bin(value & 0xFFFFFFFF).count("1")


def birthday_paradox(probability: float) -> int:
    """Return how many people are needed for a shared birthday with at least ``probability``."""
    if not 0.0 <= probability <= 1.0:
        raise ValueError(f"probability must lie in [0, 1], got {probability}")
    if probability == 1.0:
        return _DAYS_IN_YEAR
    no_shared = 1.0
    remaining = float(_DAYS_IN_YEAR)
    people = 0
    while no_shared > 1.0 - probability:
        no_shared *= remaining / _DAYS_IN_YEAR
        people += 1
        remaining -= 1
    return people