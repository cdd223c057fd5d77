"""Classic recursion exercises: spelling digits, Hanoi, powers, tilings and more."""

from __future__ import annotations

import math
from functools import lru_cache
from itertools import product

_SPELLING = (
    "zero", "one", "two", "three", "four",
    "five", "six", "seven", "eight", "nine",
)

_KEYPAD = {
    "0": "",
    "1": "",
    "2": "abc",
    "3": "def",
    "4": "ghi",
    "5": "jkl",
    "6": "mno",
    "7": "pqrs",
    "8": "tuv",
    "9": "wxyz",
}


def _require_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def spell_number(number: int) -> str:
    """Spell each decimal digit of ``number`` as a word; zero gives an empty string."""
    _require_non_negative("number", number)
    if number == 0:
        return ""
    return " ".join(_SPELLING[int(digit)] for digit in str(number))


def tower_of_hanoi(
    disks: int, source: str, target: str, auxiliary: str
) -> list[tuple[str, str]]:
    """Return the moves, as ``(from_peg, to_peg)`` pairs, that solve the puzzle."""
    if disks < 1:
        raise ValueError(f"at least one disk is required, got {disks}")
    moves: list[tuple[str, str]] = []

    def solve(count: int, frm: str, to: str, via: str) -> None:
        if count == 1:
            moves.append((frm, to))
            return
        solve(count - 1, frm, via, to)
        moves.append((frm, to))
        solve(count - 1, via, to, frm)

    solve(disks, source, target, auxiliary)
    return moves


def factorial(num: int) -> int:
    """Return ``num!`` for a non-negative integer."""
    _require_non_negative("num", num)
    return math.prod(range(1, num + 1))


def power(base: int, exponent: int) -> int:
    """Compute ``base ** exponent`` by repeated multiplication."""
    _require_non_negative("exponent", exponent)
    result = 1
    for _ in range(exponent):
        result *= base
    return result


def fast_power(base: int, exponent: int) -> int:
    """Compute ``base ** exponent`` by repeated squaring."""
    _require_non_negative("exponent", exponent)
    if exponent == 0:
        return 1
    half = fast_power(base, exponent // 2)
    square = half * half
    return base * square if exponent & 1 else square


def fibonacci(num: int) -> int:
    """Return the ``num``-th Fibonacci number, with F(0) = 0 and F(1) = 1."""
    _require_non_negative("num", num)
    current, following = 0, 1
    for _ in range(num):
        current, following = following, current + following
    return current


def fibonacci_series(count: int) -> list[int]:
    """Return F(1) through F(count)."""
    series: list[int] = []
    current, following = 1, 1
    for _ in range(count):
        series.append(current)
        current, following = following, current + following
    return series


def subsequences(word: str) -> list[str]:
    """Return every subsequence of ``word``, those keeping a character listed first."""
    if not word:
        return [""]
    rest = subsequences(word[1:])
    return [word[0] + tail for tail in rest] + rest


def multiply(a: int, b: int) -> int:
    """Multiply two integers by repeated addition."""
    total = sum(a for _ in range(abs(b)))
    return -total if b < 0 else total


def keypad_combinations(digits: str) -> list[str]:
    """Return every letter sequence a phone keypad can produce for ``digits``.

    The digits 0 and 1 carry no letters and are skipped.
    """
    try:
        groups = [_KEYPAD[digit] for digit in digits]
    except KeyError as exc:
        raise ValueError(f"not a keypad digit: {exc.args[0]!r}") from None
    letters = [group for group in groups if group]
    return ["".join(combo) for combo in product(*letters)]


def string_to_int(text: str) -> int:
    """Convert a string of decimal digits to its integer value."""
    if not text:
        raise ValueError("cannot convert an empty string")
    value = 0
    for char in text:
        if char not in "0123456789":
            raise ValueError(f"not a decimal digit: {char!r}")
        value = value * 10 + (ord(char) - ord("0"))
    return value


def tile_combinations(n: int, m: int) -> int:
    """Count tilings with the recurrence T(m) = T(m - 1) + T(m - 4).

    T(n) is 2 and T(1) is 1; a width that can reach neither base case
    raises ``ValueError``.
    """

    @lru_cache(maxsize=None)
    def ways(width: int) -> int:
        if width == n:
            return 2
        if width == 1:
            return 1
        if width < 1 and width < n:
            raise ValueError(f"tiling recurrence for n={n}, m={m} does not terminate")
        return ways(width - 1) + ways(width - 4)

    return ways(m)


def place_tiles(n: int, m: int) -> int:
    """Count the ways to tile an ``n``-long floor with tiles of size 1 x ``m``."""
    if m < 1:
        raise ValueError(f"tile size must be positive, got {m}")
    if n <= 0:
        return 0
    counts = {1: 1}
    for length in range(2, n + 1):
        if length == m:
            counts[length] = 2
        else:
            shorter = length - m
            counts[length] = counts[length - 1] + (counts[shorter] if shorter > 0 else 0)
    return counts[n]