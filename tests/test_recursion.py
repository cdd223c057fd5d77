import math
from itertools import combinations

import pytest
from hypothesis import given, strategies as st

from algodrills.recursion import (
    factorial,
    fast_power,
    fibonacci,
    fibonacci_series,
    keypad_combinations,
    multiply,
    place_tiles,
    power,
    spell_number,
    string_to_int,
    subsequences,
    tile_combinations,
    tower_of_hanoi,
)

WORDS = ["zero", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine"]


def test_spell_number_example():
    assert spell_number(2048) == "two zero four eight"


def test_spell_number_zero_is_empty():
    assert spell_number(0) == ""


@given(st.integers(min_value=1, max_value=10**12))
def test_spell_number_round_trip(number):
    digits = "".join(str(WORDS.index(word)) for word in spell_number(number).split())
    assert digits == str(number)


def test_spell_number_negative():
    with pytest.raises(ValueError):
        spell_number(-5)


@pytest.mark.parametrize("disks", [1, 2, 3, 5, 7])
def test_hanoi_moves_are_legal_and_complete(disks):
    moves = tower_of_hanoi(disks, "A", "C", "B")
    assert len(moves) == 2**disks - 1
    pegs = {"A": list(range(disks, 0, -1)), "B": [], "C": []}
    for frm, to in moves:
        disk = pegs[frm].pop()
        assert not pegs[to] or pegs[to][-1] > disk
        pegs[to].append(disk)
    assert pegs["C"] == list(range(disks, 0, -1))
    assert pegs["A"] == [] and pegs["B"] == []


def test_hanoi_single_disk():
    assert tower_of_hanoi(1, "A", "C", "B") == [("A", "C")]


def test_hanoi_needs_a_disk():
    with pytest.raises(ValueError):
        tower_of_hanoi(0, "A", "C", "B")


@given(st.integers(min_value=0, max_value=60))
def test_factorial_matches_math(num):
    assert factorial(num) == math.factorial(num)


def test_factorial_negative():
    with pytest.raises(ValueError):
        factorial(-1)


@given(st.integers(min_value=-20, max_value=20), st.integers(min_value=0, max_value=40))
def test_powers_agree_with_builtin(base, exponent):
    assert power(base, exponent) == base**exponent
    assert fast_power(base, exponent) == base**exponent


@pytest.mark.parametrize("func", [power, fast_power])
def test_power_negative_exponent(func):
    with pytest.raises(ValueError):
        func(2, -1)


def test_fibonacci_base_cases():
    assert fibonacci(0) == 0
    assert fibonacci(1) == 1


@given(st.integers(min_value=2, max_value=300))
def test_fibonacci_recurrence(num):
    assert fibonacci(num) == fibonacci(num - 1) + fibonacci(num - 2)


@given(st.integers(min_value=0, max_value=100))
def test_fibonacci_series_matches_terms(count):
    assert fibonacci_series(count) == [fibonacci(i) for i in range(1, count + 1)]


def test_fibonacci_negative():
    with pytest.raises(ValueError):
        fibonacci(-3)


def test_subsequences_order_keeps_first_character_first():
    result = subsequences("ab")
    assert result[0] == "ab"
    assert result[-1] == ""
    assert result.index("a") < result.index("b")


@given(st.text(alphabet="abcdef", max_size=8))
def test_subsequences_are_all_index_selections(word):
    result = subsequences(word)
    assert len(result) == 2 ** len(word)
    expected = sorted(
        "".join(word[i] for i in chosen)
        for size in range(len(word) + 1)
        for chosen in combinations(range(len(word)), size)
    )
    assert sorted(result) == expected


@given(st.integers(min_value=-500, max_value=500), st.integers(min_value=-500, max_value=500))
def test_multiply_matches_operator(a, b):
    assert multiply(a, b) == a * b


def test_keypad_two_digits():
    assert keypad_combinations("23") == ["ad", "ae", "af", "bd", "be", "bf", "cd", "ce", "cf"]


def test_keypad_skips_zero_and_one():
    assert keypad_combinations("1203") == keypad_combinations("23")


@given(st.text(alphabet="0123456789", max_size=6))
def test_keypad_count_and_lengths(digits):
    sizes = {"7": 4, "9": 4, "0": 0, "1": 0}
    expected = math.prod(sizes.get(d, 3) for d in digits if sizes.get(d, 3))
    result = keypad_combinations(digits)
    assert len(result) == expected
    assert len(set(result)) == len(result)
    letters_len = sum(1 for d in digits if d not in "01")
    assert all(len(combo) == letters_len for combo in result)


def test_keypad_rejects_non_digit():
    with pytest.raises(ValueError):
        keypad_combinations("2a")


@given(st.text(alphabet="0123456789", min_size=1, max_size=30))
def test_string_to_int_matches_int(text):
    assert string_to_int(text) == int(text)


@pytest.mark.parametrize("text", ["", "12x", "-5", " 7"])
def test_string_to_int_rejects_bad_input(text):
    with pytest.raises(ValueError):
        string_to_int(text)


def test_tile_combinations_base_cases():
    assert tile_combinations(4, 4) == 2
    assert tile_combinations(4, 1) == 1


def test_tile_combinations_recurrence():
    assert tile_combinations(4, 5) == tile_combinations(4, 4) + tile_combinations(4, 1)


def test_tile_combinations_diverging_input():
    with pytest.raises(ValueError):
        tile_combinations(100, 5)


@given(st.integers(min_value=2, max_value=20))
def test_place_tiles_base_cases(m):
    assert place_tiles(1, m) == 1
    assert place_tiles(m, m) == 2
    assert place_tiles(0, m) == 0


@given(st.integers(min_value=2, max_value=10), st.integers(min_value=1, max_value=80))
def test_place_tiles_recurrence(m, extra):
    n = m + extra
    shorter = place_tiles(n - m, m) if n - m > 0 else 0
    assert place_tiles(n, m) == place_tiles(n - 1, m) + shorter


def test_place_tiles_rejects_bad_tile():
    with pytest.raises(ValueError):
        place_tiles(5, 0)