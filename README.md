# algodrills

Classic algorithm exercises as small, plain Python functions and classes:
recursion, arithmetic tricks, searching, sorting, backtracking and a couple
of containers. Every function returns its result rather than printing it.
The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `algodrills.recursion`

- `spell_number(number)`: spells each decimal digit as a word, separated by spaces
  (`spell_number(2048)` gives `"two zero four eight"`); zero gives `""`.
- `tower_of_hanoi(disks, source, target, auxiliary)`: returns the moves as
  `(from_peg, to_peg)` pairs.
- `factorial(num)`
- `power(base, exponent)`: the power by repeated multiplication.
- `fast_power(base, exponent)`: the power by repeated squaring.
- `fibonacci(num)`: F(num) with F(0) = 0 and F(1) = 1.
- `fibonacci_series(count)`: F(1) through F(count).
- `subsequences(word)`: every subsequence; those that keep a character are
  listed before those that drop it.
- `multiply(a, b)`: multiplication by repeated addition, negative factors included.
- `keypad_combinations(digits)`: every letter sequence a phone keypad produces
  for the digits; 0 and 1 carry no letters and are skipped.
- `string_to_int(text)`: converts a string of decimal digits.
- `tile_combinations(n, m)`: the recurrence T(m) = T(m - 1) + T(m - 4) with
  T(n) = 2 and T(1) = 1.
- `place_tiles(n, m)`: the number of ways to tile an `n`-long floor with
  1 x `m` tiles.

Negative inputs where they make no sense, and non-digit characters, raise
`ValueError`.

### `algodrills.mathematics`

- `exponentiate(base, exponent)`: fast exponentiation by squaring.
- `count_set_bits(value)`: the number of one bits in `value` taken as a
  32-bit unsigned integer.
- `birthday_paradox(probability)`: how many people are needed for a shared
  birthday with at least the given probability (365 for a probability of 1).

### `algodrills.searching`

Searches return the index found, or `None` when the key is absent.

- `search_rotated(items, key)`: search in a rotated ascending sequence.
- `binary_search(items, key)`
- `linear_search(items, key)`: scans from the end, so it finds the last occurrence.
- `is_strictly_increasing(items)`
- `can_place_cows(stalls, cows, min_sep)`, `largest_min_separation(stalls, cows)`:
  the aggressive-cows problem.

### `algodrills.sorting`

- `merge_sort(items)`, `quicksort(items)`, `bubble_sort(items)`: each returns a
  new ascending list.
- `shuffle(items, rng)`: a Fisher-Yates shuffled copy; pass a `random.Random`
  for reproducible results.
- `randomised_quicksort(items, rng)`: shuffles, then quicksorts.
- `inversion_count(items)`: the number of pairs `i < j` with `items[i] > items[j]`.
- `prefix_first_sort(words)`: lexicographic order, except that a longer word
  comes before any word that is its prefix (`batman` before `bat`).
- `merged_median(first, second)`: the lower median of the merge of two
  ascending sequences.

### `algodrills.backtracking`

- `n_queen_boards(n)`: every placement of `n` non-attacking queens, each given
  as the column of the queen in each row.
- `count_n_queens(n)`: the number of such placements.
- `permutations(word)`: every arrangement, repeated characters giving repeats.
- `rat_in_maze_paths(maze)`: every path from the top-left to the bottom-right
  cell moving only down or right, avoiding cells marked `X`; each path is a
  grid of 0s and 1s.
- `binary_strings(length)`: every bit string of the given length.
- `solve_sudoku(grid)`: returns a solved copy of a square grid whose side is a
  perfect square; zeros are empty cells. Raises `ValueError` if the grid is
  malformed or has no solution.

### `algodrills.containers`

- `DynamicArray`: a growable array that starts with room for one item and
  doubles its capacity when full. It has `append`, `pop`, `capacity`, `first`,
  `last`, indexing, `len()` and iteration.
- `KthNearest(k)`: `add(x, y)` records a point; `kth_distance()` returns the
  squared distance from the origin of the k-th nearest point so far.
- `process_queries(k, queries)`: runs queries `(1, x, y)` (add a point) and
  `(2,)` (ask for the k-th distance) and returns the answers.

## Example

```python
from algodrills.sorting import inversion_count, prefix_first_sort
from algodrills.backtracking import count_n_queens

inversion_count([1, 5, 2, 6, 3, 0])                  # 8
prefix_first_sort(["bat", "apple", "batman"])        # ['apple', 'batman', 'bat']
count_n_queens(8)                                    # 92
```

## What it does not do

There is no command-line tool and nothing reads from standard input or
prints results; you import the functions and pass them data.