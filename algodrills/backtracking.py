"""Backtracking exercises: N queens, permutations, maze paths, bit strings and sudoku."""

from __future__ import annotations

import math
from collections.abc import Sequence
from itertools import product

Board = tuple[int, ...]
Path = tuple[tuple[int, ...], ...]


def _require_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def n_queen_boards(n: int) -> list[Board]:
    """Return every placement of ``n`` non-attacking queens on an ``n`` x ``n`` board.

    Each placement gives, row by row, the column of that row's queen.
    Placements come in the order found by trying columns left to right.
    """
    _require_non_negative("n", n)
    boards: list[Board] = []
    columns: list[int] = []
    used_cols: set[int] = set()
    used_diffs: set[int] = set()
    used_sums: set[int] = set()

    def place(row: int) -> None:
        if row == n:
            boards.append(tuple(columns))
            return
        for col in range(n):
            if col in used_cols or row - col in used_diffs or row + col in used_sums:
                continue
            columns.append(col)
            used_cols.add(col)
            used_diffs.add(row - col)
            used_sums.add(row + col)
            place(row + 1)
            columns.pop()
            used_cols.discard(col)
            used_diffs.discard(row - col)
            used_sums.discard(row + col)

    place(0)
    return boards


def count_n_queens(n: int) -> int:
    """Count the placements of ``n`` non-attacking queens, tracking attacks in bit masks."""
    _require_non_negative("n", n)
    full = (1 << n) - 1

    def place(cols: int, left: int, right: int) -> int:
        if cols == full:
            return 1
        total = 0
        free = full & ~(cols | left | right)
        while free:
            bit = free & -free
            free ^= bit
            total += place(cols | bit, ((left | bit) << 1) & full, (right | bit) >> 1)
        return total

    return place(0, 0, 0)


def permutations(word: str) -> list[str]:
    """Return every arrangement of the characters of ``word``, in swap order.

    Repeated characters give repeated arrangements.
    """
    chars = list(word)
    found: list[str] = []

    def permute(start: int) -> None:
        if start == len(chars):
            found.append("".join(chars))
            return
        for swap_with in range(start, len(chars)):
            chars[start], chars[swap_with] = chars[swap_with], chars[start]
            permute(start + 1)
            chars[start], chars[swap_with] = chars[swap_with], chars[start]

    permute(0)
    return found


def rat_in_maze_paths(maze: Sequence[str]) -> list[Path]:
    """Return every path from the top-left to the bottom-right cell of ``maze``.

    The rat moves only down or right and cannot enter cells marked ``X``.
    Each path is a grid of 0s and 1s with 1 on the cells it visits; paths
    that go down first are listed first.
    """
    if not maze or not maze[0]:
        raise ValueError("the maze must have at least one cell")
    width = len(maze[0])
    if any(len(row) != width for row in maze):
        raise ValueError("every row of the maze must have the same width")
    last_row, last_col = len(maze) - 1, width - 1
    marks = [[0] * width for _ in maze]
    paths: list[Path] = []

    def walk(row: int, col: int) -> None:
        if row == last_row and col == last_col:
            marks[row][col] = 1
            paths.append(tuple(tuple(line) for line in marks))
            return
        if row > last_row or col > last_col or maze[row][col] == "X":
            return
        marks[row][col] = 1
        walk(row + 1, col)
        walk(row, col + 1)
        marks[row][col] = 0

    walk(0, 0)
    return paths


def binary_strings(length: int) -> list[str]:
    """Return every string of ``length`` bits, the first position changing fastest."""
    _require_non_negative("length", length)
    return ["".join(reversed(bits)) for bits in product("01", repeat=length)]


def _can_place(board: list[list[int]], row: int, col: int, number: int, root: int) -> bool:
    if number in board[row] or any(line[col] == number for line in board):
        return False
    top, left = (row // root) * root, (col // root) * root
    return all(
        number not in line[left:left + root] for line in board[top:top + root]
    )


def solve_sudoku(grid: Sequence[Sequence[int]]) -> list[list[int]]:
    """Fill the zeros of a square sudoku grid and return the solved copy.

    The grid's side must be a perfect square. Raises ``ValueError`` when the
    grid is malformed or cannot be completed.
    """
    size = len(grid)
    root = math.isqrt(size)
    if size == 0 or root * root != size:
        raise ValueError(f"grid side must be a positive perfect square, got {size}")
    if any(len(line) != size for line in grid):
        raise ValueError("the sudoku grid must be square")
    board = [list(line) for line in grid]
    if any(not 0 <= value <= size for line in board for value in line):
        raise ValueError(f"cell values must lie between 0 and {size}")
    empty = [(r, c) for r, line in enumerate(board) for c, value in enumerate(line) if value == 0]

    def fill(position: int) -> bool:
        if position == len(empty):
            return True
        row, col = empty[position]
        for number in range(1, size + 1):
            if _can_place(board, row, col, number, root):
                board[row][col] = number
                if fill(position + 1):
                    return True
        board[row][col] = 0
        return False

    if not fill(0):
        raise ValueError("the sudoku has no solution")
    return board