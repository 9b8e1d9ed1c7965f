"""Backtracking searches: queens, partitions, maze paths and word puzzles."""

import sys
from collections.abc import Iterable, Sequence
from functools import lru_cache

_MOVES = (("U", -1, 0), ("D", 1, 0), ("L", 0, -1), ("R", 0, 1))


def solve_n_queens(n: int) -> list[list[str]]:
    """Return every placement of ``n`` non-attacking queens on an n x n board.

    Boards are lists of rows, with ``Q`` for a queen and ``.`` for an empty
    square. Queens are placed column by column, trying rows top to bottom.
    """
    if n < 0:
        raise ValueError("board size must not be negative")

    board = [["."] * n for _ in range(n)]
    used_rows: set[int] = set()
    used_diagonals: set[int] = set()
    used_anti_diagonals: set[int] = set()
    solutions: list[list[str]] = []

    def place(col: int) -> None:
        if col == n:
            solutions.append(["".join(row) for row in board])
            return
        for row in range(n):
            if row in used_rows or row - col in used_diagonals or row + col in used_anti_diagonals:
                continue
            board[row][col] = "Q"
            used_rows.add(row)
            used_diagonals.add(row - col)
            used_anti_diagonals.add(row + col)
            place(col + 1)
            board[row][col] = "."
            used_rows.discard(row)
            used_diagonals.discard(row - col)
            used_anti_diagonals.discard(row + col)

    place(0)
    return solutions


def is_palindrome(s: str) -> bool:
    """Return True if ``s`` reads the same backwards."""
    return s == s[::-1]


def palindrome_partitions(s: str) -> list[list[str]]:
    """Return every way to split ``s`` into palindromic substrings."""
    partitions: list[list[str]] = []
    current: list[str] = []

    def split(start: int) -> None:
        if start == len(s):
            partitions.append(list(current))
            return
        for end in range(start + 1, len(s) + 1):
            piece = s[start:end]
            if is_palindrome(piece):
                current.append(piece)
                split(end)
                current.pop()

    split(0)
    return partitions


def find_paths(maze: Sequence[Sequence[int]]) -> list[str]:
    """Return every path through a square maze from top-left to bottom-right.

    Cells holding 0 are walls. Paths are strings of ``U``, ``D``, ``L`` and
    ``R`` moves, listed in the order the search finds them, and never visit
    a cell twice.
    """
    size = len(maze)
    paths: list[str] = []
    steps: list[str] = []
    visited: set[tuple[int, int]] = set()

    def walk(row: int, col: int) -> None:
        if not (0 <= row < size and 0 <= col < size):
            return
        if (row, col) in visited or maze[row][col] == 0:
            return
        if row == size - 1 and col == size - 1:
            paths.append("".join(steps))
            return
        visited.add((row, col))
        for move, d_row, d_col in _MOVES:
            steps.append(move)
            walk(row + d_row, col + d_col)
            steps.pop()
        visited.discard((row, col))

    walk(0, 0)
    return paths


def word_break(s: str, words: Iterable[str]) -> bool:
    """Return True if ``s`` can be split into a sequence of dictionary words."""
    dictionary = frozenset(words)

    @lru_cache(maxsize=None)
    def breakable(start: int) -> bool:
        if start == len(s):
            return True
        return any(
            s[start:end] in dictionary and breakable(end)
            for end in range(start + 1, len(s) + 1)
        )

    return breakable(0)


def word_exists(board: Sequence[Sequence[str]], word: str) -> bool:
    """Return True if ``word`` can be traced through adjacent board cells.

    Letters are joined horizontally or vertically and no cell is used twice.
    """
    if not board or not board[0]:
        return False
    rows, cols = len(board), len(board[0])
    visited: set[tuple[int, int]] = set()

    def trace(row: int, col: int, index: int) -> bool:
        if index == len(word):
            return True
        if not (0 <= row < rows and 0 <= col < cols) or (row, col) in visited:
            return False
        if board[row][col] != word[index]:
            return False
        visited.add((row, col))
        found = any(trace(row + d_row, col + d_col, index + 1) for _, d_row, d_col in _MOVES)
        visited.discard((row, col))
        return found

    return any(trace(row, col, 0) for row in range(rows) for col in range(cols))


def main(argv: Sequence[str] | None = None) -> int:
    """Print every palindrome partition of a word, one partition per line.

    The word is taken from the first argument, or else from standard input.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if args:
        text = args[0]
    else:
        tokens = sys.stdin.read().split()
        text = tokens[0] if tokens else ""
    for parts in palindrome_partitions(text):
        print(" ".join(parts))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())