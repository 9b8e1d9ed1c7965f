import io

import pytest

from dsakit.backtracking import (
    find_paths,
    is_palindrome,
    main,
    palindrome_partitions,
    solve_n_queens,
    word_break,
    word_exists,
)


def _check_board(board, n):
    assert len(board) == n
    assert all(len(row) == n and set(row) <= {"Q", "."} for row in board)
    queens = [(r, c) for r, row in enumerate(board) for c, ch in enumerate(row) if ch == "Q"]
    assert len(queens) == n
    assert len({r for r, _ in queens}) == n
    assert len({c for _, c in queens}) == n
    assert len({r - c for r, c in queens}) == n
    assert len({r + c for r, c in queens}) == n


@pytest.mark.parametrize("n", [1, 4, 5, 6])
def test_queen_boards_are_valid_and_distinct(n):
    boards = solve_n_queens(n)
    assert boards
    for board in boards:
        _check_board(board, n)
    assert len({tuple(b) for b in boards}) == len(boards)


@pytest.mark.parametrize("n", [4, 5, 6])
def test_queen_solutions_closed_under_mirroring(n):
    boards = {tuple(b) for b in solve_n_queens(n)}
    assert {tuple(reversed(b)) for b in boards} == boards
    assert {tuple(row[::-1] for row in b) for b in boards} == boards


def test_three_queens_have_no_solution():
    assert solve_n_queens(3) == []


def test_negative_board_size_rejected():
    with pytest.raises(ValueError):
        solve_n_queens(-1)


def test_is_palindrome():
    assert is_palindrome("racecar")
    assert is_palindrome("abba")
    assert not is_palindrome("ab")


@pytest.mark.parametrize("s", ["aab", "abba", "abcba", "a", "aaaa"])
def test_partitions_are_palindromic_and_cover_input(s):
    partitions = palindrome_partitions(s)
    assert partitions[0] == list(s)
    for parts in partitions:
        assert "".join(parts) == s
        assert all(is_palindrome(p) for p in parts)
    assert len({tuple(p) for p in partitions}) == len(partitions)


def test_partitions_include_whole_palindrome():
    assert ["abba"] in palindrome_partitions("abba")
    assert ["aa", "b"] in palindrome_partitions("aab")


def test_main_prints_each_partition(capsys):
    assert main(["aab"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert [line.split(" ") for line in lines] == palindrome_partitions("aab")


def test_main_reads_stdin(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("noon\n"))
    main([])
    lines = capsys.readouterr().out.splitlines()
    assert [line.split(" ") for line in lines] == palindrome_partitions("noon")


def _follow(maze, path):
    n = len(maze)
    row = col = 0
    seen = {(0, 0)}
    deltas = {"U": (-1, 0), "D": (1, 0), "L": (0, -1), "R": (0, 1)}
    for move in path:
        dr, dc = deltas[move]
        row, col = row + dr, col + dc
        assert 0 <= row < n and 0 <= col < n
        assert maze[row][col] == 1
        assert (row, col) not in seen
        seen.add((row, col))
    return row, col


def test_two_by_two_open_maze():
    assert find_paths([[1, 1], [1, 1]]) == ["DR", "RD"]


@pytest.mark.parametrize(
    "maze",
    [
        [[1, 0, 0, 0], [1, 1, 0, 1], [1, 1, 0, 0], [0, 1, 1, 1]],
        [[1, 1, 1], [1, 1, 1], [1, 1, 1]],
        [[1, 1, 0], [0, 1, 1], [0, 0, 1]],
    ],
)
def test_maze_paths_are_valid(maze):
    paths = find_paths(maze)
    assert paths
    assert len(set(paths)) == len(paths)
    for path in paths:
        assert _follow(maze, path) == (len(maze) - 1, len(maze) - 1)


def test_blocked_maze_has_no_paths():
    assert not find_paths([[0, 1], [1, 1]])
    assert not find_paths([[1, 1], [1, 0]])


def test_single_cell_maze():
    assert find_paths([[1]]) == [""]


def test_word_break():
    assert word_break("leetcode", ["leet", "code"])
    assert word_break("applepenapple", ["apple", "pen"])
    assert not word_break("catsandog", ["cats", "dog", "sand", "and", "cat"])
    assert word_break("", ["a"])


BOARD = [list("ABCE"), list("SFCS"), list("ADEE")]


@pytest.mark.parametrize("word", ["ABCCED", "SEE", "A", "ESCE"])
def test_word_found(word):
    assert word_exists(BOARD, word)


@pytest.mark.parametrize("word", ["ABCB", "XYZ", "ABCESCEDASAB"])
def test_word_not_found(word):
    assert not word_exists(BOARD, word)


def test_word_search_on_empty_board():
    assert not word_exists([], "A")