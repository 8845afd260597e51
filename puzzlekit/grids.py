"""Puzzles played out on two-dimensional grids."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence, Sequence

_BOARD_SIZE = 3
_PLAYER_A = 1
_PLAYER_B = -1


def tictactoe(moves: Iterable[Sequence[int]]) -> str:
    """Judge a tic-tac-toe game from its moves, A moving first.

    Returns "A" or "B" for a winner, "Pending" while cells remain empty,
    and "Draw" for a full board without a winner.
    """
    board = [[0] * _BOARD_SIZE for _ in range(_BOARD_SIZE)]
    for turn, (row, col) in enumerate(moves):
        if not (0 <= row < _BOARD_SIZE and 0 <= col < _BOARD_SIZE):
            raise ValueError(f"move ({row}, {col}) is outside the board")
        board[row][col] = _PLAYER_A if turn % 2 == 0 else _PLAYER_B
    return _verdict(board)


def _verdict(board: list[list[int]]) -> str:
    full_line = _BOARD_SIZE
    for i in range(_BOARD_SIZE):
        line_sums = (sum(board[i]), sum(row[i] for row in board))
        if full_line in line_sums:
            return "A"
        if -full_line in line_sums:
            return "B"

    main = sum(board[i][i] for i in range(_BOARD_SIZE))
    anti = sum(board[i][_BOARD_SIZE - 1 - i] for i in range(_BOARD_SIZE))
    if full_line in (main, anti):
        return "A"
    if -full_line in (main, anti):
        return "B"
    if any(0 in row for row in board):
        return "Pending"
    return "Draw"


def diagonal_sum(mat: Sequence[Sequence[int]]) -> int:
    """Sum both diagonals of a square matrix, counting the centre once."""
    size = len(mat)
    total = sum(row[i] + row[size - 1 - i] for i, row in enumerate(mat))
    if size % 2 == 1:
        total -= mat[size // 2][size // 2]
    return total


def maximum_wealth(accounts: Iterable[Iterable[int]]) -> int:
    """Return the largest row total, never less than zero."""
    return max(0, max((sum(customer) for customer in accounts), default=0))


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """List the elements of a matrix in clockwise spiral order."""
    if not matrix or not matrix[0]:
        return []
    top, bottom = 0, len(matrix) - 1
    left, right = 0, len(matrix[0]) - 1
    result: list[int] = []
    while top <= bottom and left <= right:
        if top == bottom:
            result.extend(matrix[top][left:right + 1])
            break
        if left == right:
            result.extend(row[left] for row in matrix[top:bottom + 1])
            break
        result.extend(matrix[top][left:right + 1])
        result.extend(row[right] for row in matrix[top + 1:bottom + 1])
        result.extend(reversed(matrix[bottom][left:right]))
        result.extend(row[left] for row in reversed(matrix[top + 1:bottom]))
        top += 1
        bottom -= 1
        left += 1
        right -= 1
    return result


def set_zeroes(matrix: MutableSequence[MutableSequence[int]]) -> None:
    """Zero, in place, every row and column that holds a zero."""
    if not matrix:
        return
    zero_rows = {i for i, row in enumerate(matrix) if 0 in row}
    zero_cols = {j for row in matrix for j, value in enumerate(row) if value == 0}
    for i, row in enumerate(matrix):
        if i in zero_rows:
            row[:] = [0] * len(row)
            continue
        for j in zero_cols:
            row[j] = 0