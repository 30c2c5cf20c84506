"""Backtracking searches: knight's tour and balanced parentheses."""

from __future__ import annotations

_KNIGHT_MOVES = ((1, 2), (1, -2), (-1, 2), (-1, -2), (2, 1), (2, -1), (-2, 1), (-2, -1))


def knight_tour(n: int) -> list[list[int]] | None:
    """Find a knight's tour of an ``n`` x ``n`` board starting in the top-left corner.

    Returns the board with the move number of every square, or None if no
    tour exists.
    """
    if n < 1:
        raise ValueError("board size must be positive")
    board = [[-1] * n for _ in range(n)]
    last = n * n - 1

    def visit(row: int, col: int, step: int) -> bool:
        board[row][col] = step
        if step == last:
            return True
        for d_row, d_col in _KNIGHT_MOVES:
            r, c = row + d_row, col + d_col
            if 0 <= r < n and 0 <= c < n and board[r][c] < 0 and visit(r, c, step + 1):
                return True
        board[row][col] = -1
        return False

    return board if visit(0, 0, 0) else None


def generate_parentheses(n: int) -> list[str]:
    """All strings of ``n`` balanced pairs of parentheses, in lexicographic order."""
    result: list[str] = []
    if n <= 0:
        return result

    def extend(prefix: str, opened: int, closed: int) -> None:
        if len(prefix) == 2 * n:
            result.append(prefix)
            return
        if opened < n:
            extend(prefix + "(", opened + 1, closed)
        if closed < opened:
            extend(prefix + ")", opened, closed + 1)

    extend("", 0, 0)
    return result