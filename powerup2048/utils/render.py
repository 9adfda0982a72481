"""Plain-text helpers for looking at a board: goal tile and a tab-separated dump."""

from numpy import ndarray

from powerup2048.core.tiles import max_value

# ##: Goal shown before any tile reaches it.
DEFAULT_GOAL = 2048


def next_goal(board: ndarray) -> int:
    """
    Next tile value worth aiming for.

    Parameters
    ----------
    board : ndarray
        The current state of the game board.

    Returns
    -------
    int
        Twice the largest tile, and never less than 2048.
    """
    return max(DEFAULT_GOAL, 2 * max_value(board))


def render_board(board: ndarray, empty: str = '.') -> str:
    """Render the board as tab-separated rows."""
    lines = []
    for row in board:
        lines.append(' \t'.join(empty if cell is None else str(cell) for cell in row))
    return '\n'.join(lines)
