"""
Game move utilities for the powerup board, providing functions for determining legal and illegal moves and
activatable cells.
"""

from numpy import ndarray

from powerup2048.core.gameboard import latent_state
from powerup2048.core.tiles import Direction


def can_move(board: ndarray, direction: Direction) -> bool:
    """
    Check if a move in the given direction changes the board.

    Parameters
    ----------
    board : ndarray
        The game board to check.
    direction : Direction
        Direction to check.

    Returns
    -------
    bool
        True if the move is possible, False otherwise.
    """
    _, _, changed = latent_state(board, direction)
    return changed


def legal_actions(board: ndarray) -> list[Direction]:
    """
    Determine legal moves for the current board.

    Parameters
    ----------
    board : ndarray
        The current state of the game board.

    Returns
    -------
    list[Direction]
        Directions that change the board.
    """
    return [direction for direction in Direction if can_move(board, direction)]


def illegal_actions(board: ndarray) -> list[Direction]:
    """
    Determine illegal moves for the current board.

    Parameters
    ----------
    board : ndarray
        The current state of the game board.

    Returns
    -------
    list[Direction]
        Directions that leave the board unchanged.
    """
    return [direction for direction in Direction if not can_move(board, direction)]


def can_activate(board: ndarray, index: int) -> bool:
    """Check if tapping the cell at a linear index triggers a powerup."""
    if not 0 <= index < board.size:
        return False
    cell = board.flat[index]
    return cell is not None and cell.kind.is_activatable


def activatable_cells(board: ndarray) -> list[int]:
    """Linear indices of every tile with a tap effect."""
    return [index for index in range(board.size) if can_activate(board, index)]
