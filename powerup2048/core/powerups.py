"""
Tap effects of the powerup tiles.

Every effect works on a copy of the board and never spawns tiles or changes the score.
"""

from numpy import ndarray
from numpy.random import Generator

from powerup2048.core.gamemove import can_activate
from powerup2048.core.tiles import TileKind, empty_board

# ##: Snapshot labels recorded before each effect.
LABELS: dict[TileKind, str] = {
    TileKind.BOMB: 'Bomb Used',
    TileKind.SURGE: 'Surge Used',
    TileKind.SHUFFLE: 'Shuffle Used',
    TileKind.GLASS: 'Glass Removed',
}


def activate_bomb(board: ndarray, row: int, col: int) -> ndarray:
    """Clear the 3x3 neighbourhood around a cell, clipped to the board, bomb included."""
    result = board.copy()
    result[max(row - 1, 0) : row + 2, max(col - 1, 0) : col + 2] = None
    return result


def activate_surge(board: ndarray, row: int, col: int) -> ndarray:
    """Clear the whole row and the whole column of a cell."""
    result = board.copy()
    result[row, :] = None
    result[:, col] = None
    return result


def activate_glass(board: ndarray, row: int, col: int) -> ndarray:
    """Clear a single cell."""
    result = board.copy()
    result[row, col] = None
    return result


def activate_shuffle(board: ndarray, row: int, col: int, rng: Generator) -> ndarray:
    """
    Consume the shuffle tile and scatter every other tile over the board.

    Parameters
    ----------
    board : ndarray
        The game board. It is not modified.
    row, col : int
        Position of the shuffle tile.
    rng : Generator
        Random number generator.

    Returns
    -------
    ndarray
        A new board holding the same tiles (same identities) at a uniformly random set of cells.
    """
    size = board.shape[0]
    index = row * size + col
    collected = [cell for i, cell in enumerate(board.flat) if i != index and cell is not None]

    result = empty_board(size)
    positions = rng.permutation(size * size)[: len(collected)]
    for position, tile in zip(positions, collected):
        result.flat[int(position)] = tile
    return result


def resolve(board: ndarray, index: int, rng: Generator) -> ndarray | None:
    """
    Apply the effect of tapping a cell.

    Parameters
    ----------
    board : ndarray
        The current state of the game board. It is not modified.
    index : int
        Linear index of the tapped cell.
    rng : Generator
        Random number generator, used by the shuffle effect.

    Returns
    -------
    ndarray or None
        The board after the effect, or None if the cell holds nothing activatable (empty, number or joker).
    """
    if not can_activate(board, index):
        return None

    row, col = divmod(index, board.shape[0])
    kind = board.flat[index].kind

    if kind is TileKind.BOMB:
        return activate_bomb(board, row, col)
    if kind is TileKind.SURGE:
        return activate_surge(board, row, col)
    if kind is TileKind.SHUFFLE:
        return activate_shuffle(board, row, col, rng)
    return activate_glass(board, row, col)
