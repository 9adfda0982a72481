"""
Weighted random spawning of number and powerup tiles.
"""

import logging

from numpy import ndarray
from numpy.random import Generator

from powerup2048.addons.config import SpawnPolicy
from powerup2048.core.tiles import POWERUP_KINDS, Tile, TileKind, empty_cells

# ##>: Number tile values and probabilities (90% for 2, 10% for 4).
_TILE_VALUES = [2, 4]
_TILE_PROBS = [0.9, 0.1]

# ##>: Module logger.
_logger = logging.getLogger(__name__)


def number_value(rng: Generator) -> int:
    """Draw the value of a new number tile."""
    return int(rng.choice(_TILE_VALUES, p=_TILE_PROBS))


def choose_powerup(policy: SpawnPolicy, rng: Generator) -> TileKind | None:
    """
    Select a powerup kind by cumulative-weight scan.

    Parameters
    ----------
    policy : SpawnPolicy
        Spawn policy holding the per-powerup configuration.
    rng : Generator
        Random number generator.

    Returns
    -------
    TileKind or None
        The chosen kind, or None if every kind is disabled or the weights do not sum to a positive number.

    Notes
    -----
    Disabled kinds contribute a weight of 0 and can never be drawn.
    """
    weights = [(kind, policy.weight_of(kind)) for kind in POWERUP_KINDS]
    total = sum(weight for _, weight in weights)
    if not total > 0:
        return None

    roll = rng.random() * total
    for kind, weight in weights:
        if roll < weight:
            return kind
        roll -= weight

    # ##>: Floating point leftovers land on the last positive weight.
    return next((kind for kind, weight in reversed(weights) if weight > 0), None)


def choose_tile(policy: SpawnPolicy, rng: Generator) -> Tile:
    """
    Decide what appears in a newly spawned cell.

    Parameters
    ----------
    policy : SpawnPolicy
        Spawn policy.
    rng : Generator
        Random number generator.

    Returns
    -------
    Tile
        A powerup tile with probability ``policy.probability`` when powerups are allowed, otherwise a number tile.
    """
    if policy.allows_powerups and rng.random() < policy.probability:
        kind = choose_powerup(policy, rng)
        if kind is not None:
            return Tile.powerup(kind)
    return Tile.number(number_value(rng))


def spawn(board: ndarray, policy: SpawnPolicy, rng: Generator) -> tuple[int, Tile] | None:
    """
    Place one new tile in a random empty cell.

    Parameters
    ----------
    board : ndarray
        The game board. **Modified in-place.**
    policy : SpawnPolicy
        Spawn policy.
    rng : Generator
        Random number generator. The same stream reproduces the same cells, kinds and values.

    Returns
    -------
    tuple or None
        The linear index and the new tile, or None when the board is full.
    """
    available = empty_cells(board)
    if not available:
        return None

    index = int(available[rng.integers(len(available))])
    tile = choose_tile(policy, rng)
    board.flat[index] = tile
    _logger.debug('Spawned %s at cell %d', tile.kind.value, index)
    return index, tile


def fill_cells(board: ndarray, number_tile: int, policy: SpawnPolicy, rng: Generator) -> ndarray:
    """
    Spawn several tiles, stopping early if the board fills up.

    Returns
    -------
    ndarray
        The same board reference with new tiles added.
    """
    for _ in range(number_tile):
        if spawn(board, policy, rng) is None:
            break
    return board
