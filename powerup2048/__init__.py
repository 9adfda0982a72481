"""
2048 with powerup tiles.

The board engine: directional moves with obstacle and wildcard merge rules, weighted spawning of Bomb, Joker,
Surge, Shuffle and Glass tiles, tap effects, undo/redo and game-over detection.
"""

from .envs import Game, activate, is_game_over, move, new_game, redo, snapshot_for_persistence, undo
from .addons import GameResult, GameSettings, GameSnapshot, MutationResult, PowerupConfig, SpawnPolicy, load_settings
from .core import Direction, Tile, TileKind

__all__ = [
    "Game",
    "new_game",
    "move",
    "activate",
    "undo",
    "redo",
    "is_game_over",
    "snapshot_for_persistence",
    "Direction",
    "Tile",
    "TileKind",
    "GameResult",
    "GameSettings",
    "GameSnapshot",
    "MutationResult",
    "PowerupConfig",
    "SpawnPolicy",
    "load_settings",
]

__version__ = "0.1.0"
