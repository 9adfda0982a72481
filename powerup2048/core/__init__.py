# -*- coding: utf-8 -*-
"""
This module provides the board engine of the powerup 2048 game.

It includes the tile model, line compaction and directional moves, weighted spawning of number and powerup tiles,
powerup tap effects, undo/redo history, and game-over detection.
"""

from .gameboard import compact_line, is_done, latent_state, slide_and_merge
from .gamemove import activatable_cells, can_activate, can_move, illegal_actions, legal_actions
from .history import History
from .powerups import resolve
from .spawner import choose_tile, fill_cells, spawn
from .tiles import Direction, Tile, TileKind, board_from_cells, empty_board

__all__ = [
    "Direction",
    "Tile",
    "TileKind",
    "board_from_cells",
    "empty_board",
    "compact_line",
    "slide_and_merge",
    "latent_state",
    "is_done",
    "legal_actions",
    "illegal_actions",
    "can_move",
    "can_activate",
    "activatable_cells",
    "spawn",
    "fill_cells",
    "choose_tile",
    "resolve",
    "History",
]
