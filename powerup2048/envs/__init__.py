# -*- coding: utf-8 -*-
"""
Stateful powerup 2048 game.

This module provides the `Game` class, which owns a board, its score and its undo/redo history, plus thin
functional wrappers around its operations.
"""

from .game import Game, activate, is_game_over, move, new_game, redo, snapshot_for_persistence, undo

__all__ = ["Game", "new_game", "move", "activate", "undo", "redo", "is_game_over", "snapshot_for_persistence"]
