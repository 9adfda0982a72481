# -*- coding: utf-8 -*-
"""
This module provides small helpers for presenting a board: the next goal tile and a plain-text rendering.
"""

from .render import next_goal, render_board

__all__ = ["next_goal", "render_board"]
