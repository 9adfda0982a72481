"""
Undo/redo stacks of game snapshots.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from powerup2048.addons.types import GameSnapshot


class History:
    """
    Two snapshot stacks.

    Recording a new undoable action invalidates everything that could be redone.
    """

    def __init__(self):
        self._undo: list[GameSnapshot] = []
        self._redo: list[GameSnapshot] = []

    def __len__(self) -> int:
        return len(self._undo)

    @property
    def can_undo(self) -> bool:
        return bool(self._undo)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo)

    @property
    def redo_depth(self) -> int:
        return len(self._redo)

    def record(self, snapshot: GameSnapshot) -> None:
        """Push a snapshot taken before an undoable action and clear the redo stack."""
        self._undo.append(snapshot)
        self._redo.clear()

    def undo(self, current: GameSnapshot) -> GameSnapshot | None:
        """
        Step back once.

        Parameters
        ----------
        current : GameSnapshot
            Snapshot of the live game, pushed onto the redo stack.

        Returns
        -------
        GameSnapshot or None
            The snapshot to restore, or None if there is nothing to undo.
        """
        if not self._undo:
            return None
        previous = self._undo.pop()
        self._redo.append(current)
        return previous

    def redo(self, current: GameSnapshot) -> GameSnapshot | None:
        """Step forward once; symmetric to ``undo``."""
        if not self._redo:
            return None
        following = self._redo.pop()
        self._undo.append(current)
        return following

    def clear(self) -> None:
        self._undo.clear()
        self._redo.clear()
