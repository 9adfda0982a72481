# -*- coding: utf-8 -*-
"""
Set of types exchanged between the engine and its callers.
"""
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from numpy import ndarray

from powerup2048.core.tiles import Tile, TileKind, board_from_cells


@dataclass(frozen=True)
class GameSnapshot:
    """
    Immutable copy of a game taken before a reversible mutation.

    The board is stored as a flat tuple in linear index order, so it never aliases the live board.
    """

    board: tuple[Tile | None, ...]
    score: int
    label: str = ''

    @classmethod
    def capture(cls, board: ndarray, score: int, label: str = '') -> 'GameSnapshot':
        return cls(board=tuple(board.flat), score=int(score), label=label)

    @property
    def size(self) -> int:
        return int(round(len(self.board) ** 0.5))

    def to_board(self) -> ndarray:
        """Rebuild an independent live board."""
        return board_from_cells(list(self.board), size=self.size)

    def to_dict(self) -> dict[str, Any]:
        """Plain mapping for an external persistence layer."""
        return {
            'board': [
                None if cell is None else {'id': cell.id, 'value': cell.value, 'kind': cell.kind.value}
                for cell in self.board
            ],
            'score': self.score,
            'label': self.label,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'GameSnapshot':
        cells = tuple(
            None if cell is None else Tile(value=int(cell['value']), kind=TileKind(cell['kind']), id=str(cell['id']))
            for cell in data['board']
        )
        return cls(board=cells, score=int(data['score']), label=str(data.get('label', '')))


@dataclass(frozen=True)
class GameResult:
    """Terminal summary of a finished game."""

    score: int
    move_count: int
    duration: float
    grid_size: int
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass(frozen=True)
class MutationResult:
    """
    Outcome of one engine operation.

    ``game_over`` is true only for the operation that ended the game, and ``result`` carries the ``GameResult``
    emitted by that operation, if any.
    """

    changed: bool = False
    score_delta: int = 0
    game_over: bool = False
    new_high_score: bool = False
    result: GameResult | None = None


# ##: Shared "nothing happened" outcome.
NO_CHANGE = MutationResult()
