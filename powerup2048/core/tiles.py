"""
Tile and board primitives for the powerup variant of 2048.

A board is a square numpy object array holding either a ``Tile`` or ``None``. Cells are addressed either by
``(row, col)`` or by their linear index ``row * size + col``, which is what ``board.flat`` uses.
"""

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from uuid import uuid4

from numpy import full, ndarray

# ##: Allowed grid sizes.
MIN_SIZE = 3
MAX_SIZE = 8


class TileKind(str, Enum):
    """Kind of a tile. Everything except ``NUMBER`` is a powerup."""

    NUMBER = 'number'
    BOMB = 'bomb'
    JOKER = 'joker'
    SURGE = 'surge'
    SHUFFLE = 'shuffle'
    GLASS = 'glass'

    @property
    def is_obstacle(self) -> bool:
        """True for tiles that never merge and block merges across them."""
        return self not in (TileKind.NUMBER, TileKind.JOKER)

    @property
    def is_activatable(self) -> bool:
        """True for tiles with a tap effect."""
        return self.is_obstacle


# ##: Order used by the weighted powerup draw.
POWERUP_KINDS: tuple[TileKind, ...] = (
    TileKind.BOMB,
    TileKind.JOKER,
    TileKind.SURGE,
    TileKind.SHUFFLE,
    TileKind.GLASS,
)


class Direction(IntEnum):
    """Move directions, using the same codes as the classic 2048 actions."""

    LEFT = 0
    UP = 1
    RIGHT = 2
    DOWN = 3

    @classmethod
    def parse(cls, value: 'Direction | int | str') -> 'Direction':
        """
        Convert a direction name or code into a ``Direction``.

        Raises
        ------
        ValueError
            If the value does not name one of the four directions.
        """
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError as error:
                raise ValueError(f'Unknown direction: {value!r}') from error
        return cls(value)


def _new_id() -> str:
    return uuid4().hex


@dataclass(frozen=True)
class Tile:
    """
    A single tile on the board.

    Tiles are immutable: a move keeps a tile, removes it, or replaces it with a new merged tile carrying a fresh
    identifier.
    """

    value: int = 0
    kind: TileKind = TileKind.NUMBER
    id: str = field(default_factory=_new_id)

    @classmethod
    def number(cls, value: int) -> 'Tile':
        return cls(value=value, kind=TileKind.NUMBER)

    @classmethod
    def powerup(cls, kind: TileKind) -> 'Tile':
        """Create a freshly spawned powerup tile (value 0)."""
        return cls(value=0, kind=kind)

    @property
    def is_number(self) -> bool:
        return self.kind is TileKind.NUMBER

    def __str__(self) -> str:
        if self.kind is TileKind.NUMBER:
            return str(self.value)
        if self.kind is TileKind.JOKER and self.value:
            return f'J{self.value}'
        return self.kind.name[0]


def validate_size(size: int) -> int:
    """
    Check a grid size.

    Raises
    ------
    ValueError
        If the size is outside the supported range.
    """
    if not MIN_SIZE <= size <= MAX_SIZE:
        raise ValueError(f'Grid size must be between {MIN_SIZE} and {MAX_SIZE}, got {size}')
    return size


def empty_board(size: int) -> ndarray:
    """Create an empty ``size x size`` board."""
    return full((size, size), None, dtype=object)


def board_from_cells(cells: list, size: int | None = None) -> ndarray:
    """
    Build a board from a flat sequence or from nested rows.

    Integers become ``NUMBER`` tiles, ``0`` and ``None`` become empty cells, and ``Tile`` instances are kept as-is.
    """
    flat = []
    for item in cells:
        if isinstance(item, (list, tuple)):
            flat.extend(item)
        else:
            flat.append(item)

    if size is None:
        size = int(round(len(flat) ** 0.5))
    if size * size != len(flat):
        raise ValueError(f'Expected {size * size} cells, got {len(flat)}')

    board = empty_board(size)
    for index, item in enumerate(flat):
        if isinstance(item, Tile):
            board.flat[index] = item
        elif item:
            board.flat[index] = Tile.number(int(item))
    return board


def empty_cells(board: ndarray) -> list[int]:
    """Linear indices of the empty cells, in ascending order."""
    return [index for index, cell in enumerate(board.flat) if cell is None]


def tiles(board: ndarray) -> list[Tile]:
    """All tiles on the board, in linear index order."""
    return [cell for cell in board.flat if cell is not None]


def max_value(board: ndarray) -> int:
    """Largest tile value on the board, 0 when the board is empty."""
    return max((cell.value for cell in board.flat if cell is not None), default=0)


def board_values(board: ndarray) -> list[list[int | str | None]]:
    """Readable nested-list view of a board: numbers as ints, powerups by kind name, empty cells as ``None``."""
    rows = []
    for row in board:
        values = []
        for cell in row:
            if cell is None:
                values.append(None)
            elif cell.is_number:
                values.append(cell.value)
            else:
                values.append(cell.kind.value)
        rows.append(values)
    return rows
