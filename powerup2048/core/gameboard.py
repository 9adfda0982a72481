"""
Core functionality for the powerup 2048 board, including line compaction, directional moves and game-over
detection.
"""

from numpy import array, array_equal, ndarray

from powerup2048.core.tiles import Direction, Tile, TileKind, empty_board

# ##>: Value a lone Joker contributes before doubling.
JOKER_BASE_VALUE = 2


def oriented(board: ndarray, direction: Direction) -> ndarray:
    """
    Return a view of the board whose rows are compacted towards index 0 for the given direction.

    Parameters
    ----------
    board : ndarray
        The game board.
    direction : Direction
        Direction of the move.

    Returns
    -------
    ndarray
        A numpy view (not a copy): writing into it writes into ``board``.

    Notes
    -----
    - Left uses the rows as they are, up uses the columns.
    - Right and down use the reversed rows/columns, so a single left-compaction covers all four directions.
    """
    if direction == Direction.LEFT:
        return board
    if direction == Direction.RIGHT:
        return board[:, ::-1]
    if direction == Direction.UP:
        return board.T
    return board.T[:, ::-1]


def _merge_pair(first: Tile, second: Tile) -> Tile | None:
    """
    Merge two adjacent tiles if the rules allow it.

    Returns
    -------
    Tile or None
        The new merged tile, or None if the pair does not merge.
    """
    # ##: Obstacles never merge and are never merged over.
    if first.kind.is_obstacle or second.kind.is_obstacle:
        return None

    # ##: Joker takes the larger value, an unresolved Joker counts as 2.
    if first.kind is TileKind.JOKER or second.kind is TileKind.JOKER:
        base = max(first.value, second.value) or JOKER_BASE_VALUE
        return Tile.number(base * 2)

    if first.value == second.value:
        return Tile.number(first.value * 2)
    return None


def compact_line(cells) -> tuple[list[Tile | None], int]:
    """
    Slide one line towards its start and merge adjacent tiles.

    Parameters
    ----------
    cells : sequence of Tile or None
        One row or column of the board, ordered in the direction of compaction.

    Returns
    -------
    line : list
        The compacted line, right-padded with None to the original length.
    score : int
        The sum of the merged values.

    Notes
    -----
    - Empty cells are removed before merging.
    - Bomb, Surge, Shuffle and Glass tiles slide like any tile but block merges through them.
    - Each tile merges at most once per call: a freshly merged tile is never re-examined.
    """
    dense = [cell for cell in cells if cell is not None]
    result: list[Tile | None] = []
    score = 0

    i = 0
    while i < len(dense):
        if i + 1 < len(dense):
            merged = _merge_pair(dense[i], dense[i + 1])
            if merged is not None:
                result.append(merged)
                score += merged.value
                i += 2
                continue
        result.append(dense[i])
        i += 1

    result.extend([None] * (len(cells) - len(result)))
    return result, score


def slide_and_merge(board: ndarray, direction: Direction = Direction.LEFT) -> tuple[int, ndarray]:
    """
    Slide every line of the board in one direction and merge tiles.

    Parameters
    ----------
    board : ndarray
        The game board. It is not modified.
    direction : Direction, optional
        Direction of the move (default is left).

    Returns
    -------
    score : int
        The total score obtained from all merges.
    updated_board : ndarray
        A new board after sliding and merging.
    """
    source = oriented(board, direction)
    result = empty_board(board.shape[0])
    target = oriented(result, direction)
    score = 0

    for i, line in enumerate(source):
        compacted, line_score = compact_line(list(line))
        score += line_score
        for j, cell in enumerate(compacted):
            target[i, j] = cell

    return score, result


def latent_state(board: ndarray, direction: Direction) -> tuple[ndarray, int, bool]:
    """
    Compute the board after a move, without spawning a new tile.

    Parameters
    ----------
    board : ndarray
        The current state of the game board.
    direction : Direction
        The direction of the move.

    Returns
    -------
    new_board : ndarray
        The board after the move.
    score : int
        Score obtained from the merges of this move.
    changed : bool
        Whether any cell differs from the input board.
    """
    score, updated = slide_and_merge(board, direction)
    return updated, score, not array_equal(updated, board)


def is_done(board: ndarray) -> bool:
    """
    Check if the game has ended.

    Parameters
    ----------
    board : ndarray
        The current state of the game board.

    Returns
    -------
    bool
        True if the game is over, False otherwise.

    Notes
    -----
    The game is over when there are no empty cells, every tile is a number tile (any powerup left on the board is
    still a way out), and no two adjacent tiles share a value.
    """
    for cell in board.flat:
        if cell is None or not cell.is_number:
            return False

    values = array([[cell.value for cell in row] for row in board])
    return not bool((values[:-1] == values[1:]).any() or (values[:, :-1] == values[:, 1:]).any())
