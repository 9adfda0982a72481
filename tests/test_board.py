"""
Tests for line compaction, directional moves and game-over detection on powerup boards.
"""

from unittest import TestCase, main

import numpy as np

from powerup2048.core.gameboard import compact_line, is_done, latent_state, slide_and_merge
from powerup2048.core.tiles import Direction, Tile, TileKind, board_from_cells, board_values

BOMB = Tile.powerup(TileKind.BOMB)
GLASS = Tile.powerup(TileKind.GLASS)
SURGE = Tile.powerup(TileKind.SURGE)


def values(line):
    """Readable view of a compacted line."""
    return [None if cell is None else (cell.value if cell.is_number else cell.kind.value) for cell in line]


def n(value):
    return Tile.number(value)


class TestCompactLine(TestCase):
    """Test the slide-and-merge rule on a single line."""

    def test_classic_merges(self):
        """Equal neighbours merge once per move and the score is the sum of merged values."""
        line, score = compact_line([n(2), n(2), n(2), n(2)])
        self.assertEqual(values(line), [4, 4, None, None])
        self.assertEqual(score, 8)

    def test_merged_tile_does_not_merge_again(self):
        """A freshly merged tile is not re-examined."""
        line, score = compact_line([n(4), n(4), n(8), None])
        self.assertEqual(values(line), [8, 8, None, None])
        self.assertEqual(score, 8)

    def test_gaps_are_removed(self):
        """Empty cells between equal tiles do not prevent the merge."""
        line, score = compact_line([None, n(2), None, n(2)])
        self.assertEqual(values(line), [4, None, None, None])
        self.assertEqual(score, 4)

    def test_no_merge_keeps_order(self):
        """Different values slide without merging."""
        line, score = compact_line([None, n(2), n(4), n(2)])
        self.assertEqual(values(line), [2, 4, 2, None])
        self.assertEqual(score, 0)

    def test_obstacle_before_pair(self):
        """The pair after a bomb still merges."""
        line, score = compact_line([BOMB, n(2), n(2)])
        self.assertEqual(values(line), ['bomb', 4, None])
        self.assertIs(line[0], BOMB)
        self.assertEqual(score, 4)

    def test_no_merge_across_obstacle(self):
        """Two equal tiles separated by a bomb stay apart."""
        line, score = compact_line([n(2), BOMB, n(2)])
        self.assertEqual(values(line), [2, 'bomb', 2])
        self.assertEqual(score, 0)

    def test_obstacles_slide(self):
        """Obstacles slide towards the compaction side like any tile."""
        line, _ = compact_line([None, GLASS, None, SURGE])
        self.assertEqual(values(line), ['glass', 'surge', None, None])

    def test_obstacles_never_merge_together(self):
        """Two glass tiles do not merge."""
        other = Tile.powerup(TileKind.GLASS)
        line, score = compact_line([GLASS, other, None])
        self.assertEqual(line, [GLASS, other, None])
        self.assertEqual(score, 0)

    def test_joker_doubles_number(self):
        """A joker next to a number merges into twice that number."""
        line, score = compact_line([Tile.powerup(TileKind.JOKER), n(8), None])
        self.assertEqual(values(line), [16, None, None])
        self.assertEqual(score, 16)
        self.assertTrue(line[0].is_number)

    def test_number_then_joker(self):
        """Order of the joker in the pair does not matter."""
        line, score = compact_line([n(32), Tile.powerup(TileKind.JOKER)])
        self.assertEqual(values(line), [64, None])
        self.assertEqual(score, 64)

    def test_two_jokers(self):
        """Two unresolved jokers merge into a 4."""
        line, score = compact_line([Tile.powerup(TileKind.JOKER), Tile.powerup(TileKind.JOKER), None])
        self.assertEqual(values(line), [4, None, None])
        self.assertEqual(score, 4)

    def test_joker_blocked_by_obstacle(self):
        """A joker does not merge through an obstacle."""
        joker = Tile.powerup(TileKind.JOKER)
        line, score = compact_line([joker, BOMB, n(2)])
        self.assertEqual(line, [joker, BOMB, line[2]])
        self.assertEqual(line[2].value, 2)
        self.assertEqual(score, 0)

    def test_unmoved_tiles_keep_identity(self):
        """Tiles that only slide keep their identifier; merged tiles get a new one."""
        first, second, third = n(2), n(2), n(8)
        line, _ = compact_line([first, second, third])
        self.assertNotIn(line[0].id, {first.id, second.id})
        self.assertIs(line[1], third)


class TestSlideAndMerge(TestCase):
    """Test moves over the whole board."""

    def setUp(self):
        self.board = board_from_cells(
            [
                [2, 2, 0, 4],
                [0, 4, 4, 8],
                [2, 0, 0, 2],
                [BOMB, 2, 2, 0],
            ]
        )

    def test_left(self):
        """Rows compact towards column 0."""
        score, result = slide_and_merge(self.board, Direction.LEFT)
        self.assertEqual(
            board_values(result),
            [[4, 4, None, None], [8, 8, None, None], [4, None, None, None], ['bomb', 4, None, None]],
        )
        self.assertEqual(score, 4 + 8 + 4 + 4)

    def test_right(self):
        """Rows compact towards the last column."""
        score, result = slide_and_merge(self.board, Direction.RIGHT)
        self.assertEqual(
            board_values(result),
            [[None, None, 4, 4], [None, None, 8, 8], [None, None, None, 4], [None, None, 'bomb', 4]],
        )
        self.assertEqual(score, 20)

    def test_up_and_down(self):
        """Columns compact towards row 0 or the last row."""
        _, up = slide_and_merge(self.board, Direction.UP)
        self.assertEqual(board_values(up)[0], [4, 2, 4, 4])
        self.assertEqual(board_values(up)[1], ['bomb', 4, 2, 8])

        _, down = slide_and_merge(self.board, Direction.DOWN)
        self.assertEqual(board_values(down)[3], ['bomb', 2, 2, 2])
        self.assertEqual(board_values(down)[2], [4, 4, 4, 8])

    def test_input_not_modified(self):
        """The source board is left untouched."""
        before = board_values(self.board)
        slide_and_merge(self.board, Direction.DOWN)
        self.assertEqual(board_values(self.board), before)

    def test_mirror_symmetry(self):
        """Moving right equals moving the mirrored board left, mirrored back."""
        _, right = slide_and_merge(self.board, Direction.RIGHT)
        _, mirrored_left = slide_and_merge(np.fliplr(self.board), Direction.LEFT)
        self.assertEqual(board_values(right), board_values(np.fliplr(mirrored_left)))

    def test_transpose_symmetry(self):
        """Moving up equals moving the transposed board left, transposed back."""
        _, up = slide_and_merge(self.board, Direction.UP)
        _, transposed_left = slide_and_merge(self.board.T, Direction.LEFT)
        self.assertEqual(board_values(up), board_values(transposed_left.T))

    def test_latent_state_reports_changes(self):
        """A move into a wall is reported as unchanged and the second identical move is a no-op."""
        board = board_from_cells([[2, 0, 0], [4, 0, 0], [BOMB, 0, 0]])
        _, score, changed = latent_state(board, Direction.LEFT)
        self.assertFalse(changed)
        self.assertEqual(score, 0)

        after, _, changed = latent_state(board, Direction.RIGHT)
        self.assertTrue(changed)
        again, _, changed = latent_state(after, Direction.RIGHT)
        self.assertFalse(changed)
        self.assertTrue(np.array_equal(again, after))


class TestIsDone(TestCase):
    """Test game-over detection."""

    def setUp(self):
        self.checkerboard = [[2, 4, 2], [4, 2, 4], [2, 4, 2]]

    def test_checkerboard_is_done(self):
        """A full number board without equal neighbours is over."""
        self.assertTrue(is_done(board_from_cells(self.checkerboard)))

    def test_powerup_prevents_game_over(self):
        """Any powerup left on a full board is a way out."""
        board = board_from_cells(self.checkerboard)
        board[1, 1] = GLASS
        self.assertFalse(is_done(board))

    def test_joker_prevents_game_over(self):
        """A joker is not a number tile either."""
        board = board_from_cells(self.checkerboard)
        board[0, 0] = Tile.powerup(TileKind.JOKER)
        self.assertFalse(is_done(board))

    def test_empty_cell(self):
        """A board with an empty cell is not over."""
        board = board_from_cells(self.checkerboard)
        board[2, 2] = None
        self.assertFalse(is_done(board))

    def test_equal_neighbours(self):
        """Equal horizontal or vertical neighbours keep the game going."""
        self.assertFalse(is_done(board_from_cells([[2, 2, 4], [4, 8, 2], [2, 4, 8]])))
        self.assertFalse(is_done(board_from_cells([[2, 4, 8], [4, 8, 2], [2, 8, 4]])))


if __name__ == "__main__":
    main()
