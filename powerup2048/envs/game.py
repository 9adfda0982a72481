"""Live powerup 2048 game: board, score, history and session bookkeeping."""

import logging
from typing import Callable

from numpy import ndarray
from numpy.random import Generator, default_rng

from powerup2048.addons.config import GameSettings
from powerup2048.addons.types import NO_CHANGE, GameResult, GameSnapshot, MutationResult
from powerup2048.core.gameboard import is_done, latent_state
from powerup2048.core.history import History
from powerup2048.core.powerups import LABELS, resolve
from powerup2048.core.spawner import fill_cells, spawn
from powerup2048.core.tiles import Direction, empty_board, validate_size
from powerup2048.utils.render import next_goal, render_board

# ##>: Module logger.
_logger = logging.getLogger(__name__)


class Game:
    """
    One powerup 2048 game session.

    The object owns the board, the score and the undo/redo history. Every operation runs to completion and returns a
    ``MutationResult``; operations that make no sense in the current state (moving into a wall, tapping a number,
    undoing with an empty stack, anything while paused or over) return an unchanged result instead of raising.
    """

    def __init__(
        self,
        size: int | None = None,
        settings: GameSettings | None = None,
        rng: Generator | None = None,
        seed: int | None = None,
        best_scores: dict[int, int] | None = None,
        on_result: Callable[[GameResult], None] | None = None,
    ):
        """
        Initialize a game and spawn the two starting tiles.

        Parameters
        ----------
        size : int, optional
            Grid size, 3 to 8 (default is the configured grid size).
        settings : GameSettings, optional
            Gameplay settings (default settings when omitted).
        rng : Generator, optional
            Random number generator used for spawns and shuffles.
        seed : int, optional
            Seed of a new generator, used when ``rng`` is not given.
        best_scores : dict, optional
            Best score per grid size, as previously persisted.
        on_result : callable, optional
            Called with every emitted ``GameResult``.
        """
        self.settings = settings or GameSettings()
        self.size = validate_size(size if size is not None else self.settings.grid_size)
        self.rng = rng if rng is not None else default_rng(seed)
        self.best_scores: dict[int, int] = dict(best_scores or {})
        self.on_result = on_result

        self.history = History()
        self.total_moves = 0

        self._start()

    def _start(self) -> None:
        self._board = empty_board(self.size)
        self.score = 0
        self.move_count = 0
        self.elapsed = 0.0
        self.game_over = False
        self.paused = False
        self.new_high_score = False
        self._result_emitted = False
        self.history.clear()

        fill_cells(self._board, 2, self.settings.spawn_policy, self.rng)
        _logger.info('New %dx%d game', self.size, self.size)

    @property
    def board(self) -> ndarray:
        """A copy of the live board."""
        return self._board.copy()

    @property
    def undo_enabled(self) -> bool:
        return self.settings.undo_redo_enabled

    @property
    def accepts_input(self) -> bool:
        return not (self.game_over or self.paused)

    @property
    def clock_running(self) -> bool:
        """Whether the presentation layer should keep counting elapsed time."""
        return self.accepts_input

    @property
    def best_score(self) -> int:
        return self.best_scores.get(self.size, 0)

    @property
    def next_goal(self) -> int:
        return next_goal(self._board)

    def snapshot(self, label: str = '') -> GameSnapshot:
        """Independent copy of the current board and score."""
        return GameSnapshot.capture(self._board, self.score, label)

    def record_elapsed(self, seconds: float) -> None:
        """Add wall-clock time measured by the caller; ignored while the clock is stopped."""
        if self.clock_running and seconds > 0:
            self.elapsed += seconds

    def pause(self) -> None:
        if not self.game_over:
            self.paused = True

    def resume(self) -> None:
        if not self.game_over:
            self.paused = False

    def _record_for_undo(self, label: str) -> None:
        if self.undo_enabled:
            self.history.record(self.snapshot(label))

    def _restore(self, snapshot: GameSnapshot) -> None:
        self._board = snapshot.to_board()
        self.score = snapshot.score

    def _emit_result(self) -> GameResult | None:
        """Emit the summary of the current game once, if anything happened in it."""
        if self._result_emitted or (self.score == 0 and self.move_count == 0):
            return None

        self._result_emitted = True
        result = GameResult(score=self.score, move_count=self.move_count, duration=self.elapsed, grid_size=self.size)
        if self.on_result is not None:
            self.on_result(result)
        return result

    def _update_best_score(self) -> bool:
        """Track the best score of this grid size; True the first time this game beats a positive best."""
        previous = self.best_score
        if self.score <= previous:
            return False

        self.best_scores[self.size] = self.score
        if previous > 0 and not self.new_high_score:
            self.new_high_score = True
            _logger.info('New high score %d on %dx%d', self.score, self.size, self.size)
            return True
        return False

    def _check_game_over(self) -> GameResult | None:
        if self.game_over or not is_done(self._board):
            return None

        self.game_over = True
        _logger.info('Game over: score=%d moves=%d', self.score, self.move_count)
        return self._emit_result()

    def move(self, direction: Direction | int | str) -> MutationResult:
        """
        Slide the board in one direction.

        Parameters
        ----------
        direction : Direction, int or str
            Direction of the move.

        Returns
        -------
        MutationResult
            Unchanged when the game is paused/over or when the move does not change the board. Otherwise, the score
            gained, whether a new high score was reached, and whether the game just ended.

        Notes
        -----
        - A move that changes nothing takes no snapshot, spawns nothing and does not count as a move.
        - A changing move spawns exactly one tile.
        """
        direction = Direction.parse(direction)
        if not self.accepts_input:
            return NO_CHANGE

        updated, score, changed = latent_state(self._board, direction)
        if not changed:
            _logger.debug('Move %s changes nothing', direction.name.lower())
            return NO_CHANGE

        self._record_for_undo(f'Move {direction.name.lower()}')
        self.move_count += 1
        self.total_moves += 1

        self._board = updated
        self.score += score
        spawn(self._board, self.settings.spawn_policy, self.rng)

        high_score = self._update_best_score()
        result = self._check_game_over()
        _logger.debug('Move %s: +%d, score=%d', direction.name.lower(), score, self.score)

        return MutationResult(
            changed=True, score_delta=score, game_over=self.game_over, new_high_score=high_score, result=result
        )

    def activate(self, index: int) -> MutationResult:
        """
        Tap a cell and trigger its powerup.

        Parameters
        ----------
        index : int
            Linear index of the tapped cell.

        Returns
        -------
        MutationResult
            Unchanged for empty cells, number and joker tiles, indices outside the board, and while paused or over.
        """
        if not self.accepts_input:
            return NO_CHANGE

        updated = resolve(self._board, index, self.rng)
        if updated is None:
            _logger.debug('Cell %d is not activatable', index)
            return NO_CHANGE

        kind = self._board.flat[index].kind
        self._record_for_undo(LABELS[kind])
        self._board = updated
        _logger.debug('Activated %s at cell %d', kind.value, index)

        result = self._check_game_over()
        return MutationResult(changed=True, game_over=self.game_over, result=result)

    def undo(self) -> MutationResult:
        """Restore the state before the last undoable action."""
        if not (self.undo_enabled and self.accepts_input):
            return NO_CHANGE

        previous = self.history.undo(self.snapshot('Undo'))
        if previous is None:
            return NO_CHANGE

        delta = previous.score - self.score
        self._restore(previous)
        self.move_count = max(self.move_count - 1, 0)
        _logger.debug('Undo to %r', previous.label)
        return MutationResult(changed=True, score_delta=delta)

    def redo(self) -> MutationResult:
        """Re-apply the last undone action."""
        if not (self.undo_enabled and self.accepts_input):
            return NO_CHANGE

        following = self.history.redo(self.snapshot('Redo'))
        if following is None:
            return NO_CHANGE

        delta = following.score - self.score
        self._restore(following)
        self.move_count += 1
        _logger.debug('Redo')
        return MutationResult(changed=True, score_delta=delta)

    def reset(self) -> GameResult | None:
        """
        End the current game and start a new one with the same size.

        Returns
        -------
        GameResult or None
            The summary of the game that was ended, unless it was already emitted (by a loss) or nothing happened.
        """
        result = self._emit_result()
        self._start()
        return result

    def resize(self, size: int) -> GameResult | None:
        """End the current game and start a new one on a different grid size; no-op for the current size."""
        size = validate_size(size)
        if size == self.size:
            return None

        result = self._emit_result()
        self.size = size
        self._start()
        return result

    def reset_high_scores(self) -> None:
        self.best_scores.clear()

    def render(self) -> None:  # pragma: no cover
        """
        Render the game board. This method prints the current state of the game board to the console.
        """
        print(render_board(self._board))
        print(f'score={self.score} best={self.best_score} goal={self.next_goal}')


def new_game(
    size: int | None = None, settings: GameSettings | None = None, seed: int | None = None, **kwargs
) -> Game:
    """Create a game with two spawned tiles; the size defaults to the configured grid size."""
    return Game(size=size, settings=settings, seed=seed, **kwargs)


def move(game: Game, direction: Direction | int | str) -> MutationResult:
    return game.move(direction)


def activate(game: Game, index: int) -> MutationResult:
    return game.activate(index)


def undo(game: Game) -> MutationResult:
    return game.undo()


def redo(game: Game) -> MutationResult:
    return game.redo()


def is_game_over(game: Game) -> bool:
    return game.game_over


def snapshot_for_persistence(game: Game) -> GameSnapshot:
    return game.snapshot('Saved')
