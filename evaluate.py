# -*- coding: utf-8 -*-
"""
Play random games of powerup 2048 and report the tiles reached.
"""
from collections import Counter
from typing import Dict

from numpy.random import default_rng
from tqdm import trange

from powerup2048 import GameSettings, new_game
from powerup2048.core import activatable_cells, legal_actions
from powerup2048.core.tiles import max_value


def evaluate(size: int = 4, length: int = 100, tap_rate: float = 0.3, seed: int | None = None) -> Dict[int, int]:
    """
    Play random games until each one is over.

    Parameters
    ----------
    size : int, optional
        Grid size (default is 4).
    length : int, optional
        The number of games to play (default is 100).
    tap_rate : float, optional
        Probability of tapping an available powerup instead of moving (default is 0.3).
    seed : int, optional
        Seed of the random generator shared by the games and the player.

    Returns
    -------
    Dict[int, int]
        How many games ended with each maximum tile.
    """
    rng = default_rng(seed)
    settings = GameSettings(grid_size=size, spawn_probability=0.1)
    game = new_game(size=size, settings=settings, rng=rng)
    score = []

    with trange(length) as period:
        for num in period:
            game.reset()

            # ##: Play a game.
            while not game.game_over:
                board = game.board
                taps = activatable_cells(board)
                moves = legal_actions(board)

                if taps and (not moves or rng.random() < tap_rate):
                    game.activate(int(rng.choice(taps)))
                elif moves:
                    game.move(moves[int(rng.integers(len(moves)))])
                else:
                    break

                # ##: Log.
                period.set_description(f'Evaluation: {num + 1}')
                period.set_postfix(score=game.score, max=max_value(game.board))

            # ##: Save max cells.
            score.append(max_value(game.board))

    # ##: Final log.
    frequency = Counter(score)
    return dict(sorted(frequency.items()))


if __name__ == '__main__':
    from argparse import ArgumentParser

    parser = ArgumentParser()
    parser.add_argument('--size', type=int, default=4)
    parser.add_argument('--games', type=int, default=100)
    parser.add_argument('--seed', type=int, default=None)
    args = parser.parse_args()

    result = evaluate(size=args.size, length=args.games, seed=args.seed)
    print(f'Random play on {args.size}x{args.size}, max tiles: {result}')
