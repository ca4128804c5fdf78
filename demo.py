#!/usr/bin/env python3
"""Watch a random player play Minefield."""
import time
import os

import numpy as np

from src.minefield.environment import MinesweeperEnv
from src.minefield.field import FieldConfig, GameAction


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def demo(delay: float = 0.3, games: int = 5, rows: int = 9, cols: int = 9,
         mines: int = 10, seed: int = None):
    """Run demo games with visualization."""
    config = FieldConfig(rows=rows, cols=cols, num_mines=mines)
    env = MinesweeperEnv(config=config, render_mode="ansi")
    rng = np.random.default_rng(seed)

    print(f"Field: {rows}x{cols} with {mines} mines ({100*mines/(rows*cols):.1f}% density)")
    print("Starting in 2 seconds...")
    time.sleep(2)

    wins = 0

    for game in range(games):
        obs, info = env.reset(seed=None if seed is None else seed + game)

        clear_screen()
        print(f"=== Game {game + 1}/{games} ===")
        print(f"Wins so far: {wins}\n")
        print(env.render())
        time.sleep(delay)

        done = False
        step = 0

        while not done:
            hidden = np.where(env.get_action_mask())[0]
            cell = rng.choice(hidden)
            row, col = cell // cols, cell % cols
            # Spend hints first, then guess
            code = GameAction.HINT if info["hints"] > 0 else GameAction.UNCOVER

            obs, reward, terminated, truncated, info = env.step((row, col, code))
            done = terminated or truncated
            step += 1

            clear_screen()
            print(f"=== Game {game + 1}/{games} | Step {step} ===")
            print(f"Wins so far: {wins}")
            print(f"Last move: ({row + 1}, {col + 1}) {code.name.lower()}\n")
            print(env.render())

            if done:
                if info.get("game_state") == "WON":
                    wins += 1
                    print(f"\n*** WIN! ***")
                else:
                    print(f"\n*** LOST (hit mine) ***")

            time.sleep(delay)

        time.sleep(1.0)  # Pause between games

    print(f"\n=== Final: {wins}/{games} wins ({100*wins/games:.0f}%) ===")


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser()
    parser.add_argument("--delay", type=float, default=0.3, help="Delay between moves")
    parser.add_argument("--games", type=int, default=5, help="Number of games")
    parser.add_argument("--rows", type=int, default=9, help="Field rows")
    parser.add_argument("--cols", type=int, default=9, help="Field columns")
    parser.add_argument("--mines", type=int, default=None, help="Number of mines (default: ~20%% of boxes)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    args = parser.parse_args()

    mines = args.mines if args.mines else int(args.rows * args.cols * 0.2)

    demo(delay=args.delay, games=args.games, rows=args.rows, cols=args.cols,
         mines=mines, seed=args.seed)
