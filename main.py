#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py play [WIDTH HEIGHT MINES] [--verbose]
    python main.py evaluate [--games N] [--seed S]
"""
import argparse
import logging

import numpy as np

from src.minesweeper.board import Board, BoardConfig
from src.minesweeper.environment import MinesweeperEnv, play_random_episode
from src.minesweeper.tui import HELP_TEXT, QUIT, RESTART, TerminalSession


def play(args: argparse.Namespace) -> None:
    """Play in the terminal until the player quits."""
    config = BoardConfig(width=args.width, height=args.height, num_mines=args.mines)
    board = Board(config)

    while True:
        session = TerminalSession(board)
        result = _play_one(session)
        if result == QUIT:
            return
        board.restart()


def _play_one(session: TerminalSession) -> str:
    """Run one game; returns QUIT or RESTART."""
    while session.board.is_playing:
        print(session.render())
        print(HELP_TEXT)
        try:
            commands = input("Input: ")
        except EOFError:
            return QUIT
        result = session.handle(commands)
        if result is not None:
            return result

    for line in session.status_lines():
        print(line)
    print(session.render())

    try:
        answer = input("Play again? [y/N] ")
    except EOFError:
        return QUIT
    return RESTART if answer.strip().lower().startswith("y") else QUIT


def evaluate(args: argparse.Namespace) -> None:
    """Play random games through the environment and report results."""
    config = BoardConfig(width=args.width, height=args.height, num_mines=args.mines)
    env = MinesweeperEnv(config=config)
    rng = np.random.default_rng(args.seed)

    wins = 0
    total_steps = 0
    total_revealed = 0

    print(f"\nEvaluating random player over {args.games} games...")
    for game in range(args.games):
        seed = None if args.seed is None else args.seed + game
        info = play_random_episode(env, rng, seed=seed)
        total_steps += info["steps"]
        total_revealed += info["revealed"]
        if info["game_state"] == "WON":
            wins += 1

    print("Results for Random:")
    print(f"  Win rate: {wins / args.games:.1%}")
    print(f"  Avg steps: {total_steps / args.games:.1f}")
    print(f"  Avg revealed: {total_revealed / args.games:.1f} tiles")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Minesweeper - Play in the terminal or evaluate a random player"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Log engine debug messages"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    play_parser.add_argument("width", type=int, nargs="?", default=9)
    play_parser.add_argument("height", type=int, nargs="?", default=9)
    play_parser.add_argument("mines", type=int, nargs="?", default=10)

    # Evaluate command
    eval_parser = subparsers.add_parser(
        "evaluate", help="Evaluate a random player"
    )
    eval_parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )
    eval_parser.add_argument("--width", type=int, default=9)
    eval_parser.add_argument("--height", type=int, default=9)
    eval_parser.add_argument("--mines", type=int, default=10)
    eval_parser.add_argument(
        "--seed", type=int, default=None, help="Seed for reproducible games"
    )

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        )

    if args.command == "play":
        play(args)
    elif args.command == "evaluate":
        evaluate(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
