#!/usr/bin/env python3
"""
Survival Minesweeper - Main entry point.

Usage:
    python main.py play [--width W] [--height H] [--mines N] [--seed S]
    python main.py simulate [--games N] [--seed S]
"""
import argparse
import logging
import sys
from pathlib import Path

# Allow running from a source checkout without installing
sys.path.insert(0, str(Path(__file__).parent / "src"))

from game import (  # noqa: E402
    BoardConfig,
    GameController,
    GameEvent,
    MinesweeperError,
    NumpyRandomSource,
    render_ansi,
)
from agents import RandomAgent  # noqa: E402
from simulation import Evaluator  # noqa: E402


EVENT_MESSAGES = {
    GameEvent.SURVIVED: "You hit a mine but it was a dud. You survived!",
    GameEvent.GAME_OVER: "Boom! You hit a mine. Game over.",
    GameEvent.VICTORY: "Every safe cell is open. You win!",
}


def _config_from_args(args: argparse.Namespace) -> BoardConfig:
    return BoardConfig(width=args.width, height=args.height, num_mines=args.mines)


def play(args: argparse.Namespace) -> None:
    """Play interactively in the terminal."""
    controller = GameController(
        _config_from_args(args), NumpyRandomSource(args.seed)
    )
    print("Enter 'x y' to reveal a cell, 'n' for a new game, 'q' to quit.")

    while True:
        print()
        print(render_ansi(controller.board.get_observation()))
        try:
            line = input("> ").strip().lower()
        except EOFError:
            break

        if line in ("q", "quit"):
            break
        if line in ("n", "new"):
            controller.start_new_game()
            continue

        try:
            x, y = (int(part) for part in line.split())
        except ValueError:
            print("Expected two integers: x y")
            continue

        try:
            event = controller.reveal(x, y)
        except MinesweeperError as exc:
            print(f"Invalid move: {exc}")
            continue

        if event in EVENT_MESSAGES:
            print(EVENT_MESSAGES[event])
        if event in (GameEvent.GAME_OVER, GameEvent.VICTORY):
            print(render_ansi(controller.board.get_observation()))
            try:
                input("Press Enter for a new game...")
            except EOFError:
                break
            controller.acknowledge()

    print(
        f"\nGames: {controller.games_played}  "
        f"Wins: {controller.wins}  Losses: {controller.losses}"
    )


def simulate(args: argparse.Namespace) -> None:
    """Play many games with the random agent and report statistics."""
    config = _config_from_args(args)
    agent = RandomAgent(config.width, config.height, seed=args.seed)
    evaluator = Evaluator(
        config, num_episodes=args.games, max_steps=config.total_cells, seed=args.seed
    )

    print(f"Simulating {args.games} games on {config.width}x{config.height} "
          f"with {config.num_mines} mines...")
    results = evaluator.evaluate(agent)

    print(f"  Win rate: {results['win_rate']:.1%}")
    print(f"  Avg reward: {results['avg_reward']:.2f}")
    print(f"  Avg steps: {results['avg_steps']:.1f}")
    print(f"  Avg opened: {results['avg_opened']:.1f} cells")
    print(f"  Avg mines survived: {results['avg_mines_survived']:.2f}")


def _add_board_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--width", type=int, default=6, help="Board columns")
    parser.add_argument("--height", type=int, default=6, help="Board rows")
    parser.add_argument("--mines", type=int, default=8, help="Number of mines")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Survival Minesweeper - mines have a 50% chance to be duds"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Show engine debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    _add_board_args(play_parser)

    sim_parser = subparsers.add_parser(
        "simulate", help="Measure a random player over many games"
    )
    _add_board_args(sim_parser)
    sim_parser.add_argument(
        "--games", type=int, default=1000, help="Number of games to play"
    )

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        if args.command == "play":
            play(args)
        elif args.command == "simulate":
            simulate(args)
        else:
            parser.print_help()
    except MinesweeperError as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    main()
