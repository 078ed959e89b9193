"""Console entry point: play Ataxx against the computer or run self-play matches."""
import argparse
import logging
import sys

from ataxx.config import get_settings
from ataxx.game import Game
from ataxx.simulation import DEFAULT_MAX_MOVES, run_simulation


def build_parser():
    parser = argparse.ArgumentParser(prog="ataxx", description="Ataxx with a minimax opponent")
    parser.add_argument("--log-level", default=None,
                        help="Logging level (default: ATAXX_LOG_LEVEL or INFO)")
    subparsers = parser.add_subparsers(dest="command")

    play = subparsers.add_parser("play", help="Play a game from commands on standard input")
    play.add_argument("--seed", type=int, default=None, help="Seed for random movers")

    simulate = subparsers.add_parser("simulate", help="Play minimax against a random mover")
    simulate.add_argument("--number-games", type=int, default=10,
                          help="Number of games to play")
    simulate.add_argument("--seed", type=int, default=None, help="Seed for the random mover")
    simulate.add_argument("--max-moves", type=int, default=DEFAULT_MAX_MOVES,
                          help="Moves after which a game is scored by material")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=(args.log_level or get_settings().log_level).upper(),
        format='%(asctime)s %(message)s',
    )

    if args.command == "simulate":
        results = run_simulation(args.number_games, args.seed, args.max_moves)
        print(f"Minimax wins: {results['minimax']}")
        print(f"Random wins: {results['random']}")
        print(f"Draws: {results['draw']}")
        return 0

    Game(sys.stdin, seed=getattr(args, "seed", None)).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
