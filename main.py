"""
main.py — Entry point.

Run with:
    python main.py snake
    python main.py pong --winning-score 3

Requires:
    pip install pygame
"""

import argparse
import logging
import sys

from arcadesim.config import FPS, PongConfig, SnakeConfig
from arcadesim.errors import ConfigError

logger = logging.getLogger("arcadesim")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="arcadesim", description="Snake and Pong")
    parser.add_argument("game", choices=("snake", "pong"))
    parser.add_argument("--seed", type=int, default=None, help="seed for reproducible runs")
    parser.add_argument("--fps", type=int, default=FPS)
    parser.add_argument("--winning-score", type=int, default=None, help="pong only")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
    )
    return parser


def build_model(args: argparse.Namespace):
    from arcadesim.pong_model import PongGame
    from arcadesim.snake_model import SnakeGame

    if args.game == "snake":
        return SnakeGame(SnakeConfig(), seed=args.seed)
    if args.winning_score is not None:
        config = PongConfig(winning_score=args.winning_score)
    else:
        config = PongConfig()
    return PongGame(config, seed=args.seed)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        model = build_model(args)
    except ConfigError as exc:
        logger.error("invalid configuration: %s", exc)
        return 2

    from arcadesim.controller import GameController

    GameController(args.game, model, fps=args.fps).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
