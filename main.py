"""Command line entry point: generate a level and print it as ASCII.

Settings come from config/level_config.json (see src.level.config_loader);
flags given on the command line take precedence.

Run `python main.py --help` for details.
"""

import argparse
import logging
import sys
from dataclasses import replace
from typing import List, Optional

from config import LEVEL_CONFIG_PATH
from src.core.errors import LevelGenerationError
from src.level.config_loader import load_level_config
from src.level.level_generator import generate_level

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Reduce verbosity of generator modules (only show warnings/errors)
GENERATOR_LOGGERS = (
    'src.level.room',
    'src.level.maze_generator',
    'src.level.room_generator',
)


def parse_args(argv: List[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate a maze-and-rooms dungeon level.")
    parser.add_argument("--config", default=LEVEL_CONFIG_PATH, help="Path to level_config.json")
    parser.add_argument("--seed", type=int, help="Random seed (default: from config, else random)")
    parser.add_argument("--width", type=int, help="Level width in cells")
    parser.add_argument("--height", type=int, help="Level height in cells")
    parser.add_argument("--rooms", type=int, dest="num_rooms", help="Number of rooms to place")
    parser.add_argument("--randomness", type=int, help="Corridor turn chance, 0-100")
    parser.add_argument("--sparseness", type=int, help="Percentage of cells left as rock, 0-100")
    parser.add_argument("--dead-end-removal", type=int, dest="dead_end_removal",
                        help="Chance to extend each dead end, 0-100")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every generation stage")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)

    level_logger_level = logging.DEBUG if args.verbose else logging.WARNING
    for name in GENERATOR_LOGGERS:
        logging.getLogger(name).setLevel(level_logger_level)
    if args.verbose:
        logging.getLogger('src.level.level_generator').setLevel(logging.DEBUG)

    overrides = {
        key: value for key, value in vars(args).items()
        if key in ("seed", "width", "height", "num_rooms", "randomness",
                   "sparseness", "dead_end_removal") and value is not None
    }

    try:
        config = replace(load_level_config(args.config), **overrides)
        level = generate_level(config)
    except LevelGenerationError as e:
        logger.error("Could not generate level: %s", e)
        return 1

    print(level, end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
