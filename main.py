import argparse
import logging

from pydantic import ValidationError

from constants import defaults
from game_instances.local_loop import LocalLoop
from schemas.settings import GameSettings

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Single player snake hunting game")
    parser.add_argument("--rows", type=int, default=defaults.ROWS, help="Pit height in cells")
    parser.add_argument("--columns", type=int, default=defaults.COLUMNS, help="Pit width in cells")
    parser.add_argument("--cell-size", type=int, default=defaults.CELL_SIZE, help="Cell size in pixels")
    parser.add_argument("--tps", type=float, default=defaults.UPDATE_PER_SEC, help="Game updates per second")
    parser.add_argument("--seed", type=int, default=None, help="Seed for snake and food placement")
    parser.add_argument("--mute", action="store_true", help="Start with sound off")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    try:
        settings = GameSettings(
            rows=args.rows,
            columns=args.columns,
            cell_size=args.cell_size,
            ticks_per_second=args.tps,
        )
    except ValidationError as e:
        logger.error(f"Invalid game settings:\n{e}")
        return 2

    LocalLoop(settings, seed=args.seed, muted=args.mute).run()
    return 0


if "__main__" == __name__:
    raise SystemExit(main())
