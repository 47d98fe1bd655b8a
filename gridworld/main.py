from __future__ import annotations

import logging
import sys

from gridworld.errors import InvalidDimensionError
from gridworld.game import Game
from gridworld.settings import load_env_file, settings_from_env

logger = logging.getLogger(__name__)


def main() -> int:
    load_env_file()
    try:
        settings = settings_from_env()
    except RuntimeError as e:
        logging.basicConfig(level=logging.INFO)
        logger.error("Invalid configuration: %s", e)
        return 2

    logging.basicConfig(level=settings.log_level)

    game = Game.instance()
    try:
        world = game.initialize_world(settings.width, settings.height)
    except InvalidDimensionError:
        return 2

    print(f"World dimensions: {world.width} x {world.height}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
