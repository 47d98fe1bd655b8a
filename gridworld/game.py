from __future__ import annotations

import logging
import threading

from gridworld.errors import InvalidDimensionError
from gridworld.world import World

logger = logging.getLogger(__name__)

_INSTANCE: Game | None = None
_INSTANCE_LOCK = threading.Lock()


class Game:
    """Owner of at most one active `World`.

    Construct it directly to pass an explicit game around, or use
    `Game.instance()` where a single shared game is needed.
    """

    def __init__(self) -> None:
        self._world: World | None = None

    @classmethod
    def instance(cls) -> Game:
        """Return the shared game, creating it on first access.

        Safe under concurrent first access; exactly one instance is built.
        """

        global _INSTANCE
        if _INSTANCE is None:
            with _INSTANCE_LOCK:
                if _INSTANCE is None:
                    _INSTANCE = cls()
        return _INSTANCE

    @classmethod
    def reset_instance_for_tests(cls) -> None:
        """Drop the shared game.

        This is intended for tests so each one starts without a world.
        """

        global _INSTANCE
        with _INSTANCE_LOCK:
            _INSTANCE = None

    @property
    def world(self) -> World | None:
        return self._world

    def require_world(self) -> World:
        if self._world is None:
            raise RuntimeError("World not initialized. Call initialize_world() first.")
        return self._world

    def initialize_world(self, width: int, height: int) -> World:
        """Build a new world and make it the active one.

        On failure the previously held world (if any) stays active and the
        error is re-raised.
        """

        try:
            world = World(width, height)
        except InvalidDimensionError as e:
            logger.error("Error initializing world: %s", e)
            raise

        self._world = world
        logger.info("World initialized: %d x %d", world.width, world.height)
        return world
