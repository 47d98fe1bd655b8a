from __future__ import annotations

from collections.abc import Generator

import pytest

from gridworld.game import Game


@pytest.fixture(autouse=True)
def _fresh_shared_game() -> Generator[None, None, None]:
    """Reset the shared game around every test.

    This keeps tests hermetic: a world initialized in one test never leaks into another.
    """

    Game.reset_instance_for_tests()
    yield
    Game.reset_instance_for_tests()


@pytest.fixture(autouse=True)
def _clear_gridworld_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in ("GRIDWORLD_WIDTH", "GRIDWORLD_HEIGHT", "GRIDWORLD_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
