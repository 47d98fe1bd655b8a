from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_WIDTH = 10
DEFAULT_HEIGHT = 5
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True, slots=True)
class GridWorldSettings:
    width: int
    height: int
    log_level: str = DEFAULT_LOG_LEVEL


def load_env_file(path: Path | None = None) -> bool:
    """Load a `.env` file into the environment without overriding set values.

    Defaults to `.env` in the current working directory. Returns whether a file
    was found.
    """

    env_path = path if path is not None else Path.cwd() / ".env"
    if not env_path.exists():
        return False
    load_dotenv(dotenv_path=env_path, override=False)
    return True


def _int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise RuntimeError(f"{var} must be an integer, got {raw!r}") from None


def settings_from_env(*, default_width: int = DEFAULT_WIDTH, default_height: int = DEFAULT_HEIGHT) -> GridWorldSettings:
    level = os.environ.get("GRIDWORLD_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise RuntimeError(f"GRIDWORLD_LOG_LEVEL must be a logging level name, got {level!r}")

    # Dimensions are only parsed here; World enforces that they are positive.
    return GridWorldSettings(
        width=_int_from_env("GRIDWORLD_WIDTH", default_width),
        height=_int_from_env("GRIDWORLD_HEIGHT", default_height),
        log_level=level,
    )
