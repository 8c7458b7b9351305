"""Tunable numbers for the arena, overridable from ARENA_* environment variables."""
import logging
import os
from typing import Mapping, Optional

CONFIG = {
    "BOARD_WIDTH": 10,
    "BOARD_HEIGHT": 20,
    "CELL_SIZE": 24,
    "FPS": 60,
    "DROP_INTERVAL_MS": 1000,   # gravity step
    "CLEAR_BLINK_MS": 100,      # half-period of the line clear blink
    "CLEAR_DURATION_MS": 400,
    "SEED": None,               # None => fresh system randomness every run
    "LOG_LEVEL": "INFO",
}

ENV_PREFIX = "ARENA_"


def _parse(key: str, raw: str):
    default = CONFIG[key]
    if key == "SEED":
        if raw.strip() == "":
            return None
        try:
            return int(raw)
        except ValueError:
            raise ValueError(f"{ENV_PREFIX}{key} must be an integer, got {raw!r}") from None
    if isinstance(default, int):
        try:
            val = int(raw)
        except ValueError:
            raise ValueError(f"{ENV_PREFIX}{key} must be an integer, got {raw!r}") from None
        if val <= 0:
            raise ValueError(f"{ENV_PREFIX}{key} must be positive, got {val}")
        return val
    return raw


def load_env(environ: Optional[Mapping[str, str]] = None) -> dict:
    """Apply ARENA_<KEY> overrides onto CONFIG and return the keys that changed."""
    if environ is None:
        environ = os.environ
    changed = {}
    for key in CONFIG:
        raw = environ.get(ENV_PREFIX + key)
        if raw is None:
            continue
        changed[key] = _parse(key, raw)
    CONFIG.update(changed)
    return changed


def setup_logging(level: Optional[str] = None):
    logging.basicConfig(
        level=(level or CONFIG["LOG_LEVEL"]).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
