"""Configuration loader for level generation."""

import json
import logging
import os
from dataclasses import dataclass, fields, asdict
from typing import Any, Dict, Optional

from config import (
    DEAD_END_REMOVAL,
    DEFAULT_SEED,
    LEVEL_CONFIG_PATH,
    LEVEL_HEIGHT,
    LEVEL_WIDTH,
    MAZE_RANDOMNESS,
    MAZE_SPARSENESS,
    NUM_ROOMS,
    ROOM_MAX_HEIGHT,
    ROOM_MAX_WIDTH,
    ROOM_MIN_HEIGHT,
    ROOM_MIN_WIDTH,
)
from src.core.errors import InvalidArgumentError

logger = logging.getLogger(__name__)


@dataclass
class LevelGenConfig:
    """Parameters for one maze-and-rooms level."""
    # Level size in cells
    width: int = LEVEL_WIDTH
    height: int = LEVEL_HEIGHT

    # --- MAZE SETTINGS ---
    # 0 = corridors run straight until blocked, 100 = turn at every step
    randomness: int = MAZE_RANDOMNESS
    # Percentage of cells sealed back into solid rock after carving
    sparseness: int = MAZE_SPARSENESS
    # Percentage chance for each dead end to be extended into a loop (0 disables)
    dead_end_removal: int = DEAD_END_REMOVAL

    # --- ROOM SETTINGS ---
    num_rooms: int = NUM_ROOMS
    room_min_width: int = ROOM_MIN_WIDTH
    room_max_width: int = ROOM_MAX_WIDTH
    room_min_height: int = ROOM_MIN_HEIGHT
    room_max_height: int = ROOM_MAX_HEIGHT

    seed: Optional[int] = DEFAULT_SEED

    def validate(self) -> None:
        """Raise InvalidArgumentError if any value is outside its allowed range."""
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name == 'seed' and value is None:
                continue
            if not isinstance(value, int):
                raise InvalidArgumentError(f"{f.name} must be an integer, got {value!r}")

        if self.width < 1 or self.height < 1:
            raise InvalidArgumentError("width and height must be > 0")
        for name in ("randomness", "sparseness", "dead_end_removal"):
            value = getattr(self, name)
            if value < 0 or value > 100:
                raise InvalidArgumentError(f"{name} must be between 0 and 100!")
        if self.num_rooms < 0:
            raise InvalidArgumentError("num_rooms must be >= 0")
        if not 1 <= self.room_min_width <= self.room_max_width:
            raise InvalidArgumentError("Need 1 <= room_min_width <= room_max_width")
        if not 1 <= self.room_min_height <= self.room_max_height:
            raise InvalidArgumentError("Need 1 <= room_min_height <= room_max_height")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def load_level_config(config_path: str = LEVEL_CONFIG_PATH) -> LevelGenConfig:
    """
    Load level generation configuration from a JSON file.

    Only keys that LevelGenConfig knows are used; a missing or unreadable
    file falls back to the defaults from config.py.

    Args:
        config_path: Path to the configuration file

    Returns:
        LevelGenConfig: Loaded configuration
    """
    if not os.path.exists(config_path):
        logger.warning("Config file not found: %s, using defaults", config_path)
        return LevelGenConfig()

    try:
        with open(config_path, 'r') as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("Error loading config: %s, using defaults", e)
        return LevelGenConfig()

    config_data = data.get('level_config', {}) if isinstance(data, dict) else None
    if not isinstance(config_data, dict):
        logger.warning("No level_config object in %s, using defaults", config_path)
        return LevelGenConfig()

    allowed_keys = {f.name for f in fields(LevelGenConfig)}
    unknown = sorted(set(config_data) - allowed_keys)
    if unknown:
        logger.warning("Ignoring unknown level_config keys: %s", ", ".join(unknown))

    filtered = {}
    for key, value in config_data.items():
        if key not in allowed_keys:
            continue
        # seed may be null; every other setting is an integer
        if value is None and key == 'seed':
            filtered[key] = None
            continue
        try:
            filtered[key] = int(value)
        except (TypeError, ValueError):
            raise InvalidArgumentError(f"level_config.{key} must be an integer, got {value!r}")

    config = LevelGenConfig(**filtered)
    config.validate()
    return config
