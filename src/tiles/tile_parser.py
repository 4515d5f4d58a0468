from typing import Dict, List

from src.core.constants import TILE_CHAR_MAP
from src.core.errors import InvalidArgumentError
from src.level.level import Level
from .tile_types import TileType


class TileParser:
    """Converts between ASCII level dumps and Level tile grids."""

    def __init__(self):
        # Default ASCII to tile type mapping
        self.ascii_map: Dict[str, TileType] = dict(TILE_CHAR_MAP)

    def parse_ascii_level(self, ascii_level: List[str]) -> Level:
        """
        Parse an ASCII level definition into a Level.

        Short lines are padded with walls. Unknown characters are rejected.
        """
        lines = [line.rstrip("\n") for line in ascii_level if line.strip("\n")]
        if not lines:
            raise InvalidArgumentError("Cannot parse an empty level")

        width = max(len(line) for line in lines)
        level = Level(width, len(lines))

        for y, line in enumerate(lines):
            for x, char in enumerate(line):
                if char not in self.ascii_map:
                    raise InvalidArgumentError(f"Unknown tile character {char!r} at ({x}, {y})")
                level.set_tile(x, y, self.ascii_map[char])

        return level

    def set_custom_mapping(self, ascii_char: str, tile_type: TileType):
        """Set a custom ASCII character to tile type mapping."""
        self.ascii_map[ascii_char] = tile_type

    def get_ascii_representation(self, level: Level) -> List[str]:
        """
        Convert a level back to ASCII lines.
        Useful for debugging and test fixtures.
        """
        reverse_map = {tile_type: char for char, tile_type in self.ascii_map.items()}
        return [
            "".join(reverse_map.get(level.get_tile(x, y), '?') for x in range(level.width))
            for y in range(level.height)
        ]
