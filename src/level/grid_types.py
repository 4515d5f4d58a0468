"""Direction and side-state enumerations shared by cells, rooms and generators."""

from enum import Enum, IntEnum
from typing import Tuple

from src.tiles.tile_types import TileType


class DirectionType(Enum):
    """The four cardinal directions, in the order the generators iterate them."""

    NORTH = 0
    WEST = 1
    SOUTH = 2
    EAST = 3

    @property
    def opposite(self) -> "DirectionType":
        return _OPPOSITES[self]

    @property
    def offset(self) -> Tuple[int, int]:
        """(dx, dy) step to the neighbouring cell; y grows downwards."""
        return _OFFSETS[self]

    @property
    def label(self) -> str:
        return self.name.capitalize()


_OPPOSITES = {
    DirectionType.NORTH: DirectionType.SOUTH,
    DirectionType.SOUTH: DirectionType.NORTH,
    DirectionType.WEST: DirectionType.EAST,
    DirectionType.EAST: DirectionType.WEST,
}

_OFFSETS = {
    DirectionType.NORTH: (0, -1),
    DirectionType.WEST: (-1, 0),
    DirectionType.SOUTH: (0, 1),
    DirectionType.EAST: (1, 0),
}

DIRECTIONS = tuple(DirectionType)
DIRECTION_COUNT = len(DIRECTIONS)


class SideType(IntEnum):
    """State of one side of a cell."""

    WALL = 0
    EMPTY = 1
    DOOR = 2

    def to_tile_type(self) -> TileType:
        # Side and tile values line up one to one
        return TileType(self.value)

    @property
    def is_open(self) -> bool:
        """True for sides that expand into a passable or door tile."""
        return self != SideType.WALL
