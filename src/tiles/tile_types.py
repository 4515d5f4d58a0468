from enum import IntEnum


class TileType(IntEnum):
    """Enumeration of all tile types in an expanded level."""

    UNDEFINED = -1
    WALL = 0
    EMPTY = 1
    DOOR = 2

    @property
    def is_solid(self) -> bool:
        """Return True if tile blocks movement completely."""
        return self == TileType.WALL

    @property
    def has_collision(self) -> bool:
        """Return True if tile has any collision (walls and closed doors).

        Meant for a host engine reading the Level; the generators only use is_solid.
        """
        return self in (TileType.WALL, TileType.DOOR)

    @property
    def symbol(self) -> str:
        """Single character used by the ASCII dumps."""
        return TILE_SYMBOLS[self]


TILE_SYMBOLS = {
    TileType.UNDEFINED: ' ',
    TileType.WALL: '#',
    TileType.EMPTY: '.',
    TileType.DOOR: '+',
}
