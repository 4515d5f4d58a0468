# src/core/constants.py
"""
Global constants for level generation, including glyph definitions and coordinate system rules.

Coordinate System:
- Origin: Top-left corner of the level.
- X-axis: Increases from left to right (0 to W-1).
- Y-axis: Increases from top to bottom (0 to H-1). NORTH is y - 1.

Cell/tile mapping:
- A cell at (x, y) expands to the tile at (2x + 1, 2y + 1).
- Each side of a cell owns the tile one step outward; neighbouring cells share it.
"""
from src.tiles.tile_types import TileType

# === Tile Character Definitions ===
# The canonical mapping of ASCII characters to tile types.
# The tile parser uses this as the source of truth.
TILE_CHAR_MAP = {
    '#': TileType.WALL,
    '.': TileType.EMPTY,
    '+': TileType.DOOR,
    ' ': TileType.UNDEFINED,
}

# === Room Dump Glyphs ===
# Each cell is drawn as a 3x3 block: corners, one glyph per side, and a centre.
SIDE_WALL_CHAR = '#'
SIDE_EMPTY_CHAR = '.'
SIDE_DOOR_CHAR = '+'
CELL_OPEN_CHAR = '.'
CELL_SOLID_CHAR = '#'

# Number of tiles a single cell expands to along one axis, before the shared border.
CELL_TILE_SCALE = 2
