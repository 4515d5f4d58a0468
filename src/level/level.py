from typing import List

import pygame

from config import TILE
from src.core.errors import InvalidArgumentError, OutOfBoundsError
from src.tiles.tile_types import TileType


class Level:
    """
    Expanded tile grid handed to rendering and collision.

    The grid always starts at (0, 0) and every tile begins as a wall.

    Attributes:
        width: Number of tile columns
        height: Number of tile rows
        grid: Rows of TileType, indexed grid[y][x]
    """

    def __init__(self, width: int, height: int):
        if width < 1 or height < 1:
            raise InvalidArgumentError("width and height must be > 0")

        self.width = width
        self.height = height
        self.grid: List[List[TileType]] = [[TileType.WALL] * width for _ in range(height)]

    def is_out_of_bounds(self, x: int, y: int) -> bool:
        return x < 0 or y < 0 or x >= self.width or y >= self.height

    def get_tile(self, x: int, y: int) -> TileType:
        if self.is_out_of_bounds(x, y):
            raise OutOfBoundsError(f"Tile ({x}, {y}) is out of bounds!")
        return self.grid[y][x]

    def set_tile(self, x: int, y: int, tile_type: TileType) -> None:
        if self.is_out_of_bounds(x, y):
            raise OutOfBoundsError(f"Tile ({x}, {y}) is out of bounds!")
        self.grid[y][x] = tile_type

    def count(self, tile_type: TileType) -> int:
        return sum(row.count(tile_type) for row in self.grid)

    def solid_rects(self, tile_size: int = TILE) -> List[pygame.Rect]:
        """
        Collision rectangles, in pixels, for every solid tile.

        Export for a host engine's collision code. Nothing in this package
        calls it; generation only works on the tile grid.
        """
        solids = []
        for y, row in enumerate(self.grid):
            for x, tile_type in enumerate(row):
                if tile_type.is_solid:
                    solids.append(pygame.Rect(x * tile_size, y * tile_size, tile_size, tile_size))
        return solids

    def door_rects(self, tile_size: int = TILE) -> List[pygame.Rect]:
        """Pixel rectangles for every door tile. Export only, like solid_rects."""
        return [
            pygame.Rect(x * tile_size, y * tile_size, tile_size, tile_size)
            for y, row in enumerate(self.grid)
            for x, tile_type in enumerate(row)
            if tile_type == TileType.DOOR
        ]

    def __repr__(self) -> str:
        return f"Level(width={self.width}, height={self.height})"

    def __str__(self) -> str:
        return "\n".join("".join(tile.symbol for tile in row) for row in self.grid) + "\n"
