"""
Level Generator - Main orchestrator for maze-and-rooms level generation

Pipeline: maze -> (optional dead-end removal) -> rooms -> doors -> tiles.
"""

import logging
import random
import time
from typing import Optional

from src.core.constants import CELL_TILE_SCALE
from src.core.errors import LevelGenerationError
from src.level.config_loader import LevelGenConfig
from src.level.grid_types import DIRECTIONS
from src.level.level import Level
from src.level.maze_generator import MazeGenerator
from src.level.room import Room
from src.level.room_generator import RoomGenerator
from src.tiles.tile_types import TileType

logger = logging.getLogger(__name__)


class LevelGenerator:
    """Drives the cell generators and expands the result into a tile Level."""

    @staticmethod
    def generate(width: int, height: int,
                 maze_generator: MazeGenerator,
                 room_generator: RoomGenerator,
                 num_rooms: int,
                 dead_end_removal: int = 0) -> Level:
        """
        Generate a complete level

        Args:
            width: Level width in cells
            height: Level height in cells
            maze_generator: Carves the corridors
            room_generator: Places rooms and cuts doors
            num_rooms: Number of rooms to place
            dead_end_removal: 0 - 100 chance to extend each dead end before rooms are placed

        Returns:
            Level of (2 * width + 1) x (2 * height + 1) tiles
        """
        start_time = time.time()
        stage = "maze"
        try:
            room = maze_generator.generate(0, 0, width, height)
            logger.debug("Generated maze:\n%s", room)

            if dead_end_removal > 0:
                stage = "dead ends"
                maze_generator.remove_dead_ends(room, dead_end_removal)
                logger.debug("After dead ends are removed:\n%s", room)

            stage = "rooms"
            room_generator.create_rooms(room, num_rooms)
            logger.debug("After rooms are placed:\n%s", room)

            stage = "doors"
            doors = room_generator.create_doors(room)
            logger.debug("After doors are placed:\n%s", room)

            stage = "tiles"
            level = LevelGenerator.expand_to_tiles(room)
            logger.debug("After expanding to tiles:\n%s", level)
        except LevelGenerationError:
            logger.error("Level generation failed during %s stage (%dx%d, %d rooms)",
                         stage, width, height, num_rooms)
            raise

        elapsed_ms = (time.time() - start_time) * 1000
        logger.info("Generated %dx%d level: %d rooms, %d doors in %.1f ms",
                    level.width, level.height, len(room.rooms), doors, elapsed_ms)
        return level

    @staticmethod
    def expand_to_tiles(room: Room) -> Level:
        """
        Expand a cell room into a tile level.

        Every cell becomes the tile at (2x + 1, 2y + 1) and each side becomes
        the tile between two cells, so the level is 2 * size + 1 on each axis
        with a ring of rock around it.
        """
        level = Level(room.width * CELL_TILE_SCALE + 1, room.height * CELL_TILE_SCALE + 1)

        # Open up the interior of every placed room
        for inner in room.rooms:
            min_x = (inner.left - room.left) * CELL_TILE_SCALE + 1
            min_y = (inner.top - room.top) * CELL_TILE_SCALE + 1
            max_x = (inner.right - room.left) * CELL_TILE_SCALE
            max_y = (inner.bottom - room.top) * CELL_TILE_SCALE

            for y in range(min_y, max_y):
                for x in range(min_x, max_x):
                    level.set_tile(x, y, TileType.EMPTY)

        for cell in room.corridor_cells():
            tile_x = (cell.x - room.left) * CELL_TILE_SCALE + 1
            tile_y = (cell.y - room.top) * CELL_TILE_SCALE + 1
            level.set_tile(tile_x, tile_y, TileType.EMPTY)

            for direction in DIRECTIONS:
                side = cell.get_side(direction)
                if side.is_open:
                    dx, dy = direction.offset
                    level.set_tile(tile_x + dx, tile_y + dy, side.to_tile_type())

        return level


def generate_level(config: Optional[LevelGenConfig] = None,
                   rng: Optional[random.Random] = None) -> Level:
    """
    Build the generators from a LevelGenConfig and run the whole pipeline.

    A single random source is shared by every generator, so the same seed
    always reproduces the same level.
    """
    config = config or LevelGenConfig()
    config.validate()
    rng = rng or random.Random(config.seed)

    maze_generator = MazeGenerator(config.randomness, config.sparseness, rng=rng)
    room_generator = RoomGenerator(
        config.room_min_width, config.room_max_width,
        config.room_min_height, config.room_max_height,
        rng=rng,
    )
    return LevelGenerator.generate(
        config.width, config.height,
        maze_generator, room_generator,
        config.num_rooms,
        dead_end_removal=config.dead_end_removal,
    )
