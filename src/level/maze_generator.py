"""
Maze carving for cell-based levels.

Carves a spanning tree of corridors through a solid room with a randomized
growing-tree walk, then seals a share of the dead ends back into rock.
"""

import logging
import math
import random
from typing import Optional

from src.core.errors import InvalidArgumentError, InvalidStateError
from src.level.cell import Cell
from src.level.direction_picker import DirectionPicker
from src.level.grid_types import DirectionType, SideType
from src.level.room import Room

logger = logging.getLogger(__name__)


class MazeGenerator:
    """
    Args:
        randomness: 0 - 100, how often corridors change direction
        sparseness: 0 - 100, percentage of cells turned back into solid rock
        rng: Random source shared with the rest of the generation run
    """

    def __init__(self, randomness: int, sparseness: int, rng: Optional[random.Random] = None):
        if randomness < 0 or randomness > 100:
            raise InvalidArgumentError("randomness must be between 0 and 100!")

        if sparseness < 0 or sparseness > 100:
            raise InvalidArgumentError("sparseness must be between 0 and 100!")

        self.randomness = randomness
        self.sparseness = sparseness
        self.rng = rng or random.Random()

    def generate(self, top: int, left: int, width: int, height: int) -> Room:
        """Build a solid room of the given bounds and carve a sparse maze into it."""
        room = Room.filled(top, left, width, height)
        self._create_dense_maze(room)
        self._make_sparse(room)

        logger.debug("Generated %dx%d maze (randomness=%d, sparseness=%d)",
                     width, height, self.randomness, self.sparseness)
        return room

    def remove_dead_ends(self, room: Room, dead_end_removal_modifier: int) -> int:
        """
        Extend dead ends into new corridors until they join open space.

        Each dead end present when this is called is extended with a chance
        of `dead_end_removal_modifier` percent. At 100 every dead end goes.

        Returns:
            The number of dead ends that were extended.
        """
        if dead_end_removal_modifier < 0 or dead_end_removal_modifier > 100:
            raise InvalidArgumentError("dead_end_removal_modifier must be between 0 and 100!")

        picker = DirectionPicker(DirectionType.NORTH, 100, rng=self.rng)
        removed = 0

        for cell in room.dead_end_cells():
            if self.rng.randint(1, 99) >= dead_end_removal_modifier:
                continue
            # An earlier extension may already have run into this cell
            if not cell.is_dead_end:
                continue

            current: Optional[Cell] = cell
            while current is not None and current.is_dead_end:
                # Never head back down the corridor we came from
                picker.reset(current.dead_end_corridor_direction)
                direction = picker.next_direction()
                while not room.has_adjacent_cell(current.x, current.y, direction):
                    direction = picker.next_direction()

                current = room.set_cell_side(current.x, current.y, direction, SideType.EMPTY)
            removed += 1

        logger.debug("Removed %d dead ends (modifier=%d)", removed, dead_end_removal_modifier)
        return removed

    def _create_dense_maze(self, room: Room) -> None:
        current = self._random_cell(room)
        current.visited = True
        unvisited = room.width * room.height - 1

        previous_direction = DirectionType.NORTH
        picker = DirectionPicker(previous_direction, self.randomness, rng=self.rng)

        while unvisited > 0:
            direction = picker.next_direction()

            while not self._can_carve(room, current, direction):
                if picker.has_next_direction():
                    direction = picker.next_direction()
                else:
                    # Dead branch: resume from some other cell already in the maze
                    current = self._random_visited_cell_excluding(room, current.x, current.y)
                    picker.reset(previous_direction)
                    direction = picker.next_direction()

            current = room.set_cell_side(current.x, current.y, direction, SideType.EMPTY)
            current.visited = True
            unvisited -= 1

            previous_direction = direction
            picker.reset(previous_direction)

    @staticmethod
    def _can_carve(room: Room, cell: Cell, direction: DirectionType) -> bool:
        adjacent = room.adjacent_cell(cell.x, cell.y, direction)
        return adjacent is not None and not adjacent.visited

    def _make_sparse(self, room: Room) -> None:
        target = math.ceil(room.width * room.height * self.sparseness / 100)

        dead_ends = iter(room.dead_end_cells())
        for _ in range(target):
            cell = next(dead_ends, None)
            if cell is None:
                # Sealing a dead end can expose a new one further up the corridor
                dead_ends = iter(room.dead_end_cells())
                cell = next(dead_ends, None)
                if cell is None:
                    break

            if cell.is_dead_end:
                room.set_cell_side(cell.x, cell.y, cell.dead_end_corridor_direction, SideType.WALL)

    def _random_cell(self, room: Room) -> Cell:
        x = self.rng.randint(room.left, room.right - 1)
        y = self.rng.randint(room.top, room.bottom - 1)
        return room.cell_at(x, y)

    def _random_visited_cell_excluding(self, room: Room, x: int, y: int) -> Cell:
        if room.is_out_of_bounds(x, y):
            raise InvalidStateError(f"({x}, {y}) is out of bounds!")

        candidates = [cell for cell in room.visited_cells() if not (cell.x == x and cell.y == y)]
        if not candidates:
            raise InvalidStateError("There are no visited cells to return.")

        return self.rng.choice(candidates)
