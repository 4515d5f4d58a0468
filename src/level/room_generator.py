"""
Room placement and door cutting.

Rooms are dropped onto the corridor cell where they score lowest: touching
corridors is cheap, covering corridors costs a little more and overlapping an
already placed room costs a lot. Doors are then cut wherever a room's edge
faces a corridor, and doors that sit side by side onto the same corridor are
thinned out.
"""

import logging
import random
import sys
from typing import Optional

from src.core.errors import InvalidArgumentError, InvalidStateError
from src.level.cell import Cell
from src.level.grid_types import DIRECTIONS, DirectionType, SideType
from src.level.room import Room

logger = logging.getLogger(__name__)

# Score returned for a placement that does not fit in the container
IMPOSSIBLE_PLACEMENT_SCORE = sys.maxsize

ADJACENT_CORRIDOR_SCORE = 1
OVERLAPPED_CORRIDOR_SCORE = 3
OVERLAPPED_ROOM_SCORE = 100


def get_room_placement_score(container: Room, room: Room, x: int, y: int) -> int:
    """
    Score placing `room` with its origin at (x, y) inside `container`.

    Lower is better. Every cell of the room, translated to (x, y), earns:
    - +1 for each neighbouring container cell that is a corridor
    - +3 if the container cell under it is a corridor
    - +100 for each room already placed in the container that covers it
    """
    if not container.fits(room, x, y):
        return IMPOSSIBLE_PLACEMENT_SCORE

    score = 0
    existing_rooms = [existing.rect for existing in container.rooms]

    for j in range(room.height):
        for i in range(room.width):
            translated_x = x + i
            translated_y = y + j

            for direction in DIRECTIONS:
                if container.is_adjacent_cell_corridor(translated_x, translated_y, direction):
                    score += ADJACENT_CORRIDOR_SCORE

            if container.cell_at(translated_x, translated_y).is_corridor:
                score += OVERLAPPED_CORRIDOR_SCORE

            for rect in existing_rooms:
                if rect.collidepoint(translated_x, translated_y):
                    score += OVERLAPPED_ROOM_SCORE

    return score


class RoomGenerator:
    """
    Places randomly sized rooms into a carved maze and connects them with doors.

    Args:
        min_width, max_width: Inclusive range for room widths, in cells
        min_height, max_height: Inclusive range for room heights, in cells
        rng: Random source shared with the rest of the generation run
    """

    def __init__(self, min_width: int, max_width: int, min_height: int, max_height: int,
                 rng: Optional[random.Random] = None):
        _validate_range("width", min_width, max_width)
        _validate_range("height", min_height, max_height)

        self.min_width = min_width
        self.max_width = max_width
        self.min_height = min_height
        self.max_height = max_height
        self.rng = rng or random.Random()

    get_room_placement_score = staticmethod(get_room_placement_score)

    def create_rooms(self, container: Room, num_rooms: int,
                     min_width: Optional[int] = None, max_width: Optional[int] = None,
                     min_height: Optional[int] = None, max_height: Optional[int] = None) -> None:
        """
        Place `num_rooms` walled rooms into `container`, each at its best scoring corridor cell.

        Size ranges default to the ones given to the constructor.
        """
        min_width = self.min_width if min_width is None else min_width
        max_width = self.max_width if max_width is None else max_width
        min_height = self.min_height if min_height is None else min_height
        max_height = self.max_height if max_height is None else max_height
        _validate_range("width", min_width, max_width)
        _validate_range("height", min_height, max_height)

        for _ in range(num_rooms):
            width = self.rng.randint(min_width, max_width)
            height = self.rng.randint(min_height, max_height)
            room = Room.walled(0, 0, width, height)

            # Rooms always start out touching a corridor
            corridor_cells = container.corridor_cells()
            if not corridor_cells:
                raise InvalidStateError("Cannot place rooms if map has no corridors!")

            best_score = IMPOSSIBLE_PLACEMENT_SCORE
            best_x = best_y = -1
            for cell in corridor_cells:
                score = get_room_placement_score(container, room, cell.x, cell.y)
                if score < best_score:
                    best_score = score
                    best_x, best_y = cell.x, cell.y

            if best_x < 0 or best_y < 0:
                raise InvalidStateError(
                    f"No corridor cell can hold a {width}x{height} room!"
                )

            container.add_room(room, best_x, best_y)
            logger.debug("Room %d: %dx%d at (%d, %d), score %d",
                         len(container.rooms), width, height, best_x, best_y, best_score)

    @staticmethod
    def create_doors(room: Room) -> int:
        """
        Cut doors wherever a placed room's edge faces a corridor.

        Returns:
            The number of doors left standing.
        """
        for inner in room.rooms:
            for cell in inner.cells:
                x, y = cell.x, cell.y

                if y == inner.top and room.is_adjacent_cell_corridor(x, y, DirectionType.NORTH):
                    room.set_cell_side(x, y, DirectionType.NORTH, SideType.DOOR)

                if x == inner.left and room.is_adjacent_cell_corridor(x, y, DirectionType.WEST):
                    room.set_cell_side(x, y, DirectionType.WEST, SideType.DOOR)

                if y == inner.bottom - 1 and room.is_adjacent_cell_corridor(x, y, DirectionType.SOUTH):
                    room.set_cell_side(x, y, DirectionType.SOUTH, SideType.DOOR)

                if x == inner.right - 1 and room.is_adjacent_cell_corridor(x, y, DirectionType.EAST):
                    room.set_cell_side(x, y, DirectionType.EAST, SideType.DOOR)

                _remove_redundant_doors(room, cell)

        doors = sum(
            1 for inner in room.rooms for cell in inner.cells
            for direction in DIRECTIONS
            if _is_outer_side(inner, cell, direction) and cell.get_side(direction) == SideType.DOOR
        )
        logger.debug("Cut %d doors into %d rooms", doors, len(room.rooms))
        return doors


# Door facing -> the two directions along the wall it sits in
_DOOR_NEIGHBOURS = {
    DirectionType.NORTH: (DirectionType.WEST, DirectionType.EAST),
    DirectionType.SOUTH: (DirectionType.WEST, DirectionType.EAST),
    DirectionType.WEST: (DirectionType.NORTH, DirectionType.SOUTH),
    DirectionType.EAST: (DirectionType.NORTH, DirectionType.SOUTH),
}


def _remove_redundant_doors(room: Room, cell: Cell) -> None:
    """
    Wall up doors next to `cell` that lead into the same corridor as its own.

    For a door on the north side of `cell`, a north door on the cell to its
    west is redundant if the cell outside `cell`'s door is a corridor to its
    west as well; the same goes for the east neighbour. South, west and east
    doors are handled the same way. The neighbour's door is the one removed.
    """
    for facing, along in _DOOR_NEIGHBOURS.items():
        if cell.get_side(facing) != SideType.DOOR:
            continue

        outside = room.adjacent_cell(cell.x, cell.y, facing)
        if outside is None:
            raise InvalidStateError(
                f"The cell to the {facing.label.lower()} cannot possibly be missing "
                f"if the {facing.label.lower()} side of ({cell.x}, {cell.y}) is a door!"
            )

        for side in along:
            neighbour = room.adjacent_cell(cell.x, cell.y, side)
            if neighbour is None or neighbour.get_side(facing) != SideType.DOOR:
                continue

            if room.is_adjacent_cell_corridor(outside.x, outside.y, side):
                room.set_cell_side(neighbour.x, neighbour.y, facing, SideType.WALL)


def _is_outer_side(room: Room, cell: Cell, direction: DirectionType) -> bool:
    dx, dy = direction.offset
    return room.is_out_of_bounds(cell.x + dx, cell.y + dy)


def _validate_range(name: str, minimum: int, maximum: int) -> None:
    if minimum < 1 or minimum > maximum:
        raise InvalidArgumentError(
            f"Invalid room {name} range [{minimum}, {maximum}]. Need 1 <= min <= max"
        )
