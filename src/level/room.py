"""Rooms: rectangular views onto a grid of cells.

A free-standing room owns the CellGrid it was created with. Once a room is
placed inside a container with `add_room`, its side states are written into the
container's grid and the room is re-bound to that grid, so the container and
its child rooms always read and write the same cells.
"""

import logging
from typing import Iterator, List, Optional

import pygame

from src.core.constants import (
    CELL_OPEN_CHAR,
    CELL_SOLID_CHAR,
    SIDE_DOOR_CHAR,
    SIDE_EMPTY_CHAR,
    SIDE_WALL_CHAR,
)
from src.core.errors import InvalidArgumentError, InvalidStateError, OutOfBoundsError
from src.level.cell import Cell
from src.level.grid_types import DIRECTIONS, DirectionType, SideType

logger = logging.getLogger(__name__)

SIDE_CHARS = {
    SideType.WALL: SIDE_WALL_CHAR,
    SideType.EMPTY: SIDE_EMPTY_CHAR,
    SideType.DOOR: SIDE_DOOR_CHAR,
}


class CellGrid:
    """Dense block of cells stored row by row from an origin."""

    def __init__(self, top: int, left: int, width: int, height: int):
        self.top = top
        self.left = left
        self.width = width
        self.height = height
        self.cells: List[Cell] = [
            Cell(left + x, top + y) for y in range(height) for x in range(width)
        ]

    def contains(self, x: int, y: int) -> bool:
        return (self.left <= x < self.left + self.width
                and self.top <= y < self.top + self.height)

    def cell_at(self, x: int, y: int) -> Cell:
        if not self.contains(x, y):
            raise OutOfBoundsError(f"({x}, {y}) is out of bounds!")
        return self.cells[(y - self.top) * self.width + (x - self.left)]

    def move_to(self, x: int, y: int) -> None:
        """Shift the grid origin to (x, y), relocating every cell with it."""
        dx = x - self.left
        dy = y - self.top
        if dx == 0 and dy == 0:
            return

        for cell in self.cells:
            cell.x += dx
            cell.y += dy
        self.left = x
        self.top = y


class Room:
    """
    Rectangular region of cells plus the rooms placed inside it.

    `set_cell_side` is the only way generators change side states. It keeps
    a cell and its neighbour inside this room's bounds in agreement: setting
    the east side of (x, y) also sets the west side of (x + 1, y).
    """

    def __init__(self, top: int, left: int, width: int, height: int):
        if top < 0 or left < 0 or width < 1 or height < 1:
            raise InvalidArgumentError(
                "Invalid bounds specified. top and left must be >= 0. width and height must be > 0"
            )

        self.width = width
        self.height = height
        self._top = top
        self._left = left
        self.grid = CellGrid(top, left, width, height)
        self._owns_grid = True
        self.rooms: List["Room"] = []

    # --- Factories ---------------------------------------------------------

    @classmethod
    def filled(cls, top: int, left: int, width: int, height: int) -> "Room":
        """Room made of solid rock: every side of every cell is a wall."""
        return cls(top, left, width, height)

    @classmethod
    def empty(cls, top: int, left: int, width: int, height: int) -> "Room":
        """Room with every side of every cell open, including the outer edge."""
        room = cls.filled(top, left, width, height)
        for cell in room.cells:
            for direction in DIRECTIONS:
                cell.set_side(direction, SideType.EMPTY)
        return room

    @classmethod
    def walled(cls, top: int, left: int, width: int, height: int) -> "Room":
        """Open interior enclosed by walls on the four outer edges."""
        room = cls.empty(top, left, width, height)
        right = left + width
        bottom = top + height

        for y in range(top, bottom):
            room.set_cell_side(left, y, DirectionType.WEST, SideType.WALL)
            room.set_cell_side(right - 1, y, DirectionType.EAST, SideType.WALL)

        for x in range(left, right):
            room.set_cell_side(x, top, DirectionType.NORTH, SideType.WALL)
            room.set_cell_side(x, bottom - 1, DirectionType.SOUTH, SideType.WALL)

        return room

    # --- Bounds --------------------------------------------------------------

    @property
    def top(self) -> int:
        return self._top

    @property
    def left(self) -> int:
        return self._left

    @property
    def right(self) -> int:
        """Exclusive right bound."""
        return self._left + self.width

    @property
    def bottom(self) -> int:
        """Exclusive bottom bound."""
        return self._top + self.height

    @property
    def rect(self) -> pygame.Rect:
        """Room bounds in cell units."""
        return pygame.Rect(self._left, self._top, self.width, self.height)

    @property
    def owns_grid(self) -> bool:
        """False once the room has been placed inside a container."""
        return self._owns_grid

    def is_out_of_bounds(self, x: int, y: int) -> bool:
        return x < self._left or y < self._top or x >= self.right or y >= self.bottom

    def fits(self, room: "Room", x: int, y: int) -> bool:
        """True if `room` placed with its origin at (x, y) lies inside this room."""
        return (self._left <= x and self._top <= y
                and x + room.width <= self.right and y + room.height <= self.bottom)

    def move_to(self, x: int, y: int) -> None:
        """Relocate a free-standing room so that its origin is (x, y)."""
        if not self.owns_grid:
            raise InvalidStateError("Cannot move a room that has been placed inside another room!")
        if x < 0 or y < 0:
            raise InvalidArgumentError(f"Invalid origin ({x}, {y}). x and y must be >= 0")
        self.grid.move_to(x, y)
        self._left = x
        self._top = y

    def _bind(self, grid: CellGrid, x: int, y: int) -> None:
        self.grid = grid
        self._owns_grid = False
        self._left = x
        self._top = y

    # --- Cell access ---------------------------------------------------------

    def cell_at(self, x: int, y: int) -> Cell:
        if self.is_out_of_bounds(x, y):
            raise OutOfBoundsError(f"({x}, {y}) is out of bounds!")
        return self.grid.cell_at(x, y)

    @property
    def cells(self) -> Iterator[Cell]:
        """Every cell of the room, row by row from the top-left corner."""
        for y in range(self._top, self.bottom):
            for x in range(self._left, self.right):
                yield self.grid.cell_at(x, y)

    def has_adjacent_cell(self, x: int, y: int, direction: DirectionType) -> bool:
        if self.is_out_of_bounds(x, y):
            raise OutOfBoundsError(f"({x}, {y}) is out of bounds!")

        dx, dy = direction.offset
        return not self.is_out_of_bounds(x + dx, y + dy)

    def adjacent_cell(self, x: int, y: int, direction: DirectionType) -> Optional[Cell]:
        """Neighbour of (x, y) in `direction`, or None at the room's edge."""
        if not self.has_adjacent_cell(x, y, direction):
            return None

        dx, dy = direction.offset
        return self.grid.cell_at(x + dx, y + dy)

    def is_adjacent_cell_corridor(self, x: int, y: int, direction: DirectionType) -> bool:
        adjacent = self.adjacent_cell(x, y, direction)
        return adjacent is not None and adjacent.is_corridor

    def corridor_cells(self) -> List[Cell]:
        return [cell for cell in self.cells if cell.is_corridor]

    def dead_end_cells(self) -> List[Cell]:
        return [cell for cell in self.cells if cell.is_dead_end]

    def visited_cells(self) -> List[Cell]:
        return [cell for cell in self.cells if cell.visited]

    def is_all_cells_visited(self) -> bool:
        return all(cell.visited for cell in self.cells)

    # --- Mutation ------------------------------------------------------------

    def set_cell_side(self, x: int, y: int, direction: DirectionType, side: SideType) -> Optional[Cell]:
        """
        Set one side of the cell at (x, y) and the facing side of its neighbour.

        Returns:
            The neighbouring cell in `direction`, or None if (x, y) is on the
            room's edge in that direction.
        """
        cell = self.cell_at(x, y)
        cell.set_side(direction, side)

        adjacent = self.adjacent_cell(x, y, direction)
        if adjacent is not None:
            adjacent.set_side(direction.opposite, side)
        return adjacent

    def add_room(self, room: "Room", x: int, y: int) -> None:
        """
        Place `room` inside this room with its origin at (x, y).

        The room's side states overwrite the cells underneath it, the room is
        re-bound to this room's grid, and its outer edges are walled off from
        the surrounding cells.
        """
        if not self.fits(room, x, y):
            raise InvalidArgumentError(f"Room at ({x}, {y}) will not fit!")

        for j in range(room.height):
            for i in range(room.width):
                source = room.cell_at(room.left + i, room.top + j)
                target = self.cell_at(x + i, y + j)
                target.sides = dict(source.sides)
                target.visited = source.visited

        room._bind(self.grid, x, y)

        for cell in room.cells:
            if cell.y == y and self.has_adjacent_cell(cell.x, cell.y, DirectionType.NORTH):
                self.set_cell_side(cell.x, cell.y, DirectionType.NORTH, SideType.WALL)

            if cell.x == x and self.has_adjacent_cell(cell.x, cell.y, DirectionType.WEST):
                self.set_cell_side(cell.x, cell.y, DirectionType.WEST, SideType.WALL)

            if cell.y == room.bottom - 1 and self.has_adjacent_cell(cell.x, cell.y, DirectionType.SOUTH):
                self.set_cell_side(cell.x, cell.y, DirectionType.SOUTH, SideType.WALL)

            if cell.x == room.right - 1 and self.has_adjacent_cell(cell.x, cell.y, DirectionType.EAST):
                self.set_cell_side(cell.x, cell.y, DirectionType.EAST, SideType.WALL)

        self.rooms.append(room)
        logger.debug("Placed %dx%d room at (%d, %d)", room.width, room.height, x, y)

    # --- Debug ---------------------------------------------------------------

    def __repr__(self) -> str:
        return f"Room(top={self._top}, left={self._left}, width={self.width}, height={self.height})"

    def __str__(self) -> str:
        lines = [f"Origin = ({self._left}, {self._top})"]

        for y in range(self._top, self.bottom):
            upper, middle, lower = [], [], []
            for x in range(self._left, self.right):
                cell = self.grid.cell_at(x, y)
                north = cell.get_side(DirectionType.NORTH)
                west = cell.get_side(DirectionType.WEST)
                south = cell.get_side(DirectionType.SOUTH)
                east = cell.get_side(DirectionType.EAST)

                upper.append(_corner(north, west) + SIDE_CHARS[north] + _corner(north, east))
                middle.append(SIDE_CHARS[west]
                              + (CELL_SOLID_CHAR if cell.is_solid else CELL_OPEN_CHAR)
                              + SIDE_CHARS[east])
                lower.append(_corner(south, west) + SIDE_CHARS[south] + _corner(south, east))

            lines.extend(("".join(upper), "".join(middle), "".join(lower)))

        return "\n".join(lines) + "\n"


def _corner(first: SideType, second: SideType) -> str:
    if first == SideType.EMPTY and second == SideType.EMPTY:
        return SIDE_EMPTY_CHAR
    return SIDE_WALL_CHAR
