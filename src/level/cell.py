from dataclasses import dataclass, field
from typing import Dict

from src.core.errors import InvalidArgumentError, InvalidStateError
from src.level.grid_types import DIRECTIONS, DirectionType, SideType


def _solid_sides() -> Dict[DirectionType, SideType]:
    return {direction: SideType.WALL for direction in DIRECTIONS}


@dataclass(eq=False)
class Cell:
    """
    Smallest addressable unit of a room.

    A cell starts as solid rock (walls on all four sides). Side states must
    only be changed through the owning Room so that the neighbouring cell is
    kept in sync; `set_side` here touches this cell alone.

    Attributes:
        x: Horizontal position in level coordinates
        y: Vertical position in level coordinates
        sides: State of each of the four sides
        visited: Set by the maze carver once the cell joins the maze

    Cells compare equal by position. Key lookups by `(x, y)` instead of by
    cell, since `CellGrid.move_to` rewrites the coordinates in place.
    """
    x: int = 0
    y: int = 0
    sides: Dict[DirectionType, SideType] = field(default_factory=_solid_sides)
    visited: bool = False

    def __post_init__(self):
        if self.x < 0 or self.y < 0:
            raise InvalidArgumentError(
                f"Invalid co-ordinates ({self.x}, {self.y}). x and y must be >= 0"
            )

    def __eq__(self, other) -> bool:
        if isinstance(other, Cell):
            return self.x == other.x and self.y == other.y
        return NotImplemented

    # Coordinates change when a room is moved, so cells are not hashable
    __hash__ = None

    def __repr__(self) -> str:
        sides = "".join(self.sides[d].name[0] for d in DIRECTIONS)
        return f"Cell(x={self.x}, y={self.y}, sides={sides}, visited={self.visited})"

    def get_side(self, direction: DirectionType) -> SideType:
        return self.sides[direction]

    def set_side(self, direction: DirectionType, side: SideType) -> None:
        self.sides[direction] = side

    @property
    def wall_count(self) -> int:
        """Number of sides that are walls."""
        return sum(1 for side in self.sides.values() if side == SideType.WALL)

    @property
    def is_corridor(self) -> bool:
        """A corridor has at least one empty side. Doors do not count."""
        return any(side == SideType.EMPTY for side in self.sides.values())

    @property
    def is_dead_end(self) -> bool:
        """A dead end has exactly three walls."""
        return self.wall_count == 3

    @property
    def is_solid(self) -> bool:
        return self.wall_count == len(DIRECTIONS)

    @property
    def dead_end_corridor_direction(self) -> DirectionType:
        """Direction of the single open side of a dead-end cell."""
        if not self.is_dead_end:
            raise InvalidStateError(
                f"Cannot get dead end corridor direction for non dead end cell ({self.x}, {self.y})!"
            )

        for direction in DIRECTIONS:
            if self.sides[direction] == SideType.EMPTY:
                return direction

        raise InvalidStateError(
            f"Dead end cell ({self.x}, {self.y}) has no empty side!"
        )
