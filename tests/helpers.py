"""Assertions shared by the generator tests."""

from src.level.grid_types import DIRECTIONS, SideType


def assert_sides(room, x, y, expected_sides):
    cell = room.cell_at(x, y)
    for direction, expected in expected_sides.items():
        actual = cell.get_side(direction)
        assert actual == expected, (
            f"{direction.label} side of ({x}, {y}) should be {expected.name}, got {actual.name}!"
        )


def assert_twin_consistent(room):
    for cell in room.cells:
        for direction in DIRECTIONS:
            adjacent = room.adjacent_cell(cell.x, cell.y, direction)
            if adjacent is None:
                continue
            assert cell.get_side(direction) == adjacent.get_side(direction.opposite), (
                f"{direction.label} side of ({cell.x}, {cell.y}) does not match its neighbour"
            )


def create_corridor_in_all_directions(room, x, y):
    """
    Open all four sides of (x, y).

    Legend: X wall, O empty, . centre

             x-1  x  x+1
            X   X   X
      y-1  X.X X.X X.X
            X   O   X

            X   O   X
       y   X.O O.O O.X
            X   O   X

            X   O   X
      y+1  X.X X.X X.X
            X   X   X
    """
    for direction in DIRECTIONS:
        room.set_cell_side(x, y, direction, SideType.EMPTY)


def corridor_component(room, start):
    """Coordinates reachable from `start` through empty sides."""
    seen = {(start.x, start.y)}
    stack = [start]
    while stack:
        cell = stack.pop()
        for direction in DIRECTIONS:
            if cell.get_side(direction) != SideType.EMPTY:
                continue
            adjacent = room.adjacent_cell(cell.x, cell.y, direction)
            if adjacent is not None and (adjacent.x, adjacent.y) not in seen:
                seen.add((adjacent.x, adjacent.y))
                stack.append(adjacent)
    return seen
