import pygame
import pytest

from config import TILE
from src.core.errors import InvalidArgumentError, OutOfBoundsError
from src.level.level import Level
from src.level.grid_types import SideType
from src.tiles.tile_parser import TileParser
from src.tiles.tile_types import TileType


@pytest.fixture
def parser():
    return TileParser()


@pytest.fixture
def small_level(parser):
    return parser.parse_ascii_level([
        "#####",
        "#.+.#",
        "#####",
    ])


def test_new_level_is_all_walls():
    level = Level(4, 3)
    assert level.count(TileType.WALL) == 12
    assert str(level) == "####\n####\n####\n"


@pytest.mark.parametrize("width, height", [(0, 1), (1, 0), (-2, 3)])
def test_invalid_level_size_raises(width, height):
    with pytest.raises(InvalidArgumentError):
        Level(width, height)


def test_tile_access_out_of_bounds_raises():
    level = Level(2, 2)
    with pytest.raises(OutOfBoundsError):
        level.get_tile(2, 0)
    with pytest.raises(OutOfBoundsError):
        level.set_tile(0, -1, TileType.EMPTY)


def test_side_types_map_to_tile_types():
    assert SideType.WALL.to_tile_type() == TileType.WALL
    assert SideType.EMPTY.to_tile_type() == TileType.EMPTY
    assert SideType.DOOR.to_tile_type() == TileType.DOOR


def test_tile_type_properties():
    assert TileType.WALL.is_solid and TileType.WALL.has_collision
    assert TileType.DOOR.has_collision and not TileType.DOOR.is_solid
    assert not TileType.EMPTY.has_collision
    assert [tile.value for tile in TileType] == [-1, 0, 1, 2]


def test_parse_ascii_level(small_level):
    assert (small_level.width, small_level.height) == (5, 3)
    assert small_level.get_tile(1, 1) == TileType.EMPTY
    assert small_level.get_tile(2, 1) == TileType.DOOR
    assert small_level.get_tile(0, 0) == TileType.WALL


def test_parse_pads_short_lines_with_walls(parser):
    level = parser.parse_ascii_level(["#..", "#"])
    assert level.width == 3
    assert level.get_tile(2, 1) == TileType.WALL


def test_parse_rejects_unknown_and_empty_input(parser):
    with pytest.raises(InvalidArgumentError):
        parser.parse_ascii_level(["#X#"])
    with pytest.raises(InvalidArgumentError):
        parser.parse_ascii_level([])


def test_custom_mapping(parser):
    parser.set_custom_mapping("D", TileType.DOOR)
    level = parser.parse_ascii_level(["#D#"])
    assert level.get_tile(1, 0) == TileType.DOOR


def test_ascii_representation_matches_str(parser, small_level):
    assert parser.get_ascii_representation(small_level) == ["#####", "#.+.#", "#####"]
    assert str(small_level) == "#####\n#.+.#\n#####\n"


def test_collision_rects(small_level):
    solids = small_level.solid_rects()
    assert len(solids) == 12
    assert pygame.Rect(0, 0, TILE, TILE) in solids

    doors = small_level.door_rects(tile_size=10)
    assert doors == [pygame.Rect(20, 10, 10, 10)]
