import pytest

from asciiray.plane import CheckerBoard, Plane
from asciiray.vector import Coordinate, Origin

UP = Coordinate(0, 0, 1)
DOWN = Coordinate(0, 0, -1)


@pytest.fixture
def floor():
    return Plane(Origin(), Coordinate(0, 0, 1))


@pytest.fixture
def board():
    return CheckerBoard(
        Coordinate(0, 100, 0), Coordinate(0, -1, 0), Coordinate(0.01, 0, 0)
    )


def test_plane_intersection(floor):
    hit = floor.line_intersection(UP, DOWN)
    assert [hit.coordinate[i] for i in range(4)] == [0, 0, 0, 1]
    assert (hit.valid, hit.ray_length) == (True, 1)


@pytest.mark.parametrize("direction", [Coordinate(1, 0, 0), Coordinate(0, 0, 1)])
def test_parallel_or_receding_ray_misses(floor, direction):
    assert floor.line_intersection(UP, direction).valid is False


def test_normal_is_constant_and_copied(floor):
    assert floor.normal(Coordinate(5, 5, 0)) == UP
    hit = floor.line_intersection(UP, DOWN)
    assert hit.normal == UP
    hit.normal.x = 9
    assert floor.normal(Origin()) == UP


def test_origin_can_be_moved(floor):
    floor.origin = Coordinate(0, 0, -1)
    hit = floor.line_intersection(UP, DOWN)
    assert (hit.coordinate, hit.ray_length) == (Coordinate(0, 0, -1), 2)


def test_checkerboard_hits_opaque_square(board):
    hit = board.line_intersection(Origin(), Coordinate(1.5, 1, 0.5))
    assert hit.valid
    assert hit.coordinate == Coordinate(150, 100, 50)


@pytest.mark.parametrize(
    "direction",
    [Coordinate(0.5, 1, 0.5), Coordinate(0, -1, 0)],
)
def test_checkerboard_misses(board, direction):
    assert board.line_intersection(Origin(), direction).valid is False