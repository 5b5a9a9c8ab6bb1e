import math

import pytest

from asciiray.intersection import Intersection, Ray
from asciiray.vector import Coordinate, Origin


def test_reflection_of_ray():
    intersection = Intersection(True, Origin(), 1)
    intersection.normal = Coordinate(0, 0, 1)

    ray = Ray(Coordinate(1, 0, 1), Coordinate(-1, 0, -1))
    reflected = intersection.reflected_ray(ray)

    gradient = reflected.line_gradient
    assert gradient.x == -1
    assert gradient.y == 0
    assert gradient.z == 1
    assert gradient.a == 1


def test_reflected_ray_starts_at_intersection_point():
    intersection = Intersection(True, Coordinate(3, 4, 5), 2)
    intersection.normal = Coordinate(0, 0, 1)
    reflected = intersection.reflected_ray(Ray(Coordinate(1, 0, 1), Coordinate(-1, 0, -1), 7))
    assert reflected.line_origin == Coordinate(3, 4, 5)
    assert reflected.ray_length == 7


def test_reflection_of_direction_keeps_length():
    intersection = Intersection(True)
    intersection.normal = Coordinate(0, 1, 0)
    direction = Coordinate(2, -3, 6)
    reflected = intersection.reflected_ray(direction)
    assert reflected == Coordinate(2, 3, 6)
    assert math.isclose(reflected.norm(), direction.norm())


def test_reflect_rejects_other_types():
    with pytest.raises(TypeError):
        Intersection(True).reflected_ray("ray")


def test_defaults():
    intersection = Intersection(False)
    assert not intersection.valid
    assert intersection.coordinate == Origin()
    assert intersection.normal == Origin()
    assert intersection.ray_length == 0
    assert intersection.max_length == 1000


def test_coordinate_is_copied():
    point = Coordinate(1, 2, 3)
    intersection = Intersection(True, point, 1)
    point.x = 10
    assert intersection.coordinate.x == 1


def test_min_prefers_shortest_valid():
    candidates = [
        Intersection(True, ray_length=5),
        Intersection(False, ray_length=1),
        Intersection(True, ray_length=2),
    ]
    assert min(candidates).ray_length == 2