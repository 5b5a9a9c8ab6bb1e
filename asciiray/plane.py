"""Infinite planes and checkerboard planes."""

from __future__ import annotations

import math

from asciiray.intersection import Intersection
from asciiray.shapes import EPSILON, Shape
from asciiray.vector import Coordinate, Vector


class Plane(Shape):
    """An infinite plane through ``origin`` with the given normal."""

    def __init__(self, origin: Vector, normal: Vector) -> None:
        self.origin = Coordinate.from_vector(origin)
        self._normal = Coordinate.from_vector(normal)

    def normal(self, coordinate: Vector | None = None) -> Coordinate:
        return Coordinate.from_vector(self._normal)

    def line_intersection(
        self, line_origin: Vector, line_gradient: Vector
    ) -> Intersection:
        p0 = Coordinate.from_vector(line_origin)
        direction = Coordinate.from_vector(line_gradient)

        v = direction.dot(self._normal)
        if v == 0:
            return Intersection(False)

        d = (self.origin - p0).dot(self._normal) / v
        if d < EPSILON:
            return Intersection(False)

        intersection = Intersection(True, p0 + direction * d, d)
        intersection.normal = Coordinate.from_vector(self._normal)
        return intersection


class CheckerBoard(Plane):
    """A plane on which alternate squares of a grid are transparent."""

    def __init__(self, origin: Vector, normal: Vector, grid_orientation: Vector) -> None:
        super().__init__(origin, normal)
        self._grid_x = Coordinate.from_vector(grid_orientation)
        self._grid_y = Coordinate.from_vector(self._normal).cross(self._grid_x)

    def line_intersection(
        self, line_origin: Vector, line_gradient: Vector
    ) -> Intersection:
        intersection = super().line_intersection(line_origin, line_gradient)
        if not intersection.valid:
            return intersection

        offset = intersection.coordinate - self.origin
        offset.a = 1.0

        x = math.ceil(offset.dot(self._grid_x)) & 1
        y = math.ceil(offset.dot(self._grid_y)) & 1

        if x == y:
            return Intersection(False)
        return intersection