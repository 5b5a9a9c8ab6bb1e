"""Triangles, intersected with the Möller-Trumbore test."""

from __future__ import annotations

import struct

from asciiray.intersection import Intersection
from asciiray.shapes import EPSILON, Shape
from asciiray.transformation import TransformationMatrix
from asciiray.vector import Coordinate, Origin, Vector


def _single_precision(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


class Triangle(Shape):
    """A triangle spanned by two edges from its ``origin`` corner."""

    def __init__(self, side_a: Vector, side_b: Vector) -> None:
        self.edge1 = Coordinate.from_vector(side_a)
        self.edge2 = Coordinate.from_vector(side_b)
        self.origin = Origin()

    def normal(self, coordinate: Vector | None = None) -> Coordinate:
        """The (unnormalised) normal, the same everywhere on the triangle."""
        return self.edge1.cross(self.edge2)

    def rotate(self, transformation: TransformationMatrix) -> None:
        """Rotate both edges about the origin corner."""
        self.edge1 = Coordinate.from_vector(transformation * self.edge1)
        self.edge2 = Coordinate.from_vector(transformation * self.edge2)

    def line_intersection(
        self, line_origin: Vector, line_gradient: Vector
    ) -> Intersection:
        ray_origin = Coordinate.from_vector(line_origin)
        ray_vector = Coordinate.from_vector(line_gradient)

        ray_cross_e2 = ray_vector.cross(self.edge2)
        det = self.edge1.dot(ray_cross_e2)
        if abs(det) < EPSILON:
            return Intersection(False)

        inv_det = 1.0 / det
        s = ray_origin - self.origin
        u = _single_precision(inv_det * s.dot(ray_cross_e2))
        if u < 0 or u > 1:
            return Intersection(False)

        s_cross_e1 = s.cross(self.edge1)
        v = inv_det * ray_vector.dot(s_cross_e1)
        if v < 0 or u + v > 1:
            return Intersection(False)

        t = inv_det * self.edge2.dot(s_cross_e1)
        if t <= EPSILON:
            return Intersection(False)

        intersection = Intersection(True, ray_origin + ray_vector * t, t)
        intersection.normal = self.normal()
        return intersection