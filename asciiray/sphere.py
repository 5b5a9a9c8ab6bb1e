"""Spheres."""

from __future__ import annotations

import math

from asciiray.intersection import Intersection
from asciiray.shapes import Shape
from asciiray.vector import Coordinate, Origin, Vector


class Sphere(Shape):
    """A sphere of ``radius`` centred on ``origin``."""

    def __init__(self, radius: float = 0.0, origin: Vector | None = None) -> None:
        self.radius = float(radius)
        self.origin = Origin() if origin is None else Coordinate.from_vector(origin)

    def normal(self, coordinate: Vector) -> Coordinate:
        """The outward vector from the centre to ``coordinate``."""
        return (self.origin - Coordinate.from_vector(coordinate)) * -1

    def line_intersection(
        self, line_origin: Vector, line_gradient: Vector
    ) -> Intersection:
        p0 = Coordinate.from_vector(line_origin)
        d = Coordinate.from_vector(line_gradient)
        delta_p = p0 - self.origin

        a = d.norm_sq()
        if a == 0:
            return Intersection(False)
        b = 2 * d.dot(delta_p)
        c = delta_p.norm_sq() - self.radius * self.radius

        v = b * b - 4 * a * c
        if v < 0:
            return Intersection(False)

        root = math.sqrt(v)
        mu = (-b - root) / (2 * a)
        if mu <= 0:
            mu = (-b + root) / (2 * a)
            if mu <= 0:
                return Intersection(False)

        result = p0 + d * mu
        intersection = Intersection(True, result, mu)
        intersection.normal = self.normal(result)
        return intersection