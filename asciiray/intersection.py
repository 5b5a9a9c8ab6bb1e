"""Rays and the points where they meet surfaces."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from asciiray.vector import Coordinate, Origin, Vector


@dataclass
class Ray:
    """A half-line given by its origin and gradient."""

    line_origin: Coordinate
    line_gradient: Coordinate
    ray_length: float = 0.0


class Intersection:
    """Where a ray meets a shape, or an invalid miss."""

    def __init__(
        self,
        valid: bool,
        coordinate: Vector | None = None,
        ray_length: float = 0.0,
        id: Any = None,
    ) -> None:
        self.valid = bool(valid)
        self.coordinate = (
            Origin() if coordinate is None else Coordinate.from_vector(coordinate)
        )
        self.ray_length = float(ray_length)
        self.id = id
        self.normal: Coordinate = Origin()
        self.max_length = 1000.0

    def _reflect(self, direction: Vector) -> Coordinate:
        v = Coordinate.from_vector(direction)
        normal = Coordinate.from_vector(self.normal)
        return v - normal * (2 * v.dot(normal))

    def reflected_ray(self, ray):
        """Reflect a ray (or a bare direction) about the surface normal.

        A ray is re-rooted at the intersection point; a direction is
        returned reflected.
        """
        if isinstance(ray, Ray):
            return Ray(
                Coordinate.from_vector(self.coordinate),
                self._reflect(ray.line_gradient),
                ray.ray_length,
            )
        if isinstance(ray, Vector):
            return self._reflect(ray)
        raise TypeError(f"cannot reflect {type(ray).__name__}")

    def __lt__(self, other):
        if not isinstance(other, Intersection):
            return NotImplemented
        return self.valid and self.ray_length < other.ray_length

    def __repr__(self) -> str:
        return (
            f"Intersection(valid={self.valid!r}, coordinate={self.coordinate!r}, "
            f"ray_length={self.ray_length!r}, id={self.id!r})"
        )