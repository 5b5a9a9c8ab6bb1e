"""The shape interface shared by every renderable surface, and light sources."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from asciiray.intersection import Intersection
from asciiray.vector import Coordinate, Vector

EPSILON = 1e-7


class Shape(ABC):
    """A surface that rays can hit.

    Every shape has an ``origin`` attribute holding its position; ``id`` is
    assigned when the shape is added to a world.
    """

    id: Any = None
    k_diffuse: float = 0.5
    k_specular: float = 0.5
    specular_exponent: float = 0.4
    phi_specular: float = 50000 / (4 * math.pi)

    origin: Coordinate

    @abstractmethod
    def normal(self, coordinate: Vector) -> Vector:
        """The surface normal at ``coordinate``."""

    @abstractmethod
    def line_intersection(
        self, line_origin: Vector, line_gradient: Vector
    ) -> Intersection:
        """Where the ray from ``line_origin`` along ``line_gradient`` meets the shape."""


@dataclass
class LightSource:
    """A light positioned at the origin of its shape."""

    id: Any
    intensity: float
    shape: Shape