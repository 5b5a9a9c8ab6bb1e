"""A scene of shapes and lights rendered onto a display."""

from __future__ import annotations

import math
from collections.abc import Iterator

from asciiray.display import Display
from asciiray.intersection import Intersection
from asciiray.shapes import EPSILON, LightSource, Shape
from asciiray.vector import Coordinate, Origin

_FULL = 255


class World:
    """Shapes and light sources seen through a rectangular view port.

    The viewer sits at the origin looking along the positive x axis; display
    rows map to y and columns to z.
    """

    def __init__(
        self,
        view_port_width: int,
        view_port_height: int,
        super_sampling: int = 1,
        focal_point: float = 100.0,
    ) -> None:
        self.view_port_width = int(view_port_width)
        self.view_port_height = int(view_port_height)
        self.super_sampling = int(super_sampling)
        self.focal_point = float(focal_point)
        self.ambient = 0.5
        self.objects: list[Shape] = []
        self.light_sources: list[LightSource] = []

    def add_object(self, shape: Shape) -> None:
        """Add a shape, giving it the next free id."""
        shape.id = len(self.objects)
        self.objects.append(shape)

    def add_light_source(self, light_source: LightSource) -> None:
        self.light_sources.append(light_source)

    def _pixels(self, display: Display) -> Iterator[tuple[int, int]]:
        rows = min(display.height(), self.view_port_height)
        columns = min(display.width(), self.view_port_width)
        for i in range(rows):
            for j in range(columns):
                yield i, j

    def _half_extent(self, display: Display) -> tuple[int, int]:
        rows = min(display.height(), self.view_port_height)
        columns = min(display.width(), self.view_port_width)
        return rows // 2, columns // 2

    def _subsamples(
        self, i: int, j: int, row_shift: int = 0, column_shift: int = 0
    ) -> Iterator[tuple[float, float]]:
        n = self.super_sampling
        for c in range(n):
            for d in range(n):
                yield i + c / n - row_shift, j + d / n - column_shift

    def _intersecting(
        self,
        direction: Coordinate,
        origin: Coordinate,
        max_length: float = math.inf,
    ) -> bool:
        for shape in self.objects:
            hit = shape.line_intersection(origin, direction)
            if hit.valid and EPSILON < hit.ray_length < max_length:
                return True
        return False

    def _min_intersection(
        self, direction: Coordinate, origin: Coordinate
    ) -> Intersection:
        hits = []
        for shape in self.objects:
            hit = shape.line_intersection(origin, direction)
            if hit.valid:
                hit.id = shape.id
                hits.append(hit)
        if not hits:
            return Intersection(False)
        return min(hits, key=lambda hit: hit.ray_length)

    @staticmethod
    def _add(display: Display, i: int, j: int, amount: int) -> None:
        display[i, j] = display[i, j] + amount

    def _sample_share(self) -> int:
        return _FULL // (self.super_sampling * self.super_sampling)

    def render_orthographic(self, display: Display) -> None:
        """Draw silhouettes with parallel rays along the x axis."""
        direction = Coordinate(1, 0, 0)
        share = self._sample_share()
        for i, j in self._pixels(display):
            for x, y in self._subsamples(i, j):
                if self._intersecting(direction, Coordinate(0, x, y)):
                    self._add(display, i, j, share)

    def render_perspective(self, display: Display) -> None:
        """Draw silhouettes with rays fanning out from the focal point."""
        height_half, width_half = self._half_extent(display)
        share = self._sample_share()
        for i, j in self._pixels(display):
            for x, y in self._subsamples(i, j, height_half, width_half):
                direction = Coordinate(self.focal_point, x, y)
                if self._intersecting(direction, Coordinate(0, x, y)):
                    self._add(display, i, j, share)

    def _light_directions(self, hit: Intersection) -> list[Coordinate]:
        start = hit.coordinate + hit.normal
        directions = []
        for light in self.light_sources:
            direction = light.shape.origin - start
            if not self._intersecting(direction, start, max_length=1.0):
                directions.append(direction)
        return directions

    def ray_trace_perspective(self, display: Display) -> None:
        """Shade each pixel with ambient, diffuse and specular light."""
        height_half, width_half = self._half_extent(display)
        samples = self.super_sampling * self.super_sampling
        for i, j in self._pixels(display):
            for x, y in self._subsamples(i, j, height_half, width_half):
                direction = Coordinate(self.focal_point, x, y)
                hit = self._min_intersection(direction, Origin())
                if not hit.valid:
                    continue
                light_directions = self._light_directions(hit)
                if not light_directions:
                    continue

                shape = self.objects[hit.id]
                luminance = self.ambient
                for to_light in light_directions:
                    hit.normal.dir_normalise()
                    distance = to_light.norm_sq()
                    to_light.dir_normalise()
                    reflected = hit.reflected_ray(to_light)
                    diffuse = max(hit.normal.dot(to_light), 0.0) * shape.k_diffuse
                    specular = shape.k_specular * math.pow(
                        max(direction.dot(reflected), 0.0), shape.specular_exponent
                    )
                    luminance += (diffuse + specular) * (shape.phi_specular / distance)

                clamped = min(max(luminance, 0.0), 1.0)
                self._add(display, i, j, math.floor(clamped * _FULL / samples))