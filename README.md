# asciiray

`asciiray` is a small ray tracer that renders simple 3D scenes as ASCII art.
It has no third-party dependencies and contains:

- homogeneous 3D vectors and coordinates (`asciiray.vector`) and 4×4
  transformation and rotation matrices (`asciiray.transformation`);
- rays and intersections with reflection (`asciiray.intersection`);
- shapes a ray can hit: spheres (`asciiray.sphere`), planes and
  checkerboards (`asciiray.plane`) and triangles (`asciiray.triangle`), all
  built on the `Shape` interface in `asciiray.shapes`, which also holds
  `LightSource`;
- a `World` that casts rays through a viewport and writes brightness values
  into a character-cell `TerminalDisplay` (`asciiray.world`,
  `asciiray.display`);
- a general dense `Matrix` with lazy transposition, windows onto it
  (`SlicedMatrix`) and Strassen multiplication (`asciiray.matrix`).

## Installation

```
pip install .
```

## Rendering a scene

The camera sits at the origin and looks along the positive x axis; display
rows map to y and columns to z.

```python
from asciiray.display import TerminalDisplay
from asciiray.sphere import Sphere
from asciiray.vector import Coordinate
from asciiray.world import World

columns, rows = 80, 24
world = World(columns, rows, 3, 500)
display = TerminalDisplay(columns, rows, 2)

world.add_object(Sphere(40, Coordinate(5000, 0, 50)))
world.add_object(Sphere(5, Coordinate(1500, 5, 0)))

world.render_perspective(display)
print(display.render_to_str(), end="")
```

- `render_orthographic` marks pixels hit by parallel rays along the x axis.
- `render_perspective` marks pixels hit by rays fanning out from the focal
  point.
- `ray_trace_perspective` shades hits with ambient, diffuse and specular
  light from the scene's light sources:

```python
from asciiray.plane import CheckerBoard
from asciiray.shapes import LightSource

world.add_light_source(LightSource(0, 1.0, Sphere(40, Coordinate(800, -400, 0))))
world.add_object(
    CheckerBoard(Coordinate(0, 100, 0), Coordinate(0, -1, 0), Coordinate(0.01, 0, 0))
)
display.clear()
world.ray_trace_perspective(display)
print(display.render_to_str(), end="")
```

`TerminalDisplay` maps each 0–255 value to one of eight characters and
repeats it `char_per_pixel` times per line. `render_to_buffer` returns the
same frame as bytes, with the last newline replaced by a NUL byte.

## Intersecting a ray with a shape

```python
from asciiray.sphere import Sphere
from asciiray.vector import Coordinate, Origin

sphere = Sphere(1.0, Coordinate(2, 0, 0))
hit = sphere.line_intersection(Origin(), Coordinate(1, 0, 0))
print(hit.valid, hit.coordinate, hit.ray_length)   # True [ 1, 0, 0 ], 1 1.0
```

A miss comes back as an `Intersection` whose `valid` is `False`.
`Intersection.reflected_ray` reflects a `Ray` or a bare direction about the
surface normal.

## Transformations

```python
from asciiray.transformation import RotationX, TransformationMatrix
from asciiray.vector import Vector

matrix = TransformationMatrix.identity()
matrix[0, 3] = 1
print(matrix * Vector(1, 2, 3, 1))   # [ 2, 2, 3, 1 ]

quarter_turn = RotationX(3.141592653589793 / 2)
```

`transpose()` flips a matrix in place; `copy()` gives an independent one.

## Matrices

```python
from asciiray.matrix import Matrix

a = Matrix(4, 4, 1)
b = Matrix(4, 4, 0)
for i in range(4):
    b[i, i] = 2
print(a.strassen_multiplication(b))
```

Strassen multiplication needs square matrices whose size is a power of two;
other shapes raise `ValueError`. Ordinary `*` works for any compatible shapes.

## What the package does not do

- It has no command-line program; scenes are built and rendered from Python.
- It has no torus shape and no general polynomial-equation solvers; the shapes
  available are spheres, planes, checkerboards and triangles.
- It does not draw to the terminal by itself: rendering produces text, and
  printing it, sizing it to the window or animating frames is left to the
  caller.

## Running the tests

```
pip install .[test]
pytest
```