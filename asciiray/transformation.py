"""4x4 transformation matrices and rotations."""

from __future__ import annotations

import itertools
import math
import operator
from numbers import Real
from typing import Callable

from asciiray.vector import Vector

_SIZE = 4
_INDICES = tuple(itertools.product(range(_SIZE), repeat=2))

_Key = tuple[int, int]


class TransformationMatrix:
    """A 4x4 matrix with a cheap transposition flag."""

    def __init__(self) -> None:
        self._cells = [[0.0] * _SIZE for _ in range(_SIZE)]
        self._transposed = False

    @classmethod
    def identity(cls) -> TransformationMatrix:
        matrix = cls()
        matrix._cells = [[float(r == c) for c in range(_SIZE)] for r in range(_SIZE)]
        return matrix

    @classmethod
    def ones(cls) -> TransformationMatrix:
        matrix = cls()
        matrix._cells = [[1.0] * _SIZE for _ in range(_SIZE)]
        return matrix

    def _locate(self, key) -> _Key:
        row, column = key
        for index in (row, column):
            if not isinstance(index, int) or not 0 <= index < _SIZE:
                raise IndexError(f"matrix index out of range: {key!r}")
        return (column, row) if self._transposed else (row, column)

    def __getitem__(self, key) -> float:
        r, c = self._locate(key)
        return self._cells[r][c]

    def __setitem__(self, key, value: float) -> None:
        r, c = self._locate(key)
        self._cells[r][c] = float(value)

    @staticmethod
    def _build(value_at: Callable[[_Key], float]) -> TransformationMatrix:
        result = TransformationMatrix()
        result._cells = [
            [value_at((r, c)) for c in range(_SIZE)] for r in range(_SIZE)
        ]
        return result

    def _elementwise(self, op: Callable[[float, float], float], other):
        """Cell-wise ``op`` with a matrix or a scalar, or None if unsupported."""
        if isinstance(other, TransformationMatrix):
            return self._build(lambda key: op(self[key], other[key]))
        if isinstance(other, Real):
            return self._build(lambda key: op(self[key], other))
        return None

    def _update(self, op: Callable[[float, float], float], other):
        if not isinstance(other, TransformationMatrix):
            return NotImplemented
        for key in _INDICES:
            self[key] = op(self[key], other[key])
        return self

    def _product(self, other: TransformationMatrix) -> TransformationMatrix:
        return self._build(
            lambda key: sum(self[key[0], k] * other[k, key[1]] for k in range(_SIZE))
        )

    def __add__(self, other):
        result = self._elementwise(operator.add, other)
        return NotImplemented if result is None else result

    def __sub__(self, other):
        result = self._elementwise(operator.sub, other)
        return NotImplemented if result is None else result

    def __mul__(self, other):
        if isinstance(other, TransformationMatrix):
            return self._product(other)
        if isinstance(other, Vector):
            return Vector(
                *(
                    sum(self[i, j] * other[j] for j in range(_SIZE))
                    for i in range(_SIZE)
                )
            )
        result = self._elementwise(operator.mul, other)
        return NotImplemented if result is None else result

    def __truediv__(self, other):
        if not isinstance(other, Real):
            return NotImplemented
        if other == 0:
            raise ZeroDivisionError("attempted to divide by zero")
        return self._elementwise(operator.truediv, other)

    def __iadd__(self, other):
        return self._update(operator.add, other)

    def __isub__(self, other):
        return self._update(operator.sub, other)

    def __imul__(self, other):
        if isinstance(other, TransformationMatrix):
            self._cells = self._product(other)._cells
            self._transposed = False
        elif isinstance(other, Real):
            self._cells = [[value * other for value in row] for row in self._cells]
        else:
            return NotImplemented
        return self

    def __eq__(self, other):
        if not isinstance(other, TransformationMatrix):
            return NotImplemented
        return all(self[key] == other[key] for key in _INDICES)

    __hash__ = None

    def copy(self) -> TransformationMatrix:
        result = TransformationMatrix()
        result._cells = [list(row) for row in self._cells]
        result._transposed = self._transposed
        return result

    def transpose(self) -> None:
        """Transpose in place."""
        self._transposed = not self._transposed

    def _rows(self) -> list[list[float]]:
        return [[self[r, c] for c in range(_SIZE)] for r in range(_SIZE)]

    def __str__(self) -> str:
        return "".join(
            "[ " + "".join(f"{format(value, 'g')} " for value in row) + "]\n"
            for row in self._rows()
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._rows()!r})"


class Rotation(TransformationMatrix):
    """An identity matrix that rotations can be written into."""

    def __init__(self) -> None:
        super().__init__()
        self._cells = TransformationMatrix.identity()._cells

    def _write_rotation(self, first: int, second: int, angle_rad: float) -> None:
        cos, sin = math.cos(angle_rad), math.sin(angle_rad)
        self[first, first] = cos
        self[second, first] = sin
        self[first, second] = -sin
        self[second, second] = cos

    def rotate_x(self, angle_rad: float) -> None:
        self._write_rotation(1, 2, angle_rad)

    def rotate_y(self, angle_rad: float) -> None:
        self._write_rotation(2, 0, angle_rad)

    def rotate_z(self, angle_rad: float) -> None:
        self._write_rotation(0, 1, angle_rad)


class RotationX(Rotation):
    """A rotation about the x axis; identity when no angle is given."""

    def __init__(self, angle_rad: float | None = None) -> None:
        super().__init__()
        if angle_rad is not None:
            self.rotate_x(angle_rad)