"""Homogeneous three-dimensional vectors, coordinates and directions."""

from __future__ import annotations

import math
import operator
from numbers import Real
from typing import Callable, Iterable

_FIELDS = ("x", "y", "z", "a")


def _fmt(values: Iterable[float]) -> str:
    return ", ".join(format(value, "g") for value in values)


def _zero_division() -> ZeroDivisionError:
    return ZeroDivisionError("attempted to divide by zero")


def _operands(other) -> tuple[float, float, float] | None:
    """The x, y and z values ``other`` contributes, or None if unsupported."""
    if isinstance(other, Vector):
        return other._xyz()
    if isinstance(other, Real):
        return (other, other, other)
    return None


class Vector:
    """A four-component vector whose arithmetic acts on x, y and z."""

    __slots__ = _FIELDS

    def __init__(self, x: float, y: float, z: float, a: float = 1.0) -> None:
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)
        self.a = float(a)

    def _xyz(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def _all(self) -> tuple[float, float, float, float]:
        return (self.x, self.y, self.z, self.a)

    @staticmethod
    def _field(index: int) -> str:
        if not isinstance(index, int) or not 0 <= index < len(_FIELDS):
            raise IndexError(f"vector index out of range: {index!r}")
        return _FIELDS[index]

    def _combine(self, op: Callable[[float, float], float], other):
        values = _operands(other)
        if values is None:
            return NotImplemented
        return Vector(*map(op, self._xyz(), values))

    def _update(self, op: Callable[[float, float], float], other):
        values = _operands(other)
        if values is None:
            return NotImplemented
        self.x, self.y, self.z = map(op, self._xyz(), values)
        return self

    def _compare(self, op: Callable[[float, float], bool], other):
        if not isinstance(other, Vector):
            return NotImplemented
        return all(map(op, self._xyz(), other._xyz()))

    def valid(self) -> bool:
        return True

    def dot(self, other: Vector) -> float:
        """Dot product over all four components."""
        return sum(map(operator.mul, self._all(), other._all()))

    def sum(self) -> float:
        return self.x + self.y + self.z + self.a

    def __getitem__(self, index: int) -> float:
        return getattr(self, self._field(index))

    def __setitem__(self, index: int, value: float) -> None:
        setattr(self, self._field(index), float(value))

    def normalise(self) -> None:
        """Divide x, y and z by the four-component norm."""
        self.__itruediv__(self.norm())

    def norm(self) -> float:
        return math.sqrt(self.norm_sq())

    def norm_sq(self) -> float:
        return sum(value * value for value in self._all())

    def __add__(self, other):
        return self._combine(operator.add, other)

    def __sub__(self, other):
        return self._combine(operator.sub, other)

    def __mul__(self, other):
        if isinstance(other, Vector):
            return Vector(*map(operator.mul, self._all(), other._all()))
        return self._combine(operator.mul, other)

    def __truediv__(self, other):
        values = _operands(other)
        if values is None:
            return NotImplemented
        if 0 in values:
            raise _zero_division()
        if isinstance(other, Vector):
            return Vector(*map(operator.truediv, self._xyz(), values))
        return Vector.__mul__(self, 1 / other)

    def __iadd__(self, other):
        return self._update(operator.add, other)

    def __isub__(self, other):
        return self._update(operator.sub, other)

    def __imul__(self, other):
        return self._update(operator.mul, other)

    def __itruediv__(self, other):
        values = _operands(other)
        if values is not None and 0 in values:
            raise _zero_division()
        return self._update(operator.truediv, other)

    def __eq__(self, other):
        return self._compare(operator.eq, other)

    __hash__ = None

    def __lt__(self, other):
        return self._compare(operator.lt, other)

    def __gt__(self, other):
        return self._compare(operator.gt, other)

    def __le__(self, other):
        return self._compare(operator.le, other)

    def __ge__(self, other):
        return self._compare(operator.ge, other)

    def __str__(self) -> str:
        return f"[ {_fmt(self._all())} ]"

    def __repr__(self) -> str:
        values = ", ".join(repr(value) for value in self._all())
        return f"{type(self).__name__}({values})"


def _normalised_xyz(vector: Vector) -> tuple[float, float, float]:
    return Coordinate.from_vector(vector)._xyz()


class Coordinate(Vector):
    """A point in homogeneous coordinates, kept with a == 1."""

    __slots__ = ()

    def __init__(self, x: float, y: float, z: float, a: float = 1.0) -> None:
        super().__init__(x, y, z, a)
        self.normalise()

    @classmethod
    def from_vector(cls, vector: Vector) -> Coordinate:
        """Build a normalised coordinate from any vector."""
        return cls(vector.x, vector.y, vector.z, vector.a)

    def _coordinate_combine(self, op: Callable[[float, float], float], other):
        return Coordinate(*map(op, _normalised_xyz(self), _normalised_xyz(other)))

    def __add__(self, other):
        if isinstance(other, Vector):
            return self._coordinate_combine(operator.add, other)
        return super().__add__(other)

    def __sub__(self, other):
        if isinstance(other, Vector):
            return self._coordinate_combine(operator.sub, other)
        return super().__sub__(other)

    def __mul__(self, other):
        if isinstance(other, Real):
            return Coordinate(*(value * other for value in _normalised_xyz(self)))
        return super().__mul__(other)

    def normalise(self) -> None:
        """Divide through by the homogeneous component."""
        if self.a == 1:
            return
        if self.a == 0:
            raise ZeroDivisionError("normalisation attempted to divide by zero")
        weight = self.a
        self.x, self.y, self.z = (value / weight for value in self._xyz())
        self.a = 1.0

    def norm_sq(self) -> float:
        self.normalise()
        return sum(value * value for value in self._xyz())

    def norm(self) -> float:
        return math.sqrt(self.norm_sq())

    def dir_normalise(self) -> None:
        """Scale to unit length as a direction."""
        self.__itruediv__(self.norm())

    def valid(self) -> bool:
        return self.a != 0

    def dot(self, other: Vector) -> float:
        rhs = _normalised_xyz(other)
        self.normalise()
        return sum(map(operator.mul, self._xyz(), rhs))

    def cross(self, other: Vector) -> Coordinate:
        ox, oy, oz = _normalised_xyz(other)
        self.normalise()
        return Coordinate(
            self.y * oz - self.z * oy,
            self.z * ox - self.x * oz,
            self.x * oy - self.y * ox,
        )

    def __str__(self) -> str:
        c = Coordinate.from_vector(self)
        return f"[ {_fmt(c._xyz())} ], {_fmt((c.a,))}"


class Origin(Coordinate):
    """The coordinate (0, 0, 0)."""

    __slots__ = ()

    def __init__(self) -> None:
        super().__init__(0.0, 0.0, 0.0)


class Direction(Vector):
    """A vector scaled by its four-component norm on creation."""

    __slots__ = ()

    def __init__(self, x: float, y: float, z: float, a: float = 1.0) -> None:
        super().__init__(x, y, z, a)
        self.normalise()