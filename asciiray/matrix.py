"""Dense matrices with lazy transposition, slices and Strassen multiplication."""

from __future__ import annotations

from numbers import Real
from typing import Callable, Iterable, Iterator, Union


def _fmt(value) -> str:
    if isinstance(value, float):
        return format(value, "g")
    return str(value)


def _dimension_mismatch() -> ValueError:
    return ValueError("cannot combine matrices: dimension mismatch")


def _multiply(left, right) -> "Matrix":
    """Plain row-by-column product of two matrix-like objects."""
    if left.columns != right.rows:
        raise _dimension_mismatch()
    return Matrix._build(
        left.rows,
        right.columns,
        lambda i, j: sum(left[i, k] * right[k, j] for k in range(left.columns)),
    )


class Matrix:
    """A rows x columns matrix stored flat, transposed by flipping a flag."""

    def __init__(self, rows: int, columns: int, init=0) -> None:
        if rows < 0 or columns < 0:
            raise ValueError("matrix dimensions must not be negative")
        self.rows = int(rows)
        self.columns = int(columns)
        self.transposed = False
        self._data = [init] * (self.rows * self.columns)

    @classmethod
    def from_values(cls, values: Iterable, rows: int, columns: int) -> Matrix:
        """A matrix filled row by row from ``values``."""
        data = list(values)
        if len(data) != rows * columns:
            raise ValueError(
                f"expected {rows * columns} values for a {rows}x{columns} matrix, "
                f"got {len(data)}"
            )
        matrix = cls(rows, columns)
        matrix._data = data
        return matrix

    @classmethod
    def _build(cls, rows: int, columns: int, value_at: Callable) -> Matrix:
        return cls.from_values(
            (value_at(r, c) for r in range(rows) for c in range(columns)),
            rows,
            columns,
        )

    def _cells(self) -> Iterator[tuple[int, int]]:
        for r in range(self.rows):
            for c in range(self.columns):
                yield r, c

    def _copy(self) -> Matrix:
        result = Matrix(self.rows, self.columns)
        result._data = list(self._data)
        result.transposed = self.transposed
        return result

    def __len__(self) -> int:
        return self.rows * self.columns

    def _offset(self, key) -> int:
        row, column = key
        if not (
            isinstance(row, int)
            and isinstance(column, int)
            and 0 <= row < self.rows
            and 0 <= column < self.columns
        ):
            raise IndexError(f"requested index for row or column invalid: {key!r}")
        if self.transposed:
            return row + column * self.rows
        return row * self.columns + column

    def __getitem__(self, key):
        return self._data[self._offset(key)]

    def __setitem__(self, key, value) -> None:
        self._data[self._offset(key)] = value

    def _check_same_shape(self, other: Matrix) -> None:
        if self.rows != other.rows or self.columns != other.columns:
            raise _dimension_mismatch()

    def elementwise_addition(self, other: Matrix) -> Matrix:
        """Sum of two matrices of the same shape."""
        if not isinstance(other, Matrix):
            raise TypeError(f"cannot add {type(other).__name__} to a matrix")
        self._check_same_shape(other)
        return self._build(
            self.rows, self.columns, lambda r, c: self[r, c] + other[r, c]
        )

    def __mul__(self, other):
        if isinstance(other, (Matrix, SlicedMatrix)):
            return _multiply(self, other)
        if isinstance(other, Real):
            return self._build(self.rows, self.columns, lambda r, c: self[r, c] * other)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Real):
            return self.__mul__(other)
        return NotImplemented

    def strassen_multiplication(self, other: Matrix) -> Matrix:
        """Product by Strassen's method; both must be square of power-of-two size."""
        if not isinstance(other, Matrix):
            raise TypeError(f"cannot multiply a matrix by {type(other).__name__}")
        return SlicedMatrix(self).strassen_multiplication(SlicedMatrix(other))

    def __add__(self, other):
        if isinstance(other, Matrix):
            return self.elementwise_addition(other)
        if isinstance(other, Real):
            return self._build(self.rows, self.columns, lambda r, c: self[r, c] + other)
        return NotImplemented

    def __radd__(self, other):
        if isinstance(other, Real):
            return self.__add__(other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, Matrix):
            self._check_same_shape(other)
            return self._build(
                self.rows, self.columns, lambda r, c: self[r, c] - other[r, c]
            )
        if isinstance(other, Real):
            return self.__add__(-other)
        return NotImplemented

    def __neg__(self) -> Matrix:
        return self * -1

    def __iadd__(self, other):
        if not isinstance(other, Real):
            return NotImplemented
        self._data = [value + other for value in self._data]
        return self

    def __imul__(self, other):
        if not isinstance(other, Real):
            return NotImplemented
        self._data = [value * other for value in self._data]
        return self

    def insert_matrix(self, other: Matrix, row: int, column: int) -> None:
        """Copy ``other`` in with its top-left corner at (row, column), clipped.

        Nothing is copied when the corner lies outside this matrix.
        """
        if not (0 <= row < self.rows and 0 <= column < self.columns):
            return
        height = min(other.rows, self.rows - row)
        width = min(other.columns, self.columns - column)
        for i in range(height):
            for j in range(width):
                self[row + i, column + j] = other[i, j]

    def transpose_inplace(self) -> None:
        self.transposed = not self.transposed
        self.rows, self.columns = self.columns, self.rows

    def transpose(self) -> Matrix:
        """A transposed copy."""
        result = self._copy()
        result.transpose_inplace()
        return result

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return (
            self.rows == other.rows
            and self.columns == other.columns
            and all(self[key] == other[key] for key in self._cells())
        )

    __hash__ = None

    def __str__(self) -> str:
        return "".join(
            "".join(f"{_fmt(self[r, c])} " for c in range(self.columns)) + "\n"
            for r in range(self.rows)
        )

    def __repr__(self) -> str:
        rows = [[self[r, c] for c in range(self.columns)] for r in range(self.rows)]
        return f"Matrix({rows!r})"


class SlicedMatrix:
    """A rectangular window onto a shared matrix.

    Built from a matrix alone (the whole matrix), with ``(row_end, column_end)``
    or with ``(row_start, row_end, column_start, column_end)``; starts are
    inclusive and ends exclusive.
    """

    def __init__(self, matrix: Matrix, *args: int) -> None:
        if len(args) == 0:
            row_start, row_end, column_start, column_end = (
                0, matrix.rows, 0, matrix.columns,
            )
        elif len(args) == 2:
            row_start, column_start = 0, 0
            row_end, column_end = args
        elif len(args) == 4:
            row_start, row_end, column_start, column_end = args
        else:
            raise TypeError(
                "SlicedMatrix takes a matrix and 0, 2 or 4 bounds, "
                f"got {len(args)} bounds"
            )
        if (
            row_end > matrix.rows
            or column_end > matrix.columns
            or not 0 <= row_start <= row_end
            or not 0 <= column_start <= column_end
        ):
            raise ValueError("could not create sliced matrix from the given dimensions")
        self.matrix = matrix
        self._row_start = row_start
        self._column_start = column_start
        self.rows = row_end - row_start
        self.columns = column_end - column_start

    def __getitem__(self, key):
        row, column = key
        return self.matrix[row + self._row_start, column + self._column_start]

    def __setitem__(self, key, value) -> None:
        row, column = key
        self.matrix[row + self._row_start, column + self._column_start] = value

    def _block(self, row: int, column: int, size: int) -> Matrix:
        top = self._row_start + row
        left = self._column_start + column
        return SlicedMatrix(
            self.matrix, top, top + size, left, left + size
        ).to_matrix()

    def strassen_multiplication(self, other: Union[SlicedMatrix, Matrix]) -> Matrix:
        """Product by Strassen's method; both must be square of power-of-two size."""
        if isinstance(other, Matrix):
            other = SlicedMatrix(other)
        n = self.rows
        if not (
            self.columns == other.rows
            and self.rows == other.columns
            and other.columns == self.columns
            and n >= 2
            and n & (n - 1) == 0
        ):
            raise ValueError(
                "Strassen multiplication needs square matrices of power-of-two size"
            )

        if n == 2:
            a11, a12, a21, a22 = self[0, 0], self[0, 1], self[1, 0], self[1, 1]
            b11, b12, b21, b22 = other[0, 0], other[0, 1], other[1, 0], other[1, 1]

            m1 = (a11 + a22) * (b11 + b22)
            m2 = (a21 + a22) * b11
            m3 = a11 * (b12 - b22)
            m4 = a22 * (b21 - b11)
            m5 = (a11 + a12) * b22
            m6 = (a21 - a11) * (b11 + b12)
            m7 = (a12 - a22) * (b21 + b22)

            return Matrix.from_values(
                [m1 + m4 - m5 + m7, m3 + m5, m2 + m4, m1 + m3 - m2 + m6], 2, 2
            )

        k = n // 2
        a11, a12 = self._block(0, 0, k), self._block(0, k, k)
        a21, a22 = self._block(k, 0, k), self._block(k, k, k)
        b11, b12 = other._block(0, 0, k), other._block(0, k, k)
        b21, b22 = other._block(k, 0, k), other._block(k, k, k)

        m1 = (a11 + a22).strassen_multiplication(b11 + b22)
        m2 = (a21 + a22).strassen_multiplication(b11)
        m3 = a11.strassen_multiplication(b12 - b22)
        m4 = a22.strassen_multiplication(b21 - b11)
        m5 = (a11 + a12).strassen_multiplication(b22)
        m6 = (a21 - a11).strassen_multiplication(b11 + b12)
        m7 = (a12 - a22).strassen_multiplication(b21 + b22)

        result = Matrix(n, n)
        result.insert_matrix(m1 + m4 - m5 + m7, 0, 0)
        result.insert_matrix(m3 + m5, 0, k)
        result.insert_matrix(m2 + m4, k, 0)
        result.insert_matrix(m1 - m2 + m3 + m6, k, k)
        return result

    def to_matrix(self) -> Matrix:
        """An independent matrix holding the slice's values."""
        return Matrix._build(self.rows, self.columns, lambda r, c: self[r, c])

    def __mul__(self, other):
        if isinstance(other, (SlicedMatrix, Matrix)):
            return _multiply(self, other)
        return NotImplemented

    def __str__(self) -> str:
        return "".join(
            "".join(f"{_fmt(self[r, c])} " for c in range(self.columns)) + "\n"
            for r in range(self.rows)
        )