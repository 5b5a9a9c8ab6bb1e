import math

import pytest

from asciiray.transformation import Rotation, RotationX, TransformationMatrix
from asciiray.vector import Vector


def test_addition():
    a = TransformationMatrix.identity()
    b = TransformationMatrix.ones()
    b *= 2
    c = a + b
    for i in range(4):
        for j in range(4):
            assert c[i, j] == (3 if i == j else 2)


def test_multiplication():
    a = TransformationMatrix.identity()
    b = TransformationMatrix.ones()
    b *= 2
    c = a * b
    for i in range(4):
        for j in range(4):
            assert c[i, j] == 2
    for i in range(4):
        a[i, i] = i
    d = a * a
    for i in range(4):
        assert d[i, i] == i * i


def test_equality():
    matrix = TransformationMatrix()
    matrix[1, 3] = 1
    matrix_2 = matrix.copy()
    assert matrix == matrix_2


def test_transpose():
    matrix = TransformationMatrix()
    matrix[1, 3] = 1
    matrix_2 = matrix.copy()
    assert matrix == matrix_2
    matrix_2.transpose()
    assert matrix != matrix_2
    assert matrix_2[3, 1] == 1
    matrix_2.transpose()
    assert matrix == matrix_2


def test_copy_is_independent():
    matrix = TransformationMatrix()
    clone = matrix.copy()
    clone[0, 0] = 5
    assert matrix[0, 0] == 0


def test_identity_times_vector():
    matrix = TransformationMatrix.identity()
    coord = Vector(1, 2, 3)
    assert matrix * coord == coord


def test_matrix_vector_multiplication():
    matrix = TransformationMatrix.identity()
    coord = Vector(1, 2, 3)
    assert matrix * coord == coord
    matrix[0, 3] = 1
    result = matrix * coord
    assert result == Vector(2, 2, 3, 1)
    assert result.a == 1


def test_scalar_operations():
    ident = TransformationMatrix.identity()
    tenth = ident / 10
    assert tenth[0, 0] == pytest.approx(0.1)
    assert tenth[0, 1] == 0
    assert ident[0, 0] == 1
    plus = ident + 1
    assert plus[0, 0] == 2 and plus[0, 1] == 1
    minus = ident - 1
    assert minus[0, 0] == 0 and minus[0, 1] == -1


def test_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        TransformationMatrix.identity() / 0


def test_in_place_add_and_subtract():
    m = TransformationMatrix.identity()
    m += TransformationMatrix.ones()
    assert m[0, 0] == 2 and m[1, 0] == 1
    m -= TransformationMatrix.identity()
    assert m == TransformationMatrix.ones()


def test_index_out_of_range():
    with pytest.raises(IndexError):
        TransformationMatrix()[4, 0]


def test_str():
    expected = (
        "[ 1 0 0 0 ]\n"
        "[ 0 1 0 0 ]\n"
        "[ 0 0 1 0 ]\n"
        "[ 0 0 0 1 ]\n"
    )
    assert str(TransformationMatrix.identity()) == expected


def test_rotation_z_quarter_turn():
    rotation = Rotation()
    rotation.rotate_z(math.pi / 2)
    result = rotation * Vector(1, 0, 0)
    assert (result.x, result.y, result.z) == pytest.approx((0, 1, 0), abs=1e-12)


def test_rotation_x_quarter_turn():
    result = RotationX(math.pi / 2) * Vector(0, 1, 0)
    assert (result.x, result.y, result.z) == pytest.approx((0, 0, 1), abs=1e-12)


def test_rotation_y_quarter_turn():
    rotation = Rotation()
    rotation.rotate_y(math.pi / 2)
    result = rotation * Vector(0, 0, 1)
    assert (result.x, result.y, result.z) == pytest.approx((1, 0, 0), abs=1e-12)


def test_default_rotation_is_identity():
    assert RotationX() == TransformationMatrix.identity()
    assert Rotation() == TransformationMatrix.identity()