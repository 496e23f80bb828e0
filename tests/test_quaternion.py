import math

import pytest

from nexuscore.math3d import Matrix4, Vector3
from nexuscore.quaternion import Quaternion


def _length(v):
    return math.sqrt(sum(c * c for c in v))


def _row_times_matrix(v, m):
    return tuple(v.x * m[0, c] + v.y * m[1, c] + v.z * m[2, c] for c in range(3))


def test_identity_leaves_vectors_unchanged():
    v = Vector3(1.0, -2.0, 3.0)
    assert Quaternion.identity().rotate(v) == v


def test_identity_directions():
    q = Quaternion.identity()
    assert q.forward() == Vector3(0.0, 0.0, -1.0)
    assert q.right() == Vector3(1.0, 0.0, 0.0)


def test_zero_quaternion_normalizes_to_identity():
    zero = Quaternion(0.0, 0.0, 0.0, 0.0)
    assert zero.normalized() == Quaternion.identity()
    assert zero.inverse() == Quaternion.identity()


def test_normalized_has_unit_length():
    q = Quaternion(1.0, 2.0, 3.0, 4.0).normalized()
    assert q.dot(q) == pytest.approx(1.0)


def test_times_inverse_is_identity():
    q = Quaternion(0.3, -1.2, 0.7, 2.0)
    product = q * q.inverse()
    assert (product.x, product.y, product.z, product.w) == pytest.approx((0, 0, 0, 1))


def test_conjugate_negates_vector_part():
    q = Quaternion(0.1, 0.2, 0.3, 0.9)
    c = q.conjugate()
    assert (c.x, c.y, c.z, c.w) == (-0.1, -0.2, -0.3, 0.9)


def test_rotation_preserves_length():
    q = Quaternion.from_euler(0.4, -1.1, 2.3)
    v = Vector3(3.0, -1.0, 2.0)
    assert _length(q.rotate(v)) == pytest.approx(_length(v))


def test_rotation_then_inverse_round_trips():
    q = Quaternion.from_euler(0.7, 0.2, -0.5)
    v = Vector3(1.0, 2.0, 3.0)
    assert tuple(q.inverse().rotate(q.rotate(v))) == pytest.approx(tuple(v))


def test_axis_angle_composition_adds_angles():
    axis = Vector3(0.0, 1.0, 0.0)
    combined = Quaternion.from_axis_angle(axis, 0.3) * Quaternion.from_axis_angle(axis, 0.5)
    direct = Quaternion.from_axis_angle(axis, 0.8)
    assert (combined.x, combined.y, combined.z, combined.w) == pytest.approx(
        (direct.x, direct.y, direct.z, direct.w)
    )


@pytest.mark.parametrize(
    "angles",
    [(0.1, 0.2, 0.3), (-0.5, 0.4, 1.2), (1.0, -0.9, -2.0), (0.0, 0.0, 0.0)],
)
def test_euler_round_trip(angles):
    q = Quaternion.from_euler(*angles)
    assert tuple(q.to_euler()) == pytest.approx(angles, abs=1e-9)


def test_euler_vector_matches_scalar_form():
    euler = Vector3(0.2, -0.3, 0.6)
    assert Quaternion.from_euler_vector(euler) == Quaternion.from_euler(0.2, -0.3, 0.6)


def test_gimbal_lock_sets_roll_to_zero():
    euler = Quaternion.from_euler(0.0, math.pi / 2, 0.0).to_euler()
    assert tuple(euler) == pytest.approx((0.0, math.pi / 2, 0.0), abs=1e-9)


def test_matrix_agrees_with_rotate():
    q = Quaternion.from_euler(0.3, -0.8, 1.4)
    v = Vector3(2.0, -1.0, 0.5)
    assert _row_times_matrix(v, q.to_matrix()) == pytest.approx(tuple(q.rotate(v)))


def test_identity_matrix():
    assert Quaternion.identity().to_matrix().is_close(Matrix4.identity())


def test_matrix_product_matches_quaternion_product():
    a = Quaternion.from_euler(0.2, 0.4, -0.1)
    b = Quaternion.from_euler(-0.6, 0.1, 0.9)
    # Row-vector matrices compose in reverse order of quaternion products.
    assert (a * b).to_matrix().is_close(b.to_matrix() * a.to_matrix(), 1e-9)