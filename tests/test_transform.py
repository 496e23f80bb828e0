import math

import pytest

from nexuscore.math3d import Matrix4, Vector3
from nexuscore.quaternion import Quaternion
from nexuscore.transform import Transform, compose_matrix


def _apply(matrix, point):
    row = (point.x, point.y, point.z, 1.0)
    return tuple(sum(row[i] * matrix[i, c] for i in range(4)) for c in range(3))


def _vec_close(a, b):
    assert tuple(a) == pytest.approx(tuple(b), abs=1e-6)


def test_default_transform_is_identity():
    t = Transform()
    assert t.local_position == Vector3()
    assert t.world_position == Vector3()
    assert t.local_rotation == Quaternion.identity()
    assert t.world_rotation == Quaternion.identity()
    assert t.local_scale == Vector3(1.0, 1.0, 1.0)
    assert t.world_scale == Vector3(1.0, 1.0, 1.0)
    assert t.local_matrix.is_close(Matrix4.identity())
    assert t.world_matrix.is_close(Matrix4.identity())


def test_from_local_normalizes_rotation():
    t = Transform.from_local(Vector3(1.0, 2.0, 3.0), Quaternion(0.0, 3.0, 0.0, 4.0))
    rotation = t.local_rotation
    assert rotation.dot(rotation) == pytest.approx(1.0)
    assert rotation == Quaternion(0.0, 3.0, 0.0, 4.0).normalized()


def test_from_local_mirrors_world_values():
    position = Vector3(1.0, -2.0, 0.5)
    rotation = Quaternion.from_euler(0.3, 0.2, 0.1)
    scale = Vector3(2.0, 3.0, 4.0)
    t = Transform.from_local(position, rotation, scale)
    assert t.world_position == t.local_position == position
    assert t.world_rotation == t.local_rotation
    assert t.world_scale == t.local_scale == scale
    assert t.world_matrix.is_close(t.local_matrix)
    assert t.local_matrix.is_close(compose_matrix(position, rotation.normalized(), scale))


def test_from_local_default_rotation_and_scale():
    t = Transform.from_local(Vector3(5.0, 6.0, 7.0))
    assert t.local_rotation == Quaternion.identity()
    assert t.local_scale == Vector3(1.0, 1.0, 1.0)
    assert t.local_matrix.is_close(Matrix4.translation(5.0, 6.0, 7.0))


def test_from_world_sets_both_spaces():
    position = Vector3(-3.0, 1.0, 2.0)
    rotation = Quaternion.from_axis_angle(Vector3(0.0, 1.0, 0.0), math.pi / 3)
    scale = Vector3(1.5, 1.5, 1.5)
    t = Transform.from_world(position, rotation, scale)
    assert t.world_position == position
    assert t.local_position == position
    assert t.world_rotation == rotation.normalized()
    assert t.world_matrix.is_close(compose_matrix(position, rotation, scale))


def test_compose_matrix_identity_inputs():
    m = compose_matrix(Vector3(), Quaternion.identity(), Vector3(1.0, 1.0, 1.0))
    assert m.is_close(Matrix4.identity())


def test_compose_matrix_translation_in_last_row():
    m = compose_matrix(Vector3(4.0, 5.0, 6.0), Quaternion.identity(), Vector3(1.0, 1.0, 1.0))
    assert m[3] == (4.0, 5.0, 6.0, 1.0)


def test_compose_matrix_scales_then_rotates_then_translates():
    position = Vector3(1.0, 2.0, 3.0)
    rotation = Quaternion.from_euler(0.4, -0.7, 1.1)
    scale = Vector3(2.0, 0.5, 3.0)
    point = Vector3(0.3, -1.2, 2.5)
    m = compose_matrix(position, rotation, scale)
    expected = rotation.rotate(point.scaled_by(scale)) + position
    _vec_close(_apply(m, point), expected)


def test_transforms_are_independent():
    a = Transform.from_local(Vector3(1.0, 0.0, 0.0))
    b = Transform()
    assert a.local_position != b.local_position
    assert b.local_position == Vector3()