"""Local and world transform state for an entity."""

from __future__ import annotations

from nexuscore.math3d import Matrix4, Vector3
from nexuscore.quaternion import Quaternion

_UNIT_SCALE = Vector3(1.0, 1.0, 1.0)


def compose_matrix(position: Vector3, rotation: Quaternion, scale: Vector3) -> Matrix4:
    """Return the scale, then rotate, then translate matrix (row-vector order)."""
    scaled = Matrix4.scale(scale.x, scale.y, scale.z) * rotation.to_matrix()
    return scaled * Matrix4.translation(position.x, position.y, position.z)


class Transform:
    """Local transform values plus the world values derived from a hierarchy.

    The values are read-only from outside; the functions in
    :mod:`nexuscore.hierarchy` change them and keep parents and children
    consistent.
    """

    __slots__ = (
        "_local_position",
        "_local_rotation",
        "_local_scale",
        "_world_position",
        "_world_rotation",
        "_world_scale",
        "_local_matrix",
        "_world_matrix",
    )

    def __init__(self) -> None:
        self._local_position = Vector3()
        self._local_rotation = Quaternion.identity()
        self._local_scale = _UNIT_SCALE
        self._world_position = self._local_position
        self._world_rotation = self._local_rotation
        self._world_scale = self._local_scale
        self._local_matrix = Matrix4.identity()
        self._world_matrix = Matrix4.identity()
        self._rebuild_local_matrix()
        self._rebuild_world_matrix()

    @staticmethod
    def from_local(
        position: Vector3,
        rotation: Quaternion = Quaternion(),
        scale: Vector3 = _UNIT_SCALE,
    ) -> Transform:
        """Create a transform whose world values equal the given local values."""
        transform = Transform()
        transform._update_local(position=position, rotation=rotation, scale=scale)
        transform._rebuild_local_matrix()
        transform._update_world(
            position=transform._local_position,
            rotation=transform._local_rotation,
            scale=transform._local_scale,
        )
        transform._rebuild_world_matrix()
        return transform

    @staticmethod
    def from_world(
        position: Vector3,
        rotation: Quaternion = Quaternion(),
        scale: Vector3 = _UNIT_SCALE,
    ) -> Transform:
        """Create a transform from world values; local values start equal to them."""
        transform = Transform()
        transform._update_local(position=position, rotation=rotation, scale=scale)
        transform._rebuild_local_matrix()
        transform._update_world(position=position, rotation=rotation, scale=scale)
        transform._rebuild_world_matrix()
        return transform

    @property
    def local_position(self) -> Vector3:
        """Position relative to the parent."""
        return self._local_position

    @property
    def local_rotation(self) -> Quaternion:
        """Rotation relative to the parent."""
        return self._local_rotation

    @property
    def local_scale(self) -> Vector3:
        """Scale relative to the parent."""
        return self._local_scale

    @property
    def world_position(self) -> Vector3:
        """Derived world-space position."""
        return self._world_position

    @property
    def world_rotation(self) -> Quaternion:
        """Derived world-space rotation."""
        return self._world_rotation

    @property
    def world_scale(self) -> Vector3:
        """Derived world-space scale."""
        return self._world_scale

    @property
    def local_matrix(self) -> Matrix4:
        """Matrix built from the local values."""
        return self._local_matrix

    @property
    def world_matrix(self) -> Matrix4:
        """Matrix mapping local space into world space."""
        return self._world_matrix

    def _update_local(
        self,
        position: Vector3 | None = None,
        rotation: Quaternion | None = None,
        scale: Vector3 | None = None,
    ) -> None:
        if position is not None:
            self._local_position = position
        if rotation is not None:
            self._local_rotation = rotation.normalized()
        if scale is not None:
            self._local_scale = scale

    def _update_world(
        self,
        position: Vector3 | None = None,
        rotation: Quaternion | None = None,
        scale: Vector3 | None = None,
    ) -> None:
        if position is not None:
            self._world_position = position
        if rotation is not None:
            self._world_rotation = rotation.normalized()
        if scale is not None:
            self._world_scale = scale

    def _set_world_matrix(self, matrix: Matrix4) -> None:
        self._world_matrix = matrix

    def _rebuild_local_matrix(self) -> None:
        self._local_matrix = compose_matrix(
            self._local_position, self._local_rotation, self._local_scale
        )

    def _rebuild_world_matrix(self) -> None:
        self._world_matrix = compose_matrix(
            self._world_position, self._world_rotation, self._world_scale
        )

    def __repr__(self) -> str:
        return (
            f"Transform(local_position={self._local_position!r}, "
            f"local_rotation={self._local_rotation!r}, "
            f"local_scale={self._local_scale!r})"
        )