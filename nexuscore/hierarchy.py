"""Entity tree and the functions that keep local and world transforms in sync."""

from __future__ import annotations

from typing import Iterator

from nexuscore.math3d import Vector3
from nexuscore.quaternion import Quaternion
from nexuscore.transform import Transform


class Entity:
    """Named node of a scene tree that may carry a :class:`Transform`."""

    def __init__(self, name: str = "", transform: Transform | None = None) -> None:
        self.name = name
        self.transform = transform
        self._parent: Entity | None = None
        self._children: list[Entity] = []

    def set_parent(self, parent: Entity | None) -> None:
        """Attach under ``parent``, or detach with ``None``.

        Raises ``ValueError`` if the move would create a cycle.
        """
        node = parent
        while node is not None:
            if node is self:
                raise ValueError("an entity cannot be parented under itself or a descendant")
            node = node._parent
        if self._parent is not None:
            self._parent._children.remove(self)
        self._parent = parent
        if parent is not None:
            parent._children.append(self)

    @property
    def parent(self) -> Entity | None:
        """The parent entity, or ``None`` for a root."""
        return self._parent

    @property
    def children(self) -> tuple[Entity, ...]:
        """The direct children in the order they were attached."""
        return tuple(self._children)

    def __repr__(self) -> str:
        return f"Entity({self.name!r})"


class World:
    """Collection of entities in creation order."""

    def __init__(self) -> None:
        self._entities: list[Entity] = []

    def create_entity(
        self,
        name: str = "",
        parent: Entity | None = None,
        transform: Transform | None = None,
    ) -> Entity:
        """Create an entity, optionally under ``parent`` and with a transform."""
        entity = Entity(name, transform)
        if parent is not None:
            entity.set_parent(parent)
        self._entities.append(entity)
        return entity

    def __iter__(self) -> Iterator[Entity]:
        return iter(self._entities)

    def __len__(self) -> int:
        return len(self._entities)


def require_transform(entity: Entity) -> Transform:
    """Return the entity's transform; raise ``ValueError`` if it has none."""
    if entity.transform is None:
        raise ValueError(f"{entity!r} has no transform")
    return entity.transform


def _parent_transform(entity: Entity) -> Transform | None:
    parent = entity.parent
    return parent.transform if parent is not None else None


def update_world_from_local(entity: Entity) -> None:
    """Recompute world values of ``entity`` from its local values and parent."""
    transform = require_transform(entity)
    transform._rebuild_local_matrix()
    parent = _parent_transform(entity)

    if parent is not None:
        rotation = (parent.world_rotation * transform.local_rotation).normalized()
        scale = parent.world_scale.scaled_by(transform.local_scale)
        offset = parent.world_rotation.rotate(
            parent.world_scale.scaled_by(transform.local_position)
        )
        transform._update_world(
            position=parent.world_position + offset, rotation=rotation, scale=scale
        )
        transform._set_world_matrix(transform.local_matrix * parent.world_matrix)
    else:
        transform._update_world(
            position=transform.local_position,
            rotation=transform.local_rotation,
            scale=transform.local_scale,
        )
        transform._set_world_matrix(transform.local_matrix)


def update_local_from_world(entity: Entity) -> None:
    """Recompute local values of ``entity`` from its world values and parent."""
    transform = require_transform(entity)
    transform._rebuild_world_matrix()
    parent = _parent_transform(entity)

    if parent is not None:
        inverse_rotation = parent.world_rotation.inverse()
        unrotated = inverse_rotation.rotate(transform.world_position - parent.world_position)
        transform._update_local(
            position=unrotated.divided_safe(parent.world_scale),
            rotation=(inverse_rotation * transform.world_rotation).normalized(),
            scale=transform.world_scale.divided_safe(parent.world_scale),
        )
    else:
        transform._update_local(
            position=transform.world_position,
            rotation=transform.world_rotation,
            scale=transform.world_scale,
        )
    transform._rebuild_local_matrix()


def update_world_recursive(entity: Entity) -> None:
    """Update world values of ``entity`` and every descendant with a transform."""
    update_world_from_local(entity)
    update_children_recursive(entity)


def update_children_recursive(entity: Entity) -> None:
    """Update world values of the descendants of ``entity`` only."""
    for child in entity.children:
        if child.transform is not None:
            update_world_recursive(child)


def set_local_transform(
    entity: Entity, position: Vector3, rotation: Quaternion, scale: Vector3
) -> None:
    """Replace all local values and update the subtree."""
    require_transform(entity)._update_local(position=position, rotation=rotation, scale=scale)
    update_world_recursive(entity)


def set_local_position(entity: Entity, position: Vector3) -> None:
    """Replace the local position and update the subtree."""
    require_transform(entity)._update_local(position=position)
    update_world_recursive(entity)


def set_local_rotation(entity: Entity, rotation: Quaternion) -> None:
    """Replace the local rotation and update the subtree."""
    require_transform(entity)._update_local(rotation=rotation)
    update_world_recursive(entity)


def set_local_scale(entity: Entity, scale: Vector3) -> None:
    """Replace the local scale and update the subtree."""
    require_transform(entity)._update_local(scale=scale)
    update_world_recursive(entity)


def set_world_transform(
    entity: Entity, position: Vector3, rotation: Quaternion, scale: Vector3
) -> None:
    """Replace all world values, derive local values and update the children."""
    require_transform(entity)._update_world(position=position, rotation=rotation, scale=scale)
    update_local_from_world(entity)
    update_children_recursive(entity)


def set_world_position(entity: Entity, position: Vector3) -> None:
    """Replace the world position and update the children."""
    require_transform(entity)._update_world(position=position)
    update_local_from_world(entity)
    update_children_recursive(entity)


def set_world_rotation(entity: Entity, rotation: Quaternion) -> None:
    """Replace the world rotation and update the children."""
    require_transform(entity)._update_world(rotation=rotation)
    update_local_from_world(entity)
    update_children_recursive(entity)


def set_world_scale(entity: Entity, scale: Vector3) -> None:
    """Replace the world scale and update the children."""
    require_transform(entity)._update_world(scale=scale)
    update_local_from_world(entity)
    update_children_recursive(entity)


def sync_transform_hierarchy_from_roots(world: World) -> None:
    """Rebuild world values for every transform tree in ``world``."""
    for entity in world:
        if entity.transform is None:
            continue
        parent = entity.parent
        if parent is None or parent.transform is None:
            update_world_recursive(entity)