"""Mesh geometry and generators for the built-in primitive shapes."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass, field
from enum import IntEnum


class PrimitiveTopology(IntEnum):
    """How the indices of a mesh are assembled into primitives."""

    UNDEFINED = 0
    TRIANGLE_LIST = 1
    TRIANGLE_STRIP = 2
    POINT_LIST = 3
    LINE_LIST = 4
    LINE_STRIP = 5


_VERTEX_FORMAT = struct.Struct("<8f")
_INDEX_FORMAT = "<I"
_UINT32_MAX = 2**32 - 1


@dataclass(frozen=True)
class Vertex:
    """Vertex holding a position, a normal and texture coordinates."""

    position: tuple[float, float, float]
    normal: tuple[float, float, float]
    uv: tuple[float, float]

    STRIDE = _VERTEX_FORMAT.size

    def __post_init__(self) -> None:
        position = tuple(float(v) for v in self.position)
        normal = tuple(float(v) for v in self.normal)
        uv = tuple(float(v) for v in self.uv)
        if len(position) != 3 or len(normal) != 3 or len(uv) != 2:
            raise ValueError("a vertex needs a 3D position, a 3D normal and a 2D uv")
        object.__setattr__(self, "position", position)
        object.__setattr__(self, "normal", normal)
        object.__setattr__(self, "uv", uv)

    def to_bytes(self) -> bytes:
        """Return the vertex as little-endian 32-bit floats."""
        return _VERTEX_FORMAT.pack(*self.position, *self.normal, *self.uv)


@dataclass(frozen=True)
class Mesh:
    """Named vertex and index data drawn with a primitive topology."""

    name: str
    vertices: tuple[Vertex, ...]
    indices: tuple[int, ...] = ()
    topology: PrimitiveTopology = PrimitiveTopology.TRIANGLE_LIST
    _stride: int = field(default=Vertex.STRIDE, repr=False)

    def __post_init__(self) -> None:
        vertices = tuple(self.vertices)
        indices = tuple(int(i) for i in self.indices)
        for index in indices:
            if not 0 <= index < len(vertices):
                raise ValueError(
                    f"index {index} does not refer to one of {len(vertices)} vertices"
                )
        if len(indices) > _UINT32_MAX or len(vertices) > _UINT32_MAX:
            raise ValueError("mesh is too large for 32-bit counts")
        object.__setattr__(self, "vertices", vertices)
        object.__setattr__(self, "indices", indices)
        object.__setattr__(self, "topology", PrimitiveTopology(self.topology))

    @property
    def vertex_count(self) -> int:
        """Number of vertices."""
        return len(self.vertices)

    @property
    def index_count(self) -> int:
        """Number of indices."""
        return len(self.indices)

    @property
    def vertex_stride(self) -> int:
        """Size of one vertex in bytes."""
        return self._stride

    def vertex_bytes(self) -> bytes:
        """Return the packed vertex buffer contents."""
        return b"".join(vertex.to_bytes() for vertex in self.vertices)

    def index_bytes(self) -> bytes:
        """Return the packed 32-bit index buffer contents."""
        return struct.pack(f"<{len(self.indices)}I", *self.indices)


def _quad_indices(base: int) -> tuple[int, ...]:
    return (base, base + 1, base + 2, base + 2, base + 3, base)


_CUBE_FACES = (
    # (normal, four corner positions)
    ((0.0, 0.0, 1.0), ((-0.5, -0.5, 0.5), (0.5, -0.5, 0.5), (0.5, 0.5, 0.5), (-0.5, 0.5, 0.5))),
    ((0.0, 0.0, -1.0), ((0.5, -0.5, -0.5), (-0.5, -0.5, -0.5), (-0.5, 0.5, -0.5), (0.5, 0.5, -0.5))),
    ((0.0, 1.0, 0.0), ((-0.5, 0.5, 0.5), (0.5, 0.5, 0.5), (0.5, 0.5, -0.5), (-0.5, 0.5, -0.5))),
    ((0.0, -1.0, 0.0), ((-0.5, -0.5, -0.5), (0.5, -0.5, -0.5), (0.5, -0.5, 0.5), (-0.5, -0.5, 0.5))),
    ((1.0, 0.0, 0.0), ((0.5, -0.5, 0.5), (0.5, -0.5, -0.5), (0.5, 0.5, -0.5), (0.5, 0.5, 0.5))),
    ((-1.0, 0.0, 0.0), ((-0.5, -0.5, -0.5), (-0.5, -0.5, 0.5), (-0.5, 0.5, 0.5), (-0.5, 0.5, -0.5))),
)

_QUAD_UVS = ((0.0, 1.0), (1.0, 1.0), (1.0, 0.0), (0.0, 0.0))


def create_cube_mesh() -> Mesh:
    """Return a unit cube centred on the origin with per-face normals."""
    vertices = []
    indices: list[int] = []
    for normal, corners in _CUBE_FACES:
        indices.extend(_quad_indices(len(vertices)))
        vertices.extend(Vertex(corner, normal, uv) for corner, uv in zip(corners, _QUAD_UVS))
    return Mesh("Cube", tuple(vertices), tuple(indices))


def create_plane_mesh() -> Mesh:
    """Return a unit plane in the XZ plane facing up."""
    corners = ((-0.5, 0.0, -0.5), (0.5, 0.0, -0.5), (0.5, 0.0, 0.5), (-0.5, 0.0, 0.5))
    up = (0.0, 1.0, 0.0)
    vertices = tuple(Vertex(corner, up, uv) for corner, uv in zip(corners, _QUAD_UVS))
    return Mesh("Plane", vertices, _quad_indices(0))


def create_sphere_mesh(segments: int = 32) -> Mesh:
    """Return a UV sphere of radius 0.5 with ``segments`` rings and slices.

    Raises ``ValueError`` when ``segments`` is less than 1.
    """
    if segments < 1:
        raise ValueError("a sphere needs at least one segment")

    vertices = []
    for lat in range(segments + 1):
        theta = lat * math.pi / segments
        sin_theta, cos_theta = math.sin(theta), math.cos(theta)
        for lon in range(segments + 1):
            phi = lon * 2.0 * math.pi / segments
            normal = (math.cos(phi) * sin_theta, cos_theta, math.sin(phi) * sin_theta)
            position = tuple(component * 0.5 for component in normal)
            vertices.append(Vertex(position, normal, (lon / segments, lat / segments)))

    indices: list[int] = []
    for lat in range(segments):
        for lon in range(segments):
            first = lat * (segments + 1) + lon
            second = first + segments + 1
            indices.extend((first, second, first + 1, second, second + 1, first + 1))

    return Mesh("Sphere", tuple(vertices), tuple(indices))