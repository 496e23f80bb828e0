"""Material descriptions, vertex input layouts and pipeline cache keys."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Optional

from nexuscore.mesh import Mesh

_IDENTITY_COLUMNS = (
    (1.0, 0.0, 0.0, 0.0),
    (0.0, 1.0, 0.0, 0.0),
    (0.0, 0.0, 1.0, 0.0),
    (0.0, 0.0, 0.0, 1.0),
)


class CullMode(IntEnum):
    """Which triangle faces the rasterizer discards."""

    UNDEFINED = 0
    NONE = 1
    FRONT = 2
    BACK = 3


class ValueType(IntEnum):
    """Component type of a vertex attribute."""

    UNDEFINED = 0
    INT8 = 1
    INT16 = 2
    INT32 = 3
    UINT8 = 4
    UINT16 = 5
    UINT32 = 6
    FLOAT16 = 7
    FLOAT32 = 8


_VALUE_SIZES = {
    ValueType.INT8: 1,
    ValueType.UINT8: 1,
    ValueType.INT16: 2,
    ValueType.UINT16: 2,
    ValueType.FLOAT16: 2,
    ValueType.INT32: 4,
    ValueType.UINT32: 4,
    ValueType.FLOAT32: 4,
}


@dataclass(frozen=True)
class LayoutElement:
    """One vertex attribute: shader input slot, buffer slot and format."""

    input_index: int
    buffer_slot: int
    num_components: int
    value_type: ValueType
    is_normalized: bool = False

    def __post_init__(self) -> None:
        if not 1 <= self.num_components <= 4:
            raise ValueError("a vertex attribute has between 1 and 4 components")
        if self.input_index < 0 or self.buffer_slot < 0:
            raise ValueError("input index and buffer slot must not be negative")
        object.__setattr__(self, "value_type", ValueType(self.value_type))

    @property
    def size(self) -> int:
        """Size of the attribute in bytes."""
        if self.value_type is ValueType.UNDEFINED:
            raise ValueError("an undefined value type has no size")
        return _VALUE_SIZES[self.value_type] * self.num_components


def default_input_layout() -> tuple[LayoutElement, ...]:
    """Return the engine's mesh layout: position, normal and uv in slot 0."""
    return (
        LayoutElement(0, 0, 3, ValueType.FLOAT32, False),
        LayoutElement(1, 0, 3, ValueType.FLOAT32, False),
        LayoutElement(2, 0, 2, ValueType.FLOAT32, False),
    )


def _identity_constants() -> bytes:
    return struct.pack("<16f", *(v for column in _IDENTITY_COLUMNS for v in column))


@dataclass(eq=False)
class Material:
    """Shaders, render state and shared bindings used to draw a mesh.

    Materials are compared by identity, as each one owns its own GPU state.
    The shader and texture slots hold whatever the renderer uses to refer to
    them; for file-based materials the shaders are the source file paths.
    """

    name: str = ""
    input_layout: tuple[LayoutElement, ...] = ()
    vertex_shader: Any = None
    pixel_shader: Any = None
    is_transparent: bool = False
    cull_mode: CullMode = CullMode.NONE
    depth_test_enabled: bool = True
    depth_write_enabled: bool = True
    constants: Optional[bytes] = field(default=None, repr=False)
    albedo_texture: Any = field(default=None, repr=False)
    normal_texture: Any = field(default=None, repr=False)
    metallic_roughness_texture: Any = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self.input_layout = tuple(self.input_layout)
        self.cull_mode = CullMode(self.cull_mode)

    @property
    def has_shaders(self) -> bool:
        """Whether both stages are present, so a pipeline can be built."""
        return self.vertex_shader is not None and self.pixel_shader is not None


def surface_material(
    name: str,
    vs_file: str,
    ps_file: str,
    is_transparent: bool = False,
    cull_mode: CullMode = CullMode.FRONT,
    depth_test_enabled: bool = True,
    depth_write_enabled: bool = True,
) -> Material:
    """Create a file-based surface material with the default input layout.

    Its 64-byte constant block starts as the identity matrix columns.
    """
    return Material(
        name=name,
        input_layout=default_input_layout(),
        vertex_shader=vs_file,
        pixel_shader=ps_file,
        is_transparent=is_transparent,
        cull_mode=CullMode(cull_mode),
        depth_test_enabled=depth_test_enabled,
        depth_write_enabled=depth_write_enabled,
        constants=_identity_constants(),
    )


def pipeline_name(material: Material, mesh: Mesh, rtv_format: int, dsv_format: int) -> str:
    """Return the debug name of the pipeline variant for this combination."""
    return f"{material.name}_{mesh.name}_RT{int(rtv_format)}_DS{int(dsv_format)}"


@dataclass(frozen=True, eq=False)
class PipelineKey:
    """Cache key of a pipeline variant: material and mesh by identity, formats by value."""

    material: Material
    mesh: Mesh
    rtv_format: int = 0
    dsv_format: int = 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PipelineKey):
            return NotImplemented
        return (
            self.material is other.material
            and self.mesh is other.mesh
            and self.rtv_format == other.rtv_format
            and self.dsv_format == other.dsv_format
        )

    def __hash__(self) -> int:
        return hash((id(self.material), id(self.mesh), self.rtv_format, self.dsv_format))