import struct

import pytest

from nexuscore.material import (
    CullMode,
    LayoutElement,
    Material,
    PipelineKey,
    ValueType,
    default_input_layout,
    pipeline_name,
    surface_material,
)
from nexuscore.mesh import create_cube_mesh, create_plane_mesh


def test_default_input_layout_attributes():
    layout = default_input_layout()
    assert [e.input_index for e in layout] == [0, 1, 2]
    assert [e.num_components for e in layout] == [3, 3, 2]
    assert all(e.buffer_slot == 0 for e in layout)
    assert all(e.value_type is ValueType.FLOAT32 for e in layout)
    assert not any(e.is_normalized for e in layout)


def test_default_layout_matches_vertex_stride():
    cube = create_cube_mesh()
    assert sum(e.size for e in default_input_layout()) == cube.vertex_stride


def test_layout_element_rejects_bad_component_count():
    with pytest.raises(ValueError):
        LayoutElement(0, 0, 5, ValueType.FLOAT32)
    with pytest.raises(ValueError):
        LayoutElement(0, 0, 0, ValueType.FLOAT32)


def test_material_defaults():
    material = Material(name="plain")
    assert material.cull_mode is CullMode.NONE
    assert material.depth_test_enabled is True
    assert material.depth_write_enabled is True
    assert material.is_transparent is False
    assert material.has_shaders is False


def test_surface_material_applies_settings():
    material = surface_material(
        "Glass", "Glass.vs.hlsl", "Glass.ps.hlsl", True, CullMode.BACK, True, False
    )
    assert material.name == "Glass"
    assert material.vertex_shader == "Glass.vs.hlsl"
    assert material.pixel_shader == "Glass.ps.hlsl"
    assert material.is_transparent is True
    assert material.cull_mode is CullMode.BACK
    assert material.depth_write_enabled is False
    assert material.input_layout == default_input_layout()
    assert material.has_shaders is True


def test_surface_material_constants_are_identity():
    material = surface_material("Unlit", "Unlit.vs.hlsl", "Unlit.ps.hlsl")
    assert len(material.constants) == 64
    values = struct.unpack("<16f", material.constants)
    rows = [values[i * 4 : i * 4 + 4] for i in range(4)]
    for i, row in enumerate(rows):
        assert row[i] == 1.0
        assert sum(row) == 1.0


def test_surface_material_default_cull_mode_is_front():
    material = surface_material("Lit", "a.vs.hlsl", "a.ps.hlsl")
    assert material.cull_mode is CullMode.FRONT


def test_pipeline_name_combines_parts():
    material = Material(name="Mat")
    cube = create_cube_mesh()
    assert pipeline_name(material, cube, 5, 10) == "Mat_Cube_RT5_DS10"


def test_pipeline_key_equality_by_identity():
    material = Material(name="Mat")
    twin = Material(name="Mat")
    cube = create_cube_mesh()
    key = PipelineKey(material, cube, 1, 2)
    assert key == PipelineKey(material, cube, 1, 2)
    assert not key == PipelineKey(twin, cube, 1, 2)
    assert not key == PipelineKey(material, cube, 1, 3)


def test_pipeline_key_as_cache_key():
    material = Material(name="Mat")
    cube = create_cube_mesh()
    plane = create_plane_mesh()
    cache = {PipelineKey(material, cube, 1, 2): "cube", PipelineKey(material, plane, 1, 2): "plane"}
    assert cache[PipelineKey(material, cube, 1, 2)] == "cube"
    assert cache[PipelineKey(material, plane, 1, 2)] == "plane"
    assert len(cache) == 2