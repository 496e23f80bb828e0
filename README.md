# nexuscore

nexuscore is the data side of a small game engine core. It is written in pure Python and has no third-party dependencies. It provides 3D math, a transform hierarchy, procedural meshes, material descriptions and a shader bytecode cache.

## Modules

- **`nexuscore.math3d`**
  - `Vector3` is an immutable vector. It supports `+`, `-`, `scaled_by` (component-wise product) and `divided_safe`, which divides component-wise but keeps a component whose divisor is zero.
  - `Matrix4` is an immutable 4x4 matrix that uses the row-vector convention. It has `identity()`, `scale(x, y, z)` and `translation(x, y, z)`. It also supports `*`, indexing with `m[row]` or `m[row, col]`, and `is_close`.
- **`nexuscore.quaternion`**
  - `Quaternion` offers `normalized`, `conjugate`, `inverse`, `dot` and `*`.
  - To build one, use `from_axis_angle`, `from_euler(pitch, yaw, roll)` (composed X·Y·Z) or `from_euler_vector`.
  - It converts back with `to_euler`, which falls back to zero roll at gimbal lock, and with `to_matrix`.
  - It rotates vectors with `rotate`, and gives the rotated directions `forward` (−Z) and `right` (+X).
- **`nexuscore.transform`**
  - `Transform` holds local and world position, rotation and scale, and the matrices built from them. Create one with `Transform()`, `Transform.from_local(...)` or `Transform.from_world(...)`. Its values are read-only properties.
  - `compose_matrix(position, rotation, scale)` builds a matrix that applies scale, then rotation, then translation.
- **`nexuscore.hierarchy`**
  - `Entity` is a named tree node that may carry a `Transform`. `set_parent` raises `ValueError` on a cycle.
  - `World` keeps entities in creation order. It has `create_entity(name, parent, transform)` and supports iteration and `len`.
  - The functions that change transforms keep each subtree consistent:
    - `set_local_transform`, `set_local_position`, `set_local_rotation` and `set_local_scale` change local values.
    - `set_world_transform`, `set_world_position`, `set_world_rotation` and `set_world_scale` change world values.
    - `update_world_from_local`, `update_local_from_world`, `update_world_recursive` and `update_children_recursive` recompute one side from the other.
    - `sync_transform_hierarchy_from_roots(world)` rebuilds every tree in a world.
  - `require_transform` raises `ValueError` for an entity that has no transform.
- **`nexuscore.mesh`**
  - `Vertex` holds a position, a normal and a uv; its stride is 32 bytes.
  - `Mesh` validates its indices and packs its buffers with `vertex_bytes` and `index_bytes`. `PrimitiveTopology` gives its topology.
  - Built-in shapes: `create_cube_mesh()` has 24 vertices and 36 indices, `create_plane_mesh()` is a 1×1 plane in XZ, and `create_sphere_mesh(segments=32)` is a UV sphere of radius 0.5.
- **`nexuscore.material`**
  - `Material` describes shaders, culling, blending and depth state. `CullMode` gives the culling options.
  - `LayoutElement` and `ValueType` describe vertex input. `default_input_layout()` returns position, normal and uv as 32-bit floats.
  - `surface_material(...)` creates a file-based material. By default it culls front faces, and its 64-byte constant block holds an identity matrix.
  - `pipeline_name(...)` and `PipelineKey` name and key pipeline variants. A key compares its material and mesh by identity.
- **`nexuscore.shader_cache`**
  - `ShaderCache(source_root, cache_root)` resolves shader files and reads their source. It stores compiled bytecode under `<file>.<fingerprint>.cso`, where the fingerprint is `fnv1a_hash` of the source, entry point and profile.
  - `iter_shader_sources()` yields the `.vs.hlsl` and `.ps.hlsl` files.
  - `shader_profile` maps a `ShaderType` to `vs_5_0` or `ps_5_0`. `shader_type_for_filename` classifies a file by its suffix.
- **`nexuscore.inspected_target`**
  - `InspectedTarget` holds nothing, an `EntityInspectedTarget` or an `AssetInspectedTarget`.

## Examples

Moving a parent moves its children:

```python
from nexuscore.hierarchy import World, set_local_position
from nexuscore.math3d import Vector3
from nexuscore.transform import Transform

world = World()
parent = world.create_entity("parent", None, Transform())
child = world.create_entity("child", parent, Transform())
set_local_position(parent, Vector3(1.0, 0.0, 0.0))
print(child.transform.world_position)  # Vector3(x=1.0, y=0.0, z=0.0)
```

Building a mesh and naming a pipeline variant for it:

```python
from nexuscore.material import surface_material, pipeline_name
from nexuscore.mesh import create_cube_mesh

cube = create_cube_mesh()
material = surface_material("Lit", "DefaultLit.vs.hlsl", "DefaultLit.ps.hlsl")
print(cube.vertex_count, cube.index_count)   # 24 36
print(pipeline_name(material, cube, 29, 40)) # Lit_Cube_RT29_DS40
```

## What it does not do

- **No saving or loading.** Scenes, entities and project settings cannot be written to or read from any format.
- **No engine component types.** It has no camera, fly-camera, render-texture or render-mesh components, and no list of scene pipeline phases.
- **No shader compilation and no GPU work.** Meshes and materials are descriptions only. The shader cache stores and finds bytecode, but cannot produce it.
- **No command-line tool.**

## Running the tests

```
pip install -e .[test]
pytest
```