"""3D math, transform hierarchy, procedural meshes, material descriptions, shader cache and editor inspection target."""

__version__ = "0.1.0"