"""Shader source lookup and an on-disk cache of compiled bytecode."""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Iterator, Optional, Union

_FNV_OFFSET = 1469598103934665603
_FNV_PRIME = 1099511628211
_MASK64 = (1 << 64) - 1

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


class ShaderType(Enum):
    """Pipeline stage a shader belongs to."""

    UNKNOWN = "unknown"
    VERTEX = "vertex"
    PIXEL = "pixel"


_PROFILES = {
    ShaderType.VERTEX: "vs_5_0",
    ShaderType.PIXEL: "ps_5_0",
}

_SUFFIXES = (
    (".vs.hlsl", ShaderType.VERTEX),
    (".ps.hlsl", ShaderType.PIXEL),
)


def fnv1a_hash(data: Union[bytes, str]) -> int:
    """Return the 64-bit FNV-1a hash of ``data`` (text is hashed as UTF-8)."""
    if isinstance(data, str):
        data = data.encode(_ENCODING, _ERRORS)
    value = _FNV_OFFSET
    for byte in data:
        value = ((value ^ byte) * _FNV_PRIME) & _MASK64
    return value


def shader_profile(shader_type: ShaderType) -> Optional[str]:
    """Return the compiler profile for a stage, or ``None`` if it has none."""
    return _PROFILES.get(shader_type)


def shader_type_for_filename(filename: str) -> ShaderType:
    """Classify a shader file by its ``.vs.hlsl`` or ``.ps.hlsl`` suffix."""
    for suffix, shader_type in _SUFFIXES:
        if filename.endswith(suffix):
            return shader_type
    return ShaderType.UNKNOWN


class ShaderCache:
    """Resolves shader sources and stores compiled bytecode keyed by content."""

    def __init__(self, source_root: Union[str, Path], cache_root: Union[str, Path]) -> None:
        self.source_root = Path(source_root)
        self.cache_root = Path(cache_root)

    def resolve(self, file_path: Union[str, Path]) -> Path:
        """Return ``file_path`` if absolute, otherwise relative to the source root."""
        path = Path(file_path)
        return path if path.is_absolute() else self.source_root / path

    def read_source(self, path: Union[str, Path]) -> str:
        """Return the file's text, or an empty string if it cannot be read."""
        try:
            return Path(path).read_bytes().decode(_ENCODING, _ERRORS)
        except OSError:
            return ""

    def cache_path(
        self, source_path: Union[str, Path], entry_point: str, shader_type: ShaderType
    ) -> Path:
        """Return the bytecode path fingerprinted by source, entry point and profile."""
        source_path = Path(source_path)
        source = self.read_source(source_path)
        profile = shader_profile(shader_type) or "unknown"
        fingerprint = fnv1a_hash(f"{source}|{entry_point}|{profile}")
        return self.cache_root / f"{source_path.name}.{fingerprint}.cso"

    def load_bytecode(self, path: Union[str, Path]) -> bytes:
        """Return cached bytecode, or empty bytes if none is stored."""
        try:
            return Path(path).read_bytes()
        except OSError:
            return b""

    def store_bytecode(self, path: Union[str, Path], data: bytes) -> None:
        """Write bytecode to ``path``, creating its directories."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(bytes(data))

    def iter_shader_sources(self) -> Iterator[tuple[Path, ShaderType]]:
        """Yield every vertex and pixel shader file under the source root.

        Raises ``FileNotFoundError`` if the source root does not exist.
        """
        if not self.source_root.exists():
            raise FileNotFoundError(f"shader source root {self.source_root} does not exist")
        for path in sorted(self.source_root.rglob("*")):
            if not path.is_file():
                continue
            shader_type = shader_type_for_filename(path.name)
            if shader_type is not ShaderType.UNKNOWN:
                yield path, shader_type