"""What the editor inspector is currently showing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

_UINT64_MAX = 2**64 - 1


@dataclass(frozen=True)
class EntityInspectedTarget:
    """An entity selected for inspection, by id."""

    entity_id: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.entity_id <= _UINT64_MAX:
            raise ValueError(f"entity id {self.entity_id} is not an unsigned 64-bit value")


@dataclass(frozen=True)
class AssetInspectedTarget:
    """An asset selected for inspection, by path."""

    asset_path: str = ""


@dataclass(frozen=True)
class InspectedTarget:
    """Nothing, an entity, or an asset."""

    value: Optional[Union[EntityInspectedTarget, AssetInspectedTarget]] = None

    def __post_init__(self) -> None:
        if self.value is not None and not isinstance(
            self.value, (EntityInspectedTarget, AssetInspectedTarget)
        ):
            raise TypeError(f"cannot inspect a {type(self.value).__name__}")

    def is_empty(self) -> bool:
        """Return whether nothing is being inspected."""
        return self.value is None