"""Small vector and 4x4 matrix types using the row-vector convention."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

_IDENTITY_ROWS = (
    (1.0, 0.0, 0.0, 0.0),
    (0.0, 1.0, 0.0, 0.0),
    (0.0, 0.0, 1.0, 0.0),
    (0.0, 0.0, 0.0, 1.0),
)


@dataclass(frozen=True)
class Vector3:
    """Immutable three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def scaled_by(self, other: Vector3) -> Vector3:
        """Return the component-wise product with ``other``."""
        return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)

    def divided_safe(self, divisor: Vector3) -> Vector3:
        """Divide component-wise, keeping a component whose divisor is zero."""
        return Vector3(
            *(
                value / d if d != 0.0 else value
                for value, d in zip(self, divisor)
            )
        )


@dataclass(frozen=True)
class Matrix4:
    """Immutable 4x4 matrix stored as rows; vectors multiply from the left."""

    rows: tuple[tuple[float, ...], ...] = _IDENTITY_ROWS

    def __post_init__(self) -> None:
        rows = tuple(tuple(float(value) for value in row) for row in self.rows)
        if len(rows) != 4 or any(len(row) != 4 for row in rows):
            raise ValueError("a Matrix4 needs exactly 4 rows of 4 values")
        object.__setattr__(self, "rows", rows)

    @staticmethod
    def identity() -> Matrix4:
        """Return the identity matrix."""
        return Matrix4()

    @staticmethod
    def scale(x: float, y: float, z: float) -> Matrix4:
        """Return a scaling matrix."""
        return Matrix4(
            (
                (x, 0.0, 0.0, 0.0),
                (0.0, y, 0.0, 0.0),
                (0.0, 0.0, z, 0.0),
                (0.0, 0.0, 0.0, 1.0),
            )
        )

    @staticmethod
    def translation(x: float, y: float, z: float) -> Matrix4:
        """Return a translation matrix with the offset in the last row."""
        return Matrix4(
            (
                (1.0, 0.0, 0.0, 0.0),
                (0.0, 1.0, 0.0, 0.0),
                (0.0, 0.0, 1.0, 0.0),
                (x, y, z, 1.0),
            )
        )

    def __mul__(self, other: Matrix4) -> Matrix4:
        if not isinstance(other, Matrix4):
            return NotImplemented
        columns = tuple(zip(*other.rows))
        return Matrix4(
            tuple(
                tuple(sum(a * b for a, b in zip(row, column)) for column in columns)
                for row in self.rows
            )
        )

    def __getitem__(self, index):
        """Return a row for an int index, or an element for a (row, col) pair."""
        if isinstance(index, tuple):
            row, column = index
            return self.rows[row][column]
        return self.rows[index]

    def is_close(self, other: Matrix4, tolerance: float = 1e-6) -> bool:
        """Return whether every element lies within ``tolerance`` of ``other``."""
        return all(
            abs(a - b) <= tolerance
            for row_a, row_b in zip(self.rows, other.rows)
            for a, b in zip(row_a, row_b)
        )