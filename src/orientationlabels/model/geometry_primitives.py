"""
Geometric Primitives for camera orientation math.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, Sequence, Union, TYPE_CHECKING
import numpy as np
import math

if TYPE_CHECKING:
    import numpy.typing as npt

VectorLike = Union["Vector", Sequence[float], "npt.NDArray[np.float64]"]


@dataclass(frozen=True)
class Vector:
    """
    A direction in the LPS world space (x, y, z) = (axis0, axis1, axis2).
    """
    x: float
    y: float
    z: float

    @classmethod
    def from_sequence(cls, values: VectorLike) -> Vector:
        """
        Build a Vector from any 3-component sequence (tuple, list, numpy array,
        or the tuples returned by vtkCamera getters).

        Raises:
            ValueError: If the input does not hold exactly 3 components.
        """
        if isinstance(values, Vector):
            return values
        arr = np.asarray(values, dtype=np.float64).reshape(-1)
        if arr.shape != (3,):
            raise ValueError(f"Expected 3 components, got shape {arr.shape}.")
        return cls(float(arr[0]), float(arr[1]), float(arr[2]))

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z)[index]

    def __len__(self) -> int:
        return 3

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y, -self.z)

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.x**2 + self.y**2 + self.z**2)

    @property
    def is_finite(self) -> bool:
        return all(math.isfinite(c) for c in self)

    def dot(self, other: Vector) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector) -> Vector:
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y, self.z])
