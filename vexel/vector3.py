"""Three-component vector."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Tuple

from .conversion import extend, truncate
from .scalar import FLOAT64, Precision, S
from .swizzle import swizzle
from .vector import VectorBase, ieee_arithmetic

if TYPE_CHECKING:
    from .vector2 import Vector2
    from .vector4 import Vector4


@dataclass(frozen=True, repr=False)
class Vector3(VectorBase[S]):
    """Immutable 3D vector with components ``x``, ``y`` and ``z``."""

    x: S
    y: S
    z: S

    COMPONENT_NAMES: ClassVar[Tuple[str, ...]] = ("x", "y", "z")

    @classmethod
    def unit_x(cls, precision: Precision = FLOAT64) -> "Vector3[Any]":
        return cls._unit(0, precision)

    @classmethod
    def unit_y(cls, precision: Precision = FLOAT64) -> "Vector3[Any]":
        return cls._unit(1, precision)

    @classmethod
    def unit_z(cls, precision: Precision = FLOAT64) -> "Vector3[Any]":
        return cls._unit(2, precision)

    @ieee_arithmetic
    def cross(self, other: "Vector3[S]") -> "Vector3[S]":
        """Right-handed cross product; the zero vector for parallel inputs."""
        other_x, other_y, other_z = self._operand(other)
        return Vector3(
            self.y * other_z - self.z * other_y,
            self.z * other_x - self.x * other_z,
            self.x * other_y - self.y * other_x,
        )

    def extend(self, w: Any) -> "Vector4[S]":
        return extend(self, w)

    def truncate(self) -> "Vector2[S]":
        return truncate(self)

    def swizzle(self, *indices: int) -> VectorBase[S]:
        return swizzle(self, *indices)
