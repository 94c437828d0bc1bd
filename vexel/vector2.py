"""Two-component vector."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Tuple

from .conversion import extend
from .scalar import FLOAT64, Precision, S
from .swizzle import swizzle
from .vector import VectorBase, ieee_arithmetic

if TYPE_CHECKING:
    from .vector3 import Vector3


@dataclass(frozen=True, repr=False)
class Vector2(VectorBase[S]):
    """Immutable 2D vector with components ``x`` and ``y``."""

    x: S
    y: S

    COMPONENT_NAMES: ClassVar[Tuple[str, ...]] = ("x", "y")

    @classmethod
    def unit_x(cls, precision: Precision = FLOAT64) -> "Vector2[Any]":
        return cls._unit(0, precision)

    @classmethod
    def unit_y(cls, precision: Precision = FLOAT64) -> "Vector2[Any]":
        return cls._unit(1, precision)

    @ieee_arithmetic
    def cross(self, other: "Vector2[S]") -> S:
        """Signed area ``x * other.y - y * other.x`` of the spanned parallelogram."""
        other_x, other_y = self._operand(other)
        return self.x * other_y - self.y * other_x

    def perpendicular(self) -> "Vector2[S]":
        """Counter-clockwise quarter turn."""
        return Vector2(-self.y, self.x)

    def extend(self, z: Any) -> "Vector3[S]":
        return extend(self, z)

    def swizzle(self, *indices: int) -> VectorBase[S]:
        return swizzle(self, *indices)
