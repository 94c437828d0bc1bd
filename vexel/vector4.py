"""Four-component vector.

There is no cross product in four dimensions; callers needing one should
truncate to :class:`Vector3` explicitly.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar, Tuple

from .conversion import truncate
from .scalar import FLOAT64, Precision, S
from .swizzle import swizzle
from .vector import VectorBase

if TYPE_CHECKING:
    from .vector3 import Vector3


@dataclass(frozen=True, repr=False)
class Vector4(VectorBase[S]):
    x: S
    y: S
    z: S
    w: S

    COMPONENT_NAMES: ClassVar[Tuple[str, ...]] = ("x", "y", "z", "w")

    @classmethod
    def unit_x(cls, precision: Precision = FLOAT64) -> "Vector4[Any]":
        return cls._unit(0, precision)

    @classmethod
    def unit_y(cls, precision: Precision = FLOAT64) -> "Vector4[Any]":
        return cls._unit(1, precision)

    @classmethod
    def unit_z(cls, precision: Precision = FLOAT64) -> "Vector4[Any]":
        return cls._unit(2, precision)

    @classmethod
    def unit_w(cls, precision: Precision = FLOAT64) -> "Vector4[Any]":
        return cls._unit(3, precision)

    def truncate(self) -> "Vector3[S]":
        return truncate(self)

    def swizzle(self, *indices: int) -> VectorBase[S]:
        return swizzle(self, *indices)
