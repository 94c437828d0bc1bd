"""Fixed-size vector math for physics and geometry code.

The package provides immutable :class:`Vector2`, :class:`Vector3` and
:class:`Vector4` values over single or double precision elements, together
with swizzling and extend/truncate conversions between them.
"""
import logging

from .config import ToleranceSettings, load_tolerance_settings
from .conversion import extend, truncate
from .errors import DegenerateVector, DivisionByZero, IndexOutOfRange, InvalidOperation
from .scalar import FLOAT32, FLOAT64, Precision, ScalarElement, precision_of
from .swizzle import Axis, swizzle
from .vector import VectorBase
from .vector2 import Vector2
from .vector3 import Vector3
from .vector4 import Vector4
from . import ops

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Vector2",
    "Vector3",
    "Vector4",
    "VectorBase",
    "Precision",
    "ScalarElement",
    "FLOAT32",
    "FLOAT64",
    "precision_of",
    "Axis",
    "swizzle",
    "extend",
    "truncate",
    "ops",
    "DivisionByZero",
    "DegenerateVector",
    "IndexOutOfRange",
    "InvalidOperation",
    "ToleranceSettings",
    "load_tolerance_settings",
]
