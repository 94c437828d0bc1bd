"""Functional spelling of the vector operations.

``ops.add(a, b)`` is equivalent to ``a.add(b)`` and to ``a + b``; the module
exists for callers that prefer free functions, such as code that folds over
collections of vectors.
"""
from __future__ import annotations

from typing import Any, Optional, TypeVar, Union

from .conversion import extend, truncate
from .errors import InvalidOperation
from .scalar import S
from .swizzle import swizzle
from .vector import VectorBase
from .vector2 import Vector2
from .vector3 import Vector3

V = TypeVar("V", bound=VectorBase[Any])


def add(a: V, b: V) -> V:
    return a.add(b)


def sub(a: V, b: V) -> V:
    return a.sub(b)


def negate(v: V) -> V:
    return v.negate()


def scale(v: V, s: Any) -> V:
    return v.scale(s)


def componentwise_mul(a: V, b: V) -> V:
    return a.componentwise_mul(b)


def div(v: V, s: Any) -> V:
    """Raw division: a zero divisor yields infinities or NaN."""
    return v.div(s)


def componentwise_div(a: V, b: V) -> V:
    return a.componentwise_div(b)


def checked_div(v: V, s: Any) -> V:
    """Division raising :class:`DivisionByZero` for a zero divisor."""
    return v.checked_div(s)


def checked_componentwise_div(a: V, b: V) -> V:
    return a.checked_componentwise_div(b)


def dot(a: VectorBase[S], b: VectorBase[S]) -> S:
    return a.dot(b)


def length_squared(v: VectorBase[S]) -> S:
    return v.length_squared()


def length(v: VectorBase[S]) -> S:
    return v.length()


def distance(a: VectorBase[S], b: VectorBase[S]) -> S:
    return a.distance(b)


def normalize(v: V, epsilon: Optional[float] = None) -> V:
    return v.normalize(epsilon)


def lerp(a: V, b: V, t: Any) -> V:
    return a.lerp(b, t)


def lerp_clamped(a: V, b: V, t: Any) -> V:
    return a.lerp_clamped(b, t)


def project(a: V, onto: V, epsilon: Optional[float] = None) -> V:
    return a.project(onto, epsilon)


def reject(a: V, from_: V, epsilon: Optional[float] = None) -> V:
    return a.reject(from_, epsilon)


def angle_between(a: VectorBase[S], b: VectorBase[S], epsilon: Optional[float] = None) -> S:
    return a.angle_between(b, epsilon)


def approx_eq(a: VectorBase[Any], b: VectorBase[Any], epsilon: Optional[float] = None) -> bool:
    return a.approx_eq(b, epsilon)


def cross(a: Any, b: Any) -> Union[Vector3[Any], Any]:
    """Vector cross product for :class:`Vector3`, signed area for :class:`Vector2`."""
    if isinstance(a, (Vector2, Vector3)):
        return a.cross(b)
    raise InvalidOperation(f"cross product is not defined for {type(a).__name__}")


__all__ = [
    "add",
    "sub",
    "negate",
    "scale",
    "componentwise_mul",
    "div",
    "componentwise_div",
    "checked_div",
    "checked_componentwise_div",
    "dot",
    "length_squared",
    "length",
    "distance",
    "normalize",
    "lerp",
    "lerp_clamped",
    "project",
    "reject",
    "angle_between",
    "approx_eq",
    "cross",
    "extend",
    "truncate",
    "swizzle",
]
