"""Component reordering and duplication.

Selectors are sequences of component indices, never strings.  :class:`Axis`
names the indices so a selector such as ``(Axis.Z, Axis.X, Axis.X)`` reads
like the classic ``zxx`` swizzle while staying an ordinary tuple of ints;
the overloads below let a type checker infer the result arity from the
selector count.  Bounds are still validated at runtime for selectors that
are computed on the fly.
"""
from __future__ import annotations

import enum
import logging
import numbers
from typing import TYPE_CHECKING, Any, Sequence, Tuple, overload

from .errors import IndexOutOfRange, InvalidOperation
from .vector import VectorBase, vector_type_for

if TYPE_CHECKING:
    from .scalar import S
    from .vector2 import Vector2
    from .vector3 import Vector3
    from .vector4 import Vector4

LOGGER = logging.getLogger(__name__)


class Axis(enum.IntEnum):
    X = 0
    Y = 1
    Z = 2
    W = 3


# //1.- Reject selectors that cannot produce a supported vector arity.
def validate_selector(source_arity: int, indices: Sequence[int]) -> Tuple[int, ...]:
    """Return ``indices`` as a tuple after checking count and bounds."""
    selector = tuple(indices)
    if not 2 <= len(selector) <= 4:
        raise InvalidOperation(f"swizzle needs 2 to 4 selectors, got {len(selector)}")
    for index in selector:
        if isinstance(index, bool) or not isinstance(index, numbers.Integral):
            raise InvalidOperation(f"swizzle selector must be an integer, got {type(index).__name__}")
        # //2.- Negative indices are out of range, not counted from the end.
        if not 0 <= index < source_arity:
            LOGGER.debug("Selector %s out of range for arity %d", selector, source_arity)
            raise IndexOutOfRange(
                f"swizzle selector {index} out of range for a {source_arity}-component vector"
            )
    return selector


def identity_selector(vector: VectorBase[Any]) -> Tuple[Axis, ...]:
    return tuple(Axis(index) for index in range(len(vector)))


@overload
def swizzle(vector: VectorBase["S"], i: int, j: int, /) -> "Vector2[S]": ...


@overload
def swizzle(vector: VectorBase["S"], i: int, j: int, k: int, /) -> "Vector3[S]": ...


@overload
def swizzle(vector: VectorBase["S"], i: int, j: int, k: int, l: int, /) -> "Vector4[S]": ...


# //3.- Build the result type from the selector count and copy picked components.
def swizzle(vector: VectorBase[Any], *indices: int) -> VectorBase[Any]:
    selector = validate_selector(len(vector), indices)
    components = vector.to_tuple()
    return vector_type_for(len(selector))._build(components[index] for index in selector)


__all__ = ["Axis", "identity_selector", "swizzle", "validate_selector"]
