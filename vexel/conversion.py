"""Extend and truncate vectors across arities."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, overload

from .errors import InvalidOperation
from .vector import VectorBase, vector_type_for

if TYPE_CHECKING:
    from .scalar import S
    from .vector2 import Vector2
    from .vector3 import Vector3
    from .vector4 import Vector4


@overload
def extend(vector: "Vector2[S]", component: Any) -> "Vector3[S]": ...


@overload
def extend(vector: "Vector3[S]", component: Any) -> "Vector4[S]": ...


# //1.- Append one explicit component in the vector's own precision.
def extend(vector: VectorBase[Any], component: Any) -> VectorBase[Any]:
    if len(vector) >= 4:
        raise InvalidOperation(f"cannot extend {type(vector).__name__} beyond four components")
    target = vector_type_for(len(vector) + 1)
    return target._build((*vector.to_tuple(), vector.precision.coerce(component)))


@overload
def truncate(vector: "Vector3[S]") -> "Vector2[S]": ...


@overload
def truncate(vector: "Vector4[S]") -> "Vector3[S]": ...


# //2.- Drop the trailing component.
def truncate(vector: VectorBase[Any]) -> VectorBase[Any]:
    if len(vector) <= 2:
        raise InvalidOperation(f"cannot truncate {type(vector).__name__} below two components")
    target = vector_type_for(len(vector) - 1)
    return target._build(vector.to_tuple()[:-1])


__all__ = ["extend", "truncate"]
