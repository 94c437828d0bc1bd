"""Element precisions usable as vector components.

Vectors store their components as numpy scalars so that single and double
precision share one implementation while keeping IEEE-754 behaviour
(infinities and NaN instead of Python's ``ZeroDivisionError``).  The
:class:`Precision` objects supply the named constants and the few functions
numpy scalars do not carry as methods.
"""
from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional, Protocol, Type, TypeVar

import numpy as np

from .config import DEFAULT_SETTINGS
from .errors import InvalidOperation


class ScalarElement(Protocol):
    """Operations a component type must support."""

    def __add__(self, other: Any) -> Any: ...

    def __sub__(self, other: Any) -> Any: ...

    def __mul__(self, other: Any) -> Any: ...

    def __truediv__(self, other: Any) -> Any: ...

    def __neg__(self) -> Any: ...

    def __abs__(self) -> Any: ...

    def __lt__(self, other: Any) -> Any: ...

    def __le__(self, other: Any) -> Any: ...


# Constrained so that a single vector, or a single operation, never combines
# float32 and float64 elements.
S = TypeVar("S", np.float32, np.float64)


@dataclass(frozen=True)
class Precision:
    """One supported element type together with its comparison tolerance."""

    name: str
    scalar_type: Type[np.floating]
    tolerance: float

    def zero(self) -> Any:
        return self.scalar_type(0.0)

    def one(self) -> Any:
        return self.scalar_type(1.0)

    def epsilon(self) -> Any:
        return self.scalar_type(self.tolerance)

    def coerce(self, value: Any) -> Any:
        """Return ``value`` as this precision, refusing other numpy precisions."""
        if type(value) is self.scalar_type:
            return value
        if isinstance(value, np.floating):
            raise InvalidOperation(
                f"cannot mix {type(value).__name__} with {self.name} elements"
            )
        if isinstance(value, numbers.Real):
            return self.scalar_type(value)
        raise InvalidOperation(f"{type(value).__name__} is not a real scalar")

    def cast(self, value: Any) -> Any:
        """Explicit conversion, including from the other precision."""
        if not isinstance(value, numbers.Real):
            raise InvalidOperation(f"{type(value).__name__} is not a real scalar")
        return self.scalar_type(value)

    def sqrt(self, value: Any) -> Any:
        return self.scalar_type(np.sqrt(value))

    def abs(self, value: Any) -> Any:
        return self.scalar_type(np.abs(value))

    def clamp(self, value: Any, low: Any, high: Any) -> Any:
        # np.clip keeps NaN, the builtin min/max would drop it.
        return self.scalar_type(np.clip(value, low, high))

    def arccos(self, value: Any) -> Any:
        return self.scalar_type(np.arccos(value))


FLOAT32 = Precision("float32", np.float32, DEFAULT_SETTINGS.float32_epsilon)
FLOAT64 = Precision("float64", np.float64, DEFAULT_SETTINGS.float64_epsilon)

_BY_SCALAR_TYPE: Dict[type, Precision] = {
    np.float32: FLOAT32,
    np.float64: FLOAT64,
}


def precision_of(value: Any) -> Precision:
    """Return the precision of a numpy scalar or dtype-like object."""
    try:
        return _BY_SCALAR_TYPE[type(value)]
    except KeyError:
        pass
    if isinstance(value, (np.dtype, type)):
        scalar_type = np.dtype(value).type
        if scalar_type in _BY_SCALAR_TYPE:
            return _BY_SCALAR_TYPE[scalar_type]
    raise InvalidOperation(f"unsupported element type: {value!r}")


def resolve_precision(values: Iterable[Any], default: Optional[Precision] = None) -> Precision:
    """Pick the single precision shared by ``values``.

    Plain Python numbers adopt the precision of the numpy scalars they
    accompany, or ``default`` (double precision) when there are none.
    """
    found: Optional[Precision] = None
    for value in values:
        if not isinstance(value, np.floating):
            continue
        precision = precision_of(value)
        if found is None:
            found = precision
        elif precision is not found:
            raise InvalidOperation(
                f"cannot mix {found.name} and {precision.name} elements in one vector"
            )
    if found is not None:
        return found
    return default if default is not None else FLOAT64


__all__ = [
    "ScalarElement",
    "S",
    "Precision",
    "FLOAT32",
    "FLOAT64",
    "precision_of",
    "resolve_precision",
]
