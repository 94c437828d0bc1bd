"""Arity-agnostic behaviour shared by :class:`Vector2`, :class:`Vector3` and :class:`Vector4`.

Every operation here works on the component tuple, so the concrete types only
declare their fields and the few operations tied to a particular arity
(cross products, unit axes, extend/truncate).  All vectors are immutable
values; each operation returns a new instance.  Arithmetic follows IEEE-754
without numpy warnings: overflow and zero divisors yield infinities or NaN.
"""
from __future__ import annotations

import functools
import logging
import numbers
from typing import Any, Callable, ClassVar, Dict, Generic, Iterable, Iterator, Optional, Tuple, Type, TypeVar

import numpy as np

from .config import DEFAULT_SETTINGS
from .errors import DegenerateVector, DivisionByZero, IndexOutOfRange, InvalidOperation
from .scalar import FLOAT64, Precision, S, precision_of, resolve_precision

LOGGER = logging.getLogger(__name__)

V = TypeVar("V", bound="VectorBase[Any]")

_BY_ARITY: Dict[int, Type["VectorBase[Any]"]] = {}

F = TypeVar("F", bound=Callable[..., Any])


def ieee_arithmetic(method: F) -> F:
    """Run ``method`` with numpy floating-point warnings silenced.

    Overflow, inf - inf and division by zero produce infinities or NaN in the
    result instead of a ``RuntimeWarning``.
    """

    @functools.wraps(method)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        with np.errstate(all="ignore"):
            return method(*args, **kwargs)

    return wrapper  # type: ignore[return-value]


def vector_type_for(arity: int) -> Type["VectorBase[Any]"]:
    """Return the vector class with ``arity`` components."""
    try:
        return _BY_ARITY[arity]
    except KeyError:
        raise InvalidOperation(f"no vector type has {arity} components") from None


class VectorBase(Generic[S]):
    """Component-wise arithmetic and geometry for fixed-size vectors."""

    COMPONENT_NAMES: ClassVar[Tuple[str, ...]] = ()

    # Makes numpy scalars defer to the reflected operators below instead of
    # treating the vector as an array.
    __array_ufunc__ = None

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if cls.COMPONENT_NAMES:
            _BY_ARITY[len(cls.COMPONENT_NAMES)] = cls

    def __post_init__(self) -> None:
        values = [getattr(self, name) for name in self.COMPONENT_NAMES]
        precision = resolve_precision(values)
        for name, value in zip(self.COMPONENT_NAMES, values):
            object.__setattr__(self, name, precision.coerce(value))

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def _build(cls: Type[V], components: Iterable[Any]) -> V:
        return cls(*components)

    @classmethod
    def zero(cls: Type[V], precision: Precision = FLOAT64) -> V:
        return cls._build(precision.zero() for _ in cls.COMPONENT_NAMES)

    @classmethod
    def _unit(cls: Type[V], index: int, precision: Precision) -> V:
        return cls._build(
            precision.one() if position == index else precision.zero()
            for position in range(len(cls.COMPONENT_NAMES))
        )

    @classmethod
    def from_iter(cls: Type[V], values: Iterable[Any], precision: Optional[Precision] = None) -> V:
        """Build a vector from exactly ``len(COMPONENT_NAMES)`` values.

        With ``precision`` given, the values are explicitly converted to it;
        otherwise the usual construction rules apply.
        """
        components = tuple(values)
        if len(components) != len(cls.COMPONENT_NAMES):
            raise InvalidOperation(
                f"{cls.__name__} requires exactly {len(cls.COMPONENT_NAMES)} components, got {len(components)}"
            )
        if precision is None:
            return cls._build(components)
        return cls._build(precision.cast(component) for component in components)

    @classmethod
    def from_array(cls: Type[V], array: Any) -> V:
        values = np.asarray(array)
        if values.shape != (len(cls.COMPONENT_NAMES),):
            raise InvalidOperation(
                f"{cls.__name__} requires an array of shape ({len(cls.COMPONENT_NAMES)},), got {values.shape}"
            )
        if values.dtype in (np.float32, np.float64):
            precision = precision_of(values.dtype)
        else:
            precision = FLOAT64
        return cls._build(precision.cast(value) for value in values.tolist())

    # ------------------------------------------------------------------
    # Component access
    # ------------------------------------------------------------------
    @property
    def precision(self) -> Precision:
        return precision_of(getattr(self, self.COMPONENT_NAMES[0]))

    def to_tuple(self) -> Tuple[S, ...]:
        return tuple(getattr(self, name) for name in self.COMPONENT_NAMES)

    def to_array(self) -> np.ndarray:
        return np.array(self.to_tuple(), dtype=self.precision.scalar_type)

    def with_precision(self: V, precision: Precision) -> V:
        return self._build(precision.cast(component) for component in self.to_tuple())

    def __len__(self) -> int:
        return len(self.COMPONENT_NAMES)

    def __iter__(self) -> Iterator[S]:
        return iter(self.to_tuple())

    def __getitem__(self, index: int) -> S:
        if isinstance(index, bool) or not isinstance(index, numbers.Integral):
            raise InvalidOperation(f"component index must be an integer, got {type(index).__name__}")
        if not 0 <= index < len(self.COMPONENT_NAMES):
            raise IndexOutOfRange(
                f"component index {index} out of range for {type(self).__name__}"
            )
        return getattr(self, self.COMPONENT_NAMES[index])

    def _operand(self, other: Any) -> Tuple[S, ...]:
        if type(other) is not type(self):
            raise InvalidOperation(
                f"expected {type(self).__name__}, got {type(other).__name__}"
            )
        if other.precision is not self.precision:
            raise InvalidOperation(
                f"cannot combine {self.precision.name} and {other.precision.name} vectors"
            )
        return other.to_tuple()

    def _scalar(self, value: Any) -> S:
        return self.precision.coerce(value)

    def _epsilon(self, epsilon: Optional[float]) -> S:
        if epsilon is None:
            return self.precision.epsilon()
        tolerance = self._scalar(epsilon)
        if tolerance < 0:
            raise InvalidOperation("epsilon must not be negative")
        return tolerance

    # ------------------------------------------------------------------
    # Arithmetic; never raises, IEEE results pass through
    # ------------------------------------------------------------------
    @ieee_arithmetic
    def add(self: V, other: V) -> V:
        return self._build(a + b for a, b in zip(self.to_tuple(), self._operand(other)))

    @ieee_arithmetic
    def sub(self: V, other: V) -> V:
        return self._build(a - b for a, b in zip(self.to_tuple(), self._operand(other)))

    @ieee_arithmetic
    def negate(self: V) -> V:
        return self._build(-component for component in self.to_tuple())

    @ieee_arithmetic
    def scale(self: V, scalar: Any) -> V:
        factor = self._scalar(scalar)
        return self._build(component * factor for component in self.to_tuple())

    @ieee_arithmetic
    def componentwise_mul(self: V, other: V) -> V:
        return self._build(a * b for a, b in zip(self.to_tuple(), self._operand(other)))

    @ieee_arithmetic
    def div(self: V, scalar: Any) -> V:
        divisor = self._scalar(scalar)
        return self._build(component / divisor for component in self.to_tuple())

    @ieee_arithmetic
    def componentwise_div(self: V, other: V) -> V:
        divisors = self._operand(other)
        return self._build(a / b for a, b in zip(self.to_tuple(), divisors))

    def checked_div(self: V, scalar: Any) -> V:
        divisor = self._scalar(scalar)
        if divisor == 0:
            LOGGER.debug("Rejected division of %r by zero", self)
            raise DivisionByZero(f"cannot divide {self!r} by zero")
        return self.div(divisor)

    def checked_componentwise_div(self: V, other: V) -> V:
        divisors = self._operand(other)
        if any(divisor == 0 for divisor in divisors):
            LOGGER.debug("Rejected component-wise division of %r by %r", self, other)
            raise DivisionByZero(f"cannot divide {self!r} by {other!r}: zero component")
        return self.componentwise_div(other)

    def abs(self: V) -> V:
        return self._build(abs(component) for component in self.to_tuple())

    def min_component(self) -> S:
        return min(self.to_tuple())

    def max_component(self) -> S:
        return max(self.to_tuple())

    # ------------------------------------------------------------------
    # Metric
    # ------------------------------------------------------------------
    @ieee_arithmetic
    def dot(self, other: "VectorBase[S]") -> S:
        return sum(
            (a * b for a, b in zip(self.to_tuple(), self._operand(other))),
            self.precision.zero(),
        )

    def length_squared(self) -> S:
        """Prefer this over :meth:`length` when only comparing magnitudes."""
        return self.dot(self)

    def _max_abs_component(self) -> S:
        return self.precision.scalar_type(np.max(np.abs(self.to_array())))

    @ieee_arithmetic
    def length(self) -> S:
        """Euclidean length, finite whenever it is representable.

        The squared sum overflows long before the length itself does (around
        1.8e19 for float32 components), and underflows to zero for tiny
        components; both cases are recomputed on components scaled by the
        largest magnitude.
        """
        precision = self.precision
        squared = self.length_squared()
        if 0 < squared < np.inf:
            return precision.sqrt(squared)
        largest = self._max_abs_component()
        if not 0 < largest < np.inf:
            # Zero vector, an infinite component, or NaN somewhere.
            return precision.sqrt(squared)
        scaled = sum(
            ((component / largest) * (component / largest) for component in self.to_tuple()),
            precision.zero(),
        )
        return largest * precision.sqrt(scaled)

    def distance_squared(self, other: "VectorBase[S]") -> S:
        return self.sub(other).length_squared()

    def distance(self, other: "VectorBase[S]") -> S:
        return self.sub(other).length()

    def is_degenerate(self, epsilon: Optional[float] = None) -> bool:
        return bool(self.length() <= self._epsilon(epsilon))

    def _require_direction(self, operation: str, epsilon: Optional[float]) -> S:
        length = self.length()
        tolerance = self._epsilon(epsilon)
        if length <= tolerance:
            LOGGER.debug("%s rejected degenerate vector %r (epsilon=%s)", operation, self, tolerance)
            raise DegenerateVector(
                f"{operation} requires a vector longer than {tolerance}, got {self!r}"
            )
        return length

    @ieee_arithmetic
    def approx_eq(self, other: "VectorBase[S]", epsilon: Optional[float] = None) -> bool:
        """True when every component pair differs by less than epsilon."""
        tolerance = self._epsilon(epsilon)
        return all(
            abs(a - b) < tolerance for a, b in zip(self.to_tuple(), self._operand(other))
        )

    # ------------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------------
    @ieee_arithmetic
    def normalize(self: V, epsilon: Optional[float] = None) -> V:
        length = self._require_direction("normalize", epsilon)
        return self.div(length)

    @ieee_arithmetic
    def clamp_length(self: V, max_length: Any) -> V:
        limit = self._scalar(max_length)
        if limit < 0:
            raise InvalidOperation("max_length must not be negative")
        length = self.length()
        if length <= limit:
            return self
        return self.scale(limit / length)

    @ieee_arithmetic
    def lerp(self: V, other: V, t: Any) -> V:
        """Interpolate towards ``other``; ``t`` outside [0, 1] extrapolates."""
        factor = self._scalar(t)
        return self._build(
            a + (b - a) * factor for a, b in zip(self.to_tuple(), self._operand(other))
        )

    def lerp_clamped(self: V, other: V, t: Any) -> V:
        precision = self.precision
        return self.lerp(other, precision.clamp(self._scalar(t), precision.zero(), precision.one()))

    @ieee_arithmetic
    def project(self: V, onto: V, epsilon: Optional[float] = None) -> V:
        self._operand(onto)
        length = onto._require_direction("project", epsilon)
        # (a . u) u with u the unit target; dot(onto, onto) may overflow.
        direction = onto.div(length)
        return direction.scale(self.dot(direction))

    def reject(self: V, from_: V, epsilon: Optional[float] = None) -> V:
        return self.sub(self.project(from_, epsilon))

    @ieee_arithmetic
    def angle_between(self, other: "VectorBase[S]", epsilon: Optional[float] = None) -> S:
        """Angle in radians, in [0, pi]."""
        self._operand(other)
        self._require_direction("angle_between", epsilon)
        other._require_direction("angle_between", epsilon)
        precision = self.precision
        # The cosine does not depend on either length, so both operands are
        # scaled into [-1, 1] first and no product below can overflow.
        a = self.div(self._max_abs_component())
        b = other.div(other._max_abs_component())
        # sqrt(|a|^2 |b|^2) is exact for a == b, the plain product is not.
        cosine = a.dot(b) / precision.sqrt(a.length_squared() * b.length_squared())
        # Rounding can push the cosine just outside [-1, 1] for (anti)parallel inputs.
        return precision.arccos(precision.clamp(cosine, -precision.one(), precision.one()))

    # ------------------------------------------------------------------
    # Text
    # ------------------------------------------------------------------
    def to_string(self, decimals: Optional[int] = None) -> str:
        places = DEFAULT_SETTINGS.display_decimals if decimals is None else decimals
        body = ", ".join(format(float(component), f".{places}f") for component in self.to_tuple())
        return f"{type(self).__name__}({body})"

    def __repr__(self) -> str:
        return self.to_string()

    def __format__(self, spec: str) -> str:
        if not spec:
            return self.to_string()
        body = ", ".join(format(float(component), spec) for component in self.to_tuple())
        return f"{type(self).__name__}({body})"

    # ------------------------------------------------------------------
    # Operator aliases
    # ------------------------------------------------------------------
    def __add__(self: V, other: Any) -> V:
        if not isinstance(other, VectorBase):
            return NotImplemented
        return self.add(other)

    def __sub__(self: V, other: Any) -> V:
        if not isinstance(other, VectorBase):
            return NotImplemented
        return self.sub(other)

    def __neg__(self: V) -> V:
        return self.negate()

    def __mul__(self: V, other: Any) -> V:
        if isinstance(other, VectorBase):
            return self.componentwise_mul(other)
        if isinstance(other, numbers.Real):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self: V, other: Any) -> V:
        if isinstance(other, numbers.Real):
            return self.scale(other)
        return NotImplemented

    def __truediv__(self: V, other: Any) -> V:
        if isinstance(other, VectorBase):
            return self.componentwise_div(other)
        if isinstance(other, numbers.Real):
            return self.div(other)
        return NotImplemented


__all__ = ["VectorBase", "vector_type_for"]
