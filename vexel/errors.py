"""Failure kinds raised by vector operations.

The four kinds are peers: none derives from another. Each one extends the
builtin exception closest to its meaning so callers can keep catching
``ZeroDivisionError``, ``ValueError``, ``IndexError`` or ``TypeError``.
"""
from __future__ import annotations


class DivisionByZero(ZeroDivisionError):
    """A checked division received an exactly-zero divisor."""


class DegenerateVector(ValueError):
    """An operation needing a direction received a vector at or below epsilon length."""


class IndexOutOfRange(IndexError):
    """A component index or swizzle selector referenced a missing component."""


class InvalidOperation(TypeError):
    """Any other precondition violation, such as mixing element precisions."""


__all__ = ["DivisionByZero", "DegenerateVector", "IndexOutOfRange", "InvalidOperation"]
