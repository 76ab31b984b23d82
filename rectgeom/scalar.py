"""Numeric capability sets shared by ``Range`` and ``Rect``.

Every operation in the package only needs the ``BaseNum`` capabilities:
ordering, addition, subtraction, multiplication, division, negation and
``abs``. Union extents (``Range.max`` / ``Rect.max``) additionally need the
float comparison semantics captured by ``FloatNum``, where a NaN operand
loses to any real value.
"""

from __future__ import annotations

import math
from typing import Any, Protocol, TypeVar


class BaseNum(Protocol):
    def __add__(self, other: Any) -> Any: ...

    def __sub__(self, other: Any) -> Any: ...

    def __mul__(self, other: Any) -> Any: ...

    def __truediv__(self, other: Any) -> Any: ...

    def __neg__(self) -> Any: ...

    def __abs__(self) -> Any: ...

    def __lt__(self, other: Any) -> bool: ...

    def __le__(self, other: Any) -> bool: ...


class FloatNum(BaseNum, Protocol):
    def __float__(self) -> float: ...


S = TypeVar("S", bound=BaseNum)
F = TypeVar("F", bound=FloatNum)


def partial_max(a: S, b: S) -> S:
    """Return the larger of ``a`` and ``b``, preferring ``a`` when unordered."""

    return b if a < b else a


def partial_min(a: S, b: S) -> S:
    return b if b < a else a


def _is_nan(value: Any) -> bool:
    try:
        return math.isnan(value)
    except TypeError:
        return False


def float_max(a: F, b: F) -> F:
    """Maximum with IEEE ``maxNum`` semantics: a NaN operand yields the other one."""

    if _is_nan(a):
        return b
    if _is_nan(b):
        return a
    return partial_max(a, b)


def float_min(a: F, b: F) -> F:
    if _is_nan(a):
        return b
    if _is_nan(b):
        return a
    return partial_min(a, b)


def half(value: S) -> S:
    return value / 2


__all__ = [
    "BaseNum",
    "FloatNum",
    "S",
    "F",
    "partial_max",
    "partial_min",
    "float_max",
    "float_min",
    "half",
]
