"""Component-type helpers shared by the vector and text modules.

Components are numpy scalars so every vector carries a concrete width
(``int8`` ... ``uint64``, ``float32``, ``float64``, ``longdouble``). Casts
follow ``ndarray.astype``: floats truncate toward zero when converted to
integers and out-of-range integers wrap.
"""

from __future__ import annotations

import numbers
from typing import Any, Callable

import numpy as np

from .errors import ComponentTypeError, DivideByZeroError

DTypeLike = Any


def resolve_dtype(dtype_like: DTypeLike) -> np.dtype:
    try:
        dtype = np.dtype(dtype_like)
    except TypeError as exc:
        raise ComponentTypeError(f"unknown component type: {dtype_like!r}") from exc
    if dtype.kind not in "iuf":
        raise ComponentTypeError(f"component type must be an integer or floating type, got {dtype.name}")
    return np.dtype(dtype.type)


def is_integer(dtype: np.dtype) -> bool:
    return dtype.kind in "iu"


def is_scalar(value: object) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def cast(value: Any, dtype: np.dtype) -> np.number:
    if not isinstance(value, numbers.Real):
        raise ComponentTypeError(f"expected a real number, got {type(value).__name__}")
    with np.errstate(all="ignore"):
        return np.asarray(value).astype(dtype)[()]


def promote(first: np.dtype, second: np.dtype) -> np.dtype:
    return np.result_type(first, second)


def accumulator(dtype: np.dtype) -> np.dtype:
    """Type that sums of products are evaluated in.

    Narrow integers are widened to the platform integer first, the way C
    promotes char and short before multiplying.
    """
    if is_integer(dtype):
        return np.result_type(dtype, np.int_)
    return dtype


def same_integer(left: Any, right: Any) -> bool:
    return int(left) == int(right)


def to_floating(value: np.number) -> np.floating:
    """Widen integer components to float64, keep floating ones as they are."""
    if isinstance(value, np.floating):
        return value
    return np.float64(value)


def apply(op: Callable[[Any, Any], Any], left: Any, right: Any, dtype: np.dtype) -> np.number:
    a = cast(left, dtype)
    b = cast(right, dtype)
    with np.errstate(all="ignore"):
        result = op(a, b)
    return cast(result, dtype)


def negate(value: Any, dtype: np.dtype) -> np.number:
    with np.errstate(all="ignore"):
        return cast(np.negative(cast(value, dtype)), dtype)


def divide(left: Any, right: Any, dtype: np.dtype) -> np.number:
    a = cast(left, dtype)
    b = cast(right, dtype)
    if b == 0:
        raise DivideByZeroError(f"division of {a} by zero")
    with np.errstate(all="ignore"):
        if not is_integer(dtype):
            return cast(np.true_divide(a, b), dtype)
        # Integer division truncates toward zero, not toward negative infinity.
        quotient = np.floor_divide(a, b)
        if quotient * b != a and (a < 0) != (b < 0):
            quotient = quotient + 1
    return cast(quotient, dtype)


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))
