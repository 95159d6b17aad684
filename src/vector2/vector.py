"""Generic 2D vector value type.

``Vector2`` stores float64 components. ``Vector2.of(dtype)`` (or the
subscript form ``Vector2[np.int32]``) returns the vector class for any other
numpy integer or floating component type; the classes are cached, so two
lookups of the same type give the same class.
"""

from __future__ import annotations

import logging
import math
import operator
from functools import partial
from typing import Any, ClassVar, Generic, Iterator, TypeVar, Union

import numpy as np

from . import numeric, textio
from .config import get_settings
from .errors import NegativeLengthError, OutOfRangeError, ZeroMagnitudeError
from .numeric import (
    DTypeLike,
    accumulator,
    cast,
    clamp,
    is_integer,
    is_scalar,
    promote,
    resolve_dtype,
    same_integer,
    to_floating,
)

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=np.number)
Scalar = Union[int, float, np.integer, np.floating]

_add = partial(numeric.apply, operator.add)
_sub = partial(numeric.apply, operator.sub)
_mul = partial(numeric.apply, operator.mul)


def _is_operand(value: object) -> bool:
    return isinstance(value, Vector2) or is_scalar(value)


def _rebuild(dtype: str, x: Any, y: Any) -> "Vector2":
    return Vector2.of(dtype)(x, y)


class Vector2(Generic[T]):
    """Mutable 2D vector whose x and y share one numpy component type.

    Construction mirrors the usual value-type forms::

        Vector2()                 # (0, 0)
        Vector2(3, 4)             # explicit components
        Vector2(2)                # splat, (2, 2)
        Vector2.of("int32")(v)    # converting copy of another vector

    Every component written to the vector is cast to ``dtype``, so integer
    vectors truncate toward zero and wrap on overflow exactly like their
    numpy scalars. Arithmetic between vectors of different component types
    promotes with ``numpy.result_type``; a scalar operand is cast to the
    vector's own component type first.
    """

    __slots__ = ("_x", "_y")

    # Defer binary operators to this class instead of letting numpy scalars
    # treat a vector as a length-2 sequence.
    __array_ufunc__ = None

    dtype: ClassVar[np.dtype] = np.dtype(np.float64)
    _classes: ClassVar[dict[np.dtype, type]] = {}

    def __init__(self, x: Union[Scalar, Vector2] = 0, y: Scalar | None = None) -> None:
        if y is None:
            if isinstance(x, Vector2):
                x, y = x._x, x._y
            else:
                y = x
        self._x = cast(x, self.dtype)
        self._y = cast(y, self.dtype)

    @classmethod
    def of(cls, dtype: DTypeLike) -> type[Vector2]:
        resolved = resolve_dtype(dtype)
        existing = Vector2._classes.get(resolved)
        if existing is not None:
            return existing
        subclass = type(
            f"Vector2[{resolved.name}]",
            (Vector2,),
            {"__slots__": (), "dtype": resolved, "__module__": __name__},
        )
        Vector2._classes[resolved] = subclass
        return subclass

    def __class_getitem__(cls, item):
        if isinstance(item, TypeVar):
            return super().__class_getitem__(item)
        return cls.of(item)

    # =========================================================================
    # Components
    # =========================================================================

    @property
    def x(self) -> T:
        return self._x

    @x.setter
    def x(self, value: Scalar) -> None:
        self._x = cast(value, self.dtype)

    @property
    def y(self) -> T:
        return self._y

    @y.setter
    def y(self, value: Scalar) -> None:
        self._y = cast(value, self.dtype)

    def __getitem__(self, index: int) -> T:
        if index == 0:
            return self._x
        if index == 1:
            return self._y
        raise OutOfRangeError(f"Index should be 0 or 1, got {index!r}")

    def __iter__(self) -> Iterator[T]:
        yield self._x
        yield self._y

    def __len__(self) -> int:
        return 2

    def copy(self) -> Vector2[T]:
        return type(self)(self._x, self._y)

    def __reduce__(self):
        return _rebuild, (self.dtype.str, self._x, self._y)

    # =========================================================================
    # Queries
    # =========================================================================

    def magnitude(self) -> float:
        return math.hypot(float(self._x), float(self._y))

    def squared_magnitude(self) -> float:
        """x*x + y*y widened to float.

        Narrow integer components are promoted to the platform integer
        before squaring, so int8 and uint8 vectors do not wrap.
        """
        dtype = accumulator(self.dtype)
        squares = _add(_mul(self._x, self._x, dtype), _mul(self._y, self._y, dtype), dtype)
        return float(squares)

    def to_string(self) -> str:
        return textio.format_vector(self)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._x}, {self._y})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector2):
            return NotImplemented
        if is_integer(self.dtype) and is_integer(other.dtype):
            # int64 and uint64 promote to float64, which cannot tell 2**53 from 2**53 + 1.
            return same_integer(self._x, other._x) and same_integer(self._y, other._y)
        common = promote(self.dtype, other.dtype)
        return bool(
            cast(self._x, common) == cast(other._x, common)
            and cast(self._y, common) == cast(other._y, common)
        )

    __hash__ = None

    # =========================================================================
    # Mutation
    # =========================================================================

    def set(self, x_value: Scalar, y_value: Scalar) -> None:
        x = cast(x_value, self.dtype)
        y = cast(y_value, self.dtype)
        self._x, self._y = x, y

    def assign(self, value: Union[Scalar, Vector2]) -> Vector2[T]:
        """Copy another vector's components, or write one scalar to both."""
        if isinstance(value, Vector2):
            self.set(value._x, value._y)
        else:
            self.set(value, value)
        return self

    def read(self, text: str) -> Vector2[T]:
        """Replace both components with the two numbers in ``text``."""
        self._x, self._y = textio.parse_components(text, self.dtype)
        return self

    def normalize(self) -> None:
        self._x, self._y = self._unit_components()

    def normalized(self) -> Vector2[T]:
        return type(self)(*self._unit_components())

    def _unit_components(self) -> tuple[T, T]:
        length = self.magnitude()
        if length == 0:
            if get_settings().zero_magnitude == "raise":
                raise ZeroMagnitudeError(f"cannot normalize the zero-length vector {self}")
            logger.debug("normalizing zero-length vector %s to zero", self)
            return cast(0, self.dtype), cast(0, self.dtype)
        with np.errstate(all="ignore"):
            x = np.true_divide(to_floating(self._x), length)
            y = np.true_divide(to_floating(self._y), length)
        return cast(x, self.dtype), cast(y, self.dtype)

    def _store(self, result: Vector2) -> Vector2[T]:
        self._x = cast(result._x, self.dtype)
        self._y = cast(result._y, self.dtype)
        return self

    def iadd(self, other: Union[Scalar, Vector2]) -> Vector2[T]:
        return self._store(self.add(other))

    def isub(self, other: Union[Scalar, Vector2]) -> Vector2[T]:
        return self._store(self.subtract(other))

    def imul(self, other: Union[Scalar, Vector2]) -> Vector2[T]:
        return self._store(self.multiply(other))

    def idiv(self, other: Union[Scalar, Vector2]) -> Vector2[T]:
        return self._store(self.divide(other))

    # =========================================================================
    # Arithmetic
    # =========================================================================

    def _combine(self, other: Union[Scalar, Vector2], op) -> Vector2:
        if isinstance(other, Vector2):
            if other.dtype == self.dtype:
                result_cls = type(self)
            else:
                result_cls = Vector2.of(promote(self.dtype, other.dtype))
            dtype = result_cls.dtype
            return result_cls(op(self._x, other._x, dtype), op(self._y, other._y, dtype))
        value = cast(other, self.dtype)
        return type(self)(op(self._x, value, self.dtype), op(self._y, value, self.dtype))

    def add(self, other: Union[Scalar, Vector2]) -> Vector2:
        return self._combine(other, _add)

    def subtract(self, other: Union[Scalar, Vector2]) -> Vector2:
        return self._combine(other, _sub)

    def multiply(self, other: Union[Scalar, Vector2]) -> Vector2:
        return self._combine(other, _mul)

    def divide(self, other: Union[Scalar, Vector2]) -> Vector2:
        """Componentwise or scalar division; integer types truncate toward zero."""
        return self._combine(other, numeric.divide)

    def negate(self) -> Vector2[T]:
        return type(self)(numeric.negate(self._x, self.dtype), numeric.negate(self._y, self.dtype))

    def __add__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other):
        if not is_scalar(other):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other):
        if not is_scalar(other):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.divide(other)

    def __iadd__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.iadd(other)

    def __isub__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.isub(other)

    def __imul__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.imul(other)

    def __itruediv__(self, other):
        if not _is_operand(other):
            return NotImplemented
        return self.idiv(other)

    def __neg__(self) -> Vector2[T]:
        return self.negate()

    # =========================================================================
    # Class Methods
    # =========================================================================

    @classmethod
    def up(cls) -> Vector2:
        return cls(0, 1)

    @classmethod
    def down(cls) -> Vector2:
        return cls(0, -1)

    @classmethod
    def left(cls) -> Vector2:
        return cls(-1, 0)

    @classmethod
    def right(cls) -> Vector2:
        return cls(1, 0)

    @classmethod
    def zero(cls) -> Vector2:
        return cls(0, 0)

    @classmethod
    def one(cls) -> Vector2:
        return cls(1, 1)

    @classmethod
    def parse(cls, text: str) -> Vector2:
        return textio.parse_vector(text, cls)

    @staticmethod
    def dot(a: Vector2, b: Vector2) -> float:
        dtype = accumulator(promote(a.dtype, b.dtype))
        return float(_add(_mul(a._x, b._x, dtype), _mul(a._y, b._y, dtype), dtype))

    @staticmethod
    def angle(from_: Vector2, to: Vector2) -> float:
        """Unsigned angle between two vectors in degrees, 0 to 180."""
        from_length = from_.magnitude()
        to_length = to.magnitude()
        if from_length == 0 or to_length == 0:
            if get_settings().zero_magnitude == "raise":
                raise ZeroMagnitudeError("the angle to or from a zero-length vector is undefined")
            logger.debug("angle between %s and %s involves a zero-length vector", from_, to)
            return math.nan
        cosine = (float(from_.x) / from_length) * (float(to.x) / to_length) + (
            float(from_.y) / from_length
        ) * (float(to.y) / to_length)
        # Rounding can push the cosine of (anti)parallel vectors past +-1.
        return math.degrees(math.acos(clamp(cosine, -1.0, 1.0)))

    @staticmethod
    def clamp_magnitude(vector: Vector2, max_length: float) -> Vector2:
        if max_length < 0:
            if get_settings().negative_length == "raise":
                raise NegativeLengthError(f"max_length must not be negative, got {max_length}")
            logger.debug("clamping negative max_length %s to 0", max_length)
            max_length = 0.0
        length = vector.magnitude()
        if length <= max_length:
            return vector.copy()
        with np.errstate(all="ignore"):
            x = np.true_divide(to_floating(vector.x), length) * max_length
            y = np.true_divide(to_floating(vector.y), length) * max_length
        return type(vector)(x, y)

    @staticmethod
    def distance(a: Vector2, b: Vector2) -> float:
        # Subtract in floating point so unsigned components cannot wrap.
        return math.hypot(float(a.x) - float(b.x), float(a.y) - float(b.y))

    @staticmethod
    def lerp(a: Vector2, b: Vector2, t: float) -> Vector2:
        """Interpolate from ``a`` to ``b``; ``t`` is clamped to [0, 1] first."""
        if a.dtype == b.dtype:
            result_cls = type(a)
        else:
            result_cls = Vector2.of(promote(a.dtype, b.dtype))
        t = clamp(float(t), 0.0, 1.0)
        if t == 0.0:
            return result_cls(a)
        if t == 1.0:
            return result_cls(b)
        dtype = result_cls.dtype
        with np.errstate(all="ignore"):
            start_x, end_x = to_floating(cast(a.x, dtype)), to_floating(cast(b.x, dtype))
            start_y, end_y = to_floating(cast(a.y, dtype)), to_floating(cast(b.y, dtype))
            x = start_x + (end_x - start_x) * t
            y = start_y + (end_y - start_y) * t
        return result_cls(x, y)


Vector2._classes[Vector2.dtype] = Vector2

Vector2c = Vector2.of(np.int8)
Vector2si = Vector2.of(np.int16)
Vector2i = Vector2.of(np.int32)
Vector2li = Vector2.of(np.int64)
Vector2f = Vector2.of(np.float32)
Vector2d = Vector2.of(np.float64)
Vector2ld = Vector2.of(np.longdouble)
Vector2uc = Vector2.of(np.uint8)
Vector2usi = Vector2.of(np.uint16)
Vector2ui = Vector2.of(np.uint32)
Vector2uli = Vector2.of(np.uint64)
