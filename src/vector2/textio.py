"""Human-readable text form of vectors: ``"(x, y)"`` out, ``"x y"`` in."""

from __future__ import annotations

import re
from typing import Iterable, Iterator, TypeVar

import numpy as np

from .errors import ParseError
from .numeric import cast, is_integer

V = TypeVar("V")

_INTEGER_TOKEN = re.compile(r"[+-]?[0-9]+")
_FLOAT_TOKEN = re.compile(r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan)", re.IGNORECASE)


def format_components(x: np.number, y: np.number) -> str:
    return f"({x}, {y})"


def format_vector(vector) -> str:
    return format_components(vector.x, vector.y)


def parse_component(token: str, dtype: np.dtype) -> np.number:
    if is_integer(dtype):
        if not _INTEGER_TOKEN.fullmatch(token):
            raise ParseError(f"invalid {dtype.name} component: {token!r}")
        value = int(token)
        info = np.iinfo(dtype)
        if not info.min <= value <= info.max:
            raise ParseError(f"component {token} out of range for {dtype.name}")
        return cast(value, dtype)
    if not _FLOAT_TOKEN.fullmatch(token):
        raise ParseError(f"invalid {dtype.name} component: {token!r}")
    # Parse from the string so longdouble keeps its extra precision.
    return dtype.type(token)


def parse_components(text: str, dtype: np.dtype) -> tuple[np.number, np.number]:
    tokens = text.split()
    if len(tokens) != 2:
        raise ParseError(f"expected 2 components, got {len(tokens)} in {text!r}")
    return parse_component(tokens[0], dtype), parse_component(tokens[1], dtype)


def parse_vector(text: str, cls: type[V]) -> V:
    x, y = parse_components(text, cls.dtype)
    return cls(x, y)


def read_vectors(stream: Iterable[str], cls: type[V]) -> Iterator[V]:
    """Yield vectors from a text stream, taking tokens two at a time.

    A vector may span lines; a component left over at the end is an error.
    """
    pending: list[np.number] = []
    for line in stream:
        for token in line.split():
            pending.append(parse_component(token, cls.dtype))
            if len(pending) == 2:
                yield cls(pending[0], pending[1])
                pending.clear()
    if pending:
        raise ParseError("stream ended after an x component with no matching y")
