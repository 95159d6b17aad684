from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, Iterator, Optional, Sequence

from .config import VectorSettings, using_settings
from .errors import Vector2Error
from .textio import read_vectors
from .vector import Vector2

logger = logging.getLogger(__name__)

UNARY_OPERATIONS = ("magnitude", "normalize", "clamp")
PAIRWISE_OPERATIONS = ("dot", "angle", "distance", "lerp")


def _pairs(vectors: Iterable[Vector2]) -> Iterator[tuple[Vector2, Vector2]]:
    iterator = iter(vectors)
    for first in iterator:
        second = next(iterator, None)
        if second is None:
            raise Vector2Error(f"{first} has no partner; pairwise operations need an even number of vectors")
        yield first, second


def evaluate(
    operation: str,
    vectors: Iterable[Vector2],
    t: float = 0.5,
    max_length: float = 1.0,
) -> Iterator[str]:
    if operation == "magnitude":
        for vector in vectors:
            yield str(vector.magnitude())
    elif operation == "normalize":
        for vector in vectors:
            yield str(vector.normalized())
    elif operation == "clamp":
        for vector in vectors:
            yield str(Vector2.clamp_magnitude(vector, max_length))
    elif operation == "dot":
        for a, b in _pairs(vectors):
            yield str(Vector2.dot(a, b))
    elif operation == "angle":
        for a, b in _pairs(vectors):
            yield str(Vector2.angle(a, b))
    elif operation == "distance":
        for a, b in _pairs(vectors):
            yield str(Vector2.distance(a, b))
    elif operation == "lerp":
        for a, b in _pairs(vectors):
            yield str(Vector2.lerp(a, b, t))
    else:
        raise ValueError(f"unknown operation: {operation}")


def run(
    operation: str,
    source: Iterable[str],
    dtype: Optional[str] = None,
    settings: Optional[VectorSettings] = None,
    t: float = 0.5,
    max_length: float = 1.0,
) -> list[str]:
    settings = settings or VectorSettings()
    with using_settings(settings):
        cls = Vector2.of(dtype or settings.default_dtype)
        logger.debug("running %s over %s vectors", operation, cls.dtype.name)
        return list(evaluate(operation, read_vectors(source, cls), t=t, max_length=max_length))


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Evaluate 2D vector queries on whitespace-separated components")
    parser.add_argument("operation", choices=UNARY_OPERATIONS + PAIRWISE_OPERATIONS)
    parser.add_argument("--dtype", default=None, help="component type, e.g. int32 or float32")
    parser.add_argument("--config", type=Path, default=None, help="YAML file with vector settings")
    parser.add_argument("--input", type=Path, default=None, help="read components from a file instead of stdin")
    parser.add_argument("--t", type=float, default=0.5, help="interpolation factor for lerp")
    parser.add_argument("--max-length", type=float, default=1.0, help="length limit for clamp")
    parser.add_argument("--log-level", default="warning", choices=["debug", "info", "warning", "error"])
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    try:
        settings = VectorSettings.from_yaml(args.config) if args.config else VectorSettings()
        if args.input:
            with args.input.open() as handle:
                lines = run(args.operation, handle, args.dtype, settings, t=args.t, max_length=args.max_length)
        else:
            lines = run(args.operation, sys.stdin, args.dtype, settings, t=args.t, max_length=args.max_length)
    except (Vector2Error, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
