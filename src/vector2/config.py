from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Iterator

import yaml

from .errors import ComponentTypeError, ConfigError
from .numeric import resolve_dtype

logger = logging.getLogger(__name__)

ZERO_MAGNITUDE_POLICIES = ("raise", "zero")
NEGATIVE_LENGTH_POLICIES = ("raise", "clamp")


@dataclass(frozen=True)
class VectorSettings:
    """Process-wide policies for the degenerate cases of vector math.

    ``zero_magnitude`` decides what normalizing or measuring the angle of a
    zero vector does: ``"raise"`` raises ZeroMagnitudeError, ``"zero"`` yields
    the zero vector (and NaN for angles). ``negative_length`` decides whether
    a negative clamp length raises or is treated as 0.
    """

    default_dtype: str = "float64"
    zero_magnitude: str = "raise"
    negative_length: str = "raise"

    def __post_init__(self) -> None:
        if self.zero_magnitude not in ZERO_MAGNITUDE_POLICIES:
            raise ConfigError(
                f"zero_magnitude must be one of {ZERO_MAGNITUDE_POLICIES}, got {self.zero_magnitude!r}"
            )
        if self.negative_length not in NEGATIVE_LENGTH_POLICIES:
            raise ConfigError(
                f"negative_length must be one of {NEGATIVE_LENGTH_POLICIES}, got {self.negative_length!r}"
            )
        try:
            resolve_dtype(self.default_dtype)
        except ComponentTypeError as exc:
            raise ConfigError(str(exc)) from exc

    @staticmethod
    def from_yaml(path: Path) -> "VectorSettings":
        try:
            data = yaml.safe_load(Path(path).read_text())
        except yaml.YAMLError as exc:
            raise ConfigError(f"{path} is not valid YAML: {exc}") from exc
        logger.debug("loaded vector settings from %s", path)
        return load_settings(data or {})


def load_settings(raw: dict) -> VectorSettings:
    if not isinstance(raw, dict):
        raise ConfigError(f"settings must be a mapping, got {type(raw).__name__}")
    # Accept either a flat mapping or one nested under a "vector2" key.
    values = raw.get("vector2", raw)
    if not isinstance(values, dict):
        raise ConfigError("the vector2 section must be a mapping")
    known = {f.name for f in fields(VectorSettings)}
    unknown = sorted(set(values) - known)
    if unknown:
        raise ConfigError(f"unknown settings: {', '.join(unknown)}")
    if "default_dtype" in values:
        values = {**values, "default_dtype": str(values["default_dtype"])}
    return VectorSettings(**values)


_active = VectorSettings()


def get_settings() -> VectorSettings:
    return _active


def configure(settings: VectorSettings) -> VectorSettings:
    """Install ``settings`` as the active policies and return the previous ones."""
    global _active
    previous = _active
    _active = settings
    logger.debug("vector settings changed: %s", asdict(settings))
    return previous


@contextmanager
def using_settings(settings: VectorSettings) -> Iterator[VectorSettings]:
    previous = configure(settings)
    try:
        yield settings
    finally:
        configure(previous)
