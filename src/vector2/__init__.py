from .config import VectorSettings, configure, get_settings, load_settings, using_settings
from .errors import (
    ComponentTypeError,
    ConfigError,
    DivideByZeroError,
    NegativeLengthError,
    OutOfRangeError,
    ParseError,
    Vector2Error,
    ZeroMagnitudeError,
)
from .textio import format_vector, parse_vector, read_vectors
from .vector import (
    Vector2,
    Vector2c,
    Vector2d,
    Vector2f,
    Vector2i,
    Vector2ld,
    Vector2li,
    Vector2si,
    Vector2uc,
    Vector2ui,
    Vector2uli,
    Vector2usi,
)

__all__ = [
    "ComponentTypeError",
    "ConfigError",
    "DivideByZeroError",
    "NegativeLengthError",
    "OutOfRangeError",
    "ParseError",
    "Vector2",
    "Vector2Error",
    "Vector2c",
    "Vector2d",
    "Vector2f",
    "Vector2i",
    "Vector2ld",
    "Vector2li",
    "Vector2si",
    "Vector2uc",
    "Vector2ui",
    "Vector2uli",
    "Vector2usi",
    "VectorSettings",
    "ZeroMagnitudeError",
    "configure",
    "format_vector",
    "get_settings",
    "load_settings",
    "parse_vector",
    "read_vectors",
    "using_settings",
]
