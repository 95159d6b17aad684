from __future__ import annotations


class Vector2Error(Exception):
    """Base class for every error raised by the vector2 package."""


class OutOfRangeError(Vector2Error, IndexError):
    pass


class DivideByZeroError(Vector2Error, ZeroDivisionError):
    pass


class ZeroMagnitudeError(Vector2Error, ValueError):
    """Raised when a direction is requested from a zero-length vector."""


class NegativeLengthError(Vector2Error, ValueError):
    pass


class ParseError(Vector2Error, ValueError):
    pass


class ComponentTypeError(Vector2Error, TypeError):
    pass


class ConfigError(Vector2Error, ValueError):
    pass
