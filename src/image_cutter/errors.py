"""Exceptions raised by image_cutter."""


class CutterError(Exception):
    """Base exception for crop errors."""

    pass


class InvalidConfiguration(CutterError, ValueError):
    """Raised when a crop configuration cannot be resolved to a rectangle.

    The only such case is a ratio crop with a zero or negative ratio
    component, which has no meaningful largest-fitting rectangle.
    """

    pass
