"""Exception hierarchy for shapekit."""

from __future__ import annotations


class ShapeError(Exception):
    """Base exception for all shapekit errors."""


class MalformedShapeTextError(ShapeError, ValueError):
    """Raised when a string cannot be parsed into a shape."""


class TypeMismatchError(ShapeError, TypeError):
    """Raised when a boxed value does not hold the requested type."""
