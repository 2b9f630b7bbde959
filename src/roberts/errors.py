from __future__ import annotations


class GeometryError(Exception):
    """Base class for errors raised by the geometry pipeline."""


class InvalidArgumentError(GeometryError, ValueError):
    pass


class DimensionMismatchError(GeometryError, ValueError):
    pass
