"""Errors raised by feature collection edits."""


class GeoEditError(Exception):
    """Base class for all errors raised while editing a feature collection."""


class OutOfRangeError(GeoEditError, IndexError):
    """A feature index or position index is outside the addressed sequence."""


class InvalidArgumentError(GeoEditError, ValueError):
    """A structurally required argument is missing or malformed."""


class RingTooSmallError(GeoEditError, ValueError):
    """Removing a position would leave a polygon ring with fewer than 3 vertices."""


class UnsupportedGeometryTypeError(GeoEditError, ValueError):
    """The geometry type has no editable coordinate tree."""
