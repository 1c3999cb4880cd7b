from geoedit.editable_feature_collection import EditableFeatureCollection
from geoedit.errors import (
    GeoEditError,
    InvalidArgumentError,
    OutOfRangeError,
    RingTooSmallError,
    UnsupportedGeometryTypeError,
)
from geoedit.typing import EditHandle


__all__ = [
    "EditHandle",
    "EditableFeatureCollection",
    "GeoEditError",
    "InvalidArgumentError",
    "OutOfRangeError",
    "RingTooSmallError",
    "UnsupportedGeometryTypeError",
]
