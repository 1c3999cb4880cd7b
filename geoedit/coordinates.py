"""Immutable rewriting and flattening of nested GeoJSON coordinate arrays."""

import operator
from collections.abc import Sequence
from typing import Any

from geoedit.errors import (
    InvalidArgumentError,
    OutOfRangeError,
    RingTooSmallError,
    UnsupportedGeometryTypeError,
)
from geoedit.typing import (
    EditHandle,
    GeoJSONGeometry,
    GeoJSONType,
    Position,
    PositionPath,
)


# A closed triangle: three distinct vertices plus the repeated first one
MIN_RING_POSITIONS = 4

COORDINATE_DEPTH: dict[GeoJSONType, int] = {
    GeoJSONType.POINT: 0,
    GeoJSONType.MULTIPOINT: 1,
    GeoJSONType.LINESTRING: 1,
    GeoJSONType.MULTILINESTRING: 2,
    GeoJSONType.POLYGON: 2,
    GeoJSONType.MULTIPOLYGON: 3,
}


def geometry_type(geometry: GeoJSONGeometry | None) -> GeoJSONType:
    """Get the type tag of an editable geometry.

    Args:
        geometry: A GeoJSON geometry dictionary.

    Returns:
        The geometry type, always one of the keys of `COORDINATE_DEPTH`.

    Raises:
        UnsupportedGeometryTypeError: If the geometry is missing, untagged, or
            its type has no coordinate tree that can be edited.
    """
    if geometry is None or "type" not in geometry:
        raise UnsupportedGeometryTypeError("Geometry must contain 'type' key")

    try:
        geojson_type = GeoJSONType(geometry["type"])
    except ValueError:
        geojson_type = None

    if geojson_type not in COORDINATE_DEPTH:
        raise UnsupportedGeometryTypeError(
            f"Unsupported geometry type: {geometry['type']}"
        )
    return geojson_type


def coordinate_depth(geometry: GeoJSONGeometry | None) -> int:
    """Number of sequence levels above a single position in the geometry coordinates."""
    return COORDINATE_DEPTH[geometry_type(geometry)]


def is_polygonal(geometry: GeoJSONGeometry | None) -> bool:
    return geometry_type(geometry) in (GeoJSONType.POLYGON, GeoJSONType.MULTIPOLYGON)


def _check_index(coordinates: Sequence[Any], index: Any) -> int:
    try:
        index = operator.index(index)
    except TypeError:
        raise InvalidArgumentError(
            f"Position index must be an integer, got {index!r}"
        ) from None

    if not 0 <= index < len(coordinates):
        raise OutOfRangeError(
            f"Position index {index} is out of range for a sequence of length {len(coordinates)}"
        )
    return index


def replace_position(
    coordinates: Any,
    position_indexes: Sequence[int],
    updated_position: Position,
    is_polygonal: bool = False,
) -> Any:
    """Replace a position deeply nested within a coordinates array.

    Only the sequences along `position_indexes` are copied, every other
    subtree is shared with `coordinates`, which is never modified.

    Args:
        coordinates: The coordinates of a Point, MultiPoint, LineString,
            MultiLineString, Polygon or MultiPolygon.
        position_indexes: The indexes of the position to replace, one per
            nesting level. Empty replaces the coordinates as a whole (Point).
        updated_position: The position to place in the result, i.e. [lng, lat]
            or [lng, lat, alt].
        is_polygonal: Whether the innermost sequences are closed rings. If so,
            replacing the first or last position of a ring replaces both.

    Returns:
        The updated coordinates.

    Raises:
        OutOfRangeError: If an index is outside of its sequence.
        InvalidArgumentError: If an index is not an integer.
    """
    if len(position_indexes) == 0:
        return updated_position

    index = _check_index(coordinates, position_indexes[0])

    if len(position_indexes) > 1:
        # recursively update inner array
        updated_child = replace_position(
            coordinates[index],
            position_indexes[1:],
            updated_position,
            is_polygonal,
        )
        return [*coordinates[:index], updated_child, *coordinates[index + 1 :]]

    updated = [*coordinates[:index], updated_position, *coordinates[index + 1 :]]

    if is_polygonal and index in (0, len(coordinates) - 1):
        # the first position of a ring is repeated at its end
        updated[0] = updated_position
        updated[-1] = updated_position

    return updated


def remove_position(
    coordinates: Any,
    position_indexes: Sequence[int],
    is_polygonal: bool = False,
) -> Any:
    """Remove a position deeply nested within a coordinates array.

    Args:
        coordinates: The coordinates of a MultiPoint, LineString,
            MultiLineString, Polygon or MultiPolygon.
        position_indexes: The indexes of the position to remove, one per
            nesting level.
        is_polygonal: Whether the innermost sequences are closed rings. If so,
            removing an endpoint re-closes the ring on the remaining endpoint.

    Returns:
        The updated coordinates.

    Raises:
        InvalidArgumentError: If `position_indexes` is empty.
        OutOfRangeError: If an index is outside of its sequence.
        RingTooSmallError: If the ring is already a triangle.
    """
    if len(position_indexes) == 0:
        raise InvalidArgumentError("Must specify the index of the position to remove")

    index = _check_index(coordinates, position_indexes[0])

    if len(position_indexes) > 1:
        # recursively update inner array
        updated_child = remove_position(
            coordinates[index], position_indexes[1:], is_polygonal
        )
        return [*coordinates[:index], updated_child, *coordinates[index + 1 :]]

    if is_polygonal and len(coordinates) <= MIN_RING_POSITIONS:
        raise RingTooSmallError(
            "Cannot remove a position from a triangle as it will no longer be a polygon"
        )

    updated = [*coordinates[:index], *coordinates[index + 1 :]]

    if is_polygonal:
        if index == 0:
            updated[-1] = updated[0]
        elif index == len(coordinates) - 1:
            updated[0] = updated[-1]

    return updated


def _flatten(coordinates: Any, depth: int, prefix: PositionPath) -> list[EditHandle]:
    if depth == 0:
        return [EditHandle(coordinates, prefix)]

    handles = []
    for index, child in enumerate(coordinates):
        handles.extend(_flatten(child, depth - 1, (*prefix, index)))
    return handles


def flatten_positions(geometry: GeoJSONGeometry) -> list[EditHandle]:
    """Flatten a geometry into its positions along with their indexes.

    Handles are ordered the way the coordinates are nested: polygons first,
    then rings, then positions within a ring.

    Args:
        geometry: A GeoJSON geometry dictionary.

    Returns:
        One handle per position of the geometry.

    Raises:
        UnsupportedGeometryTypeError: If the geometry type has no coordinates
            to flatten.
    """
    depth = coordinate_depth(geometry)
    return _flatten(geometry["coordinates"], depth, ())
