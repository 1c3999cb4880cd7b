from geoedit.typing.geojson import (
    EditHandle,
    GeoJSONFeature,
    GeoJSONFeatureCollection,
    GeoJSONGeometry,
    GeoJSONGeometryCollection,
    GeoJSONObject,
    GeoJSONType,
    Position,
    PositionPath,
)

__all__ = [
    "EditHandle",
    "GeoJSONType",
    "GeoJSONObject",
    "GeoJSONGeometry",
    "GeoJSONGeometryCollection",
    "GeoJSONFeature",
    "GeoJSONFeatureCollection",
    "Position",
    "PositionPath",
]
