from collections.abc import Sequence
from enum import Enum
from typing import Any, NamedTuple, TypeAlias, TypedDict


Position: TypeAlias = Sequence[float]
PositionPath: TypeAlias = tuple[int, ...]


class GeoJSONType(Enum):
    """Geometry types with an editable coordinate tree."""

    POINT = "Point"
    MULTIPOINT = "MultiPoint"
    LINESTRING = "LineString"
    MULTILINESTRING = "MultiLineString"
    POLYGON = "Polygon"
    MULTIPOLYGON = "MultiPolygon"


class GeoJSONObject(TypedDict):
    type: str


class GeoJSONGeometry(GeoJSONObject):
    coordinates: Any


class GeoJSONGeometryCollection(GeoJSONObject):
    geometries: list[GeoJSONGeometry]


class GeoJSONFeature(GeoJSONObject):
    geometry: GeoJSONGeometry | GeoJSONGeometryCollection | None
    properties: dict[str, Any] | None


class GeoJSONFeatureCollection(GeoJSONObject):
    features: list[GeoJSONFeature]


class EditHandle(NamedTuple):
    """A single editable vertex of a geometry."""

    position: Position
    position_indexes: PositionPath
