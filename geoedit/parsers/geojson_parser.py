"""Loading and saving of editable GeoJSON files."""

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import geojson
import shapely
from shapely.geometry.base import BaseGeometry

from geoedit.editable_feature_collection import EditableFeatureCollection
from geoedit.typing import GeoJSONFeatureCollection, GeoJSONType


logger = logging.getLogger(__name__)

# Only used to build the throwaway geojson objects that validate a geometry,
# the loaded coordinates themselves are never rounded
VALIDATION_PRECISION = 15


class GeoJSONParser:
    """Parser for GeoJSON files that are to be edited.

    Whatever the top-level object of the file is, it is loaded as a feature
    collection: a single feature becomes a one-item collection, and a bare
    geometry becomes a feature without properties.
    """

    def __init__(self, file_path: str | Path) -> None:
        """Initialize the parser with a file path.

        Args:
            file_path: Path to the GeoJSON file to be parsed.
        """
        self.file_path = Path(file_path)

    def _validate_geometry(self, geometry: Any) -> None:
        """Raise a ValueError if an editable geometry is malformed.

        Geometries that can't be edited, e.g. GeometryCollection, are left as
        they are.
        """
        if not isinstance(geometry, dict):
            return
        try:
            geometry_class = getattr(geojson, GeoJSONType(geometry.get("type")).value)
        except ValueError:
            return

        if "coordinates" not in geometry:
            raise ValueError("Geometry must contain 'coordinates' key")
        geometry_class(
            geometry["coordinates"], validate=True, precision=VALIDATION_PRECISION
        )

    def _to_feature_collection(self, data: dict[str, Any]) -> GeoJSONFeatureCollection:
        match data.get("type"):
            case "FeatureCollection":
                if "features" not in data:
                    raise ValueError("FeatureCollection must contain 'features' key")
                return data  # type: ignore[return-value]
            case "Feature":
                return {"type": "FeatureCollection", "features": [data]}  # type: ignore[list-item]
            case (
                "Point"
                | "MultiPoint"
                | "LineString"
                | "MultiLineString"
                | "Polygon"
                | "MultiPolygon"
                | "GeometryCollection"
            ):
                feature = {"type": "Feature", "geometry": data, "properties": {}}
                return {"type": "FeatureCollection", "features": [feature]}  # type: ignore[list-item]
            case _:
                raise ValueError("Unsupported GeoJSON type")

    def load(self) -> EditableFeatureCollection:
        """Load the file as an editable feature collection.

        Coordinates are kept exactly as they are written in the file.

        Returns:
            An `EditableFeatureCollection` wrapping the file contents.

        Raises:
            ValueError: If the file is not GeoJSON or contains an invalid geometry,
                e.g. an unclosed polygon ring.
        """
        with open(self.file_path, "r") as f:
            data = geojson.load(f, object_hook=None)

        if not isinstance(data, dict):
            raise ValueError("Unsupported GeoJSON type")

        feature_collection = self._to_feature_collection(data)
        for feature in feature_collection["features"]:
            self._validate_geometry(feature.get("geometry"))

        logger.debug(
            f"Loaded {len(feature_collection['features'])} features from {self.file_path}"
        )
        return EditableFeatureCollection(feature_collection)

    def _get_parts(self) -> Iterable[BaseGeometry]:
        editable = self.load()
        for feature_index, feature in enumerate(editable.get_object()["features"]):
            if feature.get("geometry") is None:
                continue
            yield from shapely.get_parts(editable.get_shape(feature_index))

    def get_polygons(self) -> Iterable[shapely.Polygon]:
        """Get every polygon of the GeoJSON file.

        Returns:
            An iterable of shapely Polygon objects, one per polygon part.
        """
        return (part for part in self._get_parts() if isinstance(part, shapely.Polygon))

    def get_points(self) -> Iterable[shapely.Point]:
        """Get every point of the GeoJSON file.

        Returns:
            An iterable of shapely Point objects, one per point part.
        """
        return (part for part in self._get_parts() if isinstance(part, shapely.Point))


def dump_feature_collection(
    feature_collection: EditableFeatureCollection, file_path: str | Path
) -> None:
    """Write an editable feature collection to a GeoJSON file.

    Args:
        feature_collection: The collection to write.
        file_path: Path of the file to create or overwrite.
    """
    with open(file_path, "w") as f:
        geojson.dump(feature_collection.get_object(), f)
    logger.debug(f"Saved {len(feature_collection)} features to {file_path}")
