"""Immutable editing of GeoJSON feature collections."""

import logging
import operator
from collections.abc import Sequence
from typing import Any

from shapely.geometry import shape
from shapely.geometry.base import BaseGeometry

from geoedit.coordinates import (
    coordinate_depth,
    flatten_positions,
    is_polygonal,
    remove_position,
    replace_position,
)
from geoedit.errors import (
    InvalidArgumentError,
    OutOfRangeError,
    UnsupportedGeometryTypeError,
)
from geoedit.typing import (
    EditHandle,
    GeoJSONFeature,
    GeoJSONFeatureCollection,
    Position,
)


logger = logging.getLogger(__name__)


class EditableFeatureCollection:
    """Wraps a GeoJSON feature collection and produces edited copies of it.

    The wrapped value is never modified. Every edit returns a new
    `EditableFeatureCollection` whose collection shares all features, and all
    coordinate subtrees, that were not on the path to the edited position.

    Supported geometries are Point, MultiPoint, LineString, MultiLineString,
    Polygon and MultiPolygon. Positions are addressed by a feature index and a
    tuple of position indexes, one per nesting level of the geometry
    coordinates (empty for a Point).
    """

    def __init__(self, feature_collection: GeoJSONFeatureCollection) -> None:
        self.feature_collection = feature_collection

    def __len__(self) -> int:
        return len(self.feature_collection["features"])

    def __repr__(self) -> str:
        return f"{type(self).__name__}(features={len(self)})"

    def get_object(self) -> GeoJSONFeatureCollection:
        """Returns the wrapped feature collection. It must not be mutated."""
        return self.feature_collection

    def replace_vertex(
        self,
        feature_index: int,
        position_indexes: Sequence[int],
        updated_position: Position,
    ) -> "EditableFeatureCollection":
        """Replace the position deeply nested within the given feature's geometry.

        For Polygon and MultiPolygon, replacing the first or last position of a
        ring replaces both, keeping the ring closed.

        Args:
            feature_index: The index of the feature to update.
            position_indexes: The indexes of the position to replace.
            updated_position: The updated position to place in the result
                (i.e. [lng, lat] or [lng, lat, alt]).

        Returns:
            A new `EditableFeatureCollection` with the given position replaced.

        Raises:
            OutOfRangeError: If the feature or position does not exist.
            InvalidArgumentError: If `updated_position` is not a 2D or 3D position.
            UnsupportedGeometryTypeError: If the feature geometry cannot be edited.
        """
        if (
            not isinstance(updated_position, Sequence)
            or isinstance(updated_position, str)
            or len(updated_position) not in (2, 3)
        ):
            raise InvalidArgumentError(
                f"A position must have exactly 2 or 3 values, got {updated_position!r}"
            )

        feature = self._get_feature(feature_index)
        geometry = feature.get("geometry")
        self._check_position_indexes(geometry, position_indexes)

        updated_coordinates = replace_position(
            geometry["coordinates"],
            position_indexes,
            updated_position,
            is_polygonal(geometry),
        )
        logger.debug(
            f"Replaced position {tuple(position_indexes)} of feature {feature_index} "
            f"with {updated_position}"
        )
        return self._with_coordinates(feature_index, updated_coordinates)

    def remove_vertex(
        self, feature_index: int, position_indexes: Sequence[int]
    ) -> "EditableFeatureCollection":
        """Remove a position deeply nested within the given feature's geometry.

        Works with MultiPoint, LineString, MultiLineString, Polygon and
        MultiPolygon. Removing the first or last position of a polygon ring
        re-closes the ring on the remaining endpoint.

        Args:
            feature_index: The index of the feature to update.
            position_indexes: The indexes of the position to remove.

        Returns:
            A new `EditableFeatureCollection` with the given position removed.

        Raises:
            InvalidArgumentError: If `position_indexes` is empty.
            OutOfRangeError: If the feature or position does not exist.
            RingTooSmallError: If the addressed ring is already a triangle.
            UnsupportedGeometryTypeError: If the feature geometry cannot be edited.
        """
        if len(position_indexes) == 0:
            raise InvalidArgumentError(
                "Must specify the index of the position to remove"
            )

        feature = self._get_feature(feature_index)
        geometry = feature.get("geometry")
        self._check_position_indexes(geometry, position_indexes)

        updated_coordinates = remove_position(
            geometry["coordinates"], position_indexes, is_polygonal(geometry)
        )
        logger.debug(
            f"Removed position {tuple(position_indexes)} of feature {feature_index}"
        )
        return self._with_coordinates(feature_index, updated_coordinates)

    def list_edit_handles(self, feature_index: int) -> list[EditHandle]:
        """Returns a flat list of positions for the given feature along with
        their indexes into the feature's geometry coordinates.

        Args:
            feature_index: The index of the feature to get edit handles for.
        """
        return flatten_positions(self._get_feature(feature_index).get("geometry"))

    def get_shape(self, feature_index: int) -> BaseGeometry:
        """Get the geometry of the given feature as a shapely geometry.

        Unlike the edit operations this also accepts a GeometryCollection.
        """
        geometry = self._get_feature(feature_index).get("geometry")
        if geometry is None:
            raise UnsupportedGeometryTypeError("Feature has no geometry")
        return shape(geometry)

    def _get_feature(self, feature_index: int) -> GeoJSONFeature:
        features = self.feature_collection["features"]
        try:
            feature_index = operator.index(feature_index)
        except TypeError:
            raise InvalidArgumentError(
                f"Feature index must be an integer, got {feature_index!r}"
            ) from None

        if not 0 <= feature_index < len(features):
            raise OutOfRangeError(
                f"Feature index {feature_index} is out of range for a collection of {len(features)} features"
            )
        return features[feature_index]

    @staticmethod
    def _check_position_indexes(
        geometry: Any, position_indexes: Sequence[int]
    ) -> None:
        depth = coordinate_depth(geometry)
        if len(position_indexes) != depth:
            raise OutOfRangeError(
                f"{geometry['type']} positions are addressed by {depth} indexes, "
                f"got {len(position_indexes)}"
            )

    def _with_coordinates(
        self, feature_index: int, coordinates: Any
    ) -> "EditableFeatureCollection":
        features = self.feature_collection["features"]
        feature = features[feature_index]

        updated_feature = {
            **feature,
            "geometry": {**feature["geometry"], "coordinates": coordinates},
        }

        # Immutably replace the feature being edited in the feature collection
        updated_feature_collection = {
            **self.feature_collection,
            "features": [
                *features[:feature_index],
                updated_feature,
                *features[feature_index + 1 :],
            ],
        }
        return EditableFeatureCollection(updated_feature_collection)  # type: ignore[arg-type]
