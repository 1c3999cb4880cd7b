import pytest


@pytest.fixture
def feature_collection():
    """A feature collection with one feature of every GeoJSON geometry type."""
    return {
        "type": "FeatureCollection",
        "name": "fixtures",
        "features": [
            {
                "type": "Feature",
                "id": "point",
                "geometry": {"type": "Point", "coordinates": [1, 2]},
                "properties": {"name": "point"},
            },
            {
                "type": "Feature",
                "geometry": {"type": "MultiPoint", "coordinates": [[1, 2], [3, 4]]},
                "properties": {"name": "multipoint"},
            },
            {
                "type": "Feature",
                "geometry": {
                    "type": "LineString",
                    "coordinates": [[0, 0], [1, 1], [2, 2]],
                },
                "properties": {"name": "linestring"},
            },
            {
                "type": "Feature",
                "geometry": {
                    "type": "MultiLineString",
                    "coordinates": [[[0, 0], [1, 0]], [[2, 2], [3, 3], [4, 4]]],
                },
                "properties": {"name": "multilinestring"},
            },
            {
                "type": "Feature",
                "geometry": {
                    "type": "Polygon",
                    "coordinates": [
                        [[0, 0], [4, 0], [4, 4], [0, 4], [0, 0]],
                        [[1, 1], [2, 1], [2, 2], [1, 1]],
                    ],
                },
                "properties": {"name": "polygon", "nested": {"level": 1}},
            },
            {
                "type": "Feature",
                "geometry": {
                    "type": "MultiPolygon",
                    "coordinates": [
                        [[[0, 0], [1, 0], [1, 1], [0, 0]]],
                        [[[5, 5], [6, 5], [6, 6], [5, 5]]],
                    ],
                },
                "properties": {"name": "multipolygon"},
            },
            {
                "type": "Feature",
                "geometry": {
                    "type": "GeometryCollection",
                    "geometries": [{"type": "Point", "coordinates": [0, 0]}],
                },
                "properties": {"name": "geometrycollection"},
            },
        ],
    }


@pytest.fixture
def triangle_collection():
    """A feature collection holding the smallest closed polygon."""
    return {
        "type": "FeatureCollection",
        "features": [
            {
                "type": "Feature",
                "geometry": {
                    "type": "Polygon",
                    "coordinates": [[[0, 0], [1, 0], [1, 1], [0, 0]]],
                },
                "properties": {},
            }
        ],
    }
