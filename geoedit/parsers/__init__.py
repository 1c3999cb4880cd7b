from geoedit.parsers.geojson_parser import GeoJSONParser, dump_feature_collection

__all__ = [
    "GeoJSONParser",
    "dump_feature_collection",
]
