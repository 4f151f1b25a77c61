from enum import Enum


class GeoJsonType(str, Enum):
    POINT = "Point"
    MULTI_POINT = "MultiPoint"
    LINE_STRING = "LineString"
    MULTI_LINE_STRING = "MultiLineString"
    POLYGON = "Polygon"
    MULTI_POLYGON = "MultiPolygon"
    GEOMETRY_COLLECTION = "GeometryCollection"
    FEATURE = "Feature"
    FEATURE_COLLECTION = "FeatureCollection"


GEOMETRY_TYPES = (
    GeoJsonType.POINT,
    GeoJsonType.MULTI_POINT,
    GeoJsonType.LINE_STRING,
    GeoJsonType.MULTI_LINE_STRING,
    GeoJsonType.POLYGON,
    GeoJsonType.MULTI_POLYGON,
    GeoJsonType.GEOMETRY_COLLECTION,
)
