from geojson_model.core.config import DEFAULT_CONFIG, CodecConfig, load_config
from geojson_model.core.schema import (
    Feature,
    FeatureCollection,
    GeoJson,
    GeoJsonDecodeError,
    GeoJsonType,
    GeoJsonValidationError,
    Geometry,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    PolygonCoordinates,
    Position,
    Validatable,
    ValidationError,
    ValidationResult,
)

__all__ = [
    "CodecConfig",
    "DEFAULT_CONFIG",
    "load_config",
    "Feature",
    "FeatureCollection",
    "GeoJson",
    "GeoJsonDecodeError",
    "GeoJsonType",
    "GeoJsonValidationError",
    "Geometry",
    "GeometryCollection",
    "LineString",
    "MultiLineString",
    "MultiPoint",
    "MultiPolygon",
    "Point",
    "Polygon",
    "PolygonCoordinates",
    "Position",
    "Validatable",
    "ValidationError",
    "ValidationResult",
]
