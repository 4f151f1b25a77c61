from .enums import GEOMETRY_TYPES, GeoJsonType
from .library import GEOJSON_SCHEMAS, GeoJsonDecodeError, decode, decode_many, is_geometry_type, resolve_schema
from .models import PolygonCoordinates, Position
from .spatial import (
    Feature,
    FeatureCollection,
    GeoJson,
    Geometry,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)
from .validation import (
    GeoJsonValidationError,
    Validatable,
    ValidationError,
    ValidationResult,
    validate_and_raise,
)
