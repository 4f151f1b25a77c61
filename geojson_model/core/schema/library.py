import logging
from typing import Any, Mapping, TypeVar

import pydantic

from .enums import GEOMETRY_TYPES, GeoJsonType
from .spatial import (
    Feature,
    FeatureCollection,
    GeoJson,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)


logger = logging.getLogger(__name__)

TGeoJson = TypeVar("TGeoJson", bound=GeoJson)


GEOJSON_SCHEMAS: Mapping[GeoJsonType, type[GeoJson]] = {
    GeoJsonType.POINT: Point,
    GeoJsonType.MULTI_POINT: MultiPoint,
    GeoJsonType.LINE_STRING: LineString,
    GeoJsonType.MULTI_LINE_STRING: MultiLineString,
    GeoJsonType.POLYGON: Polygon,
    GeoJsonType.MULTI_POLYGON: MultiPolygon,
    GeoJsonType.GEOMETRY_COLLECTION: GeometryCollection,
    GeoJsonType.FEATURE: Feature,
    GeoJsonType.FEATURE_COLLECTION: FeatureCollection,
}


class GeoJsonDecodeError(ValueError):
    """The payload cannot be turned into a GeoJSON object at all.

    Distinct from a validation failure: no object is produced.
    """


def resolve_schema(type_name: Any) -> type[GeoJson]:
    if not isinstance(type_name, str):
        raise GeoJsonDecodeError(f"missing or non-string 'type' discriminator: {type_name!r}")
    try:
        kind = GeoJsonType(type_name)
    except ValueError as exc:
        logger.debug("no schema registered for type %r", type_name)
        raise GeoJsonDecodeError(f"unknown GeoJSON type '{type_name}'") from exc
    return GEOJSON_SCHEMAS[kind]


def decode(payload: Any, as_type: type[TGeoJson] = GeoJson) -> TGeoJson:
    """Build the concrete GeoJSON object named by ``payload["type"]``.

    ``as_type`` narrows the accepted variants: ``GeoJson`` takes anything,
    ``Geometry`` takes the seven geometries, a concrete class takes only
    itself. The result is not checked against GeoJSON rules; call
    ``validate()`` on it.
    """
    if isinstance(payload, as_type):
        return payload
    if not isinstance(payload, Mapping):
        raise GeoJsonDecodeError(
            f"expected a JSON object for {as_type.__name__}, got {type(payload).__name__}"
        )
    model = resolve_schema(payload.get("type"))
    if not issubclass(model, as_type):
        logger.debug("rejecting %s where %s was requested", model.__name__, as_type.__name__)
        raise GeoJsonDecodeError(f"'{payload.get('type')}' is not a {as_type.__name__}")
    try:
        decoded = model.model_validate(payload)
    except pydantic.ValidationError as exc:
        logger.debug("malformed %s payload: %s", model.__name__, exc)
        raise GeoJsonDecodeError(f"invalid {model.__name__} payload: {exc}") from exc
    logger.debug("decoded %s as %s", model.__name__, as_type.__name__)
    return decoded


def decode_many(payloads: list[Any], as_type: type[TGeoJson] = GeoJson) -> list[TGeoJson]:
    return [decode(payload, as_type) for payload in payloads]


def is_geometry_type(type_name: Any) -> bool:
    return isinstance(type_name, str) and type_name in GEOMETRY_TYPES
