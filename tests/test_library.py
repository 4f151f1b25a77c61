import logging

import pydantic
import pytest

from geojson_model import (
    Feature,
    FeatureCollection,
    GeoJson,
    GeoJsonDecodeError,
    Geometry,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)
from geojson_model.core.schema import GEOJSON_SCHEMAS, GeoJsonType, decode, decode_many, is_geometry_type, resolve_schema


POLYGON = {
    "type": "Polygon",
    "coordinates": [
        [[100.0, 0.0], [101.0, 0.0], [101.0, 1.0], [100.0, 1.0], [100.0, 0.0]],
        [[100.8, 0.8], [100.8, 0.2], [100.2, 0.2], [100.2, 0.8], [100.8, 0.8]],
    ],
}


def test_registry_covers_every_type():
    assert set(GEOJSON_SCHEMAS) == set(GeoJsonType)
    for kind, model in GEOJSON_SCHEMAS.items():
        assert model.__name__ == kind.value


def test_polygon_decodes_the_same_from_every_entry_point():
    from_geojson = GeoJson.parse(POLYGON)
    from_geometry = Geometry.parse(POLYGON)
    from_polygon = Polygon.parse(POLYGON)
    assert isinstance(from_geojson, Polygon)
    assert from_geojson == from_geometry == from_polygon == decode(POLYGON)
    assert from_geojson.type == "Polygon"
    assert from_geojson.is_valid()


@pytest.mark.parametrize(
    ("payload", "model"),
    [
        ({"type": "Point", "coordinates": [100.0, 0.0]}, Point),
        ({"type": "MultiPoint", "coordinates": [[100.0, 0.0], [101.0, 1.0]]}, MultiPoint),
        ({"type": "LineString", "coordinates": [[100.0, 0.0], [101.0, 1.0]]}, LineString),
        ({"type": "MultiLineString", "coordinates": [[[100.0, 0.0], [101.0, 1.0]]]}, MultiLineString),
        (POLYGON, Polygon),
        ({"type": "MultiPolygon", "coordinates": [POLYGON["coordinates"]]}, MultiPolygon),
        ({"type": "GeometryCollection", "geometries": [{"type": "Point", "coordinates": [1.0, 1.0]}]}, GeometryCollection),
        ({"type": "Feature", "geometry": {"type": "Point", "coordinates": [1.0, 1.0]}, "properties": {}}, Feature),
        ({"type": "FeatureCollection", "features": []}, FeatureCollection),
    ],
)
def test_dispatch_on_type(payload, model):
    decoded = GeoJson.parse(payload)
    assert type(decoded) is model
    assert model.parse(payload) == decoded
    assert decoded.is_valid()
    if issubclass(model, Geometry):
        assert Geometry.parse(payload) == decoded


@pytest.mark.parametrize(
    "payload",
    [
        {"type": "Circle", "coordinates": [1.0, 1.0]},
        {"type": "point", "coordinates": [1.0, 1.0]},
        {"coordinates": [1.0, 1.0]},
        {"type": None, "coordinates": [1.0, 1.0]},
        {"type": 7},
        [1.0, 2.0],
        "Point",
        None,
    ],
)
def test_unknown_or_missing_type_fails_to_decode(payload):
    with pytest.raises(GeoJsonDecodeError):
        GeoJson.parse(payload)


def test_variant_outside_requested_type_fails_to_decode():
    feature = {"type": "Feature", "geometry": None, "properties": {}}
    with pytest.raises(GeoJsonDecodeError):
        Geometry.parse(feature)
    with pytest.raises(GeoJsonDecodeError):
        Point.parse({"type": "LineString", "coordinates": [[1.0, 1.0], [2.0, 2.0]]})
    with pytest.raises(GeoJsonDecodeError):
        decode(POLYGON, Feature)


def test_shape_mismatch_fails_to_decode():
    with pytest.raises(GeoJsonDecodeError) as excinfo:
        GeoJson.parse({"type": "Point", "coordinates": "north"})
    assert isinstance(excinfo.value.__cause__, pydantic.ValidationError)
    with pytest.raises(GeoJsonDecodeError):
        GeoJson.parse({"type": "Point", "coordinates": [1.0, 1.0], "radius": 5})


def test_nested_unknown_type_fails_to_decode():
    with pytest.raises(GeoJsonDecodeError):
        GeoJson.parse({"type": "GeometryCollection", "geometries": [{"type": "Circle"}]})
    with pytest.raises(GeoJsonDecodeError):
        GeoJson.parse({"type": "FeatureCollection", "features": [{"type": "Point", "coordinates": [1.0, 1.0]}]})


def test_decoding_does_not_validate():
    nested = {
        "type": "GeometryCollection",
        "geometries": [
            {"type": "Point", "coordinates": [1.0, 1.0]},
            {"type": "GeometryCollection", "geometries": []},
        ],
    }
    collection = GeoJson.parse(nested)
    assert isinstance(collection.geometries[1], GeometryCollection)
    assert collection.validate().keys() == {"geometries.invalid.nested.geometry"}
    point = Point.parse({"type": "Point", "coordinates": [500.0, 0.0]})
    assert point.validate().keys() == {"coordinates.longitude.invalid"}


def test_decoded_instance_passes_through():
    point = Point.of(1.0, 1.0)
    assert decode(point, Geometry) is point


def test_decode_many():
    decoded = decode_many([POLYGON, {"type": "Point", "coordinates": [1.0, 1.0]}], Geometry)
    assert [type(item) for item in decoded] == [Polygon, Point]


def test_resolve_schema():
    assert resolve_schema("FeatureCollection") is FeatureCollection
    with pytest.raises(GeoJsonDecodeError):
        resolve_schema("featurecollection")


@pytest.mark.parametrize(
    ("type_name", "expected"),
    [("Point", True), ("GeometryCollection", True), ("Feature", False), ("point", False), (None, False)],
)
def test_is_geometry_type(type_name, expected):
    assert is_geometry_type(type_name) is expected


def test_decode_logs_dispatch(caplog):
    caplog.set_level(logging.DEBUG, logger="geojson_model.core.schema.library")
    GeoJson.parse(POLYGON)
    assert "decoded Polygon as GeoJson" in caplog.text


@pytest.mark.parametrize(
    "coordinates",
    [["100", "0"], [True, False], [100.0, None], [float("inf"), 0.0], [0.0, 0.0, float("nan")]],
)
def test_coordinates_must_be_finite_numbers(coordinates):
    with pytest.raises(GeoJsonDecodeError) as excinfo:
        GeoJson.parse({"type": "Point", "coordinates": coordinates})
    assert isinstance(excinfo.value.__cause__, pydantic.ValidationError)


def test_bbox_must_be_finite_numbers():
    with pytest.raises(GeoJsonDecodeError):
        GeoJson.parse({"type": "Point", "coordinates": [1.0, 1.0], "bbox": ["1", 1.0, 1.0, 1.0]})


@pytest.mark.parametrize("feature_id", ["f1", 7, 1.5])
def test_feature_id_is_a_string_or_number(feature_id):
    feature = GeoJson.parse({"type": "Feature", "id": feature_id, "geometry": None, "properties": {}})
    assert feature.id == feature_id
    assert type(feature.id) is type(feature_id)
