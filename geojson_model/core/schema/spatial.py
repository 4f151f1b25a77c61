from typing import Annotated, Any, Mapping

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    SerializeAsAny,
    field_validator,
    model_serializer,
)

from .enums import GeoJsonType
from .models import JsonNumber, Position, PolygonCoordinates, validate_positions
from .validation import (
    Validatable,
    ValidationError,
    ValidationResult,
    invalid_type,
    is_type_valid,
    validate_and_raise,
)


# members dropped from the encoding when unset
OPTIONAL_MEMBERS = ("bbox", "id")

MIN_MULTI_POSITIONS = 2
MIN_LINE_POSITIONS = 2
MIN_POLYGONS = 1


def _empty_coordinates() -> ValidationError:
    return ValidationError.of(
        "coordinates", "coordinates should not be empty/blank", "coordinates.invalid.empty"
    )


def _too_few_positions(minimum: int) -> ValidationError:
    return ValidationError.of(
        "coordinates",
        f"coordinates is not valid, minimum {minimum} positions required",
        "coordinates.invalid.min.length",
    )


class GeoJson(Validatable, BaseModel):
    """Base of every GeoJSON object; ``type`` is the discriminator."""

    type: str | None = None
    bbox: tuple[JsonNumber, ...] | None = None

    model_config = ConfigDict(frozen=True, extra="forbid")

    @model_serializer(mode="wrap")
    def _drop_absent_members(self, handler):
        data = handler(self)
        for member in OPTIONAL_MEMBERS:
            if member in data and data[member] is None:
                del data[member]
        return data

    @classmethod
    def parse(cls, payload: Mapping[str, Any]):
        """Decode a JSON object as this class, dispatching on ``type``.

        Raises ``GeoJsonDecodeError`` for an unknown or missing discriminator,
        a variant that is not a ``cls``, or a field of the wrong shape.
        """
        from .library import decode

        return decode(payload, cls)

    @classmethod
    def from_json(cls, text: str | bytes):
        from geojson_model.geo import loads

        return loads(text, as_type=cls)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json")

    def to_json(self, config=None) -> str:
        from geojson_model.geo import dumps

        return dumps(self, config=config)

    @property
    def __geo_interface__(self) -> dict[str, Any]:
        return self.to_dict()

    def validate(self) -> ValidationResult:
        # only bare GeoJson / Geometry instances get here; no schema applies
        errors = self._bbox_errors()
        errors.add(
            ValidationError.of(
                "type",
                f"type '{self.type}' is not valid. expected a concrete {type(self).__name__} type",
                "type.invalid",
            )
        )
        return ValidationResult.of(errors)

    def _common_errors(self, expected: GeoJsonType) -> set[ValidationError]:
        errors = self._bbox_errors()
        if not is_type_valid(self.type, expected):
            errors.add(invalid_type(self.type, expected))
        return errors

    def _bbox_errors(self) -> set[ValidationError]:
        errors = set()
        if self.bbox is not None and len(self.bbox) not in (4, 6):
            errors.add(
                ValidationError.of(
                    "bbox",
                    f"bbox must hold 4 or 6 numbers, got {len(self.bbox)}",
                    "bbox.length.invalid",
                )
            )
        return errors


class Geometry(GeoJson):
    pass


def _resolve_geometry(value: Any) -> Any:
    if isinstance(value, Mapping):
        from .library import decode

        return decode(value, Geometry)
    return value


GeometryMember = Annotated[SerializeAsAny[Geometry], BeforeValidator(_resolve_geometry)]


class Point(Geometry):
    type: str | None = GeoJsonType.POINT.value
    coordinates: Position | None = None

    @classmethod
    def of(cls, *coordinates: float | Position) -> "Point":
        if len(coordinates) == 1 and isinstance(coordinates[0], Position):
            position = coordinates[0]
        else:
            position = Position.of(*coordinates)
        return validate_and_raise(cls(coordinates=position))

    def validate(self) -> ValidationResult:
        errors = self._common_errors(GeoJsonType.POINT)
        if self.coordinates is None:
            errors.add(_empty_coordinates())
        else:
            errors.update(self.coordinates.validate().errors)
        return ValidationResult.of(errors)


class MultiPoint(Geometry):
    type: str | None = GeoJsonType.MULTI_POINT.value
    coordinates: tuple[Position, ...] = ()

    @field_validator("coordinates", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return () if value is None else value

    @classmethod
    def of(cls, *positions: Position) -> "MultiPoint":
        return validate_and_raise(cls(coordinates=positions))

    def validate(self) -> ValidationResult:
        errors = self._common_errors(GeoJsonType.MULTI_POINT)
        if len(self.coordinates) == 0:
            errors.add(_empty_coordinates())
        if len(self.coordinates) < MIN_MULTI_POSITIONS:
            errors.add(_too_few_positions(MIN_MULTI_POSITIONS))
        errors.update(validate_positions(self.coordinates))
        return ValidationResult.of(errors)


class LineString(Geometry):
    type: str | None = GeoJsonType.LINE_STRING.value
    coordinates: tuple[Position, ...] = ()

    @field_validator("coordinates", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return () if value is None else value

    @classmethod
    def of(cls, *positions: Position) -> "LineString":
        return validate_and_raise(cls(coordinates=positions))

    def validate(self) -> ValidationResult:
        errors = self._common_errors(GeoJsonType.LINE_STRING)
        if len(self.coordinates) == 0:
            errors.add(_empty_coordinates())
        if len(self.coordinates) < MIN_LINE_POSITIONS:
            errors.add(_too_few_positions(MIN_LINE_POSITIONS))
        errors.update(validate_positions(self.coordinates))
        return ValidationResult.of(errors)


class MultiLineString(Geometry):
    type: str | None = GeoJsonType.MULTI_LINE_STRING.value
    coordinates: tuple[tuple[Position, ...], ...] = ()

    @field_validator("coordinates", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return () if value is None else value

    @classmethod
    def of(cls, *lines: list[Position]) -> "MultiLineString":
        return validate_and_raise(cls(coordinates=lines))

    def validate(self) -> ValidationResult:
        errors = self._common_errors(GeoJsonType.MULTI_LINE_STRING)
        if len(self.coordinates) == 0:
            errors.add(_empty_coordinates())
        if any(len(line) < MIN_LINE_POSITIONS for line in self.coordinates):
            errors.add(_too_few_positions(MIN_LINE_POSITIONS))
        for line in self.coordinates:
            errors.update(validate_positions(line))
        return ValidationResult.of(errors)


class Polygon(Geometry):
    type: str | None = GeoJsonType.POLYGON.value
    coordinates: PolygonCoordinates | None = None

    @classmethod
    def of(cls, exterior: PolygonCoordinates | list[Position], *holes: list[Position]) -> "Polygon":
        if isinstance(exterior, PolygonCoordinates):
            coordinates = exterior
        else:
            coordinates = PolygonCoordinates(exterior=exterior, holes=holes)
        return validate_and_raise(cls(coordinates=coordinates))

    @property
    def exterior(self) -> tuple[Position, ...]:
        return self.coordinates.exterior if self.coordinates is not None else ()

    @property
    def holes(self) -> tuple[tuple[Position, ...], ...]:
        return self.coordinates.holes if self.coordinates is not None else ()

    def validate(self) -> ValidationResult:
        errors = self._common_errors(GeoJsonType.POLYGON)
        if self.coordinates is None:
            errors.add(_empty_coordinates())
        else:
            if len(self.coordinates.exterior) == 0:
                errors.add(
                    ValidationError.of(
                        "coordinates",
                        "coordinates is not valid, at least one position required",
                        "coordinates.invalid.min.length",
                    )
                )
            errors.update(self.coordinates.validate().errors)
        return ValidationResult.of(errors)


class MultiPolygon(Geometry):
    type: str | None = GeoJsonType.MULTI_POLYGON.value
    coordinates: tuple[PolygonCoordinates, ...] = ()

    @field_validator("coordinates", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return () if value is None else value

    @classmethod
    def of(cls, *polygons: PolygonCoordinates) -> "MultiPolygon":
        return validate_and_raise(cls(coordinates=polygons))

    def validate(self) -> ValidationResult:
        errors = self._common_errors(GeoJsonType.MULTI_POLYGON)
        if len(self.coordinates) < MIN_POLYGONS:
            errors.add(
                ValidationError.of(
                    "coordinates",
                    "coordinates is not valid, at least one polygon required",
                    "coordinates.invalid.min.length",
                )
            )
        for polygon in self.coordinates:
            errors.update(polygon.validate().errors)
        return ValidationResult.of(errors)


class GeometryCollection(Geometry):
    type: str | None = GeoJsonType.GEOMETRY_COLLECTION.value
    geometries: tuple[GeometryMember, ...] = ()

    @field_validator("geometries", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return () if value is None else value

    @classmethod
    def of(cls, *geometries: Geometry) -> "GeometryCollection":
        return validate_and_raise(cls(geometries=geometries))

    def validate(self) -> ValidationResult:
        errors = self._common_errors(GeoJsonType.GEOMETRY_COLLECTION)
        if any(_is_collection(geometry) for geometry in self.geometries):
            errors.add(
                ValidationError.of(
                    "geometries",
                    "Field 'geometries' must not have nested 'GeometryCollection'",
                    "geometries.invalid.nested.geometry",
                )
            )
        for geometry in self.geometries:
            errors.update(geometry.validate().errors)
        return ValidationResult.of(errors)


def _is_collection(geometry: Geometry) -> bool:
    return isinstance(geometry, GeometryCollection) or geometry.type == GeoJsonType.GEOMETRY_COLLECTION


class Feature(GeoJson):
    type: str | None = GeoJsonType.FEATURE.value
    id: str | int | JsonNumber | None = None
    geometry: Annotated[SerializeAsAny[Geometry] | None, BeforeValidator(_resolve_geometry)] = None
    properties: dict[str, Any] = Field(default_factory=dict)

    @field_validator("properties", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return {} if value is None else value

    @classmethod
    def of(
        cls,
        geometry: Geometry,
        properties: Mapping[str, Any] | None = None,
        id: str | int | float | None = None,
    ) -> "Feature":
        return validate_and_raise(
            cls(id=id, geometry=geometry, properties=dict(properties or {}))
        )

    def get_property(self, name: str, default: Any = None) -> Any:
        return self.properties.get(name, default)

    def validate(self) -> ValidationResult:
        errors = self._common_errors(GeoJsonType.FEATURE)
        if self.geometry is None:
            errors.add(
                ValidationError.of(
                    "geometry", "geometry should not be empty/blank", "geometry.invalid.empty"
                )
            )
        else:
            errors.update(error.qualified("geometry") for error in self.geometry.validate().errors)
        return ValidationResult.of(errors)


def _resolve_feature(value: Any) -> Any:
    if isinstance(value, Mapping):
        from .library import decode

        return decode(value, Feature)
    return value


class FeatureCollection(GeoJson):
    type: str | None = GeoJsonType.FEATURE_COLLECTION.value
    features: tuple[Annotated[Feature, BeforeValidator(_resolve_feature)], ...] = ()

    @field_validator("features", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return () if value is None else value

    @classmethod
    def of(cls, *features: Feature) -> "FeatureCollection":
        return validate_and_raise(cls(features=features))

    def validate(self) -> ValidationResult:
        errors = self._common_errors(GeoJsonType.FEATURE_COLLECTION)
        for feature in self.features:
            errors.update(feature.validate().errors)
        return ValidationResult.of(errors)
