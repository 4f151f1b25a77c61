import math
from typing import Annotated, Any, Iterable

from pydantic import (
    AllowInfNan,
    BaseModel,
    ConfigDict,
    RootModel,
    Strict,
    field_validator,
    model_serializer,
    model_validator,
)

from .validation import Validatable, ValidationError, ValidationResult, validate_and_raise


MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0
MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0

# rfc7946 3.1.6: a linear ring is closed and has four or more positions
MIN_RING_LENGTH = 4

# a JSON number: no bool or numeric strings, no NaN or Infinity
JsonNumber = Annotated[float, Strict(), AllowInfNan(False)]


class Position(Validatable, RootModel[tuple[JsonNumber, ...]]):
    """A ``[longitude, latitude, altitude?]`` coordinate.

    Constructing ``Position((lon, lat))`` never checks ranges; use
    :meth:`Position.of` to build and validate in one step. Components that
    are not finite JSON numbers are rejected on construction.
    """

    model_config = ConfigDict(frozen=True)

    @classmethod
    def of(cls, *coordinates: float | Iterable[float]) -> "Position":
        if len(coordinates) == 1 and isinstance(coordinates[0], (list, tuple)):
            coordinates = tuple(coordinates[0])
        return validate_and_raise(cls(coordinates))

    @property
    def coordinates(self) -> tuple[float, ...]:
        return self.root

    @property
    def longitude(self) -> float:
        return self.root[0] if len(self.root) > 0 else math.nan

    @property
    def latitude(self) -> float:
        return self.root[1] if len(self.root) > 1 else math.nan

    @property
    def altitude(self) -> float:
        return self.root[2] if len(self.root) > 2 else math.nan

    def __iter__(self):
        return iter(self.root)

    def __getitem__(self, item):
        return self.root[item]

    def __len__(self):
        return len(self.root)

    def __str__(self):
        return str(list(self.root))

    def validate(self) -> ValidationResult:
        # first failing rule wins; range checks mean nothing on a bad arity
        if len(self.root) not in (2, 3):
            error = ValidationError.of(
                "coordinates", "coordinates length is not valid", "coordinates.length.invalid"
            )
        elif not MIN_LONGITUDE <= self.longitude <= MAX_LONGITUDE:
            error = ValidationError.of(
                "coordinates", "longitude is not valid", "coordinates.longitude.invalid"
            )
        elif not MIN_LATITUDE <= self.latitude <= MAX_LATITUDE:
            error = ValidationError.of(
                "coordinates", "latitude is not valid", "coordinates.latitude.invalid"
            )
        else:
            return ValidationResult.ok()
        return ValidationResult.of([error])


def validate_positions(positions: Iterable[Position] | None) -> set[ValidationError]:
    errors = set()
    for position in positions or ():
        errors.update(position.validate().errors)
    return errors


def _ring_repr(ring) -> str:
    return str([list(position) for position in ring])


def _validate_linear_ring(ring, empty_message: str, empty_key: str) -> set[ValidationError]:
    ring = ring or ()
    errors = set()
    if len(ring) == 0:
        errors.add(ValidationError.of("coordinates", empty_message, empty_key))
    if len(ring) < MIN_RING_LENGTH:
        errors.add(
            ValidationError.of(
                "coordinates",
                f"Ring '{_ring_repr(ring)}' must contain at least four positions.",
                "coordinates.ring.length.invalid",
            )
        )
    if len(ring) > 0 and ring[0] != ring[-1]:
        errors.add(
            ValidationError.of(
                "coordinates",
                f"Ring '{_ring_repr(ring)}', first and last position must be the same.",
                "coordinates.ring.circle.invalid",
            )
        )
    errors.update(validate_positions(ring))
    return errors


class PolygonCoordinates(Validatable, BaseModel):
    """One exterior linear ring plus zero or more interior rings (holes).

    Validates from, and serializes to, the flat GeoJSON ring list where the
    first ring is the exterior.
    """

    exterior: tuple[Position, ...] = ()
    holes: tuple[tuple[Position, ...], ...] = ()

    model_config = ConfigDict(frozen=True, extra="forbid")

    @model_validator(mode="before")
    @classmethod
    def _split_linear_rings(cls, data: Any) -> Any:
        if isinstance(data, (list, tuple)):
            rings = list(data)
            return {"exterior": rings[0] if rings else (), "holes": rings[1:]}
        return data

    @field_validator("exterior", "holes", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return () if value is None else value

    @model_serializer
    def _as_linear_rings(self) -> list[list[list[float]]]:
        return [[list(position) for position in ring] for ring in self.coordinates]

    @classmethod
    def from_linear_rings(cls, linear_rings: Iterable[Iterable[Any]]) -> "PolygonCoordinates":
        return cls.model_validate(list(linear_rings))

    @classmethod
    def of(cls, *linear_rings: Iterable[Any]) -> "PolygonCoordinates":
        return validate_and_raise(cls.from_linear_rings(linear_rings))

    @property
    def coordinates(self) -> tuple[tuple[Position, ...], ...]:
        return (self.exterior, *self.holes)

    def __str__(self):
        return str([[list(position) for position in ring] for ring in self.coordinates])

    def validate(self) -> ValidationResult:
        errors = _validate_linear_ring(
            self.exterior,
            "Exterior linear ring should not be blank/empty.",
            "coordinates.exterior.ring.empty",
        )
        for hole in self.holes:
            errors.update(
                _validate_linear_ring(
                    hole,
                    "Interior linear ring should not be blank/empty.",
                    "coordinates.interior.ring.empty",
                )
            )
        return ValidationResult.of(errors)
