import logging
from enum import Enum
from typing import Iterable, TypeVar

from pydantic import BaseModel, ConfigDict, Field


logger = logging.getLogger(__name__)


class ValidationError(BaseModel):
    """A single failed GeoJSON rule.

    ``key`` is stable and meant for programmatic branching or i18n lookups,
    ``message`` is for humans.
    """

    field: str
    message: str
    key: str

    model_config = ConfigDict(frozen=True, extra="forbid")

    @classmethod
    def of(cls, field: str, message: str, key: str) -> "ValidationError":
        return cls(field=field, message=message, key=key)

    def qualified(self, prefix: str) -> "ValidationError":
        return self.model_copy(update={"field": f"{prefix}.{self.field}"})

    def __str__(self):
        return f"ValidationError{{field='{self.field}', message='{self.message}', key='{self.key}'}}"


class ValidationResult(BaseModel):
    errors: frozenset[ValidationError] = Field(default_factory=frozenset)

    model_config = ConfigDict(frozen=True, extra="forbid")

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls()

    @classmethod
    def of(cls, errors: Iterable[ValidationError]) -> "ValidationResult":
        return cls(errors=frozenset(errors))

    def has_errors(self) -> bool:
        return len(self.errors) > 0

    def keys(self) -> set[str]:
        return {error.key for error in self.errors}

    def fields(self) -> set[str]:
        return {error.field for error in self.errors}

    def merge(self, *others: "ValidationResult") -> "ValidationResult":
        merged = set(self.errors)
        for other in others:
            merged.update(other.errors)
        return ValidationResult(errors=frozenset(merged))


class GeoJsonValidationError(ValueError):
    """Raised by the ``of(...)`` factories when the built value is not valid GeoJSON."""

    def __init__(self, message: str, errors: frozenset[ValidationError]):
        super().__init__(message)
        self.errors = errors

    def keys(self) -> set[str]:
        return {error.key for error in self.errors}


class Validatable:
    def validate(self) -> ValidationResult:
        raise NotImplementedError

    def is_valid(self) -> bool:
        return not self.validate().has_errors()

    def has_errors(self) -> bool:
        return self.validate().has_errors()


TValidatable = TypeVar("TValidatable", bound=Validatable)


def validate_and_raise(validatable: TValidatable) -> TValidatable:
    result = validatable.validate()
    if result.has_errors():
        raise GeoJsonValidationError("GeoJson Invalid", result.errors)
    logger.debug("validated %s", type(validatable).__name__)
    return validatable


def invalid_type(type_name, expected: str) -> ValidationError:
    if isinstance(expected, Enum):
        expected = expected.value
    return ValidationError.of(
        "type",
        f"type '{type_name}' is not valid. expected '{expected}'",
        "type.invalid",
    )


def is_type_valid(type_name, expected: str) -> bool:
    return isinstance(type_name, str) and type_name.strip() != "" and type_name == expected
