"""
Criteria translator exception hierarchy.

All exceptions inherit from ``CriteriaTranslatorError`` and provide
``to_dict()`` for API-friendly error responses.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any


class CriteriaTranslatorError(Exception):
    """Root exception for the criteria translator."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class ValidationError(CriteriaTranslatorError):
    """Criteria structure or content validation failed."""

    def __init__(self, message: str, path: str | None = None) -> None:
        self.message = message
        self.path = path
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "VALIDATION_ERROR",
            "message": self.message,
            "path": self.path,
        }


class InvalidValueError(ValidationError):
    """A primitive value (field, operator, logical, order, bound) is invalid."""


class MissingLogicalError(ValidationError):
    """A logical operator is required to combine more than one sibling."""


class ValidationErrors(ValidationError):
    """
    Several validation errors collected from a homogeneous sequence.

    Each entry is kept individually in ``errors``; the message joins them
    with ``", "``.
    """

    def __init__(self, errors: list[ValidationError]) -> None:
        self.errors = list(errors)
        super().__init__(", ".join(str(e) for e in self.errors))

    def __len__(self) -> int:
        return len(self.errors)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "VALIDATION_ERRORS",
            "message": self.message,
            "errors": [e.to_dict() for e in self.errors],
        }


class SchemaError(ValidationError):
    """Base for errors resolving an entity or field against a schema."""


class EntityNotRegisteredError(SchemaError):
    """No schema has been registered for the requested entity."""

    def __init__(self, entity_name: str) -> None:
        self.entity_name = entity_name
        super().__init__(f"{entity_name}: no valid fields registered")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "ENTITY_NOT_REGISTERED",
            "entity": self.entity_name,
            "message": self.message,
        }


class FieldNotAllowedError(SchemaError):
    """
    Field is not registered for the entity.

    Uses fuzzy matching to suggest similar registered field names.
    """

    def __init__(
        self,
        invalid_field: str,
        entity_name: str,
        available_fields: list[str],
        cutoff: float = 0.6,
    ) -> None:
        self.invalid_field = invalid_field
        self.entity_name = entity_name
        self.available_fields = available_fields
        self.suggestions = get_close_matches(
            invalid_field, available_fields, n=3, cutoff=cutoff
        )

        message = (
            f"invalid field: {invalid_field!r} is not registered for {entity_name!r}"
        )
        if self.suggestions:
            message += f". Did you mean: {', '.join(self.suggestions)}?"
        super().__init__(message, path=invalid_field)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "FIELD_NOT_ALLOWED",
            "field": self.invalid_field,
            "entity": self.entity_name,
            "suggestions": self.suggestions,
            "available_fields": sorted(self.available_fields),
        }


class DateCoercionError(ValidationError):
    """A date-typed field holds a value that cannot be parsed as ISO-8601."""


class SchemaAlreadyRegisteredError(CriteriaTranslatorError):
    """A schema was registered twice for the same entity."""

    def __init__(self, entity_name: str) -> None:
        self.entity_name = entity_name
        super().__init__(f"the valid fields already set for entity {entity_name!r}")


class MongoQueryError(CriteriaTranslatorError):
    """Raised when a built MongoDB query document is malformed."""


class ElasticQueryError(CriteriaTranslatorError):
    """Raised when an Elasticsearch query body cannot be serialized."""
