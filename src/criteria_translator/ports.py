"""Ports — protocols for the date parser and the query translator."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from datetime import datetime

    from .models import Criteria, SuperFilter, ValidFields


@runtime_checkable
class IDateParser(Protocol):
    """Convert an ISO-8601 string into a UTC instant."""

    def from_iso8601(self, value: str) -> datetime:
        """Return the UTC datetime; raise DateCoercionError if malformed."""
        ...


@runtime_checkable
class IQueryTranslator(Protocol):
    """Translate criteria into backend-specific queries."""

    def register_schema(self, valid_fields: ValidFields) -> None:
        """Register the permitted fields of an entity, once per entity."""
        ...

    def to_mongo(
        self,
        entity_name: str,
        criteria: Criteria,
        super_filters: list[SuperFilter] | None = None,
    ) -> Any:
        """Return a MongoDB filter/sort document."""
        ...

    def to_elastic(
        self,
        entity_name: str,
        criteria: Criteria,
        super_filters: list[SuperFilter] | None = None,
    ) -> str:
        """Return an Elasticsearch query body serialized as JSON."""
        ...
