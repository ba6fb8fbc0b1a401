"""SchemaRegistry — write-once mapping of entity name to its ValidFields."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .exceptions import EntityNotRegisteredError, SchemaAlreadyRegisteredError

if TYPE_CHECKING:
    from .models.schema import ValidFields

logger = logging.getLogger("criteria_translator.registry")


class SchemaRegistry:
    """Registry for mapping ``entity_name: str`` → :class:`ValidFields`.

    Each entity can be registered exactly once. Register every entity
    during application setup; lookups afterwards are read-only and safe
    to share between concurrent translations.

    Usage::

        registry = SchemaRegistry()
        registry.register(ValidFields(entity_name="orders", fields={...}))
        schema = registry.get("orders")
    """

    def __init__(self) -> None:
        self._schemas: dict[str, ValidFields] = {}

    def register(self, valid_fields: ValidFields) -> None:
        """Register *valid_fields*; a second schema for the same entity fails."""
        name = valid_fields.entity_name
        if name in self._schemas:
            raise SchemaAlreadyRegisteredError(name)
        self._schemas[name] = valid_fields
        logger.debug(
            "Registered schema for %s with %d fields", name, len(valid_fields.fields)
        )

    def get(self, entity_name: str) -> ValidFields:
        """Look up the schema for *entity_name*."""
        schema = self._schemas.get(entity_name)
        if schema is None:
            raise EntityNotRegisteredError(entity_name)
        return schema

    def has(self, entity_name: str) -> bool:
        """Return ``True`` if *entity_name* is registered."""
        return entity_name in self._schemas

    def list_registered(self) -> list[str]:
        """Return all registered entity names."""
        return list(self._schemas.keys())

    def clear(self) -> None:
        """Remove all registrations (testing utility)."""
        self._schemas.clear()
