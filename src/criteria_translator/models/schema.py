"""ValidFields — per-entity permitted fields with their type metadata."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ..exceptions import FieldNotAllowedError
from .primitives import FieldType


class FieldMetaData(BaseModel):
    """Type and analysis flag of a registered field."""

    model_config = ConfigDict(frozen=True)

    type: FieldType = FieldType.UNDEFINED
    # Analyzed (full-text) fields are matched and sorted on their raw sub-field.
    is_analyzed: bool = False


class ValidFields(BaseModel):
    """Fields an entity may be filtered and sorted on.

    Usage::

        schema = ValidFields(
            entity_name="orders",
            fields={
                "amount": FieldMetaData(type=FieldType.NUMBER),
                "created_at": FieldMetaData(type=FieldType.DATE),
            },
        )
    """

    model_config = ConfigDict(frozen=True)

    entity_name: str
    fields: dict[str, FieldMetaData] = Field(default_factory=dict)

    def has_field(self, name: str) -> bool:
        return name in self.fields

    def get_field_type(self, name: str) -> FieldType:
        """Return the registered type, or ``UNDEFINED`` for unknown fields."""
        metadata = self.fields.get(name)
        if metadata is None:
            return FieldType.UNDEFINED
        return metadata.type

    def is_analyzed(self, name: str) -> bool:
        """Return the analyzed flag, or ``False`` for unknown fields."""
        metadata = self.fields.get(name)
        if metadata is None:
            return False
        return metadata.is_analyzed

    def require(self, name: str) -> FieldMetaData:
        """Return metadata for *name*; raise FieldNotAllowedError if unknown."""
        metadata = self.fields.get(name)
        if metadata is None:
            raise FieldNotAllowedError(name, self.entity_name, list(self.fields))
        return metadata
