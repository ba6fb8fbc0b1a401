"""Shared fixtures for criteria translator tests."""

from __future__ import annotations

import pytest

from criteria_translator import (
    FieldMetaData,
    FieldType,
    QueryTranslator,
    ValidFields,
)


@pytest.fixture
def orders_schema() -> ValidFields:
    return ValidFields(
        entity_name="orders",
        fields={
            "amount": FieldMetaData(type=FieldType.NUMBER),
            "created_at": FieldMetaData(type=FieldType.DATE),
            "status": FieldMetaData(type=FieldType.STRING),
            "description": FieldMetaData(type=FieldType.STRING, is_analyzed=True),
        },
    )


@pytest.fixture
def users_schema() -> ValidFields:
    return ValidFields(
        entity_name="users",
        fields={
            "email": FieldMetaData(type=FieldType.STRING),
            "age": FieldMetaData(type=FieldType.NUMBER),
        },
    )


@pytest.fixture
def translator(
    orders_schema: ValidFields, users_schema: ValidFields
) -> QueryTranslator:
    """Translator with the ``orders`` and ``users`` schemas registered."""
    t = QueryTranslator()
    t.register_schema(orders_schema)
    t.register_schema(users_schema)
    return t
