"""Criteria and schema models."""

from __future__ import annotations

from .criteria import (
    MAXIMUM_LIMIT,
    MAXIMUM_LIMIT_OFFSET_SIZE,
    Condition,
    Criteria,
    Filter,
    Pagination,
    Query,
    Sort,
    SuperFilter,
)
from .primitives import FieldType, Logical, Operator, Order, ensure_field
from .schema import FieldMetaData, ValidFields

__all__ = [
    "MAXIMUM_LIMIT",
    "MAXIMUM_LIMIT_OFFSET_SIZE",
    "Condition",
    "Criteria",
    "FieldMetaData",
    "FieldType",
    "Filter",
    "Logical",
    "Operator",
    "Order",
    "Pagination",
    "Query",
    "Sort",
    "SuperFilter",
    "ValidFields",
    "ensure_field",
]
