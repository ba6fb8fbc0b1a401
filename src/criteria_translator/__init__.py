"""Database-agnostic search criteria translated to MongoDB and Elasticsearch."""

from __future__ import annotations

from .backends import ElasticQueryBuilder, MongoQuery, MongoQueryBuilder
from .config import TranslatorConfig
from .dates import IsoDateParser
from .exceptions import (
    CriteriaTranslatorError,
    DateCoercionError,
    ElasticQueryError,
    EntityNotRegisteredError,
    FieldNotAllowedError,
    InvalidValueError,
    MissingLogicalError,
    MongoQueryError,
    SchemaAlreadyRegisteredError,
    SchemaError,
    ValidationError,
    ValidationErrors,
)
from .models import (
    Condition,
    Criteria,
    FieldMetaData,
    FieldType,
    Filter,
    Logical,
    Operator,
    Order,
    Pagination,
    Query,
    Sort,
    SuperFilter,
    ValidFields,
)
from .normalizer import prepare_criteria
from .ports import IDateParser, IQueryTranslator
from .registry import SchemaRegistry
from .translator import QueryTranslator

__all__ = [
    "Condition",
    "Criteria",
    "CriteriaTranslatorError",
    "DateCoercionError",
    "ElasticQueryBuilder",
    "ElasticQueryError",
    "EntityNotRegisteredError",
    "FieldMetaData",
    "FieldNotAllowedError",
    "FieldType",
    "Filter",
    "IDateParser",
    "IQueryTranslator",
    "InvalidValueError",
    "IsoDateParser",
    "Logical",
    "MissingLogicalError",
    "MongoQuery",
    "MongoQueryBuilder",
    "MongoQueryError",
    "Operator",
    "Order",
    "Pagination",
    "Query",
    "QueryTranslator",
    "SchemaAlreadyRegisteredError",
    "SchemaError",
    "SchemaRegistry",
    "Sort",
    "SuperFilter",
    "TranslatorConfig",
    "ValidFields",
    "ValidationError",
    "ValidationErrors",
    "prepare_criteria",
]
