"""Backend query builders."""

from __future__ import annotations

from .elastic import ElasticQueryBuilder
from .mongo import MongoQuery, MongoQueryBuilder

__all__ = [
    "ElasticQueryBuilder",
    "MongoQuery",
    "MongoQueryBuilder",
]
