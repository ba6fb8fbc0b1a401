"""QueryTranslator — criteria to MongoDB and Elasticsearch queries."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .backends.elastic import ElasticQueryBuilder, serialize
from .backends.mongo import MongoQueryBuilder
from .config import TranslatorConfig
from .dates import IsoDateParser
from .normalizer import prepare_criteria
from .registry import SchemaRegistry
from .resolver import CriteriaResolver

if TYPE_CHECKING:
    from .backends.mongo import MongoQuery
    from .models.criteria import Criteria, SuperFilter
    from .models.schema import ValidFields
    from .ports import IDateParser
    from .resolver import ResolvedCriteria

logger = logging.getLogger("criteria_translator.translator")


class QueryTranslator:
    """Translate a database-agnostic criteria into backend queries.

    Every translation normalizes a copy of the criteria, checks its fields
    against the schema registered for the entity and renders the result.
    Super filters are equality constraints that are always ANDed at the
    top of the built query and skip schema validation, e.g. tenant scoping
    that logically ends up as ``client_id = X AND (<client query>)``.

    Usage::

        translator = QueryTranslator()
        translator.register_schema(
            ValidFields(
                entity_name="orders",
                fields={"amount": FieldMetaData(type=FieldType.NUMBER)},
            )
        )
        body = translator.to_elastic(
            "orders", criteria, [SuperFilter(field="client_id", value="c1")]
        )
    """

    def __init__(
        self,
        config: TranslatorConfig | None = None,
        *,
        date_parser: IDateParser | None = None,
        registry: SchemaRegistry | None = None,
    ) -> None:
        self._config = config or TranslatorConfig()
        self._registry = registry or SchemaRegistry()
        self._resolver = CriteriaResolver(date_parser or IsoDateParser())
        self._mongo = MongoQueryBuilder()
        self._elastic = ElasticQueryBuilder(self._config)

    @property
    def config(self) -> TranslatorConfig:
        return self._config

    @property
    def registry(self) -> SchemaRegistry:
        return self._registry

    def register_schema(self, valid_fields: ValidFields) -> None:
        """Register the permitted fields of an entity.

        Only the first registration per entity succeeds; register every
        entity before translating concurrently.
        """
        self._registry.register(valid_fields)

    def prepare_criteria(self, criteria: Criteria) -> Criteria:
        """Return a normalized copy of *criteria* (see ``prepare_criteria``)."""
        return prepare_criteria(criteria, default_limit=self._config.default_limit)

    def to_mongo(
        self,
        entity_name: str,
        criteria: Criteria,
        super_filters: list[SuperFilter] | None = None,
    ) -> MongoQuery:
        resolved = self._resolve(entity_name, criteria)
        query = self._mongo.build(resolved, super_filters)
        logger.debug(
            "Translated criteria for %s to mongo (%d filters)",
            entity_name,
            len(resolved.filters),
        )
        return query

    def to_elastic_body(
        self,
        entity_name: str,
        criteria: Criteria,
        super_filters: list[SuperFilter] | None = None,
    ) -> dict[str, Any]:
        """Return the Elasticsearch search body as a dict."""
        resolved = self._resolve(entity_name, criteria)
        body = self._elastic.build(resolved, super_filters)
        logger.debug(
            "Translated criteria for %s to elasticsearch (%d filters)",
            entity_name,
            len(resolved.filters),
        )
        return body

    def to_elastic(
        self,
        entity_name: str,
        criteria: Criteria,
        super_filters: list[SuperFilter] | None = None,
    ) -> str:
        """Return the Elasticsearch search body serialized as JSON."""
        return serialize(self.to_elastic_body(entity_name, criteria, super_filters))

    def _resolve(self, entity_name: str, criteria: Criteria) -> ResolvedCriteria:
        prepared = self.prepare_criteria(criteria)
        schema = self._registry.get(entity_name)
        return self._resolver.resolve(prepared, schema)
