"""Elasticsearch bool query builder from resolved criteria.

Within a filter, ``=`` and ``!=`` conditions become ``term`` clauses right
away. Lower bounds (``>``, ``>=``) and upper bounds (``<``, ``<=``) are
staged per field first; a field with both becomes a single ``range``
clause carrying both bounds, and the rest become one-sided ranges. This
happens before the filter's own logical is applied.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from ..config import TranslatorConfig
from ..exceptions import ElasticQueryError
from ..models.primitives import Logical, Operator

if TYPE_CHECKING:
    from ..models.criteria import SuperFilter
    from ..resolver import ResolvedCondition, ResolvedCriteria, ResolvedFilter

logger = logging.getLogger("criteria_translator.backends.elastic")

_BOOL_KEY: dict[Logical, str] = {
    Logical.AND: "must",
    Logical.OR: "should",
}

_RANGE_KEY: dict[Operator, str] = {
    Operator.GT: "gt",
    Operator.GE: "gte",
    Operator.LT: "lt",
    Operator.LE: "lte",
}


def _json_serializer(obj: Any) -> Any:
    """Serialize datetime and other non-JSON types."""
    if hasattr(obj, "isoformat"):
        return obj.isoformat()
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def term(field: str, value: Any) -> dict[str, Any]:
    return {"term": {field: value}}


def not_term(field: str, value: Any) -> dict[str, Any]:
    return {"bool": {"must_not": [term(field, value)]}}


def range_clause(field: str, *bounds: ResolvedCondition) -> dict[str, Any]:
    """One ``range`` clause on *field* with a key per staged bound."""
    return {
        "range": {field: {_RANGE_KEY[bound.operator]: bound.value for bound in bounds}}
    }


def serialize(body: dict[str, Any]) -> str:
    try:
        return json.dumps(body, default=_json_serializer)
    except (TypeError, ValueError) as e:
        raise ElasticQueryError(str(e)) from e


class ElasticQueryBuilder:
    """Compiles resolved criteria into an Elasticsearch search body."""

    def __init__(self, config: TranslatorConfig | None = None) -> None:
        self._config = config or TranslatorConfig()

    def field_name(self, field: str, is_analyzed: bool) -> str:
        """Analyzed fields are filtered and sorted on their raw sub-field."""
        if is_analyzed:
            return field + self._config.analyzed_suffix
        return field

    def build(
        self,
        criteria: ResolvedCriteria,
        super_filters: list[SuperFilter] | None = None,
    ) -> dict[str, Any]:
        combined: list[dict[str, Any]] = []
        for filter_ in criteria.filters:
            clauses = self.build_filter_clauses(filter_)
            if clauses:
                combined.append({"bool": {_BOOL_KEY[filter_.logical]: clauses}})

        return {
            "query": self.build_query(combined, criteria.logical, super_filters),
            "sort": self.build_sort(criteria),
            "size": criteria.limit,
            "from": criteria.offset,
        }

    def build_filter_clauses(self, filter_: ResolvedFilter) -> list[dict[str, Any]]:
        clauses: list[dict[str, Any]] = []
        lower: dict[str, ResolvedCondition] = {}
        upper: dict[str, ResolvedCondition] = {}

        for condition in filter_.conditions:
            field = self.field_name(condition.field, condition.is_analyzed)
            if condition.operator == Operator.EQ:
                clauses.append(term(field, condition.value))
            elif condition.operator == Operator.NE:
                clauses.append(not_term(field, condition.value))
            elif condition.operator.is_lower_bound:
                self._stage(lower, field, condition)
            elif condition.operator.is_upper_bound:
                self._stage(upper, field, condition)

        for field in [f for f in lower if f in upper]:
            clauses.append(range_clause(field, lower.pop(field), upper.pop(field)))
        for field, bound in lower.items():
            clauses.append(range_clause(field, bound))
        for field, bound in upper.items():
            clauses.append(range_clause(field, bound))
        return clauses

    def _stage(
        self,
        staged: dict[str, ResolvedCondition],
        field: str,
        condition: ResolvedCondition,
    ) -> None:
        previous = staged.get(field)
        if previous is not None:
            logger.warning(
                "Bound %s %r on %s replaced by %s %r",
                previous.operator.value,
                previous.value,
                field,
                condition.operator.value,
                condition.value,
            )
        staged[field] = condition

    def build_query(
        self,
        combined: list[dict[str, Any]],
        logical: Logical,
        super_filters: list[SuperFilter] | None = None,
    ) -> dict[str, Any]:
        """Wrap the filter clauses with the query logical and super filters.

        Super filters always sit in the outermost ``must``; the query's own
        logical only applies to the client filters nested next to them.
        """
        must: list[dict[str, Any]] = [
            term(sf.field, sf.value) for sf in super_filters or []
        ]
        if combined:
            must.append({"bool": {_BOOL_KEY[logical]: combined}})
        return {"bool": {"must": must}}

    def build_sort(self, criteria: ResolvedCriteria) -> list[dict[str, Any]]:
        sorts: list[dict[str, Any]] = [
            {self.field_name(s.field, s.is_analyzed): {"order": s.order.value}}
            for s in criteria.sorts
        ]
        # Tie-break for stable pagination; not checked against the schema
        sorts.append({self._config.tracking_field: {"order": "asc"}})
        return sorts
