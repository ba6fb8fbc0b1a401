"""MongoDB query builder from resolved criteria."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pymongo import ASCENDING, DESCENDING

from ..exceptions import MongoQueryError
from ..models.primitives import Operator, Order

if TYPE_CHECKING:
    from ..models.criteria import SuperFilter
    from ..resolver import ResolvedCondition, ResolvedCriteria

_MONGO_OP_MAP: dict[Operator, str] = {
    Operator.EQ: "$eq",
    Operator.NE: "$ne",
    Operator.GT: "$gt",
    Operator.LT: "$lt",
    Operator.GE: "$gte",
    Operator.LE: "$lte",
}


class MongoQuery(dict[str, Any]):
    """Built MongoDB query: ``limit``, ``offset``, ``filters`` and ``sorts``."""

    def get_filters(self) -> dict[str, Any]:
        filters = self.get("filters")
        if not isinstance(filters, dict):
            raise MongoQueryError("invalid mongo filters")
        return filters

    def get_sorts(self) -> dict[str, int]:
        sorts = self.get("sorts")
        if not isinstance(sorts, dict):
            raise MongoQueryError("invalid mongo sorts")
        return sorts

    def find_arguments(self) -> dict[str, Any]:
        """Keyword arguments for ``Collection.find()``."""
        arguments: dict[str, Any] = {
            "filter": self.get_filters(),
            "skip": self.get("offset", 0),
            "limit": self.get("limit", 0),
        }
        sorts = self.get_sorts()
        if sorts:
            arguments["sort"] = list(sorts.items())
        return arguments


def _compile_condition(condition: ResolvedCondition) -> dict[str, Any]:
    return {condition.field: {_MONGO_OP_MAP[condition.operator]: condition.value}}


class MongoQueryBuilder:
    """Compiles resolved criteria into a :class:`MongoQuery`.

    Super filters become plain equality documents ANDed with the query at
    the top level, whatever logical combines the client filters.
    """

    def build(
        self,
        criteria: ResolvedCriteria,
        super_filters: list[SuperFilter] | None = None,
    ) -> MongoQuery:
        top_level: list[dict[str, Any]] = [
            {sf.field: sf.value} for sf in super_filters or []
        ]

        filters: list[dict[str, Any]] = []
        for filter_ in criteria.filters:
            if not filter_.conditions:
                continue
            filters.append(
                {
                    f"${filter_.logical.value}": [
                        _compile_condition(c) for c in filter_.conditions
                    ]
                }
            )
        if filters:
            top_level.append({f"${criteria.logical.value}": filters})

        return MongoQuery(
            limit=criteria.limit,
            offset=criteria.offset,
            filters={"$and": top_level},
            sorts=self.build_sort(criteria),
        )

    def build_sort(self, criteria: ResolvedCriteria) -> dict[str, int]:
        """Build ``{field: 1 | -1}`` in the order the sorts were given."""
        return {
            sort.field: DESCENDING if sort.order == Order.DESC else ASCENDING
            for sort in criteria.sorts
        }
