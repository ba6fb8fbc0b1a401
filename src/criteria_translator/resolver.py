"""CriteriaResolver — check a prepared criteria against an entity schema.

Resolution is the backend-independent half of a translation: every
condition and sort field must be registered, operators and orders are
parsed, and values of date fields are converted to UTC datetimes. The
first failure aborts the resolution.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .exceptions import DateCoercionError
from .models.primitives import FieldType, Logical, Operator, Order

if TYPE_CHECKING:
    from .models.criteria import Condition, Criteria
    from .models.schema import ValidFields
    from .ports import IDateParser


@dataclass(frozen=True)
class ResolvedCondition:
    field: str
    operator: Operator
    value: Any
    is_analyzed: bool = False


@dataclass(frozen=True)
class ResolvedFilter:
    conditions: list[ResolvedCondition]
    logical: Logical


@dataclass(frozen=True)
class ResolvedSort:
    field: str
    order: Order
    is_analyzed: bool = False


@dataclass(frozen=True)
class ResolvedCriteria:
    """A criteria whose fields, operators and values are ready to render."""

    limit: int
    offset: int
    logical: Logical
    filters: list[ResolvedFilter]
    sorts: list[ResolvedSort]


class CriteriaResolver:
    """Resolve prepared criteria against a :class:`ValidFields` schema."""

    def __init__(self, date_parser: IDateParser) -> None:
        self._date_parser = date_parser

    def resolve(self, criteria: Criteria, schema: ValidFields) -> ResolvedCriteria:
        """Resolve *criteria* in place of its date values.

        *criteria* must already be prepared (see ``prepare_criteria``) and
        must be a request-scoped copy: date strings are replaced by the
        parsed datetimes.
        """
        filters = [
            ResolvedFilter(
                conditions=[
                    self._resolve_condition(condition, schema)
                    for condition in filter_.conditions
                ],
                logical=Logical.parse(filter_.logical),
            )
            for filter_ in criteria.query.filters
        ]
        sorts = [
            ResolvedSort(
                field=sort.field,
                order=Order.parse(sort.order),
                is_analyzed=schema.require(sort.field).is_analyzed,
            )
            for sort in criteria.query.sorts
        ]
        return ResolvedCriteria(
            limit=criteria.pagination.limit,
            offset=criteria.pagination.offset,
            logical=Logical.parse(criteria.query.logical),
            filters=filters,
            sorts=sorts,
        )

    def _resolve_condition(
        self, condition: Condition, schema: ValidFields
    ) -> ResolvedCondition:
        metadata = schema.require(condition.field)
        operator = Operator.parse(condition.operator)
        if metadata.type == FieldType.DATE:
            condition.value = self._coerce_date(condition.field, condition.value)
        return ResolvedCondition(
            field=condition.field,
            operator=operator,
            value=condition.value,
            is_analyzed=metadata.is_analyzed,
        )

    def _coerce_date(self, field: str, value: Any) -> Any:
        if not isinstance(value, str):
            raise DateCoercionError(
                f"invalid date field: {field}: expected an ISO-8601 string",
                path=field,
            )
        try:
            return self._date_parser.from_iso8601(value)
        except (DateCoercionError, ValueError) as e:
            raise DateCoercionError(
                f"invalid date field: {field}: {e}", path=field
            ) from e
