"""Criteria model — pagination, filters, conditions, sorts, super filters.

Validation follows two policies:

* errors coming from a homogeneous sequence (conditions, filters, sorts) are
  collected per index into a single :class:`ValidationErrors`;
* a missing or invalid logical operator where one is required stops
  validation of that group immediately.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field, field_validator

from ..exceptions import (
    InvalidValueError,
    MissingLogicalError,
    ValidationError,
    ValidationErrors,
)
from .primitives import Logical, Operator, Order, ensure_field

MAXIMUM_LIMIT = 1000
MAXIMUM_LIMIT_OFFSET_SIZE = 10000


def _lowercase(value: Any) -> Any:
    if isinstance(value, str):
        return value.lower()
    return value


def _collect(items: list[Any], label: str) -> list[ValidationError]:
    errors: list[ValidationError] = []
    for index, item in enumerate(items):
        try:
            item.ensure_valid()
        except ValidationError as exc:
            errors.append(
                ValidationError(f"{label}[{index}]: {exc}", path=f"{label}[{index}]")
            )
    return errors


class Condition(BaseModel):
    """A single field/operator/value comparison."""

    # Name of the field the condition is evaluated against.
    field: str = ""
    # One of =, !=, >, <, >=, <=.
    operator: str = ""
    # Value compared against the field. Date fields take ISO-8601 strings.
    value: Any = None

    def ensure_valid(self) -> None:
        errors: list[ValidationError] = []
        try:
            ensure_field(self.field)
        except InvalidValueError as exc:
            errors.append(exc)
        try:
            Operator.parse(self.operator)
        except InvalidValueError as exc:
            errors.append(exc)

        if self.value is None:
            errors.append(InvalidValueError("invalid value: cannot be nil"))
        elif type(self.value) is object:
            errors.append(
                InvalidValueError("invalid value: cannot be an empty struct")
            )
        elif isinstance(self.value, Mapping) and not self.value:
            errors.append(InvalidValueError("invalid value: cannot be empty map"))

        if errors:
            raise ValidationErrors(errors)


class Filter(BaseModel):
    """A group of conditions combined by one logical operator."""

    conditions: list[Condition] = Field(default_factory=list)
    # Required when there is more than one condition.
    logical: str = ""

    @field_validator("logical", mode="before")
    @classmethod
    def lowercase_logical(cls, value: Any) -> Any:
        return _lowercase(value)

    def ensure_valid(self) -> None:
        errors: list[ValidationError] = []

        if self.logical:
            try:
                Logical.parse(self.logical)
            except InvalidValueError as exc:
                errors.append(exc)

        if len(self.conditions) > 1:
            if not self.logical:
                raise MissingLogicalError(
                    "filter.Logical: Logical operator is required for more than "
                    "1 condition",
                    path="filter.logical",
                )
            Logical.parse(self.logical)

        if not self.conditions:
            errors.append(
                InvalidValueError(
                    "empty Conditions: at least one condition must be specified"
                )
            )
        else:
            condition_errors = _collect(self.conditions, "condition")
            if condition_errors:
                errors.append(ValidationErrors(condition_errors))

        if errors:
            raise ValidationErrors(errors)


class Sort(BaseModel):
    """Sort directive on one field."""

    field: str = ""
    order: str = Order.ASC.value

    @field_validator("order", mode="before")
    @classmethod
    def lowercase_order(cls, value: Any) -> Any:
        return _lowercase(value)

    def ensure_valid(self) -> None:
        if not self.field:
            raise InvalidValueError("invalid field: empty")
        Order.parse(self.order)


class Pagination(BaseModel):
    """Limit/offset window. A limit of 0 means "use the default limit"."""

    limit: int = Field(default=0, ge=0)
    offset: int = Field(default=0, ge=0)

    def ensure_valid(self) -> None:
        # The maximum number of items that can be retrieved in one page
        if self.limit > MAXIMUM_LIMIT:
            raise InvalidValueError(
                f"limit must be less than {MAXIMUM_LIMIT}", path="pagination.limit"
            )
        # Deep pagination is bounded by the backends' result window
        if self.limit + self.offset > MAXIMUM_LIMIT_OFFSET_SIZE:
            raise InvalidValueError(
                f"limit({self.limit}) + offset({self.offset}) must be less or "
                f"equals {MAXIMUM_LIMIT_OFFSET_SIZE}",
                path="pagination",
            )


class Query(BaseModel):
    """Filters and sorts to apply to the search."""

    # An empty list matches everything.
    filters: list[Filter] = Field(default_factory=list)
    # An empty list keeps the backend's default ordering.
    sorts: list[Sort] = Field(default_factory=list)
    # Required when there is more than one filter.
    logical: str = ""

    @field_validator("logical", mode="before")
    @classmethod
    def lowercase_logical(cls, value: Any) -> Any:
        return _lowercase(value)

    def ensure_valid(self) -> None:
        filter_errors = _collect(self.filters, "filter")
        if filter_errors:
            raise ValidationErrors(filter_errors)
        sort_errors = _collect(self.sorts, "sorts")
        if sort_errors:
            raise ValidationErrors(sort_errors)

        # A declared logical is validated even for a single filter, where it
        # is later replaced by the default.
        if self.logical:
            try:
                Logical.parse(self.logical)
            except InvalidValueError as exc:
                raise InvalidValueError(
                    f"criteria.Query.Logical: {exc}", path="query.logical"
                ) from exc

        if len(self.filters) > 1 and not self.logical:
            raise MissingLogicalError(
                "criteria.Query.Logical: Logical operator is required for more "
                "than 1 filter",
                path="query.logical",
            )


class Criteria(BaseModel):
    """Top-level search request: pagination plus query."""

    pagination: Pagination = Field(default_factory=Pagination)
    query: Query = Field(default_factory=Query)

    @classmethod
    def from_json(cls, raw: str | bytes) -> Criteria:
        """Build criteria from a JSON request payload."""
        return cls.model_validate_json(raw)

    def ensure_valid(self) -> None:
        self.pagination.ensure_valid()
        self.query.ensure_valid()


class SuperFilter(BaseModel):
    """Trusted equality constraint applied at the top of every built query.

    Super filters skip schema validation; they carry server-side scoping
    such as tenant or client identifiers, never client input.
    """

    field: str
    value: Any
