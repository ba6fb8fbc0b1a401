"""Primitive criteria values: field names, operators, logicals, orders."""

from __future__ import annotations

from enum import Enum

from ..exceptions import InvalidValueError


def ensure_field(name: str) -> str:
    """Return *name* if it is a usable field name, else raise."""
    if not name:
        raise InvalidValueError("invalid field: cannot be empty")
    return name


class Operator(str, Enum):
    """Comparison operators a condition may use."""

    EQ = "="
    NE = "!="
    GT = ">"
    LT = "<"
    GE = ">="
    LE = "<="

    @classmethod
    def parse(cls, value: str | Operator) -> Operator:
        if isinstance(value, cls):
            return value
        if not value:
            raise InvalidValueError("invalid operator: empty operator")
        try:
            return cls(value)
        except ValueError:
            raise InvalidValueError(f"invalid operator: {value}") from None

    @property
    def is_lower_bound(self) -> bool:
        return self in (Operator.GT, Operator.GE)

    @property
    def is_upper_bound(self) -> bool:
        return self in (Operator.LT, Operator.LE)


class Logical(str, Enum):
    """Logic operation applied to a group of conditions or filters."""

    AND = "and"
    OR = "or"

    @classmethod
    def parse(cls, value: str | Logical) -> Logical:
        """Case-insensitive construction; empty values are rejected."""
        if isinstance(value, cls):
            return value
        if not value:
            raise InvalidValueError("invalid Logical operator cannot be empty")
        try:
            return cls(value.lower())
        except ValueError:
            raise InvalidValueError(f"invalid logical operator: {value}") from None


class Order(str, Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, value: str | Order) -> Order:
        if isinstance(value, cls):
            return value
        if not value:
            raise InvalidValueError("invalid order: empty string")
        try:
            return cls(value.lower())
        except ValueError:
            raise InvalidValueError(
                f"invalid order [available:(asc,desc)]: {value}"
            ) from None


class FieldType(str, Enum):
    """Type of a registered field; drives value coercion."""

    UNDEFINED = "undefined"
    STRING = "string"
    NUMBER = "number"
    DATE = "date"
