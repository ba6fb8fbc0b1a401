"""Tests for the MongoDB query builder."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest
from pymongo import ASCENDING, DESCENDING

from criteria_translator import (
    Condition,
    Criteria,
    Filter,
    MongoQuery,
    Pagination,
    Query,
    QueryTranslator,
    Sort,
    SuperFilter,
)
from criteria_translator.exceptions import MongoQueryError


def test_range_conditions_are_not_merged(translator: QueryTranslator) -> None:
    criteria = Criteria(
        query=Query(
            filters=[
                Filter(
                    conditions=[
                        Condition(field="amount", operator=">=", value=100),
                        Condition(field="amount", operator="<", value=500),
                    ]
                )
            ]
        )
    )
    query = translator.to_mongo("orders", criteria, [])
    assert query == {
        "limit": 50,
        "offset": 0,
        "filters": {
            "$and": [
                {
                    "$and": [
                        {
                            "$and": [
                                {"amount": {"$gte": 100}},
                                {"amount": {"$lt": 500}},
                            ]
                        }
                    ]
                }
            ]
        },
        "sorts": {},
    }


@pytest.mark.parametrize(
    ("operator", "mongo_operator"),
    [
        ("=", "$eq"),
        ("!=", "$ne"),
        (">", "$gt"),
        ("<", "$lt"),
        (">=", "$gte"),
        ("<=", "$lte"),
    ],
)
def test_operator_mapping(
    translator: QueryTranslator, operator: str, mongo_operator: str
) -> None:
    criteria = Criteria(
        query=Query(
            filters=[
                Filter(conditions=[Condition(field="age", operator=operator, value=3)])
            ]
        )
    )
    filters = translator.to_mongo("users", criteria).get_filters()
    assert filters["$and"] == [{"$and": [{"$and": [{"age": {mongo_operator: 3}}]}]}]


def test_super_filters_stay_mandatory_under_or(translator: QueryTranslator) -> None:
    criteria = Criteria(
        query=Query(
            filters=[
                Filter(conditions=[Condition(field="status", operator="=", value="a")]),
                Filter(
                    conditions=[
                        Condition(field="amount", operator=">", value=1),
                        Condition(field="amount", operator="<", value=9),
                    ],
                    logical="or",
                ),
            ],
            logical="or",
        )
    )
    super_filters = [
        SuperFilter(field="client_id", value="c1"),
        SuperFilter(field="deleted", value=False),
    ]
    filters = translator.to_mongo("orders", criteria, super_filters).get_filters()
    assert filters == {
        "$and": [
            {"client_id": "c1"},
            {"deleted": False},
            {
                "$or": [
                    {"$and": [{"status": {"$eq": "a"}}]},
                    {"$or": [{"amount": {"$gt": 1}}, {"amount": {"$lt": 9}}]},
                ]
            },
        ]
    }


def test_only_super_filters_when_no_filters(translator: QueryTranslator) -> None:
    query = translator.to_mongo(
        "orders", Criteria(), [SuperFilter(field="client_id", value="c1")]
    )
    assert query.get_filters() == {"$and": [{"client_id": "c1"}]}


def test_empty_filter_produces_no_clause(translator: QueryTranslator) -> None:
    criteria = Criteria(query=Query(filters=[Filter(conditions=[])]))
    query = translator.to_mongo(
        "orders", criteria, [SuperFilter(field="client_id", value="c1")]
    )
    assert query.get_filters() == {"$and": [{"client_id": "c1"}]}


def test_empty_filter_is_skipped_beside_others(translator: QueryTranslator) -> None:
    criteria = Criteria(
        query=Query(
            filters=[
                Filter(conditions=[]),
                Filter(conditions=[Condition(field="status", operator="=", value="a")]),
            ],
            logical="or",
        )
    )
    filters = translator.to_mongo("orders", criteria).get_filters()
    assert filters == {"$and": [{"$or": [{"$and": [{"status": {"$eq": "a"}}]}]}]}


def test_sorts_keep_bare_field_names(translator: QueryTranslator) -> None:
    criteria = Criteria(
        query=Query(
            sorts=[
                Sort(field="description", order="desc"),
                Sort(field="amount", order="asc"),
            ]
        )
    )
    sorts = translator.to_mongo("orders", criteria).get_sorts()
    assert sorts == {"description": DESCENDING, "amount": ASCENDING}
    assert list(sorts) == ["description", "amount"]


def test_analyzed_field_keeps_bare_name(translator: QueryTranslator) -> None:
    criteria = Criteria(
        query=Query(
            filters=[
                Filter(
                    conditions=[
                        Condition(field="description", operator="=", value="x")
                    ]
                )
            ]
        )
    )
    filters = translator.to_mongo("orders", criteria).get_filters()
    assert filters["$and"][0]["$and"][0]["$and"] == [{"description": {"$eq": "x"}}]


def test_date_values_become_datetimes(translator: QueryTranslator) -> None:
    criteria = Criteria(
        query=Query(
            filters=[
                Filter(
                    conditions=[
                        Condition(
                            field="created_at",
                            operator=">=",
                            value="2024-01-01T02:00:00+02:00",
                        )
                    ]
                )
            ]
        )
    )
    filters = translator.to_mongo("orders", criteria).get_filters()
    clause = filters["$and"][0]["$and"][0]["$and"][0]
    assert clause == {
        "created_at": {"$gte": datetime(2024, 1, 1, tzinfo=timezone.utc)}
    }


def test_find_arguments(translator: QueryTranslator) -> None:
    criteria = Criteria(
        pagination=Pagination(limit=10, offset=30),
        query=Query(sorts=[Sort(field="amount", order="desc")]),
    )
    arguments = translator.to_mongo("orders", criteria).find_arguments()
    assert arguments == {
        "filter": {"$and": []},
        "skip": 30,
        "limit": 10,
        "sort": [("amount", DESCENDING)],
    }


def test_find_arguments_without_sorts(translator: QueryTranslator) -> None:
    arguments = translator.to_mongo("orders", Criteria()).find_arguments()
    assert "sort" not in arguments


def test_malformed_query_document() -> None:
    with pytest.raises(MongoQueryError, match="invalid mongo filters"):
        MongoQuery(filters=None).get_filters()
    with pytest.raises(MongoQueryError, match="invalid mongo sorts"):
        MongoQuery(sorts=[("a", 1)]).get_sorts()
