"""Criteria normalization shared by every backend."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .config import DEFAULT_PAGINATION_LIMIT
from .models.primitives import Logical

if TYPE_CHECKING:
    from .models.criteria import Criteria

logger = logging.getLogger("criteria_translator.normalizer")

DEFAULT_LOGICAL = Logical.AND


def prepare_criteria(
    criteria: Criteria, *, default_limit: int = DEFAULT_PAGINATION_LIMIT
) -> Criteria:
    """Return a copy of *criteria* with every default filled in.

    * a limit of 0 becomes *default_limit*;
    * a query with at most one filter is combined with ``and``, whatever
      logical was declared;
    * a filter with exactly one condition is combined with ``and``;
    * an omitted logical on a larger group defaults to ``and``.

    The caller's criteria is left untouched. Applying this twice gives the
    same result as applying it once.
    """
    prepared = criteria.model_copy(deep=True)

    if prepared.pagination.limit == 0:
        prepared.pagination.limit = default_limit
        logger.debug("Applied default pagination limit %d", default_limit)

    query = prepared.query
    if len(query.filters) <= 1 or not query.logical:
        query.logical = DEFAULT_LOGICAL.value

    for filter_ in query.filters:
        if len(filter_.conditions) == 1 or not filter_.logical:
            filter_.logical = DEFAULT_LOGICAL.value

    return prepared
