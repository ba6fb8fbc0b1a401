"""Translator configuration."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_PAGINATION_LIMIT = 50
DEFAULT_TRACKING_FIELD = "bayonet_tracking_id"
DEFAULT_ANALYZED_SUFFIX = ".raw"


@dataclass(frozen=True)
class TranslatorConfig:
    """Translator configuration.

    Attributes:
        default_limit: Page size applied when the criteria limit is 0.
        tracking_field: Field appended as the last ascending Elasticsearch
            sort so paginated results have a stable order. It is not
            checked against the entity schema.
        analyzed_suffix: Suffix of the unanalyzed sub-field used to filter
            and sort analyzed Elasticsearch fields.
    """

    default_limit: int = DEFAULT_PAGINATION_LIMIT
    tracking_field: str = DEFAULT_TRACKING_FIELD
    analyzed_suffix: str = DEFAULT_ANALYZED_SUFFIX
