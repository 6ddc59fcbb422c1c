"""Query and aggregation package."""

from ledgerlite.queries.aggregations import (
    current_month,
    filter_by_category,
    filter_by_month,
    format_month_label,
    group_and_sum,
    sort_by_date,
)

__all__ = [
    "current_month",
    "filter_by_category",
    "filter_by_month",
    "format_month_label",
    "group_and_sum",
    "sort_by_date",
]
