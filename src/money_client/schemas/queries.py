"""
Query parameter types and URL building.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any
from urllib.parse import quote, urlencode


class OperationType(str, Enum):
    """Kind of transaction the transactions listing can be narrowed to."""

    COST = "cost"
    INCOME = "income"
    EXCHANGE = "exchange"


@dataclass
class AnalyticsFilters:
    """Filters for GET /analytics/basic.

    The date range only applies when both ends are set.
    """

    start_date: str | None = None
    end_date: str | None = None
    pattern: str | None = None

    def to_params(self) -> list[tuple[str, Any]]:
        """Ordered query particles for the filters that are present."""
        params: list[tuple[str, Any]] = []
        if self.start_date and self.end_date:
            params.append(("startDate", self.start_date))
            params.append(("endDate", self.end_date))
        if self.pattern:
            params.append(("pattern", self.pattern))
        return params


def _query_value(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def build_path(path: str, params: list[tuple[str, Any]] | None = None) -> str:
    """
    Append a query string to `path`.

    Particles whose value is None are dropped; the rest keep their order and
    are joined with `&` behind a single `?`. Without particles the path is
    returned unchanged.
    """
    particles = [(key, _query_value(value)) for key, value in params or [] if value is not None]
    if not particles:
        return path
    return f"{path}?{urlencode(particles, quote_via=quote)}"
