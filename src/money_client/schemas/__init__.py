"""
Request and response contracts for the money tracking API.

Entity payloads (costs, incomes, exchanges, ...) stay plain decoded JSON;
only the envelopes around them and the query parameters are typed here.
"""

from .envelopes import PaginatedResponse, Response, ResponseMulti
from .queries import AnalyticsFilters, OperationType, build_path

__all__ = [
    "Response",
    "ResponseMulti",
    "PaginatedResponse",
    "AnalyticsFilters",
    "OperationType",
    "build_path",
]
