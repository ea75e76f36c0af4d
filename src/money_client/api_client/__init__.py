"""
Money tracker API Client.

Provides:
- One request dispatcher with bearer auth and 401 session teardown
- Costs, cost categories and cost shortcuts
- Incomes and currency exchanges
- Cursor-paginated transaction listing
- Notifications, equity and basic analytics
- Identity auth and user configuration

Failures are raised immediately; nothing is retried.
"""

from .client import (
    MoneyAPIError,
    MoneyClient,
    MoneyConnectionError,
    MoneyDecodeError,
    MoneyError,
)

__all__ = [
    "MoneyClient",
    "MoneyError",
    "MoneyAPIError",
    "MoneyConnectionError",
    "MoneyDecodeError",
]
