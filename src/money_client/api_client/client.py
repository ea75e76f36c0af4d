"""
Money tracker API client implementation.
"""

import logging
from collections.abc import Iterator
from typing import Any

import requests

from ..schemas.envelopes import PaginatedResponse, Response, ResponseMulti
from ..schemas.queries import AnalyticsFilters, OperationType, build_path
from ..session_store import SessionStore

logger = logging.getLogger(__name__)


class MoneyError(Exception):
    """Base exception for money tracker client errors."""

    pass


class MoneyAPIError(MoneyError):
    """API returned a non-2xx response."""

    def __init__(self, status_code: int, response_body: str = ""):
        self.status_code = status_code
        self.response_body = response_body
        super().__init__(f"API error: {status_code} - {response_body}")


class MoneyConnectionError(MoneyError):
    """The request never reached the server or never completed."""

    pass


class MoneyDecodeError(MoneyError):
    """A successful response carried a body that is not valid JSON."""

    pass


class MoneyClient:
    """
    Client for the money tracking API.

    Every operation issues exactly one request through `request()`, which
    owns the cross-cutting policy:
    - bearer auth from the session store, read fresh on every call
    - session cleared and flushed on any 401, before the error is raised
    - non-2xx surfaced as MoneyAPIError with status and raw body
    - 204 decoded as None

    Nothing is retried.
    """

    def __init__(self, base_url: str, session_store: SessionStore):
        """
        Initialize the client.

        Args:
            base_url: Service origin (e.g., "https://money.example.com")
            session_store: Source of the bearer token; cleared on 401
        """
        self.base_url = base_url.rstrip("/")
        self.session_store = session_store

        self.session = requests.Session()
        self.session.headers.update(
            {
                "Accept": "application/json",
                "Content-Type": "application/json",
            }
        )

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "MoneyClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def request(
        self,
        path: str,
        method: str = "GET",
        body: dict[str, Any] | None = None,
    ) -> Any:
        """
        Perform one HTTP exchange and normalize its outcome.

        Args:
            path: Path relative to the base URL, starting with "/"
            method: HTTP method
            body: JSON-serializable mapping; None sends no body at all

        Returns:
            Decoded JSON, or None for 204 No Content

        Raises:
            MoneyAPIError: Non-2xx response. On 401 the session store has
                already been cleared and flushed.
            MoneyConnectionError: Transport failure (connect, timeout,
                truncated or undecodable response stream)
            MoneyDecodeError: 2xx response with malformed JSON
            MoneyError: The request could not be built (bad URL, body)
        """
        url = f"{self.base_url}{path}"

        headers = {}
        token = self.session_store.get_access_token()
        if token:
            headers["Authorization"] = f"Bearer {token}"

        logger.debug(f"API Request: {method} {url}")

        try:
            response = self.session.request(
                method=method,
                url=url,
                headers=headers,
                json=body,
            )
        except requests.exceptions.ConnectionError as e:
            logger.error(f"Connection error to {url}: {e}")
            raise MoneyConnectionError(
                f"Failed to connect to money tracker at {self.base_url}: {e}"
            ) from e
        except requests.exceptions.Timeout as e:
            logger.error(f"Timeout for {url}: {e}")
            raise MoneyConnectionError(f"Request to money tracker timed out: {e}") from e
        except (
            requests.exceptions.ChunkedEncodingError,
            requests.exceptions.ContentDecodingError,
        ) as e:
            logger.error(f"Response from {url} aborted: {e}")
            raise MoneyConnectionError(f"Response from money tracker was cut off: {e}") from e
        except requests.exceptions.RequestException as e:
            logger.error(f"Request error for {url}: {e}")
            raise MoneyError(f"Request failed: {e}") from e

        logger.debug(f"Response status: {response.status_code}")

        if not response.ok:
            error_body = response.text

            if response.status_code == 401:
                logger.warning("Unauthorized response, clearing session")
                self.session_store.clear()
                self.session_store.flush()

            logger.error(f"API Error {response.status_code}: {error_body}")
            raise MoneyAPIError(status_code=response.status_code, response_body=error_body)

        if response.status_code == 204:
            return None

        try:
            return response.json()
        except ValueError as e:
            raise MoneyDecodeError(f"Invalid JSON in response from {url}: {e}") from e

    def _envelope(self, path: str, method: str = "GET", body: dict | None = None) -> dict | None:
        """Dispatch and check the payload is a JSON object (or absent on 204)."""
        data = self.request(path, method, body)
        if data is not None and not isinstance(data, dict):
            raise MoneyDecodeError(
                f"Expected a JSON object from {method} {path}, got {type(data).__name__}"
            )
        return data

    def _single(self, path: str, method: str = "GET", body: dict | None = None) -> Response | None:
        data = self._envelope(path, method, body)
        return Response.from_api_response(data) if data is not None else None

    def _multi(self, path: str) -> ResponseMulti | None:
        data = self._envelope(path)
        return ResponseMulti.from_api_response(data) if data is not None else None

    def _unwrapped(self, path: str) -> list[Any]:
        response = self._multi(path)
        return response.result if response else []

    # Identity

    def user_auth(self, credentials: dict[str, Any]) -> Response | None:
        """Exchange credentials for an identity. The caller stores it."""
        return self._single("/identity/auth", "POST", credentials)

    def configuration_update(self, body: dict[str, Any]) -> Response | None:
        return self._single("/identity/users/configuration", "PATCH", body)

    # Transactions

    def transactions_list(
        self,
        currency_id: int | None = None,
        cost_category_id: int | None = None,
        period: str | None = None,
        start_date: str | None = None,
        end_date: str | None = None,
        operation: OperationType | str | None = None,
        context: int = 0,
        limit: int = 15,
    ) -> PaginatedResponse:
        """
        Fetch one page of transactions.

        Filters are passed through as given; the server resolves conflicts
        (e.g. period together with an explicit date range).

        Args:
            context: Offset to continue from; 0 starts a new sequence
            limit: Page size

        Returns:
            PaginatedResponse whose `context` is `context + len(result)`,
            ready to be passed back for the next page. `left` comes from
            the server unchanged.
        """
        path = build_path(
            "/transactions",
            [
                ("context", context),
                ("limit", limit),
                ("currencyId", currency_id),
                ("costCategoryId", cost_category_id),
                ("period", period),
                ("startDate", start_date),
                ("endDate", end_date),
                ("operation", operation),
            ],
        )

        return PaginatedResponse.from_api_response(self._envelope(path) or {}, context)

    def iter_transactions(self, limit: int = 15, **filters: Any) -> Iterator[Any]:
        """
        Yield every transaction matching `filters`, page by page.

        Starts from context 0 and stops once the server reports nothing
        left or returns an empty page.
        """
        context = 0
        while True:
            page = self.transactions_list(context=context, limit=limit, **filters)
            yield from page.result

            if not page.result or not page.left or page.left <= 0:
                break
            context = page.context

    # Costs

    def cost_categories_list(self) -> ResponseMulti | None:
        return self._multi("/costs/categories")

    def cost_create(self, body: dict[str, Any]) -> Response | None:
        return self._single("/costs", "POST", body)

    def cost_retrieve(self, cost_id: int) -> Response | None:
        return self._single(f"/costs/{cost_id}")

    def cost_update(self, cost_id: int, body: dict[str, Any]) -> Response | None:
        return self._single(f"/costs/{cost_id}", "PATCH", body)

    def cost_delete(self, cost_id: int) -> None:
        self.request(f"/costs/{cost_id}", "DELETE")

    # Cost shortcuts

    def cost_shortcut_create(self, body: dict[str, Any]) -> Response | None:
        return self._single("/costs/shortcuts", "POST", body)

    def cost_shortcuts_list(self) -> ResponseMulti | None:
        return self._multi("/costs/shortcuts")

    def cost_shortcut_delete(self, shortcut_id: int) -> None:
        self.request(f"/costs/shortcuts/{shortcut_id}", "DELETE")

    def cost_shortcut_apply(
        self, shortcut_id: int, body: dict[str, Any] | None = None
    ) -> Response | None:
        """Create a cost from a shortcut. Without `body` no request body is sent."""
        return self._single(f"/costs/shortcuts/{shortcut_id}", "POST", body)

    # Incomes

    def income_create(self, body: dict[str, Any]) -> Response | None:
        return self._single("/incomes", "POST", body)

    def income_retrieve(self, income_id: int) -> Response | None:
        return self._single(f"/incomes/{income_id}")

    def income_update(self, income_id: int, body: dict[str, Any]) -> Response | None:
        return self._single(f"/incomes/{income_id}", "PATCH", body)

    def income_delete(self, income_id: int) -> None:
        self.request(f"/incomes/{income_id}", "DELETE")

    # Currency exchange

    def exchange_create(self, body: dict[str, Any]) -> Response | None:
        return self._single("/exchange", "POST", body)

    def exchange_retrieve(self, exchange_id: int) -> Response | None:
        return self._single(f"/exchange/{exchange_id}")

    def exchange_delete(self, exchange_id: int) -> None:
        self.request(f"/exchange/{exchange_id}", "DELETE")

    # Notifications

    def notifications_list(self) -> list[Any]:
        return self._unwrapped("/notifications")

    # Analytics

    def equity_list(self) -> ResponseMulti | None:
        return self._multi("/analytics/equity")

    def basic_analytics_by_period(self, period: str) -> list[Any]:
        return self._unwrapped(build_path("/analytics/basic", [("period", period)]))

    def basic_analytics_filtered(self, filters: AnalyticsFilters) -> list[Any]:
        """Basic analytics narrowed by date range and/or description pattern."""
        return self._unwrapped(build_path("/analytics/basic", filters.to_params()))
