"""
Response envelopes.

Every endpoint wraps its payload in one of three shapes:
- single:    {"result": T}
- multi:     {"result": [T, ...]}
- paginated: {"result": [T, ...], "left": int, "context": int}
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Response:
    """Single-result envelope."""

    result: Any

    @classmethod
    def from_api_response(cls, data: dict) -> "Response":
        return cls(result=data.get("result"))


@dataclass
class ResponseMulti:
    """Multi-result envelope."""

    result: list[Any] = field(default_factory=list)

    @classmethod
    def from_api_response(cls, data: dict) -> "ResponseMulti":
        return cls(result=list(data.get("result") or []))


@dataclass
class PaginatedResponse:
    """
    Paginated envelope.

    `left` is the number of items the server still holds back, exactly as
    the server reported it. `context` is the offset to send with the next
    request.
    """

    result: list[Any] = field(default_factory=list)
    left: int = 0
    context: int = 0

    @classmethod
    def from_api_response(cls, data: dict, offset: int) -> "PaginatedResponse":
        """
        Build the page for a request made at `offset`.

        The server's own `context` is not used: the next offset is the one
        this page was requested at plus the items it carried.
        """
        result = list(data.get("result") or [])
        return cls(
            result=result,
            left=data.get("left", 0),
            context=offset + len(result),
        )
