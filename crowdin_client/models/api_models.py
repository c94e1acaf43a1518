"""Transport-level data models shared by the request pipeline and the resource executors.

ApiRequest is what the request builder produces. RawResponse is what the HTTP
handler hands back after reading a full response.
ApiResult is the decoded outcome of a successful non-DELETE call.
ErrorResource, Pagination and ResponseList mirror Crowdin's envelope formats.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, BinaryIO, Generic, Literal, TypeAlias, TypeVar

from dataclasses_json import DataClassJsonMixin, dataclass_json
from multidict import CIMultiDict, CIMultiDictProxy

if TYPE_CHECKING:
    from collections.abc import Callable

__all__: list[str] = [
    "ApiRequest",
    "ApiResult",
    "ErrorResource",
    "HTTPMethod",
    "Pagination",
    "RawResponse",
    "ResponseList",
]

T = TypeVar("T")

HTTPMethod: TypeAlias = Literal["GET", "POST", "PUT", "PATCH", "DELETE"]


def _empty_headers() -> CIMultiDictProxy[str]:
    return CIMultiDictProxy(CIMultiDict())


@dataclass(frozen=True)
class ApiRequest:
    """A fully built HTTP request, ready for the transport.

    Attributes:
        method (HTTPMethod): HTTP verb.
        url (str): Absolute URL including the query string.
        headers (dict[str, str]): Request headers, authorization included.
        body (bytes | BinaryIO | None): Encoded body, a binary stream for uploads, or None.
    """

    method: HTTPMethod
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes | BinaryIO | None = None


@dataclass(frozen=True)
class RawResponse:
    """Undecoded HTTP response.

    Attributes:
        status (int): HTTP status code.
        headers (CIMultiDictProxy[str]): Response headers, case-insensitive and multi-valued.
        content_type (str): The Content-Type header exactly as received, parameters included.
        body (bytes): The complete response body.
    """

    status: int
    headers: CIMultiDictProxy[str] = field(default_factory=_empty_headers)
    content_type: str = ""
    body: bytes = b""

    @property
    def is_success(self) -> bool:
        return 200 <= self.status < 300  # noqa: PLR2004


@dataclass(frozen=True)
class ApiResult:
    """Decoded outcome of a successful call.

    Attributes:
        status_code (int): HTTP status code in the 2xx range.
        headers (CIMultiDictProxy[str]): Response headers.
        json_body (Any): Parsed JSON document.
    """

    status_code: int
    headers: CIMultiDictProxy[str]
    json_body: Any


@dataclass_json
@dataclass
class ErrorResource(DataClassJsonMixin):
    """One validation failure reported by a 400 response.

    Attributes:
        code (int | str): Error code. Crowdin uses both numeric and symbolic codes.
        message (str): Human readable description.
        key (str | None): Name of the offending request field, if reported.
    """

    code: int | str
    message: str = ""
    key: str | None = None


@dataclass_json
@dataclass
class Pagination(DataClassJsonMixin):
    offset: int = 0
    limit: int = 0


@dataclass
class ResponseList(Generic[T]):
    """A page of resources together with the pagination echoed by the server.

    Crowdin wraps every list item in its own ``{"data": {...}}`` envelope.
    """

    data: list[T] = field(default_factory=list)
    pagination: Pagination = field(default_factory=Pagination)

    @classmethod
    def parse(cls, json_body: dict[str, Any], item_parser: Callable[[dict[str, Any]], T]) -> ResponseList[T]:
        """Build a ResponseList from a decoded list envelope.

        Args:
            json_body (dict[str, Any]): The decoded response document.
            item_parser (Callable[[dict[str, Any]], T]): Converts one unwrapped item into a model.
        Returns:
            ResponseList[T]: The typed page.
        """
        items: list[T] = [item_parser(entry["data"]) for entry in json_body["data"]]
        pagination = Pagination.from_dict(json_body.get("pagination") or {}, infer_missing=True)
        return cls(data=items, pagination=pagination)
