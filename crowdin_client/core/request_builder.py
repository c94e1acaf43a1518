"""Request construction for the Crowdin API.

RequestBuilder turns a relative path plus optional query parameters, body and headers
into an ApiRequest. It performs no I/O.
"""

from __future__ import annotations

import dataclasses
import json
from collections.abc import Mapping
from enum import Enum
from typing import TYPE_CHECKING, Any, BinaryIO, Final
from urllib.parse import quote, urlencode

from dataclasses_json import DataClassJsonMixin

from crowdin_client.models.api_models import ApiRequest

if TYPE_CHECKING:
    from collections.abc import Iterable

    from crowdin_client.models.api_models import HTTPMethod
    from crowdin_client.models.patch_models import PatchEntry

__all__: list[str] = [
    "FILENAME_HEADER",
    "JSON_CONTENT_TYPE",
    "JSON_PATCH_CONTENT_TYPE",
    "OCTET_STREAM_CONTENT_TYPE",
    "RequestBuilder",
    "to_json_value",
]

JSON_CONTENT_TYPE: Final[str] = "application/json"
JSON_PATCH_CONTENT_TYPE: Final[str] = "application/json-patch+json"
OCTET_STREAM_CONTENT_TYPE: Final[str] = "application/octet-stream"
FILENAME_HEADER: Final[str] = "Crowdin-API-FileName"


def to_json_value(value: Any) -> Any:
    """Convert a request body into plain JSON data, dropping object members whose value is None.

    Dataclass models are converted through ``dataclasses_json`` so their camelCase
    field names are used. None items inside lists are kept.
    """
    if value is None:
        return None
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, DataClassJsonMixin):
        return to_json_value(value.to_dict(encode_json=True))
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return to_json_value(dataclasses.asdict(value))
    if isinstance(value, Mapping):
        return {str(key): to_json_value(item) for key, item in value.items() if item is not None}
    if isinstance(value, (list, tuple)):
        return [to_json_value(item) for item in value]
    return value


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (list, tuple)):
        return ",".join(_query_value(item) for item in value)
    return str(value)


class RequestBuilder:
    """Builds authenticated requests against one resolved base URL.

    Args:
        base_url (str): Resolved API base URL, e.g. ``https://api.crowdin.com/api/v2``.
        access_token (str): Token sent as ``Authorization: Bearer <token>``.
    """

    def __init__(self, base_url: str, access_token: str) -> None:
        self.base_url: str = base_url
        self._authorization: str = f"Bearer {access_token}"

    def form_url(self, path: str, query_params: Mapping[str, Any] | None = None) -> str:
        """Append the relative path and the encoded query string to the base URL.

        Query parameters whose value is None are left out.
        """
        url: str = f"{self.base_url}{path}"
        if not query_params:
            return url
        pairs: list[tuple[str, str]] = [
            (str(key), _query_value(value)) for key, value in query_params.items() if value is not None
        ]
        if not pairs:
            return url
        return f"{url}?{urlencode(pairs, quote_via=quote)}"

    def _headers(
        self,
        content_type: str | None = None,
        extra_headers: Mapping[str, str] | None = None,
    ) -> dict[str, str]:
        headers: dict[str, str] = {"Authorization": self._authorization}
        if content_type:
            headers["Content-Type"] = content_type
        if extra_headers:
            headers.update(extra_headers)
        return headers

    @staticmethod
    def encode_json(body: Any) -> bytes:
        return json.dumps(to_json_value(body), ensure_ascii=False).encode("utf-8")

    def get(self, path: str, query_params: Mapping[str, Any] | None = None) -> ApiRequest:
        return ApiRequest(method="GET", url=self.form_url(path, query_params), headers=self._headers())

    def post(self, path: str, body: Any, extra_headers: Mapping[str, str] | None = None) -> ApiRequest:
        return self._json_request("POST", path, body, extra_headers)

    def put(self, path: str, body: Any) -> ApiRequest:
        return self._json_request("PUT", path, body)

    def patch(self, path: str, entries: Iterable[PatchEntry]) -> ApiRequest:
        """Build a JSON-Patch request.

        The body is a JSON array holding the entries in the order given.
        """
        payload: list[dict[str, Any]] = [entry.to_dict() for entry in entries]
        return ApiRequest(
            method="PATCH",
            url=self.form_url(path),
            headers=self._headers(JSON_PATCH_CONTENT_TYPE),
            body=json.dumps(payload, ensure_ascii=False).encode("utf-8"),
        )

    def delete(self, path: str) -> ApiRequest:
        return ApiRequest(method="DELETE", url=self.form_url(path), headers=self._headers())

    def upload(self, path: str, filename: str, stream: bytes | BinaryIO) -> ApiRequest:
        """Build a raw file upload.

        Args:
            path (str): Relative path, usually ``/storages``.
            filename (str): Sent in the ``Crowdin-API-FileName`` header, URL-encoded if not ASCII.
            stream (bytes | BinaryIO): File content. Streams are not closed by the client.
        Raises:
            ValueError: If the filename is empty.
        """
        if not filename or not filename.strip():
            msg = "A filename is required for file uploads"
            raise ValueError(msg)
        # Header values must be ASCII; the API accepts URL-encoded names.
        header_name: str = filename if filename.isascii() else quote(filename)
        headers: dict[str, str] = self._headers(OCTET_STREAM_CONTENT_TYPE, {FILENAME_HEADER: header_name})
        return ApiRequest(method="POST", url=self.form_url(path), headers=headers, body=stream)

    def _json_request(
        self,
        method: HTTPMethod,
        path: str,
        body: Any,
        extra_headers: Mapping[str, str] | None = None,
    ) -> ApiRequest:
        return ApiRequest(
            method=method,
            url=self.form_url(path),
            headers=self._headers(JSON_CONTENT_TYPE, extra_headers),
            body=self.encode_json(body),
        )
