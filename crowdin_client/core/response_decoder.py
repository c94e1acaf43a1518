"""Response decoding and status-code-to-exception mapping.

Successful answers must carry exactly ``Content-Type: application/json``; anything else,
a charset parameter included, is a protocol violation.
Error answers are always parsed as JSON: 400 carries an ``errors`` list, every other
status an ``error`` object with ``code`` and ``message``.
"""

from __future__ import annotations

import json
from http import HTTPStatus
from typing import TYPE_CHECKING, Any, Final

from crowdin_client.core.exceptions import (
    CrowdinProtocolError,
    CrowdinRemoteError,
    CrowdinValidationError,
)
from crowdin_client.models.api_models import ApiResult, ErrorResource

if TYPE_CHECKING:
    from crowdin_client.models.api_models import RawResponse

__all__: list[str] = ["ResponseDecoder"]

EXPECTED_CONTENT_TYPE: Final[str] = "application/json"


class ResponseDecoder:
    """Turns a RawResponse into an ApiResult or raises the matching CrowdinApiError."""

    def decode(self, raw: RawResponse) -> ApiResult:
        """Decode the response of a non-DELETE call.

        Args:
            raw (RawResponse): The complete response.
        Returns:
            ApiResult: Status, headers and parsed JSON body.
        Raises:
            CrowdinValidationError: On 400 Bad Request.
            CrowdinRemoteError: On any other non-2xx status.
            CrowdinProtocolError: If a success answer is not JSON.
        """
        self.ensure_success(raw)

        if raw.content_type != EXPECTED_CONTENT_TYPE:
            msg: str = f"Response Content-Type is not {EXPECTED_CONTENT_TYPE}: '{raw.content_type}'"
            raise CrowdinProtocolError(msg, status=raw.status)

        return ApiResult(status_code=raw.status, headers=raw.headers, json_body=self._parse_json(raw))

    def ensure_success(self, raw: RawResponse) -> int:
        """Raise for non-2xx answers; return the status code otherwise.

        The body of a successful answer is not inspected, which is what DELETE calls rely on.
        """
        if raw.is_success:
            return raw.status

        document: Any = self._parse_json(raw)
        if not isinstance(document, dict):
            msg: str = "Error response body is not a JSON object"
            raise CrowdinProtocolError(msg, status=raw.status)

        if raw.status == HTTPStatus.BAD_REQUEST:
            raise CrowdinValidationError(self._parse_error_resources(document, raw.status))

        error: Any = document.get("error")
        if not isinstance(error, dict) or "code" not in error:
            msg = "Error response body has no 'error' object"
            raise CrowdinProtocolError(msg, status=raw.status)
        raise CrowdinRemoteError(self._as_int(error["code"], raw.status), error.get("message"), status=raw.status)

    @staticmethod
    def _parse_json(raw: RawResponse) -> Any:
        try:
            return json.loads(raw.body.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as err:
            msg: str = f"Response body is not valid JSON: {err}"
            raise CrowdinProtocolError(msg, status=raw.status) from err

    @staticmethod
    def _as_int(value: Any, status: int) -> int:
        try:
            return int(value)
        except (TypeError, ValueError) as err:
            msg: str = f"Error code is not an integer: {value!r}"
            raise CrowdinProtocolError(msg, status=status) from err

    @staticmethod
    def _parse_error_resources(document: dict[str, Any], status: int) -> list[ErrorResource]:
        """Read the ``errors`` list of a 400 answer.

        Entries are either flat ``{"code", "message", "key"}`` objects or Crowdin's
        nested ``{"error": {"key": ..., "errors": [{"code", "message"}]}}`` form;
        nested entries are flattened, keeping the field key on each resource.
        """
        entries: Any = document.get("errors")
        if not isinstance(entries, list):
            msg: str = "Validation error response has no 'errors' list"
            raise CrowdinProtocolError(msg, status=status)

        resources: list[ErrorResource] = []
        for entry in entries:
            if not isinstance(entry, dict):
                msg = f"Unexpected validation error entry: {entry!r}"
                raise CrowdinProtocolError(msg, status=status)
            nested: Any = entry.get("error")
            if isinstance(nested, dict) and isinstance(nested.get("errors"), list):
                key: str | None = nested.get("key")
                resources.extend(
                    ErrorResource(code=item.get("code", ""), message=item.get("message", ""), key=key)
                    for item in nested["errors"]
                    if isinstance(item, dict)
                )
                continue
            resources.append(
                ErrorResource(code=entry.get("code", ""), message=entry.get("message", ""), key=entry.get("key"))
            )
        return resources
