from __future__ import annotations

import json
from typing import Any

import pytest
from multidict import CIMultiDict, CIMultiDictProxy

from crowdin_client.core.exceptions import (
    UNKNOWN_ERROR_MESSAGE,
    CrowdinApiError,
    CrowdinProtocolError,
    CrowdinRemoteError,
    CrowdinValidationError,
)
from crowdin_client.core.response_decoder import ResponseDecoder
from crowdin_client.models.api_models import RawResponse


def _raw(
    status: int, body: Any = None, content_type: str = "application/json", text: bytes | None = None
) -> RawResponse:
    payload: bytes = text if text is not None else json.dumps(body).encode("utf-8")
    headers = CIMultiDictProxy(CIMultiDict({"Content-Type": content_type, "X-Request-Id": "r-1"}))
    return RawResponse(status=status, headers=headers, content_type=content_type, body=payload)


@pytest.fixture
def decoder() -> ResponseDecoder:
    return ResponseDecoder()


def test_success_returns_status_headers_and_parsed_body(decoder: ResponseDecoder) -> None:
    document = {"data": [{"data": {"id": 1, "name": "ä"}}], "pagination": {"offset": 0, "limit": 25}}
    result = decoder.decode(_raw(200, document))

    assert result.status_code == 200
    assert result.json_body == document
    assert result.headers["x-request-id"] == "r-1"


def test_created_status_is_success(decoder: ResponseDecoder) -> None:
    assert decoder.decode(_raw(201, {"data": {"id": 2}})).status_code == 201


def test_validation_error_has_one_resource(decoder: ResponseDecoder) -> None:
    with pytest.raises(CrowdinValidationError) as exc_info:
        decoder.decode(_raw(400, {"errors": [{"code": 1, "message": "bad field"}]}))

    errors = exc_info.value.errors
    assert len(errors) == 1
    assert errors[0].code == 1
    assert errors[0].message == "bad field"
    assert exc_info.value.status == 400


def test_validation_error_nested_form_is_flattened(decoder: ResponseDecoder) -> None:
    body = {
        "errors": [
            {
                "error": {
                    "key": "name",
                    "errors": [
                        {"code": "isEmpty", "message": "Value is required"},
                        {"code": "stringLengthTooShort", "message": "Too short"},
                    ],
                }
            }
        ]
    }
    with pytest.raises(CrowdinValidationError) as exc_info:
        decoder.decode(_raw(400, body))

    assert [(e.key, e.code) for e in exc_info.value.errors] == [("name", "isEmpty"), ("name", "stringLengthTooShort")]
    assert "name: Value is required" in str(exc_info.value)


def test_remote_error_carries_code_and_message(decoder: ResponseDecoder) -> None:
    with pytest.raises(CrowdinRemoteError) as exc_info:
        decoder.decode(_raw(404, {"error": {"code": 1, "message": "not found"}}))

    assert exc_info.value.code == 1
    assert exc_info.value.message == "not found"
    assert exc_info.value.status == 404


def test_remote_error_without_message_uses_placeholder(decoder: ResponseDecoder) -> None:
    with pytest.raises(CrowdinRemoteError) as exc_info:
        decoder.decode(_raw(404, {"error": {"code": 1}}))

    assert exc_info.value.message == UNKNOWN_ERROR_MESSAGE == "Unknown error occurred"


def test_success_with_text_plain_is_protocol_error(decoder: ResponseDecoder) -> None:
    with pytest.raises(CrowdinProtocolError):
        decoder.decode(_raw(200, content_type="text/plain", text=b"not json at all"))


@pytest.mark.parametrize("content_type", ["application/json; charset=utf-8", "Application/JSON", " application/json"])
def test_success_content_type_must_match_exactly(decoder: ResponseDecoder, content_type: str) -> None:
    with pytest.raises(CrowdinProtocolError) as exc_info:
        decoder.decode(_raw(200, {"data": {}}, content_type=content_type))
    assert exc_info.value.status == 200


@pytest.mark.parametrize(
    ("status", "text"),
    [
        (500, b"<html>Internal Server Error</html>"),
        (403, b"[1, 2]"),
        (401, b'{"message": "no error member"}'),
        (400, b'{"error": {"code": 1}}'),
    ],
)
def test_malformed_error_bodies_are_protocol_errors(decoder: ResponseDecoder, status: int, text: bytes) -> None:
    with pytest.raises(CrowdinProtocolError) as exc_info:
        decoder.decode(_raw(status, text=text))
    assert exc_info.value.status == status


def test_all_errors_share_the_base_class(decoder: ResponseDecoder) -> None:
    for raw in (_raw(400, {"errors": []}), _raw(500, {"error": {"code": 500}}), _raw(204, text=b"")):
        with pytest.raises(CrowdinApiError):
            decoder.decode(raw)


def test_ensure_success_ignores_body_of_success(decoder: ResponseDecoder) -> None:
    assert decoder.ensure_success(_raw(204, text=b"", content_type="")) == 204
    assert decoder.ensure_success(_raw(200, text=b"ignored", content_type="text/plain")) == 200


def test_ensure_success_raises_for_errors(decoder: ResponseDecoder) -> None:
    with pytest.raises(CrowdinRemoteError):
        decoder.ensure_success(_raw(404, {"error": {"code": 8, "message": "Storage Not Found"}}))
