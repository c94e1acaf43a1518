from __future__ import annotations

import json
from typing import Any, Self

import pytest
from multidict import CIMultiDict, CIMultiDictProxy

from crowdin_client.config.loader import ConfigFileNotFoundError, ConfigLoader
from crowdin_client.core.client import CrowdinApiClient
from crowdin_client.core.credentials import CrowdinCredentials
from crowdin_client.core.exceptions import CrowdinProtocolError, CrowdinRemoteError
from crowdin_client.handlers.async_comm import AsyncCommTimeoutError
from crowdin_client.models.api_models import ApiRequest, RawResponse
from crowdin_client.models.patch_models import PatchEntry, PatchOperation
from crowdin_client.utils.logger_utils import LoggerUtils


class FakeTransport:
    """Records requests and answers them from a queue of RawResponse objects."""

    def __init__(self, *responses: RawResponse | BaseException) -> None:
        self.responses: list[RawResponse | BaseException] = list(responses)
        self.requests: list[ApiRequest] = []
        self.entered = False
        self.closed = False

    async def send(self, request: ApiRequest) -> RawResponse:
        self.requests.append(request)
        response = self.responses.pop(0)
        if isinstance(response, BaseException):
            raise response
        return response

    async def __aenter__(self) -> Self:
        self.entered = True
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self.closed = True

    async def close(self) -> None:
        self.closed = True


def json_response(status: int, body: Any) -> RawResponse:
    headers = CIMultiDictProxy(CIMultiDict({"Content-Type": "application/json"}))
    return RawResponse(status, headers, "application/json", json.dumps(body).encode("utf-8"))


def _client(transport: FakeTransport, **kwargs: Any) -> CrowdinApiClient:
    credentials = CrowdinCredentials(access_token="tok", **kwargs)
    return CrowdinApiClient(credentials, transport=transport)  # type: ignore[arg-type]


@pytest.mark.asyncio
async def test_send_get_builds_url_and_decodes() -> None:
    transport = FakeTransport(json_response(200, {"data": {"id": 5}}))
    client = _client(transport)

    result = await client.send_get("/storages/5", {"unused": None})

    assert result.status_code == 200
    assert result.json_body == {"data": {"id": 5}}
    assert transport.requests[0].url == "https://api.crowdin.com/api/v2/storages/5"
    assert transport.requests[0].headers["Authorization"] == "Bearer tok"


@pytest.mark.asyncio
async def test_organization_changes_base_url() -> None:
    transport = FakeTransport(json_response(200, {"data": []}))
    client = _client(transport, organization="acme")

    await client.send_get("/projects")

    assert client.is_enterprise
    assert transport.requests[0].url == "https://acme.api.crowdin.com/api/v2/projects"


@pytest.mark.asyncio
async def test_send_delete_returns_bare_status() -> None:
    transport = FakeTransport(RawResponse(204), RawResponse(200, body=b"not json"))
    client = _client(transport)

    assert await client.send_delete("/storages/1") == 204
    assert await client.send_delete("/storages/2") == 200
    assert [r.method for r in transport.requests] == ["DELETE", "DELETE"]


@pytest.mark.asyncio
async def test_send_delete_errors_use_the_error_path() -> None:
    client = _client(FakeTransport(json_response(404, {"error": {"code": 8, "message": "Storage Not Found"}})))
    with pytest.raises(CrowdinRemoteError) as exc_info:
        await client.send_delete("/storages/1")
    assert exc_info.value.code == 8


@pytest.mark.asyncio
async def test_send_patch_and_upload_requests() -> None:
    transport = FakeTransport(json_response(200, {"data": {}}), json_response(201, {"data": {}}))
    client = _client(transport)

    await client.send_patch("/projects/1", [PatchEntry(PatchOperation.REPLACE, "/name", "x")])
    await client.upload_file("/storages", "a.txt", b"hello")

    patch_request, upload_request = transport.requests
    assert patch_request.headers["Content-Type"] == "application/json-patch+json"
    assert upload_request.headers["Crowdin-API-FileName"] == "a.txt"
    assert upload_request.body == b"hello"


@pytest.mark.asyncio
async def test_send_post_and_put_with_text_answer_is_protocol_error() -> None:
    text = RawResponse(200, content_type="text/plain", body=b"ok")
    transport = FakeTransport(text, json_response(200, {"data": {"id": 1}}))
    client = _client(transport)

    with pytest.raises(CrowdinProtocolError):
        await client.send_post("/projects", {"name": "x"}, {"X-Extra": "1"})
    result = await client.send_put("/projects/1/strings/1", {"text": "t"})

    assert transport.requests[0].headers["X-Extra"] == "1"
    assert transport.requests[1].method == "PUT"
    assert result.json_body["data"]["id"] == 1


@pytest.mark.asyncio
async def test_transport_errors_are_not_wrapped() -> None:
    error = AsyncCommTimeoutError("slow")
    client = _client(FakeTransport(error))
    with pytest.raises(AsyncCommTimeoutError) as exc_info:
        await client.send_get("/languages")
    assert exc_info.value is error


@pytest.mark.asyncio
async def test_context_manager_delegates_to_transport() -> None:
    transport = FakeTransport()
    async with _client(transport) as client:
        assert isinstance(client, CrowdinApiClient)
        assert transport.entered
    assert transport.closed


def test_from_config(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CROWDIN_ACCESS_TOKEN", raising=False)
    monkeypatch.delenv("CROWDIN_ORGANIZATION", raising=False)
    monkeypatch.delenv("CROWDIN_BASE_URL", raising=False)
    config = ConfigLoader(access_token="abc", organization="acme", total_timeout=12.5).config

    client = CrowdinApiClient.from_config(config)

    assert client.base_url == "https://acme.api.crowdin.com/api/v2"
    assert client.credentials.access_token == "abc"
    assert client._transport.total_timeout == 12.5  # noqa: SLF001
    assert client._transport.proxy is None  # noqa: SLF001


def test_from_config_enables_debug_logging(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CROWDIN_ACCESS_TOKEN", "env-token")
    LoggerUtils.reset()
    log_file = tmp_path / "client.log"
    config = ConfigLoader(debug=True).config
    config.GENERAL.LOG_FILE = str(log_file)

    try:
        CrowdinApiClient.from_config(config)
        assert LoggerUtils().get_level().name == "DEBUG"
        assert "CrowdinApiClient initialized" in log_file.read_text(encoding="utf-8")
    finally:
        LoggerUtils.reset()


def test_from_config_reads_ini_path(tmp_path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("CROWDIN_ACCESS_TOKEN", raising=False)
    monkeypatch.delenv("CROWDIN_ORGANIZATION", raising=False)
    monkeypatch.delenv("CROWDIN_BASE_URL", raising=False)
    ini_path = tmp_path / "crowdin.ini"
    ini_path.write_text(
        "[CROWDIN]\nACCESS_TOKEN = file-token\nBASE_URL = https://crowdin.example.test/api/v2\n\n"
        "[HTTP]\nTOTAL_TIMEOUT = 7.5\n",
        encoding="utf-8",
    )

    for source in (ini_path, str(ini_path)):
        client = CrowdinApiClient.from_config(source)
        assert client.base_url == "https://crowdin.example.test/api/v2"
        assert client.credentials.access_token == "file-token"
        assert client._transport.total_timeout == 7.5  # noqa: SLF001


def test_from_config_missing_file(tmp_path) -> None:
    with pytest.raises(ConfigFileNotFoundError):
        CrowdinApiClient.from_config(tmp_path / "missing.ini")
