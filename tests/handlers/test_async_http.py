from __future__ import annotations

import logging
from typing import Any, Self

import aiohttp
import pytest
from multidict import CIMultiDict, CIMultiDictProxy

import crowdin_client.handlers.async_comm as async_comm
from crowdin_client.core.client import CrowdinApiClient
from crowdin_client.core.credentials import CrowdinCredentials
from crowdin_client.core.exceptions import CrowdinProtocolError
from crowdin_client.handlers.async_comm import AsyncCommError, AsyncCommTimeoutError, AsyncHttp
from crowdin_client.models.api_models import ApiRequest


class FakeResp:
    def __init__(self, status: int, body: bytes, content_type: str, error: BaseException | None = None) -> None:
        self.status = status
        self._body = body
        self._error = error
        self.headers = CIMultiDictProxy(CIMultiDict({"Content-Type": content_type}))

    async def read(self) -> bytes:
        return self._body

    async def __aenter__(self) -> Self:
        if self._error is not None:
            raise self._error
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        return None


class FakeSession:
    def __init__(self, resp: FakeResp, **kwargs: Any) -> None:
        self.resp = resp
        self.kwargs = kwargs
        self.calls: list[tuple[str, str, dict[str, Any]]] = []
        self.closed = False

    def request(self, method: str, url: str, **kwargs: Any) -> FakeResp:
        self.calls.append((method, url, kwargs))
        return self.resp

    async def close(self) -> None:
        self.closed = True


def _install(monkeypatch: pytest.MonkeyPatch, resp: FakeResp) -> list[FakeSession]:
    sessions: list[FakeSession] = []

    def factory(**kwargs: Any) -> FakeSession:
        session = FakeSession(resp, **kwargs)
        sessions.append(session)
        return session

    monkeypatch.setattr(async_comm, "ClientSession", factory)
    return sessions


@pytest.mark.asyncio
async def test_send_returns_raw_response(monkeypatch: pytest.MonkeyPatch) -> None:
    sessions = _install(monkeypatch, FakeResp(200, b'{"data": {}}', "application/json; charset=utf-8"))
    http = AsyncHttp(proxy="http://proxy.local:3128")

    request = ApiRequest("POST", "https://api.crowdin.com/api/v2/storages", {"Authorization": "Bearer t"}, b"abc")
    raw = await http.send(request)

    assert raw.status == 200
    assert raw.body == b'{"data": {}}'
    assert raw.content_type == "application/json; charset=utf-8"
    assert raw.headers["content-type"] == "application/json; charset=utf-8"

    method, url, kwargs = sessions[0].calls[0]
    assert (method, url) == ("POST", "https://api.crowdin.com/api/v2/storages")
    assert kwargs == {"headers": {"Authorization": "Bearer t"}, "data": b"abc", "proxy": "http://proxy.local:3128"}


@pytest.mark.asyncio
async def test_error_status_is_returned_not_raised(monkeypatch: pytest.MonkeyPatch) -> None:
    _install(monkeypatch, FakeResp(404, b'{"error": {"code": 8}}', "application/json"))
    raw = await AsyncHttp().send(ApiRequest("GET", "https://api.crowdin.com/api/v2/storages/1"))
    assert raw.status == 404
    assert not raw.is_success


@pytest.mark.asyncio
async def test_get_sends_no_data_and_no_proxy(monkeypatch: pytest.MonkeyPatch) -> None:
    sessions = _install(monkeypatch, FakeResp(200, b"{}", "application/json"))
    await AsyncHttp().send(ApiRequest("GET", "https://api.crowdin.com/api/v2/languages"))
    assert sessions[0].calls[0][2] == {"headers": {}}


@pytest.mark.asyncio
async def test_session_is_shared_between_requests(monkeypatch: pytest.MonkeyPatch) -> None:
    sessions = _install(monkeypatch, FakeResp(200, b"{}", "application/json"))
    http = AsyncHttp()
    await http.send(ApiRequest("GET", "https://example.test/a"))
    await http.send(ApiRequest("GET", "https://example.test/b"))
    assert len(sessions) == 1
    assert len(sessions[0].calls) == 2


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("error", "expected"),
    [
        (TimeoutError(), AsyncCommTimeoutError),
        (ConnectionResetError(), AsyncCommError),
        (aiohttp.ClientPayloadError("broken"), AsyncCommError),
    ],
)
async def test_transport_failures_are_mapped(
    monkeypatch: pytest.MonkeyPatch, error: BaseException, expected: type[AsyncCommError]
) -> None:
    _install(monkeypatch, FakeResp(200, b"", "", error=error))
    with pytest.raises(expected) as exc_info:
        await AsyncHttp().send(ApiRequest("GET", "https://example.test/a"))
    assert exc_info.value.__cause__ is error


def test_timeout_configuration() -> None:
    assert AsyncHttp(total_timeout=0)._timeout.total is None  # noqa: SLF001
    assert AsyncHttp(total_timeout=2)._timeout.connect is None  # noqa: SLF001

    timeout = AsyncHttp(total_timeout=30)._timeout  # noqa: SLF001
    assert (timeout.total, timeout.connect) == (30, async_comm.CONNECT_TIMEOUT)


@pytest.mark.asyncio
async def test_context_logs_session_lifecycle(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    caplog.set_level(logging.DEBUG, logger="CrowdinClient")
    sessions = _install(monkeypatch, FakeResp(200, b"{}", "application/json"))
    http = AsyncHttp()

    async with http:
        assert http.is_open

    assert sessions[0].closed
    assert not http.is_open
    assert any("AsyncHttp session initialized" in rec.message for rec in caplog.records)
    assert any("AsyncHttp session closed" in rec.message for rec in caplog.records)


@pytest.mark.asyncio
async def test_reenter_after_close_creates_new_session(monkeypatch: pytest.MonkeyPatch) -> None:
    sessions = _install(monkeypatch, FakeResp(200, b"{}", "application/json"))
    http = AsyncHttp()

    async with http:
        pass
    async with http:
        pass

    assert len(sessions) == 2


def test_session_property_requires_open_session() -> None:
    with pytest.raises(RuntimeError):
        _ = AsyncHttp().session


@pytest.mark.asyncio
@pytest.mark.parametrize("content_type", ["application/json; charset=utf-8", "Application/JSON"])
async def test_client_rejects_inexact_json_content_type(monkeypatch: pytest.MonkeyPatch, content_type: str) -> None:
    _install(monkeypatch, FakeResp(200, b'{"data": {}}', content_type))
    client = CrowdinApiClient(CrowdinCredentials(access_token="t"), transport=AsyncHttp())

    async with client:
        with pytest.raises(CrowdinProtocolError):
            await client.send_get("/storages")
