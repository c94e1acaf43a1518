"""Crowdin API client.

CrowdinApiClient owns the request pipeline (builder, transport, decoder) and exposes
one executor per resource family. Every public call is a coroutine and performs
exactly one HTTP round trip.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, BinaryIO, Self

from crowdin_client.config.loader import ConfigLoader
from crowdin_client.core.credentials import DEFAULT_BASE_URL, CrowdinCredentials, resolve_base_url
from crowdin_client.core.executors import (
    LanguagesApiExecutor,
    ProjectsGroupsApiExecutor,
    SourceFilesApiExecutor,
    StorageApiExecutor,
    TranslationsApiExecutor,
    TranslationStatusApiExecutor,
)
from crowdin_client.core.interface import CrowdinApiClientInterface
from crowdin_client.core.request_builder import RequestBuilder
from crowdin_client.core.response_decoder import ResponseDecoder
from crowdin_client.handlers.async_comm import DEFAULT_TOTAL_TIMEOUT, AsyncHttp
from crowdin_client.models.config_models import Config
from crowdin_client.utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Iterable, Mapping
    from pathlib import Path

    from crowdin_client.models.api_models import ApiRequest, ApiResult
    from crowdin_client.models.patch_models import PatchEntry

__all__: list[str] = ["CrowdinApiClient"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)


class CrowdinApiClient(CrowdinApiClientInterface):
    """Typed asynchronous client for the Crowdin REST API v2.

    Example:
        async with CrowdinApiClient(CrowdinCredentials(access_token="...")) as client:
            storages = await client.storage.list_storages()

    Args:
        credentials (CrowdinCredentials): Token and API location.
        transport (AsyncHttp | None): Shared HTTP transport. Created from ``total_timeout``/``proxy`` if omitted.
        total_timeout (float): Total timeout per request in seconds, used when the transport is created here.
        proxy (str | None): Proxy URL, used when the transport is created here.
    """

    def __init__(
        self,
        credentials: CrowdinCredentials,
        *,
        transport: AsyncHttp | None = None,
        total_timeout: float = DEFAULT_TOTAL_TIMEOUT,
        proxy: str | None = None,
    ) -> None:
        self.credentials: CrowdinCredentials = credentials
        self.base_url: str = resolve_base_url(credentials)
        self._builder = RequestBuilder(self.base_url, credentials.access_token)
        self._decoder = ResponseDecoder()
        self._transport: AsyncHttp = transport or AsyncHttp(total_timeout=total_timeout, proxy=proxy)
        logger.info("%s initialized for '%s'", self.__class__.__name__, self.base_url)

        self.languages = LanguagesApiExecutor(self)
        self.projects_groups = ProjectsGroupsApiExecutor(self)
        self.source_files = SourceFilesApiExecutor(self)
        self.storage = StorageApiExecutor(self)
        self.translations = TranslationsApiExecutor(self)
        self.translation_status = TranslationStatusApiExecutor(self)

    @classmethod
    def from_config(cls, config: Config | str | Path) -> Self:
        """Create a client from a loaded configuration or from the path of an INI file.

        A path is read with ConfigLoader, so the CROWDIN_* environment variables apply.
        ``GENERAL.LOG_FILE`` and ``GENERAL.DEBUG`` enable the console/file handlers of
        LoggerUtils, the latter at DEBUG level.

        Raises:
            ConfigLoaderError: If the file is missing or holds invalid settings.
        """
        if not isinstance(config, Config):
            config = ConfigLoader(config_filename=config).config
        LoggerUtils.from_settings(config.GENERAL.LOG_FILE, debug=config.GENERAL.DEBUG)
        credentials = CrowdinCredentials(
            access_token=config.CROWDIN.ACCESS_TOKEN,
            organization=config.CROWDIN.ORGANIZATION or None,
            base_url=config.CROWDIN.BASE_URL or None,
        )
        return cls(credentials, total_timeout=config.HTTP.TOTAL_TIMEOUT, proxy=config.HTTP.PROXY or None)

    async def __aenter__(self) -> Self:
        await self._transport.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self._transport.__aexit__(exc_type, exc_val, exc_tb)

    async def close(self) -> None:
        await self._transport.close()

    @property
    def is_enterprise(self) -> bool:
        return self.base_url != DEFAULT_BASE_URL

    async def send_get(self, path: str, query_params: Mapping[str, Any] | None = None) -> ApiResult:
        return await self._send(self._builder.get(path, query_params))

    async def send_post(self, path: str, body: Any, extra_headers: Mapping[str, str] | None = None) -> ApiResult:
        return await self._send(self._builder.post(path, body, extra_headers))

    async def send_put(self, path: str, body: Any) -> ApiResult:
        return await self._send(self._builder.put(path, body))

    async def send_patch(self, path: str, entries: Iterable[PatchEntry]) -> ApiResult:
        return await self._send(self._builder.patch(path, entries))

    async def send_delete(self, path: str) -> int:
        """Send a DELETE request.

        Returns:
            int: The status code of the successful answer. The body is not decoded.
        Raises:
            CrowdinApiError: For non-2xx answers, exactly as for the other calls.
        """
        raw = await self._transport.send(self._builder.delete(path))
        return self._decoder.ensure_success(raw)

    async def upload_file(self, path: str, filename: str, stream: bytes | BinaryIO) -> ApiResult:
        return await self._send(self._builder.upload(path, filename, stream))

    async def _send(self, request: ApiRequest) -> ApiResult:
        raw = await self._transport.send(request)
        return self._decoder.decode(raw)
