"""Asynchronous HTTP transport for the Crowdin client.

This module provides the AsyncHttp class, which sends fully built requests over one shared
aiohttp session and hands back the complete, undecoded response.
Non-2xx statuses are returned to the caller; only connection-level problems such as timeouts,
refused connections and resets are raised, as AsyncCommError subclasses.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Final, Self

import aiohttp
from aiohttp.client import ClientSession

from crowdin_client.models.api_models import RawResponse
from crowdin_client.utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging

    from crowdin_client.models.api_models import ApiRequest


__all__: list[str] = ["AsyncCommError", "AsyncCommTimeoutError", "AsyncHttp"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

CONNECT_TIMEOUT: Final[float] = 5.0
DEFAULT_TOTAL_TIMEOUT: Final[float] = 30.0


class AsyncHttp:
    """Asynchronous HTTP client shared by every call of one API client.

    The aiohttp session is created lazily on first use and can serve any number of
    concurrent requests. Entering the async context manager creates it eagerly;
    leaving it closes the session.
    """

    def __init__(self, *, total_timeout: float = DEFAULT_TOTAL_TIMEOUT, proxy: str | None = None) -> None:
        """Configure the transport; the session itself is opened on first use.

        Args:
            total_timeout (float): Total timeout per request in seconds. Zero or negative disables it.
            proxy (str | None): Optional proxy URL used for every request.
        """
        self.__session: ClientSession | None = None
        self.total_timeout: float = total_timeout
        self.proxy: str | None = proxy or None
        self._timeout: aiohttp.ClientTimeout = self._build_timeout(total_timeout)
        logger.info("%s created (timeout=%ss, proxy=%s)", self.__class__.__name__, total_timeout, bool(self.proxy))

    async def __aenter__(self) -> Self:
        self.initialize_session(suppress_already_log=True)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        _ = exc_type, exc_val, exc_tb
        await self.close()

    def initialize_session(self, *, suppress_already_log: bool = False) -> None:
        """Open the aiohttp session unless one is already open.

        Args:
            suppress_already_log (bool): Do not log when an open session is reused.
        """
        if not self.is_open:
            self.__session = ClientSession(timeout=self._timeout)
            logger.debug("%s session initialized", self.__class__.__name__)
        elif not suppress_already_log:
            logger.debug("%s session already initialized", self.__class__.__name__)

    @property
    def session(self) -> ClientSession:
        """The open aiohttp session.

        Raises:
            RuntimeError: If no session is open.
        """
        if self.__session is None or self.__session.closed:
            msg = f"{self.__class__.__name__} has no open session"
            raise RuntimeError(msg)
        return self.__session

    @property
    def is_open(self) -> bool:
        return self.__session is not None and not self.__session.closed

    async def close(self) -> None:
        """Close the session; the next request opens a new one."""
        session, self.__session = self.__session, None
        if session is not None and not session.closed:
            await session.close()
        logger.info("%s session closed", self.__class__.__name__)

    @staticmethod
    def _build_timeout(total_timeout: float) -> aiohttp.ClientTimeout:
        if total_timeout <= 0:
            return aiohttp.ClientTimeout(total=None)
        if total_timeout < CONNECT_TIMEOUT:
            # A connect timeout longer than the total would never fire
            return aiohttp.ClientTimeout(total=total_timeout)
        return aiohttp.ClientTimeout(connect=CONNECT_TIMEOUT, total=total_timeout)

    async def send(self, request: ApiRequest) -> RawResponse:
        """Send a request and read the whole response.

        The body is read inside the response context, so a cancelled call never
        produces a partially read response.

        Args:
            request (ApiRequest): The request to send.
        Returns:
            RawResponse: Status, headers, media type and body of the response.
        Raises:
            AsyncCommTimeoutError: If the server did not answer in time.
            AsyncCommError: If the connection could not be established or was lost.
        """
        self.initialize_session(suppress_already_log=True)
        logger.debug("[%s] url=%s", request.method, request.url)

        kwargs: dict[str, Any] = {"headers": request.headers}
        if request.body is not None:
            kwargs["data"] = request.body
        if self.proxy:
            kwargs["proxy"] = self.proxy

        try:
            async with self.session.request(request.method, request.url, **kwargs) as resp:
                body: bytes = await resp.read()
                content_type: str = resp.headers.get("Content-Type", "")
                logger.debug("[%s] status=%s 'Content-Type': '%s'", request.method, resp.status, content_type)
                return RawResponse(status=resp.status, headers=resp.headers, content_type=content_type, body=body)

        except TimeoutError as err:
            logger.debug("[%s] %s timed out: %r", request.method, request.url, err)
            msg = f"{request.method} {request.url}: no answer within {self.total_timeout}s"
            raise AsyncCommTimeoutError(msg) from err
        except ConnectionResetError as err:
            logger.debug("[%s] %s connection reset: %r", request.method, request.url, err)
            msg = f"{request.method} {request.url}: connection reset by the server"
            raise AsyncCommError(msg) from err
        except aiohttp.ClientConnectorError as err:
            logger.debug("[%s] %s cannot connect: %r", request.method, request.url, err)
            msg = f"{request.method} {request.url}: cannot connect to {err.host}"
            raise AsyncCommError(msg) from err
        except aiohttp.ClientResponseError as err:
            logger.debug("[%s] %s malformed response: %r", request.method, request.url, err)
            msg = f"{request.method} {request.url}: malformed response"
            raise AsyncCommError(msg, response=err) from err
        except aiohttp.ClientError as err:
            logger.debug("[%s] %s failed: %r", request.method, request.url, err)
            msg = f"{request.method} {request.url}: {err.__class__.__name__}"
            raise AsyncCommError(msg) from err


class AsyncCommError(Exception):
    """Base class for transport-level failures.

    Raised for connection problems only; HTTP error statuses are reported through the
    returned response and mapped to API errors by the response decoder.
    """

    def __init__(self, msg: str, *, response: aiohttp.ClientResponseError | None = None) -> None:
        self.status: int | None = response.status if response is not None else None
        self.msg: str = msg if self.status is None else f"{msg} (status {self.status})"
        super().__init__(self.msg)


class AsyncCommTimeoutError(AsyncCommError):
    """Error raised when a request did not complete within the configured timeout."""
