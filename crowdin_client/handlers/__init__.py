"""HTTP transport for the Crowdin client."""

from crowdin_client.handlers.async_comm import AsyncCommError, AsyncCommTimeoutError, AsyncHttp

__all__: list[str] = [
    "AsyncCommError",
    "AsyncCommTimeoutError",
    "AsyncHttp",
]
