"""Typed asynchronous client for the Crowdin REST API v2."""

from crowdin_client.config import ConfigLoader
from crowdin_client.core import (
    VERSION,
    CrowdinApiClient,
    CrowdinApiError,
    CrowdinCredentials,
    CrowdinProtocolError,
    CrowdinRemoteError,
    CrowdinValidationError,
)
from crowdin_client.handlers import AsyncCommError, AsyncCommTimeoutError
from crowdin_client.models import ApiResult, ErrorResource, PatchEntry, PatchOperation, PatchPath, ResponseList

__version__: str = VERSION

__all__: list[str] = [
    "ApiResult",
    "AsyncCommError",
    "AsyncCommTimeoutError",
    "ConfigLoader",
    "CrowdinApiClient",
    "CrowdinApiError",
    "CrowdinCredentials",
    "CrowdinProtocolError",
    "CrowdinRemoteError",
    "CrowdinValidationError",
    "ErrorResource",
    "PatchEntry",
    "PatchOperation",
    "PatchPath",
    "ResponseList",
    "__version__",
]
