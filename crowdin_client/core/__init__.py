"""Request pipeline of the Crowdin client.

This package contains the credentials resolver, the request builder, the response decoder,
the error types, the API client and the resource executors built on top of it.
"""

from crowdin_client.core.client import CrowdinApiClient
from crowdin_client.core.credentials import CrowdinCredentials, resolve_base_url
from crowdin_client.core.exceptions import (
    CrowdinApiError,
    CrowdinProtocolError,
    CrowdinRemoteError,
    CrowdinValidationError,
)
from crowdin_client.core.interface import CrowdinApiClientInterface
from crowdin_client.core.request_builder import RequestBuilder
from crowdin_client.core.response_decoder import ResponseDecoder
from crowdin_client.core.version import VERSION

__all__: list[str] = [
    "VERSION",
    "CrowdinApiClient",
    "CrowdinApiClientInterface",
    "CrowdinApiError",
    "CrowdinCredentials",
    "CrowdinProtocolError",
    "CrowdinRemoteError",
    "CrowdinValidationError",
    "RequestBuilder",
    "ResponseDecoder",
    "resolve_base_url",
]
