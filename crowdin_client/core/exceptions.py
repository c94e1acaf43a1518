"""Errors raised by the Crowdin API client.

Every error that originates from the API itself derives from CrowdinApiError.
Connection-level failures are raised by the transport as AsyncCommError and are not wrapped.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Sequence

    from crowdin_client.models.api_models import ErrorResource

__all__: list[str] = [
    "UNKNOWN_ERROR_MESSAGE",
    "CrowdinApiError",
    "CrowdinProtocolError",
    "CrowdinRemoteError",
    "CrowdinValidationError",
]

UNKNOWN_ERROR_MESSAGE: Final[str] = "Unknown error occurred"


class CrowdinApiError(Exception):
    """Base class for errors reported by, or about, the Crowdin API."""

    def __init__(self, msg: str, *, status: int | None = None) -> None:
        self.msg: str = msg
        self.status: int | None = status
        super().__init__(msg)


class CrowdinValidationError(CrowdinApiError):
    """The request was rejected with 400 Bad Request.

    Attributes:
        errors (list[ErrorResource]): One entry per rejected field or rule, in server order.
    """

    def __init__(self, errors: Sequence[ErrorResource], msg: str = "Invalid Request Parameters") -> None:
        self.errors: list[ErrorResource] = list(errors)
        details: str = "; ".join(
            f"{error.key + ': ' if error.key else ''}{error.message} ({error.code})" for error in self.errors
        )
        super().__init__(f"{msg}: {details}" if details else msg, status=400)


class CrowdinRemoteError(CrowdinApiError):
    """Any other non-2xx answer, carrying the error code and message of the response body."""

    def __init__(self, code: int, message: str | None, *, status: int | None = None) -> None:
        self.code: int = code
        self.message: str = message if message is not None else UNKNOWN_ERROR_MESSAGE
        super().__init__(f"{self.message} (code {code})", status=status)


class CrowdinProtocolError(CrowdinApiError):
    """The response does not have the shape the API guarantees, e.g. a success answer that is not JSON."""
