"""Credentials and base URL resolution."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

__all__: list[str] = ["DEFAULT_BASE_URL", "CrowdinCredentials", "resolve_base_url"]

DEFAULT_BASE_URL: Final[str] = "https://api.crowdin.com/api/v2"
ORGANIZATION_BASE_URL: Final[str] = "https://{organization}.api.crowdin.com/api/v2"


@dataclass(frozen=True)
class CrowdinCredentials:
    """Access token plus the optional location of the API.

    Attributes:
        access_token (str): Personal access token sent as a bearer token.
        organization (str | None): Enterprise organization name.
        base_url (str | None): Full API base URL. Takes precedence over ``organization``.
    """

    access_token: str
    organization: str | None = None
    base_url: str | None = None

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(access_token='***', "
            f"organization={self.organization!r}, base_url={self.base_url!r})"
        )


def resolve_base_url(credentials: CrowdinCredentials) -> str:
    """Resolve the base URL every relative request path is appended to.

    The first match wins: an explicit ``base_url``, then the organization's
    Enterprise host, then the public API host. Values are not validated.
    """
    if credentials.base_url and credentials.base_url.strip():
        return credentials.base_url
    if credentials.organization and credentials.organization.strip():
        return ORGANIZATION_BASE_URL.format(organization=credentials.organization)
    return DEFAULT_BASE_URL
