import pytest

from crowdin_client.core.credentials import DEFAULT_BASE_URL, CrowdinCredentials, resolve_base_url


def test_resolve_default_host() -> None:
    assert resolve_base_url(CrowdinCredentials(access_token="t")) == "https://api.crowdin.com/api/v2"
    assert resolve_base_url(CrowdinCredentials(access_token="t")) == DEFAULT_BASE_URL


def test_resolve_organization_host() -> None:
    credentials = CrowdinCredentials(access_token="t", organization="acme")
    assert resolve_base_url(credentials) == "https://acme.api.crowdin.com/api/v2"


def test_explicit_base_url_wins_over_organization() -> None:
    credentials = CrowdinCredentials(access_token="t", organization="acme", base_url="https://example.test/api/v2")
    assert resolve_base_url(credentials) == "https://example.test/api/v2"


@pytest.mark.parametrize("blank", ["", "   "])
def test_blank_values_fall_through(blank: str) -> None:
    assert resolve_base_url(CrowdinCredentials(access_token="t", base_url=blank)) == DEFAULT_BASE_URL
    assert resolve_base_url(CrowdinCredentials(access_token="t", organization=blank)) == DEFAULT_BASE_URL


def test_repr_masks_access_token() -> None:
    text: str = repr(CrowdinCredentials(access_token="secret-token", organization="acme"))
    assert "secret-token" not in text
    assert "acme" in text
