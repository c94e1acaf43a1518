"""Languages API executor."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from crowdin_client.core.executors.base import DEFAULT_PAGE_LIMIT, ApiExecutor, Endpoint, page_params
from crowdin_client.models.languages_models import Language

if TYPE_CHECKING:
    from collections.abc import Iterable

    from crowdin_client.models.api_models import ResponseList
    from crowdin_client.models.languages_models import AddCustomLanguageRequest
    from crowdin_client.models.patch_models import PatchEntry

__all__: list[str] = ["LanguagesApiExecutor"]


class LanguagesApiExecutor(ApiExecutor):
    ENDPOINTS: ClassVar[dict[str, Endpoint]] = {
        "list_supported_languages": Endpoint("GET", "/languages", Language, is_list=True),
        "add_custom_language": Endpoint("POST", "/languages", Language),
        "get_language": Endpoint("GET", "/languages/{language_id}", Language),
        "delete_custom_language": Endpoint("DELETE", "/languages/{language_id}"),
        "edit_custom_language": Endpoint("PATCH", "/languages/{language_id}", Language),
    }

    async def list_supported_languages(
        self, limit: int = DEFAULT_PAGE_LIMIT, offset: int = 0
    ) -> ResponseList[Language]:
        return await self._execute("list_supported_languages", query_params=page_params(limit, offset))

    async def add_custom_language(self, request: AddCustomLanguageRequest) -> Language:
        return await self._execute("add_custom_language", body=request)

    async def get_language(self, language_id: str) -> Language:
        return await self._execute("get_language", path_params={"language_id": language_id})

    async def delete_custom_language(self, language_id: str) -> None:
        await self._execute("delete_custom_language", path_params={"language_id": language_id})

    async def edit_custom_language(self, language_id: str, patches: Iterable[PatchEntry]) -> Language:
        """Apply JSON-Patch operations to a custom language, e.g. on ``LanguagePatchPathCode.NAME``."""
        return await self._execute("edit_custom_language", path_params={"language_id": language_id}, patches=patches)
