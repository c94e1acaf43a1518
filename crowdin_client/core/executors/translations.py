"""Translations API executor: project builds, translation uploads and exports."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from crowdin_client.core.executors.base import DEFAULT_PAGE_LIMIT, ApiExecutor, Endpoint, page_params
from crowdin_client.models.source_files_models import DownloadLink
from crowdin_client.models.translations_models import ProjectBuild, UploadTranslationsResponse

if TYPE_CHECKING:
    from crowdin_client.models.api_models import ResponseList
    from crowdin_client.models.translations_models import (
        BuildProjectTranslationRequest,
        ExportProjectTranslationRequest,
        UploadTranslationsRequest,
    )

__all__: list[str] = ["TranslationsApiExecutor"]


class TranslationsApiExecutor(ApiExecutor):
    ENDPOINTS: ClassVar[dict[str, Endpoint]] = {
        "list_project_builds": Endpoint(
            "GET", "/projects/{project_id}/translations/builds", ProjectBuild, is_list=True
        ),
        "build_project_translation": Endpoint("POST", "/projects/{project_id}/translations/builds", ProjectBuild),
        "check_build_status": Endpoint("GET", "/projects/{project_id}/translations/builds/{build_id}", ProjectBuild),
        "download_project_translations": Endpoint(
            "GET", "/projects/{project_id}/translations/builds/{build_id}/download", DownloadLink
        ),
        "cancel_build": Endpoint("DELETE", "/projects/{project_id}/translations/builds/{build_id}"),
        "upload_translations": Endpoint(
            "POST", "/projects/{project_id}/translations/{language_id}", UploadTranslationsResponse
        ),
        "export_project_translation": Endpoint("POST", "/projects/{project_id}/translations/exports", DownloadLink),
    }

    async def list_project_builds(
        self, project_id: int, branch_id: int | None = None, limit: int = DEFAULT_PAGE_LIMIT, offset: int = 0
    ) -> ResponseList[ProjectBuild]:
        return await self._execute(
            "list_project_builds",
            path_params={"project_id": project_id},
            query_params=page_params(limit, offset, branchId=branch_id),
        )

    async def build_project_translation(
        self, project_id: int, request: BuildProjectTranslationRequest
    ) -> ProjectBuild:
        """Start a build; poll ``check_build_status`` until it is finished, then download it."""
        return await self._execute("build_project_translation", path_params={"project_id": project_id}, body=request)

    async def check_build_status(self, project_id: int, build_id: int) -> ProjectBuild:
        return await self._execute(
            "check_build_status", path_params={"project_id": project_id, "build_id": build_id}
        )

    async def download_project_translations(self, project_id: int, build_id: int) -> DownloadLink:
        return await self._execute(
            "download_project_translations", path_params={"project_id": project_id, "build_id": build_id}
        )

    async def cancel_build(self, project_id: int, build_id: int) -> None:
        await self._execute("cancel_build", path_params={"project_id": project_id, "build_id": build_id})

    async def upload_translations(
        self, project_id: int, language_id: str, request: UploadTranslationsRequest
    ) -> UploadTranslationsResponse:
        return await self._execute(
            "upload_translations",
            path_params={"project_id": project_id, "language_id": language_id},
            body=request,
        )

    async def export_project_translation(
        self, project_id: int, request: ExportProjectTranslationRequest
    ) -> DownloadLink:
        return await self._execute(
            "export_project_translation", path_params={"project_id": project_id}, body=request
        )
