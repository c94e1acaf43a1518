"""Translation status API executor."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from crowdin_client.core.executors.base import DEFAULT_PAGE_LIMIT, ApiExecutor, Endpoint, page_params
from crowdin_client.models.translation_status_models import QaCheckIssue, TranslationProgress

if TYPE_CHECKING:
    from crowdin_client.models.api_models import ResponseList

__all__: list[str] = ["TranslationStatusApiExecutor"]


class TranslationStatusApiExecutor(ApiExecutor):
    ENDPOINTS: ClassVar[dict[str, Endpoint]] = {
        "get_branch_progress": Endpoint(
            "GET", "/projects/{project_id}/branches/{branch_id}/languages/progress", TranslationProgress, is_list=True
        ),
        "get_directory_progress": Endpoint(
            "GET",
            "/projects/{project_id}/directories/{directory_id}/languages/progress",
            TranslationProgress,
            is_list=True,
        ),
        "get_file_progress": Endpoint(
            "GET", "/projects/{project_id}/files/{file_id}/languages/progress", TranslationProgress, is_list=True
        ),
        "get_language_progress": Endpoint(
            "GET", "/projects/{project_id}/languages/{language_id}/progress", TranslationProgress, is_list=True
        ),
        "get_project_progress": Endpoint(
            "GET", "/projects/{project_id}/languages/progress", TranslationProgress, is_list=True
        ),
        "list_qa_check_issues": Endpoint("GET", "/projects/{project_id}/qa-checks", QaCheckIssue, is_list=True),
    }

    async def get_branch_progress(
        self, project_id: int, branch_id: int, limit: int = DEFAULT_PAGE_LIMIT, offset: int = 0
    ) -> ResponseList[TranslationProgress]:
        return await self._execute(
            "get_branch_progress",
            path_params={"project_id": project_id, "branch_id": branch_id},
            query_params=page_params(limit, offset),
        )

    async def get_directory_progress(
        self, project_id: int, directory_id: int, limit: int = DEFAULT_PAGE_LIMIT, offset: int = 0
    ) -> ResponseList[TranslationProgress]:
        return await self._execute(
            "get_directory_progress",
            path_params={"project_id": project_id, "directory_id": directory_id},
            query_params=page_params(limit, offset),
        )

    async def get_file_progress(
        self, project_id: int, file_id: int, limit: int = DEFAULT_PAGE_LIMIT, offset: int = 0
    ) -> ResponseList[TranslationProgress]:
        return await self._execute(
            "get_file_progress",
            path_params={"project_id": project_id, "file_id": file_id},
            query_params=page_params(limit, offset),
        )

    async def get_language_progress(
        self, project_id: int, language_id: str, limit: int = DEFAULT_PAGE_LIMIT, offset: int = 0
    ) -> ResponseList[TranslationProgress]:
        """Per-file progress of one target language."""
        return await self._execute(
            "get_language_progress",
            path_params={"project_id": project_id, "language_id": language_id},
            query_params=page_params(limit, offset),
        )

    async def get_project_progress(
        self,
        project_id: int,
        language_ids: list[str] | None = None,
        limit: int = DEFAULT_PAGE_LIMIT,
        offset: int = 0,
    ) -> ResponseList[TranslationProgress]:
        return await self._execute(
            "get_project_progress",
            path_params={"project_id": project_id},
            query_params=page_params(limit, offset, languageIds=language_ids),
        )

    async def list_qa_check_issues(
        self,
        project_id: int,
        category: list[str] | None = None,
        validation: list[str] | None = None,
        language_ids: list[str] | None = None,
        limit: int = DEFAULT_PAGE_LIMIT,
        offset: int = 0,
    ) -> ResponseList[QaCheckIssue]:
        """List QA check issues; list filters are sent comma-separated."""
        query = page_params(limit, offset, category=category, validation=validation, languageIds=language_ids)
        return await self._execute("list_qa_check_issues", path_params={"project_id": project_id}, query_params=query)
