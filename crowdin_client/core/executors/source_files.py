"""Source files API executor: branches, directories and files of a project."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from crowdin_client.core.executors.base import DEFAULT_PAGE_LIMIT, ApiExecutor, Endpoint, page_params
from crowdin_client.models.source_files_models import Branch, Directory, DownloadLink, FileResource

if TYPE_CHECKING:
    from collections.abc import Iterable

    from crowdin_client.models.api_models import ResponseList
    from crowdin_client.models.patch_models import PatchEntry
    from crowdin_client.models.source_files_models import AddBranchRequest, AddDirectoryRequest, AddFileRequest

__all__: list[str] = ["SourceFilesApiExecutor"]


class SourceFilesApiExecutor(ApiExecutor):
    ENDPOINTS: ClassVar[dict[str, Endpoint]] = {
        "list_branches": Endpoint("GET", "/projects/{project_id}/branches", Branch, is_list=True),
        "add_branch": Endpoint("POST", "/projects/{project_id}/branches", Branch),
        "get_branch": Endpoint("GET", "/projects/{project_id}/branches/{branch_id}", Branch),
        "delete_branch": Endpoint("DELETE", "/projects/{project_id}/branches/{branch_id}"),
        "edit_branch": Endpoint("PATCH", "/projects/{project_id}/branches/{branch_id}", Branch),
        "list_directories": Endpoint("GET", "/projects/{project_id}/directories", Directory, is_list=True),
        "add_directory": Endpoint("POST", "/projects/{project_id}/directories", Directory),
        "get_directory": Endpoint("GET", "/projects/{project_id}/directories/{directory_id}", Directory),
        "delete_directory": Endpoint("DELETE", "/projects/{project_id}/directories/{directory_id}"),
        "edit_directory": Endpoint("PATCH", "/projects/{project_id}/directories/{directory_id}", Directory),
        "list_files": Endpoint("GET", "/projects/{project_id}/files", FileResource, is_list=True),
        "add_file": Endpoint("POST", "/projects/{project_id}/files", FileResource),
        "get_file": Endpoint("GET", "/projects/{project_id}/files/{file_id}", FileResource),
        "delete_file": Endpoint("DELETE", "/projects/{project_id}/files/{file_id}"),
        "edit_file": Endpoint("PATCH", "/projects/{project_id}/files/{file_id}", FileResource),
        "download_file": Endpoint("GET", "/projects/{project_id}/files/{file_id}/download", DownloadLink),
    }

    # Branches

    async def list_branches(
        self, project_id: int, name: str | None = None, limit: int = DEFAULT_PAGE_LIMIT, offset: int = 0
    ) -> ResponseList[Branch]:
        return await self._execute(
            "list_branches", path_params={"project_id": project_id}, query_params=page_params(limit, offset, name=name)
        )

    async def add_branch(self, project_id: int, request: AddBranchRequest) -> Branch:
        return await self._execute("add_branch", path_params={"project_id": project_id}, body=request)

    async def get_branch(self, project_id: int, branch_id: int) -> Branch:
        return await self._execute("get_branch", path_params={"project_id": project_id, "branch_id": branch_id})

    async def delete_branch(self, project_id: int, branch_id: int) -> None:
        await self._execute("delete_branch", path_params={"project_id": project_id, "branch_id": branch_id})

    async def edit_branch(self, project_id: int, branch_id: int, patches: Iterable[PatchEntry]) -> Branch:
        return await self._execute(
            "edit_branch", path_params={"project_id": project_id, "branch_id": branch_id}, patches=patches
        )

    # Directories

    async def list_directories(
        self,
        project_id: int,
        branch_id: int | None = None,
        directory_id: int | None = None,
        recursion: bool | None = None,
        limit: int = DEFAULT_PAGE_LIMIT,
        offset: int = 0,
    ) -> ResponseList[Directory]:
        query = page_params(limit, offset, branchId=branch_id, directoryId=directory_id, recursion=recursion)
        return await self._execute("list_directories", path_params={"project_id": project_id}, query_params=query)

    async def add_directory(self, project_id: int, request: AddDirectoryRequest) -> Directory:
        return await self._execute("add_directory", path_params={"project_id": project_id}, body=request)

    async def get_directory(self, project_id: int, directory_id: int) -> Directory:
        return await self._execute(
            "get_directory", path_params={"project_id": project_id, "directory_id": directory_id}
        )

    async def delete_directory(self, project_id: int, directory_id: int) -> None:
        await self._execute("delete_directory", path_params={"project_id": project_id, "directory_id": directory_id})

    async def edit_directory(self, project_id: int, directory_id: int, patches: Iterable[PatchEntry]) -> Directory:
        return await self._execute(
            "edit_directory", path_params={"project_id": project_id, "directory_id": directory_id}, patches=patches
        )

    # Files

    async def list_files(
        self,
        project_id: int,
        branch_id: int | None = None,
        directory_id: int | None = None,
        recursion: bool | None = None,
        limit: int = DEFAULT_PAGE_LIMIT,
        offset: int = 0,
    ) -> ResponseList[FileResource]:
        query = page_params(limit, offset, branchId=branch_id, directoryId=directory_id, recursion=recursion)
        return await self._execute("list_files", path_params={"project_id": project_id}, query_params=query)

    async def add_file(self, project_id: int, request: AddFileRequest) -> FileResource:
        """Add a source file from a storage entry created with ``StorageApiExecutor.add_storage``."""
        return await self._execute("add_file", path_params={"project_id": project_id}, body=request)

    async def get_file(self, project_id: int, file_id: int) -> FileResource:
        return await self._execute("get_file", path_params={"project_id": project_id, "file_id": file_id})

    async def delete_file(self, project_id: int, file_id: int) -> None:
        await self._execute("delete_file", path_params={"project_id": project_id, "file_id": file_id})

    async def edit_file(self, project_id: int, file_id: int, patches: Iterable[PatchEntry]) -> FileResource:
        return await self._execute(
            "edit_file", path_params={"project_id": project_id, "file_id": file_id}, patches=patches
        )

    async def download_file(self, project_id: int, file_id: int) -> DownloadLink:
        return await self._execute("download_file", path_params={"project_id": project_id, "file_id": file_id})
