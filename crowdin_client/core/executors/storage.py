"""Storage API executor."""

from __future__ import annotations

from typing import TYPE_CHECKING, BinaryIO, ClassVar

from crowdin_client.core.executors.base import DEFAULT_PAGE_LIMIT, ApiExecutor, Endpoint, page_params
from crowdin_client.models.storage_models import StorageResource

if TYPE_CHECKING:
    from crowdin_client.models.api_models import ResponseList

__all__: list[str] = ["StorageApiExecutor"]


class StorageApiExecutor(ApiExecutor):
    ENDPOINTS: ClassVar[dict[str, Endpoint]] = {
        "list_storages": Endpoint("GET", "/storages", StorageResource, is_list=True),
        "add_storage": Endpoint("POST", "/storages", StorageResource, upload=True),
        "get_storage": Endpoint("GET", "/storages/{storage_id}", StorageResource),
        "delete_storage": Endpoint("DELETE", "/storages/{storage_id}"),
    }

    async def list_storages(self, limit: int = DEFAULT_PAGE_LIMIT, offset: int = 0) -> ResponseList[StorageResource]:
        return await self._execute("list_storages", query_params=page_params(limit, offset))

    async def add_storage(self, filename: str, stream: bytes | BinaryIO) -> StorageResource:
        """Upload a file to the storage; the returned id is used to add or update source files."""
        return await self._execute("add_storage", filename=filename, stream=stream)

    async def get_storage(self, storage_id: int) -> StorageResource:
        return await self._execute("get_storage", path_params={"storage_id": storage_id})

    async def delete_storage(self, storage_id: int) -> None:
        await self._execute("delete_storage", path_params={"storage_id": storage_id})
