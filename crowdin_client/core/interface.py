"""Abstract interface of the request pipeline as seen by the resource executors."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, BinaryIO

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from crowdin_client.models.api_models import ApiResult
    from crowdin_client.models.patch_models import PatchEntry

__all__: list[str] = ["CrowdinApiClientInterface"]


class CrowdinApiClientInterface(ABC):
    """Primitive calls the executors are built on.

    Each call is independent and may run concurrently with others.
    """

    @property
    def is_enterprise(self) -> bool:
        """Whether requests go to an Enterprise organization rather than crowdin.com."""
        return False

    @abstractmethod
    async def send_get(self, path: str, query_params: Mapping[str, Any] | None = None) -> ApiResult:
        pass

    @abstractmethod
    async def send_post(self, path: str, body: Any, extra_headers: Mapping[str, str] | None = None) -> ApiResult:
        pass

    @abstractmethod
    async def send_put(self, path: str, body: Any) -> ApiResult:
        pass

    @abstractmethod
    async def send_patch(self, path: str, entries: Iterable[PatchEntry]) -> ApiResult:
        pass

    @abstractmethod
    async def send_delete(self, path: str) -> int:
        """Send a DELETE request and return the bare status code of a successful answer."""

    @abstractmethod
    async def upload_file(self, path: str, filename: str, stream: bytes | BinaryIO) -> ApiResult:
        pass
