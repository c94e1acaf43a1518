"""Declarative endpoint table and the generic executor that drives it.

Resource executors declare their endpoints as ``Endpoint`` entries and expose thin,
typed methods that call ``ApiExecutor._execute``. No endpoint carries logic of its own:
every call is built, sent, decoded and mapped the same way.
"""

from __future__ import annotations

from dataclasses import dataclass
from http import HTTPStatus
from typing import TYPE_CHECKING, Any, BinaryIO, ClassVar, TypeVar
from urllib.parse import quote

from dataclasses_json import DataClassJsonMixin

from crowdin_client.core.exceptions import CrowdinApiError
from crowdin_client.models.api_models import ResponseList
from crowdin_client.utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Iterable, Mapping

    from crowdin_client.core.interface import CrowdinApiClientInterface
    from crowdin_client.models.api_models import ApiResult, HTTPMethod
    from crowdin_client.models.patch_models import PatchEntry

__all__: list[str] = ["DEFAULT_PAGE_LIMIT", "ApiExecutor", "Endpoint", "page_params"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

T = TypeVar("T", bound=DataClassJsonMixin)

DEFAULT_PAGE_LIMIT: int = 25


def page_params(limit: int, offset: int, **filters: Any) -> dict[str, Any]:
    """Build the query parameters of a list call; None filters are dropped by the request builder."""
    return {**filters, "limit": limit, "offset": offset}


@dataclass(frozen=True)
class Endpoint:
    """One remote operation.

    Attributes:
        method (HTTPMethod): HTTP verb.
        path (str): Path template relative to the base URL, e.g. ``/projects/{project_id}/files``.
        model (type[DataClassJsonMixin] | None): Response model; None returns the raw JSON body.
        is_list (bool): Whether the answer is a paginated list envelope.
        upload (bool): Whether the body is sent as a raw file upload.
        expected_status (int): Status a DELETE call must answer with.
    """

    method: HTTPMethod
    path: str
    model: type[DataClassJsonMixin] | None = None
    is_list: bool = False
    upload: bool = False
    expected_status: int = HTTPStatus.NO_CONTENT


class ApiExecutor:
    """Base class of the resource executors."""

    ENDPOINTS: ClassVar[dict[str, Endpoint]] = {}

    def __init__(self, client: CrowdinApiClientInterface) -> None:
        self.client: CrowdinApiClientInterface = client

    async def _execute(
        self,
        name: str,
        *,
        path_params: Mapping[str, Any] | None = None,
        query_params: Mapping[str, Any] | None = None,
        body: Any = None,
        patches: Iterable[PatchEntry] | None = None,
        filename: str = "",
        stream: bytes | BinaryIO | None = None,
        model: type[DataClassJsonMixin] | None = None,
    ) -> Any:
        """Run the named endpoint and map its answer.

        Args:
            name (str): Key of the endpoint in ``ENDPOINTS``.
            path_params (Mapping[str, Any] | None): Values for the path template;
                each is percent-encoded as one whole segment.
            query_params (Mapping[str, Any] | None): Query parameters of GET calls.
            body (Any): Request body of POST/PUT calls.
            patches (Iterable[PatchEntry] | None): Operations of PATCH calls.
            filename (str): File name of uploads.
            stream (bytes | BinaryIO | None): Content of uploads.
            model (type[DataClassJsonMixin] | None): Overrides the endpoint's response model.
        Returns:
            Any: A model, a ResponseList of models, the raw JSON body, or None for DELETE.
        Raises:
            CrowdinApiError: If the answer cannot be mapped, or a DELETE answers with an unexpected status.
        """
        endpoint: Endpoint = self.ENDPOINTS[name]
        segments: dict[str, str] = {key: quote(str(value), safe="") for key, value in (path_params or {}).items()}
        path: str = endpoint.path.format(**segments)
        logger.info("'%s': %s '%s'", name, endpoint.method, path)

        if endpoint.method == "DELETE":
            status: int = await self.client.send_delete(path)
            if status != endpoint.expected_status:
                msg: str = f"'{name}' failed: expected status {endpoint.expected_status}, got {status}"
                raise CrowdinApiError(msg, status=status)
            return None

        result: ApiResult = await self._send(endpoint, path, query_params, body, patches, filename, stream)
        return self._map(name, endpoint, result, model or endpoint.model)

    async def _send(
        self,
        endpoint: Endpoint,
        path: str,
        query_params: Mapping[str, Any] | None,
        body: Any,
        patches: Iterable[PatchEntry] | None,
        filename: str,
        stream: bytes | BinaryIO | None,
    ) -> ApiResult:
        if endpoint.method == "GET":
            return await self.client.send_get(path, query_params)
        if endpoint.method == "POST" and endpoint.upload:
            return await self.client.upload_file(path, filename, stream if stream is not None else b"")
        if endpoint.method == "POST":
            return await self.client.send_post(path, body if body is not None else {})
        if endpoint.method == "PUT":
            return await self.client.send_put(path, body if body is not None else {})
        if endpoint.method == "PATCH":
            return await self.client.send_patch(path, list(patches or []))
        msg: str = f"Unsupported HTTP method: {endpoint.method}"
        raise ValueError(msg)

    @staticmethod
    def _map(name: str, endpoint: Endpoint, result: ApiResult, model: type[T] | None) -> Any:
        if model is None:
            return result.json_body
        try:
            if endpoint.is_list:
                return ResponseList.parse(result.json_body, lambda item: model.from_dict(item, infer_missing=True))
            return model.from_dict(result.json_body["data"], infer_missing=True)
        except (KeyError, TypeError, AttributeError, ValueError) as err:
            msg: str = f"The response data of '{name}' is invalid: {err}"
            logger.error(msg)
            raise CrowdinApiError(msg, status=result.status_code) from err
