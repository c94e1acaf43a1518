"""Projects and groups API executor.

Project answers differ between the regular API and Enterprise organizations. When no
model is given, EnterpriseProject is used for Enterprise clients and Project otherwise.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, TypeVar

from crowdin_client.core.executors.base import DEFAULT_PAGE_LIMIT, ApiExecutor, Endpoint, page_params
from crowdin_client.models.projects_models import EnterpriseProject, Group, Project, ProjectBase, ProjectSettings

if TYPE_CHECKING:
    from collections.abc import Iterable

    from crowdin_client.models.api_models import ResponseList
    from crowdin_client.models.patch_models import PatchEntry
    from crowdin_client.models.projects_models import AddGroupRequest, AddProjectRequest

__all__: list[str] = ["ProjectsGroupsApiExecutor"]

TProject = TypeVar("TProject", bound=ProjectBase)


class ProjectsGroupsApiExecutor(ApiExecutor):
    ENDPOINTS: ClassVar[dict[str, Endpoint]] = {
        "list_groups": Endpoint("GET", "/groups", Group, is_list=True),
        "add_group": Endpoint("POST", "/groups", Group),
        "get_group": Endpoint("GET", "/groups/{group_id}", Group),
        "delete_group": Endpoint("DELETE", "/groups/{group_id}"),
        "edit_group": Endpoint("PATCH", "/groups/{group_id}", Group),
        "list_projects": Endpoint("GET", "/projects", is_list=True),
        "add_project": Endpoint("POST", "/projects"),
        "get_project": Endpoint("GET", "/projects/{project_id}"),
        "delete_project": Endpoint("DELETE", "/projects/{project_id}"),
        "edit_project": Endpoint("PATCH", "/projects/{project_id}", ProjectSettings),
    }

    def _project_model(self, model: type[TProject] | None) -> type[ProjectBase]:
        if model is not None:
            return model
        return EnterpriseProject if self.client.is_enterprise else Project

    async def list_groups(
        self, parent_id: int | None = None, limit: int = DEFAULT_PAGE_LIMIT, offset: int = 0
    ) -> ResponseList[Group]:
        return await self._execute("list_groups", query_params=page_params(limit, offset, parentId=parent_id))

    async def add_group(self, request: AddGroupRequest) -> Group:
        return await self._execute("add_group", body=request)

    async def get_group(self, group_id: int) -> Group:
        return await self._execute("get_group", path_params={"group_id": group_id})

    async def delete_group(self, group_id: int) -> None:
        await self._execute("delete_group", path_params={"group_id": group_id})

    async def edit_group(self, group_id: int, patches: Iterable[PatchEntry]) -> Group:
        return await self._execute("edit_group", path_params={"group_id": group_id}, patches=patches)

    async def list_projects(
        self,
        user_id: int | None = None,
        group_id: int | None = None,
        has_manager_access: bool | None = None,
        limit: int = DEFAULT_PAGE_LIMIT,
        offset: int = 0,
        *,
        model: type[TProject] | None = None,
    ) -> ResponseList[TProject]:
        """List projects visible to the token.

        Args:
            user_id (int | None): Only projects of this user (regular API).
            group_id (int | None): Only projects of this group (Enterprise API).
            has_manager_access (bool | None): Only projects the token can manage.
            limit (int): Page size.
            offset (int): Page start.
            model (type[TProject] | None): Project model to map items into.
        """
        query = page_params(limit, offset, userId=user_id, groupId=group_id, hasManagerAccess=has_manager_access)
        return await self._execute("list_projects", query_params=query, model=self._project_model(model))

    async def add_project(self, request: AddProjectRequest, *, model: type[TProject] | None = None) -> TProject:
        return await self._execute("add_project", body=request, model=self._project_model(model))

    async def get_project(self, project_id: int, *, model: type[TProject] | None = None) -> TProject:
        return await self._execute(
            "get_project", path_params={"project_id": project_id}, model=self._project_model(model)
        )

    async def delete_project(self, project_id: int) -> None:
        await self._execute("delete_project", path_params={"project_id": project_id})

    async def edit_project(
        self, project_id: int, patches: Iterable[PatchEntry], *, model: type[TProject] | None = None
    ) -> TProject:
        """Apply JSON-Patch operations to a project.

        Operations are sent in the given order, so a ``test`` entry placed before a
        ``replace`` acts as its precondition. Paths come from ``ProjectInfoPathCode`` and
        ``ProjectSettingPathCode``. The answer includes the project settings.
        """
        return await self._execute(
            "edit_project", path_params={"project_id": project_id}, patches=patches, model=model
        )
