"""Source files API data models: branches, directories and files."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from dataclasses_json import DataClassJsonMixin, LetterCase, dataclass_json

from crowdin_client.models.patch_models import PatchPathCode

__all__: list[str] = [
    "AddBranchRequest",
    "AddDirectoryRequest",
    "AddFileRequest",
    "Branch",
    "Directory",
    "DownloadLink",
    "FilePatchPathCode",
    "FileResource",
    "Priority",
    "SourceItemPatchPathCode",
]


class Priority(StrEnum):
    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"


class SourceItemPatchPathCode(PatchPathCode):
    """Patchable members shared by branches and directories."""

    NAME = "name"
    TITLE = "title"
    EXPORT_PATTERN = "exportPattern"
    PRIORITY = "priority"
    BRANCH_ID = "branchId"
    DIRECTORY_ID = "directoryId"


class FilePatchPathCode(PatchPathCode):
    NAME = "name"
    TITLE = "title"
    PRIORITY = "priority"
    BRANCH_ID = "branchId"
    DIRECTORY_ID = "directoryId"
    EXCLUDED_TARGET_LANGUAGES = "excludedTargetLanguages"
    ATTACH_LABEL_IDS = "attachLabelIds"
    DETACH_LABEL_IDS = "detachLabelIds"


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class Branch(DataClassJsonMixin):
    id: int = 0
    project_id: int = 0
    name: str = ""
    title: str | None = None
    export_pattern: str | None = None
    priority: Priority = Priority.NORMAL
    created_at: str = ""
    updated_at: str | None = None


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class AddBranchRequest(DataClassJsonMixin):
    name: str
    title: str | None = None
    export_pattern: str | None = None
    priority: Priority | None = None


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class Directory(DataClassJsonMixin):
    id: int = 0
    project_id: int = 0
    branch_id: int | None = None
    directory_id: int | None = None
    name: str = ""
    title: str | None = None
    export_pattern: str | None = None
    priority: Priority = Priority.NORMAL
    created_at: str = ""
    updated_at: str | None = None


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class AddDirectoryRequest(DataClassJsonMixin):
    """Body of ``POST /projects/{projectId}/directories``.

    ``branch_id`` and ``directory_id`` are mutually exclusive on the server side.
    """

    name: str
    branch_id: int | None = None
    directory_id: int | None = None
    title: str | None = None
    export_pattern: str | None = None
    priority: Priority | None = None


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class FileResource(DataClassJsonMixin):
    """A source file of a project.

    Attributes:
        id (int): File identifier.
        project_id (int): Owning project.
        branch_id (int | None): Branch the file belongs to.
        directory_id (int | None): Parent directory.
        name (str): File name including extension.
        title (str | None): Display title.
        type (str): Crowdin file type (e.g. "android", "json", "auto").
        revision_id (int): Current revision.
        status (str): Processing status.
        priority (Priority): Translation priority.
        path (str): Full path inside the project.
        excluded_target_languages (list[str] | None): Languages this file is not translated into.
        created_at (str): Creation timestamp (ISO 8601).
        updated_at (str | None): Last update timestamp (ISO 8601).
    """

    id: int = 0
    project_id: int = 0
    branch_id: int | None = None
    directory_id: int | None = None
    name: str = ""
    title: str | None = None
    type: str = ""
    revision_id: int = 0
    status: str = ""
    priority: Priority = Priority.NORMAL
    path: str = ""
    excluded_target_languages: list[str] | None = None
    created_at: str = ""
    updated_at: str | None = None


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class AddFileRequest(DataClassJsonMixin):
    storage_id: int
    name: str
    branch_id: int | None = None
    directory_id: int | None = None
    title: str | None = None
    type: str | None = None
    export_options: dict[str, str] | None = None
    excluded_target_languages: list[str] | None = None
    attach_label_ids: list[int] | None = None


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class DownloadLink(DataClassJsonMixin):
    url: str = ""
    expire_in: str = ""
