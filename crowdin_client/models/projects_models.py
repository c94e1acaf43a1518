"""Projects and groups API data models.

The regular (crowdin.com) and Enterprise APIs return different project shapes.
Project and EnterpriseProject share ProjectBase; ProjectSettings extends either
answer with the settings block returned when a project is requested with settings.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from dataclasses_json import DataClassJsonMixin, LetterCase, dataclass_json

from crowdin_client.models.patch_models import PatchPathCode

__all__: list[str] = [
    "AddGroupRequest",
    "AddProjectRequest",
    "EnterpriseProject",
    "Group",
    "GroupPatchPathCode",
    "Project",
    "ProjectBase",
    "ProjectInfoPathCode",
    "ProjectSettingPathCode",
    "ProjectSettings",
    "ProjectVisibility",
]


class ProjectVisibility(StrEnum):
    OPEN = "open"
    PRIVATE = "private"


class GroupPatchPathCode(PatchPathCode):
    NAME = "name"
    DESCRIPTION = "description"
    PARENT_ID = "parentId"


class ProjectInfoPathCode(PatchPathCode):
    """Patchable project information members.

    Nested members are addressed through ``path``, e.g.
    ``ProjectInfoPathCode.LANGUAGE_MAPPING.path("en", "2")`` -> ``/languageMapping/en/2``.
    """

    NAME = "name"
    CNAME = "cname"
    DESCRIPTION = "description"
    VISIBILITY = "visibility"
    LANGUAGE_ACCESS_POLICY = "languageAccessPolicy"
    TARGET_LANGUAGE_IDS = "targetLanguageIds"
    LANGUAGE_MAPPING = "languageMapping"
    BACKGROUND = "background"


class ProjectSettingPathCode(PatchPathCode):
    TRANSLATE_DUPLICATES = "translateDuplicates"
    IS_MT_ALLOWED = "isMtAllowed"
    AUTO_SUBSTITUTION = "autoSubstitution"
    AUTO_TRANSLATE_DIALECTS = "autoTranslateDialects"
    PUBLIC_DOWNLOADS = "publicDownloads"
    HIDDEN_STRINGS_PROOFREADERS_ACCESS = "hiddenStringsProofreadersAccess"
    USE_GLOBAL_TM = "useGlobalTm"
    SKIP_UNTRANSLATED_STRINGS = "skipUntranslatedStrings"
    SKIP_UNTRANSLATED_FILES = "skipUntranslatedFiles"
    EXPORT_APPROVED_ONLY = "exportApprovedOnly"
    QA_CHECK_IS_ACTIVE = "qaCheckIsActive"
    IN_CONTEXT = "inContext"


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class Group(DataClassJsonMixin):
    id: int = 0
    name: str = ""
    description: str | None = None
    parent_id: int | None = None
    organization_id: int = 0
    user_id: int = 0
    subgroups_count: int = 0
    projects_count: int = 0
    created_at: str = ""
    updated_at: str | None = None


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class AddGroupRequest(DataClassJsonMixin):
    name: str
    parent_id: int | None = None
    description: str | None = None


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class ProjectBase(DataClassJsonMixin):
    """Members shared by regular and Enterprise projects.

    Attributes:
        id (int): Project identifier.
        user_id (int): Owner id.
        source_language_id (str): Source language id.
        target_language_ids (list[str]): Target language ids.
        name (str): Project name.
        identifier (str): URL identifier.
        description (str | None): Project description.
        logo (str | None): Base64 encoded logo.
        language_mapping (dict[str, Any] | None): Custom language codes keyed by language id.
        last_activity (str | None): Timestamp of the last activity (ISO 8601).
        created_at (str): Creation timestamp (ISO 8601).
        updated_at (str | None): Last update timestamp (ISO 8601).
    """

    id: int = 0
    user_id: int = 0
    source_language_id: str = ""
    target_language_ids: list[str] = field(default_factory=list)
    name: str = ""
    identifier: str = ""
    description: str | None = None
    logo: str | None = None
    language_mapping: dict[str, Any] | None = None
    last_activity: str | None = None
    created_at: str = ""
    updated_at: str | None = None


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class Project(ProjectBase):
    cname: str | None = None
    visibility: ProjectVisibility | None = None
    public_downloads: bool = False


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class EnterpriseProject(ProjectBase):
    group_id: int | None = None
    background: str | None = None
    is_external: bool = False
    external_type: str | None = None
    workflow_id: int | None = None
    has_crowdsourcing: bool = False


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class ProjectSettings(Project):
    translate_duplicates: int = 0
    is_mt_allowed: bool = False
    auto_substitution: bool = False
    auto_translate_dialects: bool = False
    hidden_strings_proofreaders_access: bool = False
    use_global_tm: bool = False
    skip_untranslated_strings: bool = False
    skip_untranslated_files: bool = False
    export_approved_only: bool = False
    qa_check_is_active: bool = False
    in_context: bool = False


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class AddProjectRequest(DataClassJsonMixin):
    """Body of ``POST /projects``.

    ``group_id`` is only honoured by the Enterprise API; ``visibility`` and ``cname``
    only by the regular API. Unset members are omitted from the request.
    """

    name: str
    source_language_id: str
    identifier: str | None = None
    target_language_ids: list[str] | None = None
    visibility: ProjectVisibility | None = None
    cname: str | None = None
    description: str | None = None
    group_id: int | None = None
    language_access_policy: str | None = None
