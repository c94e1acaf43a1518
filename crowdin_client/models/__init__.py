"""Data models for the Crowdin client.

This package contains the transport envelopes, the JSON-Patch request models,
the configuration dataclasses and the per-resource request/response models.
"""

from __future__ import annotations

from crowdin_client.models.api_models import (
    ApiRequest,
    ApiResult,
    ErrorResource,
    HTTPMethod,
    Pagination,
    RawResponse,
    ResponseList,
)
from crowdin_client.models.config_models import Config
from crowdin_client.models.languages_models import (
    AddCustomLanguageRequest,
    Language,
    LanguagePatchPathCode,
    TextDirection,
)
from crowdin_client.models.patch_models import PatchEntry, PatchOperation, PatchPath, PatchPathCode, PatchValue
from crowdin_client.models.projects_models import (
    AddGroupRequest,
    AddProjectRequest,
    EnterpriseProject,
    Group,
    GroupPatchPathCode,
    Project,
    ProjectBase,
    ProjectInfoPathCode,
    ProjectSettingPathCode,
    ProjectSettings,
    ProjectVisibility,
)
from crowdin_client.models.source_files_models import (
    AddBranchRequest,
    AddDirectoryRequest,
    AddFileRequest,
    Branch,
    Directory,
    DownloadLink,
    FilePatchPathCode,
    FileResource,
    Priority,
    SourceItemPatchPathCode,
)
from crowdin_client.models.storage_models import StorageResource
from crowdin_client.models.translation_status_models import ProgressCount, QaCheckIssue, TranslationProgress
from crowdin_client.models.translations_models import (
    BuildProjectTranslationRequest,
    BuildStatus,
    ExportProjectTranslationRequest,
    ProjectBuild,
    UploadTranslationsRequest,
    UploadTranslationsResponse,
)

__all__: list[str] = [
    "AddBranchRequest",
    "AddCustomLanguageRequest",
    "AddDirectoryRequest",
    "AddFileRequest",
    "AddGroupRequest",
    "AddProjectRequest",
    "ApiRequest",
    "ApiResult",
    "Branch",
    "BuildProjectTranslationRequest",
    "BuildStatus",
    "Config",
    "Directory",
    "DownloadLink",
    "EnterpriseProject",
    "ErrorResource",
    "ExportProjectTranslationRequest",
    "FilePatchPathCode",
    "FileResource",
    "Group",
    "GroupPatchPathCode",
    "HTTPMethod",
    "Language",
    "LanguagePatchPathCode",
    "Pagination",
    "PatchEntry",
    "PatchOperation",
    "PatchPath",
    "PatchPathCode",
    "PatchValue",
    "Priority",
    "ProgressCount",
    "Project",
    "ProjectBase",
    "ProjectBuild",
    "ProjectInfoPathCode",
    "ProjectSettingPathCode",
    "ProjectSettings",
    "ProjectVisibility",
    "QaCheckIssue",
    "RawResponse",
    "ResponseList",
    "SourceItemPatchPathCode",
    "StorageResource",
    "TextDirection",
    "TranslationProgress",
    "UploadTranslationsRequest",
    "UploadTranslationsResponse",
]
