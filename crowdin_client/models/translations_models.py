"""Translations API data models: builds, uploads and exports."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from dataclasses_json import DataClassJsonMixin, LetterCase, dataclass_json

__all__: list[str] = [
    "BuildProjectTranslationRequest",
    "BuildStatus",
    "ExportProjectTranslationRequest",
    "ProjectBuild",
    "UploadTranslationsRequest",
    "UploadTranslationsResponse",
]


class BuildStatus(StrEnum):
    CREATED = "created"
    IN_PROGRESS = "inProgress"
    CANCELED = "canceled"
    FAILED = "failed"
    FINISHED = "finished"


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class BuildProjectTranslationRequest(DataClassJsonMixin):
    """Body of ``POST /projects/{projectId}/translations/builds``.

    ``export_approved_only`` is only accepted by the regular API and
    ``export_with_min_approvals_count`` only by the Enterprise API.
    """

    branch_id: int | None = None
    target_language_ids: list[str] | None = None
    skip_untranslated_strings: bool | None = None
    skip_untranslated_files: bool | None = None
    export_approved_only: bool | None = None
    export_with_min_approvals_count: int | None = None


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class ProjectBuild(DataClassJsonMixin):
    id: int = 0
    project_id: int = 0
    status: BuildStatus = BuildStatus.CREATED
    progress: int = 0
    created_at: str = ""
    updated_at: str | None = None
    finished_at: str | None = None


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class UploadTranslationsRequest(DataClassJsonMixin):
    storage_id: int
    file_id: int
    import_eq_suggestions: bool | None = None
    auto_approve_imported: bool | None = None
    translate_hidden: bool | None = None


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class UploadTranslationsResponse(DataClassJsonMixin):
    project_id: int = 0
    storage_id: int = 0
    language_id: str = ""
    file_id: int = 0


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class ExportProjectTranslationRequest(DataClassJsonMixin):
    """Body of ``POST /projects/{projectId}/translations/exports``.

    Attributes:
        target_language_id (str): Language to export.
        format (str | None): Output file format (e.g. "xliff", "android").
        label_ids (list[int] | None): Restrict the export to strings with these labels.
        branch_ids (list[int] | None): Restrict the export to these branches.
        directory_ids (list[int] | None): Restrict the export to these directories.
        file_ids (list[int] | None): Restrict the export to these files.
        skip_untranslated_strings (bool | None): Leave out untranslated strings.
        skip_untranslated_files (bool | None): Leave out files that are not fully translated.
        export_approved_only (bool | None): Regular API only.
        export_with_min_approvals_count (int | None): Enterprise API only.
    """

    target_language_id: str
    format: str | None = None
    label_ids: list[int] | None = None
    branch_ids: list[int] | None = None
    directory_ids: list[int] | None = None
    file_ids: list[int] | None = None
    skip_untranslated_strings: bool | None = None
    skip_untranslated_files: bool | None = None
    export_approved_only: bool | None = None
    export_with_min_approvals_count: int | None = None
