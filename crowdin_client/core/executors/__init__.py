"""Resource executors: one typed method per remote endpoint, grouped by resource family."""

from crowdin_client.core.executors.base import ApiExecutor, Endpoint
from crowdin_client.core.executors.languages import LanguagesApiExecutor
from crowdin_client.core.executors.projects_groups import ProjectsGroupsApiExecutor
from crowdin_client.core.executors.source_files import SourceFilesApiExecutor
from crowdin_client.core.executors.storage import StorageApiExecutor
from crowdin_client.core.executors.translation_status import TranslationStatusApiExecutor
from crowdin_client.core.executors.translations import TranslationsApiExecutor

__all__: list[str] = [
    "ApiExecutor",
    "Endpoint",
    "LanguagesApiExecutor",
    "ProjectsGroupsApiExecutor",
    "SourceFilesApiExecutor",
    "StorageApiExecutor",
    "TranslationStatusApiExecutor",
    "TranslationsApiExecutor",
]
