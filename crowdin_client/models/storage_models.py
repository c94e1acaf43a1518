"""Storage API data models."""

from __future__ import annotations

from dataclasses import dataclass

from dataclasses_json import DataClassJsonMixin, LetterCase, dataclass_json

__all__: list[str] = ["StorageResource"]


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class StorageResource(DataClassJsonMixin):
    """A file uploaded to the temporary storage.

    Storage entries are referenced by id when adding source files or uploading translations.

    Attributes:
        id (int): Storage identifier.
        file_name (str): Name passed in the ``Crowdin-API-FileName`` header on upload.
    """

    id: int = 0
    file_name: str = ""
