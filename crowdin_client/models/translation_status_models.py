"""Translation status API data models."""

from __future__ import annotations

from dataclasses import dataclass, field

from dataclasses_json import DataClassJsonMixin, LetterCase, dataclass_json

__all__: list[str] = ["ProgressCount", "QaCheckIssue", "TranslationProgress"]


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class ProgressCount(DataClassJsonMixin):
    total: int = 0
    translated: int = 0
    approved: int = 0


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class TranslationProgress(DataClassJsonMixin):
    """Translation and approval progress of one language or one file.

    Language-scoped progress fills ``language_id``; file-scoped progress fills ``file_id``.

    Attributes:
        words (ProgressCount): Word counts.
        phrases (ProgressCount): String counts.
        translation_progress (int): Translated percentage.
        approval_progress (int): Approved percentage.
        language_id (str | None): Language the counts refer to.
        file_id (int | None): File the counts refer to.
        eta (str | None): Estimated completion, when reported.
    """

    words: ProgressCount = field(default_factory=ProgressCount)
    phrases: ProgressCount = field(default_factory=ProgressCount)
    translation_progress: int = 0
    approval_progress: int = 0
    language_id: str | None = None
    file_id: int | None = None
    eta: str | None = None


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class QaCheckIssue(DataClassJsonMixin):
    string_id: int = 0
    language_id: str = ""
    category: str = ""
    category_description: str = ""
    validation: str = ""
    validation_description: str = ""
    plural_id: int = 0
    text: str = ""
