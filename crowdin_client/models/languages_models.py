"""Languages API data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from dataclasses_json import DataClassJsonMixin, LetterCase, dataclass_json

from crowdin_client.models.patch_models import PatchPathCode

__all__: list[str] = ["AddCustomLanguageRequest", "Language", "LanguagePatchPathCode", "TextDirection"]


class TextDirection(StrEnum):
    LTR = "ltr"
    RTL = "rtl"


class LanguagePatchPathCode(PatchPathCode):
    NAME = "name"
    TEXT_DIRECTION = "textDirection"
    PLURAL_CATEGORY_NAMES = "pluralCategoryNames"
    THREE_LETTERS_CODE = "threeLettersCode"
    LOCALE_CODE = "localeCode"
    DIALECT_OF = "dialectOf"


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class Language(DataClassJsonMixin):
    """A supported or custom language.

    Attributes:
        id (str): Crowdin language id (e.g. "uk", "es-ES").
        name (str): English language name.
        editor_code (str): Code used by the online editor.
        two_letters_code (str): ISO 639-1 code.
        three_letters_code (str): ISO 639-3 code.
        locale (str): Locale code (e.g. "uk-UA").
        android_code (str): Code used in Android resource folders.
        osx_code (str): Code used by macOS bundles.
        osx_locale (str): Locale used by macOS bundles.
        plural_category_names (list[str]): CLDR plural categories.
        plural_rules (str): Plural rule expression.
        plural_examples (list[str]): Example numbers per plural category.
        text_direction (TextDirection): Writing direction.
        dialect_of (str | None): Parent language id for dialects.
    """

    id: str = ""
    name: str = ""
    editor_code: str = ""
    two_letters_code: str = ""
    three_letters_code: str = ""
    locale: str = ""
    android_code: str = ""
    osx_code: str = ""
    osx_locale: str = ""
    plural_category_names: list[str] = field(default_factory=list)
    plural_rules: str = ""
    plural_examples: list[str] = field(default_factory=list)
    text_direction: TextDirection = TextDirection.LTR
    dialect_of: str | None = None


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class AddCustomLanguageRequest(DataClassJsonMixin):
    name: str
    code: str
    locale_code: str
    text_direction: TextDirection
    plural_category_names: list[str]
    three_letters_code: str
    two_letters_code: str | None = None
    dialect_of: str | None = None
