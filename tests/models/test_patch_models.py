from __future__ import annotations

import pytest

from crowdin_client.models.languages_models import LanguagePatchPathCode
from crowdin_client.models.patch_models import PatchEntry, PatchOperation, PatchPath, encode_patch_value
from crowdin_client.models.projects_models import AddGroupRequest, ProjectInfoPathCode, ProjectSettingPathCode


def test_path_escapes_slash_and_tilde() -> None:
    assert str(PatchPath("languageMapping", "a/b", "c~d")) == "/languageMapping/a~1b/c~0d"
    # '~1' in the input must not be unescaped to '/'
    assert str(PatchPath("~1")) == "/~01"


def test_path_child_and_numeric_segments() -> None:
    path = ProjectInfoPathCode.LANGUAGE_MAPPING.path("en")
    assert str(path.child("two_letters_code", 2)) == "/languageMapping/en/two_letters_code/2"


def test_path_code_is_converted_to_pointer() -> None:
    entry = PatchEntry(PatchOperation.REPLACE, ProjectSettingPathCode.IS_MT_ALLOWED, value=True)
    assert entry.to_dict() == {"op": "replace", "path": "/isMtAllowed", "value": True}


def test_plain_string_path_is_used_verbatim() -> None:
    entry = PatchEntry("replace", "/name", "Renamed")
    assert entry.op is PatchOperation.REPLACE
    assert entry.to_dict() == {"op": "replace", "path": "/name", "value": "Renamed"}


def test_false_and_zero_values_are_sent() -> None:
    assert PatchEntry("replace", "/publicDownloads", False).to_dict()["value"] is False
    assert PatchEntry("replace", "/translateDuplicates", 0).to_dict()["value"] == 0


def test_move_and_copy_require_from_path() -> None:
    with pytest.raises(ValueError, match="from_path"):
        PatchEntry(PatchOperation.MOVE, "/name")

    entry = PatchEntry(PatchOperation.COPY, LanguagePatchPathCode.NAME, from_path=LanguagePatchPathCode.LOCALE_CODE)
    assert entry.to_dict() == {"op": "copy", "path": "/name", "from": "/localeCode"}


def test_unknown_operation_is_rejected() -> None:
    with pytest.raises(ValueError):
        PatchEntry("merge", "/name", "x")


@pytest.mark.parametrize("value", [b"raw", object(), {1, 2}])
def test_unsupported_values_raise_type_error(value: object) -> None:
    with pytest.raises(TypeError):
        PatchEntry(PatchOperation.REPLACE, "/name", value)  # type: ignore[arg-type]


def test_encode_patch_value_containers_and_models() -> None:
    value = {"mapping": {"en": "en-US", "skip": None}, "ids": ("uk", "es"), "group": AddGroupRequest(name="G")}
    assert encode_patch_value(value) == {
        "mapping": {"en": "en-US"},
        "ids": ["uk", "es"],
        "group": {"name": "G"},
    }
