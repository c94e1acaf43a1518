"""JSON-Patch request models used for partial updates.

A PATCH body is an ordered list of PatchEntry objects. Paths are built from
segments instead of formatted strings so that segment values containing '/'
or '~' are escaped the way JSON Pointer requires.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any, TypeAlias

from dataclasses_json import DataClassJsonMixin

__all__: list[str] = [
    "PatchEntry",
    "PatchOperation",
    "PatchPath",
    "PatchPathCode",
    "PatchValue",
    "encode_patch_value",
]

PatchValue: TypeAlias = bool | int | float | str | Mapping[str, Any] | Sequence[Any] | DataClassJsonMixin


class PatchOperation(StrEnum):
    ADD = "add"
    REMOVE = "remove"
    REPLACE = "replace"
    TEST = "test"
    MOVE = "move"
    COPY = "copy"


class PatchPathCode(StrEnum):
    """Base for enums naming the patchable top-level members of a resource."""

    def path(self, *segments: str | int) -> PatchPath:
        """Return the pointer to this member, optionally extended with nested segments."""
        return PatchPath(self.value, *segments)


@dataclass(frozen=True, init=False)
class PatchPath:
    """JSON Pointer assembled from ordered segments.

    Example:
        ``str(PatchPath("languageMapping", "en", 2))`` renders ``/languageMapping/en/2``.
    """

    segments: tuple[str, ...] = field(default=())

    def __init__(self, *segments: str | int) -> None:
        object.__setattr__(self, "segments", tuple(str(segment) for segment in segments))

    def child(self, *segments: str | int) -> PatchPath:
        """Return a new path with extra segments appended."""
        return PatchPath(*self.segments, *segments)

    @staticmethod
    def escape(segment: str) -> str:
        # '~' must be escaped before '/' so the '~' introduced by '~1' is not escaped again.
        return segment.replace("~", "~0").replace("/", "~1")

    def __str__(self) -> str:
        return "".join(f"/{self.escape(segment)}" for segment in self.segments)


def encode_patch_value(value: PatchValue) -> Any:
    """Convert a patch value into its JSON representation.

    Args:
        value (PatchValue): bool, number, str, mapping, sequence or dataclass model.
            None is accepted inside containers.
    Returns:
        Any: A JSON-compatible value.
    Raises:
        TypeError: If the value is not one of the supported kinds.
    """
    if value is None:
        return None
    if isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, (bytes, bytearray)):
        msg: str = "Binary data cannot be used as a patch value"
        raise TypeError(msg)
    if isinstance(value, DataClassJsonMixin):
        return encode_patch_value(value.to_dict(encode_json=True))
    if isinstance(value, Mapping):
        return {str(key): encode_patch_value(item) for key, item in value.items() if item is not None}
    if isinstance(value, Sequence):
        return [encode_patch_value(item) for item in value]
    msg = f"Unsupported patch value type: {type(value).__name__}"
    raise TypeError(msg)


@dataclass(frozen=True)
class PatchEntry:
    """One operation of a JSON-Patch request.

    Attributes:
        op (PatchOperation): The operation to apply.
        path (PatchPath | str): Target location. Plain strings are used verbatim,
            PatchPathCode members are turned into single-segment pointers.
        value (PatchValue | None): Payload for add/replace/test.
        from_path (PatchPath | str | None): Source location, required for move/copy.
    """

    op: PatchOperation
    path: PatchPath | str
    value: PatchValue | None = None
    from_path: PatchPath | str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "op", PatchOperation(self.op))
        if isinstance(self.path, PatchPathCode):
            object.__setattr__(self, "path", self.path.path())
        if isinstance(self.from_path, PatchPathCode):
            object.__setattr__(self, "from_path", self.from_path.path())
        if self.op in (PatchOperation.MOVE, PatchOperation.COPY) and self.from_path is None:
            msg: str = f"'{self.op}' operation requires from_path"
            raise ValueError(msg)
        if self.value is not None:
            encode_patch_value(self.value)

    def to_dict(self) -> dict[str, Any]:
        """Serialize the entry as ``{"op", "path", "value"}``; absent members are omitted."""
        data: dict[str, Any] = {"op": self.op.value, "path": str(self.path)}
        if self.from_path is not None:
            data["from"] = str(self.from_path)
        if self.value is not None:
            data["value"] = encode_patch_value(self.value)
        return data
