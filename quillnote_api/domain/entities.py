from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


def _str_field(data: dict[str, Any], key: str) -> str:
    value = data[key]
    if not isinstance(value, str):
        raise TypeError(f"{key} must be a string")
    return value


@dataclass(frozen=True)
class Tag:
    id: str
    label: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "label": self.label}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Tag:
        return cls(id=_str_field(data, "id"), label=_str_field(data, "label"))


@dataclass(frozen=True)
class NoteData:
    title: str
    markdown: str
    tags: list[Tag] = field(default_factory=list)


@dataclass(frozen=True)
class RawNote:
    """Persisted note shape; tags are referenced by id and may dangle."""

    id: str
    title: str
    markdown: str
    tag_ids: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "markdown": self.markdown,
            "tagIds": list(self.tag_ids),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RawNote:
        tag_ids = data["tagIds"]
        if not isinstance(tag_ids, list) or not all(isinstance(t, str) for t in tag_ids):
            raise TypeError("tagIds must be a list of strings")
        return cls(
            id=_str_field(data, "id"),
            title=_str_field(data, "title"),
            markdown=_str_field(data, "markdown"),
            tag_ids=list(tag_ids),
        )


@dataclass(frozen=True)
class Note:
    id: str
    title: str
    markdown: str
    tags: list[Tag] = field(default_factory=list)
