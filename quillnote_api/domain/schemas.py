from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from quillnote_api.domain.entities import Note, NoteData, Tag


class TagOut(BaseModel):
    id: str
    label: str

    @classmethod
    def from_tag(cls, tag: Tag) -> TagOut:
        return cls(id=tag.id, label=tag.label)


class TagRef(BaseModel):
    id: str
    label: str = ""


class TagCreateIn(BaseModel):
    label: str
    id: Optional[str] = None


class TagUpdateIn(BaseModel):
    label: str


class NoteOut(BaseModel):
    id: str
    title: str
    markdown: str
    tags: list[TagOut] = Field(default_factory=list)

    @classmethod
    def from_note(cls, note: Note) -> NoteOut:
        return cls(
            id=note.id,
            title=note.title,
            markdown=note.markdown,
            tags=[TagOut.from_tag(t) for t in note.tags],
        )


class NoteIn(BaseModel):
    title: str = ""
    markdown: str = ""
    tags: list[TagRef] = Field(default_factory=list)

    def to_note_data(self) -> NoteData:
        return NoteData(
            title=self.title,
            markdown=self.markdown,
            tags=[Tag(id=t.id, label=t.label) for t in self.tags],
        )


class NoteListOut(BaseModel):
    items: list[NoteOut] = Field(default_factory=list)
    next_cursor: Optional[int] = None
