from __future__ import annotations

import logging
import threading
from collections.abc import Sequence
from dataclasses import replace

from .domain.entities import Note, NoteData, RawNote, Tag
from .domain.ports import KeyValueStore
from .domain.views import denormalize, filter_notes
from .util import new_id

NOTES_KEY = "NOTES"
TAGS_KEY = "TAGS"

logger = logging.getLogger("quillnote.repository")


class NotesRepository:
    """
    Owns the note and tag collections.

    Both collections are loaded from the store once, at construction, and the
    full collection is written back after every mutation. Updates and deletes
    addressed to an unknown id are silent no-ops. Deleting a tag leaves any
    note that references it untouched.

    A mutation builds the next collection, writes it, and only then swaps it
    in, so a failed write leaves memory and store in agreement. Commands and
    queries share one lock.
    """

    def __init__(self, store: KeyValueStore) -> None:
        self.store = store
        self._lock = threading.RLock()
        self._notes: list[RawNote] = self._load(NOTES_KEY, RawNote.from_dict)
        self._tags: list[Tag] = self._load(TAGS_KEY, Tag.from_dict)

    def _load(self, key: str, parse) -> list:
        data = self.store.read(key, [])
        if not isinstance(data, list):
            logger.warning("collection_unreadable", extra={"key": key, "reason": "not_a_list"})
            return []
        try:
            items = [parse(item) for item in data]
        except (KeyError, TypeError, AttributeError) as e:
            logger.warning("collection_unreadable", extra={"key": key, "reason": repr(e)})
            return []
        if len({item.id for item in items}) != len(items):
            logger.warning("collection_unreadable", extra={"key": key, "reason": "duplicate_ids"})
            return []
        return items

    def _commit_notes(self, notes: list[RawNote]) -> None:
        self.store.write(NOTES_KEY, [n.to_dict() for n in notes])
        self._notes = notes

    def _commit_tags(self, tags: list[Tag]) -> None:
        self.store.write(TAGS_KEY, [t.to_dict() for t in tags])
        self._tags = tags

    def _note_index(self, note_id: str) -> int | None:
        for idx, note in enumerate(self._notes):
            if note.id == note_id:
                return idx
        return None

    def _tag_index(self, tag_id: str) -> int | None:
        for idx, tag in enumerate(self._tags):
            if tag.id == tag_id:
                return idx
        return None

    def create_note(self, data: NoteData) -> RawNote:
        note = RawNote(
            id=new_id(),
            title=data.title,
            markdown=data.markdown,
            tag_ids=[t.id for t in data.tags],
        )
        with self._lock:
            self._commit_notes([*self._notes, note])
        return note

    def update_note(self, note_id: str, data: NoteData) -> None:
        with self._lock:
            idx = self._note_index(note_id)
            if idx is None:
                logger.debug("note_update_missing", extra={"id": note_id})
                return
            notes = list(self._notes)
            notes[idx] = replace(
                notes[idx],
                title=data.title,
                markdown=data.markdown,
                tag_ids=[t.id for t in data.tags],
            )
            self._commit_notes(notes)

    def delete_note(self, note_id: str) -> None:
        with self._lock:
            idx = self._note_index(note_id)
            if idx is None:
                logger.debug("note_delete_missing", extra={"id": note_id})
                return
            self._commit_notes(self._notes[:idx] + self._notes[idx + 1 :])

    def create_tag(self, label: str) -> Tag:
        tag = Tag(id=new_id(), label=label)
        with self._lock:
            self._commit_tags([*self._tags, tag])
        return tag

    def add_tag(self, tag: Tag) -> None:
        with self._lock:
            # Caller-minted ids; a repeated id would break tag id uniqueness.
            if self._tag_index(tag.id) is not None:
                logger.debug("tag_add_duplicate", extra={"id": tag.id})
                return
            self._commit_tags([*self._tags, tag])

    def update_tag(self, tag_id: str, label: str) -> None:
        with self._lock:
            idx = self._tag_index(tag_id)
            if idx is None:
                logger.debug("tag_update_missing", extra={"id": tag_id})
                return
            tags = list(self._tags)
            tags[idx] = replace(tags[idx], label=label)
            self._commit_tags(tags)

    def delete_tag(self, tag_id: str) -> None:
        with self._lock:
            idx = self._tag_index(tag_id)
            if idx is None:
                logger.debug("tag_delete_missing", extra={"id": tag_id})
                return
            self._commit_tags(self._tags[:idx] + self._tags[idx + 1 :])

    def raw_notes(self) -> list[RawNote]:
        with self._lock:
            return [replace(n, tag_ids=list(n.tag_ids)) for n in self._notes]

    def list_tags(self) -> list[Tag]:
        with self._lock:
            return list(self._tags)

    def get_tag(self, tag_id: str) -> Tag | None:
        with self._lock:
            idx = self._tag_index(tag_id)
            return self._tags[idx] if idx is not None else None

    def list_notes(self) -> list[Note]:
        with self._lock:
            return denormalize(self._notes, self._tags)

    def get_note(self, note_id: str) -> Note | None:
        with self._lock:
            idx = self._note_index(note_id)
            if idx is None:
                return None
            return denormalize([self._notes[idx]], self._tags)[0]

    def find_notes(self, title_query: str = "", required_tag_ids: Sequence[str] = ()) -> list[Note]:
        with self._lock:
            required = [self.get_tag(tid) or Tag(id=tid, label="") for tid in required_tag_ids]
            return filter_notes(self.list_notes(), title_query, required)
