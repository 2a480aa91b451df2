from __future__ import annotations

from collections.abc import Iterable, Sequence

from .entities import Note, RawNote, Tag


def denormalize(notes: Iterable[RawNote], tags: Sequence[Tag]) -> list[Note]:
    """
    Resolve each note's tag ids against the tag table.

    Resolved tags follow tag-table order, not ``tag_ids`` order. Ids with no
    matching tag are dropped.
    """
    out: list[Note] = []
    for raw in notes:
        wanted = set(raw.tag_ids)
        out.append(
            Note(
                id=raw.id,
                title=raw.title,
                markdown=raw.markdown,
                tags=[t for t in tags if t.id in wanted],
            )
        )
    return out


def filter_notes(
    notes: Iterable[Note],
    title_query: str = "",
    required_tags: Sequence[Tag] = (),
) -> list[Note]:
    needle = title_query.lower()
    required_ids = [t.id for t in required_tags]
    out: list[Note] = []
    for note in notes:
        if needle and needle not in note.title.lower():
            continue
        note_tag_ids = {t.id for t in note.tags}
        if not all(tid in note_tag_ids for tid in required_ids):
            continue
        out.append(note)
    return out
