from quillnote_api.domain.entities import Note, RawNote, Tag
from quillnote_api.domain.views import denormalize, filter_notes

A = Tag(id="a", label="alpha")
B = Tag(id="b", label="beta")
C = Tag(id="c", label="gamma")


def test_denormalize_uses_tag_table_order() -> None:
    raw = RawNote(id="n1", title="T", markdown="", tag_ids=["b", "a"])
    [note] = denormalize([raw], [A, B, C])
    assert note.tags == [A, B]


def test_denormalize_drops_dangling_ids() -> None:
    raw = RawNote(id="n1", title="T", markdown="body", tag_ids=["gone", "c"])
    [note] = denormalize([raw], [A, C])
    assert note == Note(id="n1", title="T", markdown="body", tags=[C])


def test_denormalize_keeps_note_order() -> None:
    notes = [RawNote(id=str(i), title=str(i), markdown="") for i in range(5)]
    assert [n.id for n in denormalize(notes, [])] == ["0", "1", "2", "3", "4"]


def _notes() -> list[Note]:
    x = Tag(id="x", label="x")
    y = Tag(id="y", label="y")
    return [
        Note(id="n1", title="Shopping List", markdown="", tags=[x, y]),
        Note(id="n2", title="Meeting notes", markdown="", tags=[x]),
    ]


def test_filter_requires_every_tag() -> None:
    notes = _notes()
    out = filter_notes(notes, "", [Tag(id="x", label="x"), Tag(id="y", label="y")])
    assert [n.id for n in out] == ["n1"]


def test_filter_empty_criteria_match_all() -> None:
    notes = _notes()
    assert filter_notes(notes) == notes
    assert filter_notes(notes, "", []) == notes


def test_filter_title_is_case_insensitive_substring() -> None:
    notes = _notes()
    assert [n.id for n in filter_notes(notes, "LIST")] == ["n1"]
    assert [n.id for n in filter_notes(notes, "t")] == ["n1", "n2"]
    assert filter_notes(notes, "zz") == []


def test_filter_matches_tags_by_id_not_label() -> None:
    notes = _notes()
    renamed = Tag(id="y", label="something else")
    assert [n.id for n in filter_notes(notes, "", [renamed])] == ["n1"]
    assert filter_notes(notes, "", [Tag(id="unknown", label="x")]) == []


def test_filter_combines_title_and_tags() -> None:
    notes = _notes()
    out = filter_notes(notes, "meeting", [Tag(id="y", label="y")])
    assert out == []
