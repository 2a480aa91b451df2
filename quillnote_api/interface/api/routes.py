import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response

from quillnote_api.dependencies import get_repository
from quillnote_api.domain.entities import Tag
from quillnote_api.domain.schemas import (
    NoteIn,
    NoteListOut,
    NoteOut,
    TagCreateIn,
    TagOut,
    TagUpdateIn,
)
from quillnote_api.repository import NotesRepository

router = APIRouter()
logger = logging.getLogger("quillnote.api")


def _rid(request: Request) -> str:
    return getattr(request.state, "request_id", "")


@router.get("/health")
def health():
    return {"ok": True}


@router.get("/notes", response_model=NoteListOut)
def list_notes(
    limit: int = Query(100, ge=1, le=500),
    cursor: int = Query(0, ge=0),
    q: str = "",
    tag: Optional[list[str]] = Query(None),
    repo: NotesRepository = Depends(get_repository),
):
    items = repo.find_notes(title_query=q, required_tag_ids=tag or [])
    page = items[cursor : cursor + limit]
    next_cursor = cursor + limit if cursor + limit < len(items) else None
    return NoteListOut(items=[NoteOut.from_note(n) for n in page], next_cursor=next_cursor)


@router.post("/notes", response_model=NoteOut)
def create_note(
    payload: NoteIn,
    request: Request,
    repo: NotesRepository = Depends(get_repository),
):
    raw = repo.create_note(payload.to_note_data())
    logger.info("note_create", extra={"rid": _rid(request), "id": raw.id})
    note = repo.get_note(raw.id)
    return NoteOut.from_note(note)


@router.get("/notes/{note_id}", response_model=NoteOut)
def get_note(note_id: str, repo: NotesRepository = Depends(get_repository)):
    note = repo.get_note(note_id)
    if note is None:
        raise HTTPException(status_code=404, detail="note_not_found")
    return NoteOut.from_note(note)


@router.put("/notes/{note_id}", status_code=204, response_class=Response)
def update_note(
    note_id: str,
    payload: NoteIn,
    request: Request,
    repo: NotesRepository = Depends(get_repository),
):
    repo.update_note(note_id, payload.to_note_data())
    logger.info("note_update", extra={"rid": _rid(request), "id": note_id})
    return Response(status_code=204)


@router.delete("/notes/{note_id}", status_code=204, response_class=Response)
def delete_note(
    note_id: str,
    request: Request,
    repo: NotesRepository = Depends(get_repository),
):
    repo.delete_note(note_id)
    logger.info("note_delete", extra={"rid": _rid(request), "id": note_id})
    return Response(status_code=204)


@router.get("/tags", response_model=list[TagOut])
def list_tags(repo: NotesRepository = Depends(get_repository)):
    return [TagOut.from_tag(t) for t in repo.list_tags()]


@router.post("/tags", response_model=TagOut)
def create_tag(
    payload: TagCreateIn,
    request: Request,
    repo: NotesRepository = Depends(get_repository),
):
    if payload.id:
        repo.add_tag(Tag(id=payload.id, label=payload.label))
        tag = repo.get_tag(payload.id)
    else:
        tag = repo.create_tag(payload.label)
    logger.info("tag_create", extra={"rid": _rid(request), "id": tag.id})
    return TagOut.from_tag(tag)


@router.put("/tags/{tag_id}", status_code=204, response_class=Response)
def update_tag(
    tag_id: str,
    payload: TagUpdateIn,
    request: Request,
    repo: NotesRepository = Depends(get_repository),
):
    repo.update_tag(tag_id, payload.label)
    logger.info("tag_update", extra={"rid": _rid(request), "id": tag_id})
    return Response(status_code=204)


@router.delete("/tags/{tag_id}", status_code=204, response_class=Response)
def delete_tag(
    tag_id: str,
    request: Request,
    repo: NotesRepository = Depends(get_repository),
):
    repo.delete_tag(tag_id)
    logger.info("tag_delete", extra={"rid": _rid(request), "id": tag_id})
    return Response(status_code=204)
