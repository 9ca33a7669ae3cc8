"""
Notes API — Notes Route Handlers
=================================

What:  CRUD endpoints under /api/notes.
How:   Each handler pulls the store from the app via `get_note_store`,
       delegates to NoteService, and returns JSON.

Endpoints:
    GET    /api/notes        → 200 list of notes
    GET    /api/notes/{id}   → 200 note | 404
    POST   /api/notes        → 201 created note | 400
    PUT    /api/notes/{id}   → 200 updated note | 404
    DELETE /api/notes/{id}   → 204 (idempotent)

Path ids are taken as text and resolved by NoteService, so `/api/notes/abc`
is a missing note (404, or 204 on delete) rather than a malformed request.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Body, Depends, Response, status

from notes_api.schemas.note import ErrorResponse, Note, NoteCreate, NoteUpdate
from notes_api.services.note_service import note_service
from notes_api.store import NoteStore, get_note_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Notes"])


@router.get(
    "/notes",
    response_model=List[Note],
    summary="List all notes",
    description="Returns every note in insertion order.",
)
async def list_notes(store: NoteStore = Depends(get_note_store)) -> List[Note]:
    return await note_service.list_notes(store)


@router.get(
    "/notes/{note_id}",
    response_model=Note,
    responses={404: {"description": "Note not found", "model": ErrorResponse}},
    summary="Get a single note by ID",
)
async def get_note(note_id: str, store: NoteStore = Depends(get_note_store)) -> Note:
    return await note_service.get_note(store, note_id)


@router.post(
    "/notes",
    response_model=Note,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Content is required", "model": ErrorResponse}},
    summary="Create a note",
    description="Assigns the next id and the creation date, then appends the note.",
)
async def create_note(
    payload: Optional[NoteCreate] = Body(default=None),
    store: NoteStore = Depends(get_note_store),
) -> Note:
    return await note_service.create_note(store, payload)


@router.put(
    "/notes/{note_id}",
    response_model=Note,
    responses={404: {"description": "Note not found", "model": ErrorResponse}},
    summary="Update a note's importance",
    description="Only `important` can change; omitting it leaves the note as is.",
)
async def update_note(
    note_id: str,
    payload: Optional[NoteUpdate] = Body(default=None),
    store: NoteStore = Depends(get_note_store),
) -> Note:
    return await note_service.update_importance(store, note_id, payload)


@router.delete(
    "/notes/{note_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a note",
    description="Removes the note if present. Deleting an unknown id also returns 204.",
)
async def delete_note(note_id: str, store: NoteStore = Depends(get_note_store)) -> Response:
    await note_service.delete_note(store, note_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
