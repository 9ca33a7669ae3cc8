"""
Notes API — Note Service (Business Logic)
==========================================

What:  The rules applied to notes on top of the store.
Who:   Called by the route handlers in routes/notes.py.

Rules:
    - create: `content` must be truthy; `important` defaults to False
    - update: only `important` may change, and only when the body sets it
    - delete: always succeeds, deleting an unknown id is a no-op
    - ids arrive as raw path text; text that is not a whole number names
      no note, so get/update report NotFound and delete does nothing

Design Decision:
    NoteService is stateless. It receives the store for each call, the same
    way a database session would be passed in, so tests can hand it a fresh
    InMemoryNoteStore without touching module state.
"""

import logging
import math
from typing import List, Optional, Union

from notes_api.exceptions import NotFoundError, ValidationError
from notes_api.schemas.note import Note, NoteCreate, NoteUpdate
from notes_api.store import NoteStore

logger = logging.getLogger(__name__)

NoteId = Union[int, str]


def parse_note_id(raw: NoteId) -> Optional[int]:
    """
    Convert a path id to an int, or None when it names no possible note.

    Accepts integral numeric text such as "2", " 2 " and "2.0".

        >>> parse_note_id("3"), parse_note_id("2.0"), parse_note_id("abc")
        (3, 2, None)
    """
    if isinstance(raw, int):
        return raw
    try:
        return int(raw)
    except (TypeError, ValueError):
        pass
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    if math.isfinite(value) and value.is_integer():
        return int(value)
    return None


class NoteService:
    """Business logic layer for note operations."""

    async def list_notes(self, store: NoteStore) -> List[Note]:
        return await store.list_notes()

    async def get_note(self, store: NoteStore, note_id: NoteId) -> Note:
        """
        Retrieve a single note by ID.

        Raises:
            NotFoundError: No note with `note_id` is present, including ids
                that are not whole numbers.
        """
        parsed = parse_note_id(note_id)
        note = await store.get(parsed) if parsed is not None else None
        if note is None:
            raise NotFoundError(resource="Note", resource_id=note_id)
        return note

    async def create_note(self, store: NoteStore, payload: Optional[NoteCreate]) -> Note:
        """
        Validate the body and append a new note.

        Any truthy content is accepted, including whitespace-only text.

        Raises:
            ValidationError: `content` is missing or empty.
        """
        if payload is None or not payload.content:
            raise ValidationError(message="Content is required", field="content")

        note = await store.create(
            content=payload.content,
            important=payload.important or False,
        )
        logger.info("Created note %d (important=%s)", note.id, note.important)
        return note

    async def update_importance(
        self,
        store: NoteStore,
        note_id: NoteId,
        payload: Optional[NoteUpdate],
    ) -> Note:
        """
        Replace the note's `important` flag when the body provides one.

        An explicit `false` is applied; an absent field (or absent body)
        leaves the flag as it was. id, content and date are never changed.

        Raises:
            NotFoundError: No note with `note_id` is present.
        """
        note = await self.get_note(store, note_id)

        important = note.important
        if payload is not None and payload.important is not None:
            important = payload.important

        updated = note.model_copy(update={"important": important})
        await store.replace(updated)
        logger.info("Updated note %d (important=%s)", note.id, important)
        return updated

    async def delete_note(self, store: NoteStore, note_id: NoteId) -> None:
        """Remove the note if present. Unknown or unparseable ids are not an error."""
        parsed = parse_note_id(note_id)
        removed = parsed is not None and await store.delete(parsed)
        if removed:
            logger.info("Deleted note %d", parsed)
        else:
            logger.debug("Delete of unknown note %r ignored", note_id)


# Singleton — stateless, shared by all route handlers
note_service = NoteService()
