"""
Notes API — Note Store (In-Memory Persistence Layer)
=====================================================

What:  Owns the ordered collection of notes and assigns ids.
How:   `NoteStore` is the async interface the service layer talks to;
       `InMemoryNoteStore` keeps notes in a Python list for the lifetime of
       the process. One store instance is attached to each app instance
       (`app.state.note_store`) and injected into handlers by `get_note_store`.
Who:   Created by the app factory; used by NoteService.

Concurrency:
    Every handler runs on the single asyncio event loop and the in-memory
    methods never await, so each read-modify-write below completes before
    another request can observe the collection. No locks are needed.

Id assignment:
    A new id is the current maximum id plus one (1 for an empty collection).
    Deleting the highest note frees its id for the next create.
"""

import logging
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Iterable, List, Optional

from fastapi import Request

from notes_api.schemas.note import Note

logger = logging.getLogger(__name__)


SEED_NOTES = (
    ("HTML is easy", True),
    ("Browser can execute only JavaScript", False),
    ("GET and POST are the most important methods of HTTP protocol", True),
)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class NoteStore(ABC):
    """Storage contract used by the service layer."""

    @abstractmethod
    async def list_notes(self) -> List[Note]:
        """Return every note in insertion order."""

    @abstractmethod
    async def get(self, note_id: int) -> Optional[Note]:
        """Return the note with `note_id`, or None."""

    @abstractmethod
    async def create(self, content: str, important: bool = False) -> Note:
        """Assign an id and creation date, append the note and return it."""

    @abstractmethod
    async def replace(self, note: Note) -> Optional[Note]:
        """Replace the stored note sharing `note.id`, keeping its position."""

    @abstractmethod
    async def delete(self, note_id: int) -> bool:
        """Remove the note if present. Returns whether anything was removed."""


class InMemoryNoteStore(NoteStore):
    """
    List-backed store. Notes are lost when the process exits.

    Stored `Note` values are frozen, so handing them out directly is safe.
    """

    def __init__(self, notes: Optional[Iterable[Note]] = None):
        self._notes: List[Note] = list(notes or [])

    @classmethod
    def with_seed_notes(cls) -> "InMemoryNoteStore":
        """Build a store holding the three startup notes with ids 1, 2, 3."""
        now = utc_now()
        return cls(
            Note(id=i, content=content, important=important, date=now)
            for i, (content, important) in enumerate(SEED_NOTES, start=1)
        )

    def __len__(self) -> int:
        return len(self._notes)

    def _next_id(self) -> int:
        if not self._notes:
            return 1
        return max(note.id for note in self._notes) + 1

    async def list_notes(self) -> List[Note]:
        return list(self._notes)

    async def get(self, note_id: int) -> Optional[Note]:
        for note in self._notes:
            if note.id == note_id:
                return note
        return None

    async def create(self, content: str, important: bool = False) -> Note:
        note = Note(
            id=self._next_id(),
            content=content,
            important=important,
            date=utc_now(),
        )
        self._notes.append(note)
        logger.debug("Stored note %d (%d notes total)", note.id, len(self._notes))
        return note

    async def replace(self, note: Note) -> Optional[Note]:
        for index, existing in enumerate(self._notes):
            if existing.id == note.id:
                self._notes[index] = note
                return note
        return None

    async def delete(self, note_id: int) -> bool:
        before = len(self._notes)
        self._notes = [note for note in self._notes if note.id != note_id]
        removed = len(self._notes) != before
        if removed:
            logger.debug("Removed note %d", note_id)
        return removed


# ── Store Dependency ──────────────────────────────────────────────────────
def get_note_store(request: Request) -> NoteStore:
    """
    FastAPI dependency that provides the app's note store.

    Example usage in a route:
        @router.get("/notes")
        async def list_notes(store: NoteStore = Depends(get_note_store)):
            return await note_service.list_notes(store)
    """
    return request.app.state.note_store
