"""
Notes API — In-Memory Store Tests
==================================

What we test:
    ✅ Seed notes, order and ids
    ✅ Max-plus-one id assignment, including reuse of a freed highest id
    ✅ In-place replacement and idempotent deletion
"""

import pytest

from notes_api.store import InMemoryNoteStore


class TestSeedNotes:

    @pytest.mark.asyncio
    async def test_seed_notes_have_ids_one_to_three(self, store):
        notes = await store.list_notes()
        assert [n.id for n in notes] == [1, 2, 3]
        assert [n.important for n in notes] == [True, False, True]
        assert notes[0].content == "HTML is easy"


class TestIdAssignment:

    @pytest.mark.asyncio
    async def test_empty_store_starts_at_one(self):
        store = InMemoryNoteStore()
        note = await store.create("first")
        assert note.id == 1

    @pytest.mark.asyncio
    async def test_next_id_is_max_plus_one(self, store):
        await store.delete(2)
        note = await store.create("after a gap")
        # 2 is free but the highest id is still 3
        assert note.id == 4

    @pytest.mark.asyncio
    async def test_freed_highest_id_is_reused(self, store):
        created = await store.create("temporary")
        assert created.id == 4
        await store.delete(4)

        again = await store.create("reuses the id")
        assert again.id == 4

    @pytest.mark.asyncio
    async def test_create_appends_to_end(self, store):
        note = await store.create("last one", important=True)
        notes = await store.list_notes()
        assert notes[-1] == note
        assert note.important is True


class TestReplaceAndDelete:

    @pytest.mark.asyncio
    async def test_replace_keeps_position(self, store):
        original = await store.get(2)
        updated = original.model_copy(update={"important": True})

        assert await store.replace(updated) == updated
        notes = await store.list_notes()
        assert [n.id for n in notes] == [1, 2, 3]
        assert notes[1].important is True

    @pytest.mark.asyncio
    async def test_replace_unknown_id_returns_none(self, store):
        ghost = (await store.get(1)).model_copy(update={"id": 99})
        assert await store.replace(ghost) is None
        assert len(store) == 3

    @pytest.mark.asyncio
    async def test_delete_is_idempotent(self, store):
        assert await store.delete(1) is True
        assert await store.delete(1) is False
        assert [n.id for n in await store.list_notes()] == [2, 3]

    @pytest.mark.asyncio
    async def test_list_returns_a_copy(self, store):
        notes = await store.list_notes()
        notes.clear()
        assert len(store) == 3
