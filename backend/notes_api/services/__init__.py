# Services package init
"""
Notes API — Services Layer
===========================

What:  Business logic layer sitting between routes (HTTP) and the note store.
Why:   Routes handle HTTP, services handle the rules.

Service Inventory:
    - NoteService: create / read / update-importance / delete rules

Services can be unit-tested with a plain InMemoryNoteStore, no HTTP involved.
"""
