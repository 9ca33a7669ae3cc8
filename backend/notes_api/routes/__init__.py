# Routes package init
"""
Notes API — API Routes Package
===============================

Route Inventory:
    - notes.py:   GET/POST       /api/notes
                  GET/PUT/DELETE /api/notes/{id}
    - health.py:  GET            /health
                  GET            /

Design Principle:
    Routes stay thin. They pull the store dependency, call NoteService,
    and pick the status code. Rules live in the service.
"""
