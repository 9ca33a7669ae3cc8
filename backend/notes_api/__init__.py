"""
Notes API — Application Package Initializer
============================================

What: Marks the `notes_api` directory as a Python package.
Who:  Imported by uvicorn (`notes_api.main:app`), pytest, and the `notes-api` script.

Architecture Note:
    The service keeps the usual layered shape even though it is small:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← Validation, update rules
    ├─────────────────────────────────────┤
    │            Schemas (Data)           │  ← Pydantic models
    ├─────────────────────────────────────┤
    │          Store (In-Memory)          │  ← Ordered note collection
    └─────────────────────────────────────┘

    The store is owned by the app instance and injected into handlers,
    so a persistent store can replace it without touching the routes.
"""

__version__ = "1.0.0"
