"""
Retro Board Backend — Application Package Initializer
======================================================

What: Marks the `retroapi` directory as a Python package.
Who:  Imported by uvicorn (`retroapi.main:app`), pytest, and `python -m retroapi`.

Architecture Note:
    The backend is layered the same way for every resource:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns, response envelopes
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← Lookups, reference resolution, rules
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Resources: users, retros, thoughts, action items.
"""

__version__ = "1.0.0"
