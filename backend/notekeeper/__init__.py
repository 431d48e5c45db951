"""
NoteKeeper Backend — Application Package Initializer
=====================================================

What: Marks the `notekeeper` directory as a Python package.
Who:  Used by uvicorn (`notekeeper.main:app`), pytest, and `python -m notekeeper`.

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP dispatch, raw body read
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← Field checks, auth, errors
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← Records + JSON contracts
    ├─────────────────────────────────────┤
    │        MemoryStore (State)          │  ← Locked in-memory collections
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
