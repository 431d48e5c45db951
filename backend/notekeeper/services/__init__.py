# Services package init
"""
NoteKeeper Backend — Services Layer
====================================

What:  Business rules sitting between routes (HTTP) and the MemoryStore.

Service Inventory:
    - MemoryStore:     Locked in-memory users, sessions and notes
    - AccountService:  Signup and login
    - NoteService:     List, create and delete notes through a session

AccountService and NoteService hold no state; the store is passed in on
every call, so several apps (and test cases) can run side by side.
"""
