# Middleware package init
"""
NoteKeeper Backend — Middleware Package
========================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → Route Handler

    - Request ID runs first so every log line of the request can carry it.
    - Logging captures response status and duration on the way back out.
"""
