# Routes package init
"""
NoteKeeper Backend — API Routes Package
========================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - accounts.py: POST   /signup   (create account)
                   POST   /login    (open session)
    - notes.py:    GET    /notes    (list own notes)
                   POST   /notes    (create note)
                   DELETE /notes    (delete own note)
    - health.py:   GET    /health   (service health check)

Routes stay thin: read the body, call a service, shape the response.
"""
