"""
NoteKeeper Backend — Request Dependencies
==========================================

What:  FastAPI dependencies shared by the route handlers.
How:   get_store() hands out the MemoryStore attached to the running app;
       read_body() reads the raw request body for every method, GET included.
Who:   Injected into route handlers via FastAPI's Depends() system.
When:  Once per request, on the event loop, before the (sync) handler runs
       on a threadpool worker.
"""

from fastapi import Request

from notekeeper.services.store import MemoryStore


def get_store(request: Request) -> MemoryStore:
    """The store owned by the application serving this request."""
    return request.app.state.store


async def read_body(request: Request) -> bytes:
    """
    Raw request body bytes.

    The body is decoded later by the request schemas so that field checks
    can run before decode errors are reported.
    """
    return await request.body()
