"""
NoteKeeper Backend — Notes Route Handlers
==========================================

What:  GET, POST and DELETE on /notes (method-based dispatch on one path).
How:   Reads the raw body, decodes it leniently, delegates to NoteService.
Who:   Called by clients holding a `sid` from POST /login.

Session transport:
    The session id travels in the JSON body of every call, GET included.
    There is no Authorization header scheme.
"""

from fastapi import APIRouter, Depends, status

from notekeeper.dependencies import get_store, read_body
from notekeeper.schemas.requests import CreateNoteRequest, DeleteNoteRequest, SessionRequest
from notekeeper.schemas.responses import (
    CreateNoteResponse,
    ErrorResponse,
    NoteItem,
    NoteListResponse,
)
from notekeeper.services.note_service import note_service
from notekeeper.services.store import MemoryStore

router = APIRouter(tags=["Notes"])

_SESSION_ERRORS = {
    401: {"description": "Unknown session", "model": ErrorResponse},
}


@router.get(
    "/notes",
    response_model=NoteListResponse,
    responses={
        400: {"description": "Missing sid or undecodable body", "model": ErrorResponse},
        **_SESSION_ERRORS,
    },
    summary="List the session user's notes",
)
def list_notes(
    raw: bytes = Depends(read_body),
    store: MemoryStore = Depends(get_store),
) -> NoteListResponse:
    """Body: `{"sid"}`. Notes come back oldest first; never null."""
    notes = note_service.list_notes(store, SessionRequest.decode(raw))
    return NoteListResponse(notes=[NoteItem.from_note(note) for note in notes])


@router.post(
    "/notes",
    response_model=CreateNoteResponse,
    responses={
        400: {"description": "Missing sid or undecodable body", "model": ErrorResponse},
        **_SESSION_ERRORS,
    },
    summary="Create a note",
)
def create_note(
    raw: bytes = Depends(read_body),
    store: MemoryStore = Depends(get_store),
) -> CreateNoteResponse:
    """Body: `{"sid", "note"}`."""
    note_id = note_service.create_note(store, CreateNoteRequest.decode(raw))
    return CreateNoteResponse(id=note_id)


@router.delete(
    "/notes",
    response_model=int,
    responses={
        200: {"description": "Handled; body is the number 200 even if nothing was deleted"},
        400: {"description": "Neither sid nor id given, or undecodable body", "model": ErrorResponse},
        **_SESSION_ERRORS,
    },
    summary="Delete a note",
)
def delete_note(
    raw: bytes = Depends(read_body),
    store: MemoryStore = Depends(get_store),
) -> int:
    """
    Body: `{"sid", "id"}`.

    Deleting a note that does not exist, or that belongs to someone else,
    is reported as success.
    """
    note_service.delete_note(store, DeleteNoteRequest.decode(raw))
    return status.HTTP_200_OK
