"""
NoteKeeper Backend — Response Schemas
======================================

What:  Pydantic models defining what the API returns to clients.
How:   FastAPI serializes these (by alias) and documents them in OpenAPI.

Wire shapes:
    POST /login    → {"sid": "1"}
    GET /notes     → {"notes": [{"id": 1, "note": "hi", "userID": 1}]}
    POST /notes    → {"id": 1}
    POST /signup, DELETE /notes → the bare number 200 (no schema needed)
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from notekeeper.models import Note


class NoteItem(BaseModel):
    """One note as seen by its owner."""

    id: int = Field(description="Note id (global across all users)")
    note: str = Field(description="Note text")
    user_id: int = Field(serialization_alias="userID", description="Owner's user id")

    @classmethod
    def from_note(cls, note: Note) -> "NoteItem":
        return cls(id=note.id, note=note.text, user_id=note.owner_user_id)


class NoteListResponse(BaseModel):
    """
    All notes of the session's user, oldest first.

    `notes` is always present; a user with no notes gets an empty array.
    """

    notes: List[NoteItem] = Field(default_factory=list)


class LoginResponse(BaseModel):
    sid: str = Field(description="Session token to send as `sid` on every note call")


class CreateNoteResponse(BaseModel):
    id: int = Field(description="Id assigned to the new note")


class ErrorResponse(BaseModel):
    """
    Error format shared by every 4xx/5xx response.

    Example:
        {
            "error": "unauthorized",
            "message": "Unauthorized",
            "request_id": "a1b2c3d4"
        }
    """

    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    status: str = Field(description="Overall service status")
    version: str = Field(description="Application version")
    users: int = Field(description="Registered users")
    notes: int = Field(description="Stored notes")
    sessions: int = Field(description="Issued sessions")
    uptime_seconds: float = Field(description="Seconds since service started")
