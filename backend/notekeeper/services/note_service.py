"""
NoteKeeper Backend — Note Service
==================================

What:  List, create and delete notes on behalf of a session.
Who:   Called by routes/notes.py.

Validation order (all three operations):
    1. Required-field check → BadRequestError("Invalid request format")
    2. Body decode error    → BadRequestError(<decoder message>)
    3. Session lookup       → UnauthorizedError when the sid was never issued
    4. Store work

Required-field predicates:
    list, create   reject when `sid` is empty
    delete         rejects only when `sid` is empty AND `id` is 0
"""

import logging
from typing import List

from notekeeper.exceptions import BadRequestError, UnauthorizedError
from notekeeper.models import Note
from notekeeper.schemas.requests import CreateNoteRequest, DeleteNoteRequest, SessionRequest
from notekeeper.services.store import MemoryStore

logger = logging.getLogger(__name__)


class NoteService:
    """
    Stateless note operations; the store is passed on every call.

    Ownership:
        A session only ever sees and deletes notes whose owner is the
        session's user. Deleting anything else succeeds without effect.
    """

    def list_notes(self, store: MemoryStore, body: SessionRequest) -> List[Note]:
        """
        Return the session user's notes in creation order (possibly empty).

        Raises:
            BadRequestError: `sid` empty, or undecodable body
            UnauthorizedError: unknown session
        """
        self._check_decoded(body, missing=body.sid == "", operation="list_notes")
        user_id = self._resolve_session(store, body.sid)
        return store.list_notes(user_id)

    def create_note(self, store: MemoryStore, body: CreateNoteRequest) -> int:
        """
        Store a note for the session's user and return its id.

        The note text may be empty.
        """
        self._check_decoded(body, missing=body.sid == "", operation="create_note")
        user_id = self._resolve_session(store, body.sid)
        note_id = store.create_note(user_id, body.note)
        logger.info("User %d created note %d", user_id, note_id)
        return note_id

    def delete_note(self, store: MemoryStore, body: DeleteNoteRequest) -> None:
        """
        Delete note `id` if the session's user owns it.

        A body with an id but no sid passes validation and then fails the
        session lookup (401).

        Raises:
            BadRequestError: `sid` empty AND `id` zero, or undecodable body
            UnauthorizedError: unknown session
        """
        self._check_decoded(
            body, missing=body.sid == "" and body.id == 0, operation="delete_note"
        )
        try:
            user_id = store.delete_note(body.sid, body.id)
        except UnauthorizedError:
            logger.warning("Note delete rejected: unknown session")
            raise
        logger.info("User %d deleted note %d (if owned)", user_id, body.id)

    # ── Helpers ───────────────────────────────────────────────────────────

    @staticmethod
    def _check_decoded(body, missing: bool, operation: str) -> None:
        if missing:
            raise BadRequestError(context={"operation": operation})
        if body.decode_error:
            raise BadRequestError(message=body.decode_error, context={"operation": operation})

    @staticmethod
    def _resolve_session(store: MemoryStore, session_id: str) -> int:
        user_id = store.find_session(session_id)
        if user_id is None:
            logger.warning("Request rejected: unknown session")
            raise UnauthorizedError(context={"sid": session_id})
        return user_id


note_service = NoteService()
