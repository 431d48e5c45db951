"""
NoteKeeper Backend — In-Memory Store
=====================================

What:  Owns the three collections (users, notes, sessions) and their locks.
How:   Plain lists scanned linearly; ids assigned as len(collection) + 1
       while the collection's lock is held.
Who:   One instance per application, created by create_app() and handed to
       route handlers through the get_store dependency.
When:  Called from request handlers running on threadpool workers.

Locking:
    _users_lock   guards `users`
    _notes_lock   guards `notes` AND `sessions` (one lock for both)

    Locks are never nested, so there is no lock-ordering concern.

Id assignment:
    users     1, 2, 3, ...   (never deleted, so ids stay unique)
    sessions  "1", "2", ...  (never deleted, so tokens stay unique)
    notes     len(notes) + 1 (notes ARE deleted: after a deletion the next
              note can get an id that is already in use)
"""

import logging
import threading
from typing import Dict, List, Optional

from notekeeper.exceptions import UnauthorizedError
from notekeeper.models import Note, Session, User

logger = logging.getLogger(__name__)


class MemoryStore:
    """
    Thread-safe in-memory storage for users, sessions and notes.

    Every public method takes the relevant lock for the whole scan or
    scan-and-mutate, so callers never see a half-applied change.
    """

    def __init__(self) -> None:
        self._users: List[User] = []
        self._notes: List[Note] = []
        self._sessions: List[Session] = []
        self._users_lock = threading.Lock()
        self._notes_lock = threading.Lock()

    # ── Users ─────────────────────────────────────────────────────────────

    def create_user(self, name: str, email: str, password: str) -> int:
        """Append a user and return its id. No uniqueness checks."""
        with self._users_lock:
            user = User(id=len(self._users) + 1, name=name, email=email, password=password)
            self._users.append(user)
        return user.id

    def find_user_by_credentials(self, email: str, password: str) -> Optional[User]:
        """
        Return the first user whose email AND password match exactly.

        Returns None when nothing matches (including on an empty store).
        """
        with self._users_lock:
            for user in self._users:
                if user.email == email and user.password == password:
                    return user
        return None

    # ── Sessions ──────────────────────────────────────────────────────────

    def create_session(self, user_id: int) -> str:
        """Open a session for `user_id` and return its token."""
        with self._notes_lock:
            session = Session(id=str(len(self._sessions) + 1), owner_user_id=user_id)
            self._sessions.append(session)
        return session.id

    def find_session(self, session_id: str) -> Optional[int]:
        """Return the owning user id of `session_id`, or None if unknown."""
        with self._notes_lock:
            return self._owner_of(session_id)

    def _owner_of(self, session_id: str) -> Optional[int]:
        # Caller must hold _notes_lock.
        for session in self._sessions:
            if session.id == session_id:
                return session.owner_user_id
        return None

    # ── Notes ─────────────────────────────────────────────────────────────

    def list_notes(self, user_id: int) -> List[Note]:
        """Notes owned by `user_id` in insertion order, as a fresh list."""
        with self._notes_lock:
            return [note for note in self._notes if note.owner_user_id == user_id]

    def create_note(self, user_id: int, text: str) -> int:
        """Append a note owned by `user_id` and return its id."""
        with self._notes_lock:
            note = Note(id=len(self._notes) + 1, text=text, owner_user_id=user_id)
            self._notes.append(note)
        return note.id

    def delete_note(self, session_id: str, note_id: int) -> int:
        """
        Delete a note through a session.

        The session is resolved first; an unknown session raises
        UnauthorizedError and leaves the notes untouched. Then the first note
        with a matching id AND owner is removed. A missing or foreign note is
        a silent no-op.

        Returns:
            The id of the session's user.

        Raises:
            UnauthorizedError: `session_id` was never issued.
        """
        with self._notes_lock:
            user_id = self._owner_of(session_id)
            if user_id is None:
                raise UnauthorizedError(context={"sid": session_id})

            for index, note in enumerate(self._notes):
                if note.id == note_id and note.owner_user_id == user_id:
                    del self._notes[index]
                    logger.debug("Removed note %d of user %d", note_id, user_id)
                    return user_id

        logger.debug("Note %d not found for user %d; nothing deleted", note_id, user_id)
        return user_id

    # ── Introspection ─────────────────────────────────────────────────────

    def stats(self) -> Dict[str, int]:
        """Collection sizes, used by the health endpoint."""
        with self._users_lock:
            users = len(self._users)
        with self._notes_lock:
            notes = len(self._notes)
            sessions = len(self._sessions)
        return {"users": users, "notes": notes, "sessions": sessions}
