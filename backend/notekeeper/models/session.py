"""NoteKeeper Backend — Session Record."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Session:
    """
    A login session. `id` is the decimal token returned to the client as `sid`.

    Sessions never expire and are never removed. `logged_in` is internal
    state and is never serialized.
    """

    id: str
    owner_user_id: int
    logged_in: bool = True
