from notekeeper.models.note import Note
from notekeeper.models.session import Session
from notekeeper.models.user import User

__all__ = ["Note", "Session", "User"]
