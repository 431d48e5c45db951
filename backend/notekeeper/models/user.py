"""NoteKeeper Backend — User Record."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class User:
    """
    A registered account.

    Email is the login key but is not unique: duplicate signups are kept and
    only the first match is ever returned by a credentials lookup.
    The password is stored as given.
    """

    id: int
    name: str
    email: str
    password: str = field(repr=False)
