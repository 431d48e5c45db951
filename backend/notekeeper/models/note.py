"""
NoteKeeper Backend — Note Record
=================================

What:  In-memory representation of one note.
Who:   Created and removed by MemoryStore; serialized by schemas.responses.

Lifecycle:
    Created on POST /notes, removed on DELETE /notes, never mutated.
    `id` is global across all users (not per-owner).
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Note:
    id: int
    text: str
    owner_user_id: int
