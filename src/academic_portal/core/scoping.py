"""Ownership rules for attendance and marks records.

Admin acts on every record; faculty only on records they created.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .enums import Role
from .exceptions import AuthorizationError, ValidationError


@dataclass(frozen=True)
class Actor:
    """Who is performing a record operation."""

    role: Role
    user_id: Optional[str] = None

    @classmethod
    def admin(cls) -> "Actor":
        return cls(role=Role.ADMIN)

    @classmethod
    def faculty(cls, faculty_id: Optional[str]) -> "Actor":
        return cls(role=Role.FACULTY, user_id=faculty_id)


def owner_scope(actor: Actor) -> Optional[str]:
    """Return the faculty id records must belong to, or None for unrestricted access."""

    if actor.role is Role.ADMIN:
        return None
    if actor.role is Role.FACULTY:
        if not actor.user_id or not str(actor.user_id).strip():
            raise ValidationError("facultyId is required")
        return str(actor.user_id).strip()
    if actor.role is Role.STUDENT:
        raise AuthorizationError("Students cannot modify records")
    raise AssertionError(f"Unhandled role: {actor.role!r}")


def require_admin(actor: Actor) -> None:
    if actor.role is not Role.ADMIN:
        raise AuthorizationError("Admin access required")
