from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import iso
from ..core.enums import Department, Role


@dataclass(frozen=True)
class User:
    """Domain entity: a portal account.

    Cohort fields (class_name, roll_no, department, join_year) are only set for students.
    """

    user_id: str
    role: Role
    name: str
    email: str
    password_hash: str
    class_name: Optional[str] = None
    roll_no: Optional[str] = None
    department: Optional[Department] = None
    join_year: Optional[str] = None
    created_at: Optional[datetime] = None

    def to_json(self) -> dict:
        return {
            "id": self.user_id,
            "name": self.name,
            "email": self.email,
            "className": self.class_name,
            "rollNo": self.roll_no,
            "department": self.department.value if self.department else None,
            "joinYear": self.join_year,
        }


@dataclass(frozen=True)
class SessionUser:
    """What a login token resolves to."""

    user_id: str
    name: str
    role: Role
    class_name: Optional[str] = None
    roll_no: Optional[str] = None
    issued_at: Optional[datetime] = None

    def to_json(self) -> dict:
        return {
            "id": self.user_id,
            "name": self.name,
            "className": self.class_name,
            "rollNo": self.roll_no,
            "issuedAt": iso(self.issued_at),
        }


@dataclass(frozen=True)
class BulkCreateResult:
    created: int
    failed: int
    errors: list[str]
