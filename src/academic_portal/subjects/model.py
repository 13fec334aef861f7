from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import iso
from ..core.enums import Department


@dataclass(frozen=True)
class Subject:
    subject_id: int
    department: Department
    join_year: str
    subject_name: str
    created_at: Optional[datetime] = None

    def to_json(self) -> dict:
        return {
            "id": self.subject_id,
            "department": self.department.value,
            "joinYear": self.join_year,
            "subjectName": self.subject_name,
            "createdAt": iso(self.created_at),
        }
