from __future__ import annotations

from typing import Sequence

from mysql.connector import errorcode
from mysql.connector.errors import IntegrityError

from ..core.enums import Department
from ..core.exceptions import DuplicateKeyConflict
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Subject
from .repository import SubjectRepository


class MySQLSubjectRepository(SubjectRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, *, department: Department, join_year: str, subject_name: str) -> int:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    "INSERT INTO subjects(department, join_year, subject_name) VALUES(%s,%s,%s)",
                    (department.value, join_year, subject_name),
                )
                return int(cur.lastrowid)
        except IntegrityError as e:
            if e.errno == errorcode.ER_DUP_ENTRY:
                raise DuplicateKeyConflict("Subject already exists") from e
            raise

    def list_for_cohort(self, *, department: Department, join_year: str) -> Sequence[Subject]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT subject_id, department, join_year, subject_name, created_at
                FROM subjects
                WHERE department=%s AND join_year=%s
                ORDER BY subject_name
                """,
                (department.value, join_year),
            )
            return [
                Subject(
                    subject_id=int(r["subject_id"]),
                    department=Department(r["department"]),
                    join_year=r["join_year"],
                    subject_name=r["subject_name"],
                    created_at=r.get("created_at"),
                )
                for r in fetchall(cur)
            ]

    def delete(self, *, subject_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM subjects WHERE subject_id=%s", (int(subject_id),))
            return cur.rowcount > 0
