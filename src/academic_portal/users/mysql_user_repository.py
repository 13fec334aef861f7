from __future__ import annotations

from typing import Optional, Sequence

from mysql.connector import errorcode
from mysql.connector.errors import IntegrityError

from ..core.enums import Department, Role
from ..core.exceptions import DuplicateKeyConflict
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import User
from .repository import UserRepository

_COLUMNS = "user_id, role, name, email, password_hash, class_name, roll_no, department, join_year, created_at"


def _to_user(row: dict) -> User:
    return User(
        user_id=row["user_id"],
        role=Role(row["role"]),
        name=row["name"],
        email=row["email"],
        password_hash=row["password_hash"],
        class_name=row.get("class_name"),
        roll_no=row.get("roll_no"),
        department=Department(row["department"]) if row.get("department") else None,
        join_year=row.get("join_year"),
        created_at=row.get("created_at"),
    )


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, user_id: str) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users WHERE user_id=%s", (user_id,))
            row = fetchone(cur)
            return _to_user(row) if row else None

    def get_by_id_and_role(self, user_id: str, role: Role) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users WHERE user_id=%s AND role=%s", (user_id, role.value))
            row = fetchone(cur)
            return _to_user(row) if row else None

    def create_user(self, user: User) -> None:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO users(user_id, password_hash, role, name, email, class_name, roll_no, department, join_year)
                    VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s)
                    """,
                    (
                        user.user_id,
                        user.password_hash,
                        user.role.value,
                        user.name,
                        user.email,
                        user.class_name,
                        user.roll_no,
                        user.department.value if user.department else None,
                        user.join_year,
                    ),
                )
        except IntegrityError as e:
            if e.errno == errorcode.ER_DUP_ENTRY:
                raise DuplicateKeyConflict("User ID already exists") from e
            raise

    def delete_non_admin(self, user_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM users WHERE user_id=%s AND role<>%s", (user_id, Role.ADMIN.value))
            return cur.rowcount > 0

    def list_by_role(self, role: Role) -> Sequence[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users WHERE role=%s ORDER BY user_id", (role.value,))
            return [_to_user(r) for r in fetchall(cur)]

    def list_students(self, *, department: Optional[Department] = None, join_year: Optional[str] = None) -> Sequence[User]:
        clauses = ["role=%s"]
        params: list[object] = [Role.STUDENT.value]
        if department is not None:
            clauses.append("department=%s")
            params.append(department.value)
        if join_year is not None:
            clauses.append("join_year=%s")
            params.append(join_year)

        where = " AND ".join(clauses)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users WHERE {where} ORDER BY user_id", tuple(params))
            return [_to_user(r) for r in fetchall(cur)]

    def list_join_years(self, department: Department) -> Sequence[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT DISTINCT join_year FROM users
                WHERE department=%s AND role=%s AND join_year IS NOT NULL
                ORDER BY join_year
                """,
                (department.value, Role.STUDENT.value),
            )
            return [r["join_year"] for r in fetchall(cur)]

    def first_by_role(self, role: Role) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM users WHERE role=%s ORDER BY created_at, user_id LIMIT 1", (role.value,))
            row = fetchone(cur)
            return _to_user(row) if row else None
