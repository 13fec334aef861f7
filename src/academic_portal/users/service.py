from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Optional, Sequence

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.datetime_utils import join_year_range, now_local
from ..common.validators import require_choice, require_non_empty
from ..core.constants import BULK_ERROR_LIMIT
from ..core.enums import Department, Role
from ..core.exceptions import AuthenticationError, DomainError, NotFound, ValidationError
from ..core.scoping import Actor, require_admin
from .model import BulkCreateResult, SessionUser, User
from .repository import UserRepository
from .sessions import SessionStore

logger = logging.getLogger(__name__)


class AuthService:
    """Use case: authenticate user (login) and resolve login tokens."""

    def __init__(self, users: UserRepository, sessions: SessionStore):
        self._users = users
        self._sessions = sessions

    def authenticate(self, user_id: Any, password: Any, role: Any) -> SessionUser:
        role = require_choice(role, Role, "role")
        user = self._users.get_by_id_and_role(str(user_id or "").strip(), role)
        if not user:
            raise AuthenticationError("Invalid credentials")

        try:
            ok = check_password_hash(user.password_hash, str(password or ""))
        except ValueError:
            # e.g. placeholder or corrupted hashes
            ok = False

        if not ok:
            raise AuthenticationError("Invalid credentials")

        return SessionUser(
            user_id=user.user_id,
            name=user.name,
            role=user.role,
            class_name=user.class_name,
            roll_no=user.roll_no,
            issued_at=now_local(),
        )

    def login(self, user_id: Any, password: Any, role: Any) -> tuple[SessionUser, str]:
        s_user = self.authenticate(user_id, password, role)
        token = self._sessions.issue(s_user)
        logger.info("login ok for %s (%s)", s_user.user_id, s_user.role.value)
        return s_user, token

    def resolve(self, token: Optional[str]) -> Optional[SessionUser]:
        return self._sessions.get(token)

    def logout(self, token: Optional[str]) -> None:
        self._sessions.revoke(token)


class UserService:
    """Use case: manage users (admin)."""

    def __init__(self, users: UserRepository, sessions: Optional[SessionStore] = None):
        self._users = users
        self._sessions = sessions

    def _build_user(self, role: Role, data: Mapping[str, Any]) -> User:
        user_id = require_non_empty(data.get("id"), "id")
        password = require_non_empty(data.get("password"), "password")
        name = require_non_empty(data.get("name"), "name")
        email = require_non_empty(data.get("email"), "email")

        if role is Role.ADMIN:
            raise ValidationError("Admin accounts cannot be created here")
        if role is Role.FACULTY:
            return User(
                user_id=user_id,
                role=role,
                name=name,
                email=email,
                password_hash=generate_password_hash(password),
            )
        if role is Role.STUDENT:
            department = data.get("department") or None
            return User(
                user_id=user_id,
                role=role,
                name=name,
                email=email,
                password_hash=generate_password_hash(password),
                class_name=data.get("className") or None,
                roll_no=data.get("rollNo") or None,
                department=require_choice(department, Department, "department") if department else None,
                join_year=join_year_range(data.get("startYear")),
            )
        raise AssertionError(f"Unhandled role: {role!r}")

    def create_user(self, *, actor: Actor, role: Any, data: Mapping[str, Any]) -> User:
        require_admin(actor)
        user = self._build_user(require_choice(role, Role, "role"), data)
        self._users.create_user(user)
        logger.info("created %s %s", user.role.value, user.user_id)
        return user

    def bulk_create_students(self, *, actor: Actor, entries: Iterable[Mapping[str, Any]]) -> BulkCreateResult:
        """Create students one by one; a failing entry is counted and skipped."""

        require_admin(actor)
        created = 0
        failed = 0
        errors: list[str] = []

        for entry in entries:
            entry_id = entry.get("id") if isinstance(entry, Mapping) else None
            try:
                if not isinstance(entry, Mapping):
                    raise ValidationError("entry must be an object")
                self._users.create_user(self._build_user(Role.STUDENT, entry))
                created += 1
            except DomainError as e:
                failed += 1
                errors.append(f"{entry_id}: {e}")
            except Exception as e:
                logger.exception("bulk create failed for %s", entry_id)
                failed += 1
                errors.append(f"{entry_id}: {e}")

        logger.info("bulk student upload: created=%d failed=%d", created, failed)
        return BulkCreateResult(created=created, failed=failed, errors=errors[:BULK_ERROR_LIMIT])

    def list_by_role(self, role: Any) -> Sequence[User]:
        return self._users.list_by_role(require_choice(role, Role, "role"))

    def list_students(self) -> Sequence[User]:
        return self._users.list_students()

    def list_cohort_students(self, *, department: Any, join_year: Any) -> Sequence[User]:
        return self._users.list_students(
            department=require_choice(department, Department, "department"),
            join_year=require_non_empty(join_year, "joinYear"),
        )

    def department_years(self, department: Any) -> Sequence[str]:
        return self._users.list_join_years(require_choice(department, Department, "department"))

    def delete_user(self, *, actor: Actor, user_id: str) -> None:
        require_admin(actor)

        user = self._users.get_by_id(user_id)
        if not user:
            raise NotFound("User not found")
        if user.role is Role.ADMIN:
            raise ValidationError("Cannot delete an admin account")

        if not self._users.delete_non_admin(user_id):
            raise ValidationError("Error deleting user")
        if self._sessions:
            self._sessions.revoke_user(user_id)
        logger.info("deleted %s %s", user.role.value, user_id)
