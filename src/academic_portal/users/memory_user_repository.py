from __future__ import annotations

from dataclasses import replace
from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..core.enums import Department, Role
from ..core.exceptions import DuplicateKeyConflict
from ..database.memory_store import MemoryStore
from .model import User
from .repository import UserRepository


class MemoryUserRepository(UserRepository):
    def __init__(self, store: MemoryStore):
        self._store = store

    def get_by_id(self, user_id: str) -> Optional[User]:
        with self._store.lock:
            return self._store.users.get(user_id)

    def get_by_id_and_role(self, user_id: str, role: Role) -> Optional[User]:
        user = self.get_by_id(user_id)
        return user if user and user.role is role else None

    def create_user(self, user: User) -> None:
        with self._store.lock:
            if user.user_id in self._store.users:
                raise DuplicateKeyConflict("User ID already exists")
            self._store.users[user.user_id] = replace(user, created_at=user.created_at or now_local())

    def delete_non_admin(self, user_id: str) -> bool:
        with self._store.lock:
            user = self._store.users.get(user_id)
            if not user or user.role is Role.ADMIN:
                return False
            del self._store.users[user_id]
            self._store.cascade_user_delete(user_id)
            return True

    def list_by_role(self, role: Role) -> Sequence[User]:
        with self._store.lock:
            return sorted((u for u in self._store.users.values() if u.role is role), key=lambda u: u.user_id)

    def list_students(self, *, department: Optional[Department] = None, join_year: Optional[str] = None) -> Sequence[User]:
        return [
            u
            for u in self.list_by_role(Role.STUDENT)
            if (department is None or u.department is department) and (join_year is None or u.join_year == join_year)
        ]

    def list_join_years(self, department: Department) -> Sequence[str]:
        return sorted({u.join_year for u in self.list_students(department=department) if u.join_year})

    def first_by_role(self, role: Role) -> Optional[User]:
        # dicts keep insertion order, i.e. creation order
        with self._store.lock:
            return next((u for u in self._store.users.values() if u.role is role), None)
