from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import Department, Role
from .model import User


class UserRepository(Protocol):
    """Repository interface for User.

    Note (DIP): services depend on this interface, never on a concrete backend.
    """

    def get_by_id(self, user_id: str) -> Optional[User]:
        raise NotImplementedError

    def get_by_id_and_role(self, user_id: str, role: Role) -> Optional[User]:
        raise NotImplementedError

    def create_user(self, user: User) -> None:
        """Insert a new user; raises DuplicateKeyConflict when the id is taken."""

        raise NotImplementedError

    def delete_non_admin(self, user_id: str) -> bool:
        """Delete a user unless it is an admin. Their records cascade."""

        raise NotImplementedError

    def list_by_role(self, role: Role) -> Sequence[User]:
        raise NotImplementedError

    def list_students(self, *, department: Optional[Department] = None, join_year: Optional[str] = None) -> Sequence[User]:
        raise NotImplementedError

    def list_join_years(self, department: Department) -> Sequence[str]:
        raise NotImplementedError

    def first_by_role(self, role: Role) -> Optional[User]:
        raise NotImplementedError
