from __future__ import annotations

import pytest
from mysql.connector import errorcode
from mysql.connector.errors import IntegrityError

from academic_portal.core.enums import Role
from academic_portal.core.exceptions import DuplicateKeyConflict
from academic_portal.users.model import User
from academic_portal.users.mysql_user_repository import MySQLUserRepository


def _faculty() -> User:
    return User(user_id="F1", role=Role.FACULTY, name="Ravi", email="ravi@sbk.edu", password_hash="hash")


def test_duplicate_user_id_maps_to_conflict(fake_conn):
    factory = fake_conn(error=IntegrityError(msg="Duplicate entry 'F1'", errno=errorcode.ER_DUP_ENTRY))
    repo = MySQLUserRepository(factory)

    with pytest.raises(DuplicateKeyConflict):
        repo.create_user(_faculty())

    assert factory.connections[0].rolled_back


def test_other_integrity_errors_propagate(fake_conn):
    factory = fake_conn(error=IntegrityError(msg="Cannot add row", errno=errorcode.ER_NO_REFERENCED_ROW_2))
    repo = MySQLUserRepository(factory)

    with pytest.raises(IntegrityError):
        repo.create_user(_faculty())


def test_delete_never_matches_admin(fake_conn):
    factory = fake_conn(rowcount=0)
    repo = MySQLUserRepository(factory)

    assert repo.delete_non_admin("admin") is False
    assert factory.cursor.executed[0] == ("DELETE FROM users WHERE user_id=%s AND role<>%s", ("admin", "admin"))
