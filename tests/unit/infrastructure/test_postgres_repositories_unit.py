"""
Name: Postgres Repository Unit Tests (mocked pool)

Responsibilities:
  - Row -> entity mapping
  - SQL shape for owner filter / partial update / delete rowcount
  - Error translation: UniqueViolation -> DuplicateEmailError, others -> DatabaseError
"""

from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest
from psycopg.errors import UniqueViolation

from taskmanager.crosscutting.exceptions import DatabaseError, DuplicateEmailError
from taskmanager.domain.entities import TaskStatus
from taskmanager.identity.users import UserRole
from taskmanager.infrastructure.repositories import (
    PostgresTaskRepository,
    PostgresUserRepository,
)

pytestmark = pytest.mark.unit

NOW = datetime(2025, 1, 1, tzinfo=timezone.utc)


def _pool_with(conn: MagicMock) -> MagicMock:
    pool = MagicMock()
    pool.connection.return_value.__enter__.return_value = conn
    return pool


def _conn_returning(*, one=None, many=None, rowcount=0) -> MagicMock:
    conn = MagicMock()
    cursor = conn.execute.return_value
    cursor.fetchone.return_value = one
    cursor.fetchall.return_value = many or []
    cursor.rowcount = rowcount
    return conn


class TestPostgresTaskRepository:
    def test_get_task_maps_row(self):
        conn = _conn_returning(one=(7, "Title", None, "InProgress", 3, NOW))
        repo = PostgresTaskRepository(pool=_pool_with(conn))

        task = repo.get_task(7)

        assert task.id == 7
        assert task.description == ""
        assert task.status == TaskStatus.IN_PROGRESS
        assert task.user_id == 3

    def test_get_task_missing(self):
        repo = PostgresTaskRepository(pool=_pool_with(_conn_returning(one=None)))

        assert repo.get_task(1) is None

    def test_list_by_owner_filters_in_sql(self):
        conn = _conn_returning(many=[(1, "a", "", "Pending", 5, NOW)])
        repo = PostgresTaskRepository(pool=_pool_with(conn))

        tasks = repo.list_tasks(owner_id=5)

        query, params = conn.execute.call_args.args
        assert "WHERE user_id = %s" in query
        assert params == (5,)
        assert [t.id for t in tasks] == [1]

    def test_list_all_has_no_filter(self):
        conn = _conn_returning(many=[])
        repo = PostgresTaskRepository(pool=_pool_with(conn))

        repo.list_tasks()

        query, _ = conn.execute.call_args.args
        assert "WHERE" not in query

    def test_update_sets_only_given_columns(self):
        conn = _conn_returning(one=(1, "t", "", "Completed", 5, NOW))
        repo = PostgresTaskRepository(pool=_pool_with(conn))

        repo.update_task(1, status=TaskStatus.COMPLETED)

        query, params = conn.execute.call_args.args
        assert "status = %s" in query
        assert "title = %s" not in query
        assert "user_id =" not in query.split("WHERE")[0]
        assert params == ("Completed", 1)

    def test_delete_uses_rowcount(self):
        repo = PostgresTaskRepository(pool=_pool_with(_conn_returning(rowcount=1)))
        assert repo.delete_task(1) is True

        repo = PostgresTaskRepository(pool=_pool_with(_conn_returning(rowcount=0)))
        assert repo.delete_task(1) is False

    def test_unknown_status_in_db_is_a_database_error(self):
        conn = _conn_returning(one=(1, "t", "", "Archived", 5, NOW))
        repo = PostgresTaskRepository(pool=_pool_with(conn))

        with pytest.raises(DatabaseError):
            repo.get_task(1)

    def test_driver_failure_is_wrapped(self):
        conn = MagicMock()
        conn.execute.side_effect = RuntimeError("connection lost")
        repo = PostgresTaskRepository(pool=_pool_with(conn))

        with pytest.raises(DatabaseError):
            repo.list_tasks()


class TestPostgresUserRepository:
    def test_create_user_returns_mapped_user(self):
        conn = _conn_returning(one=(1, "ana@x.com", "hash", "Admin", NOW))
        repo = PostgresUserRepository(pool=_pool_with(conn))

        user = repo.create_user(
            email="ana@x.com", password_hash="hash", role=UserRole.ADMIN
        )

        assert user.role == UserRole.ADMIN
        _, params = conn.execute.call_args.args
        assert params == ("ana@x.com", "hash", "Admin")

    def test_unique_violation_becomes_duplicate_email(self):
        conn = MagicMock()
        conn.execute.side_effect = UniqueViolation("duplicate key")
        repo = PostgresUserRepository(pool=_pool_with(conn))

        with pytest.raises(DuplicateEmailError):
            repo.create_user(email="ana@x.com", password_hash="hash")

    def test_count_users(self):
        repo = PostgresUserRepository(pool=_pool_with(_conn_returning(one=(3,))))

        assert repo.count_users() == 3

    def test_list_users_is_ordered_by_id(self):
        conn = _conn_returning(many=[(1, "a@x.com", "h", "User", NOW)])
        repo = PostgresUserRepository(pool=_pool_with(conn))

        users = repo.list_users()

        query, _ = conn.execute.call_args.args
        assert "ORDER BY id ASC" in query
        assert users[0].email == "a@x.com"
