"""
Name: User Listing and Seed Tests

Responsibilities:
  - ListUsersUseCase: Admin only, ordered by id
  - ensure_seed_users: disabled/empty-store/production guards
"""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from taskmanager.application.seed_users import ensure_seed_users
from taskmanager.application.usecases import ListUsersUseCase, UserErrorCode
from taskmanager.identity.users import UserRole
from taskmanager.infrastructure.repositories import InMemoryUserRepository

pytestmark = pytest.mark.unit


def _seed_settings(**overrides):
    values = dict(
        seed_default_users=True,
        seed_admin_email="admin@taskmanager.com",
        seed_admin_password="Admin@123",
        seed_user_email="user@taskmanager.com",
        seed_user_password="User@123",
        production=False,
    )
    values.update(overrides)
    production = values.pop("production")
    return SimpleNamespace(is_production=lambda: production, **values)


class TestListUsers:
    def test_admin_lists_all_users(self, admin_caller):
        repo = InMemoryUserRepository()
        repo.create_user(email="a@x.com", password_hash="h")
        repo.create_user(email="b@x.com", password_hash="h", role=UserRole.ADMIN)

        result = ListUsersUseCase(repo).execute(admin_caller)

        assert result.error is None
        assert [u.email for u in result.users] == ["a@x.com", "b@x.com"]

    def test_regular_user_is_forbidden(self, alice):
        result = ListUsersUseCase(InMemoryUserRepository()).execute(alice)

        assert result.error.code == UserErrorCode.FORBIDDEN
        assert result.users == []


class TestEnsureSeedUsers:
    def test_creates_admin_and_user_on_empty_store(self, fake_hasher):
        repo = InMemoryUserRepository()

        created = ensure_seed_users(
            _seed_settings(), user_repo=repo, password_hasher=fake_hasher.hash
        )

        assert [(u.email, u.role) for u in created] == [
            ("admin@taskmanager.com", UserRole.ADMIN),
            ("user@taskmanager.com", UserRole.USER),
        ]
        admin = repo.get_user_by_email("admin@taskmanager.com")
        assert fake_hasher.verify("Admin@123", admin.password_hash)

    def test_disabled_does_nothing(self, fake_hasher):
        repo = InMemoryUserRepository()

        created = ensure_seed_users(
            _seed_settings(seed_default_users=False),
            user_repo=repo,
            password_hasher=fake_hasher.hash,
        )

        assert created == []
        assert repo.count_users() == 0

    def test_non_empty_store_is_left_alone(self, fake_hasher):
        repo = InMemoryUserRepository()
        repo.create_user(email="existing@x.com", password_hash="h")

        created = ensure_seed_users(
            _seed_settings(), user_repo=repo, password_hasher=fake_hasher.hash
        )

        assert created == []
        assert repo.count_users() == 1

    def test_is_idempotent(self, fake_hasher):
        repo = InMemoryUserRepository()
        settings = _seed_settings()

        ensure_seed_users(settings, user_repo=repo, password_hasher=fake_hasher.hash)
        ensure_seed_users(settings, user_repo=repo, password_hasher=fake_hasher.hash)

        assert repo.count_users() == 2

    def test_refuses_to_run_in_production(self, fake_hasher):
        with pytest.raises(RuntimeError, match="production"):
            ensure_seed_users(
                _seed_settings(production=True),
                user_repo=InMemoryUserRepository(),
                password_hasher=fake_hasher.hash,
            )

    def test_empty_credentials_fail_fast(self, fake_hasher):
        with pytest.raises(ValueError):
            ensure_seed_users(
                _seed_settings(seed_admin_password=""),
                user_repo=InMemoryUserRepository(),
                password_hasher=fake_hasher.hash,
            )
