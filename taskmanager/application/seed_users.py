# =============================================================================
# FILE: application/seed_users.py
# =============================================================================
"""
===============================================================================
TASK: Seed default users (empty store only)
===============================================================================

Qué es:
    Crea la cuenta Admin y la cuenta User de ejemplo cuando está habilitado y
    el Credential Store está vacío. Si ya existe al menos un usuario, no hace
    nada (no pisa passwords ni roles).

Seguridad:
    - Nunca corre en production (fail-fast).
    - Es la ÚNICA vía, junto a scripts/create_admin.py, que asigna rol Admin.

CRC:
    Component: ensure_seed_users
    Collaborators:
      - user_repo (count_users / create_user)
      - password_hasher (callable plaintext -> hash)
      - Settings (seed_*)
===============================================================================
"""

from __future__ import annotations

from typing import Callable, Protocol

from ..crosscutting.config import Settings
from ..crosscutting.logger import logger
from ..identity.users import User, UserRole


class SeedUserPort(Protocol):
    """User repository port needed by the seed task."""

    def count_users(self) -> int: ...

    def create_user(
        self, *, email: str, password_hash: str, role: UserRole = UserRole.USER
    ) -> User: ...


def ensure_seed_users(
    settings: Settings,
    *,
    user_repo: SeedUserPort,
    password_hasher: Callable[[str], str],
) -> list[User]:
    """
    Create the default Admin + User accounts if enabled and the store is empty.

    Returns the created users (empty list when skipped).
    """
    if not settings.seed_default_users:
        return []

    if settings.is_production():
        raise RuntimeError(
            "FATAL: SEED_DEFAULT_USERS is enabled in production. "
            "Safety guard prevents creating default credentials."
        )

    if user_repo.count_users() > 0:
        logger.info("Seed users: store not empty; skipping")
        return []

    accounts = (
        (settings.seed_admin_email, settings.seed_admin_password, UserRole.ADMIN),
        (settings.seed_user_email, settings.seed_user_password, UserRole.USER),
    )
    created: list[User] = []
    for email, password, role in accounts:
        if not email or not password:
            raise ValueError("Seed users are enabled but email/password are empty")
        user = user_repo.create_user(
            email=email, password_hash=password_hasher(password), role=role
        )
        created.append(user)
        logger.info(
            "Seed users: user created",
            extra={"email": email, "role": role.value},
        )
    return created
