"""
===============================================================================
TARJETA CRC — taskmanager/container.py (Composition Root / DI manual)
===============================================================================

Responsabilidades:
  - Componer repositorios, servicios de identidad y casos de uso.
  - Exponer factories para FastAPI (Depends) y para scripts.
  - Mantener singletons con lru_cache.
  - Elegir backend de persistencia según Settings (in-memory en test/ci).

Colaboradores:
  - taskmanager.crosscutting.config.get_settings
  - taskmanager.domain.repositories (puertos)
  - taskmanager.infrastructure.repositories (implementaciones)
  - taskmanager.identity (PasswordHasher, TokenService)
  - taskmanager.application.usecases

Notas:
  - Sin lógica de negocio.
  - Sin dependencia de FastAPI.
  - Tests: `reset_container()` limpia los singletons entre casos.
===============================================================================
"""

from __future__ import annotations

from functools import lru_cache

from .application.usecases import (
    CreateTaskUseCase,
    DeleteTaskUseCase,
    GetTaskUseCase,
    ListTasksUseCase,
    ListUsersUseCase,
    LoginUserUseCase,
    RegisterUserUseCase,
    UpdateTaskUseCase,
)
from .crosscutting.config import get_settings
from .domain.repositories import TaskRepository, UserRepository
from .identity.passwords import PasswordHasher
from .identity.tokens import TokenService
from .infrastructure.repositories import (
    InMemoryTaskRepository,
    InMemoryUserRepository,
    PostgresTaskRepository,
    PostgresUserRepository,
)

# =============================================================================
# Helpers internos
# =============================================================================


def _is_test_env() -> bool:
    """app_env ∈ {"test", "testing", "ci"} => in-memory adapters."""
    return get_settings().is_test()


# =============================================================================
# Repositorios (singletons)
# =============================================================================


@lru_cache(maxsize=1)
def get_user_repository() -> UserRepository:
    """Credential Store (in-memory en test; Postgres en runtime)."""
    if _is_test_env():
        return InMemoryUserRepository()
    return PostgresUserRepository()


@lru_cache(maxsize=1)
def get_task_repository() -> TaskRepository:
    """Repositorio de tareas (in-memory en test; Postgres en runtime)."""
    if _is_test_env():
        return InMemoryTaskRepository()
    return PostgresTaskRepository()


# =============================================================================
# Identidad (singletons)
# =============================================================================


@lru_cache(maxsize=1)
def get_password_hasher() -> PasswordHasher:
    return PasswordHasher()


@lru_cache(maxsize=1)
def get_token_service() -> TokenService:
    """TokenService configurado con JWT_SECRET / ISSUER / AUDIENCE / TTL."""
    return TokenService.from_settings(get_settings())


# =============================================================================
# Casos de uso (factories)
# =============================================================================


def get_register_user_use_case() -> RegisterUserUseCase:
    """Caso de uso: registro (rol User forzado)."""
    return RegisterUserUseCase(
        user_repository=get_user_repository(),
        password_hasher=get_password_hasher(),
        token_service=get_token_service(),
        min_password_chars=get_settings().min_password_chars,
    )


@lru_cache(maxsize=1)
def get_login_user_use_case() -> LoginUserUseCase:
    """Caso de uso: login. Singleton para reutilizar el hash de timing."""
    return LoginUserUseCase(
        user_repository=get_user_repository(),
        password_hasher=get_password_hasher(),
        token_service=get_token_service(),
    )


def get_create_task_use_case() -> CreateTaskUseCase:
    settings = get_settings()
    return CreateTaskUseCase(
        get_task_repository(),
        max_title_chars=settings.max_title_chars,
        max_description_chars=settings.max_description_chars,
    )


def get_get_task_use_case() -> GetTaskUseCase:
    return GetTaskUseCase(get_task_repository())


def get_list_tasks_use_case() -> ListTasksUseCase:
    return ListTasksUseCase(get_task_repository())


def get_update_task_use_case() -> UpdateTaskUseCase:
    settings = get_settings()
    return UpdateTaskUseCase(
        get_task_repository(),
        max_title_chars=settings.max_title_chars,
        max_description_chars=settings.max_description_chars,
    )


def get_delete_task_use_case() -> DeleteTaskUseCase:
    return DeleteTaskUseCase(get_task_repository())


def get_list_users_use_case() -> ListUsersUseCase:
    return ListUsersUseCase(get_user_repository())


def reset_container() -> None:
    """Limpia singletons (tests)."""
    for factory in (
        get_user_repository,
        get_task_repository,
        get_password_hasher,
        get_token_service,
        get_login_user_use_case,
    ):
        factory.cache_clear()
