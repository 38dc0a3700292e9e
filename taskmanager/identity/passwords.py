"""
===============================================================================
TARJETA CRC — identity/passwords.py
===============================================================================

Módulo:
    Password Hasher (Argon2id)

Responsabilidades:
    - hash(plaintext): digest salado y one-way (salt aleatorio por llamada).
    - verify(plaintext, hashed): comparación en tiempo constante.
    - Tratar hashes corruptos/mal formados como "no verifica", nunca como crash.

Colaboradores:
    - argon2-cffi (PasswordHasher)
    - application/usecases/auth: registro y login.
    - application/seed_users.py y scripts/create_admin.py.

Notas:
    - Ni el plaintext ni el hash se loguean.
===============================================================================
"""

from __future__ import annotations

from argon2 import PasswordHasher as _Argon2Hasher
from argon2.exceptions import InvalidHashError, VerificationError, VerifyMismatchError


class PasswordHasher:
    """Wrapper fino sobre argon2 con el contrato hash/verify del dominio."""

    def __init__(self, hasher: _Argon2Hasher | None = None) -> None:
        self._hasher = hasher or _Argon2Hasher()

    def hash(self, plaintext: str) -> str:
        return self._hasher.hash(plaintext)

    def verify(self, plaintext: str, hashed: str) -> bool:
        """True si plaintext corresponde a hashed; False ante mismatch o hash inválido."""
        if not hashed:
            return False
        try:
            return self._hasher.verify(hashed, plaintext)
        except (VerifyMismatchError, VerificationError, InvalidHashError):
            return False


_default_hasher = PasswordHasher()


def hash_password(password: str) -> str:
    """Hashea un password usando Argon2."""
    return _default_hasher.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """Verifica password vs hash almacenado."""
    return _default_hasher.verify(password, password_hash)
