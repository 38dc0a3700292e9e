"""
===============================================================================
TARJETA CRC — identity/tokens.py
===============================================================================

Módulo:
    Token Service (JWT HS256)

Responsabilidades:
    - issue(user): emitir un token firmado con sub, email, role, jti, iat, exp,
      iss y aud.
    - verify(token): validar firma, expiración, issuer, audience y claims
      requeridos; devolver TokenClaims o lanzar TokenVerificationError.

Colaboradores:
    - PyJWT (encode/decode)
    - crosscutting.config.Settings: secreto, issuer, audience y TTL.
    - identity.auth_users: verifica en cada request.
    - application.usecases.auth: emite en register/login.

Decisiones de diseño:
    - El claim `role` se fija al emitir y NO se re-valida contra el store:
      un cambio de rol recién aplica con el próximo token.
    - `jti` es único por token (uuid4); hoy no existe lista de revocación.
    - Un solo tipo de error para toda falla de verificación: la API responde
      siempre el mismo 401 sin importar la causa.
===============================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from uuid import uuid4

import jwt

from ..crosscutting.config import Settings, get_settings
from .users import User, UserRole

JWT_ALGORITHM: str = "HS256"

CLAIM_SUB: str = "sub"
CLAIM_EMAIL: str = "email"
CLAIM_ROLE: str = "role"
CLAIM_JTI: str = "jti"
CLAIM_IAT: str = "iat"
CLAIM_EXP: str = "exp"
CLAIM_ISS: str = "iss"
CLAIM_AUD: str = "aud"

REQUIRED_CLAIMS: tuple[str, ...] = (
    CLAIM_SUB,
    CLAIM_ROLE,
    CLAIM_JTI,
    CLAIM_EXP,
    CLAIM_ISS,
    CLAIM_AUD,
)


class TokenVerificationError(Exception):
    """El token no es válido (firma, expiración, issuer/audience o claims)."""


@dataclass(frozen=True, slots=True)
class TokenClaims:
    """Identidad verificada extraída del token."""

    user_id: int
    role: UserRole
    token_id: str
    expires_at: datetime
    email: str = ""


class TokenService:
    """
    ----------------------------------------------------------------------------
    CRC (Class Card)
    ----------------------------------------------------------------------------
    Clase:
      TokenService

    Responsabilidades:
      - Firmar y verificar tokens con un secreto simétrico compartido
      - Garantizar que issuer/audience emitidos sean los exigidos al verificar

    Colaboradores:
      - PyJWT
      - identity.users.User
    ----------------------------------------------------------------------------
    """

    def __init__(
        self,
        *,
        secret: str,
        issuer: str,
        audience: str,
        expiry_minutes: int = 60,
    ) -> None:
        if not secret:
            raise ValueError("secret is required")
        if not issuer or not audience:
            raise ValueError("issuer and audience are required")
        if expiry_minutes <= 0:
            raise ValueError("expiry_minutes must be greater than 0")
        self._secret = secret
        self._issuer = issuer
        self._audience = audience
        self._expiry = timedelta(minutes=expiry_minutes)

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "TokenService":
        s = settings or get_settings()
        return cls(
            secret=s.jwt_secret,
            issuer=s.jwt_issuer,
            audience=s.jwt_audience,
            expiry_minutes=s.jwt_expiry_minutes,
        )

    @property
    def expiry_seconds(self) -> int:
        return int(self._expiry.total_seconds())

    def issue(self, user: User, *, now: datetime | None = None) -> str:
        """Emite un token firmado para `user` (expira en now + TTL)."""
        issued_at = now or datetime.now(timezone.utc)
        payload: dict[str, object] = {
            CLAIM_SUB: str(user.id),
            CLAIM_EMAIL: user.email,
            CLAIM_ROLE: UserRole(user.role).value,
            CLAIM_JTI: str(uuid4()),
            CLAIM_IAT: int(issued_at.timestamp()),
            CLAIM_EXP: int((issued_at + self._expiry).timestamp()),
            CLAIM_ISS: self._issuer,
            CLAIM_AUD: self._audience,
        }
        return jwt.encode(payload, self._secret, algorithm=JWT_ALGORITHM)

    def verify(self, token: str) -> TokenClaims:
        """
        Valida el token y devuelve sus claims.

        Raises:
            TokenVerificationError: firma inválida, expirado, issuer/audience
            incorrectos, claims faltantes o con formato inválido.
        """
        if not token:
            raise TokenVerificationError("token vacío")

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[JWT_ALGORITHM],
                audience=self._audience,
                issuer=self._issuer,
                options={"require": list(REQUIRED_CLAIMS)},
            )
        except jwt.ExpiredSignatureError as exc:
            raise TokenVerificationError("token expirado") from exc
        except jwt.InvalidTokenError as exc:
            raise TokenVerificationError("token inválido") from exc

        try:
            user_id = int(payload[CLAIM_SUB])
            role = UserRole(str(payload[CLAIM_ROLE]))
        except (TypeError, ValueError) as exc:
            raise TokenVerificationError("claims inválidos") from exc

        token_id = str(payload[CLAIM_JTI] or "")
        if not token_id:
            raise TokenVerificationError("claims inválidos")

        return TokenClaims(
            user_id=user_id,
            role=role,
            token_id=token_id,
            expires_at=datetime.fromtimestamp(int(payload[CLAIM_EXP]), timezone.utc),
            email=str(payload.get(CLAIM_EMAIL) or ""),
        )
