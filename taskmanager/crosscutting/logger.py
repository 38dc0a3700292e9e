"""
===============================================================================
MÓDULO: Logger estructurado de la API
===============================================================================

Responsabilidades:
  - Un único logger ("task-manager") importable desde cualquier capa.
  - Salida JSON de una línea por evento (o texto plano con LOG_JSON=false).
  - Adjuntar request_id / method / path del request en curso.
  - Nunca imprimir passwords, hashes ni tokens: se reemplazan por "***".

Colaboradores:
  - taskmanager/context.py (ContextVars del request)
  - crosscutting/config.py (LOG_LEVEL / LOG_JSON, mismas claves)

Notas:
  - Se configura desde el entorno y no desde Settings: el logger tiene que
    funcionar incluso cuando Settings falla al validar.
===============================================================================
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any

LOGGER_NAME = "task-manager"
REDACTED = "***"

# Atributos estándar de LogRecord; el resto llega por `extra=`.
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}

_SENSITIVE_KEYS = frozenset(
    {
        "password",
        "password_hash",
        "token",
        "authorization",
        "jwt_secret",
        "secret",
    }
)

_MAX_VALUE_CHARS = 2_000


def _clean(key: str, value: Any) -> Any:
    """Valor apto para JSON, redactado si la clave es sensible."""
    if key.lower() in _SENSITIVE_KEYS:
        return REDACTED
    if isinstance(value, str) and len(value) > _MAX_VALUE_CHARS:
        return value[:_MAX_VALUE_CHARS] + "…"
    if isinstance(value, dict):
        return {str(k): _clean(str(k), v) for k, v in value.items()}
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    return str(value)


class JSONFormatter(logging.Formatter):
    """LogRecord -> JSON con contexto de request y extras redactados."""

    def format(self, record: logging.LogRecord) -> str:
        from ..context import get_context_dict

        payload: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
            "where": f"{record.module}:{record.lineno}",
            **get_context_dict(),
        }
        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRS:
                payload[key] = _clean(key, value)

        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False, default=str)


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() not in {"0", "false", "no", "off"}


def setup_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Configura (una sola vez) y devuelve el logger de la aplicación."""
    log = logging.getLogger(name)
    level = (os.getenv("LOG_LEVEL") or "INFO").strip().upper()
    log.setLevel(logging.getLevelNamesMapping().get(level, logging.INFO))
    log.propagate = False

    if not log.handlers:
        handler = logging.StreamHandler(sys.stdout)
        if _env_flag("LOG_JSON", True):
            handler.setFormatter(JSONFormatter())
        else:
            handler.setFormatter(
                logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
            )
        log.addHandler(handler)

    return log


logger = setup_logger()
