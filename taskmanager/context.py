"""
===============================================================================
TARJETA CRC — taskmanager/context.py (Contexto por request)
===============================================================================

Responsabilidades:
  - Guardar request_id / method / path del request en curso (ContextVars,
    seguros en async) para que los logs se correlacionen solos.

Colaboradores:
  - crosscutting.middleware: carga y limpia el contexto.
  - crosscutting.logger: lo lee con get_context_dict().

Restricciones:
  - Solo metadatos de observabilidad. La identidad del caller NO vive acá:
    se pasa explícitamente a cada caso de uso.
===============================================================================
"""

from __future__ import annotations

from contextvars import ContextVar

_FIELDS = ("request_id", "method", "path")

_vars: dict[str, ContextVar[str]] = {
    name: ContextVar(f"taskmanager_{name}", default="") for name in _FIELDS
}


def set_request_context(
    *, request_id: str = "", method: str = "", path: str = ""
) -> None:
    values = {"request_id": request_id, "method": method, "path": path}
    for name, var in _vars.items():
        var.set(values[name] or "")


def get_context_dict() -> dict[str, str]:
    """Contexto actual, sin las claves vacías."""
    return {name: value for name, var in _vars.items() if (value := var.get())}


def clear_context() -> None:
    for var in _vars.values():
        var.set("")
