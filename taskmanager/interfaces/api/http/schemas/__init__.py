"""
===============================================================================
TARJETA CRC — schemas/__init__.py
===============================================================================

Módulo:
    Paquete de Schemas HTTP (DTOs Pydantic)

Reglas:
    - Schemas NO importan infraestructura ni ejecutan casos de uso.
    - Solo tipos y validación de forma del input/output.
===============================================================================
"""

__all__ = []
