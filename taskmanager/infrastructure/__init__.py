"""Capa de infraestructura: pool de DB y repositorios."""
