"""Identidad: usuarios/roles, hashing de passwords, tokens JWT y dependencias de auth."""
