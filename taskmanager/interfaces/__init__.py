"""Capa de interfaces (adapters de entrada)."""
