"""Crosscutting: settings, logging, errores RFC7807 y middlewares."""
