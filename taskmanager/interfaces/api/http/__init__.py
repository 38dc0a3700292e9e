"""API HTTP: schemas, routers y mapeo de errores."""
