"""Aplicación FastAPI: lifespan, rutas de auth, handlers y alias /api."""
