"""Task Manager: API multi-usuario de tareas con JWT y política owner/admin."""

__version__ = "0.1.0"
