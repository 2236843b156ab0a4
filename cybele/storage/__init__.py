from flask import current_app

from .base import Storage
from .memory import MemoryStorage
from .database import DatabaseStorage

BACKENDS = {
    "memory": MemoryStorage,
    "database": DatabaseStorage,
}


def build_storage(app):
    """Instantiate the backend named by ``STORAGE_BACKEND``."""
    name = app.config.get("STORAGE_BACKEND", "database")
    try:
        backend = BACKENDS[name]
    except KeyError:
        raise ValueError(
            f"Unknown STORAGE_BACKEND {name!r}; expected one of {sorted(BACKENDS)}"
        ) from None
    return backend()


def get_storage() -> Storage:
    return current_app.extensions["storage"]


__all__ = ["Storage", "MemoryStorage", "DatabaseStorage", "build_storage", "get_storage"]
