from typing import Optional

from app.core.config import Settings, settings as default_settings
from app.db.store import BaseStore, FileStore, MemoryStore, SqlStore


def create_store(settings: Optional[Settings] = None, seed: bool = True) -> BaseStore:
    """Создание хранилища по настройкам"""
    settings = settings or default_settings
    fixtures = None if seed else {}
    backend = settings.storage_backend.lower()

    if backend == "memory":
        return MemoryStore(prefix=settings.storage_prefix, fixtures=fixtures)
    if backend == "file":
        return FileStore(settings.storage_path, prefix=settings.storage_prefix, fixtures=fixtures)
    if backend == "sql":
        return SqlStore(settings.storage_url, prefix=settings.storage_prefix, fixtures=fixtures)

    raise ValueError(f"Unsupported storage backend: {settings.storage_backend}")
