from app.db.models.storage import StorageItem

__all__ = [
    "StorageItem"
]
