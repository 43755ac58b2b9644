from sqlalchemy import Column, String, Text, DateTime
from sqlalchemy.sql import func

from app.db.base import Base


class StorageItem(Base):
    """Строка ключ-значение: одна сериализованная коллекция или маркер сессии"""
    __tablename__ = "storage_items"

    key = Column(String(255), primary_key=True)
    value = Column(Text, nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
