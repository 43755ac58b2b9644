import uuid
from datetime import datetime
from enum import Enum
from typing import Optional, Dict, Any

from app.core.clock import from_iso, to_iso, utcnow

SUPPORTED_TYPES = ("pdf", "docx", "xlsx", "pptx", "txt", "csv", "jpg", "png")


class DocumentStatus(str, Enum):
    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"


class Document:
    """Сущность документа домена Documents"""

    def __init__(
        self,
        id: str,
        title: str,
        content: str = "",
        created_by: Optional[str] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
        type: str = "pdf",
        size: int = 0,
        status: DocumentStatus = DocumentStatus.DRAFT
    ):
        self.id = id
        self.title = title
        self.content = content
        self.created_by = created_by
        self.created_at = created_at or utcnow()
        self.updated_at = updated_at or self.created_at
        self.type = type
        self.size = size
        self.status = DocumentStatus(status)

    def touch(self, now: Optional[datetime] = None) -> None:
        """Обновление updatedAt, не раньше момента создания"""
        now = now or utcnow()
        self.updated_at = max(now, self.created_at, self.updated_at)

    def apply_changes(self, changes: Dict[str, Any], now: Optional[datetime] = None) -> None:
        """Слияние полей и обновление updatedAt даже без изменений"""
        for name in ("title", "content", "created_by", "type", "size", "status"):
            if name in changes and changes[name] is not None:
                value = changes[name]
                setattr(self, name, DocumentStatus(value) if name == "status" else value)
        self.touch(now)

    @classmethod
    def create_document(
        cls,
        title: str,
        created_by: str,
        content: str = "",
        type: str = "pdf",
        size: int = 0,
        status: DocumentStatus = DocumentStatus.DRAFT,
        now: Optional[datetime] = None
    ) -> "Document":
        """Создание нового документа"""
        now = now or utcnow()
        return cls(
            id=uuid.uuid4().hex,
            title=title,
            content=content,
            created_by=created_by,
            created_at=now,
            updated_at=now,
            type=type,
            size=size,
            status=status
        )

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Document":
        return cls(
            id=str(record["id"]),
            title=record["title"],
            content=record.get("content", ""),
            created_by=record.get("createdBy"),
            created_at=from_iso(record["createdAt"]),
            updated_at=from_iso(record.get("updatedAt") or record["createdAt"]),
            type=record.get("type", ""),
            size=int(record.get("size", 0)),
            status=record.get("status", DocumentStatus.DRAFT.value)
        )

    def to_record(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "createdBy": self.created_by,
            "createdAt": to_iso(self.created_at),
            "updatedAt": to_iso(self.updated_at),
            "type": self.type,
            "size": self.size,
            "status": self.status.value
        }

    def __eq__(self, other) -> bool:
        if not isinstance(other, Document):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"Document(id={self.id}, title={self.title}, status={self.status.value})"


def detect_document_type(filename: str) -> Optional[str]:
    """Тип документа по расширению файла, если он поддерживается"""
    if "." not in filename:
        return None
    extension = filename.rsplit(".", 1)[1].lower()
    return extension if extension in SUPPORTED_TYPES else None


def format_file_size(size: int) -> str:
    """Размер файла в человекочитаемом виде"""
    if size < 1024:
        return f"{size} B"
    if size < 1048576:
        return f"{size / 1024:.1f} KB"
    return f"{size / 1048576:.1f} MB"
