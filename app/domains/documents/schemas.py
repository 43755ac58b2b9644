from pydantic import BaseModel, Field, field_validator
from typing import Optional

from app.domains.documents.entities import DocumentStatus


class DocumentBase(BaseModel):
    """Базовая схема документа"""
    title: str = Field(..., min_length=1, max_length=255)
    content: str = Field(default="")
    type: str = Field(default="pdf", min_length=1, max_length=16)
    size: int = Field(default=0, ge=0)
    status: DocumentStatus = DocumentStatus.DRAFT

    @field_validator('title')
    @classmethod
    def validate_title(cls, v):
        if not v.strip():
            raise ValueError('Title cannot be empty')
        return v.strip()

    @field_validator('type')
    @classmethod
    def normalize_type(cls, v):
        return v.strip().lower()


class DocumentCreate(DocumentBase):
    """Схема для создания документа"""
    created_by: Optional[str] = None


class DocumentUpdate(BaseModel):
    """Схема для обновления документа"""
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    content: Optional[str] = None
    type: Optional[str] = Field(None, min_length=1, max_length=16)
    size: Optional[int] = Field(None, ge=0)
    status: Optional[DocumentStatus] = None
    created_by: Optional[str] = None

    @field_validator('title')
    @classmethod
    def validate_title(cls, v):
        if v is not None and not v.strip():
            raise ValueError('Title cannot be empty')
        return v.strip() if v else v
