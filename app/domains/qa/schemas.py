from pydantic import BaseModel, Field, field_validator
from typing import Optional


class QuestionCreate(BaseModel):
    """Схема для создания вопроса

    Статус и ответы задаются сервером, переданные значения игнорируются.
    """
    title: str = Field(..., min_length=1, max_length=255)
    content: str = Field(default="")
    document_id: Optional[str] = None
    asked_by: Optional[str] = None

    @field_validator('title')
    @classmethod
    def validate_title(cls, v):
        if not v.strip():
            raise ValueError('Title cannot be empty')
        return v.strip()


class AnswerCreate(BaseModel):
    """Схема для ответа на вопрос"""
    content: str = Field(..., min_length=1)

    @field_validator('content')
    @classmethod
    def validate_content(cls, v):
        if not v.strip():
            raise ValueError('Answer cannot be empty')
        return v
