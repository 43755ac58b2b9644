import re
from pydantic import BaseModel, Field, field_validator
from typing import Optional

from app.domains.identity.entities import UserRole

# Только форма local@domain; адрес сохраняется в том виде, в каком его ввели
EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+$")


def check_email(value: str) -> str:
    if not EMAIL_PATTERN.match(value):
        raise ValueError('Invalid email address')
    return value


class UserBase(BaseModel):
    """Базовая схема пользователя"""
    name: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., max_length=254)
    role: UserRole = UserRole.VIEWER

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError('Name must not be blank')
        return v.strip()

    @field_validator('email')
    @classmethod
    def validate_email(cls, v):
        return check_email(v)


class UserCreate(UserBase):
    """Схема для создания пользователя администратором"""
    avatar: Optional[str] = None


class UserRegister(UserBase):
    """Схема для регистрации"""
    password: str = Field(..., min_length=1, max_length=128)


class UserUpdate(BaseModel):
    """Схема для обновления пользователя"""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[str] = Field(None, max_length=254)
    role: Optional[UserRole] = None
    avatar: Optional[str] = None

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if v is not None and not v.strip():
            raise ValueError('Name must not be blank')
        return v.strip() if v is not None else v

    @field_validator('email')
    @classmethod
    def validate_email(cls, v):
        return check_email(v) if v is not None else v
