from typing import Optional
from passlib.context import CryptContext

# Контекст для хеширования паролей
pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Проверка пароля"""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Хеширование пароля"""
    return pwd_context.hash(password)


def avatar_url(base_url: str, seed: Optional[str]) -> str:
    """Детерминированный адрес аватара-заглушки"""
    return f"{base_url}?seed={seed}"
