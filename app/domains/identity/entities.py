import uuid
from enum import Enum
from typing import Optional, Dict, Any, Iterable, Union

from app.core.security import avatar_url


class UserRole(str, Enum):
    """Роли пользователей"""
    ADMIN = "admin"
    EDITOR = "editor"
    VIEWER = "viewer"


class User:
    """Сущность пользователя домена Identity"""

    def __init__(
        self,
        id: str,
        name: str,
        email: str,
        role: Union[UserRole, str] = UserRole.VIEWER,
        avatar: Optional[str] = None
    ):
        self.id = id
        self.name = name
        self.email = email
        self.role = UserRole(role)
        self.avatar = avatar

    def has_role(self, role: Union[UserRole, str, Iterable[Union[UserRole, str]]]) -> bool:
        """Проверка роли пользователя (одна роль или список допустимых)"""
        if isinstance(role, (UserRole, str)):
            return self.role == UserRole(role)
        return self.role in {UserRole(r) for r in role}

    def matches_email(self, email: str) -> bool:
        """Сравнение email без учёта регистра"""
        return self.email.lower() == email.lower()

    def update_profile(self, **fields: Any) -> None:
        """Поверхностное слияние переданных полей"""
        for name in ("name", "email", "role", "avatar"):
            value = fields.get(name)
            if name in fields and (value is not None or name == "avatar"):
                setattr(self, name, UserRole(value) if name == "role" else value)

    @classmethod
    def create_user(
        cls,
        name: str,
        email: str,
        role: Union[UserRole, str] = UserRole.VIEWER,
        avatar: Optional[str] = None,
        avatar_base_url: str = "https://api.dicebear.com/7.x/avataaars/svg"
    ) -> "User":
        """Создание нового пользователя со свежим идентификатором"""
        user_id = uuid.uuid4().hex
        return cls(
            id=user_id,
            name=name,
            email=email,
            role=role,
            avatar=avatar or avatar_url(avatar_base_url, user_id)
        )

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "User":
        return cls(
            id=str(record["id"]),
            name=record["name"],
            email=record["email"],
            role=record.get("role", UserRole.VIEWER.value),
            avatar=record.get("avatar")
        )

    def to_record(self) -> Dict[str, Any]:
        record = {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "role": self.role.value
        }
        if self.avatar is not None:
            record["avatar"] = self.avatar
        return record

    def __eq__(self, other) -> bool:
        if not isinstance(other, User):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"User(id={self.id}, email={self.email}, role={self.role.value})"
