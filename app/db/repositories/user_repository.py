from typing import Any, Dict, Optional, TYPE_CHECKING

from app.db.repositories.base import CollectionRepository
from app.db.store import USERS, CREDENTIALS

if TYPE_CHECKING:
    from app.domains.identity.entities import User


class UserRepository(CollectionRepository):
    """Репозиторий для работы с пользователями"""

    collection = USERS
    fields = ("id", "name", "email", "role", "avatar")

    def get_by_email(self, email: str) -> Optional["User"]:
        """Получение пользователя по email без учёта регистра"""
        for user in self.get_all():
            if user.matches_email(email):
                return user
        return None

    def email_exists(self, email: str, exclude_id: Optional[str] = None) -> bool:
        """Проверка существования email без учёта регистра"""
        email = email.lower()
        for record in self._records():
            if exclude_id is not None and str(record.get("id")) == exclude_id:
                continue
            if str(record.get("email", "")).lower() == email:
                return True
        return False

    def _to_domain(self, record: Dict[str, Any]) -> "User":
        from app.domains.identity.entities import User

        return User.from_record(record)

    def _to_record(self, user: "User") -> Dict[str, Any]:
        return user.to_record()


class CredentialRepository:
    """Хеши паролей, хранятся отдельно от записей пользователей"""

    collection = CREDENTIALS

    def __init__(self, store):
        self.store = store

    def get_hash(self, user_id: str) -> Optional[str]:
        for record in self.store.load(self.collection):
            if record.get("userId") == user_id:
                return record.get("passwordHash")
        return None

    def set_hash(self, user_id: str, password_hash: str) -> None:
        records = [r for r in self.store.load(self.collection) if r.get("userId") != user_id]
        records.append({"userId": user_id, "passwordHash": password_hash})
        self.store.save(self.collection, records)

    def delete(self, user_id: str) -> bool:
        records = self.store.load(self.collection)
        remaining = [r for r in records if r.get("userId") != user_id]
        if len(remaining) == len(records):
            return False
        self.store.save(self.collection, remaining)
        return True
