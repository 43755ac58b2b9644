import logging
from typing import Optional

from app.db.store import BaseStore, CURRENT_USER
from app.domains.access.guard import AuthState
from app.domains.identity.entities import User

logger = logging.getLogger(__name__)


class SessionHolder:
    """Текущая сессия клиента, хранится в том же хранилище под отдельным ключом

    Пока не вызван ``restore`` сессия считается загружающейся.
    """

    def __init__(self, store: BaseStore):
        self.store = store
        self.loading = True

    def restore(self) -> Optional[User]:
        """Первичное чтение сессии; повреждённый маркер удаляется"""
        try:
            user = self.current_user()
            if user is None and self.store.get_item(self.store.key(CURRENT_USER)) is not None:
                logger.warning("Discarding unreadable session marker")
                self.clear()
            return user
        finally:
            self.loading = False

    def current_user(self) -> Optional[User]:
        record = self.store.load_record(CURRENT_USER)
        if record is None:
            return None
        try:
            return User.from_record(record)
        except (KeyError, TypeError, ValueError):
            return None

    def set_user(self, user: User) -> None:
        self.store.save_record(CURRENT_USER, user.to_record())

    def clear(self) -> None:
        self.store.remove_record(CURRENT_USER)

    def is_current(self, user_id: str) -> bool:
        user = self.current_user()
        return user is not None and user.id == user_id

    @property
    def is_authenticated(self) -> bool:
        return self.current_user() is not None

    def auth_state(self) -> AuthState:
        """Снимок для проверки маршрутов"""
        if self.loading:
            return AuthState(loading=True)
        user = self.current_user()
        return AuthState(loading=False, is_authenticated=user is not None, user=user)
