import logging
from typing import List, Optional, Union

from app.core import latency
from app.core.config import Settings, settings as default_settings
from app.core.exceptions import DuplicateEmail, InvalidCredentials, NotFound
from app.core.security import get_password_hash, verify_password
from app.db.repositories.user_repository import CredentialRepository, UserRepository
from app.db.store import BaseStore
from app.domains.identity.entities import User, UserRole
from app.domains.identity.schemas import UserCreate, UserRegister, UserUpdate
from app.domains.identity.session import SessionHolder

logger = logging.getLogger(__name__)


class AuthService:
    """Сервис аутентификации: вход, регистрация, выход, текущая сессия"""

    def __init__(self, store: BaseStore, session: SessionHolder, settings: Optional[Settings] = None):
        self.settings = settings or default_settings
        self.session = session
        self.user_repository = UserRepository(store)
        self.credential_repository = CredentialRepository(store)

    async def login(self, email: str, password: str) -> User:
        """Вход пользователя по email без учёта регистра"""
        await latency.simulate_latency(latency.LOGIN, self.settings.latency_scale)

        user = self.user_repository.get_by_email(email)
        if not user:
            logger.info("Login rejected: unknown email")
            raise InvalidCredentials()

        # Пароль сверяется только если включена проверка и для пользователя сохранён хеш
        if self.settings.verify_passwords:
            password_hash = self.credential_repository.get_hash(user.id)
            if password_hash and not verify_password(password, password_hash):
                logger.info(f"Login rejected for user {user.id}: wrong password")
                raise InvalidCredentials()

        self.session.set_user(user)
        logger.info(f"User {user.id} logged in")
        return user

    async def register(
        self,
        name: str,
        email: str,
        password: str,
        role: Union[UserRole, str] = UserRole.VIEWER
    ) -> User:
        """Регистрация нового пользователя и открытие сессии"""
        await latency.simulate_latency(latency.REGISTER, self.settings.latency_scale)

        data = UserRegister(name=name, email=email, password=password, role=role)

        if self.user_repository.email_exists(data.email):
            raise DuplicateEmail()

        user = User.create_user(
            name=data.name,
            email=data.email,
            role=data.role,
            avatar_base_url=self.settings.avatar_base_url
        )
        self.user_repository.create(user)
        self.credential_repository.set_hash(user.id, get_password_hash(data.password))
        self.session.set_user(user)

        logger.info(f"User {user.id} registered with role {user.role.value}")
        return user

    async def logout(self) -> None:
        """Выход; повторный вызов не является ошибкой"""
        await latency.simulate_latency(latency.LOGOUT, self.settings.latency_scale)
        self.session.clear()
        logger.info("Session cleared")

    def get_current_user(self) -> Optional[User]:
        return self.session.current_user()


class UserService:
    """Сервис управления пользователями"""

    def __init__(self, store: BaseStore, session: SessionHolder, settings: Optional[Settings] = None):
        self.settings = settings or default_settings
        self.session = session
        self.user_repository = UserRepository(store)
        self.credential_repository = CredentialRepository(store)

    async def get_all(self) -> List[User]:
        await latency.simulate_latency(latency.LIST_USERS, self.settings.latency_scale)
        return self.user_repository.get_all()

    async def get_by_id(self, user_id: str) -> User:
        await latency.simulate_latency(latency.GET_USER, self.settings.latency_scale)

        user = self.user_repository.get_by_id(user_id)
        if not user:
            raise NotFound("User", user_id)
        return user

    async def create(self, user_data: Union[UserCreate, dict]) -> User:
        """Создание пользователя администратором, сессия не меняется"""
        await latency.simulate_latency(latency.CREATE_USER, self.settings.latency_scale)

        if isinstance(user_data, dict):
            user_data = UserCreate(**user_data)

        if self.user_repository.email_exists(user_data.email):
            raise DuplicateEmail()

        user = User.create_user(
            name=user_data.name,
            email=user_data.email,
            role=user_data.role,
            avatar=user_data.avatar,
            avatar_base_url=self.settings.avatar_base_url
        )
        self.user_repository.create(user)

        logger.info(f"User {user.id} created")
        return user

    async def update(self, user_id: str, update_data: Union[UserUpdate, dict]) -> User:
        """Обновление пользователя; сессия обновляется, если это текущий пользователь"""
        await latency.simulate_latency(latency.UPDATE, self.settings.latency_scale)

        if isinstance(update_data, dict):
            update_data = UserUpdate(**update_data)

        user = self.user_repository.get_by_id(user_id)
        if not user:
            raise NotFound("User", user_id)

        changes = update_data.model_dump(exclude_unset=True)
        if changes.get("email") and self.user_repository.email_exists(changes["email"], exclude_id=user_id):
            raise DuplicateEmail()

        user.update_profile(**changes)
        self.user_repository.update(user)

        if self.session.is_current(user_id):
            self.session.set_user(user)

        logger.info(f"User {user_id} updated")
        return user

    async def delete(self, user_id: str) -> bool:
        """Удаление пользователя; удаление текущего пользователя закрывает сессию"""
        await latency.simulate_latency(latency.DELETE, self.settings.latency_scale)

        if not self.user_repository.delete(user_id):
            raise NotFound("User", user_id)

        self.credential_repository.delete(user_id)

        if self.session.is_current(user_id):
            self.session.clear()
            logger.info(f"Deleted user {user_id} was the session user, session cleared")

        logger.info(f"User {user_id} deleted")
        return True
