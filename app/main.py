import logging
from typing import Any, Dict, Optional

from app.core.config import Settings, settings as default_settings
from app.core.db import create_store
from app.db.store import BaseStore
from app.domains.access import AuthState, GuardDecision, decide_navigation, navigation_items
from app.domains.documents.services import DocumentService
from app.domains.identity.services import AuthService, UserService
from app.domains.identity.session import SessionHolder
from app.domains.qa.entities import QuestionStatus
from app.domains.qa.services import QuestionService

logger = logging.getLogger(__name__)


class MockApi:
    """Точка входа: сервисы поверх одного хранилища и одной сессии"""

    def __init__(self, store: BaseStore, settings: Optional[Settings] = None):
        self.settings = settings or default_settings
        self.store = store
        self.session = SessionHolder(store)

        self.auth = AuthService(store, self.session, self.settings)
        self.users = UserService(store, self.session, self.settings)
        self.documents = DocumentService(store, self.session, self.settings)
        self.questions = QuestionService(store, self.session, self.settings)

        store.initialize()
        self.session.restore()

    def auth_state(self) -> AuthState:
        return self.session.auth_state()

    def navigate(self, path: str) -> GuardDecision:
        """Решение для перехода на путь с текущим состоянием сессии"""
        return decide_navigation(self.auth_state(), path)

    def navigation(self):
        return navigation_items(self.session.current_user())

    async def dashboard_summary(self) -> Dict[str, Any]:
        """Данные главной страницы: последние документы, открытые вопросы, число пользователей для админа"""
        documents = await self.documents.get_all()
        questions = await self.questions.get_all()

        user_count = None
        user = self.session.current_user()
        if user is not None and user.has_role("admin"):
            user_count = len(await self.users.get_all())

        return {
            "recent_documents": documents[:3],
            "unanswered_questions": [q for q in questions if q.status == QuestionStatus.UNANSWERED],
            "document_count": len(documents),
            "question_count": len(questions),
            "user_count": user_count
        }


def create_api(settings: Optional[Settings] = None, store: Optional[BaseStore] = None) -> MockApi:
    """Сборка API по настройкам"""
    settings = settings or default_settings
    store = store or create_store(settings)
    logger.info(f"Using {type(store).__name__} with prefix {store.prefix}")
    return MockApi(store, settings)
