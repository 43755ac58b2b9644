import logging
from datetime import datetime
from typing import Callable, List, Optional, Tuple, Union

from app.core import latency
from app.core.clock import utcnow
from app.core.config import Settings, settings as default_settings
from app.core.exceptions import NotFound, Unauthenticated
from app.db.repositories.question_repository import QuestionRepository
from app.db.store import BaseStore
from app.domains.identity.session import SessionHolder
from app.domains.qa.entities import Answer, Question, QuestionStatus
from app.domains.qa.schemas import AnswerCreate, QuestionCreate

logger = logging.getLogger(__name__)


class QuestionService:
    """Сервис доски вопросов и ответов"""

    def __init__(
        self,
        store: BaseStore,
        session: SessionHolder,
        settings: Optional[Settings] = None,
        clock: Callable[[], datetime] = utcnow
    ):
        self.settings = settings or default_settings
        self.session = session
        self.clock = clock
        self.question_repository = QuestionRepository(store)

    async def get_all(self) -> List[Question]:
        await latency.simulate_latency(latency.LIST, self.settings.latency_scale)
        return self.question_repository.get_all()

    async def get_by_id(self, question_id: str) -> Question:
        await latency.simulate_latency(latency.GET, self.settings.latency_scale)

        question = self.question_repository.get_by_id(question_id)
        if not question:
            raise NotFound("Question", question_id)
        return question

    async def search(self, query: str) -> List[Question]:
        await latency.simulate_latency(latency.LIST, self.settings.latency_scale)
        return self.question_repository.search(query)

    async def split_by_status(self, query: str = "") -> Tuple[List[Question], List[Question]]:
        """Вопросы без ответа и с ответами, как на доске Q&A"""
        questions = await self.search(query) if query else await self.get_all()
        unanswered = [q for q in questions if q.status == QuestionStatus.UNANSWERED]
        answered = [q for q in questions if q.status == QuestionStatus.ANSWERED]
        return unanswered, answered

    async def create(self, question_data: Union[QuestionCreate, dict]) -> Question:
        """Создание вопроса, требует активной сессии"""
        await latency.simulate_latency(latency.CREATE, self.settings.latency_scale)

        current_user = self.session.current_user()
        if not current_user:
            raise Unauthenticated("ask a question")

        if isinstance(question_data, dict):
            question_data = QuestionCreate(**question_data)

        question = Question.create_question(
            title=question_data.title,
            content=question_data.content,
            asked_by=question_data.asked_by or current_user.id,
            document_id=question_data.document_id,
            now=self.clock()
        )
        self.question_repository.create(question)

        logger.info(f"Question {question.id} submitted by user {current_user.id}")
        return question

    async def add_answer(self, question_id: str, content: str) -> Question:
        """Добавление ответа в конец списка; статус становится answered"""
        await latency.simulate_latency(latency.UPDATE, self.settings.latency_scale)

        current_user = self.session.current_user()
        if not current_user:
            raise Unauthenticated("answer a question")

        answer_data = AnswerCreate(content=content)

        question = self.question_repository.get_by_id(question_id)
        if not question:
            raise NotFound("Question", question_id)

        question.add_answer(Answer.create_answer(answer_data.content, current_user.id, now=self.clock()))
        self.question_repository.update(question)

        logger.info(f"Answer added to question {question_id} by user {current_user.id}")
        return question

    async def delete(self, question_id: str) -> bool:
        await latency.simulate_latency(latency.DELETE, self.settings.latency_scale)

        if not self.question_repository.delete(question_id):
            raise NotFound("Question", question_id)

        logger.info(f"Question {question_id} deleted")
        return True
