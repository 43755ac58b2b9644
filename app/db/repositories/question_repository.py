from typing import Any, Dict, List, TYPE_CHECKING

from app.db.repositories.base import CollectionRepository
from app.db.store import QUESTIONS

if TYPE_CHECKING:
    from app.domains.qa.entities import Question


class QuestionRepository(CollectionRepository):
    """Репозиторий для работы с вопросами и ответами"""

    collection = QUESTIONS
    fields = ("id", "title", "content", "askedBy", "askedAt", "status", "documentId", "answers")

    def search(self, query: str) -> List["Question"]:
        """Поиск по заголовку и тексту вопроса без учёта регистра"""
        query = query.lower()
        return [
            question for question in self.get_all()
            if query in question.title.lower() or query in question.content.lower()
        ]

    def _to_domain(self, record: Dict[str, Any]) -> "Question":
        from app.domains.qa.entities import Question

        return Question.from_record(record)

    def _to_record(self, question: "Question") -> Dict[str, Any]:
        return question.to_record()
