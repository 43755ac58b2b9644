import uuid
from datetime import datetime
from enum import Enum
from typing import Optional, List, Dict, Any

from app.core.clock import from_iso, to_iso, utcnow


class QuestionStatus(str, Enum):
    UNANSWERED = "unanswered"
    ANSWERED = "answered"


class Answer:
    """Ответ на вопрос; принадлежит вопросу и отдельно не существует"""

    def __init__(
        self,
        id: str,
        content: str,
        answered_by: str,
        answered_at: Optional[datetime] = None
    ):
        self.id = id
        self.content = content
        self.answered_by = answered_by
        self.answered_at = answered_at or utcnow()

    @classmethod
    def create_answer(cls, content: str, answered_by: str, now: Optional[datetime] = None) -> "Answer":
        return cls(id=uuid.uuid4().hex, content=content, answered_by=answered_by, answered_at=now)

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Answer":
        return cls(
            id=str(record["id"]),
            content=record["content"],
            answered_by=record.get("answeredBy"),
            answered_at=from_iso(record["answeredAt"])
        )

    def to_record(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "content": self.content,
            "answeredBy": self.answered_by,
            "answeredAt": to_iso(self.answered_at)
        }

    def __repr__(self) -> str:
        return f"Answer(id={self.id}, answered_by={self.answered_by})"


class Question:
    """Сущность вопроса; статус определяется наличием ответов"""

    def __init__(
        self,
        id: str,
        title: str,
        content: str,
        asked_by: str,
        asked_at: Optional[datetime] = None,
        document_id: Optional[str] = None,
        answers: Optional[List[Answer]] = None
    ):
        self.id = id
        self.title = title
        self.content = content
        self.asked_by = asked_by
        self.asked_at = asked_at or utcnow()
        self.document_id = document_id
        self.answers = list(answers or [])

    @property
    def status(self) -> QuestionStatus:
        return QuestionStatus.ANSWERED if self.answers else QuestionStatus.UNANSWERED

    def add_answer(self, answer: Answer) -> Answer:
        """Добавление ответа в конец; вопрос становится отвеченным"""
        self.answers.append(answer)
        return answer

    @classmethod
    def create_question(
        cls,
        title: str,
        content: str,
        asked_by: str,
        document_id: Optional[str] = None,
        now: Optional[datetime] = None
    ) -> "Question":
        """Создание вопроса без ответов"""
        return cls(
            id=uuid.uuid4().hex,
            title=title,
            content=content,
            asked_by=asked_by,
            asked_at=now,
            document_id=document_id
        )

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Question":
        return cls(
            id=str(record["id"]),
            title=record["title"],
            content=record.get("content", ""),
            asked_by=record.get("askedBy"),
            asked_at=from_iso(record["askedAt"]),
            document_id=record.get("documentId"),
            answers=[Answer.from_record(a) for a in record.get("answers") or []]
        )

    def to_record(self) -> Dict[str, Any]:
        record = {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "askedBy": self.asked_by,
            "askedAt": to_iso(self.asked_at),
            "status": self.status.value,
            "answers": [a.to_record() for a in self.answers]
        }
        if self.document_id is not None:
            record["documentId"] = self.document_id
        return record

    def __eq__(self, other) -> bool:
        if not isinstance(other, Question):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"Question(id={self.id}, title={self.title}, answers={len(self.answers)})"
