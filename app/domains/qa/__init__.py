from app.domains.qa.entities import Answer, Question, QuestionStatus
from app.domains.qa.schemas import AnswerCreate, QuestionCreate
from app.domains.qa.services import QuestionService

__all__ = [
    "Answer", "Question", "QuestionStatus",
    "AnswerCreate", "QuestionCreate",
    "QuestionService"
]
