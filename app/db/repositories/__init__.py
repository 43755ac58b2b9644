from app.db.repositories.base import CollectionRepository
from app.db.repositories.user_repository import UserRepository, CredentialRepository
from app.db.repositories.document_repository import DocumentRepository
from app.db.repositories.question_repository import QuestionRepository

__all__ = [
    "CollectionRepository",
    "UserRepository",
    "CredentialRepository",
    "DocumentRepository",
    "QuestionRepository"
]
