from typing import Any, Dict, List, TYPE_CHECKING

from app.db.repositories.base import CollectionRepository
from app.db.store import DOCUMENTS

if TYPE_CHECKING:
    from app.domains.documents.entities import Document


class DocumentRepository(CollectionRepository):
    """Репозиторий для работы с документами"""

    collection = DOCUMENTS
    fields = ("id", "title", "content", "createdBy", "createdAt", "updatedAt", "type", "size", "status")

    def search(self, query: str) -> List["Document"]:
        """Поиск документов по подстроке заголовка без учёта регистра"""
        query = query.lower()
        return [doc for doc in self.get_all() if query in doc.title.lower()]

    def _to_domain(self, record: Dict[str, Any]) -> "Document":
        from app.domains.documents.entities import Document

        return Document.from_record(record)

    def _to_record(self, document: "Document") -> Dict[str, Any]:
        return document.to_record()
