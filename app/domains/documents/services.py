import logging
from datetime import datetime
from typing import Callable, List, Optional, Union

from app.core import latency
from app.core.clock import utcnow
from app.core.config import Settings, settings as default_settings
from app.core.exceptions import NotFound, Unauthenticated, ValidationFailed
from app.db.repositories.document_repository import DocumentRepository
from app.db.store import BaseStore
from app.domains.documents.entities import Document
from app.domains.documents.schemas import DocumentCreate, DocumentUpdate
from app.domains.identity.session import SessionHolder

logger = logging.getLogger(__name__)


class DocumentService:
    """Сервис для работы с документами"""

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
        self.document_repository = DocumentRepository(store)

    async def get_all(self) -> List[Document]:
        await latency.simulate_latency(latency.LIST, self.settings.latency_scale)
        return self.document_repository.get_all()

    async def get_by_id(self, document_id: str) -> Document:
        await latency.simulate_latency(latency.GET, self.settings.latency_scale)

        document = self.document_repository.get_by_id(document_id)
        if not document:
            raise NotFound("Document", document_id)
        return document

    async def search(self, query: str) -> List[Document]:
        await latency.simulate_latency(latency.LIST, self.settings.latency_scale)
        return self.document_repository.search(query)

    async def create(self, document_data: Union[DocumentCreate, dict]) -> Document:
        """Создание документа, требует активной сессии"""
        await latency.simulate_latency(latency.CREATE, self.settings.latency_scale)

        current_user = self.session.current_user()
        if not current_user:
            raise Unauthenticated("create a document")

        if isinstance(document_data, dict):
            document_data = DocumentCreate(**document_data)

        document = Document.create_document(
            title=document_data.title,
            created_by=document_data.created_by or current_user.id,
            content=document_data.content,
            type=document_data.type,
            size=document_data.size,
            status=document_data.status,
            now=self.clock()
        )
        self.document_repository.create(document)

        logger.info(f"Document {document.id} created by user {current_user.id}")
        return document

    async def update(self, document_id: str, update_data: Union[DocumentUpdate, dict]) -> Document:
        """Обновление документа, updatedAt обновляется всегда"""
        await latency.simulate_latency(latency.UPDATE, self.settings.latency_scale)

        if isinstance(update_data, dict):
            update_data = DocumentUpdate(**update_data)

        document = self.document_repository.get_by_id(document_id)
        if not document:
            raise NotFound("Document", document_id)

        document.apply_changes(update_data.model_dump(exclude_unset=True), now=self.clock())
        self.document_repository.update(document)

        logger.info(f"Document {document_id} updated")
        return document

    async def delete(self, document_id: str) -> bool:
        await latency.simulate_latency(latency.DELETE, self.settings.latency_scale)

        if not self.document_repository.delete(document_id):
            raise NotFound("Document", document_id)

        logger.info(f"Document {document_id} deleted")
        return True

    def validate_upload_size(self, size: int) -> None:
        """Проверка размера загружаемого файла; create сам этот лимит не применяет"""
        limit = self.settings.max_upload_bytes
        if size > limit:
            raise ValidationFailed(f"File size exceeds {limit // (1024 * 1024)}MB limit")
