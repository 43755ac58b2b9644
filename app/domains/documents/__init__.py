from app.domains.documents.entities import (
    Document, DocumentStatus, SUPPORTED_TYPES, detect_document_type, format_file_size
)
from app.domains.documents.schemas import DocumentBase, DocumentCreate, DocumentUpdate
from app.domains.documents.services import DocumentService

__all__ = [
    "Document", "DocumentStatus", "SUPPORTED_TYPES", "detect_document_type", "format_file_size",
    "DocumentBase", "DocumentCreate", "DocumentUpdate",
    "DocumentService"
]
