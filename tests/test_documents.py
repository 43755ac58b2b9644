from datetime import datetime, timedelta, timezone

import pytest

from app.core.exceptions import NotFound, Unauthenticated, ValidationFailed
from app.domains.documents.entities import DocumentStatus, detect_document_type, format_file_size
from app.domains.documents.schemas import DocumentCreate

T0 = datetime(2024, 4, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
async def editor(api):
    return await api.auth.login("editor@example.com", "pw")


def _new_document(**overrides):
    data = {"title": "T", "content": "Body", "type": "txt", "size": 12, "status": "draft"}
    data.update(overrides)
    return data


class TestDocumentCreate:
    async def test_create_requires_session(self, api, store):
        before = store.get_item("docManagement_documents")
        with pytest.raises(Unauthenticated) as exc:
            await api.documents.create(_new_document())
        assert str(exc.value) == "You must be logged in to create a document"
        assert store.get_item("docManagement_documents") == before
        assert len(await api.documents.get_all()) == 3

    async def test_session_checked_before_payload(self, api):
        with pytest.raises(Unauthenticated):
            await api.documents.create({"title": "   "})

    async def test_create_stamps_timestamps(self, api, editor):
        api.documents.clock = lambda: T0
        document = await api.documents.create(DocumentCreate(**_new_document()))
        assert document.created_at == T0
        assert document.updated_at == T0
        assert document.created_by == editor.id
        assert document.status == DocumentStatus.DRAFT

        stored = (await api.documents.get_all())[-1]
        assert stored.id == document.id
        assert stored.title == "T"

    async def test_create_keeps_explicit_creator(self, api, editor):
        document = await api.documents.create(_new_document(created_by="1"))
        assert document.created_by == "1"

    async def test_create_does_not_enforce_upload_limit(self, api, editor):
        document = await api.documents.create(_new_document(size=50 * 1024 * 1024))
        assert document.size == 50 * 1024 * 1024


class TestDocumentUpdate:
    async def test_update_merges_and_refreshes_updated_at(self, api, editor):
        api.documents.clock = lambda: T0
        document = await api.documents.create(_new_document())

        api.documents.clock = lambda: T0 + timedelta(minutes=5)
        updated = await api.documents.update(document.id, {"status": "published"})
        assert updated.status == DocumentStatus.PUBLISHED
        assert updated.title == "T"
        assert updated.created_at == T0
        assert updated.updated_at == T0 + timedelta(minutes=5)

    async def test_update_without_changes_still_touches(self, api):
        api.documents.clock = lambda: T0 + timedelta(days=30)
        updated = await api.documents.update("1", {})
        assert updated.updated_at == T0 + timedelta(days=30)
        assert (await api.documents.get_by_id("1")).updated_at == T0 + timedelta(days=30)

    async def test_updated_at_never_before_created_at(self, api, editor):
        api.documents.clock = lambda: T0
        document = await api.documents.create(_new_document())

        api.documents.clock = lambda: T0 - timedelta(hours=1)
        updated = await api.documents.update(document.id, {"title": "Earlier clock"})
        assert updated.updated_at >= updated.created_at

    async def test_update_missing(self, api):
        with pytest.raises(NotFound) as exc:
            await api.documents.update("missing", {"title": "X"})
        assert str(exc.value) == "Document not found"


class TestDocumentQueries:
    async def test_get_by_id(self, api):
        document = await api.documents.get_by_id("2")
        assert document.title == "API Documentation"
        assert document.type == "docx"

    async def test_get_by_id_missing(self, api):
        with pytest.raises(NotFound):
            await api.documents.get_by_id("missing")

    async def test_search_by_title(self, api):
        results = await api.documents.search("GUIDE")
        assert [d.id for d in results] == ["1"]

    async def test_delete(self, api):
        assert await api.documents.delete("3") is True
        assert [d.id for d in await api.documents.get_all()] == ["1", "2"]

    async def test_delete_missing(self, api):
        with pytest.raises(NotFound):
            await api.documents.delete("missing")


class TestUploadHelpers:
    def test_detect_document_type(self):
        assert detect_document_type("Report.PDF") == "pdf"
        assert detect_document_type("archive.tar.gz") is None
        assert detect_document_type("README") is None

    def test_format_file_size(self):
        assert format_file_size(512) == "512 B"
        assert format_file_size(2048) == "2.0 KB"
        assert format_file_size(3 * 1048576) == "3.0 MB"

    def test_validate_upload_size(self, api):
        api.documents.validate_upload_size(10 * 1024 * 1024)
        with pytest.raises(ValidationFailed) as exc:
            api.documents.validate_upload_size(10 * 1024 * 1024 + 1)
        assert str(exc.value) == "File size exceeds 10MB limit"
