import pytest
from pydantic import ValidationError

from app.core.exceptions import DuplicateEmail, NotFound
from app.domains.identity.entities import UserRole
from app.domains.identity.schemas import UserCreate, UserUpdate


class TestUserQueries:
    async def test_get_all_returns_seeded_users(self, api):
        users = await api.users.get_all()
        assert [u.id for u in users] == ["1", "2", "3"]

    async def test_get_by_id(self, api):
        user = await api.users.get_by_id("2")
        assert user.email == "editor@example.com"
        assert user.role == UserRole.EDITOR

    async def test_get_by_id_missing(self, api):
        with pytest.raises(NotFound) as exc:
            await api.users.get_by_id("missing")
        assert str(exc.value) == "User not found"
        assert exc.value.entity == "User"


class TestUserCreate:
    async def test_create_does_not_touch_session(self, api):
        admin = await api.auth.login("admin@example.com", "pw")
        user = await api.users.create(UserCreate(name="New", email="new@example.com", role="editor"))
        assert user.role == UserRole.EDITOR
        assert api.auth.get_current_user() == admin
        assert len(await api.users.get_all()) == 4

    async def test_create_accepts_dict_and_keeps_avatar(self, api):
        user = await api.users.create({"name": "New", "email": "new@example.com", "avatar": "http://a/b.png"})
        assert user.avatar == "http://a/b.png"
        assert user.role == UserRole.VIEWER

    async def test_create_duplicate_email_case_insensitive(self, api):
        with pytest.raises(DuplicateEmail):
            await api.users.create({"name": "Dup", "email": "Viewer@Example.com"})
        assert len(await api.users.get_all()) == 3

    async def test_create_rejects_invalid_email(self, api):
        with pytest.raises(ValidationError):
            await api.users.create({"name": "Bad", "email": "not-an-email"})


class TestUserUpdate:
    async def test_update_merges_fields(self, api):
        user = await api.users.update("3", UserUpdate(name="Renamed"))
        assert user.name == "Renamed"
        assert user.email == "viewer@example.com"
        assert (await api.users.get_by_id("3")).name == "Renamed"

    async def test_update_refreshes_session_user(self, api):
        await api.auth.login("viewer@example.com", "pw")
        await api.users.update("3", {"role": "editor"})
        assert api.auth.get_current_user().role == UserRole.EDITOR

    async def test_update_other_user_leaves_session(self, api):
        await api.auth.login("viewer@example.com", "pw")
        await api.users.update("2", {"name": "Changed"})
        assert api.auth.get_current_user().name == "Viewer User"

    async def test_update_missing_user(self, api):
        with pytest.raises(NotFound):
            await api.users.update("missing", {"name": "X"})

    async def test_update_to_taken_email(self, api):
        with pytest.raises(DuplicateEmail):
            await api.users.update("3", {"email": "ADMIN@example.com"})
        assert (await api.users.get_by_id("3")).email == "viewer@example.com"

    async def test_update_keeping_own_email(self, api):
        user = await api.users.update("3", {"email": "VIEWER@example.com"})
        assert user.email == "VIEWER@example.com"

    async def test_clearing_avatar_reaches_store_and_session(self, api, store):
        await api.auth.login("viewer@example.com", "pw")
        user = await api.users.update("3", {"avatar": None})

        record = next(u for u in store.load("users") if u["id"] == "3")
        assert user.avatar is None
        assert "avatar" not in record
        assert api.auth.get_current_user().avatar is None
        assert (await api.users.get_by_id("3")).avatar is None

    async def test_update_keeps_unknown_record_keys(self, api, store):
        records = store.load("users")
        records[2]["department"] = "Sales"
        store.save("users", records)

        await api.users.update("3", {"name": "Renamed"})
        record = next(u for u in store.load("users") if u["id"] == "3")
        assert record["department"] == "Sales"
        assert record["name"] == "Renamed"


class TestUserDelete:
    async def test_delete_user(self, api):
        assert await api.users.delete("2") is True
        with pytest.raises(NotFound):
            await api.users.get_by_id("2")

    async def test_delete_missing_user_leaves_store(self, api, store):
        before = store.get_item("docManagement_users")
        with pytest.raises(NotFound):
            await api.users.delete("missing")
        assert store.get_item("docManagement_users") == before

    async def test_self_delete_clears_session(self, api):
        admin = await api.auth.login("admin@example.com", "pw")
        await api.users.delete(admin.id)
        assert api.auth.get_current_user() is None

    async def test_delete_drops_credentials(self, empty_api, empty_store):
        user = await empty_api.auth.register("Alice", "alice@x.com", "pw")
        await empty_api.users.delete(user.id)
        assert empty_store.load("credentials") == []
        assert empty_api.auth.get_current_user() is None
