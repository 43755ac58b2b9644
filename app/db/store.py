import copy
import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

from sqlalchemy import create_engine, delete
from sqlalchemy.orm import sessionmaker

from app.db.base import Base
from app.db.fixtures import DEFAULT_FIXTURES
from app.db.models.storage import StorageItem

logger = logging.getLogger(__name__)

USERS = "users"
DOCUMENTS = "documents"
QUESTIONS = "questions"
CREDENTIALS = "credentials"
CURRENT_USER = "currentUser"


class BaseStore:
    """Хранилище коллекций поверх строкового ключ-значение (семантика localStorage)

    Коллекция хранится целиком как JSON-массив под ключом ``<prefix>_<name>``.
    Запись всегда перезаписывает коллекцию полностью.
    """

    def __init__(self, prefix: str = "docManagement", fixtures: Optional[Dict[str, list]] = None):
        self.prefix = prefix
        self.fixtures = DEFAULT_FIXTURES if fixtures is None else fixtures

    def get_item(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set_item(self, key: str, value: str) -> None:
        raise NotImplementedError

    def remove_item(self, key: str) -> None:
        raise NotImplementedError

    def key(self, name: str) -> str:
        return f"{self.prefix}_{name}"

    def initialize(self) -> None:
        """Заполнение отсутствующих коллекций начальными данными"""
        for name, records in self.fixtures.items():
            key = self.key(name)
            if self.get_item(key) is None:
                logger.info(f"Seeding collection {key}")
                self.set_item(key, json.dumps(copy.deepcopy(records)))

    def load(self, collection: str) -> List[Dict[str, Any]]:
        """Чтение коллекции; повреждённые данные читаются как пустая коллекция"""
        self.initialize()
        key = self.key(collection)
        raw = self.get_item(key)
        if raw is None:
            return []

        try:
            data = json.loads(raw)
        except ValueError:
            logger.warning(f"Malformed data under {key}, treating as empty")
            return []

        if not isinstance(data, list):
            logger.warning(f"Unexpected payload under {key}, treating as empty")
            return []

        return [record for record in data if isinstance(record, dict)]

    def save(self, collection: str, records: List[Dict[str, Any]]) -> None:
        """Запись коллекции целиком"""
        self.set_item(self.key(collection), json.dumps(records))

    def load_record(self, name: str) -> Optional[Dict[str, Any]]:
        raw = self.get_item(self.key(name))
        if raw is None:
            return None

        try:
            data = json.loads(raw)
        except ValueError:
            logger.warning(f"Malformed record under {self.key(name)}, treating as absent")
            return None

        return data if isinstance(data, dict) else None

    def save_record(self, name: str, record: Dict[str, Any]) -> None:
        self.set_item(self.key(name), json.dumps(record))

    def remove_record(self, name: str) -> None:
        self.remove_item(self.key(name))


class MemoryStore(BaseStore):
    """Хранилище в памяти процесса"""

    def __init__(self, prefix: str = "docManagement", fixtures: Optional[Dict[str, list]] = None):
        super().__init__(prefix, fixtures)
        self._items: Dict[str, str] = {}

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def keys(self) -> List[str]:
        return list(self._items)


class FileStore(BaseStore):
    """Хранилище в каталоге: один JSON-файл на ключ"""

    def __init__(
        self,
        path: str,
        prefix: str = "docManagement",
        fixtures: Optional[Dict[str, list]] = None
    ):
        super().__init__(prefix, fixtures)
        self.path = Path(path)
        self.path.mkdir(parents=True, exist_ok=True)

    def _file(self, key: str) -> Path:
        return self.path / f"{key}.json"

    def get_item(self, key: str) -> Optional[str]:
        file = self._file(key)
        if not file.exists():
            return None
        return file.read_text(encoding="utf-8")

    def set_item(self, key: str, value: str) -> None:
        file = self._file(key)
        tmp_path = file.with_suffix(".tmp")
        try:
            tmp_path.write_text(value, encoding="utf-8")
            tmp_path.replace(file)
        except OSError:
            tmp_path.unlink(missing_ok=True)
            raise

    def remove_item(self, key: str) -> None:
        self._file(key).unlink(missing_ok=True)


class SqlStore(BaseStore):
    """Хранилище в таблице storage_items через SQLAlchemy"""

    def __init__(
        self,
        url: str,
        prefix: str = "docManagement",
        fixtures: Optional[Dict[str, list]] = None,
        echo: bool = False
    ):
        super().__init__(prefix, fixtures)
        self.engine = create_engine(url, future=True, echo=echo)
        Base.metadata.create_all(self.engine)
        self.SessionLocal = sessionmaker(bind=self.engine, expire_on_commit=False)

    def get_item(self, key: str) -> Optional[str]:
        with self.SessionLocal() as session:
            item = session.get(StorageItem, key)
            return item.value if item else None

    def set_item(self, key: str, value: str) -> None:
        with self.SessionLocal() as session:
            session.merge(StorageItem(key=key, value=value, updated_at=datetime.now(timezone.utc)))
            session.commit()

    def remove_item(self, key: str) -> None:
        with self.SessionLocal() as session:
            session.execute(delete(StorageItem).where(StorageItem.key == key))
            session.commit()

    def dispose(self) -> None:
        self.engine.dispose()
