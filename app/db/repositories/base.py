import logging
from typing import Any, Dict, List, Optional, Tuple

from app.db.store import BaseStore

logger = logging.getLogger(__name__)


class CollectionRepository:
    """Базовый репозиторий одной коллекции хранилища

    Каждая операция читает коллекцию целиком и, если нужно, целиком её записывает.
    Записи, которые не удаётся преобразовать в сущность, не возвращаются,
    но сохраняются в коллекции при перезаписи.
    """

    collection: str = ""
    # Ключи записи, которыми владеет сущность; остальные ключи сохраняются как есть
    fields: Tuple[str, ...] = ()

    def __init__(self, store: BaseStore):
        self.store = store

    def _records(self) -> List[Dict[str, Any]]:
        return self.store.load(self.collection)

    def _write(self, records: List[Dict[str, Any]]) -> None:
        self.store.save(self.collection, records)

    @staticmethod
    def _find_index(records: List[Dict[str, Any]], entity_id: str) -> int:
        for index, record in enumerate(records):
            if str(record.get("id")) == entity_id:
                return index
        return -1

    def _safe_to_domain(self, record: Dict[str, Any]):
        try:
            return self._to_domain(record)
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"Skipping malformed {self.collection} record {record.get('id')!r}: {e}")
            return None

    def get_all(self) -> list:
        """Получение всех записей коллекции"""
        entities = (self._safe_to_domain(record) for record in self._records())
        return [entity for entity in entities if entity is not None]

    def get_by_id(self, entity_id: str):
        """Получение записи по идентификатору"""
        records = self._records()
        index = self._find_index(records, entity_id)
        if index == -1:
            return None
        return self._safe_to_domain(records[index])

    def create(self, entity):
        """Добавление записи в конец коллекции"""
        records = self._records()
        records.append(self._to_record(entity))
        self._write(records)
        return entity

    def update(self, entity) -> Optional[Any]:
        """Замена записи с тем же идентификатором"""
        records = self._records()
        index = self._find_index(records, entity.id)
        if index == -1:
            return None
        extra = {k: v for k, v in records[index].items() if k not in self.fields}
        records[index] = {**extra, **self._to_record(entity)}
        self._write(records)
        return entity

    def delete(self, entity_id: str) -> bool:
        """Удаление записи"""
        records = self._records()
        remaining = [record for record in records if str(record.get("id")) != entity_id]
        if len(remaining) == len(records):
            return False
        self._write(remaining)
        return True

    def _to_domain(self, record: Dict[str, Any]):
        raise NotImplementedError

    def _to_record(self, entity) -> Dict[str, Any]:
        raise NotImplementedError
