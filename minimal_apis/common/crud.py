# minimal_apis/common/crud.py

"""
Generic storage access over SQLAlchemy models.

A Repository is bound to one request-scoped Session and one model class.
Every write is its own transaction: it commits on success and rolls the
session back before re-raising on failure.
"""
import logging
from typing import Any, Dict, Generic, List, Type, TypeVar

from sqlalchemy import inspect, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")


class RecordNotFound(Exception):
    """Raised when no record exists for the requested primary key."""

    def __init__(self, model: type, record_id: Any):
        self.model = model
        self.record_id = record_id
        super().__init__(f"{model.__name__} with id {record_id} not found")


class Repository(Generic[ModelT]):
    def __init__(self, db: Session, model: Type[ModelT]):
        self.db = db
        self.model = model
        self._pk = inspect(model).primary_key[0]

    def find_by_id(self, record_id: int) -> ModelT:
        record = self.db.get(self.model, record_id)
        if record is None:
            raise RecordNotFound(self.model, record_id)
        return record

    def exists(self, record_id: int) -> bool:
        return self.db.get(self.model, record_id) is not None

    def list_all(self, *criteria) -> List[ModelT]:
        """Return every record matching the optional filter `criteria`, by id."""
        stmt = select(self.model).order_by(self._pk)
        if criteria:
            stmt = stmt.where(*criteria)
        return list(self.db.scalars(stmt).all())

    def insert(self, values: Dict[str, Any]) -> ModelT:
        # The id is always server-assigned.
        values = {k: v for k, v in values.items() if k != self._pk.key}
        record = self.model(**values)
        self.db.add(record)
        self._commit()
        self.db.refresh(record)
        logger.debug(f"Inserted {self.model.__name__} id={getattr(record, self._pk.key)}")
        return record

    def update(self, record_id: int, values: Dict[str, Any]) -> ModelT:
        record = self.find_by_id(record_id)
        for field, value in values.items():
            if field == self._pk.key:
                continue
            setattr(record, field, value)
        self._commit()
        self.db.refresh(record)
        return record

    def delete(self, record_id: int) -> ModelT:
        record = self.find_by_id(record_id)
        self.db.delete(record)
        self._commit()
        return record

    def _commit(self) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
