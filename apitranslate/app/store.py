import logging
from abc import ABC, abstractmethod
from typing import Mapping

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .database import get_db
from .errors import NotFound, PersistenceFailure
from .models import Translation

logger = logging.getLogger(__name__)

CONTENT_FIELDS = ("original_text", "translated_text", "from_language", "to_language")


class TranslationStore(ABC):
    """CRUD over translation records keyed by id.

    Lookups of a missing id raise NotFound. Backend errors raise
    PersistenceFailure and are not retried.
    """

    @abstractmethod
    def create(self, record: Translation) -> Translation: ...

    @abstractmethod
    def find_by_id(self, translation_id: int) -> Translation: ...

    @abstractmethod
    def find_all(self) -> list[Translation]: ...

    @abstractmethod
    def update(self, translation_id: int, fields: Mapping[str, str]) -> Translation: ...

    @abstractmethod
    def delete(self, translation_id: int) -> None: ...


class SqlTranslationStore(TranslationStore):
    def __init__(self, db: Session) -> None:
        self.db = db

    def _failure(self, exc: SQLAlchemyError) -> PersistenceFailure:
        self.db.rollback()
        logger.error("Translation store error: %s", exc)
        return PersistenceFailure(str(exc))

    def _get(self, translation_id: int) -> Translation:
        translation = self.db.get(Translation, translation_id)
        if translation is None:
            raise NotFound(translation_id)
        return translation

    def create(self, record: Translation) -> Translation:
        try:
            self.db.add(record)
            self.db.commit()
            self.db.refresh(record)
        except SQLAlchemyError as exc:
            raise self._failure(exc) from exc
        return record

    def find_by_id(self, translation_id: int) -> Translation:
        try:
            return self._get(translation_id)
        except SQLAlchemyError as exc:
            raise self._failure(exc) from exc

    def find_all(self) -> list[Translation]:
        try:
            return list(self.db.execute(select(Translation).order_by(Translation.id)).scalars().all())
        except SQLAlchemyError as exc:
            raise self._failure(exc) from exc

    def update(self, translation_id: int, fields: Mapping[str, str]) -> Translation:
        try:
            translation = self._get(translation_id)
            for name in CONTENT_FIELDS:
                setattr(translation, name, fields[name])
            self.db.commit()
            self.db.refresh(translation)
        except SQLAlchemyError as exc:
            raise self._failure(exc) from exc
        return translation

    def delete(self, translation_id: int) -> None:
        try:
            self.db.delete(self._get(translation_id))
            self.db.commit()
        except SQLAlchemyError as exc:
            raise self._failure(exc) from exc


def get_store(db: Session = Depends(get_db)) -> TranslationStore:
    return SqlTranslationStore(db)
