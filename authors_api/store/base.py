"""
Generic single-table store with create/read/update/delete operations.

A store owns persistence for exactly one SQLAlchemy model. Every operation
opens its own session, commits before returning and rolls back on failure,
so a record is either fully written or left untouched. Outcomes are returned
as ``Result`` values; persistence errors never propagate as exceptions.

Example:
    ```python
    from authors_api.database import SessionLocal
    from authors_api.store.author_store import AuthorStore

    store = AuthorStore(SessionLocal)
    created = store.create({'name': 'Asimov', 'numOfBooks': 500})
    if created.ok:
        print(created.value.id)
    ```
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from authors_api.core.result import Result, describe_validation_errors
from authors_api.database import MAX_INTEGER

logger = logging.getLogger(__name__)

ModelT = TypeVar('ModelT')
DraftT = TypeVar('DraftT', bound=BaseModel)
RecordT = TypeVar('RecordT', bound=BaseModel)


class EntityStore(Generic[ModelT, DraftT, RecordT]):
    """
    Base store providing list/get/create/update/delete for one model.

    Subclasses set the class attributes below. The model must expose its
    primary key as ``id`` and its mutable columns under the same attribute
    names as the draft's fields.

    Attributes:
        model: SQLAlchemy model class.
        draft_type: Pydantic model accepted on create and update.
        record_type: Pydantic model returned to callers.
        entity_name: Human-readable name used in failure messages.
    """

    model: type[ModelT]
    draft_type: type[DraftT]
    record_type: type[RecordT]
    entity_name = 'Record'

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def list(self) -> Result[list[RecordT]]:
        """Return every record ordered by id."""
        db = self.session_factory()
        try:
            entities = db.query(self.model).order_by(self.model.id.asc()).all()
            return Result.success([self._to_record(entity) for entity in entities])
        except SQLAlchemyError as exc:
            return self._store_failure('list', exc)
        finally:
            db.close()

    def get(self, entity_id: int) -> Result[RecordT]:
        if not self._storable_id(entity_id):
            return self._not_found(entity_id)

        db = self.session_factory()
        try:
            entity = db.get(self.model, entity_id)
            if entity is None:
                return self._not_found(entity_id)
            return Result.success(self._to_record(entity))
        except SQLAlchemyError as exc:
            return self._store_failure('load', exc)
        finally:
            db.close()

    def create(self, draft: DraftT | Mapping[str, Any] | None) -> Result[RecordT]:
        """
        Insert a new record and return it with its assigned id.

        The id is always chosen by the database; a draft carrying one is
        rejected.
        """
        parsed = self._parse_draft(draft)
        if not parsed.ok:
            return Result(error=parsed.error)

        if parsed.value.id is not None:
            return Result.invalid(f'{self.entity_name} id is assigned by the server and must not be sent.')

        db = self.session_factory()
        try:
            entity = self.model(**self._mutable_fields(parsed.value))
            db.add(entity)
            db.commit()
            db.refresh(entity)

            return Result.success(self._to_record(entity))
        except IntegrityError as exc:
            db.rollback()
            return self._conflict('create', exc)
        except SQLAlchemyError as exc:
            db.rollback()
            return self._store_failure('create', exc)
        finally:
            db.close()

    def update(self, entity_id: int, draft: DraftT | Mapping[str, Any] | None) -> Result[None]:
        """
        Overwrite every mutable field of an existing record.

        The body id must equal ``entity_id``; this is checked before the
        database is touched.
        """
        parsed = self._parse_draft(draft)
        if not parsed.ok:
            return Result(error=parsed.error)

        if parsed.value.id != entity_id:
            return Result.invalid(
                f'{self.entity_name} id in the body does not match the id in the path.',
                details=f'path id {entity_id}, body id {parsed.value.id}',
            )
        if not self._storable_id(entity_id):
            return self._not_found(entity_id)

        db = self.session_factory()
        try:
            entity = db.get(self.model, entity_id)
            if entity is None:
                return self._not_found(entity_id)

            for field, value in self._mutable_fields(parsed.value).items():
                setattr(entity, field, value)
            db.commit()

            return Result.success()
        except IntegrityError as exc:
            db.rollback()
            return self._conflict('update', exc)
        except SQLAlchemyError as exc:
            db.rollback()
            return self._store_failure('update', exc)
        finally:
            db.close()

    def delete(self, entity_id: int) -> Result[None]:
        if not self._storable_id(entity_id):
            return self._not_found(entity_id)

        db = self.session_factory()
        try:
            entity = db.get(self.model, entity_id)
            if entity is None:
                return self._not_found(entity_id)

            db.delete(entity)
            db.commit()

            return Result.success()
        except SQLAlchemyError as exc:
            db.rollback()
            return self._store_failure('delete', exc)
        finally:
            db.close()

    def _parse_draft(self, draft: DraftT | Mapping[str, Any] | None) -> Result[DraftT]:
        if draft is None:
            return Result.invalid(f'{self.entity_name} payload is required.')

        if isinstance(draft, self.draft_type):
            return Result.success(draft)

        if not isinstance(draft, Mapping):
            return Result.invalid(f'{self.entity_name} payload must be an object.')

        try:
            return Result.success(self.draft_type.model_validate(dict(draft)))
        except ValidationError as exc:
            return Result.invalid(
                f'{self.entity_name} payload is invalid.',
                details=describe_validation_errors(exc.errors()),
            )

    def _storable_id(self, entity_id: int) -> bool:
        return -MAX_INTEGER - 1 <= entity_id <= MAX_INTEGER

    def _mutable_fields(self, draft: DraftT) -> dict[str, Any]:
        return draft.model_dump(exclude={'id'})

    def _to_record(self, entity: ModelT) -> RecordT:
        return self.record_type(
            **{field: getattr(entity, field) for field in self.record_type.model_fields}
        )

    def _not_found(self, entity_id: int) -> Result[Any]:
        return Result.not_found(f'{self.entity_name} {entity_id} not found.')

    def _conflict(self, action: str, exc: IntegrityError) -> Result[Any]:
        logger.warning('Rejected %s of %s: %s', action, self.entity_name, exc.orig)
        return Result.invalid(f'{self.entity_name} conflicts with an existing record.')

    def _store_failure(self, action: str, exc: SQLAlchemyError) -> Result[Any]:
        logger.exception('Failed to %s %s.', action, self.entity_name)
        return Result.store_failure(
            f'Could not {action} {self.entity_name.lower()}.',
            details=type(exc).__name__,
        )
