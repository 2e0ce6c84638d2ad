"""
Generic CRUD over one model.

Every administrator-managed resource (fee packages, supplements, diet details,
bills, notifications) goes through the same five operations; this service is
parameterised by the model, a human label for messages and, optionally, the
column that must be unique.

Usage:
    supplement_service = CRUDService(Supplement, "Supplement", unique_field="name")

    supplement = await supplement_service.create(db, data.model_dump())
"""
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from gymhub.core.exceptions import ConflictError, ResourceNotFoundError
from gymhub.core.logging_config import logger
from gymhub.core.types import is_valid_id

ModelT = TypeVar("ModelT")


class CRUDService(Generic[ModelT]):

    def __init__(
        self,
        model: Type[ModelT],
        label: str,
        unique_field: Optional[str] = None,
        conflict_message: Optional[str] = None,
    ):
        self.model = model
        self.label = label
        self.unique_field = unique_field
        self._conflict_message = conflict_message

    @property
    def conflict_message(self) -> str:
        if self._conflict_message:
            return self._conflict_message
        return f"{self.label} with this {self.unique_field} already exists"

    async def list(self, db: AsyncSession, *criteria, order_by=None) -> List[ModelT]:
        query = select(self.model)
        if criteria:
            query = query.where(*criteria)
        query = query.order_by(order_by if order_by is not None else self.model.created_at.desc())
        result = await db.execute(query)
        return list(result.scalars().all())

    async def get(self, db: AsyncSession, record_id: str) -> ModelT:
        """Fetch by id or raise a 404"""
        record = await db.get(self.model, record_id) if is_valid_id(record_id) else None
        if record is None:
            raise ResourceNotFoundError(self.label, record_id)
        return record

    async def ensure_unique(self, db: AsyncSession, value: Any, exclude_id: Optional[str] = None) -> None:
        if not self.unique_field or value is None:
            return
        column = getattr(self.model, self.unique_field)
        query = select(self.model.id).where(column == value)
        if exclude_id is not None:
            query = query.where(self.model.id != exclude_id)
        if await db.scalar(query.limit(1)) is not None:
            raise ConflictError(self.conflict_message, field=self.unique_field)

    async def create(self, db: AsyncSession, data: Dict[str, Any]) -> ModelT:
        if self.unique_field:
            await self.ensure_unique(db, data.get(self.unique_field))

        record = self.model(**data)
        db.add(record)
        await self._commit(db)
        logger.log_admin_action("create", self.label, str(record.id))
        return record

    async def update(self, db: AsyncSession, record: ModelT, changes: Dict[str, Any]) -> ModelT:
        """
        Partial update: fields missing from `changes` keep their value, and so
        do explicit nulls on non-nullable columns.
        """
        columns = self.model.__table__.columns
        applied = {}
        for field, value in changes.items():
            column = columns.get(field)
            if value is None and column is not None and not column.nullable:
                continue
            applied[field] = value

        if self.unique_field and self.unique_field in applied:
            await self.ensure_unique(db, applied[self.unique_field], exclude_id=record.id)

        for field, value in applied.items():
            setattr(record, field, value)

        await self._commit(db)
        logger.log_admin_action("update", self.label, str(record.id), fields=sorted(applied))
        return record

    async def delete(self, db: AsyncSession, record: ModelT) -> None:
        record_id = str(record.id)
        await db.delete(record)
        await db.commit()
        logger.log_admin_action("delete", self.label, record_id)

    async def _commit(self, db: AsyncSession) -> None:
        """Commit, turning a unique-constraint race into a ConflictError"""
        try:
            await db.commit()
        except IntegrityError as e:
            await db.rollback()
            logger.warning(f"[CRUD] Integrity error on {self.label}: {e.orig}")
            if self.unique_field:
                raise ConflictError(self.conflict_message, field=self.unique_field)
            raise ConflictError(f"{self.label} violates a database constraint")
