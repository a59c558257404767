"""Base repository for database operations."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel
from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel

from app.errors.database import (
    DatabaseConnectionError,
    DatabaseError,
    DuplicateEntryError,
    RecordNotFoundError,
)

type FilterValue = str | int | float | bool | UUID | datetime | None


class BaseRepository[ModelT: SQLModel, CreateSchemaT: BaseModel]:
    """
    Base repository implementing common CRUD operations.

    Attributes:
        model: The SQLModel database model type.
        id_field: The name of the primary key field (default: "id").
        order_field: Column used to order listings (oldest first).
        label: Name used in not-found messages.
    """

    model: type[ModelT]
    id_field: str = "id"
    order_field: str = "created_at"
    label: str = "Record"

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def create(self, schema: CreateSchemaT, **kwargs: Any) -> ModelT:
        """
        Create a new record from a schema plus extra column values.

        Args:
            schema: Creation schema with data
            **kwargs: Column values not carried by the schema

        Returns:
            ModelT: Created database model
        """
        data = schema.model_dump(exclude_unset=True) | kwargs
        db_obj = self.model.model_validate(data)
        return await self._add_and_refresh(db_obj)

    async def get_by_id(self, record_id: UUID) -> ModelT | None:
        """
        Get a record by its ID.

        Args:
            record_id: Record UUID

        Returns:
            ModelT | None: Record if found, None otherwise
        """
        id_column = getattr(self.model, self.id_field)
        statement = select(self.model).where(id_column == record_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_by_field(
        self,
        field_name: str,
        value: FilterValue,
    ) -> ModelT | None:
        """
        Get a record by a specific field value.

        Args:
            field_name: Name of the field to search
            value: Value to search for

        Returns:
            ModelT | None: Record if found, None otherwise
        """
        field = getattr(self.model, field_name)
        statement = select(self.model).where(field == value)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def get_or_raise(self, record_id: UUID) -> ModelT:
        """
        Get a record by ID or raise an exception if not found.

        Raises:
            RecordNotFoundError: If record is not found
        """
        record = await self.get_by_id(record_id)
        if not record:
            raise RecordNotFoundError(
                detail=f"{self.label} with ID {record_id} not found",
            )
        return record

    async def get_all(
        self,
        skip: int = 0,
        limit: int | None = None,
    ) -> list[ModelT]:
        """
        Get records oldest first, optionally paginated.

        Args:
            skip: Number of records to skip
            limit: Maximum number of records to return (``None`` for all)

        Returns:
            list[ModelT]: List of records
        """
        order_column = getattr(self.model, self.order_field)
        statement = select(self.model).order_by(order_column).offset(skip)
        if limit is not None:
            statement = statement.limit(limit)
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def get_by_ids(self, record_ids: list[UUID]) -> dict[UUID, ModelT]:
        """
        Fetch many records in a single query.

        Returns:
            dict[UUID, ModelT]: Records keyed by their ID (missing IDs are absent)
        """
        if not record_ids:
            return {}
        id_column = getattr(self.model, self.id_field)
        statement = select(self.model).where(id_column.in_(set(record_ids)))
        result = await self.session.execute(statement)
        return {getattr(record, self.id_field): record for record in result.scalars().all()}

    async def delete(self, record_id: UUID) -> bool:
        """
        Delete a record by ID.

        Returns:
            bool: True if record was deleted, False if not found
        """
        record = await self.get_by_id(record_id)
        if not record:
            return False

        await self.session.delete(record)
        await self.session.flush()
        return True

    async def delete_all(self) -> int:
        """
        Delete every record of this model.

        Returns:
            int: Number of deleted records
        """
        result = await self.session.execute(delete(self.model))
        await self.session.flush()
        return result.rowcount or 0

    async def count(self) -> int:
        """
        Count total records.

        Returns:
            int: Total number of records
        """
        statement = select(func.count()).select_from(self.model)
        result = await self.session.execute(statement)
        count = result.scalar()
        return count if count is not None else 0

    async def _add_and_refresh(self, record: ModelT) -> ModelT:
        """
        Add a record and refresh it from the database with error handling.

        Raises:
            DuplicateEntryError: If a unique constraint is violated
            DatabaseError: For other integrity errors
            DatabaseConnectionError: For any other database failure
        """
        try:
            self.session.add(record)
            await self.session.flush()
            await self.session.refresh(record)
        except IntegrityError as e:
            await self.session.rollback()
            error_msg = str(e.orig) if e.orig else str(e)
            if "unique" in error_msg.lower() or "duplicate" in error_msg.lower():
                raise DuplicateEntryError(detail=error_msg) from e
            raise DatabaseError(detail=f"Database integrity error: {error_msg}") from e
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise DatabaseConnectionError(
                detail=f"Failed to save record: {e}",
            ) from e
        return record
