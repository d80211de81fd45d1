"""
Base repository with common CRUD operations.

Provides generic database operations for all feature repositories.
Uses SQLAlchemy async session for non-blocking database access.

Usage:
    class UserRepository(BaseRepository[User]):
        def __init__(self, db: AsyncSession):
            super().__init__(db, User)

        async def get_by_athlete_id(self, athlete_id: str) -> User | None:
            return await self.get_by(athlete_id=athlete_id)
"""

from typing import Any, Iterable, Sequence, TypeVar, Generic, Type

from sqlalchemy import delete, func, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base repository for database operations.

    Methods flush but never commit; the caller owns the transaction.
    """

    def __init__(self, db: AsyncSession, model: Type[T]):
        """
        Initialize repository.

        Args:
            db: Async database session
            model: SQLAlchemy model class
        """
        self.db = db
        self.model = model

    async def get_by(self, **kwargs) -> T | None:
        """
        Get single entity by arbitrary field values.

        Args:
            **kwargs: Field name-value pairs to filter by

        Returns:
            First matching entity or None
        """
        query = select(self.model)
        for key, value in kwargs.items():
            query = query.where(getattr(self.model, key) == value)
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    async def get_all(self, *order_by, **kwargs) -> list[T]:
        """
        Get all entities matching criteria.

        Args:
            *order_by: Optional ORDER BY clauses
            **kwargs: Field name-value pairs to filter by

        Returns:
            List of matching entities
        """
        query = select(self.model)
        for key, value in kwargs.items():
            query = query.where(getattr(self.model, key) == value)
        if order_by:
            query = query.order_by(*order_by)
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def create(self, **kwargs) -> T:
        """
        Create new entity.

        Args:
            **kwargs: Field values for new entity

        Returns:
            Created entity
        """
        entity = self.model(**kwargs)
        self.db.add(entity)
        await self.db.flush()
        return entity

    async def delete(self, entity: T) -> None:
        """Delete entity."""
        await self.db.delete(entity)
        await self.db.flush()

    async def delete_where(self, *conditions) -> int:
        """
        Bulk delete rows matching all conditions.

        Returns:
            Number of rows deleted
        """
        result = await self.db.execute(delete(self.model).where(*conditions))
        await self.db.flush()
        return result.rowcount or 0

    async def count(self, **kwargs) -> int:
        """
        Count entities matching criteria.

        Args:
            **kwargs: Field name-value pairs to filter by

        Returns:
            Number of matching entities
        """
        query = select(func.count()).select_from(self.model)
        for key, value in kwargs.items():
            query = query.where(getattr(self.model, key) == value)
        result = await self.db.execute(query)
        return result.scalar() or 0

    # -------------------------------------------------------------------------
    # Upsert (INSERT ... ON CONFLICT DO UPDATE)
    # -------------------------------------------------------------------------

    def _insert(self):
        """Dialect-specific INSERT that supports ON CONFLICT."""
        dialect = self.db.get_bind().dialect.name
        if dialect == "postgresql":
            return postgresql.insert(self.model)
        if dialect == "sqlite":
            return sqlite.insert(self.model)
        raise NotImplementedError(f"Upsert not supported for dialect {dialect}")

    async def upsert(
        self,
        rows: Sequence[dict[str, Any]],
        conflict_keys: Iterable[str],
        update_fields: Iterable[str],
    ) -> int:
        """
        Insert rows, updating only ``update_fields`` when the key exists.

        Args:
            rows: Column-value dicts (all with the same keys)
            conflict_keys: Columns of the unique key
            update_fields: Columns overwritten on conflict

        Returns:
            Number of rows sent
        """
        if not rows:
            return 0

        stmt = self._insert().values(list(rows))
        stmt = stmt.on_conflict_do_update(
            index_elements=list(conflict_keys),
            set_={field: stmt.excluded[field] for field in update_fields},
        )
        await self.db.execute(stmt)
        return len(rows)
