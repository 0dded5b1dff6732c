"""
SQLAlchemy Implementation of Generic Repository
Concrete async repository using SQLAlchemy 2.x
"""
from __future__ import annotations

from typing import Any, Generic, Mapping, Type, TypeVar
from uuid import UUID

from sqlalchemy import Select, delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.shared.domain.base_entity import BaseEntity
from src.shared import exceptions
from src.shared.infrastructure.database.base_model import Base
from src.shared.infrastructure.observability.logger import get_logger

logger = get_logger(__name__)

TEntity = TypeVar("TEntity", bound=BaseEntity)
TModel = TypeVar("TModel", bound=Base)


class SQLAlchemyRepository(Generic[TEntity, TModel]):
    """
    Generic async SQLAlchemy repository implementation.

    Exposes the small set of store calls the workflows depend on: lookup by
    id, lookup by exact-match filter, filtered listing with optional sort,
    insert, update-by-id and delete-by-id. Every write commits immediately:
    a workflow performs at most one write per logical step.

    Type Parameters:
        TEntity: Domain entity type
        TModel: SQLAlchemy ORM model type
    """

    def __init__(self, session: AsyncSession, model_class: Type[TModel]) -> None:
        self.session = session
        self.model_class = model_class

    # ── mapping hooks ──────────────────────────────────────────────────────

    def _to_entity(self, model: TModel) -> TEntity:
        """Convert ORM model to domain entity. Must be implemented by subclass."""
        raise NotImplementedError("Subclass must implement _to_entity")

    def _select(self) -> Select:
        """Base SELECT; subclasses add eager loading of related rows here."""
        return select(self.model_class)

    def _where(self, stmt: Select, filters: Mapping[str, Any]) -> Select:
        for key, value in filters.items():
            column = getattr(self.model_class, key)
            if isinstance(value, (list, tuple, set)):
                stmt = stmt.where(column.in_(list(value)))
            else:
                stmt = stmt.where(column == value)
        return stmt

    # ── reads ──────────────────────────────────────────────────────────────

    async def get_by_id(self, entity_id: UUID) -> TEntity | None:
        """Retrieve entity by its unique identifier, None when absent."""
        stmt = (
            self._select()
            .where(self.model_class.id == entity_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        model = result.scalars().unique().one_or_none()
        return self._to_entity(model) if model is not None else None

    async def get_one(self, **filters: Any) -> TEntity | None:
        """Retrieve the first entity matching every filter exactly."""
        stmt = self._where(self._select(), filters).limit(1)
        result = await self.session.execute(stmt)
        model = result.scalars().unique().first()
        return self._to_entity(model) if model is not None else None

    async def find(
        self,
        *,
        order_by: str | None = None,
        descending: bool = False,
        limit: int | None = None,
        **filters: Any,
    ) -> list[TEntity]:
        """
        Find all entities matching filters.

        Args:
            order_by: Column name to order by (store order when None)
            descending: Reverse the ordering
            limit: Maximum rows to return
            **filters: Column equality filters; sequences become IN filters

        Returns:
            List of matching entities
        """
        stmt = self._where(self._select(), filters)
        if order_by is not None:
            column = getattr(self.model_class, order_by)
            stmt = stmt.order_by(column.desc() if descending else column.asc())
        if limit is not None:
            stmt = stmt.limit(limit)

        result = await self.session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars().unique().all()]

    async def count(self) -> int:
        """Total number of rows in the table."""
        result = await self.session.execute(
            select(func.count()).select_from(self.model_class)
        )
        return int(result.scalar_one())

    # ── writes ─────────────────────────────────────────────────────────────

    async def insert(self, values: Mapping[str, Any]) -> TEntity:
        """Insert a new row and return it as a (fully loaded) entity."""
        model = self.model_class(**dict(values))
        self.session.add(model)
        await self.session.commit()

        logger.debug("Inserted row", table=self.model_class.__tablename__, entity_id=str(model.id))

        entity = await self.get_by_id(model.id)
        if entity is None:
            raise exceptions.InternalServerError(f"{self.model_class.__tablename__} row {model.id} missing after insert")
        return entity

    async def update_by_id(
        self,
        entity_id: UUID,
        values: Mapping[str, Any],
        *,
        return_new: bool = False,
    ) -> TEntity | None:
        """
        Write `values` onto the row with `entity_id`; no other column changes
        apart from `updated_at`.

        Returns:
            The post-update entity when `return_new` is set (None if no row
            matched), otherwise None.
        """
        stmt = (
            update(self.model_class)
            .where(self.model_class.id == entity_id)
            .values(**dict(values))
        )
        await self.session.execute(stmt)
        await self.session.commit()

        logger.debug(
            "Updated row",
            table=self.model_class.__tablename__,
            entity_id=str(entity_id),
            fields=sorted(values.keys()),
        )

        if return_new:
            return await self.get_by_id(entity_id)
        return None

    async def delete_by_id(self, entity_id: UUID) -> bool:
        """Delete the row with `entity_id`; True when a row was removed."""
        result = await self.session.execute(
            delete(self.model_class).where(self.model_class.id == entity_id)
        )
        await self.session.commit()
        return bool(result.rowcount)

