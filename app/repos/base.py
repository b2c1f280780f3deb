"""
Generic repository over a single mapped entity.

Reads are built as lazy `Select` statements and only hit the database
when passed to `all()` or `first()`. Entities a read loads are detached
from the session again; entities the session was already tracking (with
staged changes) are returned as they are.

Mutations are staged on the shared session and persisted by
`RepositoryWrapper.save()`. Nothing here catches database errors.
"""

import logging
from collections.abc import Sequence
from typing import Any, Generic, TypeVar

from sqlalchemy import ColumnElement, Select, inspect, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.observability import db_metrics
from app.db.models import Base

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)


class RepositoryBase(Generic[ModelT]):
    """Data-access primitives shared by every entity repository."""

    model: type[ModelT]

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @property
    def table_name(self) -> str:
        return self.model.__tablename__

    # ------------------------------------------------------------------
    # Query builders (lazy)
    # ------------------------------------------------------------------

    def find_all(self) -> Select[tuple[ModelT]]:
        """Statement selecting every row of the entity."""
        return select(self.model)

    def find_by_condition(self, *criteria: ColumnElement[bool]) -> Select[tuple[ModelT]]:
        """Statement selecting the rows matching all of `criteria`."""
        return select(self.model).where(*criteria)

    # ------------------------------------------------------------------
    # Materialization
    # ------------------------------------------------------------------

    async def all(self, stmt: Select[tuple[ModelT]]) -> list[ModelT]:
        """Execute `stmt` and return every entity it yields."""
        tracked = self._tracked_keys()
        with db_metrics.track(f"{self.table_name}.select"):
            result = await self.session.execute(stmt)
            entities = list(result.scalars().unique().all())

        self._detach(entities, tracked)
        logger.debug(f"Loaded {len(entities)} {self.table_name} rows")
        return entities

    async def first(self, stmt: Select[tuple[ModelT]]) -> ModelT | None:
        """Execute `stmt` and return its first entity, or None."""
        tracked = self._tracked_keys()
        with db_metrics.track(f"{self.table_name}.select"):
            result = await self.session.execute(stmt.limit(1))
            entity = result.scalars().first()

        if entity is not None:
            self._detach([entity], tracked)
        return entity

    def _tracked_keys(self) -> set[Any]:
        return set(self.session.identity_map.keys())

    def _detach(self, entities: Sequence[ModelT], tracked: set[Any]) -> None:
        """
        Expunge entities this read brought into the session.

        Anything the session already held (for instance a merged update or
        a pending delete) stays attached, along with any entity whose
        expunge would cascade into such an object.
        """
        for entity in entities:
            state = inspect(entity)
            if entity not in self.session or state.key in tracked:
                continue
            cascaded = state.mapper.cascade_iterator("expunge", state)
            if any(related.pending or related.key in tracked for _, _, related, _ in cascaded):
                continue
            self.session.expunge(entity)

    # ------------------------------------------------------------------
    # Mutations (staged until RepositoryWrapper.save())
    # ------------------------------------------------------------------

    def create(self, entity: ModelT) -> None:
        self.session.add(entity)

    async def update(self, entity: ModelT) -> ModelT:
        """
        Stage `entity`'s current state as an update.

        Accepts detached entities (as returned by reads) and returns the
        session-bound copy.
        """
        return await self.session.merge(entity)

    async def delete(self, entity: ModelT) -> None:
        persistent = await self.session.merge(entity)
        await self.session.delete(persistent)
