"""Repository Base - executes FilterBuilder output against an AsyncSession.

Invariants:
    - Every BoundValue becomes a typed bindparam using its column's SQLAlchemy type,
      so UUIDs, booleans and tag sets are adapted per dialect by SQLAlchemy itself
    - LIMIT/OFFSET values (no column) are bound as integers
    - Rows are mapped back to ORM entities via select().from_statement()
"""

import uuid
from typing import Any, Generic, TypeVar

from sqlalchemy import Integer, bindparam, select, text
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.elements import BindParameter

from formservice.core.filter_builder import BuiltQuery, Dialect, FilterBuilder
from formservice.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)

_UNIQUE_VIOLATION = "23505"


def parse_id(raw: Any) -> uuid.UUID | None:
    """Parse a path id; malformed ids yield None (treated as not found)."""
    if isinstance(raw, uuid.UUID):
        return raw
    try:
        return uuid.UUID(str(raw))
    except (TypeError, ValueError):
        return None


def is_unique_violation(exc: IntegrityError) -> bool:
    orig = exc.orig
    code = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
    if code == _UNIQUE_VIOLATION:
        return True
    return "UNIQUE constraint failed" in str(orig)


class Repository(Generic[ModelT]):
    model: type[ModelT]
    order_by: tuple[str, ...] = ()

    def __init__(self, db: AsyncSession):
        self._db = db

    @property
    def dialect(self) -> Dialect:
        name = self._db.get_bind().dialect.name
        return "sqlite" if name == "sqlite" else "postgresql"

    def builder(self) -> FilterBuilder:
        return FilterBuilder(
            self.model.__tablename__, order_by=self.order_by, dialect=self.dialect,
        )

    def bind_params(self, query: BuiltQuery) -> list[BindParameter]:
        columns = self.model.__table__.c
        return [
            bindparam(
                p.name, p.value,
                type_=columns[p.column].type if p.column else Integer(),
            )
            for p in query.params
        ]

    async def fetch(self, query: BuiltQuery) -> list[ModelT]:
        stmt = text(query.sql).bindparams(*self.bind_params(query))
        result = await self._db.execute(
            select(self.model).from_statement(stmt),
        )
        return list(result.scalars().all())

    async def count(self, query: BuiltQuery) -> int:
        stmt = text(query.sql).bindparams(*self.bind_params(query))
        result = await self._db.execute(stmt)
        return int(result.scalar_one())
