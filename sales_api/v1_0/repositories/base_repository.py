from typing import Any, Generic, Optional, Protocol, Type, TypeVar, runtime_checkable
from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.elements import ColumnElement

# --- models must expose .id ---
@runtime_checkable
class HasId(Protocol):
    id: Any  # PK column

ModelT = TypeVar("ModelT", bound=HasId)

WhereExpr = ColumnElement[bool]


class BaseRepository(Generic[ModelT]):
    """
    Reads hit the database; writes are only staged on the session.
    Nothing is persisted until the unit of work commits.
    """

    def __init__(self, model: Type[ModelT]):
        self.model = model

    async def get_all(
        self,
        session: AsyncSession,
        *,
        order_by: Any | None = None,
    ) -> list[ModelT]:
        if order_by is None:
            order_by = self.model.id.asc()
        stmt: Select = select(self.model).order_by(order_by)
        res = await session.execute(stmt)
        return list(res.scalars().all())

    async def get_single(self, id_: Any, session: AsyncSession) -> Optional[ModelT]:
        stmt: Select = select(self.model).where(self.model.id == id_)
        res = await session.execute(stmt)
        return res.scalars().first()

    async def filter(
        self,
        session: AsyncSession,
        *predicates: WhereExpr,
        order_by: Any | None = None,
    ) -> list[ModelT]:
        if order_by is None:
            order_by = self.model.id.asc()
        stmt: Select = select(self.model).where(*predicates).order_by(order_by)
        res = await session.execute(stmt)
        return list(res.scalars().all())

    def add(self, entity: ModelT, session: AsyncSession) -> ModelT:
        session.add(entity)
        return entity

    def update(self, entity: ModelT, session: AsyncSession) -> ModelT:
        session.add(entity)
        return entity

    async def delete(self, entity: ModelT, session: AsyncSession) -> None:
        await session.delete(entity)
