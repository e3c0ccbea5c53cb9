from sqlalchemy.ext.asyncio import AsyncSession

from sales_api.v1_0.models import Customer
from .base_repository import BaseRepository

class CustomerRepository(BaseRepository[Customer]):
    def __init__(self):
        super().__init__(Customer)

    async def list_not_deleted(self, session: AsyncSession) -> list[Customer]:
        return await self.filter(session, Customer.deleted.is_(False))

    async def delete(self, entity: Customer, session: AsyncSession) -> None:
        """Soft delete: the row stays and is hidden from the not-deleted listing."""
        entity.deleted = True
        self.update(entity, session)
