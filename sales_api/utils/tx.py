from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from sales_api.core.logger import logger


class UnitOfWork:
    """
    Single commit point for the changes staged on a session.

    Repositories only stage (add/update/delete); ``save`` persists all of it
    at once and reports the outcome as a boolean.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def save(self) -> bool:
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            logger.error("[UnitOfWork] commit failed: %s", e, exc_info=True)
            await self.session.rollback()
            return False
        return True
