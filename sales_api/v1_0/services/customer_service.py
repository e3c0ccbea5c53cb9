from typing import Any, Callable, Optional
from sqlalchemy.ext.asyncio import AsyncSession

from sales_api.core.logger import logger
from sales_api.utils.tx import UnitOfWork
from sales_api.v1_0.entities import (
    BadRequest,
    Created,
    NoContent,
    NotFound,
    Ok,
    Outcome,
    PersistenceFailure,
    UnprocessableEntity,
    apply_customer_input,
    customer_to_dto,
    customer_to_patchable,
    new_customer,
)
from sales_api.v1_0.helper.hateoas import ALL, FieldSelection, ResourceShaper
from sales_api.v1_0.helper.patching import apply_patch_document
from sales_api.v1_0.repositories import CustomerRepository
from sales_api.v1_0.schemas import validate_customer

SAVE_FAILED = "An error occurred while saving"
UPDATE_FAILED = "An error occurred while updating"
DELETE_FAILED = "An error occurred while deleting"


class CustomerService:
    """
    CRUD/patch flows for the customer resource.

    Every method ends in exactly one outcome. Mutations are staged on the
    repository and persisted by a single unit-of-work commit; nothing is
    shaped when that commit fails.
    """

    def __init__(
        self,
        customer_repository: CustomerRepository,
        unit_of_work_factory: Callable[[AsyncSession], UnitOfWork] = UnitOfWork,
    ) -> None:
        self.customer_repository = customer_repository
        self.unit_of_work_factory = unit_of_work_factory

    async def _commit(self, db: AsyncSession) -> bool:
        return await self.unit_of_work_factory(db).save()

    async def list_all(
        self,
        selection: FieldSelection,
        db: AsyncSession,
        shaper: ResourceShaper,
    ) -> Outcome:
        logger.debug("[CustomerService] List all customers fields=%s", selection.names)
        rows = await self.customer_repository.get_all(db)
        return Ok(shaper.shape_many([customer_to_dto(c) for c in rows], selection))

    async def list_not_deleted(self, db: AsyncSession) -> Outcome:
        """Narrow read path: public shape only, no projection and no links."""
        logger.debug("[CustomerService] List not deleted customers")
        rows = await self.customer_repository.list_not_deleted(db)
        return Ok([customer_to_dto(c) for c in rows])

    async def get(
        self,
        customer_id: int,
        selection: FieldSelection,
        db: AsyncSession,
        shaper: ResourceShaper,
    ) -> Outcome:
        logger.debug("[CustomerService] Get customer ID=%s", customer_id)
        c = await self.customer_repository.get_single(customer_id, db)
        if c is None:
            return NotFound()
        return Ok(shaper.shape_one(customer_to_dto(c), selection))

    async def create(
        self,
        payload: Optional[Any],
        db: AsyncSession,
        shaper: ResourceShaper,
    ) -> Outcome:
        if payload is None:
            return BadRequest()

        data, errors = validate_customer(payload)
        if errors:
            logger.info("[CustomerService] Create rejected: %s", errors)
            return UnprocessableEntity(errors)

        c = self.customer_repository.add(new_customer(data), db)
        if not await self._commit(db):
            return PersistenceFailure(SAVE_FAILED)

        logger.info("[CustomerService] Customer created ID=%s", c.id)
        return Created(shaper.shape_one(customer_to_dto(c), ALL), location_id=c.id)

    async def update(
        self,
        customer_id: int,
        payload: Optional[Any],
        db: AsyncSession,
    ) -> Outcome:
        if payload is None:
            return BadRequest()

        data, errors = validate_customer(payload)
        if errors:
            logger.info("[CustomerService] Update rejected ID=%s: %s", customer_id, errors)
            return UnprocessableEntity(errors)

        c = await self.customer_repository.get_single(customer_id, db)
        if c is None:
            return NotFound()

        apply_customer_input(c, data)
        self.customer_repository.update(c, db)
        if not await self._commit(db):
            return PersistenceFailure(SAVE_FAILED)

        logger.info("[CustomerService] Customer updated ID=%s", customer_id)
        return NoContent()

    async def patch(
        self,
        customer_id: int,
        document: Optional[Any],
        db: AsyncSession,
    ) -> Outcome:
        if document is None:
            return BadRequest()

        c = await self.customer_repository.get_single(customer_id, db)
        if c is None:
            return NotFound()

        patched, errors = apply_patch_document(customer_to_patchable(c), document)
        if errors:
            logger.info("[CustomerService] Patch rejected ID=%s: %s", customer_id, errors)
            return UnprocessableEntity(errors)

        data, errors = validate_customer(patched)
        if errors:
            logger.info("[CustomerService] Patched customer invalid ID=%s: %s", customer_id, errors)
            return UnprocessableEntity(errors)

        apply_customer_input(c, data)
        self.customer_repository.update(c, db)
        if not await self._commit(db):
            return PersistenceFailure(UPDATE_FAILED)

        logger.info("[CustomerService] Customer patched ID=%s", customer_id)
        return NoContent()

    async def delete(self, customer_id: int, db: AsyncSession) -> Outcome:
        c = await self.customer_repository.get_single(customer_id, db)
        if c is None or c.deleted:
            return NotFound()

        await self.customer_repository.delete(c, db)
        if not await self._commit(db):
            return PersistenceFailure(DELETE_FAILED)

        logger.warning("[CustomerService] Customer deleted ID=%s", customer_id)
        return NoContent()
