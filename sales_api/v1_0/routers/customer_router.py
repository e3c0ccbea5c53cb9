from typing import Any, Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession
from dependency_injector.wiring import inject, Provide

from sales_api.storage.database.db_connector import get_db
from sales_api.app_containers import ApplicationContainer
from sales_api.core.logger import logger

from sales_api.v1_0.entities import (
    BadRequest,
    Created,
    NoContent,
    NotFound,
    Ok,
    Outcome,
    PersistenceFailure,
    UnprocessableEntity,
)
from sales_api.v1_0.helper.hateoas import (
    CREATE_CUSTOMER,
    DELETE_CUSTOMER,
    GET_ALL_CUSTOMERS,
    GET_CUSTOMER,
    ResourceShaper,
    get_customer_shaper,
    parse_fields,
)
from sales_api.v1_0.services import CustomerService

router = APIRouter(prefix="/customer", tags=["Customer"])

FIELDS_QUERY = Query(
    None,
    description="Comma-separated, case-insensitive list of fields to return",
)


async def optional_json_body(request: Request) -> Any:
    """Decoded JSON body, or None when the body is missing or not valid JSON."""
    try:
        return await request.json()
    except ValueError as e:
        logger.info("[CustomerRouter] unreadable request body: %s", e)
        return None


def to_response(outcome: Outcome, request: Request) -> Response:
    if isinstance(outcome, Ok):
        return JSONResponse(jsonable_encoder(outcome.payload))
    if isinstance(outcome, Created):
        location = request.url_for(GET_CUSTOMER, customer_id=outcome.location_id)
        return JSONResponse(
            jsonable_encoder(outcome.payload),
            status_code=status.HTTP_201_CREATED,
            headers={"Location": str(location)},
        )
    if isinstance(outcome, NoContent):
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    if isinstance(outcome, BadRequest):
        return Response(status_code=status.HTTP_400_BAD_REQUEST)
    if isinstance(outcome, UnprocessableEntity):
        return JSONResponse(outcome.errors, status_code=422)
    if isinstance(outcome, NotFound):
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    if isinstance(outcome, PersistenceFailure):
        return JSONResponse(
            {"detail": outcome.message},
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    raise TypeError(f"Unhandled outcome: {outcome!r}")


@router.get(
    "",
    name=GET_ALL_CUSTOMERS,
    summary="List customers with hypermedia links",
)
@inject
async def get_all_customers(
    request: Request,
    fields: Optional[str] = FIELDS_QUERY,
    db: AsyncSession = Depends(get_db),
    shaper: ResourceShaper = Depends(get_customer_shaper),
    service: CustomerService = Depends(
        Provide[ApplicationContainer.api_container.customer_service]
    ),
) -> Response:
    logger.debug("[CustomerRouter] list_all fields=%s", fields)
    try:
        outcome = await service.list_all(parse_fields(fields), db, shaper)
    except Exception as e:
        logger.error("[CustomerRouter] list_all error: %s", e, exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to list customers")
    return to_response(outcome, request)


@router.get(
    "/notDeleted",
    name="get_not_deleted_customers",
    summary="List customers that are not soft-deleted",
)
@inject
async def get_not_deleted_customers(
    request: Request,
    db: AsyncSession = Depends(get_db),
    service: CustomerService = Depends(
        Provide[ApplicationContainer.api_container.customer_service]
    ),
) -> Response:
    logger.debug("[CustomerRouter] list_not_deleted")
    try:
        outcome = await service.list_not_deleted(db)
    except Exception as e:
        logger.error("[CustomerRouter] list_not_deleted error: %s", e, exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to list customers")
    return to_response(outcome, request)


@router.get(
    "/{customer_id}",
    name=GET_CUSTOMER,
    summary="Get customer by ID",
)
@inject
async def get_customer(
    customer_id: int,
    request: Request,
    fields: Optional[str] = FIELDS_QUERY,
    db: AsyncSession = Depends(get_db),
    shaper: ResourceShaper = Depends(get_customer_shaper),
    service: CustomerService = Depends(
        Provide[ApplicationContainer.api_container.customer_service]
    ),
) -> Response:
    logger.debug("[CustomerRouter] get id=%s fields=%s", customer_id, fields)
    try:
        outcome = await service.get(customer_id, parse_fields(fields), db, shaper)
    except Exception as e:
        logger.error("[CustomerRouter] get error: %s", e, exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to fetch customer")
    return to_response(outcome, request)


@router.post(
    "",
    name=CREATE_CUSTOMER,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new customer",
)
@inject
async def create_customer(
    request: Request,
    payload: Any = Depends(optional_json_body),
    db: AsyncSession = Depends(get_db),
    shaper: ResourceShaper = Depends(get_customer_shaper),
    service: CustomerService = Depends(
        Provide[ApplicationContainer.api_container.customer_service]
    ),
) -> Response:
    logger.info("[CustomerRouter] create payload=%s", payload)
    try:
        outcome = await service.create(payload, db, shaper)
    except Exception as e:
        logger.error("[CustomerRouter] create error: %s", e, exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to create customer")
    return to_response(outcome, request)


@router.put(
    "/{customer_id}",
    name="update_customer",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Replace a customer",
)
@inject
async def update_customer(
    customer_id: int,
    request: Request,
    payload: Any = Depends(optional_json_body),
    db: AsyncSession = Depends(get_db),
    service: CustomerService = Depends(
        Provide[ApplicationContainer.api_container.customer_service]
    ),
) -> Response:
    logger.info("[CustomerRouter] update id=%s payload=%s", customer_id, payload)
    try:
        outcome = await service.update(customer_id, payload, db)
    except Exception as e:
        logger.error("[CustomerRouter] update error: %s", e, exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to update customer")
    return to_response(outcome, request)


@router.patch(
    "/{customer_id}",
    name="partially_update_customer",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Apply a JSON Patch document to a customer",
)
@inject
async def partially_update_customer(
    customer_id: int,
    request: Request,
    document: Any = Depends(optional_json_body),
    db: AsyncSession = Depends(get_db),
    service: CustomerService = Depends(
        Provide[ApplicationContainer.api_container.customer_service]
    ),
) -> Response:
    logger.info("[CustomerRouter] patch id=%s ops=%s", customer_id, document)
    try:
        outcome = await service.patch(customer_id, document, db)
    except Exception as e:
        logger.error("[CustomerRouter] patch error: %s", e, exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to update customer")
    return to_response(outcome, request)


@router.delete(
    "/{customer_id}",
    name=DELETE_CUSTOMER,
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a customer",
)
@inject
async def delete_customer(
    customer_id: int,
    request: Request,
    db: AsyncSession = Depends(get_db),
    service: CustomerService = Depends(
        Provide[ApplicationContainer.api_container.customer_service]
    ),
) -> Response:
    logger.warning("[CustomerRouter] delete id=%s", customer_id)
    try:
        outcome = await service.delete(customer_id, db)
    except Exception as e:
        logger.error("[CustomerRouter] delete error: %s", e, exc_info=True)
        raise HTTPException(status_code=500, detail="Failed to delete customer")
    return to_response(outcome, request)
