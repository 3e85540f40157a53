"""Customer Routes — CRUD handlers for the /customer resource.

Invariants:
    - Fixed order per request: parse path id → access guard → store call → map result
    - A malformed id never reaches the store; a failed guard never reaches the store
    - get/update/delete answer "not found" for both None and StorageError
      (same 400 envelope, the log line differs)
    - list answers StorageError with the driver message; create with "Invalid input"
    - Every failure is raised as a CustomerApiError and rendered by the global handler

Design Decisions:
    - Guard runs inside the handler, not as a dependency: dependencies resolve
      before the handler body, which would put auth ahead of id parsing
"""

import logging

from fastapi import APIRouter, Depends, Query, Security

from customer_api.api.dependencies import api_key_header, get_customer_store
from customer_api.config import Settings, get_settings
from customer_api.core.access_guard import check_api_key
from customer_api.core.errors import (
    CustomerNotFoundError, InvalidInputError, StorageError,
)
from customer_api.core.identifiers import parse_object_id
from customer_api.core.pagination import resolve
from customer_api.core.repository_protocols import CustomerRepository
from customer_api.schemas.customer import Customer, CustomerInput
from customer_api.schemas.error import AUTH_ERROR_RESPONSES, ERROR_RESPONSES

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/customer", tags=["Customer"])


def _collapse_storage_error(
    exc: StorageError, customer_id: str,
) -> CustomerNotFoundError:
    logger.error(
        f"Storage {exc.operation} failed for customer {customer_id}, "
        "reporting as not found",
        extra={"customer_id": customer_id, "operation": exc.operation},
    )
    return CustomerNotFoundError(customer_id)


@router.get("", response_model=list[Customer], responses=ERROR_RESPONSES)
async def get_customers(
    limit: int | None = Query(None, description="page size (default 12)"),
    page: int | None = Query(None, description="1-based page (default 1)"),
    store: CustomerRepository = Depends(get_customer_store),
):
    """List customers in insertion order, `limit` per page."""
    effective = resolve(limit, page)
    return await store.list(effective.limit, effective.skip)


@router.get(
    "/{customer_id}", response_model=Customer, responses=ERROR_RESPONSES,
)
async def get_customer_by_id(
    customer_id: str,
    store: CustomerRepository = Depends(get_customer_store),
):
    """Fetch one customer by `_id`."""
    oid = parse_object_id(customer_id)
    try:
        customer = await store.get_by_id(oid)
    except StorageError as e:
        raise _collapse_storage_error(e, customer_id) from e
    if customer is None:
        raise CustomerNotFoundError(customer_id)
    return customer


@router.post("", response_model=str, responses=ERROR_RESPONSES)
async def post_customer(
    body: CustomerInput,
    store: CustomerRepository = Depends(get_customer_store),
):
    """Create a customer. Returns the new `_id`."""
    try:
        return await store.create(body)
    except StorageError as e:
        raise InvalidInputError() from e


@router.patch(
    "/{customer_id}",
    response_model=Customer,
    responses={**ERROR_RESPONSES, **AUTH_ERROR_RESPONSES},
)
async def patch_customer_by_id(
    customer_id: str,
    body: CustomerInput,
    x_api_key: str | None = Security(api_key_header),
    settings: Settings = Depends(get_settings),
    store: CustomerRepository = Depends(get_customer_store),
):
    """Replace `name` (and refresh `createdAt`). Returns the updated customer."""
    oid = parse_object_id(customer_id)
    check_api_key(x_api_key, settings.api_key)
    try:
        customer = await store.update_by_id(oid, body)
    except StorageError as e:
        raise _collapse_storage_error(e, customer_id) from e
    if customer is None:
        raise CustomerNotFoundError(customer_id)
    logger.info("Customer updated", extra={"customer_id": customer_id})
    return customer


@router.delete(
    "/{customer_id}",
    response_model=Customer,
    responses={**ERROR_RESPONSES, **AUTH_ERROR_RESPONSES},
)
async def delete_customer_by_id(
    customer_id: str,
    x_api_key: str | None = Security(api_key_header),
    settings: Settings = Depends(get_settings),
    store: CustomerRepository = Depends(get_customer_store),
):
    """Delete a customer. Returns the customer as it was before deletion."""
    oid = parse_object_id(customer_id)
    check_api_key(x_api_key, settings.api_key)
    try:
        customer = await store.delete_by_id(oid)
    except StorageError as e:
        raise _collapse_storage_error(e, customer_id) from e
    if customer is None:
        raise CustomerNotFoundError(customer_id)
    logger.info("Customer deleted", extra={"customer_id": customer_id})
    return customer
