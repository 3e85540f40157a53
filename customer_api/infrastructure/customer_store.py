"""Customer Store — the five customer operations against one MongoDB collection.

Invariants:
    - Exactly one driver call per operation; update and delete use the atomic
      find_one_and_update / find_one_and_delete primitives
    - "Not found" → None; any PyMongoError → StorageError (never None)
    - A stored document that cannot be read as a Customer → StorageError too
      (a delete has already removed it by then)
    - update returns the document AFTER the change, delete the document BEFORE removal
    - ObjectId and BSON datetime never leave this module; callers get Customer

Design Decisions:
    - $set of name and createdAt on update: createdAt is refreshed on every update
      (observed behavior kept for compatibility)
    - clock injectable so tests can observe the createdAt refresh
"""

import logging
from datetime import datetime, timezone
from typing import Callable

import pydantic
from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

from customer_api.core.errors import StorageError
from customer_api.core.identifiers import object_id_codec
from customer_api.schemas.customer import Customer, CustomerInput

logger = logging.getLogger(__name__)

# Raised by to_customer on a document missing a field or holding the wrong type
MALFORMED_DOCUMENT_ERRORS = (
    KeyError, TypeError, AttributeError, pydantic.ValidationError,
)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def to_customer(doc: dict) -> Customer:
    """Convert a stored document to its external representation."""
    created_at: datetime = doc["createdAt"]
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)
    return Customer(
        id=object_id_codec.format(doc["_id"]),
        name=doc["name"],
        created_at=created_at.isoformat(),
    )


class MongoCustomerStore:
    """Customer persistence backed by a motor collection."""

    def __init__(
        self,
        collection: AsyncIOMotorCollection,
        clock: Callable[[], datetime] = utc_now,
    ):
        self._collection = collection
        self._clock = clock

    def _storage_error(self, exc: PyMongoError, operation: str) -> StorageError:
        logger.error(
            f"Customer store {operation} failed: {exc}",
            extra={"operation": operation},
        )
        return StorageError(str(exc), operation)

    def _read(self, doc: dict | None, operation: str) -> Customer | None:
        if doc is None:
            return None
        try:
            return to_customer(doc)
        except MALFORMED_DOCUMENT_ERRORS as e:
            message = (
                f"Malformed customer document {doc.get('_id')}: "
                f"{type(e).__name__}: {e}"
            )
            logger.error(message, extra={"operation": operation})
            raise StorageError(message, operation) from e

    async def list(self, limit: int, skip: int) -> list[Customer]:
        """Customers in natural order, skip then limit applied server-side."""
        try:
            cursor = self._collection.find({}, skip=skip, limit=limit)
            docs = [doc async for doc in cursor]
        except PyMongoError as e:
            raise self._storage_error(e, "list") from e
        return [self._read(doc, "list") for doc in docs]

    async def get_by_id(self, oid: ObjectId) -> Customer | None:
        try:
            doc = await self._collection.find_one({"_id": oid})
        except PyMongoError as e:
            raise self._storage_error(e, "get") from e
        return self._read(doc, "get")

    async def create(self, data: CustomerInput) -> str:
        """Insert a new customer; returns the assigned id as a string."""
        try:
            result = await self._collection.insert_one(
                {"name": data.name, "createdAt": self._clock()},
            )
        except PyMongoError as e:
            raise self._storage_error(e, "create") from e
        customer_id = object_id_codec.format(result.inserted_id)
        logger.info("Customer created", extra={"customer_id": customer_id})
        return customer_id

    async def update_by_id(
        self, oid: ObjectId, data: CustomerInput,
    ) -> Customer | None:
        try:
            doc = await self._collection.find_one_and_update(
                {"_id": oid},
                {"$set": {"name": data.name, "createdAt": self._clock()}},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as e:
            raise self._storage_error(e, "update") from e
        return self._read(doc, "update")

    async def delete_by_id(self, oid: ObjectId) -> Customer | None:
        try:
            doc = await self._collection.find_one_and_delete({"_id": oid})
        except PyMongoError as e:
            raise self._storage_error(e, "delete") from e
        return self._read(doc, "delete")
