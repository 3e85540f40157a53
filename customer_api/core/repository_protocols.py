"""Boundary Protocols — contract between the route handlers and customer storage.

Invariants:
    - Core NEVER imports from infrastructure; dependency arrows point inward only
    - "Not found" is None; storage faults are StorageError, never conflated
    - Identifiers arrive already parsed by the Identifier Codec

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
"""

from typing import Protocol

from bson import ObjectId

from customer_api.schemas.customer import Customer, CustomerInput


class CustomerRepository(Protocol):
    """Contract for customer persistence, implemented by infrastructure."""
    async def list(self, limit: int, skip: int) -> list[Customer]: ...
    async def get_by_id(self, oid: ObjectId) -> Customer | None: ...
    async def create(self, data: CustomerInput) -> str: ...
    async def update_by_id(
        self, oid: ObjectId, data: CustomerInput,
    ) -> Customer | None: ...
    async def delete_by_id(self, oid: ObjectId) -> Customer | None: ...
