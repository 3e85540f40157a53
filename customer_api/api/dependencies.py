"""Route Dependencies — store construction and the x-api-key header scheme.

Invariants:
    - The store is built per request from the process-wide database handle
    - api_key_header never rejects on its own (auto_error=False); handlers run the
      Access Guard after parsing the path id
"""

from fastapi import Depends
from fastapi.security import APIKeyHeader
from motor.motor_asyncio import AsyncIOMotorDatabase

from customer_api.config import Settings, get_settings
from customer_api.core.repository_protocols import CustomerRepository
from customer_api.infrastructure.customer_store import MongoCustomerStore
from customer_api.infrastructure.database import get_db

api_key_header = APIKeyHeader(
    name="x-api-key",
    scheme_name="ApiKey",
    description="Requires an API key to access",
    auto_error=False,
)


def get_customer_store(
    db: AsyncIOMotorDatabase = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> CustomerRepository:
    return MongoCustomerStore(db[settings.mongodb_collection])
