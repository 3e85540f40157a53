"""Health & Readiness Probes — process liveness and MongoDB reachability.

Invariants:
    - GET /health answers 200 whenever the process serves requests
    - GET /health/ready answers 200 only after a successful MongoDB ping,
      reporting the database name and ping round trip
    - 503 names why: client never initialized, or ping failed
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

import customer_api.infrastructure.database as database

SERVICE_NAME = "customer-api"

router = APIRouter(prefix="/health", tags=["health"])


def _not_ready(reason: str, **detail) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "not_ready", "reason": reason, **detail},
    )


@router.get("", status_code=status.HTTP_200_OK)
async def liveness():
    return {"status": "healthy", "service": SERVICE_NAME}


@router.get("/ready")
async def readiness():
    """Ping MongoDB through the shared client."""
    manager = database.db_manager
    if manager is None:
        return _not_ready("database_not_initialized")

    latency_ms = await manager.ping()
    if latency_ms is None:
        return _not_ready(
            "database_unavailable", database=manager.database_name,
        )
    return {
        "status": "ready",
        "database": {
            "name": manager.database_name,
            "ping_ms": round(latency_ms, 2),
        },
    }
