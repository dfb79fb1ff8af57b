"""Health Routes: process liveness and data-file readiness.

Invariants:
    - GET /api/health/ answers 200 whenever the process can serve requests
    - GET /api/health/ready answers 503 until the store is initialized and its
      data file parses as a JSON array; 200 reports which file is served
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from fund_catalog.infrastructure import json_store

router = APIRouter(prefix="/api/health", tags=["health"])

SERVICE_NAME = "fund-catalog-api"


@router.get("/")
async def liveness():
    return {"status": "healthy", "service": SERVICE_NAME}


@router.get("/ready")
async def readiness():
    """Ready once the fund data file can be read."""
    store = json_store.fund_store
    if store is None:
        return _not_ready("store_not_initialized")
    if not await store.health_check():
        return _not_ready("data_file_unavailable")
    return {
        "status": "ready",
        "checks": {"data_file": "healthy"},
        "data_file": str(store.path),
    }


def _not_ready(reason: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "not_ready", "reason": reason},
    )
