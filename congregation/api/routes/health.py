"""Health Routes — process liveness and database readiness.

Invariants:
    - GET /api/v1/health/ answers 200 without touching the database
    - GET /api/v1/health/ready runs SELECT 1 through the pool: 200 when it succeeds,
      503 when it does not; both bodies report the pool's checkout counters
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from congregation.api.dependencies import get_database
from congregation.infrastructure.database import DatabasePool

router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/")
async def liveness():
    return {"status": "ok", "service": "congregation"}


@router.get("/ready")
async def readiness(database: DatabasePool = Depends(get_database)):
    reachable = await database.health_check()
    body = {
        "status": "ready" if reachable else "unavailable",
        "database": "reachable" if reachable else "unreachable",
        "pool": database.pool_status(),
    }
    if not reachable:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content=body,
        )
    return body
