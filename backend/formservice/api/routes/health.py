"""Health Check - store connectivity.

Invariants:
    - GET /health returns 200 {"status": "healthy"} when SELECT 1 succeeds
    - Returns 503 {"status": "unhealthy"} when the store is unreachable or not initialized
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(request: Request):
    manager = getattr(request.app.state, "db", None)
    db_ok = await manager.health_check() if manager else False
    timestamp = datetime.now(timezone.utc).isoformat()
    if not db_ok:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "unhealthy",
                "timestamp": timestamp,
                "database": "disconnected",
            },
        )
    return {"status": "healthy", "timestamp": timestamp, "database": "connected"}
