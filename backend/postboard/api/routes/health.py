"""Health Routes: process liveness and storage readiness.

Invariants:
    - GET /health never touches storage
    - GET /health/ready answers 503 when the storage handle is not initialized or
      DatabaseSessionManager.ping() raises StorageError; the driver detail is only logged
"""

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

import postboard.infrastructure.database as database
from postboard.core.errors import StorageError

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


def _not_ready(reason: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "not_ready", "reason": reason},
    )


@router.get("")
async def liveness(request: Request):
    return {
        "status": "healthy",
        "service": request.app.title,
        "version": request.app.version,
    }


@router.get("/ready")
async def readiness():
    """Ready once the shared connection answers a round-trip."""
    manager = database.db_manager
    if manager is None:
        return _not_ready("storage_not_initialized")
    try:
        await manager.ping()
    except StorageError as exc:
        logger.warning(
            "Readiness check failed",
            extra={"operation": exc.operation, "error_code": exc.code},
        )
        return _not_ready("storage_unreachable")
    return {"status": "ready", "storage": manager.engine.dialect.name}
