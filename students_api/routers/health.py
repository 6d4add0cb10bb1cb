from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from students_api.database import Storage
from students_api.dependencies import get_storage

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
def health_check(request: Request):
    """Liveness: 200 whenever the process is up."""
    return {"status": "healthy", "env": request.app.state.settings.env}


@router.get("/ready")
def readiness_check(storage: Storage = Depends(get_storage)):
    """Readiness: 503 while the database cannot be queried."""
    if not storage.ping():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "reason": "storage_unavailable"},
        )
    return {"status": "ready"}
