from fastapi import APIRouter, Depends

from logging_svc import __version__
from logging_svc.config import settings
from logging_svc.dependencies import get_binder
from logging_svc.schemas.responses import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(binder=Depends(get_binder)):
    return HealthResponse(
        status="healthy",
        service=settings.APP_NAME,
        version=__version__,
        binder=binder.binder_type,
    )
