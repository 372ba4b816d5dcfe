from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from dependency_injector.wiring import inject, Provide
from src.domain.health.service import HealthService
from src.domain.health.module import HealthModule


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", summary="Health check endpoint")
@inject
async def health_check(service: HealthService = Depends(Provide[HealthModule.service]),
                       ) -> JSONResponse:
    report = await service.check()
    status_code = 200 if report.is_ok else 503
    return JSONResponse(status_code=status_code, content=report.model_dump(exclude_none=True))
