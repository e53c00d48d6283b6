"""System endpoints exposing service health."""

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Response, status

from src.application.dtos.health_dto import HealthReportDTO
from src.application.use_cases.health_use_cases import GetHealthStatusUseCase
from src.domain.entities.health import HealthStatus
from src.domain.services.health_assessment import fallback_report
from src.shared import get_logger

logger = get_logger(__name__)

router = APIRouter(tags=["System"])


def status_code_for(overall: HealthStatus) -> int:
    """Degraded still accepts traffic; only unhealthy is unavailable."""
    if overall is HealthStatus.UNHEALTHY:
        return status.HTTP_503_SERVICE_UNAVAILABLE
    return status.HTTP_200_OK


@router.get(
    "/health",
    response_model=HealthReportDTO,
    response_model_by_alias=True,
    response_model_exclude_none=True,
    responses={503: {"model": HealthReportDTO, "description": "Service unhealthy"}},
)
@inject
async def health(
    response: Response,
    get_health_status_use_case: GetHealthStatusUseCase = Depends(
        Provide["get_health_status_use_case"]
    ),
) -> HealthReportDTO:
    """Return the health status of the application dependencies."""
    try:
        report = await get_health_status_use_case.execute()
    except Exception as exc:
        logger.error("health.check.failure", error=str(exc), exc_info=exc)
        report = HealthReportDTO.from_domain(fallback_report())

    response.status_code = status_code_for(report.status)
    logger.debug(
        "health.check.served",
        status=report.status.value,
        status_code=response.status_code,
    )
    return report
