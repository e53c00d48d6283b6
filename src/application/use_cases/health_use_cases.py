"""Use case for the health endpoint."""

from src.application.dtos.health_dto import HealthReportDTO
from src.domain.ports.health_check import IHealthCheckService


class GetHealthStatusUseCase:
    """Use case responsible for returning health status."""

    def __init__(self, health_check_service: IHealthCheckService) -> None:
        self._health_check_service = health_check_service

    async def execute(self) -> HealthReportDTO:
        report = await self._health_check_service.evaluate()
        return HealthReportDTO.from_domain(report)
