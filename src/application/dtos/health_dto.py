"""DTOs for the /health response payload."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from src.domain.entities.health import (
    DATABASE_CHECK,
    EMAIL_CHECK,
    PAYMENTS_CHECK,
    SYSTEM_CHECK,
    CheckResult,
    HealthReport,
    HealthStatus,
)


class CheckResultDTO(BaseModel):
    """Serializable representation of a single dependency check."""

    status: HealthStatus = Field(description="Status of the dependency")
    response_time_ms: int = Field(
        ge=0,
        alias="responseTimeMs",
        description="Wall-clock time spent on the check in milliseconds",
    )
    error: Optional[str] = Field(
        default=None, description="Cause of a degraded or unhealthy status"
    )

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_domain(cls, result: CheckResult) -> "CheckResultDTO":
        return cls(
            status=result.status,
            response_time_ms=result.response_time_ms,
            error=result.error,
        )


class SystemCheckResultDTO(CheckResultDTO):
    """Check result for local process resources."""

    memory_usage_percent: Optional[int] = Field(
        default=None,
        ge=0,
        le=100,
        alias="memoryUsagePercent",
        description="Process memory usage in percent",
    )
    uptime: str = Field(default="unknown", description="Process uptime, e.g. 2d 3h 14m")

    @classmethod
    def from_domain(cls, result: CheckResult) -> "SystemCheckResultDTO":
        return cls(
            status=result.status,
            response_time_ms=result.response_time_ms,
            error=result.error,
            memory_usage_percent=getattr(result, "memory_usage_percent", None),
            uptime=getattr(result, "uptime", "unknown"),
        )


class HealthChecksDTO(BaseModel):
    """The four named checks of a health report."""

    database: CheckResultDTO
    payments: CheckResultDTO
    email: CheckResultDTO
    system: SystemCheckResultDTO


class HealthReportDTO(BaseModel):
    """DTO representing the /health response payload."""

    status: HealthStatus = Field(description="Overall system status")
    timestamp: datetime = Field(description="UTC time the report was assembled")
    checks: HealthChecksDTO = Field(description="Individual dependency checks")

    @classmethod
    def from_domain(cls, report: HealthReport) -> "HealthReportDTO":
        return cls(
            status=report.status,
            timestamp=report.timestamp,
            checks=HealthChecksDTO(
                database=CheckResultDTO.from_domain(report.checks[DATABASE_CHECK]),
                payments=CheckResultDTO.from_domain(report.checks[PAYMENTS_CHECK]),
                email=CheckResultDTO.from_domain(report.checks[EMAIL_CHECK]),
                system=SystemCheckResultDTO.from_domain(report.checks[SYSTEM_CHECK]),
            ),
        )

    model_config = {
        "json_schema_extra": {
            "example": {
                "status": "degraded",
                "timestamp": "2025-06-01T12:00:00Z",
                "checks": {
                    "database": {"status": "healthy", "responseTimeMs": 4},
                    "payments": {
                        "status": "degraded",
                        "responseTimeMs": 2001,
                        "error": "some payment services unavailable",
                    },
                    "email": {"status": "healthy", "responseTimeMs": 0},
                    "system": {
                        "status": "healthy",
                        "responseTimeMs": 0,
                        "memoryUsagePercent": 41,
                        "uptime": "3h 12m",
                    },
                },
            }
        }
    }
