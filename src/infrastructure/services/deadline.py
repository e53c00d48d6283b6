"""Deadline wrapper racing a health probe against a timer."""

from __future__ import annotations

import asyncio
from typing import Awaitable, TypeVar, Union

from src.domain.entities.health import CheckResult, HealthStatus
from src.shared import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


def timeout_result(name: str, timeout_ms: int) -> CheckResult:
    return CheckResult(
        status=HealthStatus.UNHEALTHY,
        response_time_ms=timeout_ms,
        error=f"{name} check timeout",
    )


async def run_with_deadline(
    operation: Awaitable[T],
    *,
    timeout_ms: int,
    name: str,
) -> Union[T, CheckResult]:
    """Await ``operation`` for at most ``timeout_ms`` milliseconds.

    If the timer wins, an unhealthy timeout result is returned at once.
    The abandoned task is asked to cancel but is not awaited: work it
    handed to a worker thread keeps running until the driver returns, and
    whatever it eventually produces is discarded.
    """
    task = asyncio.ensure_future(operation)
    done, _ = await asyncio.wait({task}, timeout=timeout_ms / 1000)

    if task in done:
        return task.result()

    logger.warning("health.deadline.expired", check=name, timeout_ms=timeout_ms)
    task.add_done_callback(_discard_late_outcome(name))
    task.cancel()
    return timeout_result(name, timeout_ms)


def _discard_late_outcome(name: str):
    def _callback(task: asyncio.Future) -> None:
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.debug("health.deadline.late_failure", check=name, error=str(exc))

    return _callback
