"""Domain port for process-level resource metrics."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True, slots=True)
class RuntimeSample:
    """Point-in-time memory and uptime reading of the running process."""

    used_bytes: int
    total_bytes: int
    uptime_seconds: float


class IProcessRuntime(Protocol):
    """Synchronous, read-only view of the running process."""

    def sample(self) -> RuntimeSample:
        ...
