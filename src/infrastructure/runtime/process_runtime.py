"""
Process Runtime - Infrastructure Layer

This module samples memory and uptime of the running process with psutil.
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import Optional

import psutil

from src.domain.ports.process_runtime import IProcessRuntime, RuntimeSample

CGROUP_MEMORY_LIMIT_FILES = (
    Path("/sys/fs/cgroup/memory.max"),
    Path("/sys/fs/cgroup/memory/memory.limit_in_bytes"),
)


def read_cgroup_memory_limit() -> Optional[int]:
    """Return the container memory limit in bytes, if one is enforced."""
    for path in CGROUP_MEMORY_LIMIT_FILES:
        try:
            raw = path.read_text(encoding="utf-8").strip()
        except OSError:
            continue
        if not raw or raw == "max":
            return None
        try:
            return int(raw)
        except ValueError:
            return None
    return None


class PsutilProcessRuntime(IProcessRuntime):
    """Reports resident memory against the memory actually available."""

    def __init__(self, process: Optional[psutil.Process] = None) -> None:
        self._process = process or psutil.Process()

    def sample(self) -> RuntimeSample:
        used = self._process.memory_info().rss
        total = psutil.virtual_memory().total
        limit = read_cgroup_memory_limit()
        if limit is not None and 0 < limit < total:
            total = limit

        uptime = max(0.0, time.time() - self._process.create_time())
        return RuntimeSample(used_bytes=used, total_bytes=total, uptime_seconds=uptime)
