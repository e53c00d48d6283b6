"""Domain ports package."""

from .config_reader import ConfigLookup, IConfigReader
from .health_check import IHealthCheckService
from .process_runtime import IProcessRuntime, RuntimeSample
from .storage import IStoragePinger

__all__ = [
    "ConfigLookup",
    "IConfigReader",
    "IHealthCheckService",
    "IProcessRuntime",
    "IStoragePinger",
    "RuntimeSample",
]
