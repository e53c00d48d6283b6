"""Process runtime adapters."""

from .process_runtime import PsutilProcessRuntime

__all__ = ["PsutilProcessRuntime"]
