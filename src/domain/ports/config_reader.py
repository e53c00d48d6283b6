"""Domain port for optional configuration lookups."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol


@dataclass(frozen=True, slots=True)
class ConfigLookup:
    """Result of looking up a configuration key.

    ``present`` tells "not configured" apart from "configured with an
    unusable value" (for example an empty string).
    """

    key: str
    present: bool
    value: Any = None

    @classmethod
    def absent(cls, key: str) -> "ConfigLookup":
        return cls(key=key, present=False)

    @classmethod
    def of(cls, key: str, value: Any) -> "ConfigLookup":
        return cls(key=key, present=True, value=value)

    @property
    def is_blank(self) -> bool:
        return self.present and (
            self.value is None
            or (isinstance(self.value, str) and not self.value.strip())
        )


class IConfigReader(Protocol):
    """Read-only access to dotted configuration keys."""

    def get(self, key: str) -> ConfigLookup:
        """Look up ``key`` (e.g. ``"stripe.secret_key"``)."""
        ...
