"""Configuration reader backed by the application settings object."""

from __future__ import annotations

from typing import Any

from pydantic import SecretStr

from src.domain.ports.config_reader import ConfigLookup, IConfigReader


class SettingsConfigReader(IConfigReader):
    """Resolve dotted keys (``"paypal.client_id"``) against nested settings.

    A key is absent when any segment is missing or the final value is
    ``None``. Secret values are unwrapped for the caller but never logged.
    """

    def __init__(self, settings: Any) -> None:
        self._settings = settings

    def get(self, key: str) -> ConfigLookup:
        node: Any = self._settings
        for segment in key.split("."):
            if isinstance(node, dict):
                if segment not in node:
                    return ConfigLookup.absent(key)
                node = node[segment]
            elif hasattr(node, segment):
                node = getattr(node, segment)
            else:
                return ConfigLookup.absent(key)

            if node is None:
                return ConfigLookup.absent(key)

        if isinstance(node, SecretStr):
            node = node.get_secret_value()
        return ConfigLookup.of(key, node)
