"""Domain port for relational storage reachability."""

from __future__ import annotations

from typing import Protocol


class IStoragePinger(Protocol):
    """Issues a trivial round-trip against the relational store."""

    def ping(self) -> None:
        """Run the round-trip, raising on any driver or connection error."""
        ...
