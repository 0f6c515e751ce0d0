"""Transport interfaces."""

from __future__ import annotations

from typing import Protocol


class Transport(Protocol):
    def send(
        self,
        address: str,
        payload: bytes,
        *,
        timeout_s: float | None = None,
    ) -> bytes:
        """Send a framed request to a plug and return the raw reply bytes."""
