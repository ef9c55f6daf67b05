"""
ports/serial_port.py
──────────────────────────────────────────────────────────────────────────────
Abstract interface for container serial number issuers.

Current implementation: RandomSerialNumberGenerator (process-wide registry)
To swap: write a new adapter implementing this Protocol and change
services/wiring.py, or pass it to a container constructor as ``serials=``.
"""
from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class SerialNumberPort(Protocol):
    """Contract for a unique serial number source."""

    def issue(self, kind: str) -> str:
        """Issue a serial number never handed out before by this issuer.

        Args:
            kind: Concrete container kind name, e.g. "GasContainer".

        Returns:
            Serial number string, e.g. "KON-GasContainer-1804289383".

        Raises:
            SerialNumberExhaustedError: If no unused number can be found.
        """
        ...
