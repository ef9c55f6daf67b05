"""
ports/notifier_port.py
──────────────────────────────────────────────────────────────────────────────
Hazard notification contracts.

Two protocols live here:
  1. HazardNotifierPort: the out-of-band channel a notification is sent to
  2. HazardNotifying:    the capability a container kind exposes when it
                          reports overfill softly instead of raising

Only LiquidContainer and GasContainer satisfy HazardNotifying;
``isinstance(container, HazardNotifying)`` is the capability check.

Current channel implementation: LoggingHazardNotifier
"""
from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class HazardNotifierPort(Protocol):
    """Contract for the channel that receives hazard notifications."""

    def notify(self, serial_number: str, message: str) -> None:
        """Deliver a notification about the given container.

        Args:
            serial_number: Serial number of the offending container.
            message:       Human-readable description of the hazard.
        """
        ...


@runtime_checkable
class HazardNotifying(Protocol):
    """Capability of containers that flag overfill instead of failing hard."""

    def send_notification(self, message: Optional[str] = None) -> None:
        """Emit a hazard notification identifying this container."""
        ...
