"""
adapters/log_notifier.py
──────────────────────────────────────────────────────────────────────────────
HazardNotifierPort implementation that writes notifications to logging.

Records go to the dedicated ``containerfleet.hazard`` logger at WARNING so
operators can route them separately (handler, filter, alerting) from the
ordinary diagnostic stream.
"""
from __future__ import annotations

import logging

HAZARD_LOGGER_NAME = "containerfleet.hazard"

logger = logging.getLogger(HAZARD_LOGGER_NAME)


class LoggingHazardNotifier:
    """Sends hazard notifications to the ``containerfleet.hazard`` logger."""

    def __init__(self, level: int = logging.WARNING) -> None:
        self._level = level

    def notify(self, serial_number: str, message: str) -> None:
        logger.log(self._level, "HAZARD [%s] %s", serial_number, message)
