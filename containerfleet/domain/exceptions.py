"""
domain/exceptions.py
──────────────────────────────────────────────────────────────────────────────
Custom exception hierarchy.

All exceptions are rooted at ContainerFleetError so callers can catch broadly
(except ContainerFleetError) or narrowly (except OverfillError).

Only genuinely fatal conditions are exceptions.  Every soft rejection
(hazard notification, overload, invalid index, invalid temperature, missing
container) is reported as an OperationResult instead (see domain/models.py).
"""
from __future__ import annotations


class ContainerFleetError(Exception):
    """Base exception for all application errors."""


class ConfigurationError(ContainerFleetError):
    """Raised when required configuration is missing or invalid."""


class OverfillError(ContainerFleetError):
    """Raised when a load breaches a container's hard max payload.

    The container is left untouched: mass is never partially updated.
    """

    def __init__(
        self,
        serial_number: str,
        mass: float,
        amount: float,
        max_payload: float,
    ) -> None:
        self.serial_number = serial_number
        self.mass = mass
        self.amount = amount
        self.max_payload = max_payload
        super().__init__(
            f"Container {serial_number} is overfilled: "
            f"{mass} kg + {amount} kg >= max payload {max_payload} kg"
        )


class SerialNumberExhaustedError(ContainerFleetError):
    """Raised when no unused serial number could be drawn."""
