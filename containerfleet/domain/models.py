"""
domain/models.py
──────────────────────────────────────────────────────────────────────────────
Pure value objects: Pydantic models with no imports from adapters or ports.

  • ProductType       shared cargo descriptor for refrigerated containers
  • ContainerSpec     validated construction parameters of any container
  • OperationResult   the single success/failure type returned by every
                      container and ship operation
  • ContainerSummary,
    ShipSummary       serialisable snapshots for the CLI / JSON output
"""
from __future__ import annotations

from enum import Enum
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


# ── Enums ──────────────────────────────────────────────────────────────────────

class CargoType(str, Enum):
    """Kind of liquid carried; decides the liquid load ceiling."""
    ORDINARY  = "ordinary"   # 90 % of max payload
    HAZARDOUS = "hazardous"  # 50 % of max payload


class ErrorKind(str, Enum):
    """Distinguishable failure reasons carried by OperationResult."""
    HARD_OVERFILL       = "hard_overfill"        # base max payload breached
    SOFT_REJECTION      = "soft_rejection"       # hazard notification sent
    INVALID_TEMPERATURE = "invalid_temperature"  # above required temperature
    CAPACITY_EXCEEDED   = "capacity_exceeded"    # ship count / weight limit
    INVALID_INDEX       = "invalid_index"        # replace outside 0..len-1
    NOT_FOUND           = "not_found"            # container not on this ship


# ── Cargo descriptor ───────────────────────────────────────────────────────────

class ProductType(BaseModel):
    """A refrigerated cargo kind and the temperature it must be kept at."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    required_temp: float = Field(..., description="Maximum allowed temperature (°C)")


# ── Construction parameters ────────────────────────────────────────────────────

class ContainerSpec(BaseModel):
    """Validated dimensional and capacity parameters shared by all containers."""

    model_config = ConfigDict(frozen=True)

    mass:        float = Field(..., ge=0, description="Initial cargo mass (kg)")
    tare_mass:   float = Field(..., ge=0, description="Empty container mass (kg)")
    max_payload: float = Field(..., gt=0, description="Maximum cargo mass (kg)")
    height:      int   = Field(..., ge=0, description="Height (cm)")
    depth:       int   = Field(..., ge=0, description="Depth (cm)")


# ── Operation outcome ──────────────────────────────────────────────────────────

class OperationResult(BaseModel):
    """Outcome of a load / remove / replace / transfer / temperature change.

    Truthy on success, falsy on any failure, so callers can write
    ``if ship.load_container(c): ...`` or branch on ``result.error``.
    """

    model_config = ConfigDict(frozen=True)

    ok:            bool
    error:         Optional[ErrorKind] = None
    message:       str = ""
    serial_number: Optional[str] = None

    @classmethod
    def success(cls, message: str = "", serial_number: Optional[str] = None) -> OperationResult:
        return cls(ok=True, message=message, serial_number=serial_number)

    @classmethod
    def failure(
        cls,
        error: ErrorKind,
        message: str,
        serial_number: Optional[str] = None,
    ) -> OperationResult:
        return cls(ok=False, error=error, message=message, serial_number=serial_number)

    def __bool__(self) -> bool:
        return self.ok


# ── Presentation snapshots ─────────────────────────────────────────────────────

class ContainerSummary(BaseModel):
    """Point-in-time view of a single container."""

    kind:          str
    serial_number: str
    mass:          float
    tare_mass:     float
    max_payload:   float
    height:        int
    depth:         int
    weight:        float
    details:       dict[str, Union[str, float]] = Field(default_factory=dict)

    def to_dict(self) -> dict:
        return self.model_dump(mode="json")


class ShipSummary(BaseModel):
    """Point-in-time view of a ship and every container on board."""

    max_speed:           float
    max_container_count: int
    max_weight_tons:     float
    total_weight_kg:     float
    containers:          list[ContainerSummary]

    def to_dict(self) -> dict:
        """Serialise to a plain dict (JSON-safe floats)."""
        return self.model_dump(mode="json")
