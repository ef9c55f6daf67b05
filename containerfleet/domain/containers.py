"""
domain/containers.py
──────────────────────────────────────────────────────────────────────────────
Container kinds and their load / empty policies.

                 load ceiling                      on overfill         empty()
  ─────────────  ────────────────────────────────  ──────────────────  ─────────
  Container      mass + amount < max_payload       HARD_OVERFILL       mass = 0
  Liquid         amount <= max_payload × 0.5|0.9   SOFT_REJECTION      mass = 0
                 then the base check               (base: HARD)
  Gas            mass + amount < max_payload       SOFT_REJECTION      mass × 0.05
  Refrigerated   base                              HARD_OVERFILL       mass = 0

Every kind answers ``try_load()`` with an OperationResult.  ``load()`` wraps
it and raises OverfillError for HARD_OVERFILL, so code that relies on the
hard failure unwinding still does, while soft rejections never raise.

Liquid and Gas containers carry the HazardNotifying capability: a soft
rejection sends a notification through their HazardNotifierPort.

Ports are always injected through the constructor; use the make_* helpers
in services/wiring.py to build containers on the process-wide defaults.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional, Union

from containerfleet.domain.exceptions import OverfillError
from containerfleet.domain.models import (
    CargoType,
    ContainerSpec,
    ContainerSummary,
    ErrorKind,
    OperationResult,
    ProductType,
)
from containerfleet.ports.notifier_port import HazardNotifierPort
from containerfleet.ports.serial_port import SerialNumberPort

logger = logging.getLogger(__name__)

# Fraction of max payload a liquid container accepts in a single load
HAZARDOUS_LIQUID_RATIO: float = 0.5
ORDINARY_LIQUID_RATIO: float = 0.9

# Fraction of the cargo left behind when a gas container is emptied
GAS_RESIDUE_RATIO: float = 0.05


class Container(ABC):
    """Base cargo container with the strict overfill policy.

    Args:
        mass:        Initial cargo mass (kg).
        tare_mass:   Mass of the empty container (kg).
        max_payload: Maximum cargo mass (kg), must be > 0.
        height:      Height (cm), informational.
        depth:       Depth (cm), informational.
        serials:     Serial number issuer (services/wiring.py builds containers
                     with the process-wide generator).

    Raises:
        pydantic.ValidationError: On negative masses/dimensions or max_payload <= 0.
    """

    def __init__(
        self,
        mass: float,
        tare_mass: float,
        max_payload: float,
        height: int,
        depth: int,
        *,
        serials: SerialNumberPort,
    ) -> None:
        spec = ContainerSpec(
            mass=mass,
            tare_mass=tare_mass,
            max_payload=max_payload,
            height=height,
            depth=depth,
        )
        self._mass = spec.mass
        self._tare_mass = spec.tare_mass
        self._max_payload = spec.max_payload
        self._height = spec.height
        self._depth = spec.depth

        self._serial_number = serials.issue(self.kind)
        logger.debug("Created %s", self._serial_number)

    # ── Read-only state ────────────────────────────────────────────────────

    @property
    def kind(self) -> str:
        """Concrete container kind name, as embedded in the serial number."""
        return type(self).__name__

    @property
    def mass(self) -> float:
        return self._mass

    @property
    def tare_mass(self) -> float:
        return self._tare_mass

    @property
    def max_payload(self) -> float:
        return self._max_payload

    @property
    def height(self) -> int:
        return self._height

    @property
    def depth(self) -> int:
        return self._depth

    @property
    def serial_number(self) -> str:
        return self._serial_number

    # ── Load / empty policy ────────────────────────────────────────────────

    def try_load(self, amount: float) -> OperationResult:
        """Add cargo if ``mass + amount < max_payload``; never raises."""
        if self._mass + amount < self._max_payload:
            return self._add_mass(amount)
        return OperationResult.failure(
            ErrorKind.HARD_OVERFILL,
            f"Container {self._serial_number} is overfilled.",
            serial_number=self._serial_number,
        )

    def load(self, amount: float) -> OperationResult:
        """Load cargo, raising on a hard overfill.

        Returns:
            The try_load() result: success, or a soft rejection.

        Raises:
            OverfillError: If the base max payload would be reached.
        """
        result = self.try_load(amount)
        if result.error is ErrorKind.HARD_OVERFILL:
            logger.error("%s", result.message)
            raise OverfillError(self._serial_number, self._mass, amount, self._max_payload)
        return result

    def empty(self) -> None:
        self._mass = 0.0

    def get_weight(self) -> float:
        """Cargo plus tare mass (kg)."""
        return self._mass + self._tare_mass

    def _add_mass(self, amount: float) -> OperationResult:
        self._mass += amount
        logger.debug("Loaded %s kg into %s (mass=%s)", amount, self._serial_number, self._mass)
        return OperationResult.success(
            f"Loaded {amount} kg into {self._serial_number}",
            serial_number=self._serial_number,
        )

    # ── Presentation ───────────────────────────────────────────────────────

    @abstractmethod
    def _extra_fields(self) -> dict[str, Union[str, float]]:
        """Kind-specific fields appended to the summary."""

    def summary(self) -> ContainerSummary:
        return ContainerSummary(
            kind=self.kind,
            serial_number=self._serial_number,
            mass=self._mass,
            tare_mass=self._tare_mass,
            max_payload=self._max_payload,
            height=self._height,
            depth=self._depth,
            weight=self.get_weight(),
            details=self._extra_fields(),
        )

    def __str__(self) -> str:
        text = (
            f"Container information: mass: {self._mass} kg, tare mass: {self._tare_mass} kg, "
            f"max capacity: {self._max_payload} kg, height: {self._height} cm, "
            f"depth: {self._depth} cm, serial number: {self._serial_number}"
        )
        extras = ", ".join(
            f"{name.replace('_', ' ')}: {value}" for name, value in self._extra_fields().items()
        )
        return f"{text}, {extras}" if extras else text

    def __repr__(self) -> str:
        return f"{self.kind}(serial_number={self._serial_number!r}, mass={self._mass})"


class _HazardNotifyingContainer(Container):
    """Container that reports overfill through a HazardNotifierPort."""

    _hazard_message = "Hazard reported for container {serial}"

    def __init__(
        self,
        mass: float,
        tare_mass: float,
        max_payload: float,
        height: int,
        depth: int,
        *,
        serials: SerialNumberPort,
        notifier: HazardNotifierPort,
    ) -> None:
        super().__init__(mass, tare_mass, max_payload, height, depth, serials=serials)
        self._notifier = notifier

    def send_notification(self, message: Optional[str] = None) -> None:
        self._notifier.notify(
            self._serial_number,
            message or self._hazard_message.format(serial=self._serial_number),
        )

    def _reject(self, amount: float) -> OperationResult:
        self.send_notification()
        return OperationResult.failure(
            ErrorKind.SOFT_REJECTION,
            f"Load of {amount} kg rejected for container {self._serial_number}",
            serial_number=self._serial_number,
        )


class LiquidContainer(_HazardNotifyingContainer):
    """Liquid tank whose single-load ceiling depends on the cargo type."""

    _hazard_message = "Dangerous situation occurred for container {serial}"

    def __init__(
        self,
        mass: float,
        tare_mass: float,
        max_payload: float,
        height: int,
        depth: int,
        cargo_type: CargoType,
        *,
        serials: SerialNumberPort,
        notifier: HazardNotifierPort,
    ) -> None:
        super().__init__(
            mass, tare_mass, max_payload, height, depth,
            serials=serials, notifier=notifier,
        )
        self._cargo_type = CargoType(cargo_type)

    @property
    def cargo_type(self) -> CargoType:
        return self._cargo_type

    @property
    def load_ceiling(self) -> float:
        ratio = (
            HAZARDOUS_LIQUID_RATIO
            if self._cargo_type is CargoType.HAZARDOUS
            else ORDINARY_LIQUID_RATIO
        )
        return self._max_payload * ratio

    def try_load(self, amount: float) -> OperationResult:
        # The ceiling bounds the single amount; the base check still guards the total.
        if amount <= self.load_ceiling:
            return super().try_load(amount)
        return self._reject(amount)

    def _extra_fields(self) -> dict[str, Union[str, float]]:
        return {"cargo_type": self._cargo_type.value}


class GasContainer(_HazardNotifyingContainer):
    """Pressurised gas container; never fails hard and never fully empties."""

    _hazard_message = "Mass of cargo exceeds maximum capacity for container {serial}"

    def __init__(
        self,
        mass: float,
        tare_mass: float,
        max_payload: float,
        height: int,
        depth: int,
        pressure: float,
        *,
        serials: SerialNumberPort,
        notifier: HazardNotifierPort,
    ) -> None:
        super().__init__(
            mass, tare_mass, max_payload, height, depth,
            serials=serials, notifier=notifier,
        )
        self._pressure = pressure

    @property
    def pressure(self) -> float:
        return self._pressure

    def try_load(self, amount: float) -> OperationResult:
        if self._mass + amount < self._max_payload:
            return self._add_mass(amount)
        return self._reject(amount)

    def empty(self) -> None:
        self._mass *= GAS_RESIDUE_RATIO

    def _extra_fields(self) -> dict[str, Union[str, float]]:
        return {"pressure": self._pressure}


class RefrigeratedContainer(Container):
    """Cooled container bound to a product's required temperature."""

    def __init__(
        self,
        mass: float,
        tare_mass: float,
        max_payload: float,
        height: int,
        depth: int,
        product_type: ProductType,
        *,
        serials: SerialNumberPort,
    ) -> None:
        super().__init__(mass, tare_mass, max_payload, height, depth, serials=serials)
        self._product_type = product_type
        self._current_temp = product_type.required_temp

    @property
    def product_type(self) -> ProductType:
        return self._product_type

    @property
    def current_temp(self) -> float:
        return self._current_temp

    def set_temperature(self, temperature: float) -> OperationResult:
        """Set the temperature; anything above the product's requirement is rejected."""
        if temperature > self._product_type.required_temp:
            message = (
                f"Set temperature cannot be higher than the required temperature "
                f"for {self._product_type.name}"
            )
            logger.error("Error: %s (%s°C requested on %s)", message, temperature, self._serial_number)
            return OperationResult.failure(
                ErrorKind.INVALID_TEMPERATURE, message, serial_number=self._serial_number
            )
        self._current_temp = temperature
        logger.info("Temperature set to %s°C on %s", temperature, self._serial_number)
        return OperationResult.success(
            f"Temperature set to {temperature}°C", serial_number=self._serial_number
        )

    def _extra_fields(self) -> dict[str, Union[str, float]]:
        return {
            "product_type": self._product_type.name,
            "current_temperature": self._current_temp,
        }
