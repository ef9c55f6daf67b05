"""
services/wiring.py
──────────────────────────────────────────────────────────────────────────────
Dependency wiring.

THIS IS THE ONLY FILE THAT NAMES CONCRETE ADAPTER CLASSES.

Domain containers receive their ports through the constructor.  The make_*
helpers below build them on the process-wide defaults:

  get_serial_generator() → RandomSerialNumberGenerator (SERIAL_* settings)
  get_notifier()         → LoggingHazardNotifier

  make_liquid_container()        LiquidContainer  (serials + notifier)
  make_gas_container()           GasContainer     (serials + notifier)
  make_refrigerated_container()  RefrigeratedContainer (serials)

Thread safety:
  @lru_cache(maxsize=1) makes each getter return the same instance across
  calls.  The serial generator locks internally, so the shared instance keeps
  serial numbers unique even when containers are built from several threads.
"""
from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

from containerfleet.adapters.log_notifier import LoggingHazardNotifier
from containerfleet.adapters.random_serial import RandomSerialNumberGenerator
from containerfleet.config.settings import Settings, get_settings
from containerfleet.domain.containers import (
    GasContainer,
    LiquidContainer,
    RefrigeratedContainer,
)
from containerfleet.domain.models import CargoType, ProductType
from containerfleet.ports.notifier_port import HazardNotifierPort
from containerfleet.ports.serial_port import SerialNumberPort

logger = logging.getLogger(__name__)


def build_serial_generator(settings: Settings) -> SerialNumberPort:
    """Instantiate a fresh serial generator configured by ``settings``.

    Raises:
        ConfigurationError: If SERIAL_* settings are invalid.
    """
    generator = RandomSerialNumberGenerator.from_settings(settings)
    logger.info(
        "Serial generator ready | prefix=%s seeded=%s",
        settings.serial_prefix,
        settings.serial_seed is not None,
    )
    return generator


@lru_cache(maxsize=1)
def get_serial_generator() -> SerialNumberPort:
    """Return the process-wide serial number generator.

    The ``@lru_cache`` ensures a single registry per process lifetime, which
    is what makes serial numbers unique across every container created.
    """
    return build_serial_generator(get_settings())


@lru_cache(maxsize=1)
def get_notifier() -> HazardNotifierPort:
    """Return the process-wide hazard notification channel."""
    return LoggingHazardNotifier()


# ── Container factories ────────────────────────────────────────────────────

def make_liquid_container(
    mass: float,
    tare_mass: float,
    max_payload: float,
    height: int,
    depth: int,
    cargo_type: CargoType,
    serials: Optional[SerialNumberPort] = None,
) -> LiquidContainer:
    """Build a LiquidContainer on the default notifier and (unless given) serials."""
    return LiquidContainer(
        mass, tare_mass, max_payload, height, depth, cargo_type,
        serials=serials if serials is not None else get_serial_generator(),
        notifier=get_notifier(),
    )


def make_gas_container(
    mass: float,
    tare_mass: float,
    max_payload: float,
    height: int,
    depth: int,
    pressure: float,
    serials: Optional[SerialNumberPort] = None,
) -> GasContainer:
    """Build a GasContainer on the default notifier and (unless given) serials."""
    return GasContainer(
        mass, tare_mass, max_payload, height, depth, pressure,
        serials=serials if serials is not None else get_serial_generator(),
        notifier=get_notifier(),
    )


def make_refrigerated_container(
    mass: float,
    tare_mass: float,
    max_payload: float,
    height: int,
    depth: int,
    product_type: ProductType,
    serials: Optional[SerialNumberPort] = None,
) -> RefrigeratedContainer:
    """Build a RefrigeratedContainer on the default (unless given) serials."""
    return RefrigeratedContainer(
        mass, tare_mass, max_payload, height, depth, product_type,
        serials=serials if serials is not None else get_serial_generator(),
    )
