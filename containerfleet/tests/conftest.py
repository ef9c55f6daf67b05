"""
tests/conftest.py
──────────────────────────────────────────────────────────────────────────────
Shared pytest fixtures and fake adapter implementations.

Fake adapters implement the Port Protocols via structural subtyping; they do
NOT inherit from any base class.  Containers built from these fixtures never
touch the process-wide generator or notifier in services/wiring.py.

Fixture hierarchy:
  settings   → Settings with a fixed serial seed
  serials    → RandomSerialNumberGenerator seeded from settings
  notifier   → RecordingNotifier (collects every hazard notification)
  make_*     → factories building containers wired with serials + notifier
  ship       → ContainerShip(25 kn, 20 containers, 30 t)
"""
from __future__ import annotations

import random

import pytest

from containerfleet.adapters.random_serial import RandomSerialNumberGenerator
from containerfleet.config.settings import Settings
from containerfleet.domain.containers import (
    GasContainer,
    LiquidContainer,
    RefrigeratedContainer,
)
from containerfleet.domain.models import CargoType, ProductType
from containerfleet.domain.ship import ContainerShip


# ── Settings fixture ───────────────────────────────────────────────────────

@pytest.fixture(scope="session")
def settings() -> Settings:
    """Return a Settings instance with sane test defaults."""
    return Settings(
        serial_prefix="KON",
        serial_upper_bound=2**31 - 1,
        serial_max_attempts=100,
        serial_seed=1234,
        log_level="DEBUG",
    )


# ── Fake adapters ──────────────────────────────────────────────────────────

class RecordingNotifier:
    """Collects (serial_number, message) pairs instead of emitting them."""

    def __init__(self) -> None:
        self.notifications: list[tuple[str, str]] = []

    def notify(self, serial_number: str, message: str) -> None:
        self.notifications.append((serial_number, message))


class CountingSerials:
    """Deterministic issuer: KON-<kind>-1, KON-<kind>-2, ..."""

    def __init__(self) -> None:
        self.count = 0

    def issue(self, kind: str) -> str:
        self.count += 1
        return f"KON-{kind}-{self.count}"


# ── pytest fixtures ────────────────────────────────────────────────────────

@pytest.fixture
def serials(settings):
    return RandomSerialNumberGenerator(
        prefix=settings.serial_prefix,
        upper_bound=settings.serial_upper_bound,
        max_attempts=settings.serial_max_attempts,
        rng=random.Random(settings.serial_seed),
    )


@pytest.fixture
def counting_serials():
    return CountingSerials()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def bananas():
    return ProductType(name="bananas", required_temp=13.3)


@pytest.fixture
def make_liquid(serials, notifier):
    def _make(mass=20, tare_mass=100, max_payload=200, height=200, depth=100,
              cargo_type=CargoType.HAZARDOUS):
        return LiquidContainer(
            mass, tare_mass, max_payload, height, depth, cargo_type,
            serials=serials, notifier=notifier,
        )
    return _make


@pytest.fixture
def make_gas(serials, notifier):
    def _make(mass=10, tare_mass=10, max_payload=30, height=10, depth=50, pressure=2):
        return GasContainer(
            mass, tare_mass, max_payload, height, depth, pressure,
            serials=serials, notifier=notifier,
        )
    return _make


@pytest.fixture
def make_reefer(serials, bananas):
    def _make(mass=10, tare_mass=10, max_payload=20, height=30, depth=30, product_type=None):
        return RefrigeratedContainer(
            mass, tare_mass, max_payload, height, depth, product_type or bananas,
            serials=serials,
        )
    return _make


@pytest.fixture
def ship():
    return ContainerShip(max_speed=25, max_container_count=20, max_weight_tons=30)
