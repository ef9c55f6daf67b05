"""
adapters/random_serial.py
──────────────────────────────────────────────────────────────────────────────
Random serial number generator with an in-memory registry.

Serial number format:  <prefix>-<ContainerKind>-<random int>
                       e.g. KON-LiquidContainer-1804289383

The numeric suffix is unique across every serial this generator has issued,
regardless of container kind.  Collisions are resolved by redrawing.

Design notes:
  - services/wiring.py creates ONE generator per process; its make_*
    container factories hand it to every container they build.
  - Thread-safe: draw-and-register happens under a threading.Lock, so two
    threads constructing containers at the same time cannot receive the same
    suffix.
  - Pass a seeded ``random.Random`` (or SERIAL_SEED) for reproducible serials.
"""
from __future__ import annotations

import logging
import random
import threading
from typing import Optional

from containerfleet.config.settings import Settings
from containerfleet.domain.exceptions import ConfigurationError, SerialNumberExhaustedError

logger = logging.getLogger(__name__)


class RandomSerialNumberGenerator:
    """Issues unique random serial numbers.

    Args:
        prefix:       Leading token of every serial.
        upper_bound:  Exclusive upper bound of the random suffix.
        max_attempts: Draws attempted before giving up on a free suffix.
        rng:          Random source; a fresh ``random.Random()`` if omitted.
    """

    def __init__(
        self,
        prefix: str = "KON",
        upper_bound: int = 2**31 - 1,
        max_attempts: int = 10_000,
        rng: Optional[random.Random] = None,
    ) -> None:
        if upper_bound <= 0:
            raise ConfigurationError(f"Serial upper bound must be positive, got {upper_bound}")
        if max_attempts <= 0:
            raise ConfigurationError(f"Serial max attempts must be positive, got {max_attempts}")
        self._prefix = prefix
        self._upper_bound = upper_bound
        self._max_attempts = max_attempts
        self._rng = rng or random.Random()
        self._issued: set[int] = set()
        self._lock = threading.Lock()
        logger.debug(
            "RandomSerialNumberGenerator initialised | prefix=%s upper_bound=%d",
            prefix,
            upper_bound,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> RandomSerialNumberGenerator:
        """Build a generator configured by SERIAL_* settings."""
        rng = random.Random(settings.serial_seed) if settings.serial_seed is not None else None
        return cls(
            prefix=settings.serial_prefix,
            upper_bound=settings.serial_upper_bound,
            max_attempts=settings.serial_max_attempts,
            rng=rng,
        )

    # ── Public API ─────────────────────────────────────────────────────────

    def issue(self, kind: str) -> str:
        """Draw an unused suffix, register it and build the serial string.

        Raises:
            SerialNumberExhaustedError: If every draw collided.
        """
        with self._lock:
            for _ in range(self._max_attempts):
                number = self._rng.randrange(self._upper_bound)
                if number not in self._issued:
                    self._issued.add(number)
                    serial = f"{self._prefix}-{kind}-{number}"
                    logger.debug("Issued serial number %s", serial)
                    return serial
        raise SerialNumberExhaustedError(
            f"No unused serial number found for {kind} after "
            f"{self._max_attempts} attempts ({len(self._issued)} already issued)"
        )

    @property
    def issued(self) -> int:
        """Number of serials issued so far."""
        with self._lock:
            return len(self._issued)

    def reset(self) -> None:
        """Forget every issued suffix.  Intended for tests only."""
        with self._lock:
            self._issued.clear()
