"""
config/settings.py
──────────────────────────────────────────────────────────────────────────────
Single source of truth for all tuneable parameters.

All values can be overridden via environment variables or a .env file placed
at the project root.  The frozen dataclass ensures settings are never mutated
at runtime.

  SERIAL_PREFIX        → leading token of every serial number ("KON")
  SERIAL_UPPER_BOUND   → exclusive upper bound of the random serial suffix
  SERIAL_MAX_ATTEMPTS  → collision retries before giving up
  SERIAL_SEED          → fixed seed for reproducible serials (unset = random)
  LOG_LEVEL            → default log level of the CLI
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from containerfleet.domain.exceptions import ConfigurationError

# Load .env from project root (two levels up from this file)
load_dotenv(Path(__file__).parent.parent.parent / ".env")


def _env(key: str, default: str) -> str:
    return os.getenv(key, default)


def _env_int(key: str, default: int) -> int:
    raw = os.getenv(key, str(default))
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{key} must be an integer, got {raw!r}") from exc


def _env_optional_int(key: str) -> Optional[int]:
    raw = os.getenv(key, "").strip()
    if not raw:
        return None
    return _env_int(key, 0)


@dataclass(frozen=True)
class Settings:
    """Immutable application settings loaded from environment variables."""

    # ── Serial numbers ──────────────────────────────────────────────────────
    serial_prefix: str = field(
        default_factory=lambda: _env("SERIAL_PREFIX", "KON")
    )
    # Non-negative 32-bit random integers: [0, 2**31 - 1)
    serial_upper_bound: int = field(
        default_factory=lambda: _env_int("SERIAL_UPPER_BOUND", 2**31 - 1)
    )
    serial_max_attempts: int = field(
        default_factory=lambda: _env_int("SERIAL_MAX_ATTEMPTS", 10_000)
    )
    serial_seed: Optional[int] = field(
        default_factory=lambda: _env_optional_int("SERIAL_SEED")
    )

    # ── Logging ─────────────────────────────────────────────────────────────
    log_level: str = field(
        default_factory=lambda: _env("LOG_LEVEL", "WARNING")
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Returns a cached singleton Settings instance.

    Use this everywhere instead of instantiating Settings() directly:
    it guarantees a single object is shared across the entire process.
    """
    return Settings()
