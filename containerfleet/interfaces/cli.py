"""
interfaces/cli.py
──────────────────────────────────────────────────────────────────────────────
Command-line demonstration of the container fleet model.

Replays a fixed scenario: two ships, one liquid, one gas and one refrigerated
container, exercising load, batch load, empty, remove, replace and transfer.

Usage:
  # Human-readable output
  python -m containerfleet.interfaces.cli

  # JSON snapshot of both ships at the end of the run
  python -m containerfleet.interfaces.cli --json

  # Reproducible serial numbers and debug logging
  python -m containerfleet.interfaces.cli --seed 42 --verbose

  # Via installed entry-point (pyproject.toml [project.scripts])
  containerfleet-demo

Exit codes:
  0 = success
  1 = fatal error
  2 = argument error
"""
from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys
from typing import Callable

from containerfleet.config.settings import get_settings
from containerfleet.domain.exceptions import ConfigurationError
from containerfleet.domain.models import CargoType, ProductType
from containerfleet.domain.ship import ContainerShip
from containerfleet.ports.serial_port import SerialNumberPort
from containerfleet.services.wiring import (
    build_serial_generator,
    get_serial_generator,
    make_gas_container,
    make_liquid_container,
    make_refrigerated_container,
)

logger = logging.getLogger(__name__)


# ── Argument parser ────────────────────────────────────────────────────────

def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="containerfleet-demo",
        description="Run the container ship loading demonstration.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument(
        "--json",
        action="store_true",
        dest="json_output",
        help="Print the final state of both ships as JSON.",
    )
    p.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for serial number generation (default: SERIAL_SEED or random). "
             "Uses a dedicated registry for this run.",
    )
    p.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging.",
    )
    return p


def _resolve_log_level(name: str) -> int:
    """Map a level name such as "warning" to its logging constant.

    Raises:
        ConfigurationError: If the name is not a known logging level.
    """
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        raise ConfigurationError(
            f"Unknown LOG_LEVEL '{name}'. "
            "Valid values: DEBUG, INFO, WARNING, ERROR, CRITICAL."
        )
    return level


# ── Scenario ───────────────────────────────────────────────────────────────

def run_scenario(
    serials: SerialNumberPort,
    echo: Callable[[str], None] = print,
) -> tuple[ContainerShip, ContainerShip]:
    """Replay the demonstration and return (ship, ship2) in their final state."""
    ship = ContainerShip(max_speed=25, max_container_count=20, max_weight_tons=30)

    liquid = make_liquid_container(20, 100, 200, 200, 100, CargoType.HAZARDOUS, serials=serials)
    gas = make_gas_container(10, 10, 30, 10, 50, pressure=2, serials=serials)
    bananas = ProductType(name="bananas", required_temp=13.3)
    reefer = make_refrigerated_container(10, 10, 20, 30, 30, bananas, serials=serials)

    echo(reefer.set_temperature(20).message)
    echo(str(reefer))

    echo(ship.load_container(liquid).message)
    for result in ship.load_containers([gas, reefer]):
        echo(result.message)
    echo(str(ship))

    gas.empty()
    echo(str(gas.get_weight()))
    echo(gas.load(20).message)

    echo(ship.remove_container(liquid).message)
    echo(ship.replace_container(1, liquid).message)

    ship2 = ContainerShip(max_speed=20, max_container_count=30, max_weight_tons=100)
    echo(ship.transfer_container(liquid, ship2).message)
    echo(str(ship2))
    return ship, ship2


# ── Main logic ─────────────────────────────────────────────────────────────

def run(args: argparse.Namespace) -> int:
    """Execute the demonstration for the given arguments.

    With ``--seed`` every scenario container draws from a dedicated seeded
    registry instead of the process-wide one from get_serial_generator().
    Serial suffixes are unique within that registry only, so containers from
    one run must not be mixed with containers built on the default registry.

    Returns:
        Exit code (0 = success, 1 = error).
    """
    try:
        if args.seed is not None:
            settings = dataclasses.replace(get_settings(), serial_seed=args.seed)
            serials = build_serial_generator(settings)
        else:
            serials = get_serial_generator()
    except Exception as exc:
        logger.exception("Failed to initialise serial generator")
        print(f"ERROR: Initialisation failed: {exc}", file=sys.stderr)
        return 1

    # JSON mode keeps stdout clean for the final payload
    echo: Callable[[str], None] = (lambda _: None) if args.json_output else print
    try:
        ship, ship2 = run_scenario(serials, echo=echo)
    except Exception as exc:
        logger.exception("Demonstration failed")
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    if args.json_output:
        payload = {"ship": ship.summary().to_dict(), "ship2": ship2.summary().to_dict()}
        print(json.dumps(payload, indent=2, ensure_ascii=False))
    return 0


def main() -> None:
    """Entry point for the containerfleet-demo console script."""
    parser = _build_parser()
    args = parser.parse_args()

    try:
        log_level = logging.DEBUG if args.verbose else _resolve_log_level(get_settings().log_level)
    except ConfigurationError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        sys.exit(1)
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    )

    sys.exit(run(args))


if __name__ == "__main__":
    main()
