"""
domain/ship.py
──────────────────────────────────────────────────────────────────────────────
ContainerShip: an ordered hold of containers bounded by count and weight.

Capacity rule (checked on every load, never on replace):
  len(containers) < max_container_count
  total_weight_kg + container.get_weight() <= max_weight_tons × KG_PER_TON

Containers are tracked by reference identity.  The same object may be loaded
twice; removal and transfer act on the first identical entry.

Every operation returns an OperationResult and logs the transition; nothing
here raises for a rejected operation.

Not thread-safe: a ship must not be shared across threads without external
locking.
"""
from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional

from containerfleet.domain.containers import Container
from containerfleet.domain.models import ErrorKind, OperationResult, ShipSummary

logger = logging.getLogger(__name__)

# Ship limits are in tons, container weights in kilograms
KG_PER_TON: int = 1000


class ContainerShip:
    """A vessel carrying containers.

    Args:
        max_speed:           Maximum speed (knots), informational.
        max_container_count: Maximum number of containers on board.
        max_weight_tons:     Maximum total container weight (tons).
    """

    def __init__(
        self,
        max_speed: float,
        max_container_count: int,
        max_weight_tons: float,
    ) -> None:
        self._max_speed = max_speed
        self._max_container_count = max_container_count
        self._max_weight_tons = max_weight_tons
        self._containers: list[Container] = []

    # ── Read-only state ────────────────────────────────────────────────────

    @property
    def max_speed(self) -> float:
        return self._max_speed

    @property
    def max_container_count(self) -> int:
        return self._max_container_count

    @property
    def max_weight_tons(self) -> float:
        return self._max_weight_tons

    @property
    def max_weight_kg(self) -> float:
        return self._max_weight_tons * KG_PER_TON

    @property
    def containers(self) -> tuple[Container, ...]:
        """Containers on board in load order."""
        return tuple(self._containers)

    def __len__(self) -> int:
        return len(self._containers)

    def __iter__(self) -> Iterator[Container]:
        return iter(tuple(self._containers))

    def __contains__(self, container: object) -> bool:
        return self._index_of(container) is not None

    def get_total_weight(self) -> float:
        """Sum of container weights on board (kg)."""
        return sum(c.get_weight() for c in self._containers)

    # ── Public API ─────────────────────────────────────────────────────────

    def load_container(self, container: Container) -> OperationResult:
        """Put a container on board if both count and weight limits allow it."""
        if (
            len(self._containers) < self._max_container_count
            and self.get_total_weight() + container.get_weight() <= self.max_weight_kg
        ):
            self._containers.append(container)
            logger.info("Container loaded: %s (%s)", container.kind, container.serial_number)
            return OperationResult.success(
                f"Container loaded: {container.kind}",
                serial_number=container.serial_number,
            )

        logger.warning(
            "Ship cannot add container %s: overload (count=%d/%d weight=%s+%s/%s kg)",
            container.serial_number,
            len(self._containers),
            self._max_container_count,
            self.get_total_weight(),
            container.get_weight(),
            self.max_weight_kg,
        )
        return OperationResult.failure(
            ErrorKind.CAPACITY_EXCEEDED,
            "Ship cannot add this container: overload.",
            serial_number=container.serial_number,
        )

    def load_containers(self, containers: Iterable[Container]) -> list[OperationResult]:
        """Load each container independently, in order.

        A rejected container does not stop the ones after it.
        """
        return [self.load_container(c) for c in containers]

    def remove_container(self, container: Container) -> OperationResult:
        """Unload the first entry identical to ``container``.

        Removing a container that is not on board changes nothing and
        returns NOT_FOUND.
        """
        index = self._index_of(container)
        if index is None:
            logger.warning("Container %s is not on board; nothing unloaded", container.serial_number)
            return OperationResult.failure(
                ErrorKind.NOT_FOUND,
                f"Container not on board: {container.serial_number}",
                serial_number=container.serial_number,
            )
        del self._containers[index]
        logger.info("Container unloaded: %s", container.serial_number)
        return OperationResult.success(
            f"Container unloaded: {container.serial_number}",
            serial_number=container.serial_number,
        )

    def replace_container(self, index: int, new_container: Container) -> OperationResult:
        """Swap the container at ``index``; limits are not re-checked."""
        if 0 <= index < len(self._containers):
            self._containers[index] = new_container
            logger.info("Container replaced at index %d: with %s", index, new_container.serial_number)
            return OperationResult.success(
                f"Container replaced at index {index}: with {new_container.serial_number}",
                serial_number=new_container.serial_number,
            )
        logger.warning("Invalid index: %d (ship holds %d containers)", index, len(self._containers))
        return OperationResult.failure(
            ErrorKind.INVALID_INDEX,
            f"Invalid index: {index}",
            serial_number=new_container.serial_number,
        )

    def transfer_container(
        self,
        container: Container,
        destination: ContainerShip,
    ) -> OperationResult:
        """Move a container on board to ``destination``.

        The container leaves this ship even when the destination rejects it,
        in which case it ends up on neither ship and the destination's
        CAPACITY_EXCEEDED result is returned.
        """
        index = self._index_of(container)
        if index is None:
            logger.warning("Cannot transfer %s: not on board", container.serial_number)
            return OperationResult.failure(
                ErrorKind.NOT_FOUND,
                f"Container not on board: {container.serial_number}",
                serial_number=container.serial_number,
            )

        result = destination.load_container(container)
        del self._containers[index]
        if not result:
            logger.warning(
                "Transfer of %s rejected by destination; container removed from source "
                "and is on neither ship",
                container.serial_number,
            )
            return result

        logger.info("Container %s transferred to target ship.", container.serial_number)
        return OperationResult.success(
            "Container transferred to target ship.",
            serial_number=container.serial_number,
        )

    # ── Presentation ───────────────────────────────────────────────────────

    def summary(self) -> ShipSummary:
        return ShipSummary(
            max_speed=self._max_speed,
            max_container_count=self._max_container_count,
            max_weight_tons=self._max_weight_tons,
            total_weight_kg=self.get_total_weight(),
            containers=[c.summary() for c in self._containers],
        )

    def __str__(self) -> str:
        lines = [
            "Container Ship Information:",
            f"Maximum speed: {self._max_speed} knots, maximum containers: "
            f"{self._max_container_count}, maximum weight capacity: {self._max_weight_tons} t",
            "Containers on board:",
        ]
        lines.extend(f"- {c}" for c in self._containers)
        return "\n".join(lines) + "\n"

    # ── Helper ─────────────────────────────────────────────────────────────

    def _index_of(self, container: object) -> Optional[int]:
        for i, c in enumerate(self._containers):
            if c is container:
                return i
        return None
