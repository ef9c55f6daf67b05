"""
tests/unit/test_serial_generator.py
──────────────────────────────────────────────────────────────────────────────
Unit tests for RandomSerialNumberGenerator and the process-wide wiring.

Tests cover:
  • Serial format and uniqueness across container kinds
  • Collision redraw and exhaustion
  • Thread-safe uniqueness
  • Configuration validation
  • services/wiring.py singletons and container factories
  • domain/ never imports services/ or adapters/
"""
from __future__ import annotations

import ast
import inspect
import random
import threading

import pytest

from containerfleet.adapters.random_serial import RandomSerialNumberGenerator
from containerfleet.domain import containers, exceptions, models, ship
from containerfleet.domain.exceptions import ConfigurationError, SerialNumberExhaustedError
from containerfleet.domain.models import CargoType
from containerfleet.ports.serial_port import SerialNumberPort
from containerfleet.services import wiring


class _ScriptedRandom(random.Random):
    """Returns pre-set values from randrange()."""

    def __init__(self, values: list[int]) -> None:
        super().__init__()
        self._values = list(values)

    def randrange(self, *args, **kwargs):  # type: ignore[override]
        return self._values.pop(0)


class TestRandomSerialNumberGenerator:
    def test_implements_port(self, serials):
        assert isinstance(serials, SerialNumberPort)

    def test_format(self):
        gen = RandomSerialNumberGenerator(rng=_ScriptedRandom([7]))
        assert gen.issue("LiquidContainer") == "KON-LiquidContainer-7"

    def test_custom_prefix(self):
        gen = RandomSerialNumberGenerator(prefix="ABC", rng=_ScriptedRandom([3]))
        assert gen.issue("GasContainer") == "ABC-GasContainer-3"

    def test_collision_redraws(self):
        gen = RandomSerialNumberGenerator(rng=_ScriptedRandom([5, 5, 6]))
        assert gen.issue("GasContainer") == "KON-GasContainer-5"
        assert gen.issue("LiquidContainer") == "KON-LiquidContainer-6"
        assert gen.issued == 2

    def test_suffix_unique_across_kinds(self, serials):
        issued = [serials.issue(kind) for kind in ("A", "B", "C") * 200]
        suffixes = [s.rsplit("-", 1)[1] for s in issued]
        assert len(set(suffixes)) == len(suffixes)

    def test_exhaustion_raises(self):
        gen = RandomSerialNumberGenerator(upper_bound=1, max_attempts=5)
        gen.issue("GasContainer")
        with pytest.raises(SerialNumberExhaustedError):
            gen.issue("GasContainer")

    def test_reset_forgets_issued(self):
        gen = RandomSerialNumberGenerator(upper_bound=1, max_attempts=1)
        gen.issue("X")
        gen.reset()
        assert gen.issue("X") == "KON-X-0"

    def test_concurrent_issue_is_unique(self):
        gen = RandomSerialNumberGenerator(upper_bound=5000, max_attempts=100_000)
        results: list[str] = []
        lock = threading.Lock()

        def worker():
            batch = [gen.issue("GasContainer") for _ in range(200)]
            with lock:
                results.extend(batch)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len(results) == 1600
        assert len(set(results)) == 1600

    @pytest.mark.parametrize("kwargs", [{"upper_bound": 0}, {"max_attempts": 0}])
    def test_invalid_configuration(self, kwargs):
        with pytest.raises(ConfigurationError):
            RandomSerialNumberGenerator(**kwargs)

    def test_from_settings_is_reproducible(self, settings):
        a = RandomSerialNumberGenerator.from_settings(settings)
        b = RandomSerialNumberGenerator.from_settings(settings)
        assert a.issue("X") == b.issue("X")


class TestWiring:
    def test_serial_generator_is_singleton(self):
        assert wiring.get_serial_generator() is wiring.get_serial_generator()

    def test_notifier_is_singleton(self):
        assert wiring.get_notifier() is wiring.get_notifier()

    def test_build_serial_generator_is_fresh(self, settings):
        assert wiring.build_serial_generator(settings) is not wiring.build_serial_generator(settings)

    def test_factories_share_default_serials(self, bananas):
        made = [wiring.make_gas_container(0, 1, 10, 1, 1, 1) for _ in range(50)]
        made += [wiring.make_refrigerated_container(0, 1, 10, 1, 1, bananas) for _ in range(50)]
        serial_numbers = {c.serial_number for c in made}
        assert len(serial_numbers) == 100

    def test_factories_inject_default_notifier(self, counting_serials):
        liquid = wiring.make_liquid_container(
            0, 10, 100, 1, 1, CargoType.ORDINARY, serials=counting_serials
        )
        gas = wiring.make_gas_container(0, 10, 100, 1, 1, 2, serials=counting_serials)
        assert liquid._notifier is wiring.get_notifier()
        assert gas._notifier is wiring.get_notifier()
        assert liquid.serial_number == "KON-LiquidContainer-1"

    def test_factory_uses_given_serials(self, counting_serials, bananas):
        reefer = wiring.make_refrigerated_container(
            0, 10, 100, 1, 1, bananas, serials=counting_serials
        )
        assert reefer.serial_number == "KON-RefrigeratedContainer-1"


class TestDomainLayering:
    """Domain modules must depend on ports only, never on services or adapters."""

    @pytest.mark.parametrize("module", [containers, exceptions, models, ship])
    def test_domain_imports_no_outer_layer(self, module):
        tree = ast.parse(inspect.getsource(module))
        imported: list[str] = []
        for node in ast.walk(tree):
            if isinstance(node, ast.ImportFrom) and node.module:
                imported.append(node.module)
            elif isinstance(node, ast.Import):
                imported.extend(alias.name for alias in node.names)
        for name in imported:
            assert not name.startswith("containerfleet.services"), name
            assert not name.startswith("containerfleet.adapters"), name

    def test_container_requires_serials(self, bananas):
        with pytest.raises(TypeError):
            containers.RefrigeratedContainer(0, 1, 10, 1, 1, bananas)  # type: ignore[call-arg]

    def test_liquid_requires_notifier(self, serials):
        with pytest.raises(TypeError):
            containers.LiquidContainer(  # type: ignore[call-arg]
                0, 1, 10, 1, 1, CargoType.ORDINARY, serials=serials
            )
