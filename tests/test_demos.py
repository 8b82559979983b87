"""Tests for the built-in pattern demonstrations."""

import threading

import pytest

from pattern_catalog.catalog import PatternCatalog
from pattern_catalog.demos import register_builtin
from pattern_catalog.runner import DemoRunner
from pattern_catalog.sinks import MemorySink
from pattern_catalog.types import Category

EXPECTED = {
    Category.BEHAVIORAL: [
        "mediator",
        "chain-of-responsibility",
        "state",
        "memento",
        "strategy",
        "observer",
        "command",
    ],
    Category.STRUCTURAL: [
        "proxy",
        "composite",
        "facade",
        "decorator",
        "adapter",
        "bridge",
    ],
    Category.CREATIONAL: [
        "abstract-factory",
        "factory-method",
        "builder",
        "singleton",
    ],
    Category.PRINCIPLES: ["solid"],
}

ALL_NAMES = [name for names in EXPECTED.values() for name in names]


@pytest.fixture(scope="module")
def catalog():
    """Catalog populated with every built-in demonstration."""
    catalog = PatternCatalog()
    register_builtin(catalog)
    return catalog


def run(catalog, name):
    return DemoRunner().run(catalog, name, MemorySink())


class TestRegistration:
    """Tests that built-ins are registered under the right families."""

    def test_all_names_registered_in_order(self, catalog):
        assert list(catalog.names()) == ALL_NAMES

    @pytest.mark.parametrize("category", list(EXPECTED))
    def test_categories(self, catalog, category):
        names = [info.name for info in catalog.describe(category)]
        assert names == EXPECTED[category]

    def test_every_demo_has_description(self, catalog):
        assert all(info.description for info in catalog.describe())


@pytest.mark.parametrize("name", ALL_NAMES)
def test_demo_runs_cleanly_and_deterministically(catalog, name):
    """Each demonstration should succeed and repeat its output exactly."""
    first = run(catalog, name)
    second = run(catalog, name)

    assert first.error is None
    assert first.produced_text
    assert first.produced_text == second.produced_text


class TestBehavioralOutput:
    """Spot checks on behavioral demonstrations."""

    def test_chain_of_responsibility(self, catalog):
        assert run(catalog, "chain-of-responsibility").produced_text == (
            "Clerk approves 50",
            "Manager approves 500",
            "Director approves 5000",
            "nobody can approve 50000",
        )

    def test_state(self, catalog):
        assert run(catalog, "state").produced_text == (
            "push: closed -> opened",
            "push: opened -> closed",
            "push: locked -> locked",
        )

    def test_memento_undoes_back_to_empty(self, catalog):
        lines = run(catalog, "memento").produced_text

        assert lines[3] == "typed: 'Design patterns are fun'"
        assert lines[-1] == "undo:  ''"

    def test_strategy_algorithms_agree(self, catalog):
        lines = run(catalog, "strategy").produced_text
        primes = [line.split(": ", 1)[1] for line in lines]

        assert primes[0] == primes[1]

    def test_observer_unsubscribe(self, catalog):
        assert run(catalog, "observer").produced_text == (
            "display: 21.5C",
            "display: 33.0C",
            "alarm: too hot (33.0C)",
            "display: 35.0C",
        )

    def test_mediator_unknown_recipient(self, catalog):
        lines = run(catalog, "mediator").produced_text

        assert lines[0] == "alice -> bob: hi bob"
        assert lines[-1] == "room: no member named carol"

    def test_command_undo(self, catalog):
        assert run(catalog, "command").produced_text == (
            "on: light is on",
            "off: light is off",
            "undo: light is on",
            "undo: light is off",
        )


class TestStructuralOutput:
    """Spot checks on structural demonstrations."""

    def test_proxy_loads_once(self, catalog):
        lines = run(catalog, "proxy").produced_text

        assert lines.count("loading diagram.png from disk") == 1
        assert lines[0] == "proxy created, nothing loaded yet"

    def test_composite_sizes(self, catalog):
        lines = run(catalog, "composite").produced_text

        assert lines[0] == "project/ (500)"
        assert "  src/ (380)" in lines

    def test_facade(self, catalog):
        assert run(catalog, "facade").produced_text == (
            "battery 80%: engine started",
            "battery 5%: engine not started",
        )

    def test_decorator(self, catalog):
        lines = run(catalog, "decorator").produced_text

        assert lines[0] == "function decorators: <b><i>hello</i></b>"
        assert lines[1] == "object decorators: coffee + milk + syrup = 3.25"


class TestCreationalOutput:
    """Spot checks on creational demonstrations."""

    def test_singleton_initializes_once(self, catalog):
        lines = run(catalog, "singleton").produced_text

        assert "initializations: 1" in lines
        assert "all the same object: True" in lines

    def test_builder(self, catalog):
        lines = run(catalog, "builder").produced_text

        assert lines[0] == "car: 4 wheels, 4 doors, extras: radio"
        assert lines[1] == "bike: 2 wheels, 0 doors"


def test_singleton_concurrent_runs_agree(catalog):
    """Runs on separate threads should not disturb each other's instance."""
    results = []
    barrier = threading.Barrier(6)

    def worker():
        barrier.wait()
        for _ in range(20):
            results.append(run(catalog, "singleton"))

    threads = [threading.Thread(target=worker) for _ in range(6)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(results) == 120
    assert all(result.error is None for result in results)
    assert {result.produced_text for result in results} == {
        (
            "threads asked for the instance: 8",
            "initializations: 1",
            "all the same object: True",
            "theme seen through second reference: dark",
        )
    }
