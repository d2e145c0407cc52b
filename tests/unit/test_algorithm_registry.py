"""Tests for the algorithm registry and base class."""

import pytest

from algorithms.brute_force import BruteForceAlg
from algorithms.heuristic import HeuristicAlg
from wildcsp.domain.algorithms import (
    CSPAlgorithm,
    get_algorithm,
    global_registry,
    register_algorithm,
)
from wildcsp.domain.errors import AlgorithmNotFoundError
from wildcsp.domain.monitoring import AlgorithmMonitor, LoggingMonitor, NoOpMonitor
from wildcsp.domain.string_set import StringSet


def test_discovery_registers_both_solvers():
    assert global_registry["Heuristic"] is HeuristicAlg
    assert global_registry["BruteForce"] is BruteForceAlg


def test_get_algorithm_unknown():
    with pytest.raises(AlgorithmNotFoundError, match="Heuristic"):
        get_algorithm("Genetic")


def test_register_algorithm_decorator():
    @register_algorithm
    class EchoAlg(CSPAlgorithm):
        name = "EchoTest"
        default_params = {"a": 1}

        def run(self):
            return {}

    try:
        assert get_algorithm("EchoTest") is EchoAlg
        alg = EchoAlg(StringSet(2, ["01"]), b=2, callback=print)
        assert alg.params == {"a": 1, "b": 2, "callback": print}
        assert alg.get_actual_params() == {"a": 1, "b": 2}
    finally:
        global_registry.pop("EchoTest", None)


def test_params_override_defaults():
    alg = HeuristicAlg(StringSet(1, ["1"]), undecided_fill="1")
    assert alg.params["undecided_fill"] == "1"
    assert HeuristicAlg.default_params["undecided_fill"] == "0"


def test_monitors_satisfy_protocol(caplog):
    assert isinstance(NoOpMonitor(), AlgorithmMonitor)
    import logging

    monitor = LoggingMonitor(logging.getLogger("wildcsp.test.monitor"))
    assert isinstance(monitor, AlgorithmMonitor)
    with caplog.at_level(logging.WARNING):
        monitor.on_warning("careful", step=1)
    assert "careful" in caplog.text
    assert monitor.is_cancelled() is False


def test_algorithm_without_monitor_uses_noop():
    alg = BruteForceAlg(StringSet(2, ["01"]))
    assert isinstance(alg._monitor, NoOpMonitor)
    assert alg.run()["success"] is True


def test_failure_is_reported_to_monitor():
    warnings = []

    class RecordingMonitor(NoOpMonitor):
        def on_warning(self, message, /, **data):
            warnings.append(message)

    res = BruteForceAlg(
        StringSet(3, ["010"]), monitor=RecordingMonitor(), max_length=2
    ).run()
    assert res["success"] is False
    assert warnings and "BruteForce" in warnings[0]
