"""Tests for the execution-time sweep."""

import pytest

from wildcsp.benchmark.timing import (
    TimingConfig,
    measure_execution_time,
    sweep_settings,
    time_call,
)


def test_sweep_settings():
    config = TimingConfig(n=4, m=3, k=3, step_n=2, step_m=1)
    assert sweep_settings(config) == [(4, 3), (6, 4), (8, 5)]


def test_sweep_settings_fixed_size():
    config = TimingConfig(n=5, m=2, k=2, step_n=0, step_m=0)
    assert sweep_settings(config) == [(5, 2), (5, 2)]


def test_time_call_returns_value_and_elapsed():
    value, elapsed = time_call(sum, [1, 2, 3])
    assert value == 6
    assert elapsed >= 0.0


@pytest.mark.parametrize(
    "overrides",
    [{"n": 0}, {"m": -1}, {"k": 0}, {"runs": 0}, {"step_n": -1}],
)
def test_invalid_config(overrides):
    params = {"n": 4, "m": 3}
    params.update(overrides)
    with pytest.raises(ValueError):
        measure_execution_time(TimingConfig(**params, show_progress=False))


def test_measure_records_per_setting():
    config = TimingConfig(
        n=3, m=4, k=3, step_n=1, step_m=2, runs=2, seed=5, show_progress=False
    )
    records = measure_execution_time(config)

    assert [(r.n, r.m) for r in records] == [(3, 4), (4, 6), (5, 8)]
    for r in records:
        assert r.runs == 2
        assert r.heuristic_time >= 0.0
        assert r.brute_force_time is not None
        assert r.brute_force_score <= r.heuristic_score
        assert 0 <= r.optimal_runs <= 2


def test_measure_is_reproducible_with_seed():
    config = TimingConfig(n=4, m=5, k=2, runs=3, seed=11, show_progress=False)
    first = [(r.heuristic_score, r.brute_force_score) for r in measure_execution_time(config)]
    second = [(r.heuristic_score, r.brute_force_score) for r in measure_execution_time(config)]
    assert first == second


def test_measure_skips_brute_force_above_limit():
    config = TimingConfig(
        n=3, m=2, k=2, step_n=3, runs=1, seed=1,
        brute_force_max_length=4, show_progress=False,
    )
    records = measure_execution_time(config)
    assert records[0].brute_force_time is not None
    assert records[1].n == 6
    assert records[1].brute_force_time is None
    assert records[1].brute_force_score is None
    assert records[1].optimal_runs is None


def test_record_to_dict():
    config = TimingConfig(n=2, m=2, k=1, runs=1, seed=0, show_progress=False)
    record = measure_execution_time(config)[0]
    data = record.to_dict()
    assert data["n"] == 2
    assert set(data) >= {"heuristic_time", "brute_force_time", "optimal_runs"}


def test_measure_with_progress_bar():
    config = TimingConfig(n=2, m=1, k=2, runs=1, seed=0, show_progress=True)
    assert len(measure_execution_time(config)) == 2
