"""
Execution-time measurement across a sweep of generator settings.

Setting ``i`` (``0 <= i < k``) generates sets of ``m + i * step_m`` strings
of length ``n + i * step_n``. Every run draws a fresh set and times
each solver on it as an opaque unit of work. Brute force is skipped for
settings whose length exceeds ``brute_force_max_length``.

Classes:
    TimingConfig: Sweep parameters.
    TimingRecord: Aggregated measurements for one setting.

Functions:
    sweep_settings(config): The ``(n, m)`` pairs of a sweep.
    time_call(func, *args): Run a callable and measure wall-clock seconds.
    measure_execution_time(config): Run the sweep.
"""

import logging
import random
import statistics
import time
from dataclasses import asdict, dataclass
from typing import Any, Callable, Dict, List, Optional, Tuple

from tqdm import tqdm

from algorithms.brute_force import brute_force
from algorithms.heuristic import heuristic
from wildcsp.datasets.synthetic import generate_string_set
from wildcsp.utils.config import BENCHMARK_DEFAULTS, BRUTE_FORCE_MAX_LENGTH

logger = logging.getLogger(__name__)


@dataclass
class TimingConfig:
    """Parameters of an execution-time sweep."""

    n: int
    m: int
    k: int = BENCHMARK_DEFAULTS["k"]
    step_n: int = BENCHMARK_DEFAULTS["step_n"]
    step_m: int = BENCHMARK_DEFAULTS["step_m"]
    runs: int = BENCHMARK_DEFAULTS["runs"]
    wildcard_rate: Optional[float] = None
    seed: Optional[int] = None
    brute_force_max_length: int = BRUTE_FORCE_MAX_LENGTH
    show_progress: bool = BENCHMARK_DEFAULTS["progress"]

    def validate(self) -> None:
        """
        Raises:
            ValueError: On a parameter outside its domain
        """
        if self.n < 1:
            raise ValueError(f"String length must be positive, got {self.n}")
        if self.m < 0:
            raise ValueError(f"Number of strings must be non-negative, got {self.m}")
        if self.k < 1:
            raise ValueError(f"Number of settings must be positive, got {self.k}")
        if self.runs < 1:
            raise ValueError(f"Number of runs must be positive, got {self.runs}")
        if self.step_n < 0 or self.step_m < 0:
            raise ValueError("Steps must be non-negative")


@dataclass
class TimingRecord:
    """Mean measurements of all runs of one generator setting."""

    n: int
    m: int
    runs: int
    heuristic_time: float
    heuristic_score: float
    brute_force_time: Optional[float] = None
    brute_force_score: Optional[float] = None
    optimal_runs: Optional[int] = None  # runs where the heuristic was optimal

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def sweep_settings(config: TimingConfig) -> List[Tuple[int, int]]:
    """Return the ``(n, m)`` pair of every setting in sweep order."""
    return [
        (config.n + i * config.step_n, config.m + i * config.step_m)
        for i in range(config.k)
    ]


def time_call(func: Callable, *args, **kwargs) -> Tuple[Any, float]:
    """Call ``func`` and return its value with the elapsed seconds."""
    start = time.perf_counter()
    value = func(*args, **kwargs)
    return value, time.perf_counter() - start


def _measure_setting(
    n: int, m: int, config: TimingConfig, rng: random.Random
) -> TimingRecord:
    with_brute_force = n <= config.brute_force_max_length
    if not with_brute_force:
        logger.warning(
            "Skipping brute force for n=%d (limit %d)", n, config.brute_force_max_length
        )

    heuristic_times, heuristic_scores = [], []
    brute_times, brute_scores = [], []
    optimal_runs = 0

    for _ in range(config.runs):
        string_set = generate_string_set(n, m, config.wildcard_rate, rng=rng)

        h_result, h_time = time_call(heuristic, string_set)
        heuristic_times.append(h_time)
        heuristic_scores.append(h_result.score)

        if with_brute_force:
            b_result, b_time = time_call(brute_force, string_set)
            brute_times.append(b_time)
            brute_scores.append(b_result.score)
            if h_result.score == b_result.score:
                optimal_runs += 1

    record = TimingRecord(
        n=n,
        m=m,
        runs=config.runs,
        heuristic_time=statistics.mean(heuristic_times),
        heuristic_score=statistics.mean(heuristic_scores),
    )
    if with_brute_force:
        record.brute_force_time = statistics.mean(brute_times)
        record.brute_force_score = statistics.mean(brute_scores)
        record.optimal_runs = optimal_runs

    logger.info("[TIMING] %s", record.to_dict())
    return record


def measure_execution_time(config: TimingConfig) -> List[TimingRecord]:
    """
    Run the sweep described by ``config``.

    Args:
        config: Sweep parameters (validated here)

    Returns:
        List[TimingRecord]: One record per setting, in sweep order

    Raises:
        ValueError: If ``config`` is invalid
    """
    config.validate()
    rng = random.Random(config.seed)
    settings = sweep_settings(config)
    logger.info(
        "Measuring %d settings x %d runs (seed=%s)", len(settings), config.runs, config.seed
    )

    records = []
    progress_bar = None
    if config.show_progress:
        progress_bar = tqdm(total=len(settings), desc="Measuring settings")

    try:
        for n, m in settings:
            records.append(_measure_setting(n, m, config, rng))
            if progress_bar:
                progress_bar.update(1)
    finally:
        if progress_bar:
            progress_bar.close()

    return records
