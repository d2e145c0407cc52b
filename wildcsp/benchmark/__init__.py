"""
Execution-time measurement harness.
"""

from .timing import (
    TimingConfig,
    TimingRecord,
    measure_execution_time,
    sweep_settings,
    time_call,
)

__all__ = [
    "TimingConfig",
    "TimingRecord",
    "measure_execution_time",
    "sweep_settings",
    "time_call",
]
