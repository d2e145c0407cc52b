"""
Domain: Solver result

Immutable pair of the center string found by a solver and its score. Both
solvers render results the same way so their outputs can be compared side by
side.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class Result:
    """
    Center string and the radius it achieves on the set that produced it.

    Attributes:
        center: Binary center string
        score: Worst-case mismatch count of ``center`` over the set
    """

    center: str
    score: int

    def __post_init__(self) -> None:
        if self.score < 0:
            raise ValueError(f"Score must be non-negative, got {self.score}")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def __str__(self) -> str:
        return f"{self.center} (score: {self.score})"
