"""
WildCSP algorithms package.

This module initializes the algorithms package and implements the
auto-discovery system for algorithms. All implemented algorithms are
automatically registered in the global registry.

IMPLEMENTED ALGORITHMS:

1. **Heuristic**: incremental majority vote, O(n*m), no optimality guarantee.
2. **BruteForce**: exhaustive search over 2^n candidates, optimal.

USAGE EXAMPLE:
```python
from wildcsp.domain import StringSet, global_registry, to_result

string_set = StringSet.from_strings(["010", "011", "110"])
algorithm = global_registry["BruteForce"](string_set)
print(to_result(algorithm.run()))  # 010 (score: 1)
```

STRUCTURE:
Each algorithm lives in its own subpackage with:
- __init__.py: Main class exposure
- algorithm.py: Wrapper with @register_algorithm decorator
- implementation.py: Algorithm-specific logic
- config.py: Default parameters
"""

import importlib
import logging
import pkgutil
from pathlib import Path

from wildcsp.domain.algorithms import global_registry, register_algorithm

logger = logging.getLogger(__name__)


def _discover_algorithms():
    """Discover and automatically import all algorithms."""
    algorithms_path = Path(__file__).parent

    for _, modname, ispkg in pkgutil.iter_modules([str(algorithms_path)]):
        if ispkg and not modname.startswith("_"):
            try:
                # Import subpackage to activate automatic registration
                importlib.import_module(f"{__name__}.{modname}")
            except ImportError as e:
                logger.warning("Algorithm '%s' could not be loaded: %s", modname, e)


# Execute auto-discovery on import
_discover_algorithms()

__all__ = ["global_registry", "register_algorithm"]
