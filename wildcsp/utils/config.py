"""
WildCSP central configuration.

Default parameters, the automation-aware ``safe_input`` helper and the
settings loader.

CONFIGURATION HIERARCHY (highest priority first):
1. Command line options
2. Environment variables (``WILDCSP_*``, usually from ``.env``)
3. YAML settings file (``config/settings.yaml``)
4. Defaults defined in this module

AUTOMATED MODE:
With ``WILDCSP_AUTOMATED=1`` every ``safe_input`` call returns its default
without reading stdin, which keeps interactive traces usable in scripts and
tests.
"""

import copy
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from wildcsp.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)

# =============================================================================
# DEFAULTS
# =============================================================================

DEFAULT_SETTINGS_PATH = Path("config") / "settings.yaml"

# Random string-set generator
GENERATOR_DEFAULTS: Dict[str, Any] = {
    "wildcard_rate": None,  # None = uniform over {0, 1, *}
    "seed": None,  # None = fresh randomness per run
}

# Execution-time measurement sweep
BENCHMARK_DEFAULTS: Dict[str, Any] = {
    "k": 5,  # number of generator settings
    "step_n": 1,  # string length increment per setting
    "step_m": 0,  # string count increment per setting
    "runs": 3,  # solver runs per setting
    "progress": True,  # tqdm bar over the settings
}

# Longest strings the CLI hands to brute force
BRUTE_FORCE_MAX_LENGTH = 24

SETTINGS_DEFAULTS: Dict[str, Any] = {
    "generator": GENERATOR_DEFAULTS,
    "benchmark": BENCHMARK_DEFAULTS,
    "brute_force": {"max_length": BRUTE_FORCE_MAX_LENGTH},
    "algorithms": {},
}

# Environment variable -> (section, key, parser)
_ENV_OVERRIDES = {
    "WILDCSP_SEED": ("generator", "seed", int),
    "WILDCSP_WILDCARD_RATE": ("generator", "wildcard_rate", float),
    "WILDCSP_BENCHMARK_RUNS": ("benchmark", "runs", int),
    "WILDCSP_BRUTE_FORCE_MAX_LENGTH": ("brute_force", "max_length", int),
}


def is_automated() -> bool:
    """Return whether prompts should be answered with their defaults."""
    return os.environ.get("WILDCSP_AUTOMATED") == "1"


def safe_input(prompt: str, default: str = "") -> str:
    """
    Read a line from the user, or return ``default`` in automated mode.

    Args:
        prompt: Text shown to the user
        default: Value returned in automated mode or on empty input

    Returns:
        str: User input or default
    """
    if is_automated():
        logger.debug(
            "Automated mode: using default '%s' for prompt '%s'",
            default,
            prompt.strip(),
        )
        return default

    try:
        print(prompt, end="", flush=True)
        user_input = input().strip()
        return user_input or default

    except (KeyboardInterrupt, EOFError):
        print("\nOperation cancelled by user.")
        logger.info("Execution cancelled by user via Ctrl+C or EOF")
        sys.exit(0)


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _apply_env_overrides(settings: Dict[str, Any]) -> None:
    for var, (section, key, parser) in _ENV_OVERRIDES.items():
        raw = os.getenv(var)
        if raw is None or raw == "":
            continue
        try:
            settings[section][key] = parser(raw)
        except ValueError as e:
            raise ConfigurationError(f"Invalid value for {var}: {raw!r}") from e
        logger.debug("Setting %s.%s overridden by %s", section, key, var)


def load_settings(path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """
    Load settings from YAML and environment on top of the defaults.

    Args:
        path: Settings file. When omitted, ``config/settings.yaml`` is used if
            it exists; an explicitly given path must exist.

    Returns:
        dict: Sections ``generator``, ``benchmark``, ``brute_force`` and
        ``algorithms``

    Raises:
        ConfigurationError: If the file is missing, malformed or has unknown
            sections
    """
    settings = copy.deepcopy(SETTINGS_DEFAULTS)

    if path is None:
        config_path = DEFAULT_SETTINGS_PATH
        explicit = False
    else:
        config_path = Path(path)
        explicit = True

    if config_path.exists():
        logger.info("Loading settings: %s", config_path)
        try:
            with open(config_path, encoding="utf-8") as f:
                loaded = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Error parsing YAML: {e}") from e

        if not isinstance(loaded, dict):
            raise ConfigurationError(
                f"Settings file must contain a mapping: {config_path}"
            )
        unknown = set(loaded) - set(SETTINGS_DEFAULTS)
        if unknown:
            raise ConfigurationError(
                f"Unknown settings sections: {', '.join(sorted(unknown))}"
            )
        settings = _merge(settings, loaded)
    elif explicit:
        raise ConfigurationError(f"Settings file not found: {config_path}")

    _apply_env_overrides(settings)
    return settings
