"""CLI Commands Registration Module

Command implementations of the three operating modes plus algorithm listing:

- ``solve``: read a string set from a file or stdin and run both solvers
- ``generate``: generate a random string set and run both solvers
- ``measure``: time both solvers over a sweep of generator settings
- ``algorithms``: list registered algorithms

``solve`` and ``generate`` accept ``-i`` to trace the heuristic step by step.
"""

import sys
from pathlib import Path
from typing import Any, Dict, Optional

import typer

import algorithms  # noqa: F401  (populates the registry)
from wildcsp.benchmark.timing import TimingConfig, measure_execution_time
from wildcsp.datasets.reader import (
    FILE_ERROR,
    load_string_set,
    read_string_set,
    save_string_set,
)
from wildcsp.datasets.synthetic import generate_string_set_from_params
from wildcsp.domain.algorithms import get_algorithm, global_registry, to_result
from wildcsp.domain.errors import ConfigurationError, DatasetValidationError
from wildcsp.domain.monitoring import LoggingMonitor
from wildcsp.domain.string_set import StringSet
from wildcsp.infrastructure.logging_config import get_logger
from wildcsp.presentation.reports import (
    format_solutions,
    format_string_set,
    format_timing_table,
)
from wildcsp.presentation.trace import TracePrinter
from wildcsp.utils.config import load_settings

command_logger = get_logger("WildCSP.CLI.Commands")

SETTINGS_OPTION_HELP = "YAML settings file (default: config/settings.yaml)"


def _load_settings(settings_path: Optional[Path]) -> Dict[str, Any]:
    try:
        return load_settings(settings_path)
    except ConfigurationError as e:
        typer.echo(f"Configuration error: {e}", err=True)
        raise typer.Exit(1)


def _run_algorithm(name: str, string_set: StringSet, **params):
    algorithm_class = get_algorithm(name)
    algorithm = algorithm_class(
        string_set, monitor=LoggingMonitor(command_logger), **params
    )
    result = algorithm.run()
    if not result["success"]:
        typer.echo(f"Error: {result['error']}", err=True)
        raise typer.Exit(1)
    solution = to_result(result)
    command_logger.info("%s result: %s", name, solution.to_dict())
    return solution


def solve_once(
    string_set: StringSet, interactive: bool, settings: Dict[str, Any]
) -> None:
    """Print the input set and the results of both solvers."""
    typer.echo(format_string_set(string_set))
    typer.echo("")

    algorithm_params = settings.get("algorithms", {})
    heuristic_params = dict(algorithm_params.get("Heuristic", {}))
    if interactive:
        typer.echo("HEURISTIC:")
        heuristic_params["observer"] = TracePrinter.interactive()
    heuristic_result = _run_algorithm("Heuristic", string_set, **heuristic_params)

    max_length = settings["brute_force"]["max_length"]
    if string_set.string_length > max_length:
        command_logger.warning(
            "Brute force skipped: n=%d exceeds limit %d",
            string_set.string_length,
            max_length,
        )
        brute_force_result = (
            f"skipped (n={string_set.string_length} exceeds limit {max_length})"
        )
    else:
        brute_force_params = dict(algorithm_params.get("BruteForce", {}))
        brute_force_params["max_length"] = max_length
        brute_force_result = _run_algorithm(
            "BruteForce", string_set, **brute_force_params
        )

    typer.echo(format_solutions(heuristic_result, brute_force_result))


def register_commands(app: typer.Typer) -> None:
    """Register all CLI commands in the Typer application.

    Args:
        app: Typer application instance to register commands with
    """
    command_logger.info("Registering CLI commands in Typer")

    @app.command()
    def solve(
        file: Optional[Path] = typer.Argument(
            None,
            help="String set file (header line, then one string per line); "
            "stdin if omitted",
        ),
        interactive: bool = typer.Option(
            False, "-i", "--interactive", help="Run heuristic in interactive mode"
        ),
        settings_path: Optional[Path] = typer.Option(
            None, "--settings", help=SETTINGS_OPTION_HELP
        ),
    ):
        """Read a string set and print the results of both solvers."""
        settings = _load_settings(settings_path)
        try:
            if file is None:
                string_set = read_string_set(sys.stdin)
            else:
                string_set = load_string_set(file)
        except DatasetValidationError as e:
            command_logger.error("Invalid input: %s", e)
            typer.echo(FILE_ERROR)
            raise typer.Exit(1)
        except FileNotFoundError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1)

        solve_once(string_set, interactive, settings)

    @app.command()
    def generate(
        length: int = typer.Option(
            ..., "-n", "--length", min=1, help="Length of generated strings"
        ),
        count: int = typer.Option(
            ..., "-m", "--count", min=0, help="Number of generated strings"
        ),
        interactive: bool = typer.Option(
            False, "-i", "--interactive", help="Run heuristic in interactive mode"
        ),
        seed: Optional[int] = typer.Option(None, "--seed", help="Random seed"),
        wildcard_rate: Optional[float] = typer.Option(
            None,
            "--wildcard-rate",
            min=0.0,
            max=1.0,
            help="Probability of '*' per position (default: uniform over 0, 1, *)",
        ),
        output: Optional[Path] = typer.Option(
            None, "-o", "--output", help="Also save the generated set to this file"
        ),
        settings_path: Optional[Path] = typer.Option(
            None, "--settings", help=SETTINGS_OPTION_HELP
        ),
    ):
        """Generate a random string set and print the results of both solvers."""
        settings = _load_settings(settings_path)
        generator = settings["generator"]
        if seed is None:
            seed = generator.get("seed")
        if wildcard_rate is None:
            wildcard_rate = generator.get("wildcard_rate")

        string_set, params = generate_string_set_from_params(
            length, count, wildcard_rate, seed
        )
        command_logger.info("Generated string set: %s", params)
        if output is not None:
            save_string_set(string_set, output)
            typer.echo(f"Saved to {output} (seed: {params['seed']})")

        solve_once(string_set, interactive, settings)

    @app.command()
    def measure(
        length: int = typer.Option(
            ..., "-n", "--length", min=1, help="Initial length of generated strings"
        ),
        count: int = typer.Option(
            ..., "-m", "--count", min=0, help="Initial number of generated strings"
        ),
        settings_count: Optional[int] = typer.Option(
            None, "-k", "--settings-count", min=1, help="Number of generator settings"
        ),
        step_n: Optional[int] = typer.Option(
            None, "--step-n", min=0, help="Increment of the string length"
        ),
        step_m: Optional[int] = typer.Option(
            None, "--step-m", min=0, help="Increment of the number of strings"
        ),
        runs: Optional[int] = typer.Option(
            None, "-r", "--runs", min=1, help="Runs per generator setting"
        ),
        seed: Optional[int] = typer.Option(None, "--seed", help="Random seed"),
        wildcard_rate: Optional[float] = typer.Option(
            None, "--wildcard-rate", min=0.0, max=1.0, help="Probability of '*'"
        ),
        no_progress: bool = typer.Option(
            False, "--no-progress", help="Disable the progress bar"
        ),
        settings_path: Optional[Path] = typer.Option(
            None, "--settings", help=SETTINGS_OPTION_HELP
        ),
    ):
        """Measure execution time of both solvers over generator settings."""
        settings = _load_settings(settings_path)
        benchmark = settings["benchmark"]
        generator = settings["generator"]

        config = TimingConfig(
            n=length,
            m=count,
            k=settings_count if settings_count is not None else benchmark["k"],
            step_n=step_n if step_n is not None else benchmark["step_n"],
            step_m=step_m if step_m is not None else benchmark["step_m"],
            runs=runs if runs is not None else benchmark["runs"],
            wildcard_rate=(
                wildcard_rate
                if wildcard_rate is not None
                else generator.get("wildcard_rate")
            ),
            seed=seed if seed is not None else generator.get("seed"),
            brute_force_max_length=settings["brute_force"]["max_length"],
            show_progress=(
                benchmark["progress"] and not no_progress and sys.stdout.isatty()
            ),
        )

        try:
            records = measure_execution_time(config)
        except ValueError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1)

        typer.echo(format_timing_table(records))

    @app.command(name="algorithms")
    def list_algorithms():
        """List available algorithms."""
        typer.echo("Available algorithms:")
        for name in sorted(global_registry):
            algorithm_class = global_registry[name]
            kind = "exact" if algorithm_class.is_exact else "heuristic"
            typer.echo(f"  - {name} ({kind})")
