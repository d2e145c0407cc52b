"""Typer application factory and process entry point.

``run`` is what the ``wildcsp`` console script and ``main.py`` call: it loads
``.env``, initializes logging, then dispatches to the Typer app. Tests build
the app with ``create_app`` and drive it through ``typer.testing.CliRunner``.
"""

import sys
from typing import List, Optional

import typer
from dotenv import load_dotenv

from wildcsp.infrastructure.logging_config import LoggerConfig, get_logger
from wildcsp.presentation.cli.commands import register_commands

logger = get_logger("WildCSP.Main")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _set_log_level(log_level: Optional[str]) -> None:
    if log_level is None:
        return
    level = log_level.upper()
    if level not in LOG_LEVELS:
        raise typer.BadParameter(
            f"must be one of {', '.join(LOG_LEVELS)}", param_hint="--log-level"
        )
    LoggerConfig.set_level(level)
    logger.info("Log level set to %s", LoggerConfig.get_level())


def create_app() -> typer.Typer:
    app = typer.Typer(
        name="wildcsp",
        help="WildCSP - Closest string over {0, 1, *} with wildcard-aware distance",
        add_completion=False,
        no_args_is_help=True,
        rich_markup_mode=None,
    )

    @app.callback()
    def main_callback(
        log_level: Optional[str] = typer.Option(
            None, "--log-level", help="Override LOG_LEVEL for this run"
        ),
    ):
        _set_log_level(log_level)

    register_commands(app)
    return app


def _bootstrap() -> None:
    load_dotenv(override=False)
    if not LoggerConfig.is_initialized():
        LoggerConfig.initialize()
        logger.info(
            "Logging system initialized successfully (level %s)",
            LoggerConfig.get_level(),
        )


def run(args: Optional[List[str]] = None) -> None:
    """Programmatic entrypoint.

    Args:
        args: Command arguments; ``sys.argv[1:]`` when None

    Raises:
        SystemExit: With the command's exit code
    """
    if args is None:
        args = sys.argv[1:]

    _bootstrap()
    logger.info("Entry point started with arguments: %s", args)
    try:
        app = create_app()
        app(args=args, prog_name="wildcsp")
    except KeyboardInterrupt:
        print("\nOperation cancelled by user (Ctrl+C)")
        logger.warning("Operation cancelled by user (Ctrl+C)")
        sys.exit(0)
    except SystemExit:
        logger.debug("SystemExit caught - propagating")
        raise
    except Exception as e:
        print(f"Unexpected error: {e}")
        logger.error("Unexpected error in execution: %s", e, exc_info=True)
        sys.exit(1)
