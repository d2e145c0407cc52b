"""Command Line Interface (CLI) Presentation Layer

Key Components:
    app.py: Typer application factory and process entry point
    commands.py: CLI command registration and implementation

Usage::

    wildcsp solve dataset.txt
    wildcsp generate -n 8 -m 5 -i
    wildcsp measure -n 10 -m 20 -k 5 -r 3
"""

from .app import create_app, run
from .commands import register_commands

__all__ = ["create_app", "register_commands", "run"]
