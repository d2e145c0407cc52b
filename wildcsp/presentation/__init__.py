"""Presentation layer: CLI commands, text reports and the heuristic trace."""
