"""Shared utilities: configuration defaults and settings loading."""
