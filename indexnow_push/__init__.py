# indexnow_push/__init__.py
"""
indexnow-push package initializer.
Defines package version and exposes CLI.
"""
__version__ = "0.1.0"

# Expose CLI entry point
from .cli import cli as main_cli  # noqa: E402
