"""CLI module for auth0mgmt."""

from .commands import CommandHandler
from .main import cli, main

__all__ = [
    "CommandHandler",
    "cli",
    "main",
]
