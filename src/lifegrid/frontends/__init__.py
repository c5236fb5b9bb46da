"""User interface frontends."""

from .cli import CLILife

__all__ = ["CLILife"]
