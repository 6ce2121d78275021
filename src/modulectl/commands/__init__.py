"""Subcommand modules for modulectl.

Provides register_commands() which uses deferred imports to keep
``modulectl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from modulectl.commands.docs import docs
    from modulectl.commands.register import register

    cli.add_command(docs)
    cli.add_command(register)
