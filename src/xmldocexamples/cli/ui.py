"""User interface abstractions for the example extraction command line tool."""

from __future__ import annotations

from typing import Protocol

import click


class UserInterface(Protocol):
    """Protocol describing the required console IO operations."""

    def echo(self, message: str = "", *, nl: bool = True) -> None:
        """Write a message to the console using Click semantics."""


class ClickUserInterface:
    """Default :mod:`click`-backed implementation of :class:`UserInterface`."""

    def echo(self, message: str = "", *, nl: bool = True) -> None:
        click.echo(message, nl=nl)


__all__ = ["UserInterface", "ClickUserInterface"]
