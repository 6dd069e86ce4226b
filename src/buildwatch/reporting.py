"""Diagnostic reporting channels.

The resolver never prints directly. Everything user-facing goes through a
Reporter with four channels: verbose, output, warn and error.

Implementations:
- LoggingReporter: routes channels to the buildwatch logger
- ConsoleReporter: prints to a rich console (used by the CLI)
"""

from __future__ import annotations

import logging
from typing import Protocol

from rich.console import Console
from rich.markup import escape

from buildwatch.logging import VERBOSE, get_logger


class Reporter(Protocol):
    """Protocol for the diagnostic channel consumed by the resolver."""

    def verbose(self, message: str) -> None:
        """Report detail useful only when diagnosing problems."""
        ...

    def output(self, message: str) -> None:
        """Report regular output, such as captured evaluator lines."""
        ...

    def warn(self, message: str) -> None:
        """Report a recoverable problem."""
        ...

    def error(self, message: str) -> None:
        """Report a failure."""
        ...


class LoggingReporter:
    """Reporter that writes every channel to a logger."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or get_logger("report")

    def verbose(self, message: str) -> None:
        self._logger.log(VERBOSE, message)

    def output(self, message: str) -> None:
        self._logger.info(message)

    def warn(self, message: str) -> None:
        self._logger.warning(message)

    def error(self, message: str) -> None:
        self._logger.error(message)


class ConsoleReporter:
    """Reporter that prints to a rich console.

    Messages are escaped so paths and evaluator output containing square
    brackets are printed literally instead of being parsed as markup.
    """

    def __init__(self, console: Console | None = None, *, show_verbose: bool = False) -> None:
        self._console = console or Console(stderr=True, highlight=False)
        self._show_verbose = show_verbose

    def verbose(self, message: str) -> None:
        if self._show_verbose:
            self._console.print(f"[dim]{escape(message)}[/dim]")

    def output(self, message: str) -> None:
        self._console.print(escape(message))

    def warn(self, message: str) -> None:
        self._console.print(f"[yellow]warning:[/yellow] {escape(message)}")

    def error(self, message: str) -> None:
        self._console.print(f"[red]error:[/red] {escape(message)}")
