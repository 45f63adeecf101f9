"""Telemetry port implementation: rich console on stderr, mirrored to logging."""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from component_property_linter.domain.protocols import TelemetryPort


class ProjectTelemetry(TelemetryPort):
    """Status line output for the CLI. Reports go to stdout; telemetry never does."""

    def __init__(self, name: str, color: str, welcome: str, console: Optional[Console] = None) -> None:
        self.name = name
        self.color = color
        self.welcome = welcome
        self.quiet = False
        self.console = console or Console(stderr=True, emoji=False)
        # Kept outside the package logger tree so console lines are not echoed twice.
        self.logger = logging.getLogger(f"{name.lower()}.telemetry")
        if not self.logger.handlers:
            self.logger.addHandler(logging.NullHandler())

    @staticmethod
    def configure_logging(verbose: bool = False) -> None:
        """Route library logging through rich; DEBUG when verbose, else WARNING."""
        package_logger = logging.getLogger("component_property_linter")
        for handler in list(package_logger.handlers):
            if isinstance(handler, RichHandler):
                package_logger.removeHandler(handler)
        handler = RichHandler(
            console=Console(stderr=True),
            show_time=False,
            show_path=verbose,
            markup=False,
        )
        package_logger.addHandler(handler)
        package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    def set_quiet(self, quiet: bool) -> None:
        """Suppress handshake and step lines; warnings and errors still print."""
        self.quiet = quiet

    def handshake(self) -> None:
        if self.quiet:
            return
        self.console.print(f"[bold {self.color}]{self.name}[/] {self.welcome}", highlight=False)
        self.logger.info("%s %s", self.name, self.welcome)

    def step(self, message: str) -> None:
        self.logger.info(message)
        if not self.quiet:
            self.console.print(f"[{self.color}]>[/] {escape(message)}", highlight=False, emoji=False)

    def warning(self, message: str) -> None:
        self.logger.warning(message)
        self.console.print(f"[yellow]warning:[/] {escape(message)}", highlight=False, emoji=False)

    def error(self, message: str) -> None:
        self.logger.error(message)
        self.console.print(f"[bold red]error:[/] {escape(message)}", highlight=False, emoji=False)

    def debug(self, message: str) -> None:
        self.logger.debug(message)
