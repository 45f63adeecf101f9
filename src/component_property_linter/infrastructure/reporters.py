"""Reporter implementations - terminal (rich) and JSON."""

import json
import sys
from typing import TYPE_CHECKING, Optional, TextIO

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from component_property_linter.domain.protocols import PropertyReporter
from component_property_linter.domain.reporting import PropertyReportFormatter

if TYPE_CHECKING:
    from component_property_linter.domain.entities import PropertyResult, RunSummary


class TerminalPropertyReporter(PropertyReporter):
    """Summary table on stdout; every failing property's full message on stderr."""

    def __init__(self, console: Optional[Console] = None, err_console: Optional[Console] = None) -> None:
        self.console = console or Console()
        self.err_console = err_console or Console(stderr=True, emoji=False)

    def report_result(self, result: "PropertyResult") -> None:
        outcome = PropertyReportFormatter.report(result)
        if outcome.passed and not result.skipped:
            return
        style = "yellow" if outcome.passed else "red"
        header, _, body = outcome.message.partition("\n")
        self.err_console.print(f"[bold {style}]{escape(header)}[/]", highlight=False, emoji=False)
        if body:
            # Paths and messages are user text: no markup, and ":100:" must not become an emoji.
            self.err_console.print(body, markup=False, emoji=False, highlight=False, soft_wrap=True)

    def report_run(self, summary: "RunSummary") -> None:
        for result in summary.results:
            self.report_result(result)

        table = Table(show_header=True, border_style="dim")
        table.add_column("Code", style="cyan", width=5)
        table.add_column("Property")
        table.add_column("Files", justify="right")
        table.add_column("Violations", justify="right")
        table.add_column("Skipped", justify="right")
        table.add_column("Status")
        for result in summary.results:
            if result.error is not None:
                status = "[red]error[/red]"
            elif result.passed:
                status = "[green]pass[/green]"
            else:
                status = "[red]fail[/red]"
            table.add_row(
                result.code,
                result.name,
                str(result.files_checked),
                str(len(result.violations)),
                str(len(result.skipped)),
                status,
            )
        self.console.print(table)

        failed = len(summary.failed)
        if failed:
            self.console.print(
                f"[bold red]{failed} of {len(summary.results)} property check(s) failed[/] "
                f"({summary.total_violations} violation(s))",
                highlight=False,
            )
        else:
            self.console.print(
                f"[bold green]All {len(summary.results)} property check(s) passed[/]",
                highlight=False,
            )


class JsonPropertyReporter(PropertyReporter):
    """Machine-readable run document on stdout."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream or sys.stdout

    def report_result(self, result: "PropertyResult") -> None:
        self.stream.write(json.dumps(result.to_dict(), indent=2) + "\n")

    def report_run(self, summary: "RunSummary") -> None:
        self.stream.write(json.dumps(summary.to_dict(), indent=2) + "\n")
