"""Turns property results into pass/fail outcomes with readable messages."""

from dataclasses import dataclass

from component_property_linter.domain.entities import PropertyResult


@dataclass(frozen=True)
class ReportOutcome:
    """Binary verdict for one property plus its aggregated message."""
    passed: bool
    message: str


class PropertyReportFormatter:
    """Formats one violation per line as ``path:line: message``."""

    @staticmethod
    def report(result: PropertyResult) -> ReportOutcome:
        """Render a result; the message lists every violation, not just the first."""
        lines: list[str] = []
        if result.passed:
            lines.append(f"{result.name} ({result.code}) passed: {result.files_checked} file(s) checked")
        elif result.error is not None:
            lines.append(f"{result.name} ({result.code}) could not run: {result.error}")
        else:
            lines.append(f"{result.name} ({result.code}) failed: {len(result.violations)} violation(s)")

        lines.extend(violation.format() for violation in result.violations)

        if result.skipped:
            lines.append(f"skipped (parse errors): {len(result.skipped)} file(s)")
            lines.extend(f"  {issue.format()}" for issue in result.skipped)
        return ReportOutcome(passed=result.passed, message="\n".join(lines))
