"""Helpers for running properties from a test suite."""

from component_property_linter.domain.entities import PropertyResult
from component_property_linter.domain.reporting import PropertyReportFormatter


def assert_property_holds(result: PropertyResult) -> None:
    """Fail the calling test with every violation of result, if there are any."""
    outcome = PropertyReportFormatter.report(result)
    if not outcome.passed:
        raise AssertionError(outcome.message)
