"""Source parseability meta-property (P000)."""

from typing import TYPE_CHECKING

from component_property_linter.domain.entities import SourceFile, Violation
from component_property_linter.domain.properties.base import BaseProperty

if TYPE_CHECKING:
    from component_property_linter.domain.protocols import CheckContext


class SourceParseabilityProperty(BaseProperty):
    """
    Every component file must parse.

    Other properties skip unparsable files and list them separately; this one
    turns each parse failure into a violation so a broken file fails the run.
    """

    code: str = "P000"
    name: str = "Source Parseability"
    symbol: str = "source-parseability"
    description: str = "Every matched source file must parse without syntax errors."
    default_pattern: str = "components/**/*.{tsx,ts}"
    parse_errors_are_violations: bool = True

    def check(self, source_file: SourceFile, context: "CheckContext") -> list[Violation]:
        return []
