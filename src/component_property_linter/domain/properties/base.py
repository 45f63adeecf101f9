"""Shared behaviour for property checks."""

from typing import TYPE_CHECKING, Optional, Union

from component_property_linter.domain.entities import SourceFile, Violation
from component_property_linter.domain.errors import ParseError

if TYPE_CHECKING:
    from component_property_linter.domain.protocols import CheckContext


class BaseProperty:
    """
    The fundamental unit of conformance checking.

    Subclasses declare their identity as class attributes and implement
    ``check`` (tree-backed) or ``check_path`` (path/compiler-backed, with
    ``requires_tree = False``). Checks are stateless: one instance may be
    applied to many files, from several threads.
    """

    code: str = ""
    name: str = ""
    symbol: str = ""
    description: str = ""
    default_pattern: str = "components/**/*.tsx"
    requires_tree: bool = True
    parse_errors_are_violations: bool = False

    def check(self, source_file: SourceFile, context: "CheckContext") -> list[Violation]:
        """Return every violation of this property in source_file."""
        raise NotImplementedError(f"{type(self).__name__} does not inspect syntax trees")

    def check_path(self, path: str, context: "CheckContext") -> list[Violation]:
        """Return every violation for a file that needs no parse."""
        raise NotImplementedError(f"{type(self).__name__} requires a parsed source file")

    def violation(
        self,
        target: Union[SourceFile, str],
        line: int,
        message: str,
        **context: object,
    ) -> Violation:
        """Build a violation against a source file or display path."""
        file = target.relative_path if isinstance(target, SourceFile) else target
        return Violation(file=file, line=line, message=message, context=context)

    def parse_failure(self, error: ParseError) -> Optional[Violation]:
        """Violation for a file that failed to parse, or None when such files are only skipped."""
        if not self.parse_errors_are_violations:
            return None
        return self.violation(error.path, error.line, f"Parse error: {error.detail}", column=error.column)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.code} {self.symbol}>"
