"""Error taxonomy for property check runs."""

from typing import Optional


class PropertyCheckError(Exception):
    """Base class for harness failures (never used for violations)."""


class ResolutionError(PropertyCheckError):
    """File-set expansion cannot start. Fatal for the whole run."""

    def __init__(self, root: str, reason: str) -> None:
        super().__init__(f"Cannot resolve files under {root}: {reason}")
        self.root = root
        self.reason = reason


class ParseError(PropertyCheckError):
    """A single source file cannot be read or parsed."""

    def __init__(
        self,
        path: str,
        detail: str,
        line: int = 1,
        column: Optional[int] = None,
    ) -> None:
        location = f"{path}:{line}" if column is None else f"{path}:{line}:{column}"
        super().__init__(f"{location}: {detail}")
        self.path = path
        self.detail = detail
        self.line = line
        self.column = column


class ConfigurationError(PropertyCheckError):
    """Project configuration is malformed or unreadable."""


class CompilerUnavailableError(PropertyCheckError):
    """The TypeScript compiler could not produce diagnostics."""
