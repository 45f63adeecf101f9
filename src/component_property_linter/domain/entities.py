from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Mapping, Optional

if TYPE_CHECKING:
    from tree_sitter import Tree


@dataclass(frozen=True)
class FilterOptions:
    """Glob pattern plus the ignore list handed to the file set resolver."""
    pattern: str
    ignore: tuple[str, ...] = ()


@dataclass(frozen=True)
class SourceFile:
    """
    A single parsed source artifact.

    Created by the loader on first access and cached for the lifetime of a run.
    The tree is owned by the loader; nodes obtained from it must not outlive
    this object.
    """
    path: str
    relative_path: str
    text: str
    tree: "Tree"

    @property
    def root(self) -> Any:
        """Return the root node of the syntax tree."""
        return self.tree.root_node

    @property
    def lines(self) -> list[str]:
        """Physical lines of the file, split on newline only."""
        return self.text.split("\n")


@dataclass(frozen=True)
class Violation:
    """A single reported instance of a property failing at one location."""
    file: str
    line: int
    message: str
    context: Mapping[str, object] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        if self.line < 1:
            raise ValueError(f"Violation line must be >= 1, got {self.line}")
        # Freeze the context so a violation is immutable once recorded.
        object.__setattr__(self, "context", MappingProxyType(dict(self.context)))

    def format(self) -> str:
        """Render as path:line: message."""
        return f"{self.file}:{self.line}: {self.message}"

    def sort_key(self) -> tuple[str, int]:
        """Ordering used for stable reports: file path, then line."""
        return (self.file, self.line)

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary for serialization."""
        return {
            "file": self.file,
            "line": self.line,
            "message": self.message,
            "context": dict(self.context),
        }


@dataclass(frozen=True)
class FileIssue:
    """A file that could not be analysed (e.g. it failed to parse)."""
    file: str
    line: int
    message: str

    def format(self) -> str:
        """Render as path:line: message."""
        return f"{self.file}:{self.line}: {self.message}"

    def to_dict(self) -> dict[str, object]:
        """Convert to dictionary for serialization."""
        return {"file": self.file, "line": self.line, "message": self.message}


@dataclass(frozen=True)
class Diagnostic:
    """A compiler-reported diagnostic for one file."""
    file: str
    line: int
    message: str
    severity: str = "error"
    code: Optional[str] = None


@dataclass(frozen=True)
class PropertyResult:
    """
    Outcome of one property check over its resolved file set.

    An empty violation list with no error means the property holds for the
    entire file set. Skipped files are surfaced separately and do not, on
    their own, fail the property.
    """
    code: str
    name: str
    violations: tuple[Violation, ...] = ()
    skipped: tuple[FileIssue, ...] = ()
    error: Optional[str] = None
    files_checked: int = 0

    @property
    def passed(self) -> bool:
        """True iff the property holds."""
        return not self.violations and self.error is None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "code": self.code,
            "name": self.name,
            "passed": self.passed,
            "files_checked": self.files_checked,
            "violations": [v.to_dict() for v in self.violations],
            "skipped": [s.to_dict() for s in self.skipped],
            "error": self.error,
        }


@dataclass(frozen=True)
class RunSummary:
    """Every property result produced by one analysis run."""
    results: tuple[PropertyResult, ...] = ()

    @property
    def passed(self) -> bool:
        """True iff every property passed."""
        return all(result.passed for result in self.results)

    @property
    def failed(self) -> list[PropertyResult]:
        """Results that did not pass, in run order."""
        return [result for result in self.results if not result.passed]

    @property
    def total_violations(self) -> int:
        """Violation count across all properties."""
        return sum(len(result.violations) for result in self.results)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "passed": self.passed,
            "total_violations": self.total_violations,
            "results": [result.to_dict() for result in self.results],
        }
