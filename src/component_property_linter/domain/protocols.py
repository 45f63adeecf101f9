from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    from component_property_linter.domain.config import ConfigurationLoader
    from component_property_linter.domain.entities import (
        Diagnostic,
        FilterOptions,
        PropertyResult,
        RunSummary,
        SourceFile,
        Violation,
    )
    from component_property_linter.domain.errors import ParseError
    from component_property_linter.domain.tsconfig import TsConfig


class FileSetResolverProtocol(Protocol):
    """Expands glob patterns into concrete, stable file lists."""

    def resolve(self, pattern: str) -> list[str]:
        """Absolute paths matching pattern, minus the standard exclusions."""
        ...

    def resolve_options(self, options: "FilterOptions") -> list[str]:
        """Absolute paths matching options.pattern, minus standard and extra exclusions."""
        ...

    def relative_path(self, path: str) -> str:
        """Display path relative to the resolver root."""
        ...


class SourceLoaderProtocol(Protocol):
    """Configuration-aware, caching access to parsed source files."""

    @property
    def tsconfig(self) -> "TsConfig": ...

    def load(self, path: str) -> "SourceFile":
        """Parse path (or return the cached tree). Raises ParseError."""
        ...

    def diagnostics(self, path: str) -> list["Diagnostic"]:
        """Compiler diagnostics for path. Raises CompilerUnavailableError."""
        ...


class DiagnosticsAdapterProtocol(Protocol):
    """Runs the project's compiler and returns diagnostics keyed by absolute path."""

    def gather_diagnostics(self, project_root: str, tsconfig_path: str) -> dict[str, list["Diagnostic"]]: ...


class CheckContext(Protocol):
    """What a property check may consult besides the file itself."""

    config: "ConfigurationLoader"
    loader: SourceLoaderProtocol
    resolver: FileSetResolverProtocol


class PropertyCheck(Protocol):
    """One architectural rule evaluated file by file."""

    code: str
    name: str
    symbol: str
    description: str
    default_pattern: str
    requires_tree: bool

    def check(self, source_file: "SourceFile", context: CheckContext) -> list["Violation"]:
        """Return every violation of this property in source_file."""
        ...

    def check_path(self, path: str, context: CheckContext) -> list["Violation"]:
        """Check a file that does not need a parse (requires_tree is False)."""
        ...

    def parse_failure(self, error: "ParseError") -> Optional["Violation"]:
        """Violation for an unparsable file, or None to skip it."""
        ...


class RawLogPort(Protocol):
    """Sink for raw subprocess output."""

    def log_raw(self, tool: str, stdout: str, stderr: str) -> None: ...


class TelemetryPort(Protocol):
    """Protocol for telemetry/UI updates."""

    def handshake(self) -> None: ...
    def step(self, message: str) -> None: ...
    def warning(self, message: str) -> None: ...
    def error(self, message: str) -> None: ...
    def debug(self, message: str) -> None: ...
    def set_quiet(self, quiet: bool) -> None: ...


class PropertyReporter(Protocol):
    """Renders a run for the user."""

    def report_run(self, summary: "RunSummary") -> None: ...

    def report_result(self, result: "PropertyResult") -> None: ...


class ConfigFileLoaderProtocol(Protocol):
    def load(
        self, explicit_path: Optional[str] = None, start_dir: Optional[str] = None
    ) -> tuple[dict[str, object], Optional[str]]: ...
