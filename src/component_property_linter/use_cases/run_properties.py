"""Use Case: Run Properties - resolve, load and check every selected property."""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Optional

from component_property_linter.domain.entities import (
    FileIssue,
    FilterOptions,
    PropertyResult,
    RunSummary,
    Violation,
)
from component_property_linter.domain.errors import CompilerUnavailableError, ParseError
from component_property_linter.domain.properties import PropertyRegistry

if TYPE_CHECKING:
    from component_property_linter.domain.config import ConfigurationLoader
    from component_property_linter.domain.properties import BaseProperty
    from component_property_linter.domain.protocols import (
        FileSetResolverProtocol,
        SourceLoaderProtocol,
        TelemetryPort,
    )


@dataclass(frozen=True)
class PropertyRunContext:
    """The CheckContext handed to every property during one run."""

    config: "ConfigurationLoader"
    loader: "SourceLoaderProtocol"
    resolver: "FileSetResolverProtocol"


@dataclass(frozen=True)
class _FileOutcome:
    violations: tuple[Violation, ...] = ()
    skipped: Optional[FileIssue] = None


class RunPropertiesUseCase:
    """
    Orchestrate property checks over a project.

    ResolutionError propagates and aborts the run. A ParseError skips the
    file for the property at hand. CompilerUnavailableError marks the
    property as unable to run without affecting the others.
    """

    def __init__(
        self,
        context: PropertyRunContext,
        telemetry: "TelemetryPort",
        registry: Optional[PropertyRegistry] = None,
        jobs: Optional[int] = None,
    ) -> None:
        self.context = context
        self.telemetry = telemetry
        self.registry = registry or PropertyRegistry()
        self.jobs = max(1, jobs if jobs is not None else context.config.jobs)

    def select(self, keys: Optional[Iterable[str]] = None) -> list["BaseProperty"]:
        """Properties to run. Explicitly requested ones run even when disabled in config."""
        requested = list(keys or [])
        properties = self.registry.select(requested)
        if requested:
            return properties
        config = self.context.config
        return [prop for prop in properties if not config.is_disabled(prop.code, prop.symbol)]

    def execute(self, keys: Optional[Iterable[str]] = None) -> RunSummary:
        """Run the selected properties (all enabled ones by default) in catalogue order."""
        properties = self.select(keys)
        self.telemetry.step(
            f"Checking {len(properties)} propert{'y' if len(properties) == 1 else 'ies'} "
            f"under {self.context.config.project_root}"
        )
        return RunSummary(results=tuple(self.run_property(prop) for prop in properties))

    def run_property(self, prop: "BaseProperty") -> PropertyResult:
        """Check one property against every file its pattern resolves to."""
        config = self.context.config
        pattern = config.pattern_for(prop.symbol, prop.default_pattern)
        files = self.context.resolver.resolve_options(FilterOptions(pattern=pattern, ignore=config.ignore))
        self.telemetry.step(f"{prop.code} {prop.name}: {len(files)} file(s) matching {pattern}")

        try:
            if self.jobs > 1 and len(files) > 1:
                with ThreadPoolExecutor(max_workers=self.jobs) as executor:
                    outcomes = list(executor.map(lambda path: self._check_file(prop, path), files))
            else:
                outcomes = [self._check_file(prop, path) for path in files]
        except CompilerUnavailableError as e:
            self.telemetry.warning(f"{prop.code} {prop.name} could not run: {e}")
            return PropertyResult(code=prop.code, name=prop.name, error=str(e), files_checked=0)

        violations = sorted(
            (violation for outcome in outcomes for violation in outcome.violations),
            key=Violation.sort_key,
        )
        skipped = sorted(
            (outcome.skipped for outcome in outcomes if outcome.skipped is not None),
            key=lambda issue: (issue.file, issue.line),
        )
        return PropertyResult(
            code=prop.code,
            name=prop.name,
            violations=tuple(violations),
            skipped=tuple(skipped),
            files_checked=len(files) - len(skipped),
        )

    def _check_file(self, prop: "BaseProperty", path: str) -> _FileOutcome:
        if not prop.requires_tree:
            return _FileOutcome(violations=tuple(prop.check_path(path, self.context)))
        try:
            source_file = self.context.loader.load(path)
        except ParseError as e:
            failure = prop.parse_failure(e)
            if failure is not None:
                return _FileOutcome(violations=(failure,))
            self.telemetry.debug(f"{prop.code}: skipping {e.path} ({e.detail})")
            return _FileOutcome(skipped=FileIssue(file=e.path, line=e.line, message=e.detail))
        return _FileOutcome(violations=tuple(prop.check(source_file, self.context)))
