"""CLI entry points for propcheck - Thin Controller using Typer."""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

import typer
from rich.console import Console
from rich.table import Table

from component_property_linter.domain.config import ConfigurationLoader
from component_property_linter.domain.constants import PROPCHECK_BANNER
from component_property_linter.domain.errors import ConfigurationError, ResolutionError
from component_property_linter.domain.properties import PropertyRegistry
from component_property_linter.domain.protocols import (
    ConfigFileLoaderProtocol,
    PropertyReporter,
    TelemetryPort,
)
from component_property_linter.interface.telemetry import ProjectTelemetry
from component_property_linter.use_cases.run_properties import (
    PropertyRunContext,
    RunPropertiesUseCase,
)

EXIT_PASSED = 0
EXIT_FAILED = 1
EXIT_USAGE = 2


@dataclass(frozen=True)
class CLIDependencies:
    """Explicit dependencies for the CLI. All dependencies injected at composition root."""

    config_file_loader: ConfigFileLoaderProtocol
    telemetry: TelemetryPort
    registry: PropertyRegistry
    reporters: dict[str, PropertyReporter]
    context_factory: Callable[[ConfigurationLoader, bool], PropertyRunContext]


class CLIAppFactory:
    """Creates the Typer app."""

    @staticmethod
    def load_configuration(
        deps: CLIDependencies, path: Optional[Path], config: Optional[Path]
    ) -> ConfigurationLoader:
        """Read the config table; an explicit PATH overrides its project_root."""
        config_dict, config_path = deps.config_file_loader.load(
            str(config) if config else None,
            start_dir=str(path) if path else None,
        )
        loader = ConfigurationLoader(config_dict, config_path)
        if path is not None:
            loader = loader.with_project_root(str(path))
        return loader

    @staticmethod
    def create_app(deps: CLIDependencies) -> typer.Typer:
        """Create the Typer app with explicitly injected dependencies."""
        app = typer.Typer(
            name="propcheck",
            help=f"{PROPCHECK_BANNER}\nArchitectural property checks for TypeScript/React component trees",
            add_completion=False,
            no_args_is_help=True,
        )

        @app.command()
        def check(
            path: Optional[Path] = typer.Argument(None, help="Project root (default: from config, else current directory)"),  # noqa: B008
            properties: Optional[list[str]] = typer.Option(  # noqa: B008
                None, "--property", "-p", help="Property code or symbol to run (repeatable; default: all enabled)"),
            output_format: str = typer.Option("text", "--format", "-f", help="Output format: text or json"),
            jobs: Optional[int] = typer.Option(None, "--jobs", "-j", min=1, help="Worker threads per property"),
            config: Optional[Path] = typer.Option(None, "--config", help="pyproject.toml to read [tool.component-properties] from"),  # noqa: B008
            verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
            quiet: bool = typer.Option(False, "--quiet", "-q", help="Only print the report"),
            log_raw: bool = typer.Option(False, "--log-raw", help="Write raw compiler output to .propcheck/logs/"),
        ) -> None:
            """Run property checks; exit 0 if all hold, 1 if any fails, 2 on usage errors."""
            ProjectTelemetry.configure_logging(verbose)
            deps.telemetry.set_quiet(quiet)
            reporter = deps.reporters.get(output_format)
            if reporter is None:
                deps.telemetry.error(
                    f"Unknown format '{output_format}'. Choose from: {', '.join(sorted(deps.reporters))}")
                raise typer.Exit(EXIT_USAGE)

            deps.telemetry.handshake()
            try:
                loader = CLIAppFactory.load_configuration(deps, path, config)
                context = deps.context_factory(loader, log_raw)
                use_case = RunPropertiesUseCase(context, deps.telemetry, registry=deps.registry, jobs=jobs)
                summary = use_case.execute(properties or None)
            except (ConfigurationError, ResolutionError) as e:
                deps.telemetry.error(str(e))
                raise typer.Exit(EXIT_USAGE) from e
            except KeyError as e:
                deps.telemetry.error(str(e.args[0]) if e.args else "Unknown property")
                raise typer.Exit(EXIT_USAGE) from e

            reporter.report_run(summary)
            raise typer.Exit(EXIT_PASSED if summary.passed else EXIT_FAILED)

        @app.command("list")
        def list_properties() -> None:
            """List every property with its code, symbol and default file pattern."""
            table = Table(show_header=True, border_style="dim")
            table.add_column("Code", style="cyan", no_wrap=True)
            table.add_column("Symbol", no_wrap=True)
            table.add_column("Pattern", style="green", no_wrap=True)
            table.add_column("Description")
            for prop in deps.registry.properties:
                table.add_row(prop.code, prop.symbol, prop.default_pattern, prop.description)
            Console().print(table)

        return app
