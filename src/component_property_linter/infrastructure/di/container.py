from typing import TYPE_CHECKING, Any, Optional, cast

from component_property_linter.domain.properties import PropertyRegistry
from component_property_linter.infrastructure.adapters.tsc_adapter import TscAdapter
from component_property_linter.infrastructure.config_file_loader import ConfigFileLoader
from component_property_linter.infrastructure.gateways.filesystem_gateway import FileSystemGateway
from component_property_linter.infrastructure.gateways.tree_sitter_gateway import (
    ParseCache,
    TreeSitterGateway,
)
from component_property_linter.infrastructure.reporters import (
    JsonPropertyReporter,
    TerminalPropertyReporter,
)
from component_property_linter.infrastructure.services.subprocess_logging import (
    SubprocessLoggingService,
)
from component_property_linter.infrastructure.tsconfig_loader import TsConfigLoader
from component_property_linter.interface.telemetry import ProjectTelemetry
from component_property_linter.use_cases.run_properties import PropertyRunContext

if TYPE_CHECKING:
    from component_property_linter.domain.config import ConfigurationLoader
    from component_property_linter.domain.protocols import (
        ConfigFileLoaderProtocol,
        PropertyReporter,
        RawLogPort,
        TelemetryPort,
    )


class PropertyLinterContainer:
    """Dependency Injection Container for the component property linter."""

    _instance: Optional["PropertyLinterContainer"] = None

    def __init__(self) -> None:
        self._singletons: dict[str, Any] = {}
        self._register_defaults()

    def _register_defaults(self) -> None:
        """Register default implementations for protocols."""
        self.register_singleton("ConfigFileLoader", ConfigFileLoader())
        self.register_singleton(
            "TelemetryPort", ProjectTelemetry("PROPCHECK", "cyan", "Component property checks"))
        self.register_singleton("PropertyRegistry", PropertyRegistry())
        self.register_singleton("TsConfigLoader", TsConfigLoader())

        # Raw compiler stdout/stderr -> .propcheck/logs/ (only wired in with --log-raw)
        self.register_singleton("SubprocessLoggingService", SubprocessLoggingService())

        self.register_singleton("TerminalPropertyReporter", TerminalPropertyReporter())
        self.register_singleton("JsonPropertyReporter", JsonPropertyReporter())

    def register_singleton(self, key: str, instance: Any) -> None:
        """Register a singleton instance."""
        self._singletons[key] = instance

    def get(self, key: str) -> Any:
        """Retrieve a dependency by key. Prefer explicit get_* methods for type safety."""
        if key in self._singletons:
            return self._singletons[key]
        raise ValueError(f"Dependency '{key}' not registered.")

    def get_telemetry_port(self) -> "TelemetryPort":
        """Return the telemetry/UI port."""
        return cast("TelemetryPort", self.get("TelemetryPort"))

    def get_config_file_loader(self) -> "ConfigFileLoaderProtocol":
        """Return the pyproject.toml loader."""
        return cast("ConfigFileLoaderProtocol", self.get("ConfigFileLoader"))

    def get_property_registry(self) -> PropertyRegistry:
        """Return the property catalogue."""
        return cast(PropertyRegistry, self.get("PropertyRegistry"))

    def get_raw_log_port(self) -> "RawLogPort":
        """Return the raw subprocess log sink."""
        return cast("RawLogPort", self.get("SubprocessLoggingService"))

    def get_reporters(self) -> dict[str, "PropertyReporter"]:
        """Return the reporters keyed by --format value."""
        return {
            "text": cast("PropertyReporter", self.get("TerminalPropertyReporter")),
            "json": cast("PropertyReporter", self.get("JsonPropertyReporter")),
        }

    def create_run_context(self, config: "ConfigurationLoader", log_raw: bool = False) -> PropertyRunContext:
        """
        Wire a fresh resolver and loader for one run.

        Each run gets its own ParseCache and compiler invocation, so nothing
        leaks between runs over different roots.
        """
        project_root = config.project_root
        resolver = FileSystemGateway(project_root)
        tsc_adapter = TscAdapter(
            command=config.tsc_command,
            raw_log_port=self.get_raw_log_port() if log_raw else None,
        )
        loader = TreeSitterGateway(
            project_root=project_root,
            resolver=resolver,
            diagnostics_adapter=tsc_adapter,
            tsconfig_path=config.tsconfig_path,
            tsconfig_loader=cast(TsConfigLoader, self.get("TsConfigLoader")),
            cache=ParseCache(),
        )
        return PropertyRunContext(config=config, loader=loader, resolver=resolver)

    @classmethod
    def get_instance(cls) -> "PropertyLinterContainer":
        """Get or create global container instance."""
        if cls._instance is None:
            cls._instance = PropertyLinterContainer()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Reset the singleton instance (primarily for testing)."""
        cls._instance = None
