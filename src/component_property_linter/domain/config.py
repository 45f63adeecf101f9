"""Configuration loader for property check settings."""

import logging
from pathlib import Path
from typing import Optional

from component_property_linter.domain.constants import (
    DEFAULT_COMPONENTS_DIR,
    DEFAULT_MAX_COMPONENT_LINES,
    DEFAULT_TSC_COMMAND,
    DEFAULT_VALID_DIRECTORIES,
)
from component_property_linter.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)

KNOWN_KEYS: frozenset[str] = frozenset(
    {
        "project_root",
        "tsconfig",
        "components_dir",
        "valid_directories",
        "max_component_lines",
        "ignore",
        "disabled",
        "patterns",
        "tsc_command",
        "jobs",
    }
)


class ConfigurationLoader:
    """
    Typed view over the ``[tool.component-properties]`` table.

    Values are validated eagerly so a malformed configuration fails before any
    file is analysed. ``config_path`` is the file the table came from; relative
    paths are resolved against its directory.
    """

    def __init__(
        self,
        config: Optional[dict[str, object]] = None,
        config_path: Optional[str] = None,
    ) -> None:
        self._config: dict[str, object] = dict(config or {})
        self._config_path = config_path
        self.validate_config(self._config)

    def validate_config(self, config: dict[str, object]) -> None:
        """Validate configuration values."""
        for key in sorted(set(config) - KNOWN_KEYS):
            logger.warning("Configuration Warning: unknown key '%s' ignored.", key)

        for key in ("project_root", "tsconfig", "components_dir"):
            if key in config and not isinstance(config[key], str):
                raise ConfigurationError(f"'{key}' must be a string")
        for key in ("valid_directories", "ignore", "disabled", "tsc_command"):
            value = config.get(key, [])
            if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                raise ConfigurationError(f"'{key}' must be a list of strings")
        if "tsc_command" in config and not config["tsc_command"]:
            raise ConfigurationError("'tsc_command' must not be empty")
        for key in ("max_component_lines", "jobs"):
            value = config.get(key, 1)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ConfigurationError(f"'{key}' must be a positive integer")
        patterns = config.get("patterns", {})
        if not isinstance(patterns, dict) or not all(
            isinstance(k, str) and isinstance(v, str) for k, v in patterns.items()
        ):
            raise ConfigurationError("'patterns' must map property symbols to glob strings")
        for symbol, glob in patterns.items():
            if Path(glob).is_absolute():
                raise ConfigurationError(
                    f"'patterns.{symbol}' must be relative to the project root, got '{glob}'"
                )

    @property
    def config(self) -> dict[str, object]:
        """Return the raw configuration table."""
        return self._config

    @property
    def config_path(self) -> Optional[str]:
        """File the configuration was read from, if any."""
        return self._config_path

    @property
    def project_root(self) -> str:
        """Absolute project root; defaults to the config file's directory, else cwd."""
        base = Path(self._config_path).parent if self._config_path else Path.cwd()
        raw = self._config.get("project_root")
        root = base / str(raw) if isinstance(raw, str) else base
        return str(root.resolve())

    def with_project_root(self, root: str) -> "ConfigurationLoader":
        """Copy of this configuration pointed at another project root."""
        config = dict(self._config)
        config["project_root"] = str(Path(root).resolve())
        return ConfigurationLoader(config, self._config_path)

    @property
    def tsconfig_path(self) -> str:
        """Absolute path of the project's tsconfig."""
        raw = str(self._config.get("tsconfig", "tsconfig.json"))
        return str(Path(self.project_root, raw))

    @property
    def components_dir(self) -> str:
        """Components root, relative to the project root."""
        return str(self._config.get("components_dir", DEFAULT_COMPONENTS_DIR)).strip("/")

    @property
    def valid_directories(self) -> frozenset[str]:
        """Feature directories allowed directly under the components root."""
        return frozenset(self._get_list("valid_directories", DEFAULT_VALID_DIRECTORIES))

    @property
    def max_component_lines(self) -> int:
        """Significant-line threshold above which sub-components are required."""
        return int(self._config.get("max_component_lines", DEFAULT_MAX_COMPONENT_LINES))  # type: ignore[arg-type]

    @property
    def ignore(self) -> tuple[str, ...]:
        """Extra ignore globs, on top of the built-in exclusions."""
        return tuple(self._get_list("ignore", ()))

    @property
    def disabled(self) -> frozenset[str]:
        """Property codes or symbols that must not run."""
        return frozenset(self._get_list("disabled", ()))

    @property
    def tsc_command(self) -> tuple[str, ...]:
        """Command prefix used to invoke the TypeScript compiler."""
        return tuple(self._get_list("tsc_command", DEFAULT_TSC_COMMAND))

    @property
    def jobs(self) -> int:
        """Worker threads used per property."""
        return int(self._config.get("jobs", 1))  # type: ignore[arg-type]

    def pattern_for(self, symbol: str, default: str) -> str:
        """Glob for a property, honouring ``[...patterns]`` overrides."""
        patterns = self._config.get("patterns", {})
        if isinstance(patterns, dict) and symbol in patterns:
            return str(patterns[symbol])
        if self.components_dir != DEFAULT_COMPONENTS_DIR and default.startswith(DEFAULT_COMPONENTS_DIR + "/"):
            return self.components_dir + default[len(DEFAULT_COMPONENTS_DIR):]
        return default

    def is_disabled(self, code: str, symbol: str) -> bool:
        """True if the property was switched off by code or symbol."""
        return code in self.disabled or symbol in self.disabled

    def _get_list(self, key: str, defaults: "tuple[str, ...] | list[str]") -> list[str]:
        raw = self._config.get(key)
        if isinstance(raw, list):
            return [str(item) for item in raw]
        return list(defaults)
