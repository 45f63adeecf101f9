"""Load [tool.component-properties] from pyproject.toml. Infrastructure I/O only."""

import logging
import tomllib
from pathlib import Path
from typing import Optional

from component_property_linter.domain.errors import ConfigurationError
from component_property_linter.domain.protocols import ConfigFileLoaderProtocol

logger = logging.getLogger(__name__)

TOOL_TABLE = "component-properties"


class ConfigFileLoader(ConfigFileLoaderProtocol):
    """
    Finds the project's configuration table.

    With no explicit path, walks up from the working directory and uses the
    first pyproject.toml that carries a ``[tool.component-properties]`` table.
    """

    def __init__(self, start_dir: Optional[str] = None) -> None:
        self._start_dir = Path(start_dir) if start_dir else None

    @staticmethod
    def read_table(config_file: Path) -> Optional[dict[str, object]]:
        """The tool table of config_file, or None when it has none."""
        try:
            with config_file.open("rb") as f:
                data = tomllib.load(f)
        except OSError as e:
            raise ConfigurationError(f"Cannot read {config_file}: {e}") from e
        except tomllib.TOMLDecodeError as e:
            raise ConfigurationError(f"Invalid TOML in {config_file}: {e}") from e
        tool_section = data.get("tool", {}) or {}
        table = tool_section.get(TOOL_TABLE)
        if table is None:
            return None
        if not isinstance(table, dict):
            raise ConfigurationError(f"[tool.{TOOL_TABLE}] in {config_file} must be a table")
        return table

    def load(
        self,
        explicit_path: Optional[str] = None,
        start_dir: Optional[str] = None,
    ) -> tuple[dict[str, object], Optional[str]]:
        """Return (config_dict, path of the file it came from). start_dir overrides the search origin."""
        if explicit_path:
            config_file = Path(explicit_path)
            if not config_file.is_file():
                raise ConfigurationError(f"Config file not found: {explicit_path}")
            table = self.read_table(config_file)
            logger.debug("Using configuration from %s", config_file)
            return (table or {}, str(config_file.resolve()))

        origin = Path(start_dir) if start_dir else self._start_dir
        current_path = (origin or Path.cwd()).resolve()
        if current_path.is_file():
            current_path = current_path.parent
        for directory in (current_path, *current_path.parents):
            config_file = directory / "pyproject.toml"
            if not config_file.is_file():
                continue
            table = self.read_table(config_file)
            if table is not None:
                logger.debug("Using configuration from %s", config_file)
                return (table, str(config_file))
        logger.debug("No [tool.%s] table found; using defaults.", TOOL_TABLE)
        return ({}, None)
