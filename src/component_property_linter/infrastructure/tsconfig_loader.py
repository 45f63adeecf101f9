"""Load tsconfig.json (JSON with comments). Infrastructure I/O only."""

import json
import logging
import re
from pathlib import Path
from typing import Optional

from component_property_linter.domain.errors import ConfigurationError
from component_property_linter.domain.tsconfig import TsConfig

logger = logging.getLogger(__name__)

_TRAILING_COMMA_RE = re.compile(r",(\s*[}\]])")
_MAX_EXTENDS_DEPTH = 10


class TsConfigLoader:
    """
    Reads a tsconfig and its ``extends`` chain into a TsConfig.

    A missing tsconfig is not an error: the run proceeds with an empty
    configuration and compiler-backed properties report the compiler's view.
    """

    @staticmethod
    def strip_comments(text: str) -> str:
        """Remove // and /* */ comments outside string literals, then trailing commas."""
        out: list[str] = []
        i = 0
        length = len(text)
        in_string = False
        while i < length:
            char = text[i]
            if in_string:
                out.append(char)
                if char == "\\" and i + 1 < length:
                    out.append(text[i + 1])
                    i += 2
                    continue
                if char == '"':
                    in_string = False
                i += 1
                continue
            if char == '"':
                in_string = True
                out.append(char)
                i += 1
            elif text.startswith("//", i):
                end = text.find("\n", i)
                i = length if end == -1 else end
            elif text.startswith("/*", i):
                end = text.find("*/", i + 2)
                i = length if end == -1 else end + 2
            else:
                out.append(char)
                i += 1
        return _TRAILING_COMMA_RE.sub(r"\1", "".join(out))

    def load(self, path: str) -> TsConfig:
        """Load path; returns an empty TsConfig when it does not exist."""
        config_path = Path(path)
        if not config_path.is_file():
            logger.warning("No tsconfig found at %s; using compiler defaults.", config_path)
            return TsConfig(path=None)

        compiler_options = self._load_options(config_path, depth=0)
        raw_paths = compiler_options.get("paths", {})
        paths: dict[str, tuple[str, ...]] = {}
        if isinstance(raw_paths, dict):
            for alias, targets in raw_paths.items():
                if isinstance(targets, list):
                    paths[str(alias)] = tuple(str(t) for t in targets)
        logger.debug("Loaded %s (%d compiler option(s), %d path alias(es))",
                     config_path, len(compiler_options), len(paths))
        return TsConfig(path=str(config_path.resolve()), compiler_options=compiler_options, paths=paths)

    def _load_options(self, config_path: Path, depth: int) -> dict[str, object]:
        if depth > _MAX_EXTENDS_DEPTH:
            raise ConfigurationError(f"tsconfig 'extends' chain too deep at {config_path}")
        try:
            data = json.loads(self.strip_comments(config_path.read_text(encoding="utf-8")))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise ConfigurationError(f"Cannot read {config_path}: {exc}") from exc
        if not isinstance(data, dict):
            raise ConfigurationError(f"{config_path} must contain a JSON object")

        options: dict[str, object] = {}
        parent = self._resolve_extends(config_path, data.get("extends"))
        if parent is not None:
            options.update(self._load_options(parent, depth + 1))
        own = data.get("compilerOptions", {})
        if isinstance(own, dict):
            options.update(own)
        return options

    @staticmethod
    def _resolve_extends(config_path: Path, extends: object) -> Optional[Path]:
        # Package-style extends (e.g. "@tsconfig/next") are left to the compiler.
        if not isinstance(extends, str) or not extends.startswith("."):
            if extends:
                logger.debug("Not following non-relative extends %r", extends)
            return None
        candidate = (config_path.parent / extends).resolve()
        if candidate.suffix != ".json":
            candidate = candidate.with_name(candidate.name + ".json")
        if not candidate.is_file():
            logger.warning("tsconfig extends target %s not found", candidate)
            return None
        return candidate
