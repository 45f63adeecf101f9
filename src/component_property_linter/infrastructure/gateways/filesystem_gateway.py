"""Filesystem Gateway - Infrastructure implementation of FileSetResolverProtocol."""

import logging
import re
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Iterable

from component_property_linter.domain.constants import DEFAULT_IGNORE_PATTERNS
from component_property_linter.domain.entities import FilterOptions
from component_property_linter.domain.errors import ResolutionError
from component_property_linter.domain.protocols import FileSetResolverProtocol

logger = logging.getLogger(__name__)

_BRACE_RE = re.compile(r"\{([^{}]*)\}")


class FileSystemGateway(FileSetResolverProtocol):
    """Resolves glob patterns under a project root using pathlib."""

    def __init__(self, root: str) -> None:
        self._root = Path(root)

    @property
    def root(self) -> str:
        """Absolute resolver root."""
        return str(self._root.resolve())

    @staticmethod
    def expand_braces(pattern: str) -> list[str]:
        """Expand ``{a,b}`` alternatives: ``*.{tsx,ts}`` -> ``*.tsx``, ``*.ts``."""
        match = _BRACE_RE.search(pattern)
        if match is None:
            return [pattern]
        head, tail = pattern[: match.start()], pattern[match.end():]
        expanded: list[str] = []
        for option in match.group(1).split(","):
            expanded.extend(FileSystemGateway.expand_braces(head + option + tail))
        return expanded

    @staticmethod
    def is_ignored(relative: str, patterns: Iterable[str]) -> bool:
        """True if a POSIX relative path matches any ignore glob."""
        for pattern in patterns:
            if fnmatchcase(relative, pattern):
                return True
            if pattern.startswith("**/") and fnmatchcase(relative, pattern[3:]):
                return True
        return False

    def resolve(self, pattern: str) -> list[str]:
        """Absolute paths matching pattern, minus the standard exclusions."""
        return self.resolve_options(FilterOptions(pattern=pattern))

    def resolve_options(self, options: FilterOptions) -> list[str]:
        """Absolute, sorted, de-duplicated paths for options."""
        if not self._root.exists():
            raise ResolutionError(str(self._root), "root path does not exist")
        if not self._root.is_dir():
            raise ResolutionError(str(self._root), "root path is not a directory")

        root = self._root.resolve()
        ignore = (*DEFAULT_IGNORE_PATTERNS, *options.ignore)
        matches: set[str] = set()
        for pattern in self.expand_braces(options.pattern):
            try:
                candidates = list(root.glob(pattern))
            except (OSError, ValueError, NotImplementedError) as exc:
                raise ResolutionError(str(root), f"cannot expand '{pattern}': {exc}") from exc
            for candidate in candidates:
                if not candidate.is_file():
                    continue
                relative = candidate.relative_to(root).as_posix()
                if self.is_ignored(relative, ignore):
                    logger.debug("Ignoring %s", relative)
                    continue
                matches.add(str(candidate))

        resolved = sorted(matches)
        logger.debug("Pattern %s matched %d file(s) under %s", options.pattern, len(resolved), root)
        return resolved

    def relative_path(self, path: str) -> str:
        """Display path relative to the root (POSIX separators), or path unchanged."""
        try:
            return Path(path).resolve().relative_to(self._root.resolve()).as_posix()
        except ValueError:
            return Path(path).as_posix()
