"""Tree-sitter Gateway - Infrastructure implementation of SourceLoaderProtocol."""

import logging
import threading
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Union

import tree_sitter_typescript
from tree_sitter import Language, Parser

from component_property_linter.domain.entities import Diagnostic, SourceFile
from component_property_linter.domain.errors import CompilerUnavailableError, ParseError
from component_property_linter.domain.navigator import SyntaxNavigator
from component_property_linter.domain.protocols import SourceLoaderProtocol
from component_property_linter.domain.tsconfig import TsConfig
from component_property_linter.infrastructure.tsconfig_loader import TsConfigLoader

if TYPE_CHECKING:
    from component_property_linter.domain.protocols import (
        DiagnosticsAdapterProtocol,
        FileSetResolverProtocol,
    )

logger = logging.getLogger(__name__)

TSX_LANGUAGE = Language(tree_sitter_typescript.language_tsx())
TYPESCRIPT_LANGUAGE = Language(tree_sitter_typescript.language_typescript())

# .ts cannot contain JSX and `<T>x` casts only parse with the plain grammar.
_TYPESCRIPT_SUFFIXES = frozenset({".ts", ".mts", ".cts"})


class ParseCache:
    """Per-run memo of load outcomes, keyed by absolute path. Thread-safe."""

    def __init__(self) -> None:
        self._entries: dict[str, Union[SourceFile, ParseError]] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[Union[SourceFile, ParseError]]:
        with self._lock:
            return self._entries.get(key)

    def put(self, key: str, entry: Union[SourceFile, ParseError]) -> Union[SourceFile, ParseError]:
        """Store entry unless another thread got there first; return the winner."""
        with self._lock:
            return self._entries.setdefault(key, entry)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


class TreeSitterGateway(SourceLoaderProtocol):
    """
    Parses TypeScript/TSX with tree-sitter and serves compiler diagnostics.

    One instance lives for one run. Parsed files (and parse failures) are
    cached, so every property sees the same tree and the same ParseError
    for a given file. The compiler runs at most once, on first demand.
    """

    def __init__(
        self,
        project_root: str,
        resolver: "FileSetResolverProtocol",
        diagnostics_adapter: "DiagnosticsAdapterProtocol",
        tsconfig_path: Optional[str] = None,
        tsconfig_loader: Optional[TsConfigLoader] = None,
        cache: Optional[ParseCache] = None,
    ) -> None:
        self._project_root = str(Path(project_root).resolve())
        self._resolver = resolver
        self._diagnostics_adapter = diagnostics_adapter
        self._tsconfig_path = tsconfig_path or str(Path(self._project_root, "tsconfig.json"))
        self._tsconfig_loader = tsconfig_loader or TsConfigLoader()
        self._cache = cache if cache is not None else ParseCache()
        self._tsconfig: Optional[TsConfig] = None
        self._diagnostics: Optional[dict[str, list[Diagnostic]]] = None
        self._compiler_error: Optional[CompilerUnavailableError] = None
        self._lock = threading.Lock()

    @property
    def tsconfig(self) -> TsConfig:
        """Project compiler configuration, read on first access."""
        with self._lock:
            if self._tsconfig is None:
                self._tsconfig = self._tsconfig_loader.load(self._tsconfig_path)
            return self._tsconfig

    @staticmethod
    def language_for(path: str) -> Language:
        """Grammar for a file: plain TypeScript for .ts, TSX for everything else."""
        if Path(path).suffix.lower() in _TYPESCRIPT_SUFFIXES:
            return TYPESCRIPT_LANGUAGE
        return TSX_LANGUAGE

    def load(self, path: str) -> SourceFile:
        """Parse path (or return the cached tree). Raises ParseError."""
        key = str(Path(path).resolve())
        entry = self._cache.get(key)
        if entry is None:
            entry = self._cache.put(key, self._parse(key))
        else:
            logger.debug("Cache hit for %s", key)
        if isinstance(entry, ParseError):
            raise entry
        return entry

    def _parse(self, key: str) -> Union[SourceFile, ParseError]:
        relative = self._resolver.relative_path(key)
        try:
            data = Path(key).read_bytes()
            text = data.decode("utf-8")
        except OSError as e:
            return self._failed(ParseError(relative, f"cannot read file: {e.strerror or e}"))
        except UnicodeDecodeError as e:
            return self._failed(ParseError(relative, f"not valid UTF-8: {e.reason}"))

        tree = Parser(self.language_for(key)).parse(data)
        error_node = SyntaxNavigator.first_error(tree.root_node)
        if error_node is not None:
            row, column = error_node.start_point
            detail = "missing " + error_node.type if error_node.is_missing else "syntax error"
            return self._failed(ParseError(relative, detail, line=row + 1, column=column + 1))

        logger.debug("Parsed %s", relative)
        return SourceFile(path=key, relative_path=relative, text=text, tree=tree)

    @staticmethod
    def _failed(error: ParseError) -> ParseError:
        logger.warning("Parse error: %s", error)
        return error

    def diagnostics(self, path: str) -> list[Diagnostic]:
        """Compiler diagnostics for path. Raises CompilerUnavailableError."""
        by_file = self._project_diagnostics()
        return list(by_file.get(str(Path(path).resolve()), []))

    def _project_diagnostics(self) -> dict[str, list[Diagnostic]]:
        tsconfig = self.tsconfig
        with self._lock:
            if self._compiler_error is not None:
                raise self._compiler_error
            if self._diagnostics is None:
                self._warn_disabled_options(tsconfig)
                try:
                    self._diagnostics = self._diagnostics_adapter.gather_diagnostics(
                        self._project_root, self._tsconfig_path
                    )
                except CompilerUnavailableError as e:
                    self._compiler_error = e
                    raise
                logger.debug(
                    "Compiler reported diagnostics for %d file(s)", len(self._diagnostics)
                )
            return self._diagnostics

    @staticmethod
    def _warn_disabled_options(tsconfig: TsConfig) -> None:
        if not tsconfig.exists:
            return
        if not tsconfig.option_enabled("noImplicitAny", strict_family=True):
            logger.warning("noImplicitAny is off in %s; implicit any will not be reported.", tsconfig.path)
        if not (
            tsconfig.option_enabled("noUnusedLocals") or tsconfig.option_enabled("noUnusedParameters")
        ):
            logger.warning(
                "noUnusedLocals/noUnusedParameters are off in %s; unused code will not be reported.",
                tsconfig.path,
            )
