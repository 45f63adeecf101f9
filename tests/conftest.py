"""Shared fixtures: throwaway component projects with a real resolver and loader.

Run pytest from this project's root; pythonpath and import mode in
pyproject.toml keep imports scoped to src/.
"""

from pathlib import Path
from typing import Callable, Optional
from unittest.mock import MagicMock

import pytest

from component_property_linter.domain.config import ConfigurationLoader
from component_property_linter.domain.entities import SourceFile, Violation
from component_property_linter.domain.properties import BaseProperty
from component_property_linter.infrastructure.gateways.filesystem_gateway import FileSystemGateway
from component_property_linter.infrastructure.gateways.tree_sitter_gateway import TreeSitterGateway
from component_property_linter.use_cases.run_properties import PropertyRunContext


class ProjectSandbox:
    """A component project under tmp_path. Compiler diagnostics are mocked."""

    def __init__(self, root: Path) -> None:
        self.root = root
        self.config: dict[str, object] = {}
        self.diagnostics_adapter = MagicMock()
        self.diagnostics_adapter.gather_diagnostics.return_value = {}
        self._context: Optional[PropertyRunContext] = None

    def write(self, relative: str, text: str) -> Path:
        path = self.root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    def context(self, **config: object) -> PropertyRunContext:
        """A fresh run context; keyword arguments become config keys."""
        merged = {**self.config, **config, "project_root": str(self.root)}
        loader_config = ConfigurationLoader(merged)
        resolver = FileSystemGateway(str(self.root))
        loader = TreeSitterGateway(
            project_root=str(self.root),
            resolver=resolver,
            diagnostics_adapter=self.diagnostics_adapter,
            tsconfig_path=loader_config.tsconfig_path,
        )
        self._context = PropertyRunContext(config=loader_config, loader=loader, resolver=resolver)
        return self._context

    def load(self, relative: str) -> SourceFile:
        context = self._context or self.context()
        return context.loader.load(str(self.root / relative))

    def check(self, prop: BaseProperty, relative: str, text: Optional[str] = None) -> list[Violation]:
        """Write text (when given) to relative and run one property over it."""
        if text is not None:
            self.write(relative, text)
        context = self.context()
        path = str(self.root / relative)
        if not prop.requires_tree:
            return prop.check_path(path, context)
        return prop.check(context.loader.load(path), context)


@pytest.fixture
def project_factory(tmp_path: Path) -> Callable[..., ProjectSandbox]:
    """Build a ProjectSandbox, optionally pre-populated with {relative_path: text}."""

    def build(files: Optional[dict[str, str]] = None, **config: object) -> ProjectSandbox:
        sandbox = ProjectSandbox(tmp_path)
        sandbox.config.update(config)
        for relative, text in (files or {}).items():
            sandbox.write(relative, text)
        return sandbox

    return build


@pytest.fixture
def project(project_factory: Callable[..., ProjectSandbox]) -> ProjectSandbox:
    """An empty sandbox with default configuration."""
    return project_factory()
