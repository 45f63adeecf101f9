"""Component structure properties (P002, P003, P004)."""

import os
from typing import TYPE_CHECKING

from component_property_linter.domain.constants import (
    JSX_MAX_REPEATS,
    JSX_MIN_PATTERN_LENGTH,
    JSX_PATTERN_PREVIEW_LENGTH,
)
from component_property_linter.domain.detectors import HeuristicDetectors
from component_property_linter.domain.entities import SourceFile, Violation
from component_property_linter.domain.navigator import SyntaxNavigator
from component_property_linter.domain.properties.base import BaseProperty

if TYPE_CHECKING:
    from component_property_linter.domain.protocols import CheckContext


class ComponentSizeProperty(BaseProperty):
    """Large component files must be split into sub-components."""

    code: str = "P002"
    name: str = "Component Size"
    symbol: str = "component-size"
    description: str = (
        "A component file above the significant-line threshold must define more "
        "than one top-level function or arrow-function component."
    )
    default_pattern: str = "components/**/*.{tsx,ts}"

    def check(self, source_file: SourceFile, context: "CheckContext") -> list[Violation]:
        line_count = HeuristicDetectors.count_significant_lines(source_file.text)
        if line_count <= context.config.max_component_lines:
            return []

        components = SyntaxNavigator.top_level_functions(source_file.root)
        if len(components) > 1:
            return []
        return [
            self.violation(
                source_file,
                1,
                f"{line_count} lines (should extract sub-components)",
                lines=line_count,
                components=len(components),
            )
        ]


class JsxReusabilityProperty(BaseProperty):
    """JSX structures repeated more than twice in a file must be extracted."""

    code: str = "P003"
    name: str = "JSX Reusability"
    symbol: str = "jsx-reusability"
    description: str = (
        "A normalized JSX pattern (expressions, numbers and strings replaced) "
        "may appear at most twice per file."
    )

    def check(self, source_file: SourceFile, context: "CheckContext") -> list[Violation]:
        # pattern -> [count, first line]
        occurrences: dict[str, list[int]] = {}
        for element in SyntaxNavigator.jsx_elements(source_file.root):
            text = SyntaxNavigator.text(element)
            if len(text) < JSX_MIN_PATTERN_LENGTH:
                continue
            pattern = HeuristicDetectors.normalize_jsx_pattern(text)
            line = SyntaxNavigator.start_line(element)
            seen = occurrences.setdefault(pattern, [0, line])
            seen[0] += 1
            seen[1] = min(seen[1], line)

        violations: list[Violation] = []
        for pattern, (count, first_line) in occurrences.items():
            if count <= JSX_MAX_REPEATS:
                continue
            preview = pattern[:JSX_PATTERN_PREVIEW_LENGTH] + "..."
            violations.append(
                self.violation(
                    source_file,
                    first_line,
                    f"Pattern appears {count} times: {preview}",
                    pattern=preview,
                    count=count,
                )
            )
        return violations


class DirectoryOrganizationProperty(BaseProperty):
    """Nested component files must live in a known feature directory."""

    code: str = "P004"
    name: str = "Directory Organization"
    symbol: str = "directory-organization"
    description: str = (
        "The first directory under the components root must be a recognised "
        "feature category; root-level component files are exempt."
    )
    default_pattern: str = "components/**/*.{tsx,ts}"
    requires_tree: bool = False

    def check_path(self, path: str, context: "CheckContext") -> list[Violation]:
        components_root = os.path.join(context.config.project_root, context.config.components_dir)
        parts = os.path.relpath(path, components_root).split(os.sep)
        if len(parts) == 1:
            return []

        directory = parts[0]
        if directory in context.config.valid_directories:
            return []
        return [
            self.violation(
                context.resolver.relative_path(path),
                1,
                f"Invalid directory '{directory}'",
                directory=directory,
            )
        ]
