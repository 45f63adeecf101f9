"""Rendering properties (P010, P018)."""

import re
from typing import TYPE_CHECKING

from component_property_linter.domain.detectors import HeuristicDetectors
from component_property_linter.domain.entities import SourceFile, Violation
from component_property_linter.domain.navigator import SyntaxNavigator
from component_property_linter.domain.properties.base import BaseProperty

if TYPE_CHECKING:
    from component_property_linter.domain.protocols import CheckContext

_WIDTH_RE = re.compile(r"\bwidth\s*=")
_HEIGHT_RE = re.compile(r"\bheight\s*=")
_FILL_RE = re.compile(r"\bfill\b")


class ServerComponentDefaultProperty(BaseProperty):
    """Components stay server components unless they need the browser."""

    code: str = "P010"
    name: str = "Server Component Default"
    symbol: str = "server-component-default"
    description: str = (
        "A file with the client directive must use hooks, event handlers or "
        "browser APIs."
    )

    def check(self, source_file: SourceFile, context: "CheckContext") -> list[Violation]:
        if not HeuristicDetectors.has_client_directive(source_file):
            return []

        text = source_file.text
        if (
            HeuristicDetectors.uses_hooks(text)
            or HeuristicDetectors.has_event_handlers(text)
            or HeuristicDetectors.uses_browser_apis(text)
        ):
            return []
        return [self.violation(source_file, 1, "Has 'use client' but no interactivity")]


class NextImageUsageProperty(BaseProperty):
    """Images go through the framework Image component with explicit sizing."""

    code: str = "P018"
    name: str = "Next.js Image Usage"
    symbol: str = "nextjs-image-usage"
    description: str = (
        "Native <img> tags are not allowed; <Image> needs width and height, "
        "or fill."
    )

    def check(self, source_file: SourceFile, context: "CheckContext") -> list[Violation]:
        violations: list[Violation] = []
        for tag in SyntaxNavigator.jsx_tags(source_file.root):
            tag_name = SyntaxNavigator.jsx_tag_name(tag)
            line = SyntaxNavigator.start_line(tag)

            if tag_name == "img":
                violations.append(
                    self.violation(source_file, line, "Using native <img> instead of Next.js Image")
                )
            elif tag_name == "Image":
                text = SyntaxNavigator.text(tag)
                has_size = bool(_WIDTH_RE.search(text)) and bool(_HEIGHT_RE.search(text))
                if not _FILL_RE.search(text) and not has_size:
                    violations.append(
                        self.violation(
                            source_file, line, "Image component missing width/height or fill prop"
                        )
                    )
        return violations
