"""Styling properties (P023, P025)."""

import re
from typing import TYPE_CHECKING

from component_property_linter.domain.constants import (
    COLOR_UTILITY_PREFIXES,
    DARK_VARIANT,
    DYNAMIC_STYLE_MARKERS,
    THEME_TOKEN_MARKERS,
)
from component_property_linter.domain.entities import SourceFile, Violation
from component_property_linter.domain.navigator import SyntaxNavigator
from component_property_linter.domain.properties.base import BaseProperty

if TYPE_CHECKING:
    from component_property_linter.domain.protocols import CheckContext

_STATIC_STYLE_RE = re.compile(r"\{\s*\{[^}]*\}\s*\}")


class TailwindStylingProperty(BaseProperty):
    """Static inline styles should be Tailwind utility classes."""

    code: str = "P023"
    name: str = "Tailwind CSS Styling"
    symbol: str = "tailwind-css-styling"
    description: str = (
        "A style attribute may only carry dynamic values; static object "
        "literals belong in className."
    )

    def check(self, source_file: SourceFile, context: "CheckContext") -> list[Violation]:
        violations: list[Violation] = []
        for attribute in SyntaxNavigator.jsx_attributes(source_file.root):
            if SyntaxNavigator.jsx_attribute_name(attribute) != "style":
                continue
            value = SyntaxNavigator.jsx_attribute_value(attribute)
            if value is None:
                continue

            text = SyntaxNavigator.text(value)
            if not _STATIC_STYLE_RE.fullmatch(text):
                continue
            if any(marker in text for marker in DYNAMIC_STYLE_MARKERS):
                continue
            violations.append(
                self.violation(
                    source_file,
                    SyntaxNavigator.start_line(attribute),
                    "Using inline styles instead of Tailwind classes",
                )
            )
        return violations


class DarkModeSupportProperty(BaseProperty):
    """Color utilities need a dark: counterpart."""

    code: str = "P025"
    name: str = "Dark Mode Support"
    symbol: str = "dark-mode-support"
    description: str = (
        "A className using Tailwind color utilities must include a dark: "
        "variant, unless it only uses CSS custom properties."
    )

    def check(self, source_file: SourceFile, context: "CheckContext") -> list[Violation]:
        violations: list[Violation] = []
        for attribute in SyntaxNavigator.jsx_attributes(source_file.root):
            if SyntaxNavigator.jsx_attribute_name(attribute) != "className":
                continue
            value = SyntaxNavigator.jsx_attribute_value(attribute)
            if value is None:
                continue

            text = SyntaxNavigator.text(value)
            if not any(prefix in text for prefix in COLOR_UTILITY_PREFIXES):
                continue
            if DARK_VARIANT in text:
                continue
            # Theme tokens resolve through CSS variables and adapt on their own.
            if any(marker in text for marker in THEME_TOKEN_MARKERS):
                continue
            violations.append(
                self.violation(
                    source_file,
                    SyntaxNavigator.start_line(attribute),
                    "Color classes without dark mode variant",
                    class_name=text[:50],
                )
            )
        return violations
