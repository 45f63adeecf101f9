"""Accessibility properties (P014, P015)."""

import re
from typing import TYPE_CHECKING

from component_property_linter.domain.constants import FORM_INPUT_TAGS, INTERACTIVE_TAGS
from component_property_linter.domain.entities import SourceFile, Violation
from component_property_linter.domain.navigator import SyntaxNavigator
from component_property_linter.domain.properties.base import BaseProperty

if TYPE_CHECKING:
    from tree_sitter import Node

    from component_property_linter.domain.protocols import CheckContext

_ARIA_LABEL_RE = re.compile(r"aria-label\s*=")
_ARIA_LABELLEDBY_RE = re.compile(r"aria-labelledby\s*=")
_ID_RE = re.compile(r"\bid\s*=")


class InteractiveAriaLabelsProperty(BaseProperty):
    """Buttons, links and inputs need an accessible name."""

    code: str = "P014"
    name: str = "Interactive ARIA Labels"
    symbol: str = "interactive-aria-labels"
    description: str = (
        "<button>, <a> and <input> need aria-label, aria-labelledby, visible "
        "text content or an id."
    )

    def check(self, source_file: SourceFile, context: "CheckContext") -> list[Violation]:
        violations: list[Violation] = []
        for tag in SyntaxNavigator.jsx_tags(source_file.root):
            tag_name = SyntaxNavigator.jsx_tag_name(tag)
            if tag_name.lower() not in INTERACTIVE_TAGS:
                continue

            text = SyntaxNavigator.text(tag)
            if (
                _ARIA_LABEL_RE.search(text)
                or _ARIA_LABELLEDBY_RE.search(text)
                or _ID_RE.search(text)
                or self._has_text_content(tag)
            ):
                continue
            violations.append(
                self.violation(
                    source_file,
                    SyntaxNavigator.start_line(tag),
                    f"<{tag_name}> without accessible label",
                    element=tag_name,
                )
            )
        return violations

    @staticmethod
    def _has_text_content(tag: "Node") -> bool:
        # Text of the enclosing element counts, so a self-closing <input> inside
        # <label>Email <input /></label> is labelled by its container.
        parent = tag.parent
        if parent is None or parent.type != "jsx_element":
            return False
        return any(
            SyntaxNavigator.text(child).strip()
            for child in SyntaxNavigator.jsx_text_children(parent)
        )


class FormInputLabelsProperty(BaseProperty):
    """Form controls must be associated with a label."""

    code: str = "P015"
    name: str = "Form Input Labels"
    symbol: str = "form-input-labels"
    description: str = "<input>, <textarea> and <select> (and their components) need aria-label or id."

    def check(self, source_file: SourceFile, context: "CheckContext") -> list[Violation]:
        violations: list[Violation] = []
        for tag in SyntaxNavigator.jsx_tags(source_file.root):
            tag_name = SyntaxNavigator.jsx_tag_name(tag)
            if tag_name not in FORM_INPUT_TAGS:
                continue

            text = SyntaxNavigator.text(tag)
            if _ARIA_LABEL_RE.search(text) or _ID_RE.search(text):
                continue
            violations.append(
                self.violation(
                    source_file,
                    SyntaxNavigator.start_line(tag),
                    "Form input without label association",
                    element=tag_name,
                )
            )
        return violations
