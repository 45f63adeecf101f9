"""Heuristic detectors: cheap boolean/classification predicates over a file."""

import re
from typing import TYPE_CHECKING

from component_property_linter.domain.constants import (
    BROWSER_GLOBALS,
    CLIENT_DIRECTIVE,
    DIRECTIVE_LINE_WINDOW,
    HOOK_NAMES,
    JSX_PATTERN_LENGTH,
)
from component_property_linter.domain.navigator import SyntaxNavigator

if TYPE_CHECKING:
    from component_property_linter.domain.entities import SourceFile

_EVENT_HANDLER_RE = re.compile(r"on[A-Z]\w+\s*=\s*\{")
_BROWSER_API_RE = re.compile(r"\b(" + "|".join(BROWSER_GLOBALS) + r")\b")
_EXPRESSION_RE = re.compile(r"\{[^}]+\}")
_NUMBER_RE = re.compile(r"\d+")
_DOUBLE_QUOTED_RE = re.compile(r'"[^"]*"')
_SINGLE_QUOTED_RE = re.compile(r"'[^']*'")


class HeuristicDetectors:
    """
    Pure predicates used by the property checks.

    Several of these are deliberately textual. Hook and event-handler
    detection match substrings/regexes over the whole file instead of
    resolving bindings: renamed imports are still caught, at the cost of
    false positives from comments and string literals. The property
    expectations are calibrated against this looseness.
    """

    @staticmethod
    def has_client_directive(source_file: "SourceFile") -> bool:
        """
        True iff ``'use client'`` (either quote style) is a freestanding
        expression statement starting within the first five physical lines.
        """
        for statement in SyntaxNavigator.significant_children(source_file.root):
            if SyntaxNavigator.start_line(statement) > DIRECTIVE_LINE_WINDOW:
                break
            if statement.type != "expression_statement":
                continue
            expressions = SyntaxNavigator.significant_children(statement)
            if (
                len(expressions) == 1
                and expressions[0].type == "string"
                and SyntaxNavigator.string_value(expressions[0]) == CLIENT_DIRECTIVE
            ):
                return True
        return False

    @staticmethod
    def uses_hooks(text: str) -> bool:
        """True if any known hook name appears anywhere in text."""
        return any(hook in text for hook in HOOK_NAMES)

    @staticmethod
    def has_event_handlers(text: str) -> bool:
        """True if text contains a JSX event handler prop such as ``onClick={``."""
        return _EVENT_HANDLER_RE.search(text) is not None

    @staticmethod
    def uses_browser_apis(text: str) -> bool:
        """True if text references a browser-only global as a whole word."""
        return _BROWSER_API_RE.search(text) is not None

    @staticmethod
    def count_significant_lines(text: str) -> int:
        """
        Count lines that are non-blank and not comment-prefixed.

        Continuation lines of a block comment that do not start with ``*`` are
        counted as code; this metric is a coarse size signal, not a token count.
        """
        count = 0
        for line in text.split("\n"):
            trimmed = line.strip()
            if not trimmed or trimmed.startswith(("//", "/*", "*")):
                continue
            count += 1
        return count

    @staticmethod
    def normalize_jsx_pattern(text: str) -> str:
        """Replace expressions, numbers and string literals with placeholders."""
        pattern = _EXPRESSION_RE.sub("{...}", text)
        pattern = _NUMBER_RE.sub("N", pattern)
        pattern = _DOUBLE_QUOTED_RE.sub('""', pattern)
        pattern = _SINGLE_QUOTED_RE.sub("''", pattern)
        return pattern[:JSX_PATTERN_LENGTH]
