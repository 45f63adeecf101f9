"""Type-safety properties (P005, P006, P009, P048)."""

from typing import TYPE_CHECKING

from component_property_linter.domain.constants import IMPLICIT_ANY_MARKERS, UNUSED_CODE_MARKERS
from component_property_linter.domain.entities import Diagnostic, SourceFile, Violation
from component_property_linter.domain.navigator import SyntaxNavigator
from component_property_linter.domain.properties.base import BaseProperty

if TYPE_CHECKING:
    from component_property_linter.domain.protocols import CheckContext


class PropsInterfaceProperty(BaseProperty):
    """Components that take props must type them explicitly."""

    code: str = "P005"
    name: str = "Props Interface"
    symbol: str = "props-interface"
    description: str = (
        "The first parameter of every top-level function or arrow-function "
        "component needs an explicit type annotation."
    )

    def check(self, source_file: SourceFile, context: "CheckContext") -> list[Violation]:
        violations: list[Violation] = []
        for component_name, function in SyntaxNavigator.top_level_functions(source_file.root):
            parameters = SyntaxNavigator.function_parameters(function)
            if not parameters:
                continue
            if SyntaxNavigator.parameter_type(parameters[0]) is not None:
                continue
            violations.append(
                self.violation(
                    source_file,
                    SyntaxNavigator.start_line(function),
                    f"Component '{component_name}' has props without explicit type",
                    component=component_name,
                )
            )
        return violations


class StateTypeAnnotationProperty(BaseProperty):
    """useState must be typed, either explicitly or through its initial value."""

    code: str = "P006"
    name: str = "State Type Annotation"
    symbol: str = "state-type-annotation"
    description: str = "Every useState call needs a type argument or an initial value."

    def check(self, source_file: SourceFile, context: "CheckContext") -> list[Violation]:
        violations: list[Violation] = []
        for call in SyntaxNavigator.call_expressions(source_file.root):
            callee = SyntaxNavigator.field(call, "function")
            if SyntaxNavigator.text(callee) != "useState":
                continue
            has_type_arguments = (
                SyntaxNavigator.field(call, "type_arguments") is not None
                or bool(SyntaxNavigator.children_of_kind(call, "type_arguments"))
            )
            if has_type_arguments or SyntaxNavigator.call_arguments(call):
                continue
            violations.append(
                self.violation(
                    source_file,
                    SyntaxNavigator.start_line(call),
                    "useState without type or initial value",
                )
            )
        return violations


class _CompilerDiagnosticProperty(BaseProperty):
    """Shared filter over diagnostics reported by the configured compiler."""

    default_pattern: str = "components/**/*.{tsx,ts}"
    requires_tree: bool = False

    def matches(self, diagnostic: Diagnostic) -> bool:
        raise NotImplementedError

    def check_path(self, path: str, context: "CheckContext") -> list[Violation]:
        relative = context.resolver.relative_path(path)
        return [
            self.violation(
                relative,
                max(diagnostic.line, 1),
                diagnostic.message,
                diagnostic_code=diagnostic.code,
            )
            for diagnostic in context.loader.diagnostics(path)
            if self.matches(diagnostic)
        ]


class NoImplicitAnyProperty(_CompilerDiagnosticProperty):
    """Strict compilation must not report implicit any."""

    code: str = "P009"
    name: str = "No Implicit Any"
    symbol: str = "no-implicit-any"
    description: str = "The compiler must report no implicit 'any' types."

    def matches(self, diagnostic: Diagnostic) -> bool:
        message = diagnostic.message
        if any(marker in message for marker in IMPLICIT_ANY_MARKERS):
            return True
        return "Parameter" in message and "any" in message


class NoUnusedCodeProperty(_CompilerDiagnosticProperty):
    """The compiler must report no unused declarations."""

    code: str = "P048"
    name: str = "No Unused Code"
    symbol: str = "no-unused-code"
    description: str = "The compiler must report no unused variables, imports or functions."

    def matches(self, diagnostic: Diagnostic) -> bool:
        return any(marker in diagnostic.message for marker in UNUSED_CODE_MARKERS)
