"""Code style properties (P046, P047)."""

from typing import TYPE_CHECKING, Optional

from component_property_linter.domain.constants import IMPORT_CATEGORY_ORDER
from component_property_linter.domain.entities import SourceFile, Violation
from component_property_linter.domain.navigator import SCOPE_KINDS, SyntaxNavigator
from component_property_linter.domain.properties.base import BaseProperty

if TYPE_CHECKING:
    from tree_sitter import Node

    from component_property_linter.domain.protocols import CheckContext

# Nodes an assigned identifier may sit in on the left of a destructuring write.
_PATTERN_KINDS: frozenset[str] = frozenset(
    {
        "array_pattern",
        "object_pattern",
        "pair_pattern",
        "rest_pattern",
        "assignment_pattern",
        "object_assignment_pattern",
        "parenthesized_expression",
    }
)
_DEFAULTED_PATTERN_KINDS: frozenset[str] = frozenset({"assignment_pattern", "object_assignment_pattern"})
_ASSIGNMENT_KINDS: frozenset[str] = frozenset(
    {"assignment_expression", "augmented_assignment_expression", "for_in_statement"}
)
_BINDING_KINDS: tuple[str, ...] = ("identifier", "shorthand_property_identifier_pattern")
_LOOP_HEADER_KINDS: frozenset[str] = frozenset({"for_statement", "for_in_statement"})


class ImportOrganizationProperty(BaseProperty):
    """Imports are grouped react, third-party, local, then type-only."""

    code: str = "P047"
    name: str = "Import Organization"
    symbol: str = "import-organization"
    description: str = (
        "Import categories must appear in non-decreasing order: react, "
        "third-party, local, type. Only the first out-of-order import of a "
        "file is reported."
    )
    default_pattern: str = "components/**/*.{tsx,ts}"

    @staticmethod
    def categorize(specifier: str, type_only: bool) -> str:
        """Category of an import, checked in this precedence."""
        if specifier.startswith("react"):
            return "react"
        if specifier.startswith(".") or specifier.startswith("@/"):
            return "local"
        if type_only:
            return "type"
        return "third-party"

    def check(self, source_file: SourceFile, context: "CheckContext") -> list[Violation]:
        current_rank = 0
        for statement in SyntaxNavigator.import_statements(source_file.root):
            if SyntaxNavigator.field(statement, "source") is None:
                continue
            category = self.categorize(
                SyntaxNavigator.import_source(statement),
                SyntaxNavigator.is_type_only_import(statement),
            )
            rank = IMPORT_CATEGORY_ORDER.index(category)
            if rank < current_rank:
                line = SyntaxNavigator.start_line(statement)
                return [
                    self.violation(
                        source_file,
                        line,
                        f"Import order violation: {category} import at line {line} "
                        "should come before previous imports",
                        category=category,
                    )
                ]
            current_rank = max(current_rank, rank)
        return []


class ConstVariableDeclarationProperty(BaseProperty):
    """
    ``let`` bindings that are never written again should be ``const``.

    References are found by name within the declaration's enclosing block,
    which approximates binding resolution: an inner variable shadowing the
    same name is treated as the same variable.
    """

    code: str = "P046"
    name: str = "Const Variable Declaration"
    symbol: str = "const-variable-declaration"
    description: str = "A let-declared variable that is never reassigned must use const."
    default_pattern: str = "components/**/*.{tsx,ts}"

    def check(self, source_file: SourceFile, context: "CheckContext") -> list[Violation]:
        violations: list[Violation] = []
        for statement in SyntaxNavigator.descendants_of_kind(source_file.root, "lexical_declaration"):
            if not self._is_let(statement):
                continue
            if statement.parent is not None and statement.parent.type in _LOOP_HEADER_KINDS:
                continue

            scope = SyntaxNavigator.nearest_ancestor(statement, *SCOPE_KINDS) or source_file.root
            for declarator in SyntaxNavigator.children_of_kind(statement, "variable_declarator"):
                name_node = declarator.child_by_field_name("name")
                if name_node is None:
                    continue
                names = self._bound_names(name_node)
                if self._is_reassigned(scope, name_node, names):
                    continue
                variable = SyntaxNavigator.text(name_node)
                violations.append(
                    self.violation(
                        source_file,
                        SyntaxNavigator.start_line(declarator),
                        f"Variable '{variable}' should use const",
                        variable=variable,
                    )
                )
        return violations

    @staticmethod
    def _is_let(statement: "Node") -> bool:
        kind = statement.child_by_field_name("kind")
        if kind is not None:
            return SyntaxNavigator.text(kind) == "let"
        return bool(statement.children) and statement.children[0].type == "let"

    @staticmethod
    def _bound_names(pattern: "Node") -> set[str]:
        names: set[str] = set()
        stack = [pattern]
        while stack:
            node = stack.pop()
            if node.type in _BINDING_KINDS:
                names.add(SyntaxNavigator.text(node))
                continue
            default = node.child_by_field_name("right") if node.type in _DEFAULTED_PATTERN_KINDS else None
            key = node.child_by_field_name("key") if node.type == "pair_pattern" else None
            stack.extend(
                child
                for child in node.named_children
                if not ConstVariableDeclarationProperty._same(child, default)
                and not ConstVariableDeclarationProperty._same(child, key)
            )
        return names

    @staticmethod
    def _is_reassigned(scope: "Node", name_node: "Node", names: set[str]) -> bool:
        for reference in SyntaxNavigator.descendants_of_kind(scope, *_BINDING_KINDS):
            if SyntaxNavigator.text(reference) not in names:
                continue
            if SyntaxNavigator.contains(name_node, reference):
                continue
            if ConstVariableDeclarationProperty._is_write(reference):
                return True
        return False

    @staticmethod
    def _is_write(reference: "Node") -> bool:
        current = reference
        parent = current.parent
        while parent is not None and parent.type in _PATTERN_KINDS:
            if parent.type in _DEFAULTED_PATTERN_KINDS and ConstVariableDeclarationProperty._same(
                parent.child_by_field_name("right"), current
            ):
                return False
            current = parent
            parent = current.parent

        if parent is None:
            return False
        if parent.type == "update_expression":
            return True
        if parent.type in _ASSIGNMENT_KINDS:
            return ConstVariableDeclarationProperty._same(parent.child_by_field_name("left"), current)
        return False

    @staticmethod
    def _same(left: Optional["Node"], right: Optional["Node"]) -> bool:
        if left is None or right is None:
            return False
        return (left.start_byte, left.end_byte, left.type) == (right.start_byte, right.end_byte, right.type)
