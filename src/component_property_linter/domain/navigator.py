"""Read-only query surface over tree-sitter TypeScript/TSX syntax trees."""

from typing import TYPE_CHECKING, Iterator, Optional

if TYPE_CHECKING:
    from tree_sitter import Node

FUNCTION_DECLARATION_KINDS: frozenset[str] = frozenset(
    {
        "function_declaration",
        "generator_function_declaration",
        "function_expression",
        "function",
    }
)
VARIABLE_STATEMENT_KINDS: frozenset[str] = frozenset({"lexical_declaration", "variable_declaration"})
JSX_TAG_KINDS: tuple[str, ...] = ("jsx_self_closing_element", "jsx_opening_element")
SCOPE_KINDS: frozenset[str] = frozenset({"program", "statement_block", "class_body", "switch_body"})
TRIVIA_KINDS: frozenset[str] = frozenset({"comment"})


class SyntaxNavigator:
    """
    Typed, read-only queries over a parsed tree.

    Every query accepts a node (usually ``SourceFile.root``) and returns plain
    lists; nothing here mutates the tree. Line numbers are 1-indexed and come
    from the parser's row counter, so they line up with physical lines
    regardless of multi-byte characters.
    """

    # Generic traversal

    @staticmethod
    def walk(node: Optional["Node"]) -> Iterator["Node"]:
        """Yield node and all of its descendants in document (pre-)order."""
        if node is None:
            return
        stack = [node]
        while stack:
            current = stack.pop()
            yield current
            stack.extend(reversed(current.children))

    @staticmethod
    def descendants_of_kind(node: Optional["Node"], *kinds: str) -> list["Node"]:
        """All descendants (excluding node itself) whose type is in kinds."""
        if node is None:
            return []
        wanted = set(kinds)
        return [n for n in SyntaxNavigator.walk(node) if n is not node and n.type in wanted]

    @staticmethod
    def children_of_kind(node: Optional["Node"], *kinds: str) -> list["Node"]:
        """Direct children whose type is in kinds."""
        if node is None:
            return []
        wanted = set(kinds)
        return [child for child in node.children if child.type in wanted]

    @staticmethod
    def significant_children(node: Optional["Node"]) -> list["Node"]:
        """Named children without comments."""
        if node is None:
            return []
        return [child for child in node.named_children if child.type not in TRIVIA_KINDS]

    @staticmethod
    def nearest_ancestor(node: "Node", *kinds: str) -> Optional["Node"]:
        """Closest enclosing node whose type is in kinds, or None."""
        wanted = set(kinds)
        current = node.parent
        while current is not None:
            if current.type in wanted:
                return current
            current = current.parent
        return None

    @staticmethod
    def field(node: Optional["Node"], name: str) -> Optional["Node"]:
        """Child stored under a grammar field name."""
        if node is None:
            return None
        return node.child_by_field_name(name)

    @staticmethod
    def text(node: Optional["Node"]) -> str:
        """Source text spanned by node."""
        if node is None or node.text is None:
            return ""
        return node.text.decode("utf-8", errors="replace")

    @staticmethod
    def start_line(node: "Node") -> int:
        """1-indexed line on which node starts."""
        return node.start_point[0] + 1

    @staticmethod
    def string_value(node: Optional["Node"]) -> str:
        """Unquoted value of a string literal node."""
        raw = SyntaxNavigator.text(node)
        if len(raw) >= 2 and raw[0] == raw[-1] and raw[0] in "'\"`":
            return raw[1:-1]
        return raw

    @staticmethod
    def contains(ancestor: "Node", node: "Node") -> bool:
        """True if node lies within ancestor's byte span."""
        return ancestor.start_byte <= node.start_byte and node.end_byte <= ancestor.end_byte

    # Module structure

    @staticmethod
    def top_level_statements(root: "Node") -> list["Node"]:
        """Module-level statements, unwrapping export statements."""
        statements: list["Node"] = []
        for child in SyntaxNavigator.significant_children(root):
            if child.type == "export_statement":
                inner = child.child_by_field_name("declaration") or child.child_by_field_name("value")
                if inner is not None:
                    statements.append(inner)
                continue
            statements.append(child)
        return statements

    @staticmethod
    def top_level_functions(root: "Node") -> list[tuple[str, "Node"]]:
        """
        Module-scope function declarations and arrow-function variables.

        Returns (name, function_node) pairs; the function node is the
        declaration itself or the arrow function initializer. Anonymous
        default exports are named ``default``.
        """
        functions: list[tuple[str, "Node"]] = []
        for statement in SyntaxNavigator.top_level_statements(root):
            if statement.type in FUNCTION_DECLARATION_KINDS:
                name_node = statement.child_by_field_name("name")
                functions.append((SyntaxNavigator.text(name_node) or "default", statement))
            elif statement.type in VARIABLE_STATEMENT_KINDS:
                for declarator in SyntaxNavigator.children_of_kind(statement, "variable_declarator"):
                    value = declarator.child_by_field_name("value")
                    if value is not None and value.type == "arrow_function":
                        name = SyntaxNavigator.text(declarator.child_by_field_name("name"))
                        functions.append((name, value))
        return functions

    @staticmethod
    def function_parameters(function: "Node") -> list["Node"]:
        """Declared parameters of a function or arrow function."""
        single = function.child_by_field_name("parameter")
        if single is not None:
            return [single]
        return SyntaxNavigator.significant_children(function.child_by_field_name("parameters"))

    @staticmethod
    def parameter_type(parameter: "Node") -> Optional["Node"]:
        """Explicit type annotation of a parameter, if any."""
        if parameter.type not in ("required_parameter", "optional_parameter"):
            return None
        return parameter.child_by_field_name("type")

    @staticmethod
    def import_statements(root: "Node") -> list["Node"]:
        """Module-level import declarations in source order."""
        return SyntaxNavigator.children_of_kind(root, "import_statement")

    @staticmethod
    def import_source(statement: "Node") -> str:
        """Module specifier of an import declaration."""
        return SyntaxNavigator.string_value(statement.child_by_field_name("source"))

    @staticmethod
    def is_type_only_import(statement: "Node") -> bool:
        """True for ``import type ...`` declarations."""
        return any(child.type == "type" for child in statement.children)

    @staticmethod
    def call_expressions(root: "Node") -> list["Node"]:
        """All call expressions in the tree."""
        return SyntaxNavigator.descendants_of_kind(root, "call_expression")

    @staticmethod
    def call_arguments(call: "Node") -> list["Node"]:
        """Arguments passed to a call expression."""
        arguments = call.child_by_field_name("arguments")
        if arguments is None or arguments.type != "arguments":
            return []
        return SyntaxNavigator.significant_children(arguments)

    # JSX

    @staticmethod
    def jsx_elements(root: "Node") -> list["Node"]:
        """Element nodes: paired elements and self-closing elements."""
        return SyntaxNavigator.descendants_of_kind(root, "jsx_element", "jsx_self_closing_element")

    @staticmethod
    def jsx_tags(root: "Node") -> list["Node"]:
        """Tag nodes: self-closing elements and opening tags of paired elements."""
        return SyntaxNavigator.descendants_of_kind(root, *JSX_TAG_KINDS)

    @staticmethod
    def jsx_tag_name(tag: "Node") -> str:
        """Tag name text (``div``, ``Image``, ``motion.div``); empty for fragments."""
        return SyntaxNavigator.text(tag.child_by_field_name("name"))

    @staticmethod
    def jsx_attributes(root: "Node") -> list["Node"]:
        """All JSX attributes in the tree."""
        return SyntaxNavigator.descendants_of_kind(root, "jsx_attribute")

    @staticmethod
    def jsx_attribute_name(attribute: "Node") -> str:
        """Attribute name text."""
        named = attribute.named_children
        return SyntaxNavigator.text(named[0]) if named else ""

    @staticmethod
    def jsx_attribute_value(attribute: "Node") -> Optional["Node"]:
        """Initializer of an attribute (string or expression), None for bare flags."""
        if not any(child.type == "=" for child in attribute.children):
            return None
        named = attribute.named_children
        return named[-1] if len(named) > 1 else None

    @staticmethod
    def jsx_text_children(element: "Node") -> list["Node"]:
        """Literal text children of a paired JSX element."""
        return SyntaxNavigator.children_of_kind(element, "jsx_text")

    # Errors

    @staticmethod
    def first_error(root: "Node") -> Optional["Node"]:
        """First ERROR or MISSING node in document order."""
        if not root.has_error:
            return None
        for node in SyntaxNavigator.walk(root):
            if node.type == "ERROR" or node.is_missing:
                return node
        return root
