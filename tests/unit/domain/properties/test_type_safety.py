"""Tests for type-safety properties (P005, P006, P009, P048)."""

from pathlib import Path

import pytest

from component_property_linter.domain.entities import Diagnostic
from component_property_linter.domain.errors import CompilerUnavailableError
from component_property_linter.domain.properties import (
    NoImplicitAnyProperty,
    NoUnusedCodeProperty,
    PropsInterfaceProperty,
    StateTypeAnnotationProperty,
)


class TestPropsInterface:
    def test_untyped_props_fail(self, project) -> None:
        text = "export function Card(props) {\n  return <div>{props.title}</div>;\n}\n"
        violations = project.check(PropsInterfaceProperty(), "components/Card.tsx", text)

        assert [v.format() for v in violations] == [
            "components/Card.tsx:1: Component 'Card' has props without explicit type"
        ]

    def test_untyped_single_arrow_parameter_fails(self, project) -> None:
        text = "export const Title = props => <h1>{props.text}</h1>;\n"
        violations = project.check(PropsInterfaceProperty(), "components/Title.tsx", text)
        assert violations[0].context["component"] == "Title"

    def test_typed_and_parameterless_components_pass(self, project) -> None:
        text = (
            "interface Props { title: string }\n"
            "export function Card({ title }: Props) { return <div>{title}</div>; }\n"
            "export const Badge = (props: { label: string }) => <span>{props.label}</span>;\n"
            "export function Empty() { return null; }\n"
        )
        assert project.check(PropsInterfaceProperty(), "components/Card.tsx", text) == []

    def test_nested_functions_are_not_components(self, project) -> None:
        text = (
            "export function Card({ title }: { title: string }) {\n"
            "  const format = (value) => value.trim();\n"
            "  return <div>{format(title)}</div>;\n"
            "}\n"
        )
        assert project.check(PropsInterfaceProperty(), "components/Card.tsx", text) == []


class TestStateTypeAnnotation:
    def test_use_state_without_type_or_value_fails(self, project) -> None:
        text = "export function C() {\n  const [v, setV] = useState();\n  return null;\n}\n"
        violations = project.check(StateTypeAnnotationProperty(), "components/C.tsx", text)

        assert [(v.line, v.message) for v in violations] == [(2, "useState without type or initial value")]

    @pytest.mark.parametrize("call", ["useState<number>()", "useState(0)", "useState<string | null>(null)"])
    def test_typed_or_initialized_state_passes(self, project, call: str) -> None:
        text = f"export function C() {{\n  const [v, setV] = {call};\n  return null;\n}}\n"
        assert project.check(StateTypeAnnotationProperty(), "components/C.tsx", text) == []


def _diagnostics_for(project, relative: str, *messages: str) -> None:
    path = project.write(relative, "export const X = 1;\n")
    project.diagnostics_adapter.gather_diagnostics.return_value = {
        str(Path(path).resolve()): [
            Diagnostic(file=str(path), line=line, message=message, code="TS0000")
            for line, message in enumerate(messages, start=1)
        ]
    }


class TestCompilerBackedProperties:
    def test_implicit_any_filters_diagnostics(self, project) -> None:
        _diagnostics_for(
            project,
            "components/Form.tsx",
            "Parameter 'event' implicitly has an 'any' type.",
            "Type 'string' is not assignable to type 'number'.",
            "Variable 'rows' implicitly has an 'any' type.",
        )
        violations = project.check(NoImplicitAnyProperty(), "components/Form.tsx")

        assert [(v.file, v.line) for v in violations] == [("components/Form.tsx", 1), ("components/Form.tsx", 3)]

    def test_unused_code_filters_diagnostics(self, project) -> None:
        _diagnostics_for(
            project,
            "components/Form.tsx",
            "'clsx' is declared but its value is never read.",
            "Parameter 'event' implicitly has an 'any' type.",
        )
        violations = project.check(NoUnusedCodeProperty(), "components/Form.tsx")

        assert [v.message for v in violations] == ["'clsx' is declared but its value is never read."]
        assert violations[0].context["diagnostic_code"] == "TS0000"

    def test_file_without_diagnostics_passes(self, project) -> None:
        project.write("components/Clean.tsx", "export const X = 1;\n")
        assert project.check(NoUnusedCodeProperty(), "components/Clean.tsx") == []

    def test_compiler_runs_once_for_many_files(self, project) -> None:
        project.write("components/A.tsx", "export const A = 1;\n")
        project.write("components/B.tsx", "export const B = 1;\n")
        context = project.context()
        prop = NoImplicitAnyProperty()

        prop.check_path(str(project.root / "components/A.tsx"), context)
        prop.check_path(str(project.root / "components/B.tsx"), context)

        assert project.diagnostics_adapter.gather_diagnostics.call_count == 1

    def test_unavailable_compiler_propagates(self, project) -> None:
        project.write("components/A.tsx", "export const A = 1;\n")
        project.diagnostics_adapter.gather_diagnostics.side_effect = CompilerUnavailableError("no tsc")

        with pytest.raises(CompilerUnavailableError, match="no tsc"):
            project.check(NoImplicitAnyProperty(), "components/A.tsx")
