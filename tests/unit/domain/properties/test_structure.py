"""Tests for component structure properties (P002, P003, P004)."""

from component_property_linter.domain.properties import (
    ComponentSizeProperty,
    DirectoryOrganizationProperty,
    JsxReusabilityProperty,
)


def _single_component(body_lines: int) -> str:
    """One exported function; significant lines = body_lines + 3."""
    body = "".join(f"  const v{i} = {i};\n" for i in range(body_lines))
    return "export function Big() {\n" + body + "  return null;\n}\n"


class TestComponentSize:
    def test_at_threshold_passes(self, project) -> None:
        assert project.check(ComponentSizeProperty(), "components/Big.tsx", _single_component(197)) == []

    def test_one_line_over_threshold_fails(self, project) -> None:
        violations = project.check(ComponentSizeProperty(), "components/Big.tsx", _single_component(198))

        assert len(violations) == 1
        assert violations[0].line == 1
        assert violations[0].message == "201 lines (should extract sub-components)"
        assert violations[0].file == "components/Big.tsx"

    def test_large_file_with_sub_components_passes(self, project) -> None:
        text = _single_component(197) + "export const Small = () => null;\n"
        assert project.check(ComponentSizeProperty(), "components/Big.tsx", text) == []

    def test_comments_and_blank_lines_do_not_count(self, project) -> None:
        text = "// note\n\n" * 300 + "export const A = () => null;\n"
        assert project.check(ComponentSizeProperty(), "components/A.tsx", text) == []

    def test_threshold_is_configurable(self, project) -> None:
        project.config["max_component_lines"] = 10
        violations = project.check(ComponentSizeProperty(), "components/Big.tsx", _single_component(8))
        assert violations[0].context["lines"] == 11


LIST_THREE = """\
export const List = ({ items }: { items: Item[] }) => (
  <ul>
    <li className="item">{items[0].name}</li>
    <li className="item">{items[1].name}</li>
    <li className="item">{items[2].name}</li>
  </ul>
);
"""


class TestJsxReusability:
    def test_three_repeats_fail_at_first_occurrence(self, project) -> None:
        violations = project.check(JsxReusabilityProperty(), "components/List.tsx", LIST_THREE)

        assert len(violations) == 1
        assert violations[0].line == 3
        assert violations[0].context["count"] == 3
        assert violations[0].message.startswith('Pattern appears 3 times: <li className="">{...}</li>')

    def test_two_repeats_pass(self, project) -> None:
        text = LIST_THREE.replace('    <li className="item">{items[2].name}</li>\n', "")
        assert project.check(JsxReusabilityProperty(), "components/List.tsx", text) == []

    def test_short_elements_are_ignored(self, project) -> None:
        text = "export const S = () => (\n  <p>\n    <b>a</b>\n    <b>b</b>\n    <b>c</b>\n  </p>\n);\n"
        assert project.check(JsxReusabilityProperty(), "components/S.tsx", text) == []


class TestDirectoryOrganization:
    def test_known_feature_directory_passes(self, project) -> None:
        project.write("components/ui/Button.tsx", "export const Button = () => null;\n")
        assert project.check(DirectoryOrganizationProperty(), "components/ui/Button.tsx") == []

    def test_root_level_component_is_exempt(self, project) -> None:
        project.write("components/Layout.tsx", "export const Layout = () => null;\n")
        assert project.check(DirectoryOrganizationProperty(), "components/Layout.tsx") == []

    def test_unknown_directory_fails(self, project) -> None:
        project.write("components/widgets/deep/Thing.tsx", "export const Thing = () => null;\n")
        violations = project.check(DirectoryOrganizationProperty(), "components/widgets/deep/Thing.tsx")

        assert [v.format() for v in violations] == [
            "components/widgets/deep/Thing.tsx:1: Invalid directory 'widgets'"
        ]

    def test_valid_directories_are_configurable(self, project) -> None:
        project.config["valid_directories"] = ["widgets"]
        project.write("components/widgets/Thing.tsx", "export const Thing = () => null;\n")
        assert project.check(DirectoryOrganizationProperty(), "components/widgets/Thing.tsx") == []

    def test_does_not_need_a_parse(self, project) -> None:
        project.write("components/widgets/Broken.tsx", "export const = ;\n")
        violations = project.check(DirectoryOrganizationProperty(), "components/widgets/Broken.tsx")
        assert len(violations) == 1
