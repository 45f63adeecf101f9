"""Unit tests for HeuristicDetectors."""

import pytest

from component_property_linter.domain.detectors import HeuristicDetectors


class TestCountSignificantLines:
    def test_comment_only_file_counts_zero(self) -> None:
        text = "// header\n/* block\n * continued\n */\n\n   \n"
        assert HeuristicDetectors.count_significant_lines(text) == 0

    def test_counts_code_lines(self) -> None:
        text = "import x from 'y';\n\n// note\nexport const a = 1;\n"
        assert HeuristicDetectors.count_significant_lines(text) == 2

    def test_block_comment_body_without_star_counts_as_code(self) -> None:
        text = "/*\nplain prose\n*/\n"
        assert HeuristicDetectors.count_significant_lines(text) == 1


class TestTextualDetectors:
    @pytest.mark.parametrize(
        "text",
        [
            "const [v, setV] = useState(0);",
            "useEffect(() => {}, []);",
            "// we never call useRef here",
        ],
    )
    def test_uses_hooks(self, text: str) -> None:
        assert HeuristicDetectors.uses_hooks(text)

    def test_no_hooks(self) -> None:
        assert not HeuristicDetectors.uses_hooks("export const A = () => <div />;")

    def test_event_handler_requires_expression_value(self) -> None:
        assert HeuristicDetectors.has_event_handlers("<button onClick={go}>")
        assert HeuristicDetectors.has_event_handlers("<input onChange = {set} />")
        assert not HeuristicDetectors.has_event_handlers('<a onclick="go()">')
        assert not HeuristicDetectors.has_event_handlers('<Foo onSubmit="x" />')

    def test_browser_apis_match_whole_words(self) -> None:
        assert HeuristicDetectors.uses_browser_apis("window.scrollTo(0, 0)")
        assert HeuristicDetectors.uses_browser_apis("localStorage.getItem('k')")
        assert not HeuristicDetectors.uses_browser_apis("const windowSize = 3;")


class TestNormalizeJsxPattern:
    def test_replaces_expressions_numbers_and_strings(self) -> None:
        text = '<Card key={item.id} title="Hello" size={3} level=\'h2\' cols="12" />'
        assert HeuristicDetectors.normalize_jsx_pattern(text) == (
            "<Card key={...} title=\"\" size={...} level='' cols=\"\" />"
        )

    def test_numbers_outside_braces_become_placeholders(self) -> None:
        assert HeuristicDetectors.normalize_jsx_pattern("<h2>Step 42</h2>") == "<hN>Step N</hN>"

    def test_truncates_to_one_hundred_characters(self) -> None:
        assert len(HeuristicDetectors.normalize_jsx_pattern("<p>" + "x" * 300 + "</p>")) == 100


class TestClientDirective:
    def test_directive_on_first_line(self, project) -> None:
        project.write("components/A.tsx", "'use client';\nexport const A = () => <div />;\n")
        assert HeuristicDetectors.has_client_directive(project.load("components/A.tsx"))

    def test_double_quoted_directive_after_comments(self, project) -> None:
        project.write(
            "components/B.tsx",
            '// Copyright\n// Widget\n\n"use client"\nexport const B = () => <div />;\n',
        )
        assert HeuristicDetectors.has_client_directive(project.load("components/B.tsx"))

    def test_directive_after_line_five_is_ignored(self, project) -> None:
        project.write(
            "components/C.tsx",
            "// 1\n// 2\n// 3\n// 4\n// 5\n'use client';\nexport const C = () => <div />;\n",
        )
        assert not HeuristicDetectors.has_client_directive(project.load("components/C.tsx"))

    def test_directive_text_inside_string_value_does_not_count(self, project) -> None:
        project.write("components/D.tsx", "const mode = 'use client';\nexport const D = () => <p>{mode}</p>;\n")
        assert not HeuristicDetectors.has_client_directive(project.load("components/D.tsx"))
