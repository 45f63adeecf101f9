"""Unit tests for FileSystemGateway (file set resolution)."""

from pathlib import Path

import pytest

from component_property_linter.domain.entities import FilterOptions
from component_property_linter.domain.errors import ResolutionError
from component_property_linter.infrastructure.gateways.filesystem_gateway import FileSystemGateway


def _touch(root: Path, *relatives: str) -> None:
    for relative in relatives:
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("export {};\n", encoding="utf-8")


class TestExpandBraces:
    def test_single_group(self) -> None:
        assert FileSystemGateway.expand_braces("components/**/*.{tsx,ts}") == [
            "components/**/*.tsx",
            "components/**/*.ts",
        ]

    def test_nested_groups_expand_in_order(self) -> None:
        assert FileSystemGateway.expand_braces("{app,lib}/*.{ts,tsx}") == [
            "app/*.ts",
            "app/*.tsx",
            "lib/*.ts",
            "lib/*.tsx",
        ]

    def test_no_braces(self) -> None:
        assert FileSystemGateway.expand_braces("components/*.tsx") == ["components/*.tsx"]


class TestResolve:
    def test_resolves_sorted_absolute_paths(self, tmp_path: Path) -> None:
        _touch(tmp_path, "components/ui/B.tsx", "components/A.tsx", "components/util.ts", "components/x.css")
        gateway = FileSystemGateway(str(tmp_path))

        resolved = gateway.resolve("components/**/*.{tsx,ts}")

        root = tmp_path.resolve()
        assert resolved == sorted(
            str(root / p) for p in ("components/A.tsx", "components/ui/B.tsx", "components/util.ts")
        )
        assert all(Path(p).is_absolute() for p in resolved)

    def test_standard_exclusions(self, tmp_path: Path) -> None:
        _touch(
            tmp_path,
            "components/A.tsx",
            "components/A.test.tsx",
            "components/A.spec.tsx",
            "components/__tests__/B.tsx",
            "node_modules/pkg/components/C.tsx",
        )
        gateway = FileSystemGateway(str(tmp_path))

        relative = [gateway.relative_path(p) for p in gateway.resolve("**/*.tsx")]
        assert relative == ["components/A.tsx"]

    def test_caller_ignore_patterns(self, tmp_path: Path) -> None:
        _touch(tmp_path, "components/A.tsx", "components/legacy/Old.tsx")
        gateway = FileSystemGateway(str(tmp_path))

        resolved = gateway.resolve_options(FilterOptions("components/**/*.tsx", ignore=("components/legacy/**",)))
        assert [gateway.relative_path(p) for p in resolved] == ["components/A.tsx"]

    def test_empty_match_is_valid(self, tmp_path: Path) -> None:
        assert FileSystemGateway(str(tmp_path)).resolve("components/**/*.tsx") == []

    def test_stable_across_calls(self, tmp_path: Path) -> None:
        _touch(tmp_path, "components/b.tsx", "components/a.tsx", "components/c/d.tsx")
        gateway = FileSystemGateway(str(tmp_path))
        assert gateway.resolve("components/**/*.tsx") == gateway.resolve("components/**/*.tsx")

    def test_missing_root_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ResolutionError, match="does not exist"):
            FileSystemGateway(str(tmp_path / "missing")).resolve("**/*.tsx")

    def test_file_root_raises(self, tmp_path: Path) -> None:
        _touch(tmp_path, "file.tsx")
        with pytest.raises(ResolutionError, match="not a directory"):
            FileSystemGateway(str(tmp_path / "file.tsx")).resolve("**/*.tsx")

    def test_absolute_pattern_raises(self, tmp_path: Path) -> None:
        _touch(tmp_path, "components/a.tsx")
        with pytest.raises(ResolutionError, match="cannot expand"):
            FileSystemGateway(str(tmp_path)).resolve(str(tmp_path / "components" / "*.tsx"))

    def test_relative_path_outside_root_is_unchanged(self, tmp_path: Path) -> None:
        gateway = FileSystemGateway(str(tmp_path / "a"))
        assert gateway.relative_path("/elsewhere/x.tsx") == "/elsewhere/x.tsx"
