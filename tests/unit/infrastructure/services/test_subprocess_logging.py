"""Unit tests for SubprocessLoggingService."""

from pathlib import Path

from component_property_linter.infrastructure.services.subprocess_logging import (
    SubprocessLoggingService,
)


class TestSubprocessLoggingService:
    """Test raw subprocess log capture."""

    def test_log_raw_creates_log_dir(self, tmp_path: Path) -> None:
        log_dir = tmp_path / "logs"
        svc = SubprocessLoggingService(log_dir=str(log_dir))
        svc.log_raw("tsc", "stdout line", "stderr line")
        assert log_dir.is_dir()
        assert svc.log_dir == str(log_dir)

    def test_log_raw_writes_raw_tool_log(self, tmp_path: Path) -> None:
        svc = SubprocessLoggingService(log_dir=str(tmp_path))
        svc.log_raw("tsc", "a.tsx(1,1): error TS1005: ';' expected.", "npm warn")
        content = (tmp_path / "raw_tsc.log").read_text(encoding="utf-8")
        assert "TSC raw output" in content
        assert "--- stdout ---\na.tsx(1,1): error TS1005: ';' expected.\n" in content
        assert "--- stderr ---\nnpm warn\n" in content

    def test_empty_streams_are_omitted(self, tmp_path: Path) -> None:
        svc = SubprocessLoggingService(log_dir=str(tmp_path))
        svc.log_raw("tsc", "", "")
        content = (tmp_path / "raw_tsc.log").read_text(encoding="utf-8")
        assert "stdout" not in content
        assert "stderr" not in content

    def test_log_raw_appends_multiple_runs(self, tmp_path: Path) -> None:
        svc = SubprocessLoggingService(log_dir=str(tmp_path))
        svc.log_raw("tsc", "first run", "")
        svc.log_raw("tsc", "second run", "")
        content = (tmp_path / "raw_tsc.log").read_text(encoding="utf-8")
        assert content.index("first run") < content.index("second run")
        assert content.count("=" * 60) == 4
