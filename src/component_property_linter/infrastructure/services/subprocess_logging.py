"""Subprocess raw output logging - capture compiler stdout/stderr under .propcheck/logs."""

from datetime import datetime, timezone
from pathlib import Path


class SubprocessLoggingService:
    """Append raw stdout/stderr of external tools to <log_dir>/raw_<tool>.log."""

    def __init__(self, log_dir: str = ".propcheck/logs") -> None:
        self._log_dir = Path(log_dir)

    @property
    def log_dir(self) -> str:
        """Directory raw logs are appended to."""
        return str(self._log_dir)

    @staticmethod
    def _section(title: str, body: str) -> str:
        if not body:
            return ""
        return f"--- {title} ---\n{body}" + ("" if body.endswith("\n") else "\n")

    def log_raw(self, tool: str, stdout: str, stderr: str) -> None:
        """Append one run of raw tool output, headed by a UTC timestamp."""
        self._log_dir.mkdir(parents=True, exist_ok=True)
        stamp = datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")
        header = f"\n{'=' * 60}\n[{stamp}] {tool.upper()} raw output\n{'=' * 60}\n"
        entry = header + self._section("stdout", stdout) + self._section("stderr", stderr)
        with (self._log_dir / f"raw_{tool}.log").open("a", encoding="utf-8") as f:
            f.write(entry)
