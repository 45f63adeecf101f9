"""TypeScript compiler adapter: run tsc once and collect per-file diagnostics."""

import logging
import re
import subprocess
from collections import defaultdict
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Sequence

from component_property_linter.domain.constants import DEFAULT_TSC_COMMAND
from component_property_linter.domain.entities import Diagnostic
from component_property_linter.domain.errors import CompilerUnavailableError
from component_property_linter.domain.protocols import DiagnosticsAdapterProtocol

if TYPE_CHECKING:
    from component_property_linter.domain.protocols import RawLogPort

logger = logging.getLogger(__name__)

# Pattern: file(line,col): error TS1234: message
_DIAGNOSTIC_RE = re.compile(r"^(.+?)\((\d+),(\d+)\): (error|warning|message) (TS\d+): (.*)$")
# Pattern: error TS1234: message (project-level, no location)
_GLOBAL_RE = re.compile(r"^(error|warning) (TS\d+): (.*)$")


class TscAdapter(DiagnosticsAdapterProtocol):
    """Adapter for ``tsc --noEmit`` output."""

    def __init__(
        self,
        command: Sequence[str] = DEFAULT_TSC_COMMAND,
        raw_log_port: Optional["RawLogPort"] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self._command = tuple(command)
        self._raw_log_port = raw_log_port
        self._timeout = timeout

    def gather_diagnostics(self, project_root: str, tsconfig_path: str) -> dict[str, list[Diagnostic]]:
        """Run the compiler over the project; returns diagnostics keyed by absolute path."""
        args = [*self._command, "--noEmit", "--pretty", "false"]
        if Path(tsconfig_path).is_file():
            args.extend(["-p", tsconfig_path])
        logger.debug("Running %s in %s", " ".join(args), project_root)
        try:
            result = subprocess.run(
                args,
                cwd=project_root,
                capture_output=True,
                text=True,
                check=False,
                timeout=self._timeout,
            )
        except (OSError, subprocess.SubprocessError) as e:
            raise CompilerUnavailableError(f"Cannot run {' '.join(self._command)}: {e}") from e

        if self._raw_log_port is not None:
            self._raw_log_port.log_raw("tsc", result.stdout, result.stderr)

        diagnostics = self._parse_output(result.stdout, project_root)
        if result.returncode != 0 and not diagnostics:
            detail = (result.stderr or result.stdout).strip().splitlines()
            raise CompilerUnavailableError(
                f"{' '.join(self._command)} exited with {result.returncode}: "
                f"{detail[0] if detail else 'no output'}"
            )
        return diagnostics

    def _parse_output(self, output: str, project_root: str) -> dict[str, list[Diagnostic]]:
        collected: dict[str, list[Diagnostic]] = defaultdict(list)
        # Chained messages continue on indented lines; keep them with their head.
        pending: Optional[tuple[str, int, str, str, list[str]]] = None

        def flush() -> None:
            if pending is None:
                return
            file, line, severity, code, parts = pending
            collected[file].append(
                Diagnostic(file=file, line=line, message=" ".join(parts), severity=severity, code=code)
            )

        for raw_line in output.splitlines():
            match = _DIAGNOSTIC_RE.match(raw_line)
            if match:
                flush()
                file_path, line_num, _column, severity, code, message = match.groups()
                absolute = str((Path(project_root) / file_path).resolve())
                pending = (absolute, int(line_num), severity, code, [message.strip()])
                continue
            if pending is not None and raw_line[:1].isspace() and raw_line.strip():
                pending[4].append(raw_line.strip())
                continue
            flush()
            pending = None
            global_match = _GLOBAL_RE.match(raw_line)
            if global_match:
                logger.warning("tsc: %s %s", global_match.group(2), global_match.group(3))
        flush()
        return dict(collected)
