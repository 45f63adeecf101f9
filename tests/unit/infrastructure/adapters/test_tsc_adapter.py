"""Unit tests for TscAdapter."""

import subprocess
import unittest
from pathlib import Path
from unittest.mock import MagicMock, patch

from component_property_linter.domain.errors import CompilerUnavailableError
from component_property_linter.infrastructure.adapters.tsc_adapter import TscAdapter

TSC_OUTPUT = (
    "components/Form.tsx(12,7): error TS7006: Parameter 'e' implicitly has an 'any' type.\n"
    "components/Form.tsx(3,1): error TS6133: 'clsx' is declared but its value is never read.\n"
    "components/ui/Card.tsx(20,5): error TS2322: Type 'string' is not assignable to type 'number'.\n"
    "  Type 'string' is not assignable to type 'number'.\n"
    "error TS5023: Unknown compiler option 'foo'.\n"
)


class TestTscAdapter(unittest.TestCase):
    def setUp(self) -> None:
        self.raw_log_port = MagicMock()
        self.adapter = TscAdapter(raw_log_port=self.raw_log_port)
        self.root = str(Path("/project").resolve())

    def test_parse_output_groups_by_absolute_path(self) -> None:
        diagnostics = self.adapter._parse_output(TSC_OUTPUT, self.root)

        form = str(Path(self.root, "components/Form.tsx"))
        card = str(Path(self.root, "components/ui/Card.tsx"))
        self.assertEqual(set(diagnostics), {form, card})
        self.assertEqual([d.line for d in diagnostics[form]], [12, 3])
        self.assertEqual(diagnostics[form][0].code, "TS7006")
        self.assertEqual(diagnostics[form][0].message, "Parameter 'e' implicitly has an 'any' type.")

    def test_continuation_lines_are_appended(self) -> None:
        diagnostics = self.adapter._parse_output(TSC_OUTPUT, self.root)
        card = diagnostics[str(Path(self.root, "components/ui/Card.tsx"))]
        self.assertEqual(len(card), 1)
        self.assertEqual(
            card[0].message,
            "Type 'string' is not assignable to type 'number'. "
            "Type 'string' is not assignable to type 'number'.",
        )

    @patch("subprocess.run")
    def test_gather_diagnostics_runs_tsc_no_emit(self, mock_run) -> None:
        mock_run.return_value = MagicMock(stdout=TSC_OUTPUT, stderr="", returncode=2)
        with patch("pathlib.Path.is_file", return_value=True):
            diagnostics = self.adapter.gather_diagnostics(self.root, f"{self.root}/tsconfig.json")

        args = mock_run.call_args[0][0]
        self.assertEqual(args[:3], ["npx", "--no-install", "tsc"])
        self.assertIn("--noEmit", args)
        self.assertEqual(args[-2:], ["-p", f"{self.root}/tsconfig.json"])
        self.assertEqual(mock_run.call_args[1]["cwd"], self.root)
        self.assertEqual(len(diagnostics), 2)
        self.raw_log_port.log_raw.assert_called_once_with("tsc", TSC_OUTPUT, "")

    @patch("subprocess.run")
    def test_clean_run_returns_no_diagnostics(self, mock_run) -> None:
        mock_run.return_value = MagicMock(stdout="", stderr="", returncode=0)
        self.assertEqual(self.adapter.gather_diagnostics(self.root, "/nowhere/tsconfig.json"), {})
        self.assertNotIn("-p", mock_run.call_args[0][0])

    @patch("subprocess.run")
    def test_missing_executable_raises(self, mock_run) -> None:
        mock_run.side_effect = FileNotFoundError("npx")
        with self.assertRaises(CompilerUnavailableError):
            self.adapter.gather_diagnostics(self.root, "tsconfig.json")

    @patch("subprocess.run")
    def test_timeout_raises(self, mock_run) -> None:
        mock_run.side_effect = subprocess.TimeoutExpired(cmd="tsc", timeout=1)
        with self.assertRaises(CompilerUnavailableError):
            TscAdapter(timeout=1).gather_diagnostics(self.root, "tsconfig.json")

    @patch("subprocess.run")
    def test_failure_without_diagnostics_raises(self, mock_run) -> None:
        mock_run.return_value = MagicMock(
            stdout="", stderr="npm ERR! could not determine executable to run", returncode=1
        )
        with self.assertRaises(CompilerUnavailableError) as ctx:
            self.adapter.gather_diagnostics(self.root, "tsconfig.json")
        self.assertIn("could not determine executable", str(ctx.exception))

    @patch("subprocess.run")
    def test_custom_command(self, mock_run) -> None:
        mock_run.return_value = MagicMock(stdout="", stderr="", returncode=0)
        TscAdapter(command=("pnpm", "exec", "tsc")).gather_diagnostics(self.root, "tsconfig.json")
        self.assertEqual(mock_run.call_args[0][0][:3], ["pnpm", "exec", "tsc"])
