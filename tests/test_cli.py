import io
import json
import tempfile
import unittest
from pathlib import Path

from rich.console import Console

from redline.cli import main


class CliTests(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp_dir = Path(self._tmp.name)
        self.config_file = self.tmp_dir / "redline.toml"
        self.target = self.tmp_dir / "notes.txt"
        self.target.write_text("todo: one\ntodo: two\n", encoding="utf-8")

    def tearDown(self):
        self._tmp.cleanup()

    def run_cli(self, *argv):
        buffer = io.StringIO()
        console = Console(file=buffer, width=200, color_system=None)
        code = main(["--config", str(self.config_file), *argv], console=console)
        return code, buffer.getvalue()

    def test_apply_writes_file_and_prints_report(self):
        code, output = self.run_cli("apply", str(self.target), "todo", "done", "-n", "1")
        self.assertEqual(code, 0)
        self.assertEqual(json.loads(output)["occurrencesApplied"], 1)
        self.assertEqual(self.target.read_text(encoding="utf-8"), "done: one\ntodo: two\n")

    def test_preview_raw_leaves_file_alone(self):
        code, output = self.run_cli("apply", str(self.target), "todo", "done", "--preview", "--raw")
        self.assertEqual(code, 0)
        self.assertTrue(output.startswith("SUCCESS: Preview mode"))
        self.assertEqual(self.target.read_text(encoding="utf-8"), "todo: one\ntodo: two\n")

    def test_failure_exit_code(self):
        code, output = self.run_cli("apply", str(self.tmp_dir / "missing.txt"), "x", "--raw")
        self.assertEqual(code, 1)
        self.assertTrue(output.startswith("FAILED:"))

    def test_replace_command(self):
        code, output = self.run_cli("replace", str(self.target), "todo", "done", "--no-backup")
        self.assertEqual(code, 0)
        self.assertIn("Successfully replaced 2 occurrence(s)", output)
        self.assertFalse(Path(f"{self.target}.bak").exists())

    def test_save_config_persists_defaults(self):
        code, _ = self.run_cli("--save-config", "apply", str(self.target), "zzz", "--preview-lines", "6")
        self.assertEqual(code, 0)
        self.assertIn("preview_lines = 6", self.config_file.read_text(encoding="utf-8"))

    def test_schema_command(self):
        code, output = self.run_cli("schema", "--category", "ContentManipulation")
        self.assertEqual(code, 0)
        names = [schema["function"]["name"] for schema in json.loads(output)]
        self.assertEqual(names, ["apply_diff", "search_and_replace"])


if __name__ == "__main__":
    unittest.main()
