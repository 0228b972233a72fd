"""Unit tests for the command-line interface."""

import contextlib
import io
import os
import tempfile
import unittest
from unittest import mock
from rich.console import Console
from argsfile import commands
from argsfile.main import run


class TestCommands(unittest.TestCase):
    """Test command-line interface functionality."""

    def get_tests_path(self, test_dir: str) -> str:
        """Get the path to a test directory."""
        current_dir = os.path.dirname(os.path.abspath(__file__))
        tests_dir = os.path.dirname(current_dir)
        return os.path.join(tests_dir, test_dir)

    def setUp(self):
        self.output = io.StringIO()
        console = Console(file=self.output, width=120, color_system=None)
        patcher = mock.patch.object(commands, "console", console)
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_read(self):
        """Test printing the args of an args file."""
        path = os.path.join(self.get_tests_path("testdata"), "expand.args")
        commands.main(["read", path])
        printed = self.output.getvalue()
        self.assertIn("0. '-i'", printed)
        self.assertIn("3. 'third value'", printed)
        self.assertIn("4. 'foo=bar'", printed)

    def test_read_without_file(self):
        """Test that read requires a file."""
        with self.assertRaises(SystemExit) as ctx:
            commands.main(["read"])
        self.assertEqual(1, ctx.exception.code)

    def test_list(self):
        """Test listing the args files of an application."""
        commands.main(["list", "-d", self.get_tests_path("testdata"), "testapp"])
        printed = self.output.getvalue()
        self.assertIn("testapp.auto.args", printed)
        self.assertIn("default", printed)
        self.assertIn("testapp.fr.args", printed)
        self.assertNotIn("otherapp.args", printed)

    def test_list_without_files(self):
        """Test listing an application without args files."""
        commands.main(["list", "--dir", self.get_tests_path("testdata"), "unknown"])
        self.assertIn("No args files for unknown", self.output.getvalue())

    def test_resolve(self):
        """Test resolving an argument vector with --args."""
        path = os.path.join(self.get_tests_path("testdata"), "expand.args")
        commands.main(["resolve", "app", "-v", "--args", path, "--no-args"])
        printed = self.output.getvalue()
        self.assertIn("resolved args:", printed)
        self.assertIn("0. 'app'", printed)
        self.assertIn("1. '-v'", printed)
        self.assertIn("2. '-i'", printed)
        self.assertIn("7. '--no-args'", printed)

    def test_resolve_escapes_control_characters(self):
        """Test that tabs and newlines are printed escaped."""
        path = os.path.join(self.get_tests_path("testdata"), "expand.args")
        with mock.patch.object(
            commands, "resolve_args", return_value=["app", "a\tb\nc"]
        ):
            commands.main(["resolve", "app", "--args", path])
        self.assertIn("1. 'a\\tb\\nc'", self.output.getvalue())

    def test_version(self):
        """Test printing the version."""
        commands.main(["version"])
        self.assertEqual("1.0\n", self.output.getvalue())

    def test_usage(self):
        """Test printing the usage."""
        for argv in [[], ["help"], ["-h"], ["list", "--help"]]:
            commands.main(argv)
        self.assertIn("Usage: argsfile", self.output.getvalue())

    def test_run_reports_errors(self):
        """Test that the entry point reports errors and exits with 1."""
        stderr = io.StringIO()
        with mock.patch("sys.argv", ["argsfile", "resolve", "app", "--args"]):
            with contextlib.redirect_stderr(stderr):
                with self.assertRaises(SystemExit) as ctx:
                    run()
        self.assertEqual(1, ctx.exception.code)
        self.assertIn("Error: missing --args filepath value", stderr.getvalue())

    def test_run_reads_invalid_utf8(self):
        """Test that an args file with non UTF-8 bytes is read without error."""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "latin1.args")
            with open(path, "wb") as f:
                f.write(b"--name\n|= J\xfcrgen\n")
            stderr = io.StringIO()
            with mock.patch("sys.argv", ["argsfile", "read", path]):
                with contextlib.redirect_stderr(stderr):
                    run()
        self.assertEqual("", stderr.getvalue())
        self.assertIn("0. '--name=J\\udcfcrgen'", self.output.getvalue())

    def test_run_reports_unexpected_errors(self):
        """Test that any error is reported instead of a traceback."""
        stderr = io.StringIO()
        with mock.patch.object(commands, "resolve_args", side_effect=ValueError("boom")):
            with mock.patch("sys.argv", ["argsfile", "resolve", "app"]):
                with contextlib.redirect_stderr(stderr):
                    with self.assertRaises(SystemExit) as ctx:
                        run()
        self.assertEqual(1, ctx.exception.code)
        self.assertIn("Error: boom", stderr.getvalue())

    def test_run_reports_missing_file(self):
        """Test that a missing args file is reported."""
        path = os.path.join(self.get_tests_path("testdata"), "missing.args")
        stderr = io.StringIO()
        with mock.patch("sys.argv", ["argsfile", "read", path]):
            with contextlib.redirect_stderr(stderr):
                with self.assertRaises(SystemExit) as ctx:
                    run()
        self.assertEqual(1, ctx.exception.code)
        self.assertIn("Error:", stderr.getvalue())


if __name__ == "__main__":
    unittest.main()
