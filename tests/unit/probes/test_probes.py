"""Tests for file-existence and steering-count probes."""

from __future__ import annotations

import io
import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from ccsdd import probes
from ccsdd.layout import DEFAULT_STEERING_FILES


def _capture(func, *args) -> str:
    stdout = io.StringIO()
    with mock.patch("sys.stdout", stdout):
        func(*args)
    return stdout.getvalue()


class ProbeTestCase(unittest.TestCase):
    def setUp(self) -> None:
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        self.root = Path(tmp.name).resolve()
        previous_cwd = Path.cwd()
        os.chdir(self.root)
        self.addCleanup(os.chdir, previous_cwd)

    def make_steering(self, *names: str) -> Path:
        steering = self.root / ".kiro" / "steering"
        steering.mkdir(parents=True, exist_ok=True)
        for name in names:
            (steering / name).write_text(f"# {name}\n", encoding="utf-8")
        return steering


class CheckFileTests(ProbeTestCase):
    def test_existing_file_will_be_preserved(self) -> None:
        (self.root / "CLAUDE.md").write_text("hi", encoding="utf-8")

        self.assertEqual(_capture(probes.check_file, "CLAUDE.md"), f"{probes.FILE_EXISTS_MESSAGE}\n")

    def test_missing_file_will_be_created(self) -> None:
        self.assertEqual(_capture(probes.check_file, "nope.md"), f"{probes.FILE_MISSING_MESSAGE}\n")

    def test_missing_parent_directory_is_just_not_found(self) -> None:
        out = _capture(probes.check_file, "no/such/dir/file.md")

        self.assertEqual(out, f"{probes.FILE_MISSING_MESSAGE}\n")


class CountCustomSteeringTests(ProbeTestCase):
    def test_missing_directory_reports_message_but_number_reports_zero(self) -> None:
        self.assertEqual(_capture(probes.count_custom_steering), "📋 No steering directory yet\n")
        self.assertEqual(_capture(probes.count_custom_steering_number), "0\n")

    def test_only_default_files_reports_no_custom_files(self) -> None:
        self.make_steering(*DEFAULT_STEERING_FILES)

        self.assertEqual(_capture(probes.count_custom_steering), "📋 No custom files\n")
        self.assertEqual(_capture(probes.count_custom_steering_number), "0\n")

    def test_custom_markdown_files_are_counted(self) -> None:
        steering = self.make_steering(*DEFAULT_STEERING_FILES, "custom1.md", "custom2.md")
        (steering / "notes.txt").write_text("not markdown", encoding="utf-8")

        self.assertEqual(
            _capture(probes.count_custom_steering),
            "🔧 2 custom file(s) found - Will be preserved\n",
        )
        self.assertEqual(_capture(probes.count_custom_steering_number), "2\n")

    def test_count_follows_configured_kiro_directory(self) -> None:
        custom_root = self.root / "workflow"
        (custom_root / "steering").mkdir(parents=True)
        (custom_root / "steering" / "api.md").write_text("# api", encoding="utf-8")

        with mock.patch("ccsdd.layout.load_kiro_dir", return_value="workflow"):
            self.assertEqual(_capture(probes.count_custom_steering_number), "1\n")


if __name__ == "__main__":
    unittest.main()
