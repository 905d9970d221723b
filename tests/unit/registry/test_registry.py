"""Tests for the command registry and argument-count checks."""

from __future__ import annotations

import unittest
from unittest import mock

from ccsdd.registry import COMMANDS, Command, CommandUsageError, get_command

EXPECTED_VERBS = {
    "check-file",
    "count-custom-steering",
    "count-custom-steering-number",
    "find-project-files",
    "find-config-files",
    "find-docs",
    "find-special-dirs",
    "find-config-patterns",
    "list-spec-dir",
    "list-all-specs",
    "list-steering-files",
    "find-active-specs",
    "get-last-steering-commit",
    "get-commits-since-steering",
    "get-git-status",
    "ls-dir",
}


class RegistryTests(unittest.TestCase):
    def test_registry_exposes_every_verb_once(self) -> None:
        names = [command.name for command in COMMANDS]

        self.assertEqual(len(names), len(set(names)))
        self.assertEqual(set(names), EXPECTED_VERBS)

    def test_lookup_is_by_exact_name(self) -> None:
        self.assertIs(get_command("find-docs"), next(c for c in COMMANDS if c.name == "find-docs"))
        self.assertIsNone(get_command("find_docs"))
        self.assertIsNone(get_command("--help"))

    def test_signature_marks_required_and_optional_params(self) -> None:
        self.assertEqual(get_command("check-file").signature, "check-file <path>")
        self.assertEqual(get_command("ls-dir").signature, "ls-dir [dir]")
        self.assertEqual(get_command("get-git-status").signature, "get-git-status")

    def test_invoke_requires_params_and_drops_surplus_args(self) -> None:
        handler = mock.Mock()
        command = Command("demo", handler, "Demo", params=("a",), optional_params=("b",))

        with self.assertRaises(CommandUsageError):
            command.invoke([])
        handler.assert_not_called()

        command.invoke(["1"])
        command.invoke(["1", "2"])
        command.invoke(["1", "2", "3"])
        self.assertEqual(
            handler.call_args_list,
            [mock.call("1"), mock.call("1", "2"), mock.call("1", "2")],
        )


if __name__ == "__main__":
    unittest.main()
