"""Command registry mapping verbs to handlers and their positional parameters."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from . import finders, git_log, listing, probes


class CommandUsageError(ValueError):
    """Raised when a command receives the wrong number of arguments."""


@dataclass(frozen=True)
class Command:
    """One dispatchable verb.

    ``params`` names the required positionals and ``optional_params`` the
    ones that may be omitted, in call order.
    """

    name: str
    handler: Callable[..., None]
    description: str
    params: tuple[str, ...] = ()
    optional_params: tuple[str, ...] = ()

    @property
    def signature(self) -> str:
        parts = [self.name]
        parts.extend(f"<{param}>" for param in self.params)
        parts.extend(f"[{param}]" for param in self.optional_params)
        return " ".join(parts)

    def check_arity(self, args: list[str]) -> None:
        """Reject calls missing a required positional; surplus ones are allowed."""
        if len(args) < len(self.params):
            missing = ", ".join(f"<{param}>" for param in self.params[len(args) :])
            raise CommandUsageError(f"missing argument {missing} (usage: {self.signature})")

    def invoke(self, args: list[str]) -> None:
        self.check_arity(args)
        # extra positionals are dropped, not an error
        self.handler(*args[: len(self.params) + len(self.optional_params)])


COMMANDS: tuple[Command, ...] = (
    Command("check-file", probes.check_file, "Check if file exists", params=("path",)),
    Command("count-custom-steering", probes.count_custom_steering, "Count custom steering files"),
    Command(
        "count-custom-steering-number",
        probes.count_custom_steering_number,
        "Count custom steering files (number only)",
    ),
    Command("find-project-files", finders.find_project_files, "Find source code files"),
    Command("find-config-files", finders.find_config_files, "Find configuration files"),
    Command("find-docs", finders.find_docs, "Find documentation files"),
    Command("find-special-dirs", finders.find_special_dirs, "Find specialized directories"),
    Command("find-config-patterns", finders.find_config_patterns, "Find config pattern files"),
    Command("list-spec-dir", listing.list_spec_dir, "List spec directory contents", params=("name",)),
    Command("list-all-specs", listing.list_all_specs, "List all spec directories"),
    Command("list-steering-files", listing.list_steering_files, "List steering files"),
    Command("find-active-specs", listing.find_active_specs, "Find active specifications"),
    Command(
        "get-last-steering-commit",
        git_log.get_last_steering_commit,
        "Show last commit touching steering files",
    ),
    Command(
        "get-commits-since-steering",
        git_log.get_commits_since_steering,
        "List commits since last steering update",
    ),
    Command("get-git-status", git_log.get_git_status, "Show git working tree status"),
    Command("ls-dir", listing.ls_dir, "List directory contents", optional_params=("dir",)),
)

_COMMANDS_BY_NAME: dict[str, Command] = {command.name: command for command in COMMANDS}


def get_command(name: str) -> Command | None:
    """Return the registered command for ``name`` or ``None``."""
    return _COMMANDS_BY_NAME.get(name)


__all__ = ["Command", "CommandUsageError", "COMMANDS", "get_command"]
