"""Synthetic ``ls -l`` style listings for specs, steering docs, and any directory.

Listing lines use fixed permission/owner placeholders so output is identical
on every platform; only type, size, and modification time come from ``stat``.
"""

from __future__ import annotations

import logging
import os
import stat as stat_module
from collections.abc import Iterator
from dataclasses import dataclass
from datetime import datetime, timezone

from .layout import SPEC_MANIFEST_NAME, list_steering_docs, specs_dir, steering_dir, to_slash_path
from .walk import WalkEntry, print_matches, walk_matches

logger = logging.getLogger(__name__)

DIRECTORY_SIZE_SENTINEL = 4096
READY_MARKERS = ('"implementation_ready": true', '"implementation_ready":true')
UNKNOWN_ENTRY_FIELDS = "-????????? ? ? ? ? ?"


@dataclass(frozen=True)
class EntryStat:
    """Type, size and modification time of one listed entry."""

    is_dir: bool
    size: int
    mtime: float

    @property
    def type_flag(self) -> str:
        return "d" if self.is_dir else "-"

    @property
    def date(self) -> str:
        return datetime.fromtimestamp(self.mtime, tz=timezone.utc).strftime("%Y-%m-%d")

    @property
    def time(self) -> str:
        return datetime.fromtimestamp(self.mtime).strftime("%H:%M")


def stat_entry(path: str) -> EntryStat:
    """Stat ``path`` following symlinks; raises ``OSError`` on failure."""
    st = os.stat(path)
    return EntryStat(
        is_dir=stat_module.S_ISDIR(st.st_mode),
        size=int(st.st_size),
        mtime=float(st.st_mtime),
    )


def _iter_entry_stats(directory: str, names: list[str]) -> Iterator[tuple[str, EntryStat]]:
    """Yield ``(name, EntryStat)`` pairs, dropping entries that fail to stat."""
    for name in names:
        try:
            yield name, stat_entry(os.path.join(directory, name))
        except OSError as exc:
            logger.debug("skipping %s in %s: %s", name, directory, exc)


def format_spec_line(name: str, entry: EntryStat) -> str:
    size = "-" if entry.is_dir else str(entry.size)
    return f"{entry.type_flag}rw-rw-rw- 1 user user {size} {entry.date} {name}"


def format_steering_line(name: str, entry: EntryStat) -> str:
    return f"-rw-rw-rw- 1 user user {entry.size} {entry.date} {name}"


def format_ls_line(name: str, entry: EntryStat) -> str:
    size = DIRECTORY_SIZE_SENTINEL if entry.is_dir else entry.size
    return f"{entry.type_flag}rwxrwxrwx 1 user user {size} {entry.date} {entry.time} {name}"


def _print_spec_listing(directory: str) -> None:
    for name, entry in _iter_entry_stats(directory, os.listdir(directory)):
        print(format_spec_line(name, entry))


def list_spec_dir(spec_name: str) -> None:
    """List the immediate entries of one spec directory."""
    spec_path = to_slash_path(os.path.join(specs_dir(), spec_name))
    if not os.path.exists(spec_path):
        print(f"Directory not found: {spec_path}")
        return
    _print_spec_listing(spec_path)


def list_all_specs() -> None:
    directory = specs_dir()
    if not os.path.exists(directory):
        print("No specs directory found")
        return
    _print_spec_listing(directory)


def list_steering_files() -> None:
    directory = steering_dir()
    if not os.path.exists(directory):
        print("No steering directory found")
        return
    for name, entry in _iter_entry_stats(directory, list_steering_docs(directory)):
        print(format_steering_line(name, entry))


def _is_ready_manifest(entry: WalkEntry) -> bool:
    if entry.name != SPEC_MANIFEST_NAME:
        return False
    try:
        with open(entry.path, encoding="utf-8", errors="replace") as handle:
            content = handle.read()
    except OSError as exc:
        logger.debug("skipping unreadable manifest %s: %s", entry.path, exc)
        return False
    return any(marker in content for marker in READY_MARKERS)


def find_active_specs() -> None:
    """Print every ``spec.json`` under the specs root marked implementation-ready.

    Prints nothing at all when the specs root is missing or nothing matches.
    """
    directory = specs_dir()
    if not os.path.exists(directory):
        return
    print_matches(walk_matches(directory, match_file=_is_ready_manifest), None)


def ls_dir(directory: str = ".") -> None:
    """Print an ``ls -la`` style listing of ``directory``.

    ``.`` and ``..`` come first and describe the directory and its parent.
    An entry that cannot be stat'ed degrades to a placeholder row.
    """
    if not os.path.exists(directory):
        print(f"Directory not found: {directory}")
        return
    try:
        names = os.listdir(directory)
    except OSError as exc:
        print(f"Error reading directory: {exc.strerror or exc}")
        return

    parent = os.path.dirname(os.path.abspath(directory))
    rows = [(".", directory), ("..", parent)]
    rows.extend((name, os.path.join(directory, name)) for name in names)
    for name, path in rows:
        try:
            entry = stat_entry(path)
        except OSError as exc:
            logger.debug("cannot stat %s: %s", path, exc)
            print(f"{UNKNOWN_ENTRY_FIELDS} {name}")
            continue
        print(format_ls_line(name, entry))
