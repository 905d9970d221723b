"""Recursive directory walking with per-directory scan results.

Every finder shares the same traversal: pre-order descent in the order the
OS reports entries, excluded directory names pruned before they are read,
and unreadable directories folded in as empty instead of aborting the walk.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable, Collection
from dataclasses import dataclass

from .layout import to_slash_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WalkEntry:
    """One directory child with its slash-normalized relative path."""

    name: str
    path: str
    is_dir: bool
    is_file: bool


@dataclass(frozen=True)
class DirectoryScan:
    """Outcome of reading one directory: its entries or the reason it was skipped."""

    directory: str
    entries: tuple[WalkEntry, ...] = ()
    error: OSError | None = None

    @property
    def skipped(self) -> bool:
        return self.error is not None


def scan_directory(directory: str) -> DirectoryScan:
    """Read the immediate children of ``directory``.

    Directory symlinks are reported as neither file nor directory so walks
    never follow them into cycles. A child whose type cannot be determined is
    dropped on its own; a directory that cannot be opened yields a skipped scan.
    """
    entries: list[WalkEntry] = []
    try:
        with os.scandir(directory) as children:
            for child in children:
                try:
                    is_dir = child.is_dir(follow_symlinks=False)
                    is_file = not is_dir and child.is_file()
                except OSError as exc:
                    logger.debug("skipping unreadable entry %s: %s", child.path, exc)
                    continue
                entries.append(
                    WalkEntry(
                        name=child.name,
                        path=to_slash_path(os.path.join(directory, child.name)),
                        is_dir=is_dir,
                        is_file=is_file,
                    )
                )
    except OSError as exc:
        return DirectoryScan(directory=directory, error=exc)
    return DirectoryScan(directory=directory, entries=tuple(entries))


def walk_matches(
    root: str = ".",
    *,
    max_depth: int | None = None,
    excluded_dirs: Collection[str] = (),
    match_file: Callable[[WalkEntry], bool] | None = None,
    match_dir: Callable[[WalkEntry], bool] | None = None,
) -> list[str]:
    """Collect relative paths under ``root`` accepted by the match callbacks.

    ``root`` itself sits at depth 0; directories deeper than ``max_depth`` are
    never read. A directory named in ``excluded_dirs`` is neither matched nor
    read. A matching directory is recorded and still descended into.
    """
    matches: list[str] = []
    if os.path.basename(os.path.normpath(root)) in excluded_dirs:
        return matches

    def visit(directory: str, depth: int) -> None:
        if max_depth is not None and depth > max_depth:
            return
        scan = scan_directory(directory)
        if scan.skipped:
            logger.debug("skipping unreadable directory %s: %s", directory, scan.error)
            return

        for entry in scan.entries:
            if entry.is_dir:
                if entry.name in excluded_dirs:
                    continue
                if match_dir is not None and match_dir(entry):
                    matches.append(entry.path)
                visit(entry.path, depth + 1)
            elif entry.is_file and match_file is not None and match_file(entry):
                matches.append(entry.path)

    visit(root, 0)
    return matches


def print_matches(matches: list[str], empty_message: str | None) -> None:
    """Print one path per line, or ``empty_message`` when nothing matched.

    ``empty_message=None`` keeps an empty result silent.
    """
    if matches:
        print("\n".join(matches))
    elif empty_message is not None:
        print(empty_message)


__all__ = [
    "WalkEntry",
    "DirectoryScan",
    "scan_directory",
    "walk_matches",
    "print_matches",
]
