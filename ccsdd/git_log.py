"""Git history and status queries around the steering directory.

Every query runs ``git`` synchronously with a fixed argument vector. A missing
binary, a non-zero exit or a timeout all read as "no answer" and are reported
as a fixed informational line, never as an error exit.
"""

from __future__ import annotations

import logging
import subprocess
import sys

from .config import load_git_timeout_seconds
from .layout import steering_dir

logger = logging.getLogger(__name__)

MAX_COMMITS_SINCE_STEERING = 20

NO_STEERING_COMMITS = "No previous steering commits"
NO_STEERING_UPDATE = "No previous steering update found"
NO_COMMITS_SINCE_UPDATE = "No commits since last steering update"
NOT_A_REPOSITORY = "Not a git repository"
WORKING_TREE_CLEAN = "Working tree clean"


def run_git(args: list[str]) -> str | None:
    """Return stdout of ``git <args>``, or ``None`` when git fails to answer."""
    command = ["git", *args]
    try:
        proc = subprocess.run(
            command,
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
            timeout=load_git_timeout_seconds(),
        )
    except (OSError, subprocess.SubprocessError) as exc:
        logger.debug("%s failed to run: %s", " ".join(command), exc)
        return None
    if proc.returncode != 0:
        logger.debug("%s exited with %d", " ".join(command), proc.returncode)
        return None
    return proc.stdout


def _write_line(text: str) -> None:
    sys.stdout.write(text + "\n")


def _steering_pathspec() -> str:
    return f"{steering_dir()}/"


def get_last_steering_commit() -> None:
    output = run_git(["log", "-1", "--oneline", "--", _steering_pathspec()])
    # an empty log means no steering commit yet, same as a git failure
    if output is None or not output.strip():
        _write_line(NO_STEERING_COMMITS)
        return
    _write_line(output.strip())


def get_commits_since_steering() -> None:
    """List up to 20 commits made after the last steering update.

    Not finding a steering commit is reported separately from git failing
    while listing the later commits.
    """
    last_commit = run_git(["log", "-1", "--format=%H", "--", _steering_pathspec()])
    last_commit = (last_commit or "").strip()
    if not last_commit:
        _write_line(NO_STEERING_UPDATE)
        return

    commits = run_git(
        [
            "log",
            "--oneline",
            f"{last_commit}..HEAD",
            f"--max-count={MAX_COMMITS_SINCE_STEERING}",
        ]
    )
    if commits is None:
        _write_line(NOT_A_REPOSITORY)
    elif commits.strip():
        _write_line(commits.strip())
    else:
        _write_line(NO_COMMITS_SINCE_UPDATE)


def get_git_status() -> None:
    output = run_git(["status", "--porcelain"])
    if output is None:
        _write_line(NOT_A_REPOSITORY)
    elif output.strip():
        # keep the leading status column of the first porcelain row; trim only the tail
        _write_line(output.rstrip())
    else:
        _write_line(WORKING_TREE_CLEAN)
