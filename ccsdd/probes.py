"""Existence and counting probes over the working directory and steering docs."""

from __future__ import annotations

import os

from .layout import custom_steering_docs, steering_dir

FILE_EXISTS_MESSAGE = "✅ EXISTS - Will be updated preserving custom content"
FILE_MISSING_MESSAGE = "📝 Not found - Will be created"
NO_STEERING_DIR_MESSAGE = "📋 No steering directory yet"
NO_CUSTOM_FILES_MESSAGE = "📋 No custom files"


def check_file(path: str) -> None:
    """Report whether ``path`` exists and will be preserved or created."""
    if os.path.exists(path):
        print(FILE_EXISTS_MESSAGE)
    else:
        print(FILE_MISSING_MESSAGE)


def count_custom_steering() -> None:
    """Report how many non-default steering documents exist."""
    directory = steering_dir()
    if not os.path.exists(directory):
        print(NO_STEERING_DIR_MESSAGE)
        return

    count = len(custom_steering_docs(directory))
    if count > 0:
        print(f"🔧 {count} custom file(s) found - Will be preserved")
    else:
        print(NO_CUSTOM_FILES_MESSAGE)


def count_custom_steering_number() -> None:
    """Print the bare count of non-default steering documents.

    A missing steering directory counts as ``0`` rather than a message.
    """
    directory = steering_dir()
    if not os.path.exists(directory):
        print("0")
        return
    print(str(len(custom_steering_docs(directory))))
