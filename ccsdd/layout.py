"""Kiro workspace layout: where steering documents and specs live."""

from __future__ import annotations

import os

from .config import load_kiro_dir

STEERING_SUBDIR = "steering"
SPECS_SUBDIR = "specs"
DEFAULT_STEERING_FILES = ("product.md", "tech.md", "structure.md")
STEERING_DOC_SUFFIX = ".md"
SPEC_MANIFEST_NAME = "spec.json"


def to_slash_path(path: str) -> str:
    """Normalize ``path`` like a path join would and force ``/`` separators."""
    return os.path.normpath(path).replace(os.sep, "/")


def kiro_dir() -> str:
    return to_slash_path(load_kiro_dir())


def steering_dir() -> str:
    return f"{kiro_dir()}/{STEERING_SUBDIR}"


def specs_dir() -> str:
    return f"{kiro_dir()}/{SPECS_SUBDIR}"


def is_steering_doc(name: str) -> bool:
    return name.endswith(STEERING_DOC_SUFFIX)


def list_steering_docs(directory: str) -> list[str]:
    """Return steering document names in directory order.

    Raises ``OSError`` when ``directory`` cannot be read.
    """
    return [name for name in os.listdir(directory) if is_steering_doc(name)]


def custom_steering_docs(directory: str) -> list[str]:
    """Return steering documents that are not one of the workflow defaults."""
    return [name for name in list_steering_docs(directory) if name not in DEFAULT_STEERING_FILES]
