"""Recursive finders for source, config, documentation, and workflow paths.

Each finder walks from the working directory with its own depth limit,
excluded directory names, and match rule, then prints the hits in traversal
order or a fixed sentinel line when there are none.
"""

from __future__ import annotations

import os

from .layout import kiro_dir
from .walk import WalkEntry, print_matches, walk_matches

SOURCE_EXTENSIONS = (
    ".py",
    ".js",
    ".ts",
    ".jsx",
    ".tsx",
    ".java",
    ".go",
    ".rs",
    ".c",
    ".cpp",
    ".h",
    ".html",
    ".css",
    ".md",
    ".cs",
)
CONFIG_FILENAMES = frozenset(
    {
        "package.json",
        "requirements.txt",
        "pom.xml",
        "Cargo.toml",
        "go.mod",
        "pyproject.toml",
        "tsconfig.json",
    }
)
DOC_SUFFIX = ".md"
DOC_BASENAME_PREFIXES = ("README", "CHANGELOG", "LICENSE")
SPECIAL_DIR_MARKERS = ("test", "spec", "api", "auth", "security")
CONFIG_NAME_INFIXES = (".config.", "rc.")

SHALLOW_MAX_DEPTH = 3
VENDOR_DIRS = ("node_modules", ".git")


def _is_source_file(entry: WalkEntry) -> bool:
    return entry.name.endswith(SOURCE_EXTENSIONS)


def _is_config_file(entry: WalkEntry) -> bool:
    return entry.name in CONFIG_FILENAMES


def _is_doc_file(entry: WalkEntry) -> bool:
    return entry.name.endswith(DOC_SUFFIX) or entry.name.startswith(DOC_BASENAME_PREFIXES)


def _is_special_dir(entry: WalkEntry) -> bool:
    lowered = entry.name.lower()
    return any(marker in lowered for marker in SPECIAL_DIR_MARKERS)


def _is_config_pattern_file(entry: WalkEntry) -> bool:
    name = entry.name
    if any(infix in name for infix in CONFIG_NAME_INFIXES):
        return True
    # dotfile rc files such as .eslintrc or .npmrc
    return name.startswith(".") and name.endswith("rc")


def find_project_files() -> None:
    matches = walk_matches(
        ".",
        excluded_dirs=(*VENDOR_DIRS, "dist"),
        match_file=_is_source_file,
    )
    print_matches(matches, "No source files found")


def find_config_files() -> None:
    matches = walk_matches(
        ".",
        max_depth=SHALLOW_MAX_DEPTH,
        excluded_dirs=VENDOR_DIRS,
        match_file=_is_config_file,
    )
    print_matches(matches, "No config files found")


def find_docs() -> None:
    """Find Markdown files and conventional README/CHANGELOG/LICENSE files.

    The Kiro directory is skipped so steering and spec documents are not
    reported as project documentation.
    """
    matches = walk_matches(
        ".",
        max_depth=SHALLOW_MAX_DEPTH,
        excluded_dirs=(*VENDOR_DIRS, os.path.basename(kiro_dir())),
        match_file=_is_doc_file,
    )
    print_matches(matches, "No documentation files found")


def find_special_dirs() -> None:
    matches = walk_matches(
        ".",
        excluded_dirs=VENDOR_DIRS,
        match_dir=_is_special_dir,
    )
    print_matches(matches, "No specialized directories found")


def find_config_patterns() -> None:
    matches = walk_matches(
        ".",
        excluded_dirs=("node_modules",),
        match_file=_is_config_pattern_file,
    )
    print_matches(matches, "No config files found")
