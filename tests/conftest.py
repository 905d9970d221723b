"""Pytest bootstrap for local source imports and config isolation.

The ``pytest`` console script can run with a sys.path that excludes the
repository root. Ensure ``import ccsdd`` resolves to the local package, and
point the user config at a throwaway path so a developer's own config never
leaks into test runs.
"""

from __future__ import annotations

import sys
from pathlib import Path
from unittest import mock

import pytest


PROJECT_ROOT = Path(__file__).resolve().parent.parent
PROJECT_ROOT_STR = str(PROJECT_ROOT)

if PROJECT_ROOT_STR not in sys.path:
    sys.path.insert(0, PROJECT_ROOT_STR)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path):
    config_path = tmp_path / "ccsdd-config" / "config.json"
    with mock.patch("ccsdd.config.CONFIG_PATH", config_path):
        yield config_path
