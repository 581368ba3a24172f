"""Delegate to the application's test runner (npm test by default)."""

from __future__ import annotations

import shlex
import sys
from collections.abc import Mapping
from pathlib import Path

from mcp_jfrog_tooling.runner import run_command


def run_tests(cfg: Mapping[str, str], project_root: Path, dry_run: bool = False) -> int:
    """Run cfg['test_command'] in project_root. Returns the runner's exit status."""
    cmd = shlex.split(cfg["test_command"])
    if not cmd:
        print("❌ test_command is empty", file=sys.stderr)
        return 1
    return run_command(cmd, project_root, dry_run=dry_run)
