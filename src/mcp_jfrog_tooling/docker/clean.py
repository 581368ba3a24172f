"""Remove locally tagged images (clean)."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from mcp_jfrog_tooling.config import image_tags
from mcp_jfrog_tooling.runner import run_command


def run(cfg: Mapping[str, str], project_root: Path, dry_run: bool = False) -> int:
    """docker rmi version latest, output discarded. Returns 0 even if the images do not exist."""
    run_command(
        ["docker", "rmi", *image_tags(cfg)],
        project_root,
        dry_run=dry_run,
        suppress_output=True,
    )
    return 0
