"""Build the image for the host architecture only (build-local)."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from mcp_jfrog_tooling.config import image_tags
from mcp_jfrog_tooling.runner import run_command


def run(cfg: Mapping[str, str], project_root: Path, dry_run: bool = False) -> int:
    """docker build -t version -t latest . Returns the docker exit status."""
    print("Building image for local architecture...")
    cmd = ["docker", "build", *[x for t in image_tags(cfg) for x in ("-t", t)], "."]
    return run_command(cmd, project_root, dry_run=dry_run)
