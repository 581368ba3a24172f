"""Buildx builder lifecycle: create if absent (setup-builder), remove ignoring absence (clean-builder)."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from mcp_jfrog_tooling.runner import command_succeeds, run_command


def builder_exists(builder_name: str, project_root: Path) -> bool:
    return command_succeeds(["docker", "buildx", "inspect", builder_name], project_root)


def run_setup_builder(cfg: Mapping[str, str], project_root: Path, dry_run: bool = False) -> int:
    """Create the buildx builder unless it already exists. Returns 0 or the create exit status."""
    name = cfg["builder_name"]
    if builder_exists(name, project_root):
        print(f"Using existing buildx builder: {name}")
        return 0
    print(f"Creating buildx builder: {name}")
    return run_command(
        [
            "docker",
            "buildx",
            "create",
            "--name",
            name,
            "--driver",
            "docker-container",
            "--bootstrap",
        ],
        project_root,
        dry_run=dry_run,
    )


def run_clean_builder(cfg: Mapping[str, str], project_root: Path, dry_run: bool = False) -> int:
    """Remove the buildx builder. Always returns 0 (a missing builder is not an error)."""
    run_command(
        ["docker", "buildx", "rm", cfg["builder_name"]],
        project_root,
        dry_run=dry_run,
        suppress_output=True,
    )
    return 0
