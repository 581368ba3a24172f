"""Build and push the multi-architecture image with docker buildx (build / push)."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from mcp_jfrog_tooling.config import image_tags, platform_list
from mcp_jfrog_tooling.docker.builder import run_setup_builder
from mcp_jfrog_tooling.runner import run_command


def buildx_command(cfg: Mapping[str, str], context: str = ".") -> list[str]:
    """docker buildx build --builder B --platform P --tag version --tag latest --push context."""
    return [
        "docker",
        "buildx",
        "build",
        "--builder",
        cfg["builder_name"],
        "--platform",
        ",".join(platform_list(cfg)),
        *[x for t in image_tags(cfg) for x in ("--tag", t)],
        "--push",
        context,
    ]


def run(cfg: Mapping[str, str], project_root: Path, dry_run: bool = False) -> int:
    """Ensure builder, then buildx build --push. Returns 0 or the failing command's exit status."""
    rc = run_setup_builder(cfg, project_root, dry_run=dry_run)
    if rc != 0:
        return rc
    print(f"Building multi-arch image for platforms: {','.join(platform_list(cfg))}")
    return run_command(buildx_command(cfg), project_root, dry_run=dry_run)


# buildx pushes during build; push is the same operation.
run_push = run
