"""Usage text for ``mcp-jfrog help``."""

from __future__ import annotations

import sys
from collections.abc import Mapping
from typing import TextIO

from mcp_jfrog_tooling.config import DEFAULT_IMAGE_CONFIG

TARGETS: list[tuple[str, list[tuple[str, str]]]] = [
    (
        "Build targets",
        [
            ("build", "Build and push multi-arch image (amd64 + arm64)"),
            ("build-local", "Build for local architecture only (faster)"),
            ("setup-builder", "Create/verify buildx builder exists"),
            ("push", "Alias for 'build'"),
        ],
    ),
    (
        "Run targets",
        [
            ("run", "Run container (requires JFROG_URL, JFROG_ACCESS_TOKEN)"),
            ("shell", "Start interactive shell in container"),
        ],
    ),
    (
        "Other targets",
        [
            ("test", "Run npm tests"),
            ("clean", "Remove local Docker images"),
            ("clean-builder", "Remove buildx builder"),
            ("help", "Show this help message"),
        ],
    ),
]

_VARIABLES = [
    ("IMAGE_REGISTRY", "registry", "Docker registry"),
    ("IMAGE_NAME", "image_name", "Image name"),
    ("VERSION", "version", "Image version tag"),
    ("PLATFORMS", "platforms", "Target platforms for build"),
]


def usage_text(cfg: Mapping[str, str] | None = None) -> str:
    """Help text. Shows defaults and, when cfg differs, the effective value."""
    lines = [
        "MCP JFrog Docker Build Targets",
        "",
        "Usage: mcp-jfrog [options] <target> [<target> ...] [NAME=value ...]",
        "There is no default target: with no target this help is printed and the exit status is 1.",
        "Run 'mcp-jfrog build' to build and push.",
        "",
        "Configuration (set via environment, NAME=value arguments, or mcp-jfrog.yaml):",
    ]
    for var, key, desc in _VARIABLES:
        line = f"  {var:<15} - {desc} (default: {DEFAULT_IMAGE_CONFIG[key]})"
        if cfg is not None and cfg.get(key) != DEFAULT_IMAGE_CONFIG[key]:
            line += f" [current: {cfg[key]}]"
        lines.append(line)
    lines += [
        "",
        "Options:",
        "  --project-root PATH  - Build context and working directory (default: cwd)",
        "  --config PATH        - Config file (default: <project-root>/mcp-jfrog.yaml)",
        "  --registry, --image-name, --version, --platforms VALUE",
        "                       - Same as the corresponding NAME=value",
        "  --dry-run            - Print commands instead of running them",
        "  -v, --verbose        - Debug logging",
    ]
    for title, targets in TARGETS:
        lines += ["", f"{title}:"]
        lines += [f"  {name:<15} - {desc}" for name, desc in targets]
    lines += [
        "",
        "Examples:",
        "  mcp-jfrog build IMAGE_REGISTRY=ghcr.io/myorg VERSION=1.0.0",
        "  mcp-jfrog build-local",
        "  mcp-jfrog run JFROG_URL=https://myinstance.jfrog.io JFROG_ACCESS_TOKEN=xxx",
    ]
    return "\n".join(lines) + "\n"


def print_help(cfg: Mapping[str, str] | None = None, file: TextIO | None = None) -> int:
    (file or sys.stdout).write(usage_text(cfg))
    return 0
