"""Run the built image (run) or a shell inside it (shell) with the JFrog credentials forwarded."""

from __future__ import annotations

import sys
from collections.abc import Mapping
from pathlib import Path

from mcp_jfrog_tooling.config import version_tag
from mcp_jfrog_tooling.helpers import MissingEnvironmentError, mask_secrets, require_env
from mcp_jfrog_tooling.runner import run_command

REQUIRED_ENV = ("JFROG_URL", "JFROG_ACCESS_TOKEN")
# Masked in echoed command lines.
SECRET_ENV = ("JFROG_ACCESS_TOKEN",)

SHELL = "/bin/sh"


def _credentials(env: Mapping[str, str] | None) -> dict[str, str] | None:
    try:
        return require_env(REQUIRED_ENV, env)
    except MissingEnvironmentError as e:
        print(f"❌ Error: {e}", file=sys.stderr)
        return None


def _env_args(creds: Mapping[str, str]) -> list[str]:
    return [x for name, value in creds.items() for x in ("-e", f"{name}={value}")]


def run_command_line(cfg: Mapping[str, str], creds: Mapping[str, str]) -> list[str]:
    port = cfg["port"]
    return [
        "docker",
        "run",
        "-it",
        "--rm",
        *_env_args(creds),
        "-p",
        f"{port}:{port}",
        version_tag(cfg),
    ]


def shell_command_line(cfg: Mapping[str, str], creds: Mapping[str, str]) -> list[str]:
    return ["docker", "run", "-it", "--rm", *_env_args(creds), version_tag(cfg), SHELL]


def _exec(
    cmd: list[str], creds: Mapping[str, str], project_root: Path, dry_run: bool
) -> int:
    display = mask_secrets(cmd, {n: creds[n] for n in SECRET_ENV})
    return run_command(cmd, project_root, dry_run=dry_run, display=display)


def run(
    cfg: Mapping[str, str],
    project_root: Path,
    env: Mapping[str, str] | None = None,
    dry_run: bool = False,
) -> int:
    """Start the image with JFROG_URL/JFROG_ACCESS_TOKEN and the service port forwarded.

    Returns 1 without starting a container if either variable is unset or empty.
    """
    creds = _credentials(env)
    if creds is None:
        return 1
    return _exec(run_command_line(cfg, creds), creds, project_root, dry_run)


def run_shell(
    cfg: Mapping[str, str],
    project_root: Path,
    env: Mapping[str, str] | None = None,
    dry_run: bool = False,
) -> int:
    """Interactive /bin/sh in the image. Same credential requirement as run."""
    creds = _credentials(env)
    if creds is None:
        return 1
    return _exec(shell_command_line(cfg, creds), creds, project_root, dry_run)
