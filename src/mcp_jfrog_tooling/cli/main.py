"""Main CLI entry point for mcp-jfrog image tooling."""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Callable
from pathlib import Path

from mcp_jfrog_tooling.cli.help import print_help, usage_text
from mcp_jfrog_tooling.cli.parse_common import (
    parse_assignments,
    parse_flags,
    parse_switches,
    path_resolver,
)
from mcp_jfrog_tooling.config import load_config
from mcp_jfrog_tooling.docker import (
    run_build_local,
    run_build_multiarch,
    run_clean,
    run_clean_builder,
    run_container,
    run_push,
    run_setup_builder,
    run_shell,
)
from mcp_jfrog_tooling.helpers import ConfigError
from mcp_jfrog_tooling.npm import run_tests

log = logging.getLogger(__name__)


class Context:
    """Resolved invocation: config, project root, environment for run/shell, dry-run."""

    def __init__(
        self,
        cfg: dict[str, str],
        project_root: Path,
        env: dict[str, str],
        dry_run: bool = False,
    ) -> None:
        self.cfg = cfg
        self.project_root = project_root
        self.env = env
        self.dry_run = dry_run


COMMANDS: dict[str, Callable[[Context], int]] = {
    "build": lambda c: run_build_multiarch(c.cfg, c.project_root, dry_run=c.dry_run),
    "push": lambda c: run_push(c.cfg, c.project_root, dry_run=c.dry_run),
    "build-local": lambda c: run_build_local(c.cfg, c.project_root, dry_run=c.dry_run),
    "setup-builder": lambda c: run_setup_builder(c.cfg, c.project_root, dry_run=c.dry_run),
    "run": lambda c: run_container(c.cfg, c.project_root, env=c.env, dry_run=c.dry_run),
    "shell": lambda c: run_shell(c.cfg, c.project_root, env=c.env, dry_run=c.dry_run),
    "test": lambda c: run_tests(c.cfg, c.project_root, dry_run=c.dry_run),
    "clean": lambda c: run_clean(c.cfg, c.project_root, dry_run=c.dry_run),
    "clean-builder": lambda c: run_clean_builder(c.cfg, c.project_root, dry_run=c.dry_run),
    "help": lambda c: print_help(c.cfg),
}


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def run_commands(commands: list[str], ctx: Context) -> int:
    """Run commands in order, stopping at the first non-zero status (which is returned)."""
    for name in commands:
        log.debug("Running target %s", name)
        rc = COMMANDS[name](ctx)
        if rc != 0:
            return rc
    return 0


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        sys.stderr.write(usage_text())
        sys.exit(1)

    # Value flags first so a flag value containing '=' is not read as NAME=value.
    parsed, rest = parse_flags(
        argv,
        ("project_root", "--project-root", Path.cwd, path_resolver),
        ("config_path", "--config", None, path_resolver),
        ("registry", "--registry", None, None),
        ("image_name", "--image-name", None, None),
        ("version", "--version", None, None),
        ("platforms", "--platforms", None, None),
    )
    switches, rest = parse_switches(
        rest,
        ("dry_run", ("--dry-run", "-n")),
        ("verbose", ("--verbose", "-v")),
    )
    assignments, rest = parse_assignments(rest)
    _configure_logging(switches["verbose"])

    for a in rest:
        if a.startswith("-"):
            print(f"Error: Unknown argument: {a}", file=sys.stderr)
            print("Run 'mcp-jfrog help' for usage.", file=sys.stderr)
            sys.exit(1)
    unknown = [a for a in rest if a not in COMMANDS]
    if unknown:
        print(f"Error: Unknown command: {unknown[0]}", file=sys.stderr)
        print("Run 'mcp-jfrog help' for usage.", file=sys.stderr)
        sys.exit(1)
    if not rest:
        sys.stderr.write(usage_text())
        sys.exit(1)

    # Flags win over NAME=value when both are given.
    overrides = dict(assignments)
    for key in ("registry", "image_name", "version", "platforms"):
        if parsed[key] is not None:
            overrides[key] = parsed[key]

    project_root: Path = parsed["project_root"]
    try:
        cfg = load_config(project_root, config_path=parsed["config_path"], overrides=overrides)
    except ConfigError as e:
        print(f"❌ {e}", file=sys.stderr)
        sys.exit(1)

    env = {**os.environ, **assignments}
    ctx = Context(cfg, project_root, env, dry_run=switches["dry_run"])
    sys.exit(run_commands(rest, ctx))


if __name__ == "__main__":
    main()
