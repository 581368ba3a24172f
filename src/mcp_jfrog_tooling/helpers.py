"""Shared helpers for mcp_jfrog_tooling (errors, env checks, make-style assignments, masking).

Used by config, runner, docker and cli modules.
"""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Mapping

# --- Errors ---


class ToolingError(Exception):
    """Base class for errors raised by mcp_jfrog_tooling."""


class ConfigError(ToolingError):
    """Config file could not be loaded or has the wrong shape."""


class MissingEnvironmentError(ToolingError):
    """A required environment variable is unset or empty."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"{name} environment variable is required")


# --- Env ---


def require_env(names: Iterable[str], env: Mapping[str, str] | None = None) -> dict[str, str]:
    """Return {name: value} for names, in order. Raises MissingEnvironmentError on the first unset/empty one."""
    source = os.environ if env is None else env
    out: dict[str, str] = {}
    for name in names:
        value = source.get(name, "")
        if not value:
            raise MissingEnvironmentError(name)
        out[name] = value
    return out


# --- Make-style assignments ---

_ASSIGNMENT = re.compile(r"^([A-Za-z_][A-Za-z0-9_]*)=(.*)$", re.DOTALL)


def parse_assignment(arg: str) -> tuple[str, str] | None:
    """Parse NAME=value (as accepted by make on the command line). Returns None if arg is not one."""
    m = _ASSIGNMENT.match(arg)
    if not m:
        return None
    return m.group(1), m.group(2)


def split_assignments(argv: list[str]) -> tuple[dict[str, str], list[str]]:
    """Split argv into (NAME=value assignments, remaining args). Later assignments win."""
    assignments: dict[str, str] = {}
    rest: list[str] = []
    for a in argv:
        parsed = parse_assignment(a)
        if parsed is None:
            rest.append(a)
        else:
            assignments[parsed[0]] = parsed[1]
    return assignments, rest


# --- Masking ---

SECRET_MASK = "***"


def mask_secrets(cmd: list[str], secrets: Mapping[str, str]) -> list[str]:
    """Return cmd with each NAME=<value> argument (for name -> value in secrets) shown as NAME=SECRET_MASK.

    Only whole NAME=value arguments are masked; other arguments are left as-is.
    """
    masked = {f"{name}={value}": f"{name}={SECRET_MASK}" for name, value in secrets.items() if value}
    return [masked.get(part, part) for part in cmd]
