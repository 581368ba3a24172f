"""Shared CLI argument parsing: value flags (--registry X), boolean switches, NAME=value assignments."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

from mcp_jfrog_tooling.helpers import split_assignments


def parse_flags(
    argv: list[str],
    *specs: tuple[str, str, Any, Callable[[str], Any] | None],
) -> tuple[dict[str, Any], list[str]]:
    """Parse optional --flag value from argv in one pass.

    Each spec is (key, flag_str, default, converter).
    E.g. ("project_root", "--project-root", Path.cwd, path_resolver).
    converter can be None for string values.
    Returns (dict of key -> value, remaining argv).
    """
    result: dict[str, Any] = {}
    for key, _flag, default, _converter in specs:
        result[key] = default() if callable(default) else default

    rest: list[str] = []
    i = 0
    while i < len(argv):
        matched = False
        for key, flag_str, _default, converter in specs:
            if argv[i] == flag_str and i + 1 < len(argv):
                result[key] = converter(argv[i + 1]) if converter else argv[i + 1]
                i += 2
                matched = True
                break
        if not matched:
            rest.append(argv[i])
            i += 1
    return result, rest


def parse_switches(
    argv: list[str],
    *specs: tuple[str, tuple[str, ...]],
) -> tuple[dict[str, bool], list[str]]:
    """Pop boolean switches. Each spec is (key, (flag, alias, ...)). Returns (key -> bool, remaining argv)."""
    result = {key: False for key, _flags in specs}
    rest: list[str] = []
    for a in argv:
        for key, flags in specs:
            if a in flags:
                result[key] = True
                break
        else:
            rest.append(a)
    return result, rest


def parse_assignments(argv: list[str]) -> tuple[dict[str, str], list[str]]:
    """Pop make-style NAME=value arguments (IMAGE_REGISTRY=ghcr.io/myorg VERSION=1.0.0)."""
    return split_assignments(argv)


def path_resolver(s: str) -> Path:
    """Resolve a path argument to absolute Path (e.g. --project-root, --config)."""
    return Path(s).resolve()
