"""Run external commands (docker, npm) the way make runs recipe lines: echo, execute, return status."""

from __future__ import annotations

import logging
import shlex
import shutil
import subprocess
import sys
from pathlib import Path

log = logging.getLogger(__name__)

# Shell exit status for "command not found".
COMMAND_NOT_FOUND = 127


def format_command(cmd: list[str]) -> str:
    """Shell-quoted single line for display."""
    return shlex.join(cmd)


def _ensure_installed(executable: str) -> bool:
    if shutil.which(executable):
        return True
    print(f"❌ {executable} is not installed. Please install it first.", file=sys.stderr)
    return False


def run_command(
    cmd: list[str],
    cwd: Path,
    *,
    dry_run: bool = False,
    suppress_output: bool = False,
    display: list[str] | None = None,
) -> int:
    """Echo and run cmd in cwd. Returns its exit status (127 if the executable is missing).

    display replaces cmd in the echoed line (e.g. with secrets masked). With dry_run the
    command is printed and not executed. With suppress_output stdout/stderr are discarded.
    """
    shown = format_command(display if display is not None else cmd)
    if dry_run:
        print(f"[dry-run] would: {shown}")
        return 0
    print(shown)
    if not _ensure_installed(cmd[0]):
        return COMMAND_NOT_FOUND
    log.debug("Running in %s: %s", cwd, shown)
    if suppress_output:
        r = subprocess.run(cmd, cwd=str(cwd), capture_output=True, text=True)
    else:
        r = subprocess.run(cmd, cwd=str(cwd))
    log.debug("Exit status %d: %s", r.returncode, shown)
    return r.returncode


def command_succeeds(cmd: list[str], cwd: Path) -> bool:
    """Run cmd silently; True iff it exits 0. A missing executable counts as failure."""
    if not shutil.which(cmd[0]):
        log.debug("%s not in PATH", cmd[0])
        return False
    r = subprocess.run(cmd, cwd=str(cwd), capture_output=True, text=True)
    log.debug("Probe exit status %d: %s", r.returncode, format_command(cmd))
    return r.returncode == 0
