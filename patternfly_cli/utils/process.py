"""Subprocess helpers for the external tools the CLI drives.

Two flavours are provided:

* :func:`run_captured` collects stdout/stderr so a failure can be reported
  with the tool's own error text (``git clone``, ``npm install``).
* :func:`run_streamed` lets the child inherit the terminal so its output is
  shown live (codemods).

Both raise the :class:`~patternfly_cli.exceptions.CommandError` subclass
given as ``error``.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path

from ..exceptions import CommandError

__all__ = ["run_captured", "run_streamed", "format_command", ]

log = logging.getLogger(__name__)


def format_command(cmd: Sequence[str]) -> str:
    """Render *cmd* as a single shell-like string for messages."""
    return subprocess.list2cmdline(list(cmd))


def run_captured(
        cmd: Sequence[str], *, cwd: Path | str | None = None, error: type[CommandError] = CommandError,
        ) -> subprocess.CompletedProcess[str]:
    """Run *cmd* and capture its output.

    Raises ``error`` when the executable is missing or the process exits
    non-zero.  The raised error carries the captured stderr (or stdout when
    stderr is empty).
    """
    log.debug("Running %s (cwd=%s)", format_command(cmd), cwd)
    try:
        proc = subprocess.run(
                list(cmd), cwd = cwd, capture_output = True, text = True, check = False, )
    except OSError as exc:
        raise error(
                f"Could not run {cmd[0]}: {exc}", command = cmd
                ) from exc

    if proc.returncode != 0:
        output = (proc.stderr or "").strip() or (proc.stdout or "").strip()
        raise error(
                f"Command failed with exit code {proc.returncode}: {format_command(cmd)}", command = cmd,
                returncode = proc.returncode, stderr = output, )
    return proc


def run_streamed(
        cmd: Sequence[str], *, cwd: Path | str | None = None, error: type[CommandError] = CommandError,
        ) -> int:
    """Run *cmd* with inherited stdin/stdout/stderr.

    Returns the (zero) exit status; raises ``error`` otherwise.
    """
    log.debug("Running %s (cwd=%s, streamed)", format_command(cmd), cwd)
    try:
        proc = subprocess.run(list(cmd), cwd = cwd, check = False)
    except OSError as exc:
        raise error(
                f"Could not run {cmd[0]}: {exc}", command = cmd
                ) from exc

    if proc.returncode != 0:
        raise error(
                f"Command failed with exit code {proc.returncode}: {format_command(cmd)}", command = cmd,
                returncode = proc.returncode, )
    return proc.returncode
