"""Run the PatternFly codemods against a source directory.

The codemods are npm packages executed through ``npx``.  They run one at a
time, in the order of :data:`CODEMODS`, with their output shown live.  The
first failure stops the run.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .config import CliConfig
from .exceptions import TransformError
from .output import print_step, print_success
from .utils.process import run_streamed

__all__ = ["CODEMODS", "DEFAULT_TARGET", "FIX_FLAG", "build_codemod_command", "run_codemods", ]

log = logging.getLogger(__name__)

DEFAULT_TARGET = "src"
FIX_FLAG = "--fix"

CODEMODS: tuple[str, ...] = (
    "@patternfly/pf-codemods",
    "@patternfly/class-name-updater",
)


def build_codemod_command(
        package: str, target: Path, *, fix: bool = False, config: CliConfig | None = None, ) -> list[str]:
    """``npx <package> [--fix] <target>``"""
    config = config or CliConfig()
    cmd = [config.npx_executable, package]
    if fix:
        cmd.append(FIX_FLAG)
    cmd.append(str(target))
    return cmd


def run_codemods(
        path: str | Path | None = None, *, fix: bool = False, config: CliConfig | None = None, ) -> list[str]:
    """Run every codemod against *path* (``src`` by default).

    Parameters
    ----------
    path:
        Directory to transform.
    fix:
        Apply the changes instead of only reporting them.
    config:
        Tool settings; defaults are used when omitted.

    Returns
    -------
    list[str]
        The codemod packages that ran.

    Raises
    ------
    TransformError
        When the target is missing or a codemod fails.  Codemods after the
        failing one are not run.
    """
    target = Path(path or DEFAULT_TARGET).expanduser().resolve()
    if not target.exists():
        raise TransformError(f"Target path does not exist: {target}")

    print_step(f"Running PatternFly codemods on {target}...")
    completed: list[str] = []
    for package in CODEMODS:
        cmd = build_codemod_command(package, target, fix = fix, config = config)
        log.debug("Running codemod %s", package)
        try:
            run_streamed(cmd, error = TransformError)
        except TransformError as exc:
            raise TransformError(
                    f"{package} failed: {exc}", command = exc.command, returncode = exc.returncode, ) from exc
        completed.append(package)

    print_success("Codemods completed successfully.")
    return completed
