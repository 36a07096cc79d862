"""Low-level file-system helpers used by the *patternfly_cli* package.

The helpers are synchronous and stateless.  Text files are written
atomically (temporary file plus rename) and JSON manifests are written with
2-space indentation and a trailing newline, the layout ``npm`` itself uses
for ``package.json``.  Failures are raised as
:class:`~patternfly_cli.exceptions.ManifestIOError` or
:class:`~patternfly_cli.exceptions.PatternflyCliError`.
"""

from __future__ import annotations

import json
import logging
import shutil
from pathlib import Path
from typing import Any

from .exceptions import ManifestIOError, PatternflyCliError

__all__ = ["write_file", "read_json", "write_json", "remove_tree", ]

log = logging.getLogger(__name__)

JSON_INDENT = 2


def write_file(
        target: Path | str, content: str, *, encoding: str = "utf-8", ) -> Path:
    """Write *content* to *target* atomically.

    Missing parent directories are created, the content goes to a sibling
    temporary file first and is then moved over ``target``.

    Returns
    -------
    Path
        The absolute path of the written file.
    """

    target = Path(target).expanduser().resolve()
    tmp = target.with_name(target.name + ".tmp")
    try:
        target.parent.mkdir(parents = True, exist_ok = True)
        with tmp.open("w", encoding = encoding) as fp:
            fp.write(content)
        tmp.replace(target)
        return target
    except OSError as exc:
        tmp.unlink(missing_ok = True)
        raise PatternflyCliError(f"Failed to write file {target!s}: {exc}") from exc


def read_json(path: Path | str) -> dict[str, Any]:
    """Read a JSON object from *path*.

    Raises :class:`ManifestIOError` when the file cannot be read, is not
    valid JSON or does not hold a JSON object.
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding = "utf-8"))
    except OSError as exc:
        raise ManifestIOError(f"Failed to read {path.name}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ManifestIOError(f"Invalid JSON in {path.name}: {exc}") from exc
    if not isinstance(data, dict):
        raise ManifestIOError(f"Expected a JSON object in {path.name}")
    return data


def write_json(path: Path | str, data: dict[str, Any]) -> Path:
    """Write *data* to *path* with 2-space indentation."""
    text = json.dumps(data, indent = JSON_INDENT, ensure_ascii = False) + "\n"
    try:
        return write_file(path, text)
    except PatternflyCliError as exc:
        raise ManifestIOError(str(exc)) from exc


def remove_tree(path: Path | str) -> bool:
    """Recursively delete *path*.

    Returns ``False`` when there was nothing to delete.
    """
    path = Path(path)
    if not path.exists() and not path.is_symlink():
        return False
    log.debug("Removing %s", path)
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    else:
        path.unlink()
    return True
