"""Custom exception hierarchy for the patternfly_cli package.

All public functions raise :class:`PatternflyCliError` (or a subclass) so
that callers can catch a single exception type.  The CLI catches these at
the command boundary and prints a user-friendly message.
"""

from __future__ import annotations

from collections.abc import Sequence


class PatternflyCliError(RuntimeError):
    """Base exception for all patternfly-cli related errors."""


class ConfigError(PatternflyCliError):
    """Raised when a configuration file exists but cannot be used."""


class TemplateNotFoundError(PatternflyCliError):
    """Raised when a template name does not exist in the registry."""

    def __init__(self, name: str):
        super().__init__(f"Template '{name}' not found.")
        self.name = name


class ManifestIOError(PatternflyCliError):
    """Raised when ``package.json`` exists but cannot be read or written."""


class ScaffoldStateError(PatternflyCliError):
    """Raised on an illegal scaffold stage transition."""


class CommandError(PatternflyCliError):
    """An external command could not be started or exited non-zero.

    Attributes
    ----------
    command:
        The argument vector that was executed.
    returncode:
        Exit status, or ``None`` when the process never started.
    stderr:
        Captured standard error, empty when output was not captured.
    """

    def __init__(
            self, message: str, *, command: Sequence[str] = (), returncode: int | None = None, stderr: str = "",
            ):
        super().__init__(message)
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr or ""

    @property
    def detail(self) -> str:
        """Captured stderr when there is any, otherwise the error message."""
        return self.stderr.strip() or str(self)


class CloneError(CommandError):
    """Raised when ``git clone`` fails."""


class InstallError(CommandError):
    """Raised when the dependency installer fails."""


class TransformError(CommandError):
    """Raised when a codemod command fails."""
