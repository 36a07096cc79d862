"""
Create a new project from a template repository.

The workflow is linear::

    PENDING -> CLONING -> HISTORY_REMOVED -> METADATA_COLLECTED
            -> MANIFEST_UPDATED -> DEPENDENCIES_INSTALLED -> DONE

Any error on the way moves the run to ``FAILED``.  A failed run deletes the
project directory it created, so no partial scaffold is left behind.  The
individual steps are plain functions and can be used on their own.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, field_validator
from rich.prompt import Prompt

from .config import CliConfig
from .exceptions import CloneError, CommandError, InstallError, ScaffoldStateError
from .file_generator import read_json, remove_tree, write_json
from .output import console, print_error, print_info, print_step, print_success
from .templates import TemplateDescriptor
from .utils.process import run_captured

__all__ = ["ScaffoldStage", "ProjectMetadata", "ScaffoldResult", "ScaffoldRun", "clone_template", "remove_history",
        "collect_metadata", "update_manifest", "install_dependencies", "create_project", ]

log = logging.getLogger(__name__)

MANIFEST_NAME = "package.json"
HISTORY_DIR = ".git"
DEFAULT_VERSION = "1.0.0"
METADATA_FIELDS = ("name", "version", "description", "author")

AskFn = Callable[..., str]


# ---------------------------------------------------------------------------
# Data model
# ---------------------------------------------------------------------------


class ScaffoldStage(str, Enum):
    """Stages of a scaffold run, in order."""

    PENDING = "pending"
    CLONING = "cloning"
    HISTORY_REMOVED = "history_removed"
    METADATA_COLLECTED = "metadata_collected"
    MANIFEST_UPDATED = "manifest_updated"
    DEPENDENCIES_INSTALLED = "dependencies_installed"
    DONE = "done"
    FAILED = "failed"


_NEXT_STAGE: dict[ScaffoldStage, ScaffoldStage] = {
    ScaffoldStage.PENDING: ScaffoldStage.CLONING,
    ScaffoldStage.CLONING: ScaffoldStage.HISTORY_REMOVED,
    ScaffoldStage.HISTORY_REMOVED: ScaffoldStage.METADATA_COLLECTED,
    ScaffoldStage.METADATA_COLLECTED: ScaffoldStage.MANIFEST_UPDATED,
    ScaffoldStage.MANIFEST_UPDATED: ScaffoldStage.DEPENDENCIES_INSTALLED,
    ScaffoldStage.DEPENDENCIES_INSTALLED: ScaffoldStage.DONE,
}


class ProjectMetadata(BaseModel):
    """The ``package.json`` fields the user is asked for."""

    name: str
    version: str = DEFAULT_VERSION
    description: str = ""
    author: str = ""

    @field_validator("version")
    @classmethod
    def _default_version(cls, value: str) -> str:
        return value.strip() or DEFAULT_VERSION


@dataclass
class ScaffoldResult:
    """Outcome of :meth:`ScaffoldRun.run`.

    ``last_stage`` is the last stage reached before a failure, ``error`` the
    message that was printed for it.
    """

    project_path: Path
    stage: ScaffoldStage
    last_stage: ScaffoldStage | None = None
    error: str | None = None
    cleaned_up: bool = False
    cancelled: bool = False

    @property
    def ok(self) -> bool:
        return self.stage is ScaffoldStage.DONE


# ---------------------------------------------------------------------------
# Steps
# ---------------------------------------------------------------------------


def clone_template(
        template: TemplateDescriptor, project_path: Path, *, config: CliConfig | None = None, ) -> None:
    """Clone *template* into *project_path* with the template's clone options."""
    config = config or CliConfig()
    if project_path.exists() and (not project_path.is_dir() or any(project_path.iterdir())):
        raise CloneError(f"Destination path '{project_path}' already exists and is not an empty directory.")
    cmd = [config.git_executable, "clone", *template.clone_options, template.repository_url, str(project_path)]
    run_captured(cmd, error = CloneError)


def remove_history(project_path: Path) -> bool:
    """Delete the template's ``.git`` directory.

    Returns ``False`` when the clone had none.
    """
    return remove_tree(project_path / HISTORY_DIR)


def collect_metadata(project_path: Path, ask: AskFn | None = None) -> ProjectMetadata:
    """Prompt for name, version, description and author.

    Empty answers fall back to the defaults: the directory name for
    ``name`` and ``1.0.0`` for ``version``.
    """
    ask = ask or Prompt.ask
    default_name = project_path.name
    name = ask("Project name?", default = default_name, console = console)
    version = ask("Version?", default = DEFAULT_VERSION, console = console)
    description = ask("Description?", default = "", show_default = False, console = console)
    author = ask("Author?", default = "", show_default = False, console = console)
    return ProjectMetadata(
            name = name or default_name, version = version or DEFAULT_VERSION, description = description or "",
            author = author or "", )


def update_manifest(project_path: Path, metadata: ProjectMetadata) -> Path | None:
    """Write *metadata* into ``package.json``, keeping every other field.

    Returns the manifest path, or ``None`` when the template has no
    ``package.json``.
    """
    manifest_path = project_path / MANIFEST_NAME
    if not manifest_path.is_file():
        return None
    manifest = read_json(manifest_path)
    for field_name in METADATA_FIELDS:
        manifest[field_name] = getattr(metadata, field_name)
    return write_json(manifest_path, manifest)


def install_dependencies(project_path: Path, *, config: CliConfig | None = None) -> None:
    config = config or CliConfig()
    run_captured(config.install_command, cwd = project_path, error = InstallError)


# ---------------------------------------------------------------------------
# Orchestration
# ---------------------------------------------------------------------------


class ScaffoldRun:
    """One ``create`` invocation.

    Parameters
    ----------
    project_directory:
        Target directory as typed by the user; resolved to an absolute path.
    template:
        The resolved template.
    ask:
        Prompt callable with the signature of :meth:`rich.prompt.Prompt.ask`.
    config:
        Tool settings; defaults are used when omitted.
    """

    def __init__(
            self, project_directory: str | Path, template: TemplateDescriptor, *, ask: AskFn | None = None,
            config: CliConfig | None = None, ):
        self.project_directory = str(project_directory)
        self.project_path = Path(project_directory).expanduser().resolve()
        self.template = template
        self.ask = ask
        self.config = config or CliConfig()
        self.stage = ScaffoldStage.PENDING
        self._preexisting = False
        self._owned = False

    def advance(self, stage: ScaffoldStage) -> None:
        """Move to *stage*; only the next stage in order is allowed."""
        expected = _NEXT_STAGE.get(self.stage)
        if stage is not expected:
            raise ScaffoldStateError(f"Illegal scaffold transition {self.stage.value} -> {stage.value}")
        log.debug("Scaffold stage: %s -> %s", self.stage.value, stage.value)
        self.stage = stage

    def run(self) -> ScaffoldResult:
        """Execute every step; never raises for operational failures."""
        try:
            self._inspect_destination()
            self._run_steps()
        except KeyboardInterrupt:
            return self._fail("Cancelled by user.", cancelled = True)
        except CommandError as exc:
            log.debug("Scaffold failed", exc_info = True)
            return self._fail(exc.detail)
        except Exception as exc:
            log.debug("Scaffold failed", exc_info = True)
            return self._fail(str(exc) or exc.__class__.__name__)
        return ScaffoldResult(project_path = self.project_path, stage = self.stage)

    def _inspect_destination(self) -> None:
        self._preexisting = self.project_path.exists()
        # Only a missing or empty directory may be cleaned up on failure.
        self._owned = not self._preexisting or (
                self.project_path.is_dir() and not any(self.project_path.iterdir()))

    def _run_steps(self) -> None:
        self.advance(ScaffoldStage.CLONING)
        print_step(f"Cloning template from {self.template.repository_url} into {self.project_path}...")
        clone_template(self.template, self.project_path, config = self.config)
        print_success("Template cloned successfully.")

        remove_history(self.project_path)
        self.advance(ScaffoldStage.HISTORY_REMOVED)
        print_success("Cleaned up template .git directory.")

        metadata = collect_metadata(self.project_path, self.ask)
        self.advance(ScaffoldStage.METADATA_COLLECTED)

        if update_manifest(self.project_path, metadata) is None:
            print_info(f"No {MANIFEST_NAME} found in template, skipping customization.")
        else:
            print_success(f"Customized {MANIFEST_NAME}.")
        self.advance(ScaffoldStage.MANIFEST_UPDATED)

        print_step("Installing dependencies... (This may take a moment)")
        install_dependencies(self.project_path, config = self.config)
        self.advance(ScaffoldStage.DEPENDENCIES_INSTALLED)
        print_success("Dependencies installed.")

        self.advance(ScaffoldStage.DONE)
        console.print("\n[bold green]Project created successfully![/bold green]\n")
        console.print("To get started:")
        console.print(f"  cd {self.project_directory}", markup = False)
        console.print("  Happy coding!")

    def _fail(self, message: str, *, cancelled: bool = False) -> ScaffoldResult:
        last_stage = self.stage
        self.stage = ScaffoldStage.FAILED
        print_error("An error occurred:")
        print_error(message)
        cleaned_up = self._cleanup()
        if cleaned_up:
            print_info("Cleaned up failed project directory.")
        return ScaffoldResult(
                project_path = self.project_path, stage = self.stage, last_stage = last_stage, error = message,
                cleaned_up = cleaned_up, cancelled = cancelled, )

    def _cleanup(self) -> bool:
        """Remove whatever this run put on disk."""
        if self.stage is not ScaffoldStage.FAILED or not self._owned or not self.project_path.exists():
            return False
        try:
            if self._preexisting:
                # An empty directory the user created stays, its contents go.
                for child in self.project_path.iterdir():
                    remove_tree(child)
            else:
                remove_tree(self.project_path)
        except OSError as exc:
            print_error(f"Could not remove {self.project_path}: {exc}")
            return False
        return True


def create_project(
        project_directory: str | Path, template: TemplateDescriptor, *, ask: AskFn | None = None,
        config: CliConfig | None = None, ) -> ScaffoldResult:
    """Scaffold *template* into *project_directory*.

    Convenience wrapper around :class:`ScaffoldRun`.
    """
    return ScaffoldRun(project_directory, template, ask = ask, config = config).run()
