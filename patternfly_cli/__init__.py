"""Top‑level package for *patternfly_cli*."""

from __future__ import annotations

__version__ = "1.0.0"

from .codemods import run_codemods
from .config import CliConfig, load_config
from .exceptions import (CloneError, CommandError, ConfigError, InstallError, ManifestIOError, PatternflyCliError,
                         ScaffoldStateError, TemplateNotFoundError, TransformError, )
from .resolver import resolve_template
from .scaffold import ProjectMetadata, ScaffoldResult, ScaffoldStage, create_project
from .templates import TEMPLATES, TemplateDescriptor, get_template

__all__ = ["__version__", "TEMPLATES", "TemplateDescriptor", "get_template", "resolve_template", "create_project",
        "ProjectMetadata", "ScaffoldResult", "ScaffoldStage", "run_codemods", "CliConfig", "load_config",
        "PatternflyCliError", "ConfigError", "TemplateNotFoundError", "CommandError", "CloneError", "InstallError",
        "TransformError", "ManifestIOError", "ScaffoldStateError", ]
