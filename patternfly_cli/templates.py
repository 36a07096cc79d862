"""Registry of the project templates ``create`` can clone.

The registry is a fixed, ordered tuple built at import time.  Lookups
return the first exact name match.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

__all__ = ["TemplateDescriptor", "TEMPLATES", "get_template", "template_names", "format_template_listing", ]

SEED_REPOSITORY = "https://github.com/patternfly/patternfly-react-seed.git"


class TemplateDescriptor(BaseModel):
    """A named template repository."""

    model_config = ConfigDict(frozen = True)

    name: str = Field(..., min_length = 1)
    description: str
    repository_url: str = Field(..., min_length = 1)
    clone_options: tuple[str, ...] = ()

    @property
    def label(self) -> str:
        """Menu label, ``"name - description"``."""
        return f"{self.name} - {self.description}"


TEMPLATES: tuple[TemplateDescriptor, ...] = (
    TemplateDescriptor(
            name = "starter", description = "A starter template for Patternfly react typescript project",
            repository_url = SEED_REPOSITORY, ),
    TemplateDescriptor(
            name = "compass-starter",
            description = "A starter template for Patternfly compass theme typescript project",
            repository_url = SEED_REPOSITORY, clone_options = ("--single-branch", "--branch", "compass_theme"), ),
)


def _check_unique(templates: tuple[TemplateDescriptor, ...]) -> None:
    seen: set[str] = set()
    for template in templates:
        if template.name in seen:
            raise ValueError(f"Duplicate template name in registry: {template.name}")
        seen.add(template.name)


_check_unique(TEMPLATES)


def get_template(name: str) -> TemplateDescriptor | None:
    """Return the template called *name*, or ``None``."""
    for template in TEMPLATES:
        if template.name == name:
            return template
    return None


def template_names() -> list[str]:
    return [template.name for template in TEMPLATES]


def format_template_listing(width: int = 20) -> list[str]:
    """One line per template: the name padded to *width*, then the description."""
    return [f"{template.name.ljust(width)} {template.description}" for template in TEMPLATES]
