"""Turn the optional ``template-name`` argument into a template descriptor."""

from __future__ import annotations

import logging
from collections.abc import Callable

from rich.prompt import Prompt

from .exceptions import TemplateNotFoundError
from .output import console
from .templates import TEMPLATES, TemplateDescriptor, get_template, template_names

__all__ = ["resolve_template", "select_template"]

log = logging.getLogger(__name__)

ChooseFn = Callable[..., str]


def select_template(choose: ChooseFn | None = None) -> str:
    """Show every registry entry as a numbered menu and return the chosen name.

    The answer must be one of the template names; the first entry is the
    default.
    """
    choose = choose or Prompt.ask
    console.print("[bold]Available templates:[/bold]")
    for index, template in enumerate(TEMPLATES, start = 1):
        console.print(f"  {index}) {template.label}", markup = False, soft_wrap = True)
    names = template_names()
    return choose(
            "Select a template", choices = names, default = names[0], show_choices = False, console = console, )


def resolve_template(
        name: str | None = None, *, choose: ChooseFn | None = None, ) -> TemplateDescriptor:
    """Resolve *name* against the registry.

    When *name* is empty the user picks a template interactively.

    Raises
    ------
    TemplateNotFoundError
        If the name is not in the registry.
    """
    if name is None or not name.strip():
        name = select_template(choose)
    template = get_template(name)
    if template is None:
        raise TemplateNotFoundError(name)
    log.debug("Resolved template %s -> %s", name, template.repository_url)
    return template
