"""Command-line interface for the **patternfly_cli** package.

Commands
--------
* ``create`` – clone a template into a new project directory and
  personalize its ``package.json``.
* ``list`` – show the available templates.
* ``update`` – run the PatternFly codemods on a source directory
  (``codemod`` is kept as an alias).

The CLI is stateless: every invocation loads the optional config file,
does one thing and exits.  Package errors are caught here and turned into
a message on stderr plus a non-zero exit code.
"""

from pathlib import Path
from typing import Optional

import typer

from patternfly_cli import __version__
from patternfly_cli.codemods import run_codemods
from patternfly_cli.config import CliConfig, load_config, setup_logging
from patternfly_cli.exceptions import ConfigError, TemplateNotFoundError, TransformError
from patternfly_cli.output import print_error
from patternfly_cli.resolver import resolve_template
from patternfly_cli.scaffold import create_project
from patternfly_cli.templates import format_template_listing

app = typer.Typer(
        name = "patternfly-cli", help = "Scaffold and update PatternFly projects.", no_args_is_help = True,
        add_completion = False, )

EXIT_FAILURE = 1
EXIT_CANCELLED = 130


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"patternfly-cli {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
        ctx: typer.Context, debug: bool = typer.Option(False, "--debug", help = "Enable DEBUG logs."),
        config_path: Optional[Path] = typer.Option(
                None, "--config", help = "Path to a JSON config file.", dir_okay = False, ),
        version: bool = typer.Option(
                False, "--version", help = "Show the version and exit.", callback = _version_callback,
                is_eager = True, ), ) -> None:
    """Scaffold and update PatternFly projects."""
    setup_logging(debug)
    try:
        ctx.obj = load_config(config_path)
    except ConfigError as exc:
        print_error(str(exc))
        raise typer.Exit(EXIT_FAILURE)


def _config(ctx: typer.Context) -> CliConfig:
    return ctx.obj if isinstance(ctx.obj, CliConfig) else CliConfig()


def _echo_listing(config: CliConfig, *, err: bool = False) -> None:
    for line in format_template_listing(config.label_width):
        typer.echo(line, err = err)


@app.command(help = "Create a new project from a template.")
def create(
        ctx: typer.Context, project_directory: str = typer.Argument(
                ..., help = "The directory to create the project in."
                ), template_name: Optional[str] = typer.Argument(
                None, help = "The template to use. Leave empty to pick one interactively."
                ), ) -> None:
    """Clone a template, personalize ``package.json`` and install dependencies.

    A failure at any step removes the new project directory again and
    exits with status 1 (130 when cancelled with Ctrl-C).
    """
    config = _config(ctx)
    try:
        template = resolve_template(template_name)
    except TemplateNotFoundError as exc:
        print_error(str(exc))
        typer.echo("Available templates:", err = True)
        _echo_listing(config, err = True)
        raise typer.Exit(EXIT_FAILURE)

    result = create_project(project_directory, template, config = config)
    if not result.ok:
        raise typer.Exit(EXIT_CANCELLED if result.cancelled else EXIT_FAILURE)


@app.command("list", help = "List the available templates.")
def list_templates(ctx: typer.Context) -> None:
    _echo_listing(_config(ctx))


@app.command(help = "Run the PatternFly codemods on a source directory.")
def update(
        ctx: typer.Context, path: Optional[str] = typer.Argument(
                None, help = 'The source directory to run codemods on (defaults to "src").'
                ), fix: bool = typer.Option(
                False, "--fix", help = "Apply fixes to files instead of only showing what would change."
                ), ) -> None:
    """Run each codemod in turn; stop with status 1 at the first failure."""
    try:
        run_codemods(path, fix = fix, config = _config(ctx))
    except TransformError as exc:
        print_error("An error occurred while running codemods:")
        print_error(str(exc))
        raise typer.Exit(EXIT_FAILURE)


# The command was called ``codemod`` before ``update``.
app.command("codemod", hidden = True, help = "Alias of 'update'.")(update)


def main() -> None:  # pragma: no cover – thin wrapper
    """Entry point used by the ``patternfly-cli`` console script."""
    app()


if __name__ == "__main__":
    main()
