"""CLI entry point for responsive-backend."""

from pathlib import Path

import click

from responsive_backend.definition.loader import DEFAULT_DEFINITION_PATH, load_definition
from responsive_backend.errors import ScaffoldError
from responsive_backend.generator.base import get_emitter, supported_targets
from responsive_backend.generator.scaffold import generate_scaffolding
from responsive_backend.project import init_project


@click.group()
def main():
    """Responsive Backend: generate controller scaffolding from an API definition."""
    pass


@main.command()
@click.option("--root", default=".", type=click.Path(file_okay=False, path_type=Path), help="Project root directory.")
def init(root: Path):
    """Initialize a new API project."""
    click.echo("Initializing Responsive Backend Project...")
    try:
        created = init_project(root)
    except ScaffoldError as e:
        raise click.ClickException(str(e)) from e

    if not created:
        click.echo("Nothing to do, project files already exist.")
    click.echo("Project initialized successfully!")


@main.command()
@click.option(
    "-l", "--language", default="csharp", envvar="RB_LANGUAGE", show_default=True,
    help=f"Target language ({', '.join(supported_targets())}).",
)
@click.option(
    "-d", "--definition", default=None, type=click.Path(dir_okay=False, path_type=Path),
    help=f"API definition file. Defaults to {DEFAULT_DEFINITION_PATH.as_posix()} under the output root.",
)
@click.option("-o", "--output", default=".", type=click.Path(file_okay=False, path_type=Path), help="Project root to write into.")
def generate(language: str, definition: Path | None, output: Path):
    """Generate API scaffolding from the API definition."""
    definition = definition or output / DEFAULT_DEFINITION_PATH
    try:
        # Fail on an unknown target before reading or writing anything
        emitter = get_emitter(language)

        click.echo(f"Parsing API definition for {emitter.name}...")
        api = load_definition(definition)
        click.echo(f"Found {len(api.endpoints)} endpoints.")

        click.echo(f"Generating {emitter.name} API scaffolding...")
        result = generate_scaffolding(api, emitter.name, output)
    except ScaffoldError as e:
        raise click.ClickException(str(e)) from e

    summary = f"Done! Generated {len(result.reports)} endpoints in {output}"
    if result.failures:
        summary += f", skipped {len(result.failures)}"
    click.echo(summary + ".")
