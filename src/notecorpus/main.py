"""Main CLI entry point for notecorpus."""

import logging
import shutil
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from .backends import EXTERNAL_BACKENDS
from .classifier import is_corpus_file
from .config import CorpusConfig, parse_backend_entry
from .discovery import discover
from .exceptions import ConfigurationError
from .resolver import lookup_tag, parse_entry, resolve


def _load_config(
    directory: str | None,
    extensions: tuple[str, ...],
    backends: tuple[str, ...],
    walk: bool = False,
) -> CorpusConfig:
    """Environment configuration with command line overrides applied."""
    settings = CorpusConfig.from_env().model_dump()

    if directory:
        settings["root_directory"] = Path(directory)
    if extensions:
        settings["extensions"] = list(extensions)
    if walk:
        settings["backend_preference"] = []
    elif backends:
        settings["backend_preference"] = [parse_backend_entry(entry) for entry in backends]

    return CorpusConfig(**settings)


directory_option = click.option(
    "--directory",
    "-d",
    type=click.Path(exists=True, file_okay=False),
    help="Notes directory (default: $NOTECORPUS_DIRECTORY)",
)
extension_option = click.option(
    "--ext",
    "-e",
    "extensions",
    multiple=True,
    help="Corpus file extension, repeatable (default: org)",
)
backend_option = click.option(
    "--backend",
    "-b",
    "backends",
    multiple=True,
    help="Search tool to try, in order: find, fd, fdfind, rg, or tag=/path/to/exe",
)


@click.group()
@click.option("--debug", is_flag=True, help="Log backend resolution and fallback decisions")
def cli(debug: bool):
    """notecorpus - list and classify the files of a notes directory."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@cli.command("list")
@directory_option
@extension_option
@backend_option
@click.option("--walk", is_flag=True, help="Skip external tools and use the built-in walker")
@click.option("--show-backend", is_flag=True, help="Report which backend produced the files")
def list_command(
    directory: str | None,
    extensions: tuple[str, ...],
    backends: tuple[str, ...],
    walk: bool,
    show_backend: bool,
):
    """Print every corpus file, one absolute path per line.

    Examples:
        notecorpus list -d ~/org-roam

        notecorpus list -d ~/notes -e org -e md --backend rg --backend find
    """
    config = _load_config(directory, extensions, backends, walk)

    try:
        result = discover(config)
    except (ConfigurationError, TypeError) as e:
        raise click.ClickException(str(e)) from e

    for path in result.files:
        click.echo(path)

    if show_backend:
        source = "walk" if result.used_walker else result.backend.tag.value
        click.echo(
            f"{len(result.files)} files via {source} ({result.outcome.value})",
            err=True,
        )


@cli.command()
@click.argument("paths", nargs=-1, required=True, type=click.Path())
@directory_option
@extension_option
@click.pass_context
def check(ctx: click.Context, paths: tuple[str, ...], directory: str | None, extensions: tuple[str, ...]):
    """Tell whether each PATH is a corpus file.

    Exits with status 1 if any path is not.
    """
    config = _load_config(directory, extensions, ())

    all_members = True
    for path in paths:
        member = is_corpus_file(config, str(Path(path).expanduser().absolute()))
        all_members = all_members and member
        click.echo(f"{'yes' if member else 'no'}\t{path}")

    if not all_members:
        ctx.exit(1)


@cli.command()
@backend_option
def backends(backends: tuple[str, ...]):
    """Show how each configured search tool resolves."""
    config = _load_config(None, (), backends)
    console = Console()

    table = Table(title="Search backends")
    table.add_column("Entry", style="cyan")
    table.add_column("Executable")

    for entry in config.backend_preference:
        try:
            name, explicit = parse_entry(entry)
            tag = lookup_tag(name)
        except (ConfigurationError, TypeError) as e:
            table.add_row(str(entry), f"[red]{e}[/red]")
            continue

        executable = explicit or shutil.which(EXTERNAL_BACKENDS[tag].binary_name)
        table.add_row(tag.value, executable or "[yellow]not found[/yellow]")

    console.print(table)

    try:
        selected = resolve(config.backend_preference)
    except (ConfigurationError, TypeError) as e:
        raise click.ClickException(str(e)) from e

    if selected.is_fallback:
        console.print("Selected: [bold]built-in walker[/bold]")
    else:
        console.print(f"Selected: [bold green]{selected.tag.value}[/bold green] ({selected.executable})")


if __name__ == "__main__":
    cli()
