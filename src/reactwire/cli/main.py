"""Main CLI entry point."""

import logging
import sys
from pathlib import Path
from typing import Optional

import rich_click as click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from reactwire import __version__
from reactwire.compiler.exceptions import ReactWireError

console = Console()
err_console = Console(stderr=True)

click.rich_click.USE_RICH_MARKUP = True
click.rich_click.SHOW_ARGUMENTS = True
click.rich_click.STYLE_ERRORS_SUGGESTION = "magenta italic"
click.rich_click.ERRORS_SUGGESTION = (
    "Try running 'reactwire --help' for more information."
)

click.rich_click.STYLE_HEADER_TEXT = "bold cyan"
click.rich_click.STYLE_OPTION = "cyan"

click.rich_click.COMMAND_GROUPS = {
    "reactwire": [
        {
            "name": "Commands",
            "commands": ["build", "compile", "new"],
        }
    ]
}


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, rich_tracebacks=True)],
        force=True,
    )


def _verbose_callback(ctx: click.Context, param: click.Parameter, value: bool) -> None:
    if value:
        _configure_logging(True)


# Accepted after a subcommand too: `reactwire build -v`.
verbose_option = click.option(
    "-v",
    "--verbose",
    is_flag=True,
    expose_value=False,
    callback=_verbose_callback,
    help="Enable debug logging",
)


def _fail(error: Exception) -> None:
    err_console.print(f"[bold red]Error:[/] {escape(str(error))}", highlight=False)
    sys.exit(1)


@click.group(
    help=f"""
[bold white on cyan] reactwire [/] [bold cyan]v{__version__}[/] Compile HTML templates into React components.

Run [bold cyan]reactwire build[/] to compile every [cyan]*.jsx.html[/] template in a directory.
Run [bold cyan]reactwire compile FILE[/] to compile a single template.
"""
)
@click.version_option(__version__)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    _configure_logging(verbose)


@cli.command()
@click.argument(
    "src_dir",
    required=False,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
)
@click.option(
    "--out-dir",
    default=None,
    type=click.Path(file_okay=False, path_type=Path),
    help="Output directory (default: next to each template).",
)
@click.option(
    "--no-react-import",
    is_flag=True,
    help="Do not emit `import React from 'react'`.",
)
@verbose_option
def build(src_dir: Optional[Path], out_dir: Optional[Path], no_react_import: bool) -> None:
    """Compile every template in SRC_DIR (auto-discovered if omitted)."""
    from reactwire.compiler.build import build_project

    try:
        summary = build_project(
            src_dir=src_dir, out_dir=out_dir, react_import=not no_react_import
        )
    except (ReactWireError, OSError) as e:
        _fail(e)
        return

    console.print(
        "✅ Build complete "
        f"(templates={summary.templates}, components={summary.components}, "
        f"out={summary.out_dir})"
    )


@cli.command(name="compile")
@click.argument(
    "file", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@click.option(
    "-o",
    "--output",
    default=None,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the module to OUTPUT instead of stdout.",
)
@click.option(
    "--no-react-import",
    is_flag=True,
    help="Do not emit `import React from 'react'`.",
)
@verbose_option
def compile_command(file: Path, output: Optional[Path], no_react_import: bool) -> None:
    """Compile a single template FILE."""
    from reactwire.compiler.build_artifacts import compile_file
    from reactwire.config import CompilerConfig

    config = CompilerConfig(src_dir=file.parent, react_import=not no_react_import)
    try:
        module = compile_file(file, config)
    except (ReactWireError, OSError) as e:
        _fail(e)
        return

    if output is None:
        click.echo(module, nl=False)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(module, encoding="utf-8")
    console.print(f"✅ Wrote [cyan]{output}[/]")


@cli.command()
@click.argument("name")
@click.option(
    "--dir",
    "directory",
    default=None,
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory for the new template (default: ./templates).",
)
def new(name: str, directory: Optional[Path]) -> None:
    """Scaffold a new NAME.jsx.html template."""
    from reactwire.cli.generators import generate_template

    try:
        path = generate_template(name, directory)
    except ValueError as e:
        _fail(e)
        return

    console.print(f"✨ Created [cyan]{path}[/]")


if __name__ == "__main__":
    cli()
