from dataclasses import dataclass
from importlib.metadata import PackageNotFoundError, version as package_version
from pathlib import Path

import typer

from yamldiffpack.diff import (
    DifferenceNotice,
    OutputMode,
    diff_trees,
    render_difference_tree,
    render_notice,
)
from yamldiffpack.document import (
    DocumentLoadError,
    DocumentSerializationError,
    load_document,
)

app = typer.Typer(
    help=(
        "Compare two YAML files and output the values that differ.\n\n"
        "By default each difference is printed with its key path. Use -o to "
        "choose another output format:\n\n"
        "- yaml: differing values from the first file as plain YAML.\n\n"
        "- yamldiff: notices, then the differing values as YAML under a header."
    ),
    add_completion=False,
)


@dataclass(slots=True)
class _OutputOptions:
    quiet: bool = False
    no_color: bool = False


_OUTPUT_OPTIONS = _OutputOptions()


def _resolve_cli_version() -> str:
    try:
        return package_version("yamldiff")
    except PackageNotFoundError:
        from yamldiff import __version__ as local_version

        return local_version


def _version_callback(value: bool) -> None:
    if not value:
        return
    typer.echo(_resolve_cli_version(), color=False)
    raise typer.Exit()


def _echo(message: str, *, err: bool = False, nl: bool = True) -> None:
    if _OUTPUT_OPTIONS.quiet and not err:
        return
    typer.echo(message, err=err, nl=nl, color=not _OUTPUT_OPTIONS.no_color)


def _echo_notice(notice: DifferenceNotice) -> None:
    _echo(render_notice(notice))


@app.command()
def compare(
    first: Path = typer.Argument(..., help="Path to the first YAML file."),
    second: Path = typer.Argument(..., help="Path to the second YAML file."),
    output: OutputMode | None = typer.Option(
        None,
        "--output",
        "-o",
        envvar="YAMLDIFF_OUTPUT",
        case_sensitive=False,
        help="Set the output format (yaml, yamldiff). Defaults to printing notices only.",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        help="Suppress non-error text output.",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable ANSI color output.",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show yamldiff version and exit.",
    ),
) -> None:
    """Compare FIRST against SECOND and report values that differ."""
    _OUTPUT_OPTIONS.quiet = quiet
    _OUTPUT_OPTIONS.no_color = no_color
    plan = (output or OutputMode.NOTICES).plan

    try:
        first_tree = load_document(first)
    except DocumentLoadError as error:
        _echo(f"Error loading first file: {error}", err=True)
        raise typer.Exit(code=1) from error

    try:
        second_tree = load_document(second)
    except DocumentLoadError as error:
        _echo(f"Error loading second file: {error}", err=True)
        raise typer.Exit(code=1) from error

    difference_tree = diff_trees(
        first_tree,
        second_tree,
        emit_notices=plan.emit_notices,
        on_notice=_echo_notice,
    )

    if not plan.serialize:
        return

    try:
        rendered = render_difference_tree(difference_tree, with_banner=plan.with_banner)
    except DocumentSerializationError as error:
        _echo(f"Error printing YAML: {error}", err=True)
        raise typer.Exit(code=1) from error

    _echo(rendered, nl=False)


def main() -> None:
    app()
