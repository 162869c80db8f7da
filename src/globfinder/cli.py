# Command-line interface definition for globfinder.
# This file is responsible only for argument parsing, validation,
# and dispatch into core application logic.
#
# No traversal or hashing logic should live here.

from __future__ import annotations

from pathlib import Path as FSPath
from typing import List

import typer
from rich.console import Console

from globfinder import __version__
from globfinder.core import run_hash, run_root, run_search
from globfinder.models import Kind, Options

app = typer.Typer(
    add_completion=False,
    help="Find files and directories by glob pattern and fingerprint their contents.",
)
console = Console()


def _version_callback(value: bool) -> None:
    if value:
        console.print(__version__)
        raise typer.Exit(code=0)


@app.callback()
def _root_options(
    version: bool = typer.Option(
        False, "--version",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
):
    pass


@app.command(help="List files and directories whose names match glob patterns.")
def search(
    roots: List[FSPath] = typer.Argument(
        None,
        help="Directories to search in. Defaults to current directory.",
    ),

    # Pattern selection.
    names: List[str] = typer.Option(
        [], "--name", "-n",
        help="Glob matched against each entry's name. Defaults to '*'.",
        rich_help_panel="Patterns",
    ),
    exclude: List[str] = typer.Option(
        [], "--exclude", "-x",
        help="Hide entries whose name matches this glob (their children are still searched).",
        rich_help_panel="Patterns",
    ),
    match: List[str] = typer.Option(
        [], "--match", "-m",
        help="Keep only paths ending in a match for this regular expression.",
        rich_help_panel="Patterns",
    ),

    # Result kind.
    kind: Kind = typer.Option(
        Kind.any, "--type", "-t",
        help="Restrict results to files, directories, or both.",
        rich_help_panel="Result Kind",
    ),

    # Error handling.
    strict: bool = typer.Option(
        False, "--strict",
        help="Exit with status 1 if any directory could not be walked.",
        rich_help_panel="Errors",
    ),
):
    if any(not n for n in names):
        raise typer.BadParameter("--name patterns must not be empty")

    if not roots:
        roots = [FSPath(".")]
    if not names:
        names = ["*"]

    opts = Options(
        roots=[str(r) for r in roots],
        names=names,
        exclude=exclude,
        kind=kind,
        match=match,
        strict=strict,
    )

    counters = run_search(opts)

    if strict and counters.errors:
        raise typer.Exit(code=1)


@app.command(name="hash", help="Print the content digest of a file or directory tree.")
def hash_(
    path: FSPath = typer.Argument(
        ...,
        help="File or directory to fingerprint.",
    ),
    files: bool = typer.Option(
        False, "--files",
        help="For a directory, list the digest of every file instead of one combined digest.",
    ),
):
    if not run_hash(str(path), per_file=files):
        raise typer.Exit(code=1)


@app.command(help="Print the project root (the working directory at first use).")
def root():
    run_root()


if __name__ == "__main__":
    app()
