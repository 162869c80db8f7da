# Core orchestration logic for the globfinder command line.
# This file builds queries from parsed options, runs them, and prints
# results and summaries.
#
# It intentionally contains no CLI parsing and no traversal logic.

from __future__ import annotations

import os
from dataclasses import dataclass

from rich.console import Console
from rich.markup import escape

from globfinder.errors import HashError
from globfinder.finder import Finder
from globfinder.hashing import directory_files_hash, directory_hash, file_hash
from globfinder.models import Kind, Options
from globfinder.root import project_root

console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)


# Simple counters used for the summary block.
@dataclass
class Counters:
    files: int = 0
    directories: int = 0
    errors: int = 0


def build_finder(opts: Options) -> Finder:
    # Translate options into a configured Finder.
    finder = Finder().in_(*opts.roots).exclude(*opts.exclude)
    if opts.kind is Kind.files:
        return finder.find_files(*opts.names)
    if opts.kind is Kind.directories:
        return finder.find_directories(*opts.names)
    return finder.find(*opts.names)


def run_search(opts: Options) -> Counters:
    # Run one query and print matching paths in sorted order.
    # Traversal errors are counted; the caller decides whether they are fatal.
    counters = Counters()
    finder = build_finder(opts)

    results = finder.match(*opts.match) if opts.match else finder.get()

    for path in sorted(results):
        entry = results[path]
        if entry.is_dir:
            counters.directories += 1
            console.print(f"[bold blue]{escape(path)}[/bold blue]")
        else:
            counters.files += 1
            console.print(escape(path), highlight=False)

    counters.errors = len(finder.errors)
    _print_summary(counters)
    return counters


def run_hash(path: str, per_file: bool) -> bool:
    # Print the digest of a file, or of a whole directory tree.
    # Returns False if any file could not be hashed.
    try:
        if not os.path.isdir(path):
            console.print(f"{file_hash(path)}  {escape(path)}", highlight=False)
            return True

        if per_file:
            files = directory_files_hash(path)
            for p in sorted(files):
                console.print(f"{files[p]}  {escape(p)}", highlight=False)
            return True

        console.print(f"{directory_hash(path)}  {escape(path)}", highlight=False)
        return True
    except HashError as exc:
        # Digests computed before the failure are still worth showing.
        if per_file:
            for p in sorted(exc.partial):
                console.print(f"{exc.partial[p]}  {escape(p)}", highlight=False)
        err_console.print(f"[red]FAILED:[/red] {escape(str(exc))}")
        return False


def run_root() -> None:
    console.print(escape(project_root()), highlight=False)


def _print_summary(counters: Counters) -> None:
    # Summary goes to stderr so stdout stays a clean list of paths.
    err_console.print()
    err_console.print("[bold]Summary[/bold]")
    err_console.print(f"Files:       {counters.files}")
    err_console.print(f"Directories: {counters.directories}")
    err_console.print(f"Errors:      {counters.errors}")
