from __future__ import annotations
from collections import Counter
from pathlib import Path
from typing import Optional

import typer
from rich import print
from rich.table import Table

from ..core.env import load_env, get_settings
from ..core.log import configure_logging
from ..errors import ConfigurationError, PersistenceFailure
from ..models import PuzzleDefinition
from ..session import parse_found_words
from ..storage import JsonFileStore

app = typer.Typer()


def puzzle_stats(puzzle: PuzzleDefinition, found: tuple = ()) -> dict:
    unique = set(puzzle.words)
    return {
        "key": puzzle.key,
        "words": len(puzzle.words),
        "unique": len(unique),
        "duplicates": len(puzzle.words) - len(unique),
        "lengths": dict(sorted(Counter(len(w) for w in unique).items())),
        "found": len(found),
    }


@app.command()
def main(puzzle_path: Optional[str] = typer.Argument(None), store: Optional[str] = None):
    load_env()
    configure_logging()
    try:
        settings = get_settings()
        puzzle = PuzzleDefinition.load(Path(puzzle_path) if puzzle_path else settings.today_path)
    except ConfigurationError as e:
        print(f"[red]Error:[/] {e}")
        raise typer.Exit(1)

    try:
        blob = JsonFileStore(store or settings.store_path).get(puzzle.key)
    except PersistenceFailure as e:
        print(f"[yellow]Progress unavailable:[/] {e}")
        blob = None
    stats = puzzle_stats(puzzle, parse_found_words(blob, puzzle))

    print(f"[bold]Puzzle[/]: {puzzle.center.upper()} + {puzzle.outer.upper()}")
    print(f"[bold]Words[/]: {stats['unique']} ({stats['duplicates']} repeated across levels)")
    print(f"[bold]Found[/]: {stats['found']}/{stats['unique']}")

    table = Table(title="Word lengths")
    table.add_column("Length", justify="right")
    table.add_column("Words", justify="right")
    for length, count in stats["lengths"].items():
        table.add_row(str(length), str(count))
    print(table)


def cli():
    """Entry point for CLI."""
    app()


if __name__ == "__main__":
    cli()
