#!/usr/bin/env python3
"""Generate a puzzle definition from a center letter and a base word."""

from __future__ import annotations
from datetime import date
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from ..core.env import load_env, get_settings
from ..core.log import configure_logging
from ..errors import ConfigurationError
from ..generator import DictionaryTiers, generate
from ..models import BaseWordLetterSource

app = typer.Typer()
console = Console(stderr=True)


@app.command()
def main(
    center: str = typer.Argument(..., help="Center letter"),
    base_word: str = typer.Argument(..., help="Word spelling out all 7 puzzle letters"),
    obscurity: Optional[int] = typer.Option(None, "--obscurity", "-o", help="Highest word-list level to scan"),
    wordlist_dir: Optional[str] = typer.Option(None, help="Directory of english-words.<level> files"),
    out_dir: Optional[str] = typer.Option(None, help="Write <date>.json and today.json here instead of stdout"),
    puzzle_date: Optional[str] = typer.Option(None, "--date", help="Date for the output file name (default: today)"),
    dedupe: bool = typer.Option(False, help="Drop words repeated across levels"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every word found"),
):
    """
    Build the word list for a puzzle.

    Example:
        python -m nearbee.cli.generate g gamecock -o 50
        python -m nearbee.cli.generate g gamecock --out-dir word-lists
    """
    load_env()
    configure_logging(verbose, console)

    try:
        settings = get_settings()
        center_letter, outer = BaseWordLetterSource(center, base_word).letters()
        tiers = DictionaryTiers(directory=Path(wordlist_dir) if wordlist_dir else settings.wordlist_dir)
        puzzle = generate(
            center_letter,
            outer,
            tiers,
            max_obscurity=obscurity if obscurity is not None else settings.max_obscurity,
            dedupe=dedupe,
        )
    except ConfigurationError as e:
        console.print(f"[red]Error:[/] {e}")
        raise typer.Exit(1)

    if not puzzle.words:
        console.print(f"[red]No words found for {puzzle.key}, nothing written[/]")
        raise typer.Exit(1)

    if out_dir is None:
        typer.echo(puzzle.dumps().decode())
        return

    out = Path(out_dir)
    dated = out / f"{puzzle_date or date.today().isoformat()}.json"
    puzzle.save(dated)
    puzzle.save(out / "today.json")
    console.print(f"[green]Wrote[/] {len(puzzle.words)} words for {puzzle.key} to {dated} and {out / 'today.json'}")


def cli():
    """Entry point for CLI."""
    app()


if __name__ == "__main__":
    cli()
