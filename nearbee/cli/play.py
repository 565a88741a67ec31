#!/usr/bin/env python3
"""Play a puzzle in the terminal."""

from __future__ import annotations
import random
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console

from ..core.env import load_env, get_settings
from ..core.log import configure_logging
from ..errors import ConfigurationError
from ..game_loop import (
    ClearMessage,
    LetterStatus,
    ScheduleClearMessage,
    Submit,
    ToggleWordlist,
    action_for_key,
    classify_letter,
)
from ..models import PuzzleDefinition
from ..session import PuzzleSession
from ..storage import JsonFileStore

app = typer.Typer()
console = Console()

STATUS_STYLE = {
    LetterStatus.PURPLE: "bold magenta",
    LetterStatus.DISABLED: "dim red",
    LetterStatus.NORMAL: "white",
}


def format_guess(puzzle: PuzzleDefinition, guess: str) -> str:
    """Rich markup for a guess: center highlighted, extra letters colored."""
    parts = []
    for c in guess:
        if c == puzzle.center:
            parts.append(f"[bold yellow]{c}[/]")
            continue
        status = classify_letter(puzzle, guess, c)
        if status == LetterStatus.IN_GRID:
            parts.append(c)
        else:
            parts.append(f"[{STATUS_STYLE[status]}]{c}[/]")
    return "".join(parts)


def render(session: PuzzleSession):
    state = session.state
    puzzle = session.puzzle
    console.print(
        f"[bold yellow]{puzzle.center.upper()}[/]  "
        + " ".join(c.upper() for c in state.letter_order)
        + f"    Found {session.found_count}/{session.total_words}"
    )
    if state.wordlist_visible and state.found_words:
        console.print("[dim]" + ", ".join(state.found_words) + "[/]")


def play_line(session: PuzzleSession, line: str) -> List[ScheduleClearMessage]:
    """Feed one typed line through the key mapping, then submit it."""
    timers = []
    for key in line:
        action = action_for_key(key)
        if action is not None:
            timers += session.handle(action)
    if session.guess:
        console.print(f"  {format_guess(session.puzzle, session.guess)}")
        timers += session.handle(Submit())
    return [t for t in timers if isinstance(t, ScheduleClearMessage)]


@app.command()
def main(
    puzzle_path: Optional[str] = typer.Argument(None, help="Puzzle JSON (default: today's puzzle)"),
    store: Optional[str] = typer.Option(None, help="Progress file"),
    seed: Optional[int] = typer.Option(None, help="Seed for shuffling"),
    verbose: bool = False,
):
    """
    Type a word and press Enter to submit it. A space shuffles the letters,
    ":w" shows or hides the found words, ":q" quits.
    """
    load_env()
    configure_logging(verbose)

    try:
        settings = get_settings()
        puzzle = PuzzleDefinition.load(Path(puzzle_path) if puzzle_path else settings.today_path)
        session = PuzzleSession(
            puzzle,
            JsonFileStore(store or settings.store_path),
            rng=random.Random(seed) if seed is not None else None,
            message_delay=settings.message_delay,
        )
    except ConfigurationError as e:
        console.print(f"[red]Error:[/] {e}")
        raise typer.Exit(1)

    console.rule("[bold cyan]Near Bee")
    while True:
        render(session)
        try:
            line = console.input("> ")
        except (EOFError, KeyboardInterrupt):
            break

        if line.strip() == ":q":
            break
        if line.strip() == ":w":
            session.handle(ToggleWordlist())
            continue

        timers = play_line(session, line)
        if session.message:
            console.print(f"[red]{session.message}[/]")
        # The prompt blocks, so a message is cleared once it has been shown.
        for timer in timers:
            session.handle(ClearMessage(timer.serial))

    console.print(f"\nFound {session.found_count}/{session.total_words} words")


def cli():
    """Entry point for CLI."""
    app()


if __name__ == "__main__":
    cli()
