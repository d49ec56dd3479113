import logging
import random
from pathlib import Path
from typing import Optional
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from hangman.config import DEFAULT_DICTIONARY, Settings
from hangman.errors import CorpusUnavailable, HangmanError
from hangman.game.engine import GameSession
from hangman.game.models import GameStatus, Mode, Outcome
from hangman.sources.factory import mode_descriptions
from hangman.words.bank import Dictionary

app = typer.Typer(help="Hangman: guess the word before you run out of lives.")
console = Console()

SURRENDER_KEY = "?"

def _setup_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )

def _load_dictionary(path: Path, rng: random.Random) -> Dictionary:
    try:
        return Dictionary.from_file(str(path), rng=rng)
    except CorpusUnavailable as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1)

@app.command()
def play(
    dictionary_file: Path = typer.Option(DEFAULT_DICTIONARY, "--dictionary", help="Path to word corpus"),
    mode: Mode = typer.Option(Mode.ADVERSARY, help="How the secret word is chosen"),
    length: int = typer.Option(4, help="Word length (ignored with --random-length)"),
    lives: int = typer.Option(7, help="Number of wrong guesses allowed"),
    random_length: bool = typer.Option(False, "--random-length/--fixed-length", help="Pick a weighted random word length"),
    seed: Optional[int] = typer.Option(None, help="Seed for reproducible games"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
):
    """
    Plays one game of hangman in the terminal.
    """
    _setup_logging(verbose)
    rng = random.Random(seed)

    try:
        settings = Settings(
            dictionary_path=dictionary_file,
            mode=mode,
            word_length=length,
            lives=lives,
            random_length=random_length,
        )
    except ValidationError as e:
        console.print(f"[red]Invalid settings: {e.errors()[0]['msg']}[/red]")
        raise typer.Exit(code=2)

    dictionary = _load_dictionary(settings.dictionary_path, rng)
    try:
        session = GameSession.from_config(dictionary, settings.game_config(dictionary, rng=rng), rng=rng)
    except HangmanError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=2)

    console.print(
        f"[bold]{session.mode.display_name}[/bold] mode, "
        f"{session.word_length} letters, {session.lives_remaining} lives. "
        f"Type [cyan]{SURRENDER_KEY}[/cyan] to give up."
    )

    while not session.is_game_over():
        console.print(
            f"\n[bold]{' '.join(session.render_solved())}[/bold]  "
            f"lives: {session.lives_remaining}  "
            f"used: {' '.join(session.used_letters) or '-'}"
        )
        try:
            guess = console.input("Letter: ").strip()
        except (EOFError, KeyboardInterrupt):
            guess = SURRENDER_KEY
            console.print()
        if guess == SURRENDER_KEY:
            session.surrender()
            break
        try:
            outcome = session.play_letter(guess)
        except HangmanError as e:
            console.print(f"[yellow]{e}[/yellow]")
            continue
        if outcome is Outcome.HIT:
            console.print("[green]Hit![/green]")
        else:
            console.print("[red]Miss.[/red]")

    if session.status is GameStatus.WON:
        console.print(f"\n[green]You win! The word was {session.answer()}.[/green]")
    else:
        console.print(f"\n[red]Game over. The word was {session.answer()}.[/red]")

@app.command()
def modes():
    """
    Lists the available word choice modes.
    """
    table = Table(title="Modes")
    table.add_column("Mode", style="cyan")
    table.add_column("Description")
    for name, description in mode_descriptions().items():
        table.add_row(name, description)
    console.print(table)

@app.command()
def stats(dictionary_file: Path = typer.Option(DEFAULT_DICTIONARY, "--dictionary", help="Path to word corpus")):
    """
    Shows how many words the dictionary holds for each length.
    """
    dictionary = _load_dictionary(dictionary_file, random.Random())
    table = Table(title=f"{dictionary_file.name}: {dictionary.total_word_count()} words")
    table.add_column("Length", justify="right")
    table.add_column("Words", justify="right")
    for length, count in dictionary.length_histogram().items():
        table.add_row(str(length), str(count))
    console.print(table)

if __name__ == "__main__":
    app()
