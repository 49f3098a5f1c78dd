import logging
from pathlib import Path
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table
from wordladder.errors import WordLadderError
from wordladder.prompts.console import ConsolePrompter
from wordladder.prompts.templates import FAREWELL_MESSAGE, WELCOME_BANNER, format_ladder, ladder_steps
from wordladder.search.engine import LadderSearch
from wordladder.search.models import LadderResult
from wordladder.search.neighbors import one_hop_away
from wordladder.search.rules import normalize_word, validate_endpoints
from wordladder.words.bank import Dictionary

DEFAULT_DICTIONARY = str(Path(__file__).resolve().parent / "data" / "dictionary.txt")

app = typer.Typer(help="Word Ladder: change one word into another, one letter at a time.")
console = Console()

DictionaryOption = typer.Option(
    DEFAULT_DICTIONARY,
    envvar="WORDLADDER_DICTIONARY",
    help="Path to the word list (one word per line, or a JSON list)"
)
VerboseOption = typer.Option(False, "--verbose", "-v", help="Enable debug logging")

@app.command()
def play(dictionary_file: str = DictionaryOption, verbose: bool = VerboseOption):
    """
    Interactive session: asks for word pairs until an empty line is entered.
    """
    _configure_logging(verbose)
    dictionary = _load_dictionary(dictionary_file)
    search = LadderSearch(dictionary)
    prompter = ConsolePrompter(dictionary, console)

    console.print(WELCOME_BANNER, markup=False)
    while True:
        endpoints = prompter.ask_endpoints()
        if endpoints is None:
            break
        source, destination = endpoints
        result = search.search(source, destination)
        console.print(format_ladder(result) + "\n", markup=False)

    console.print(f"\n{FAREWELL_MESSAGE}", markup=False)

@app.command()
def solve(
    source: str = typer.Argument(..., help="Word to start from"),
    destination: str = typer.Argument(..., help="Word to reach"),
    dictionary_file: str = DictionaryOption,
    table: bool = typer.Option(False, "--table", help="Show the ladder as a table"),
    verbose: bool = VerboseOption
):
    """
    Finds the shortest ladder between two words.
    """
    _configure_logging(verbose)
    dictionary = _load_dictionary(dictionary_file)
    source, destination = normalize_word(source), normalize_word(destination)

    try:
        validate_endpoints(dictionary, source, destination)
    except WordLadderError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    result = LadderSearch(dictionary).search(source, destination)
    if table and result.found:
        _print_ladder_table(result)
    else:
        console.print(format_ladder(result), markup=False)

@app.command()
def neighbors(
    word: str = typer.Argument(..., help="Word to expand"),
    dictionary_file: str = DictionaryOption,
    verbose: bool = VerboseOption
):
    """
    Lists the dictionary words one letter away from WORD.
    """
    _configure_logging(verbose)
    dictionary = _load_dictionary(dictionary_file)
    word = normalize_word(word)
    if not word:
        console.print("[red]Error: The word is empty.[/red]")
        raise typer.Exit(code=1)

    found = sorted(one_hop_away(dictionary, {word}, word))
    if not found:
        console.print(f"No words one letter away from \"{word}\".", markup=False)
        return
    console.print(" ".join(found), markup=False)

def _configure_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)]
    )

def _load_dictionary(dictionary_file: str) -> Dictionary:
    try:
        return Dictionary.from_file(dictionary_file)
    except FileNotFoundError:
        console.print(f"[red]Error: {escape(dictionary_file)} not found.[/red]")
        raise typer.Exit(code=1)
    except WordLadderError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)

def _print_ladder_table(result: LadderResult):
    table = Table(title=f"{result.source} -> {result.destination} ({result.hops} hops)")
    table.add_column("Step", justify="right")
    table.add_column("Word", style="cyan")
    table.add_column("Changed", justify="right")

    for step, word, changed in ladder_steps(result):
        table.add_row(str(step), word, "-" if changed is None else str(changed))
    console.print(table)

if __name__ == "__main__":
    app()
