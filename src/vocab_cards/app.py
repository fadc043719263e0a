"""Interactive CLI application."""
import logging
import re

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.progress_bar import ProgressBar
from rich.prompt import Prompt
from rich.table import Table
from rich.text import Text

from vocab_cards.config import load_settings
from vocab_cards.controller import NAVIGATE_NEXT, NAVIGATE_PREVIOUS, ReviewController
from vocab_cards.models import CANONICAL_HEADERS, LEARNING, UNDERSTOOD

console = Console()

EXAMPLE_ROWS = [
    ("ephemeral", "はかない", "/ɪˈfem(ə)rəl/", "lasting for a very short time",
     "The ephemeral beauty of cherry blossoms makes them special."),
    ("serendipity", "幸運な偶然", "/ˌserənˈdɪpəti/", "finding good things without looking for them",
     "Meeting my best friend was pure serendipity, as we both love the same, rare books."),
]

EMPTY_COMMANDS = [
    ("upload", "Load a CSV file"),
    ("example", "See CSV structure example"),
    ("quit", "Exit"),
]

REVIEW_COMMANDS = [
    ("flip", "Flip the card"),
    ("next", "Next card"),
    ("prev", "Previous card"),
    ("got", "Got it! (understood)"),
    ("learning", "Still learning"),
    ("shuffle", "Shuffle cards"),
    ("upload", "Upload new CSV"),
    ("quit", "Exit"),
]


def configure_logging(level: str = "WARNING") -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def highlight_word(text: str, word: str) -> list[tuple[str, bool]]:
    """Split ``text`` into (segment, matches_word) pairs, ignoring case."""
    if not word:
        return [(text, False)]
    parts = re.split(f"({re.escape(word)})", text, flags=re.IGNORECASE)
    return [(part, part.lower() == word.lower()) for part in parts if part]


def render_example(text: str, word: str) -> Text:
    rendered = Text(style="italic")
    for part, matched in highlight_word(text, word):
        rendered.append(part, style="bold blue" if matched else None)
    return rendered


def show_welcome():
    console.print(Panel(
        "[bold]English Flash Cards[/bold]\n[dim]Upload your CSV and start learning![/dim]",
        title="Welcome", border_style="blue",
    ))


def show_menu(commands: list) -> None:
    console.print("\n[bold]Commands:[/bold]")
    for cmd, desc in commands:
        console.print(f"  [cyan]{cmd:<10}[/cyan] {desc}")


def show_csv_example():
    table = Table(title="CSV File Structure Example")
    for header in CANONICAL_HEADERS.values():
        table.add_column(header)
    for row in EXAMPLE_ROWS:
        table.add_row(*row)
    console.print(table)
    console.print("[dim]Save your spreadsheet as a CSV file with these exact column headers.\n"
                  'Use quotes (") around text fields that contain commas.[/dim]')


def show_progress(controller: ReviewController) -> None:
    console.print(f"\n[bold]Learning Progress[/bold]  {controller.percentage}%")
    console.print(ProgressBar(total=100, completed=controller.percentage, width=40))
    console.print(f"[dim]{controller.understood} of {controller.total} words mastered[/dim]")


def show_card(controller: ReviewController, flipped: bool) -> None:
    card = controller.current_card
    if card is None:
        return
    position = f"{controller.cursor + 1} / {controller.total}"
    status_color = "green" if card.status == UNDERSTOOD else "yellow"
    subtitle = f"[{status_color}]{card.status}[/{status_color}]"
    if not flipped:
        body = Text.assemble(
            (card.word, "bold"), "\n", (card.phonetic, "dim"), "\n\n",
            render_example(card.example, card.word),
        )
        console.print(Panel(body, title=position, subtitle=subtitle, border_style="cyan"))
    else:
        body = Text.assemble(
            ("English Definition\n", "dim"), card.definition, "\n\n",
            ("Japanese Translation\n", "dim"), card.meaning,
        )
        console.print(Panel(body, title=position, subtitle=subtitle, border_style="green"))


def cmd_upload(controller: ReviewController) -> None:
    file_path = Prompt.ask("CSV file path").strip()
    error = controller.import_file(file_path)
    if error:
        console.print(f"[red]{error}[/red]")
        return
    console.print(f"[green]Loaded {controller.total} cards.[/green]")


def handle_review_command(controller: ReviewController, choice: str, flipped: bool) -> bool:
    """Apply one review command. Returns whether the card is now flipped."""
    if choice == "flip":
        return not flipped
    if choice == "next":
        controller.on_navigate(NAVIGATE_NEXT)
    elif choice == "prev":
        controller.on_navigate(NAVIGATE_PREVIOUS)
    elif choice == "got":
        controller.on_mark_status(UNDERSTOOD)
    elif choice == "learning":
        controller.on_mark_status(LEARNING)
    elif choice == "shuffle":
        controller.on_reshuffle()
    elif choice == "upload":
        controller.on_reset()
        cmd_upload(controller)
    else:
        console.print("[red]Unknown command. Try again.[/red]")
        return flipped
    return False


def main():
    settings = load_settings()
    configure_logging(settings.log_level)
    controller = ReviewController(settings.db_path, settings.storage_key,
                                  legacy_quotes=settings.legacy_quotes)
    controller.start()

    show_welcome()
    flipped = False

    while True:
        if controller.total == 0:
            show_menu(EMPTY_COMMANDS)
        else:
            show_progress(controller)
            show_card(controller, flipped)
            show_menu(REVIEW_COMMANDS)
        default = "upload" if controller.total == 0 else "flip"
        choice = Prompt.ask("\n[bold]>[/bold]", default=default).strip().lower()
        try:
            if choice in ("quit", "exit", "q"):
                console.print("[dim]Keep practicing![/dim]")
                break
            elif controller.total == 0:
                if choice == "upload":
                    cmd_upload(controller)
                elif choice == "example":
                    show_csv_example()
                else:
                    console.print("[red]Unknown command. Try again.[/red]")
                flipped = False
            else:
                flipped = handle_review_command(controller, choice, flipped)
        except KeyboardInterrupt:
            console.print("\n[dim]Use 'quit' to exit.[/dim]")
        except Exception as e:
            console.print(f"[red]Error: {e}[/red]")


if __name__ == "__main__":
    main()
