"""
Game Over Screen
"""
from textual.app import ComposeResult
from textual.widgets import Header, Footer, Label, Static, Button
from textual.containers import Container, Vertical, Horizontal
from textual.binding import Binding
from textual.screen import Screen
from rich.markup import escape
from rich.table import Table
from typing import Optional
import asyncio

from undercover.model import Faction, MatchResult, WordPair

from .components import role_markup


WINNER_DISPLAY = {
    Faction.LOYALISTS: ("🎉 Civilians win! 🎉", "green"),
    Faction.IMPOSTORS: ("🕵 Undercover wins! 🕵", "yellow"),
    Faction.MR_WHITE: ("❔ Mr. White wins! ❔", "red"),
}


class GameOverScreen(Screen):
    """Final results with every role and both words revealed"""

    CSS = """
    GameOverScreen {
        background: $surface;
    }

    #game_over_container {
        width: 100%;
        height: 100%;
        align: center middle;
    }

    #result_panel {
        width: 90;
        height: auto;
        background: $panel;
        border: solid $primary;
        padding: 2;
        align-horizontal: center;
    }

    #winner_title {
        width: 100%;
        text-align: center;
        text-style: bold;
        margin-bottom: 1;
        height: auto;
    }

    #words {
        width: 100%;
        text-align: center;
        margin-bottom: 1;
    }

    #roles_table {
        width: 100%;
        height: auto;
        margin-bottom: 2;
        content-align: center middle;
    }

    #button_container {
        width: 100%;
        height: auto;
        align: center middle;
    }

    #button_container Button {
        margin: 0 1;
    }

    #status_text {
        width: 100%;
        text-align: center;
        color: $text-muted;
        margin-top: 1;
    }
    """

    BINDINGS = [
        Binding("escape", "exit_game", "Exit"),
    ]

    def __init__(self, result: MatchResult, words: WordPair):
        super().__init__()
        self.result = result
        self.words = words
        self.choice: Optional[str] = None
        self.done_event = asyncio.Event()

    def compose(self) -> ComposeResult:
        yield Header()
        yield Footer()

        with Container(id="game_over_container"):
            with Vertical(id="result_panel"):
                yield Label(id="winner_title")
                yield Static(id="words")
                yield Static(id="roles_table")
                with Horizontal(id="button_container"):
                    yield Button("Play again", id="play_again", variant="success")
                    yield Button("New game", id="new_game", variant="primary")
                    yield Button("Exit", id="exit_button", variant="error")
                yield Label("", id="status_text")

    def on_mount(self) -> None:
        title, color = WINNER_DISPLAY[self.result.winning_faction]
        winner_label = self.query_one("#winner_title", Label)
        winner_label.update(title)
        winner_label.styles.color = color

        words = Table.grid(padding=(0, 4))
        words.add_row("[dim]Civilian word[/dim]", "[dim]Undercover word[/dim]")
        words.add_row(f"[bold]{escape(self.words.common_word)}[/bold]",
                      f"[bold yellow]{escape(self.words.undercover_word)}[/bold yellow]")
        self.query_one("#words", Static).update(words)

        table = Table(title="🎭 Final roster", show_header=True, header_style="bold cyan")
        table.add_column("#", style="cyan", no_wrap=True)
        table.add_column("Name", style="white")
        table.add_column("Role", style="bold")
        table.add_column("Status", style="dim")

        for seat, player in enumerate(self.result.final_roster, 1):
            status = "[red]💀 eliminated[/red]" if player.is_eliminated else "[green]😊 active[/green]"
            table.add_row(str(seat), escape(player.name), role_markup(player.role), status)

        self.query_one("#roles_table", Static).update(table)
        self.query_one("#play_again", Button).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        choices = {"play_again": "again", "new_game": "new", "exit_button": "exit"}
        if event.button.id in choices:
            self._choose(choices[event.button.id])

    def action_exit_game(self) -> None:
        self._choose("exit")

    def _choose(self, choice: str) -> None:
        if self.choice is None:
            self.choice = choice
            self.done_event.set()

    def show_status(self, message: str) -> None:
        """Shown while the next match is dealt"""
        for button in self.query("#button_container Button"):
            button.disabled = True
        self.query_one("#status_text", Label).update(message)
