"""
Round Screen - clue order, then the elimination vote
"""
from textual.app import ComposeResult
from textual.widgets import Header, Footer, Label, Button, Static
from textual.containers import Container, Vertical, Horizontal
from textual.binding import Binding
from textual.screen import Screen
from rich.markup import escape
from rich.text import Text
from typing import Optional
import asyncio

from undercover.errors import InvalidTransitionError

from .components import PlayerStatusBar, PlayerCard, role_markup


class RoundScreen(Screen):
    """One clue phase and one vote"""

    CSS = """
    RoundScreen {
        background: $surface;
    }

    #player_bar {
        dock: top;
    }

    #round_container {
        width: 100%;
        height: 1fr;
        align: center middle;
    }

    #round_panel {
        width: 80;
        height: auto;
        background: $panel;
        border: solid $primary;
        padding: 2;
    }

    #round_title {
        width: 100%;
        text-align: center;
        color: $warning;
        text-style: bold;
        margin-bottom: 1;
    }

    #clue_order, #eliminated {
        width: 100%;
        margin-bottom: 1;
    }

    #instructions {
        width: 100%;
        text-align: center;
        color: $text-muted;
        margin-bottom: 1;
    }

    #button_container {
        width: 100%;
        height: auto;
        align: center middle;
    }

    #status_text {
        width: 100%;
        text-align: center;
        color: $warning;
        margin-top: 1;
    }
    """

    BINDINGS = [
        Binding("escape", "app.quit", "Quit"),
    ]

    def __init__(self, engine):
        super().__init__()
        self.engine = engine
        self.selected_id: Optional[str] = None
        self.done_event = asyncio.Event()

    def compose(self) -> ComposeResult:
        yield Header()
        yield Footer()

        yield PlayerStatusBar(
            players=self.engine.players,
            title=f"🗣 Round {self.engine.round_number}",
            id="player_bar",
        )

        with Container(id="round_container"):
            with Vertical(id="round_panel"):
                yield Label("All players have their words. Give your clues.", id="round_title")
                yield Static(self._clue_order_text(), id="clue_order")
                yield Static(self._eliminated_text(), id="eliminated")
                yield Label("Follow the order above, then start the vote.", id="instructions")
                with Horizontal(id="button_container"):
                    yield Button("Start vote", id="start_vote", variant="primary")
                    yield Button("Eliminate target", id="submit_vote", variant="error", disabled=True)
                yield Label("", id="status_text")

    def _clue_order_text(self) -> Text:
        text = Text("Clue order\n", style="bold")
        for position, player in enumerate(self.engine.clue_order, 1):
            text.append(f"  {position}. {player.name}\n")
        return text

    def _eliminated_text(self) -> str:
        eliminated = self.engine.eliminated_players()
        if not eliminated:
            return "[dim]No one has been eliminated yet[/dim]"
        lines = ["[bold]Eliminated[/bold]"]
        for player in eliminated:
            lines.append(f"  💀 {escape(player.name)} - {role_markup(player.role)}")
        return "\n".join(lines)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "start_vote":
            self.engine.start_vote()
            event.button.disabled = True
            self.query_one("#player_bar", PlayerStatusBar).set_selectable(True)
            self.query_one("#instructions", Label).update("Click the player the group votes out.")
        elif event.button.id == "submit_vote":
            self._submit_vote()

    def on_player_card_selected(self, event: PlayerCard.Selected) -> None:
        self.selected_id = event.player_id
        self.query_one("#player_bar", PlayerStatusBar).select(event.player_id)
        self.query_one("#submit_vote", Button).disabled = False
        self.set_status(f"Selected: {event.player_name}")

    def _submit_vote(self) -> None:
        try:
            self.engine.submit_vote(self.selected_id)
        except InvalidTransitionError:
            self.set_status("⚠️ Select a player first")
            return

        self.query_one("#submit_vote", Button).disabled = True
        self.query_one("#player_bar", PlayerStatusBar).disable_all()
        self.done_event.set()

    def set_status(self, message: str) -> None:
        self.query_one("#status_text", Label).update(Text(message))
