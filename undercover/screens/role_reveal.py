"""
Role Reveal Screen - pass the device, confirm identity, view the card
"""
from textual.app import ComposeResult
from textual.widgets import Header, Footer, Static, Button
from textual.containers import Container, Vertical, Center
from textual.binding import Binding
from textual.screen import Screen
from rich.text import Text
import asyncio

from undercover.model import Role
from undercover.service.roles import RevealState

from .components import ROLE_INFO


class RoleRevealScreen(Screen):
    """One card at a time; nothing is shown until the player confirms"""

    CSS = """
    RoleRevealScreen {
        background: $surface;
    }

    #reveal_container {
        width: 100%;
        height: 1fr;
        align: center middle;
    }

    #reveal_content {
        width: 70;
        height: auto;
        align: center middle;
        content-align: center middle;
    }

    #announcement {
        width: 100%;
        text-align: center;
        color: $success;
        margin-bottom: 1;
    }

    #seat_info {
        width: 100%;
        text-align: center;
        color: $text-muted;
    }

    #player_name {
        width: 100%;
        text-align: center;
        text-style: bold;
        color: $warning;
        margin-bottom: 2;
    }

    #card {
        width: 100%;
        height: auto;
        text-align: center;
        border: round $primary;
        padding: 1 2;
        margin-bottom: 1;
    }

    #hint {
        width: 100%;
        text-align: center;
        color: $text-muted;
        margin-bottom: 1;
    }

    #reveal_action {
        width: 100%;
    }
    """

    BINDINGS = [
        Binding("enter", "continue", "Continue"),
        Binding("escape", "app.quit", "Quit"),
    ]

    def __init__(self, session, **kwargs):
        super().__init__(**kwargs)
        self.session = session
        self.reveal = session.reveal
        self.done_event = asyncio.Event()

    def compose(self) -> ComposeResult:
        yield Header()
        yield Footer()

        with Container(id="reveal_container"):
            with Vertical(id="reveal_content"):
                yield Static("", id="announcement")
                yield Static("", id="seat_info")
                yield Static("", id="player_name")
                yield Static("", id="card")
                yield Static("", id="hint")
                with Center():
                    yield Button("", id="reveal_action", variant="primary")

    def on_mount(self) -> None:
        self._render_step()

    def _render_step(self) -> None:
        player = self.reveal.current_player
        if player is None:
            return

        self.query_one("#seat_info", Static).update(f"Player {self.reveal.position} / {self.reveal.total}")
        self.query_one("#player_name", Static).update(Text(player.name))
        announcement = self.query_one("#announcement", Static)
        card = self.query_one("#card", Static)
        hint = self.query_one("#hint", Static)
        button = self.query_one("#reveal_action", Button)

        if self.reveal.state is RevealState.HANDOVER:
            announcement.update(self.reveal.announcement or "")
            announcement.display = bool(self.reveal.announcement)
            card.display = False
            card.update("")
            hint.update(f"Pass the device to {player.name}.\nMake sure nobody else can see the screen.")
            button.label = f"I am {player.name}, ready"
            button.variant = "primary"
        else:
            announcement.display = False
            role, word = self.reveal.revealed_card()
            info = ROLE_INFO[role]
            if role is Role.MR_WHITE:
                secret = Text("\n\nYou have no secret word.", style="bold red")
            else:
                secret = Text(f"\n\nYour word\n{word}", style="bold")
            card.update(Text.assemble(
                Text(f"{info['icon']} {info['name']}\n", style="bold"),
                Text(info["description"], style="italic"),
                secret,
            ))
            card.display = True
            hint.update("Remember your word. Do not tell anyone.")
            button.label = "Finish dealing" if self.reveal.is_last else "Close & pass to next player"
            button.variant = "default"

        button.focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "reveal_action":
            self.action_continue()

    def action_continue(self) -> None:
        if self.done_event.is_set():
            return

        if self.reveal.state is RevealState.HANDOVER:
            self.session.confirm_ready()
        else:
            self.session.advance_reveal()

        if self.reveal.is_complete:
            self.done_event.set()
        else:
            self._render_step()
