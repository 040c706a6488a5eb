"""
Setup Screen for players, role counts and secret words
"""
from textual.app import ComposeResult
from textual.widgets import Header, Footer, Label, RichLog, Input, Button
from textual.containers import ScrollableContainer, Horizontal
from textual.binding import Binding
from textual.screen import Screen
from textual import on
from rich.text import Text
from typing import List
import asyncio

from undercover.config import GAME_CONFIG
from undercover.errors import ConfigurationError
from undercover.model import RoleConfig, WordPair


class SetupScreen(Screen):
    """Initial game setup screen"""

    CSS = """
    SetupScreen {
        background: $surface;
    }

    #setup_container {
        width: 100%;
        height: 100%;
        background: $surface;
        padding: 2;
    }

    .setup_title {
        text-align: center;
        text-style: bold;
        color: $accent;
        margin-bottom: 1;
    }

    .input_row {
        height: auto;
        margin: 1 0;
    }

    .label {
        width: 30;
        content-align: left middle;
    }

    .input_field {
        width: 1fr;
    }

    #player_list {
        height: 10;
        margin: 1 0;
    }

    .button_row {
        height: auto;
        align: center middle;
        margin-top: 1;
    }

    Button {
        margin: 0 1;
    }
    """

    BINDINGS = [
        Binding("escape", "quit", "Quit"),
    ]

    def __init__(self, session):
        super().__init__()
        self.session = session
        self.names: List[str] = []
        self.done_event = asyncio.Event()

    def compose(self) -> ComposeResult:
        yield Header()
        yield Footer()

        defaults = GAME_CONFIG["default_role_config"]
        with ScrollableContainer(id="setup_container"):
            yield Label("🕵 Undercover - Setup", classes="setup_title")

            # Players
            with Horizontal(classes="input_row"):
                yield Input(placeholder="Player name", id="name_input", classes="input_field")
                yield Button("Add", id="add_player", variant="primary")
                yield Button("Remove last", id="remove_player", variant="default")

            yield RichLog(id="player_list", highlight=False, markup=True)

            # Role counts
            with Horizontal(classes="input_row"):
                yield Label("Undercover:", classes="label")
                yield Input(str(defaults["undercover"]), id="undercover_count", type="integer",
                            classes="input_field")

            with Horizontal(classes="input_row"):
                yield Label(f"Mr. White (0-{GAME_CONFIG['max_mr_white']}):", classes="label")
                yield Input(str(defaults["mr_white"]), id="mr_white_count", type="integer",
                            classes="input_field")

            # Secret words
            with Horizontal(classes="input_row"):
                yield Label("Civilian word:", classes="label")
                yield Input(placeholder="e.g. Kopi", password=True, id="common_word", classes="input_field")

            with Horizontal(classes="input_row"):
                yield Label("Undercover word:", classes="label")
                yield Input(placeholder="e.g. Teh", password=True, id="undercover_word",
                            classes="input_field")

            with Horizontal(classes="button_row"):
                yield Button("Random words", id="random_words", variant="default")
                yield Button("Start game", id="start_game", variant="success")
                yield Button("Quit", id="quit_btn", variant="error")

    def on_mount(self) -> None:
        self._update_player_display()
        self.query_one("#name_input", Input).focus()

    @on(Input.Submitted, "#name_input")
    @on(Button.Pressed, "#add_player")
    def add_player(self) -> None:
        name_input = self.query_one("#name_input", Input)
        name = name_input.value.strip()
        if not name:
            return

        if len(self.names) >= GAME_CONFIG["max_players"]:
            self._show_error(f"At most {GAME_CONFIG['max_players']} players")
            return

        self.names.append(name)
        name_input.value = ""
        self._update_player_display()

    @on(Button.Pressed, "#remove_player")
    def remove_player(self) -> None:
        if self.names:
            self.names.pop()
            self._update_player_display()

    @on(Button.Pressed, "#random_words")
    def random_words(self) -> None:
        pair = self.session.suggest_words()
        self.query_one("#common_word", Input).value = pair.common_word
        self.query_one("#undercover_word", Input).value = pair.undercover_word

    @on(Button.Pressed, "#start_game")
    def start_game(self) -> None:
        """Validate and start the match"""
        try:
            undercover = int(self.query_one("#undercover_count", Input).value or 0)
            mr_white = int(self.query_one("#mr_white_count", Input).value or 0)
        except ValueError:
            self._show_error("Role counts must be whole numbers")
            return

        if mr_white > GAME_CONFIG["max_mr_white"]:
            self._show_error(f"At most {GAME_CONFIG['max_mr_white']} Mr. White")
            return

        words = WordPair(
            self.query_one("#common_word", Input).value.strip(),
            self.query_one("#undercover_word", Input).value.strip(),
        )

        try:
            self.session.start_match(self.names, words, RoleConfig(mr_white, undercover))
        except ConfigurationError as e:
            self._show_error(str(e))
            return

        self.done_event.set()

    @on(Button.Pressed, "#quit_btn")
    def quit_game(self) -> None:
        self.app.exit()

    def action_quit(self) -> None:
        self.app.exit()

    def _update_player_display(self) -> None:
        log = self.query_one("#player_list", RichLog)
        log.clear()

        if not self.names:
            log.write(Text("No players yet", style="dim"))
            return

        for i, name in enumerate(self.names, 1):
            log.write(Text(f"{i}. {name}", style="green"))
        log.write(Text(f"\nTotal players: {len(self.names)}", style="bold cyan"))

    def _show_error(self, message: str) -> None:
        log = self.query_one("#player_list", RichLog)
        log.write(Text(f"❌ {message}", style="bold red"))
