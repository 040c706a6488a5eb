"""
Shared UI Components for the Undercover TUI
"""
from textual.app import ComposeResult
from textual.widget import Widget
from textual.widgets import Static
from textual.containers import Horizontal
from textual.message import Message
from rich.text import Text
from typing import List, Optional

from undercover.model import Player, Role


# Seat colors that read well on dark terminals
PLAYER_COLORS = [
    "#00BFFF",  # Deep Sky Blue
    "#FF6B6B",  # Coral Red
    "#98D8AA",  # Mint Green
    "#DDA0DD",  # Plum
    "#F4D03F",  # Golden Yellow
    "#87CEEB",  # Sky Blue
    "#FF8C00",  # Dark Orange
    "#00CED1",  # Dark Turquoise
]

ROLE_INFO = {
    Role.CIVILIAN: {
        "icon": "👤",
        "name": "Civilian",
        "description": "Most players share your word. Find the ones who don't.",
    },
    Role.UNDERCOVER: {
        "icon": "🕵",
        "name": "Undercover",
        "description": "Your word differs from the majority. Blend in and survive.",
    },
    Role.MR_WHITE: {
        "icon": "❔",
        "name": "Mr. White",
        "description": "You have no secret word. Work out the Civilians' word!",
    },
}


def get_player_color(seat: int) -> str:
    return PLAYER_COLORS[seat % len(PLAYER_COLORS)]


def role_markup(role: Role) -> str:
    """Rich markup for a role name"""
    info = ROLE_INFO[role]
    color = {Role.CIVILIAN: "green", Role.UNDERCOVER: "yellow", Role.MR_WHITE: "red"}[role]
    return f"[bold {color}]{info['icon']} {info['name']}[/bold {color}]"


class PlayerCard(Static):
    """Single player card widget - clickable when voting"""

    class Selected(Message):
        """Message sent when a player card is clicked"""
        def __init__(self, player_id: str, player_name: str) -> None:
            self.player_id = player_id
            self.player_name = player_name
            super().__init__()

    DEFAULT_CSS = """
    PlayerCard {
        width: auto;
        height: 5;
        min-width: 12;
        padding: 0 1;
        margin: 0 1;
        border: solid $primary;
        content-align: center middle;
    }

    PlayerCard.active {
        background: $surface;
    }

    PlayerCard.eliminated {
        border: solid $error;
        background: $surface-darken-2;
        color: $text-muted;
    }

    PlayerCard.selected {
        border: heavy $warning;
        background: $warning 30%;
    }

    PlayerCard.selectable:hover {
        border: solid $warning;
        background: $warning 10%;
    }

    PlayerCard.disabled {
        opacity: 0.5;
    }
    """

    def __init__(self, player: Player, seat: int, selectable: bool = False, **kwargs):
        super().__init__(**kwargs)
        self.player = player
        self.seat = seat
        self.selectable = selectable
        self._update_classes()

    def _update_classes(self):
        self.remove_class("active", "eliminated", "selectable")
        self.add_class("eliminated" if self.player.is_eliminated else "active")
        if self.selectable and self.player.is_active:
            self.add_class("selectable")

    def on_mount(self) -> None:
        self._render_card()

    def _render_card(self) -> None:
        if self.player.is_eliminated:
            self.update(Text(f"💀 {self.player.name}"))
        else:
            self.update(Text(self.player.name, style=f"bold {get_player_color(self.seat)}"))

    def on_click(self) -> None:
        if self.selectable and self.player.is_active and not self.has_class("disabled"):
            self.post_message(self.Selected(self.player.id, self.player.name))

    def set_selected(self, selected: bool) -> None:
        if selected:
            self.add_class("selected")
        else:
            self.remove_class("selected")

    def set_selectable(self, selectable: bool) -> None:
        self.selectable = selectable
        self._update_classes()

    def set_disabled(self, disabled: bool) -> None:
        if disabled:
            self.add_class("disabled")
            self.selectable = False
        else:
            self.remove_class("disabled")


class PlayerStatusBar(Widget):
    """Horizontal bar showing every player's status"""

    DEFAULT_CSS = """
    PlayerStatusBar {
        width: 100%;
        height: auto;
        min-height: 7;
        background: $surface-darken-1;
        padding: 1;
    }

    PlayerStatusBar > Horizontal {
        width: 100%;
        height: auto;
        align: center middle;
    }

    PlayerStatusBar .title {
        width: 100%;
        text-align: center;
        text-style: bold;
        color: $text;
        margin-bottom: 1;
    }
    """

    def __init__(
        self,
        players: List[Player],
        title: Optional[str] = None,
        selectable: bool = False,
        **kwargs
    ):
        super().__init__(**kwargs)
        self.players = players
        self.title = title
        self.selectable = selectable
        self.player_cards: List[PlayerCard] = []

    def compose(self) -> ComposeResult:
        if self.title:
            yield Static(self.title, classes="title")

        with Horizontal():
            for seat, player in enumerate(self.players):
                card = PlayerCard(
                    player,
                    seat,
                    selectable=self.selectable and player.is_active,
                    id=f"player_card_{player.id}",
                )
                self.player_cards.append(card)
                yield card

    def set_selectable(self, selectable: bool) -> None:
        for card in self.player_cards:
            card.set_selectable(selectable and card.player.is_active)

    def select(self, player_id: str) -> None:
        for card in self.player_cards:
            card.set_selected(card.player.id == player_id)

    def disable_all(self) -> None:
        for card in self.player_cards:
            card.set_disabled(True)
