"""
Reveal Sequencer - passes the device around so each player sees only
their own card, one player at a time, in roster order
"""
from enum import Enum
from typing import List, Optional, Tuple

from undercover.errors import ConfigurationError, InvalidTransitionError
from undercover.model import Player, Role


class RevealState(Enum):
    HANDOVER = "handover"
    REVEALED = "revealed"
    COMPLETE = "complete"


class RevealSequencer:
    """
    Single forward pass over the roster.

    HANDOVER --confirm_ready--> REVEALED --advance--> HANDOVER (next player)
    and after the last player, COMPLETE. Nothing moves without an explicit
    call and there is no way back to an earlier player.
    """

    def __init__(self, players: List[Player], announcement: Optional[str] = None):
        if not players:
            raise ConfigurationError("Cannot reveal an empty roster")
        self.players = list(players)
        self.announcement = announcement
        self.index = 0
        self.state = RevealState.HANDOVER

    @property
    def current_player(self) -> Optional[Player]:
        if self.state is RevealState.COMPLETE:
            return None
        return self.players[self.index]

    @property
    def position(self) -> int:
        """1-based seat of the current player"""
        return self.index + 1

    @property
    def total(self) -> int:
        return len(self.players)

    @property
    def is_last(self) -> bool:
        return self.index == len(self.players) - 1

    @property
    def is_complete(self) -> bool:
        return self.state is RevealState.COMPLETE

    def confirm_ready(self) -> Player:
        """The player holding the device confirms it is them"""
        if self.state is not RevealState.HANDOVER:
            raise InvalidTransitionError("reveal a card", self.state)
        self.state = RevealState.REVEALED
        return self.players[self.index]

    def revealed_card(self) -> Tuple[Role, Optional[str]]:
        if self.state is not RevealState.REVEALED:
            raise InvalidTransitionError("show a card", self.state, "no player has confirmed")
        player = self.players[self.index]
        return player.role, player.word

    def advance(self) -> RevealState:
        """Hide the card and hand the device to the next player"""
        if self.state is not RevealState.REVEALED:
            raise InvalidTransitionError("advance", self.state)

        if self.is_last:
            self.state = RevealState.COMPLETE
        else:
            self.index += 1
            self.state = RevealState.HANDOVER
        return self.state
