"""
Match outcome
"""
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .player import Player


class Faction(Enum):
    LOYALISTS = "loyalists"
    IMPOSTORS = "impostors"
    MR_WHITE = "mr_white"


@dataclass(frozen=True)
class MatchResult:
    """Created once when a win is detected; the roster is a snapshot."""
    winning_faction: Faction
    final_roster: Tuple[Player, ...]

    @classmethod
    def from_roster(cls, faction: Faction, players) -> "MatchResult":
        return cls(faction, tuple(p.snapshot() for p in players))

    @property
    def survivors(self) -> Tuple[Player, ...]:
        return tuple(p for p in self.final_roster if not p.is_eliminated)
