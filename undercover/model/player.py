"""
Player Model

Represents one seat at the shared device. Roles and words are assigned in a
batch by the RoleAssigner; only the RoundEngine flips is_eliminated.
"""
import copy
import uuid
from enum import Enum
from typing import Optional


class Role(Enum):
    CIVILIAN = "civilian"
    UNDERCOVER = "undercover"
    MR_WHITE = "mr_white"

    @property
    def is_impostor(self) -> bool:
        return self is not Role.CIVILIAN


class Player:
    """
    A player in the match.

    word is the common word for a Civilian, the undercover word for an
    Undercover, and None for Mr. White.
    """
    def __init__(
        self,
        name: str,
        role: Role = Role.CIVILIAN,
        word: Optional[str] = None,
        player_id: Optional[str] = None,
    ):
        self.id = player_id or uuid.uuid4().hex
        self.name = name
        self.role = role
        self.word = word
        self.is_eliminated = False

    @property
    def is_active(self) -> bool:
        return not self.is_eliminated

    def snapshot(self) -> "Player":
        """Detached copy used for the final roster of a MatchResult"""
        return copy.copy(self)

    def __repr__(self) -> str:
        status = "eliminated" if self.is_eliminated else "active"
        return f"<Player {self.name!r} {self.role.value} {status}>"
