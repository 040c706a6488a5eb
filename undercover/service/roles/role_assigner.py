"""
Role Assigner - builds the roster and deals roles and words
"""
import random
from typing import List, Optional, Sequence

from undercover.config import GAME_CONFIG
from undercover.errors import ConfigurationError
from undercover.model import Player, Role, RoleConfig, WordPair


def fisher_yates(count: int, rng: random.Random) -> List[int]:
    """Uniform permutation of range(count), driven only by rng"""
    indices = list(range(count))
    for i in range(count - 1, 0, -1):
        j = rng.randrange(i + 1)
        indices[i], indices[j] = indices[j], indices[i]
    return indices


def validate_setup(names: Sequence[str], config: RoleConfig):
    """Reject player lists and role counts that cannot make a valid match"""
    min_players = GAME_CONFIG["min_players"]
    if len(names) < min_players:
        raise ConfigurationError(f"At least {min_players} players are required, got {len(names)}")

    for name in names:
        if not isinstance(name, str) or not name.strip():
            raise ConfigurationError("Player names must be non-empty")

    if config.mr_white_count < 0 or config.undercover_count < 0:
        raise ConfigurationError("Role counts cannot be negative")

    if config.impostor_count >= len(names):
        raise ConfigurationError(
            f"{config.mr_white_count} Mr. White + {config.undercover_count} Undercover "
            f"leaves no Civilian among {len(names)} players"
        )


def validate_words(words: WordPair):
    if not words.common_word.strip() or not words.undercover_word.strip():
        raise ConfigurationError("Both secret words are required")


class RoleAssigner:
    """Deals roles: shuffle seats, then Mr. White, Undercover, Civilian"""

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def assign(self, names: Sequence[str], words: WordPair, config: RoleConfig) -> List[Player]:
        """
        Create one player per name, in name order, with roles dealt over a
        random permutation of seats.
        """
        validate_setup(names, config)

        players = [Player(name, Role.CIVILIAN, words.common_word) for name in names]
        order = fisher_yates(len(players), self.rng)

        for seat in order[:config.mr_white_count]:
            players[seat].role = Role.MR_WHITE
            players[seat].word = None

        undercover_seats = order[config.mr_white_count:config.impostor_count]
        for seat in undercover_seats:
            players[seat].role = Role.UNDERCOVER
            players[seat].word = words.undercover_word

        return players
