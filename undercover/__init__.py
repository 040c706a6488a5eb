"""
Undercover - shared-device social deduction game engine
"""

from undercover.errors import (
    UndercoverError,
    ConfigurationError,
    JudgeUnavailableError,
    InvalidTransitionError,
)
from undercover.model import Player, Role, WordPair, RoleConfig, Faction, MatchResult
from undercover.round_engine import RoundEngine, EngineState, GuessOutcome, evaluate_winner
from undercover.session import GameSession, SessionPhase

__all__ = [
    "UndercoverError",
    "ConfigurationError",
    "JudgeUnavailableError",
    "InvalidTransitionError",
    "Player",
    "Role",
    "WordPair",
    "RoleConfig",
    "Faction",
    "MatchResult",
    "RoundEngine",
    "EngineState",
    "GuessOutcome",
    "evaluate_winner",
    "GameSession",
    "SessionPhase",
]
