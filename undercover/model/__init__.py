"""
Game Models Package

Players, word pairs, role counts and match results shared by the engine,
the session controller and the screens.
"""

from .player import Player, Role
from .words import WordPair, RoleConfig
from .result import Faction, MatchResult

__all__ = ["Player", "Role", "WordPair", "RoleConfig", "Faction", "MatchResult"]
