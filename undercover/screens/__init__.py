"""
TUI Screens for the Undercover game
"""
from .setup import SetupScreen
from .role_reveal import RoleRevealScreen
from .round import RoundScreen
from .mr_white_guess import MrWhiteGuessScreen
from .game_over import GameOverScreen
from .components import PlayerStatusBar, PlayerCard, get_player_color, role_markup, PLAYER_COLORS, ROLE_INFO

__all__ = [
    'SetupScreen',
    'RoleRevealScreen',
    'RoundScreen',
    'MrWhiteGuessScreen',
    'GameOverScreen',
    'PlayerStatusBar',
    'PlayerCard',
    'get_player_color',
    'role_markup',
    'PLAYER_COLORS',
    'ROLE_INFO',
]
