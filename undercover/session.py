"""
Game Session - owns word history, the roster and the current match
Wires word selection, role assignment, the reveal pass and the round engine
"""
import random
import uuid
from enum import Enum
from typing import List, Optional, Sequence

from undercover.config import GAME_CONFIG, LOG_CONFIG
from undercover.errors import InvalidTransitionError
from undercover.game_logger import GameLogger
from undercover.model import MatchResult, Player, RoleConfig, WordPair
from undercover.round_engine import EngineState, RoundEngine
from undercover.service.judge import build_guess_judge
from undercover.service.roles import (
    RevealSequencer,
    RevealState,
    RoleAssigner,
    validate_setup,
    validate_words,
)
from undercover.service.words import WordBank, WordSelector


REPLAY_ANNOUNCEMENT = "New game started with the same players."


class SessionPhase(Enum):
    SETUP = "setup"
    ASSIGNMENT = "assignment"
    ROUND = "round"
    GAME_OVER = "game_over"


class GameSession:
    """Top-level controller for a chain of matches on one device"""

    def __init__(
        self,
        word_bank: Optional[WordBank] = None,
        judge=None,
        rng: Optional[random.Random] = None,
        logger: Optional[GameLogger] = None,
    ):
        seed = GAME_CONFIG.get("seed")
        self.rng = rng or random.Random(seed)
        self.session_id = str(uuid.uuid4())[:8]
        self.judge = judge or build_guess_judge()
        self.logger = logger

        self.word_selector = WordSelector(word_bank, self.rng)
        self.role_assigner = RoleAssigner(self.rng)

        self.history: List[str] = []
        self.players: List[Player] = []
        self.words: Optional[WordPair] = None
        self.config: Optional[RoleConfig] = None
        self.match_number = 0

        self.reveal: Optional[RevealSequencer] = None
        self.round_engine: Optional[RoundEngine] = None

    # ========================================================================
    # State
    # ========================================================================

    @property
    def phase(self) -> SessionPhase:
        if self.round_engine is not None:
            if self.round_engine.state is EngineState.GAME_OVER:
                return SessionPhase.GAME_OVER
            return SessionPhase.ROUND
        if self.reveal is not None:
            return SessionPhase.ASSIGNMENT
        return SessionPhase.SETUP

    @property
    def result(self) -> Optional[MatchResult]:
        return self.round_engine.result if self.round_engine else None

    def _require(self, phase: SessionPhase, operation: str):
        if self.phase is not phase:
            raise InvalidTransitionError(operation, self.phase)

    # ========================================================================
    # Setup
    # ========================================================================

    def suggest_words(self) -> WordPair:
        """Random pair for the setup screen; history is not touched"""
        pair, _ = self.word_selector.select_pair([])
        return pair

    def start_match(self, names: Sequence[str], words: WordPair, config: RoleConfig) -> RevealSequencer:
        """
        Deal roles for a fresh session and begin the reveal pass.

        Raises:
            ConfigurationError: bad names, role counts or words
        """
        self._require(SessionPhase.SETUP, "start a match")
        validate_setup(names, config)
        validate_words(words)

        if self.logger is None and LOG_CONFIG["enabled"]:
            self.logger = GameLogger(self.session_id)

        self.history = list(self.history) + words.words()
        self.config = config
        return self._deal([name.strip() for name in names], words)

    def _deal(self, names: List[str], words: WordPair, announcement: Optional[str] = None) -> RevealSequencer:
        self.players = self.role_assigner.assign(names, words, self.config)
        self.words = words
        self.match_number += 1
        self.round_engine = None
        self.reveal = RevealSequencer(self.players, announcement)

        print(f"[Session] Match {self.match_number} dealt to {len(self.players)} players")
        if self.logger:
            self.logger.log_match_start(
                self.match_number, names, self.config.mr_white_count, self.config.undercover_count
            )
        return self.reveal

    # ========================================================================
    # Reveal pass
    # ========================================================================

    def confirm_ready(self) -> Player:
        self._require(SessionPhase.ASSIGNMENT, "reveal a card")
        return self.reveal.confirm_ready()

    def advance_reveal(self) -> RevealState:
        """Move the reveal pass on; after the last player the rounds begin"""
        self._require(SessionPhase.ASSIGNMENT, "advance the reveal")
        state = self.reveal.advance()
        if state is RevealState.COMPLETE:
            self.round_engine = RoundEngine(
                self.players, self.words, judge=self.judge, rng=self.rng, logger=self.logger
            )
            print("[Session] Reveal complete, rounds begin")
        return state

    # ========================================================================
    # Replay
    # ========================================================================

    def play_again(self) -> RevealSequencer:
        """Same names, new words from the rotation, fresh roles"""
        self._require(SessionPhase.GAME_OVER, "play again")
        pair, did_reset = self.word_selector.select_pair(self.history)
        self.history = WordSelector.updated_history(self.history, pair, did_reset)
        if did_reset:
            print("[Session] Word catalogue exhausted, history restarted")

        names = [p.name for p in self.players]
        return self._deal(names, pair, REPLAY_ANNOUNCEMENT)

    def reset(self):
        """Back to setup; history and roster are cleared"""
        self.history = []
        self.players = []
        self.words = None
        self.config = None
        self.reveal = None
        self.round_engine = None
