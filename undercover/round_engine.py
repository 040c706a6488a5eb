"""
Round Engine - clue order, voting, elimination and win checks
Handles the Mr. White capture and guess sub-flow with its countdown
"""
import asyncio
import random
from enum import Enum
from typing import Callable, List, Optional

from undercover.config import GAME_CONFIG
from undercover.errors import InvalidTransitionError
from undercover.model import Faction, MatchResult, Player, Role, WordPair
from undercover.service.judge import ExactMatchJudge
from undercover.service.roles import fisher_yates


class EngineState(Enum):
    CLUE = "clue"
    VOTING = "voting"
    MR_WHITE_CAPTURED = "mr_white_captured"
    ROUND_OVER = "round_over"
    GAME_OVER = "game_over"


class GuessOutcome(Enum):
    CORRECT = "correct"
    WRONG = "wrong"
    TIMEOUT = "timeout"


def evaluate_winner(players: List[Player]) -> Optional[Faction]:
    """
    Win check over the active players.

    - No active Undercover or Mr. White: Loyalists win
    - Impostors at parity with Civilians or above: Impostors win
    """
    active = [p for p in players if p.is_active]
    impostors = [p for p in active if p.role.is_impostor]
    loyalists = [p for p in active if p.role is Role.CIVILIAN]

    if not impostors:
        return Faction.LOYALISTS
    if len(impostors) >= len(loyalists):
        return Faction.IMPOSTORS
    return None


class MrWhiteCapture:
    """A voted-out Mr. White waiting on one guess or the countdown"""

    def __init__(self, player: Player, seconds: int):
        self.player = player
        self.time_left = seconds
        self.outcome: Optional[GuessOutcome] = None
        self.judging = False
        self.attempts = 0

    @property
    def settled(self) -> bool:
        return self.outcome is not None

    def settle(self, outcome: GuessOutcome) -> bool:
        """Latch the outcome; only the first caller wins"""
        if self.outcome is not None:
            return False
        self.outcome = outcome
        return True


class RoundEngine:
    """Runs rounds until a faction wins"""

    def __init__(
        self,
        players: List[Player],
        words: WordPair,
        judge=None,
        rng: Optional[random.Random] = None,
        logger=None,
        guess_seconds: Optional[int] = None,
    ):
        self.players = players
        self.words = words
        self.judge = judge or ExactMatchJudge()
        self.rng = rng or random.Random()
        self.logger = logger
        self.guess_seconds = (
            guess_seconds if guess_seconds is not None else GAME_CONFIG["mr_white_guess_seconds"]
        )

        self.state = EngineState.CLUE
        self.round_number = 1
        self.clue_order: List[Player] = []
        self.candidates: List[Player] = []
        self.capture: Optional[MrWhiteCapture] = None
        self.result: Optional[MatchResult] = None

        self._shuffle_clue_order()

    # ========================================================================
    # Roster
    # ========================================================================

    def active_players(self) -> List[Player]:
        return [p for p in self.players if p.is_active]

    def eliminated_players(self) -> List[Player]:
        return [p for p in self.players if p.is_eliminated]

    def _shuffle_clue_order(self):
        active = self.active_players()
        self.clue_order = [active[i] for i in fisher_yates(len(active), self.rng)]
        if self.logger:
            self.logger.log_clue_order(self.round_number, [p.name for p in self.clue_order])

    def _require(self, state: EngineState, operation: str):
        if self.state is not state:
            raise InvalidTransitionError(operation, self.state)

    # ========================================================================
    # Voting
    # ========================================================================

    def start_vote(self) -> List[Player]:
        """Clue phase is over; every active player is a candidate"""
        self._require(EngineState.CLUE, "start a vote")
        self.candidates = self.active_players()
        self.state = EngineState.VOTING
        return list(self.candidates)

    def submit_vote(self, player_id: Optional[str]) -> EngineState:
        """
        Eliminate the selected player, or capture them if they are Mr. White.
        A missing or unknown selection is rejected with no state change.
        """
        self._require(EngineState.VOTING, "submit a vote")
        if player_id is None:
            raise InvalidTransitionError("submit a vote", self.state, "no player selected")

        target = next((p for p in self.candidates if p.id == player_id), None)
        if target is None:
            raise InvalidTransitionError("submit a vote", self.state, f"{player_id!r} is not a candidate")

        self.candidates = []
        captured = target.role is Role.MR_WHITE
        print(f"[Engine] Round {self.round_number}: {target.name} voted out")
        if self.logger:
            self.logger.log_vote(self.round_number, target.name, captured)

        if captured:
            self.capture = MrWhiteCapture(target, self.guess_seconds)
            self.state = EngineState.MR_WHITE_CAPTURED
        else:
            self._eliminate(target)
        return self.state

    def _eliminate(self, player: Player):
        player.is_eliminated = True
        self._check_win_condition()

    def _check_win_condition(self):
        self.state = EngineState.ROUND_OVER
        winner = evaluate_winner(self.players)
        if winner:
            self._finish(winner)
            return

        self.round_number += 1
        self._shuffle_clue_order()
        self.state = EngineState.CLUE

    def _finish(self, winner: Faction):
        self.result = MatchResult.from_roster(winner, self.players)
        self.state = EngineState.GAME_OVER
        print(f"[Engine] GAME OVER - winner: {winner.value}")
        if self.logger:
            self.logger.log_game_end(
                winner.value, self.players, self.words.common_word, self.words.undercover_word
            )

    # ========================================================================
    # Mr. White guess
    # ========================================================================

    def _resolve(self, outcome: GuessOutcome) -> bool:
        capture = self.capture
        if not capture.settle(outcome):
            return False

        if self.logger:
            self.logger.log_guess_outcome(capture.player.name, outcome.value)

        if outcome is GuessOutcome.CORRECT:
            self._finish(Faction.MR_WHITE)
        else:
            self._eliminate(capture.player)
        return True

    def tick(self, seconds: int = 1) -> Optional[GuessOutcome]:
        """
        Count the guess timer down. Reaching zero settles the capture as a
        failed guess. Does nothing once the capture is settled.
        """
        capture = self.capture
        if capture is None or capture.settled:
            return None

        capture.time_left = max(0, capture.time_left - seconds)
        if capture.time_left == 0:
            self._resolve(GuessOutcome.TIMEOUT)
            return GuessOutcome.TIMEOUT
        return None

    async def run_countdown(
        self,
        interval: float = 1.0,
        on_tick: Optional[Callable[[int], None]] = None,
    ) -> GuessOutcome:
        """Tick once per interval until the capture is settled"""
        self._require(EngineState.MR_WHITE_CAPTURED, "start the countdown")
        capture = self.capture
        while not capture.settled:
            await asyncio.sleep(interval)
            if capture.settled:
                break
            self.tick()
            if on_tick:
                on_tick(capture.time_left)
        return capture.outcome

    async def submit_guess(self, guess: str) -> GuessOutcome:
        """
        Send Mr. White's guess to the judge.

        Only one guess may be in flight. If the countdown settles the capture
        while the judge is thinking, the judge's answer is ignored. A judge
        failure leaves the capture open so the guess can be retried.
        """
        self._require(EngineState.MR_WHITE_CAPTURED, "submit a guess")
        capture = self.capture
        if capture.judging:
            raise InvalidTransitionError("submit a guess", self.state, "a guess is already being judged")
        if not guess or not guess.strip():
            raise InvalidTransitionError("submit a guess", self.state, "guess is empty")

        capture.judging = True
        capture.attempts += 1
        try:
            verdict = await self.judge.judge(self.words.common_word, guess)
        except Exception:
            if capture.settled:
                return capture.outcome
            raise
        finally:
            capture.judging = False

        if capture.settled:
            print("[Engine] Judge answered after the countdown ended; ignoring")
            return capture.outcome

        outcome = GuessOutcome.CORRECT if verdict else GuessOutcome.WRONG
        self._resolve(outcome)
        return outcome
