import random

import pytest

from conftest import KOPI_TEH
from undercover.errors import ConfigurationError, InvalidTransitionError
from undercover.model import Faction, Role, RoleConfig, WordPair
from undercover.round_engine import EngineState
from undercover.service.judge import ExactMatchJudge
from undercover.service.roles import RevealState
from undercover.service.words import WordBank
from undercover.session import REPLAY_ANNOUNCEMENT, GameSession, SessionPhase


NAMES = ["Ana", "Budi", "Citra", "Dewi"]


@pytest.fixture
def session(small_bank, logger):
    return GameSession(word_bank=small_bank, judge=ExactMatchJudge(),
                       rng=random.Random(99), logger=logger)


def finish_reveal(session):
    while session.phase is SessionPhase.ASSIGNMENT:
        session.confirm_ready()
        session.advance_reveal()


def vote_out_impostors(session):
    engine = session.round_engine
    while engine.state is not EngineState.GAME_OVER:
        engine.start_vote()
        target = next(p for p in engine.active_players() if p.role.is_impostor)
        engine.submit_vote(target.id)


def play_match(session):
    finish_reveal(session)
    vote_out_impostors(session)


def test_new_session_starts_in_setup(session):
    assert session.phase is SessionPhase.SETUP
    assert session.result is None
    assert session.history == []


def test_full_match_flow(session):
    reveal = session.start_match(NAMES, KOPI_TEH, RoleConfig(0, 1))
    assert session.phase is SessionPhase.ASSIGNMENT
    assert reveal.state is RevealState.HANDOVER
    assert reveal.announcement is None
    assert [p.name for p in session.players] == NAMES
    assert session.history == ["Kopi", "Teh"]

    first = session.confirm_ready()
    assert first.name == "Ana"

    finish_reveal(session)
    assert session.phase is SessionPhase.ROUND
    assert session.round_engine.state is EngineState.CLUE

    vote_out_impostors(session)
    assert session.phase is SessionPhase.GAME_OVER
    assert session.result.winning_faction is Faction.LOYALISTS


def test_names_are_trimmed(session):
    session.start_match(["  Ana ", "Budi", "Citra"], KOPI_TEH, RoleConfig(0, 1))
    assert [p.name for p in session.players] == ["Ana", "Budi", "Citra"]


@pytest.mark.parametrize("names,words,config", [
    (["Ana", "Budi"], KOPI_TEH, RoleConfig(0, 1)),
    (NAMES, KOPI_TEH, RoleConfig(2, 2)),
    (["Ana", " ", "Citra"], KOPI_TEH, RoleConfig(0, 1)),
    (NAMES, WordPair("", "Teh"), RoleConfig(0, 1)),
])
def test_invalid_start_stays_in_setup(session, names, words, config):
    with pytest.raises(ConfigurationError):
        session.start_match(names, words, config)
    assert session.phase is SessionPhase.SETUP
    assert session.history == []


def test_start_match_twice_is_rejected(session):
    session.start_match(NAMES, KOPI_TEH, RoleConfig(0, 1))
    with pytest.raises(InvalidTransitionError):
        session.start_match(NAMES, KOPI_TEH, RoleConfig(0, 1))


def test_reveal_operations_need_assignment_phase(session):
    with pytest.raises(InvalidTransitionError):
        session.confirm_ready()
    with pytest.raises(InvalidTransitionError):
        session.advance_reveal()


def test_play_again_needs_finished_match(session):
    with pytest.raises(InvalidTransitionError):
        session.play_again()

    session.start_match(NAMES, KOPI_TEH, RoleConfig(0, 1))
    finish_reveal(session)
    with pytest.raises(InvalidTransitionError):
        session.play_again()


def test_play_again_keeps_names_and_rotates_words(session):
    session.start_match(NAMES, KOPI_TEH, RoleConfig(0, 1))
    play_match(session)

    reveal = session.play_again()

    assert session.phase is SessionPhase.ASSIGNMENT
    assert session.match_number == 2
    assert reveal.announcement == REPLAY_ANNOUNCEMENT
    assert [p.name for p in session.players] == NAMES
    assert not any(p.is_eliminated for p in session.players)
    assert session.words.common_word != "Kopi"
    assert session.history == ["Kopi", "Teh"] + session.words.words()
    assert sum(p.role is Role.UNDERCOVER for p in session.players) == 1


def test_play_again_restarts_history_when_words_run_out(logger):
    bank = WordBank([KOPI_TEH, WordPair("Gitar", "Biola")])
    session = GameSession(word_bank=bank, judge=ExactMatchJudge(),
                          rng=random.Random(5), logger=logger)
    session.start_match(NAMES, KOPI_TEH, RoleConfig(0, 1))
    play_match(session)

    session.play_again()
    assert session.words == WordPair("Gitar", "Biola")
    assert session.history == ["Kopi", "Teh", "Gitar", "Biola"]
    play_match(session)

    session.play_again()
    assert session.history == session.words.words()
    assert len(session.history) == 2


def test_reset_returns_to_setup(session):
    session.start_match(NAMES, KOPI_TEH, RoleConfig(0, 1))
    play_match(session)

    session.reset()

    assert session.phase is SessionPhase.SETUP
    assert session.history == []
    assert session.players == []
    assert session.result is None
    session.start_match(["Eko", "Fajar", "Gita"], WordPair("Singa", "Harimau"), RoleConfig(0, 1))
    assert session.history == ["Singa", "Harimau"]


def test_suggest_words_leaves_history_alone(session):
    pair = session.suggest_words()
    assert pair in list(session.word_selector.word_bank)
    assert session.history == []


def test_match_start_is_logged(session, logger):
    session.start_match(NAMES, KOPI_TEH, RoleConfig(0, 1))
    with open(logger.log_file, encoding="utf-8") as f:
        log = f.read()
    assert "Match 1" in log
    assert "Players (4): Ana, Budi, Citra, Dewi" in log
    assert "Kopi" not in log
