import pytest

from conftest import make_players
from undercover.errors import ConfigurationError, InvalidTransitionError
from undercover.model import Role
from undercover.service.roles import RevealSequencer, RevealState


def roster():
    return make_players(Role.CIVILIAN, Role.UNDERCOVER, Role.MR_WHITE, Role.CIVILIAN)


def test_full_pass_visits_each_player_once_in_order():
    players = roster()
    sequencer = RevealSequencer(players)
    revealed = []

    while not sequencer.is_complete:
        assert sequencer.state is RevealState.HANDOVER
        revealed.append(sequencer.confirm_ready())
        assert sequencer.state is RevealState.REVEALED
        sequencer.advance()

    assert revealed == players
    assert sequencer.state is RevealState.COMPLETE
    assert sequencer.current_player is None


def test_card_is_hidden_until_the_player_confirms():
    sequencer = RevealSequencer(roster())
    with pytest.raises(InvalidTransitionError):
        sequencer.revealed_card()

    sequencer.confirm_ready()
    assert sequencer.revealed_card() == (Role.CIVILIAN, "Kopi")

    sequencer.advance()
    with pytest.raises(InvalidTransitionError):
        sequencer.revealed_card()


def test_mr_white_card_has_no_word():
    sequencer = RevealSequencer(roster())
    for _ in range(2):
        sequencer.confirm_ready()
        sequencer.advance()
    sequencer.confirm_ready()
    assert sequencer.revealed_card() == (Role.MR_WHITE, None)


def test_cannot_skip_the_handover_or_confirm_twice():
    sequencer = RevealSequencer(roster())
    with pytest.raises(InvalidTransitionError):
        sequencer.advance()

    sequencer.confirm_ready()
    with pytest.raises(InvalidTransitionError):
        sequencer.confirm_ready()
    assert sequencer.position == 1


def test_nothing_is_accepted_after_completion():
    sequencer = RevealSequencer(make_players(Role.CIVILIAN, Role.CIVILIAN, Role.UNDERCOVER))
    for _ in range(3):
        sequencer.confirm_ready()
        sequencer.advance()

    with pytest.raises(InvalidTransitionError):
        sequencer.advance()
    with pytest.raises(InvalidTransitionError):
        sequencer.confirm_ready()


def test_position_and_last_player():
    sequencer = RevealSequencer(roster(), announcement="New game started with the same players.")
    assert (sequencer.position, sequencer.total) == (1, 4)
    assert sequencer.announcement.startswith("New game")
    for _ in range(3):
        assert not sequencer.is_last
        sequencer.confirm_ready()
        sequencer.advance()
    assert sequencer.is_last
    assert sequencer.position == 4


def test_empty_roster_is_rejected():
    with pytest.raises(ConfigurationError):
        RevealSequencer([])
