import asyncio
import random

import pytest

from undercover.game_logger import GameLogger
from undercover.model import Player, Role, WordPair
from undercover.service.judge import ExactMatchJudge
from undercover.service.words import WordBank


KOPI_TEH = WordPair("Kopi", "Teh")


def make_players(*roles, words=KOPI_TEH):
    """Roster with fixed roles, named P0, P1, ... in order"""
    players = []
    for i, role in enumerate(roles):
        if role is Role.CIVILIAN:
            word = words.common_word
        elif role is Role.UNDERCOVER:
            word = words.undercover_word
        else:
            word = None
        players.append(Player(f"P{i}", role, word))
    return players


class GatedJudge:
    """Judge that blocks until released, to race the countdown"""

    def __init__(self, verdict=True):
        self.verdict = verdict
        self.gate = asyncio.Event()
        self.calls = []

    async def judge(self, secret_word, guess):
        self.calls.append((secret_word, guess))
        await self.gate.wait()
        return self.verdict


class FailingJudge:
    def __init__(self, error):
        self.error = error
        self.calls = 0

    async def judge(self, secret_word, guess):
        self.calls += 1
        raise self.error


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def logger(tmp_path):
    return GameLogger("test", log_dir=str(tmp_path))


@pytest.fixture
def judge():
    return ExactMatchJudge()


@pytest.fixture
def small_bank():
    return WordBank([KOPI_TEH, WordPair("Gitar", "Biola"), WordPair("Singa", "Harimau")])
