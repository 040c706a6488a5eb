"""
Word Selector - picks a pair whose common word has not been dealt yet
"""
import random
from typing import List, Optional, Sequence, Tuple

from undercover.model import WordPair
from .word_bank import WordBank


class WordSelector:
    """Rotates through the word bank without repeating a common word"""

    def __init__(self, word_bank: Optional[WordBank] = None, rng: Optional[random.Random] = None):
        self.word_bank = word_bank or WordBank()
        self.rng = rng or random.Random()

    def select_pair(self, history: Sequence[str]) -> Tuple[WordPair, bool]:
        """
        Choose a pair whose common word is absent from history.

        Returns (pair, did_reset). did_reset is True when every common word
        was already used and the pick came from the full catalogue; the caller
        must then restart history from the new pair.
        """
        used = {word.lower() for word in history}
        available = [pair for pair in self.word_bank if pair.common_word.lower() not in used]

        did_reset = False
        if not available:
            did_reset = True
            available = self.word_bank.pairs

        return self.rng.choice(available), did_reset

    @staticmethod
    def updated_history(history: Sequence[str], pair: WordPair, did_reset: bool) -> List[str]:
        """History after dealing pair: appended, or restarted on reset."""
        if did_reset:
            return pair.words()
        return list(history) + pair.words()
