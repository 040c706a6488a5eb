from .word_bank import WordBank, DEFAULT_WORD_PAIRS
from .word_selector import WordSelector

__all__ = ["WordBank", "DEFAULT_WORD_PAIRS", "WordSelector"]
