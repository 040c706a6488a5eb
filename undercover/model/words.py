"""
Word pair and role count value types
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class WordPair:
    common_word: str
    undercover_word: str

    def words(self):
        return [self.common_word, self.undercover_word]


@dataclass(frozen=True)
class RoleConfig:
    mr_white_count: int = 0
    undercover_count: int = 1

    @property
    def impostor_count(self) -> int:
        return self.mr_white_count + self.undercover_count
