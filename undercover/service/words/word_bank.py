"""
Word Bank - static catalogue of (common word, undercover word) pairs
"""
from typing import Iterable, List, Optional

from undercover.errors import ConfigurationError
from undercover.model import WordPair


# Bahasa Indonesia catalogue
DEFAULT_WORD_PAIRS = (
    ("Kopi", "Teh"),
    ("Polisi", "Satpam"),
    ("Gitar", "Biola"),
    ("Singa", "Harimau"),
    ("Apel", "Jeruk"),
    ("Dokter", "Perawat"),
    ("Sendok", "Garpu"),
    ("Gunung", "Bukit"),
    ("Laut", "Danau"),
    ("Matahari", "Bulan"),
    ("Emas", "Perak"),
    ("Sepatu", "Sandal"),
    ("Kacamata", "Lensa Kontak"),
    ("Mobil", "Motor"),
    ("Pesawat", "Helikopter"),
    ("Nasi", "Bubur"),
    ("Gula", "Garam"),
    ("Buku", "Majalah"),
    ("Kucing", "Anjing"),
    ("Pintu", "Jendela"),
    ("Bakso", "Mie Ayam"),
    ("Sate", "Gule"),
    ("Komputer", "Laptop"),
    ("Hujan", "Gerimis"),
    ("Berenang", "Menyelam"),
)


class WordBank:
    """Read-only, ordered, non-empty list of word pairs"""

    def __init__(self, pairs: Optional[Iterable[WordPair]] = None):
        if pairs is None:
            pairs = [WordPair(common, undercover) for common, undercover in DEFAULT_WORD_PAIRS]
        self._pairs = tuple(pairs)
        if not self._pairs:
            raise ConfigurationError("Word bank must contain at least one pair")

    @property
    def pairs(self) -> List[WordPair]:
        return list(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)

    def __iter__(self):
        return iter(self._pairs)
