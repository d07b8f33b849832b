"""Curse word vocabulary and matcher"""

import re
from typing import Iterable

# Longer words come before the words they contain.
CURSE_WORDS = (
    "motherfucking",
    "motherfucker",
    "fucking",
    "fucked",
    "fucker",
    "fuck",
    "crappy",
    "crap",
    "dumbass",
    "ass",
    "shit",
    "bullshit",
)


class CurseWordMatcher:
    """Whole-word, case-sensitive matcher over a fixed word list"""

    def __init__(self, words: Iterable[str] = CURSE_WORDS):
        self.words = tuple(words)
        if not self.words:
            raise ValueError("Vocabulary must contain at least one word")
        alternation = "|".join(re.escape(word) for word in self.words)
        self._pattern = re.compile(rf"\b({alternation})\b")

    def matches(self, text: str) -> bool:
        """Check if text contains at least one listed word"""
        return self._pattern.search(text) is not None


DEFAULT_MATCHER = CurseWordMatcher()
