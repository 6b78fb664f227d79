"""Heuristic quality scoring for translated text.

Advisory metadata only; a score never affects task success.
"""

import math
import re

# ASCII word characters only: CJK, Cyrillic and accented letters count as special
_SPECIAL_CHARS = re.compile(r"[^\w\s]", re.ASCII)

BASE_SCORE = 60
MAX_LENGTH_SCORE = 90
LENGTH_WEIGHT = 0.1
SPECIAL_CHAR_BONUS = 5


def score(text: str) -> int:
    """Return a deterministic 0-100 score for a translated string.

    Longer text scores higher (60 + 0.1 per character, capped at 90), plus a
    flat bonus when the text contains a character outside ASCII letters,
    digits, underscore and whitespace. Halves round up.
    """
    base = min(MAX_LENGTH_SCORE, BASE_SCORE + len(text) * LENGTH_WEIGHT)
    bonus = SPECIAL_CHAR_BONUS if _SPECIAL_CHARS.search(text) else 0
    return min(100, math.floor(base + bonus + 0.5))


class QualityScorer:
    """Scores translations and decides whether they need human review."""

    def __init__(self, review_threshold: int = 70):
        self.review_threshold = review_threshold

    def score(self, text: str) -> int:
        return score(text)

    def needs_review(self, quality_score: int) -> bool:
        return quality_score < self.review_threshold
