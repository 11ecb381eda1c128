"""Scoring functions and the comparators derived from them.

A scoring function maps a word to an integer score. Components such as
``bonus`` and ``penalty`` compose by plain addition, which is why rankers
accept scoring functions rather than comparators wherever they can.

Example:
    ranked_words(lambda w: score(w) + bonus(w) - penalty(w), words)
"""

from __future__ import annotations

from typing import Callable, Iterable

ScoringFunction = Callable[[str], int]
Comparator = Callable[[str, str], int]

BONUS_CHAR = "c"
BONUS_POINTS = 5
PENALTY_CHAR = "s"
PENALTY_POINTS = 7


def score(word: str) -> int:
    """Base score: number of characters that are not 'a'."""
    return len(word.replace("a", ""))


def character_points(char: str, points: int) -> ScoringFunction:
    """Build a scoring component worth ``points`` when ``char`` occurs in the word."""

    def component(word: str) -> int:
        return points if char in word else 0

    component.__name__ = f"points_{char}_{points}"
    return component


def bonus(word: str) -> int:
    return BONUS_POINTS if BONUS_CHAR in word else 0


def penalty(word: str) -> int:
    return PENALTY_POINTS if PENALTY_CHAR in word else 0


def score_with_bonus(word: str) -> int:
    """Base score plus the 'c' bonus."""
    return score(word) + bonus(word)


def combined_score(word: str) -> int:
    """Base score plus the 'c' bonus minus the 's' penalty."""
    return score(word) + bonus(word) - penalty(word)


def descending(scoring_function: ScoringFunction) -> Comparator:
    """Derive a comparator that puts higher scores first."""

    def compare(w1: str, w2: str) -> int:
        s1, s2 = scoring_function(w1), scoring_function(w2)
        # cmp(s2, s1)
        return (s2 > s1) - (s2 < s1)

    return compare


score_comparator: Comparator = descending(score)
score_with_bonus_comparator: Comparator = descending(score_with_bonus)


def word_scores(words: Iterable[str], scoring_function: ScoringFunction) -> list[int]:
    """Score each word, keeping input order."""
    return [scoring_function(w) for w in words]


__all__ = [
    "ScoringFunction",
    "Comparator",
    "score",
    "bonus",
    "penalty",
    "score_with_bonus",
    "combined_score",
    "character_points",
    "descending",
    "score_comparator",
    "score_with_bonus_comparator",
    "word_scores",
]
