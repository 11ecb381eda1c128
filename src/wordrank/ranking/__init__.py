"""Ranking module.

Scoring functions, comparators derived from them, and the rankers that use
either.
"""

from .ranker import (
    DEFAULT_THRESHOLD,
    ScoredWord,
    WordRanker,
    high_scoring_words,
    high_scoring_words_fn,
    rank_words,
    rank_words_with_comparator,
    ranked_words,
)
from .scoring import (
    Comparator,
    ScoringFunction,
    bonus,
    character_points,
    combined_score,
    descending,
    penalty,
    score,
    score_comparator,
    score_with_bonus,
    score_with_bonus_comparator,
    word_scores,
)

__all__ = [
    # Scoring
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
    # Ranking
    "DEFAULT_THRESHOLD",
    "rank_words",
    "rank_words_with_comparator",
    "ranked_words",
    "high_scoring_words",
    "high_scoring_words_fn",
    "ScoredWord",
    "WordRanker",
]
