"""Word Ranker - rank words by descending score.

Every ranking function here copies its input before sorting, so callers
never observe their list being reordered. Ties keep their input order since
Python's sort is stable.

The variants grow more general in turn:
- rank_words: fixed base score
- rank_words_with_comparator: any comparator
- ranked_words: any scoring function
- high_scoring_words_fn: a threshold filter returned as a closure
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Callable, Optional, Sequence

from opentelemetry import trace

from .scoring import Comparator, ScoringFunction, descending, score, score_comparator

# Get tracer for ranking spans
tracer = trace.get_tracer(__name__)

DEFAULT_THRESHOLD = 1


def rank_words(words: Sequence[str]) -> list[str]:
    """Rank words by base score without touching the input."""
    sorted_words = list(words)
    sorted_words.sort(key=cmp_to_key(score_comparator))
    return sorted_words


def rank_words_with_comparator(comparator: Comparator, words: Sequence[str]) -> list[str]:
    """Rank words with a caller-supplied comparator.

    Args:
        comparator: (w1, w2) -> negative/zero/positive, as for ``functools.cmp_to_key``
        words: Words to rank

    Returns:
        New list ordered by the comparator
    """
    sorted_words = list(words)
    sorted_words.sort(key=cmp_to_key(comparator))
    return sorted_words


def ranked_words(scoring_function: ScoringFunction, words: Sequence[str]) -> list[str]:
    """Rank words by a scoring function, highest score first."""
    return rank_words_with_comparator(descending(scoring_function), words)


def high_scoring_words(
    words: Sequence[str],
    scoring_function: ScoringFunction,
    threshold: int = DEFAULT_THRESHOLD,
) -> list[str]:
    """Words scoring strictly above ``threshold``, in input order."""
    return [word for word in words if scoring_function(word) > threshold]


def high_scoring_words_fn(
    words: Sequence[str], scoring_function: ScoringFunction
) -> Callable[[int], list[str]]:
    """Capture words and a scoring function, deferring the threshold.

    Example:
        above = high_scoring_words_fn(words, combined_score)
        above(1)   # ["java"]
        above(0)   # ["ada", "scala", "java"]
    """
    captured = list(words)

    def higher_than(threshold: int) -> list[str]:
        return high_scoring_words(captured, scoring_function, threshold)

    return higher_than


@dataclass
class ScoredWord:
    """A word with its score.

    Attributes:
        word: The word
        score: Score assigned by the ranker's scorer
    """

    word: str
    score: int


class WordRanker:
    """Ranks words by an injected scoring function.

    Example:
        ranker = WordRanker(combined_score)
        ranked = ranker.rank(["ada", "haskell", "scala", "java", "rust"])
        best = ranker.select_top(ranked, 2)
    """

    def __init__(self, scorer: Optional[ScoringFunction] = None):
        """Initialize ranker.

        Args:
            scorer: Scoring function word -> int. Defaults to the base score.
        """
        self._scorer = scorer or score

    @property
    def scorer(self) -> ScoringFunction:
        return self._scorer

    def rank(self, words: Sequence[str]) -> list[ScoredWord]:
        """Score and rank words, highest score first.

        Returns:
            List of ScoredWord sorted by score (descending, stable)
        """
        with tracer.start_as_current_span(
            "wordrank.rank",
            attributes={
                "wordrank.word_count": len(words),
                "wordrank.scorer": getattr(self._scorer, "__name__", repr(self._scorer)),
            },
        ) as span:
            scored = [ScoredWord(word=w, score=self._scorer(w)) for w in words]
            ranked = sorted(scored, key=lambda x: x.score, reverse=True)
            if ranked:
                span.set_attribute("wordrank.top_score", ranked[0].score)
            logging.debug("[wordrank] Ranked %d words", len(ranked))
            return ranked

    def select_above(self, scored_words: Sequence[ScoredWord], threshold: int) -> list[str]:
        """Words scoring strictly above ``threshold``, keeping their given order."""
        return [item.word for item in scored_words if item.score > threshold]

    def select_top(self, scored_words: Sequence[ScoredWord], limit: int) -> list[str]:
        """First ``limit`` words of an already ranked list."""
        if limit <= 0:
            return []
        return [item.word for item in scored_words[:limit]]


__all__ = [
    "DEFAULT_THRESHOLD",
    "rank_words",
    "rank_words_with_comparator",
    "ranked_words",
    "high_scoring_words",
    "high_scoring_words_fn",
    "ScoredWord",
    "WordRanker",
]
