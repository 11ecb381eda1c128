"""wordrank - score, rank and slice word lists.

Quick Start:
    ```python
    from wordrank import combined_score, high_scoring_words_fn, ranked_words

    words = ["ada", "haskell", "scala", "java", "rust"]
    ranked_words(combined_score, words)
    # ["java", "ada", "scala", "haskell", "rust"]

    above = high_scoring_words_fn(words, combined_score)
    above(1)
    # ["java"]
    ```

Module structure:
    - editor: first/last two, rotation, insert before last
    - ranking/: scoring functions, comparators, rankers
    - policies: named scoring policies
    - config: wordrank.toml loading
    - telemetry/: OpenTelemetry tracing
    - cli: Command line interface
"""

# Sequence editor
from .editor import first_two, insert_before_last, last_two, rotate_first_two_to_end

# Errors
from .errors import ConfigError, PolicyError, SequenceTooShortError, WordRankError

# Config
from .config import RankConfig, load_project_config

# Policies
from .policies import PolicySpec, ScoringPolicy, available_policies, get_policy, policy

# Ranking
from .ranking import (
    ScoredWord,
    WordRanker,
    bonus,
    combined_score,
    descending,
    high_scoring_words,
    high_scoring_words_fn,
    penalty,
    rank_words,
    rank_words_with_comparator,
    ranked_words,
    score,
    score_comparator,
    score_with_bonus,
    score_with_bonus_comparator,
    word_scores,
)

# Telemetry
from .telemetry import init_telemetry, shutdown_telemetry

__version__ = "0.1.0"

__all__ = [
    # Sequence editor
    "first_two",
    "last_two",
    "rotate_first_two_to_end",
    "insert_before_last",
    # Ranking
    "score",
    "bonus",
    "penalty",
    "score_with_bonus",
    "combined_score",
    "descending",
    "score_comparator",
    "score_with_bonus_comparator",
    "word_scores",
    "rank_words",
    "rank_words_with_comparator",
    "ranked_words",
    "high_scoring_words",
    "high_scoring_words_fn",
    "ScoredWord",
    "WordRanker",
    # Policies
    "ScoringPolicy",
    "PolicySpec",
    "policy",
    "get_policy",
    "available_policies",
    # Config
    "RankConfig",
    "load_project_config",
    # Errors
    "WordRankError",
    "SequenceTooShortError",
    "PolicyError",
    "ConfigError",
    # Telemetry
    "init_telemetry",
    "shutdown_telemetry",
]
