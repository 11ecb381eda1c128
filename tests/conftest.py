"""Test fixtures and configuration for wordrank tests.

Test Structure:
    tests/
    ├── conftest.py          # Shared fixtures
    ├── unit/                # Unit tests, one module each
    └── test_cli.py          # CLI and demo output

Running tests:
    pytest tests/unit -v     # Unit tests only
    pytest -v                # Everything
"""

from functools import cmp_to_key
from typing import Callable

import pytest

from wordrank.ranking import score_comparator


@pytest.fixture
def words() -> list[str]:
    """The five-word list used throughout the examples."""
    return ["ada", "haskell", "scala", "java", "rust"]


@pytest.fixture
def ranked_mut_words_with_hidden_flow() -> Callable[[list[str]], list[str]]:
    """Ranker that sorts the caller's list in place and returns a copy.

    Hidden mutation of an argument is the pitfall the library's rankers
    avoid; it lives here only so tests can show the difference.
    """

    def rank_in_place(words: list[str]) -> list[str]:
        words.sort(key=cmp_to_key(score_comparator))
        return list(words)

    return rank_in_place
