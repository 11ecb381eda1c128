"""Demonstration: rank a fixed word list under two policies."""

from __future__ import annotations

import json
import sys
from typing import TextIO

from .config import DEFAULT_WORDS
from .policies import demo_score
from .ranking import ranked_words, score


def run_demo(stream: TextIO = sys.stdout) -> list[list[str]]:
    """Rank the demo words by the base and demo scores, one line each.

    The scoring functions are used directly, so policies registered from a
    config file cannot change the output.

    Returns:
        The two rankings, in the order they were written
    """
    words = list(DEFAULT_WORDS)
    results = []
    for scoring_function in (score, demo_score):
        result = ranked_words(scoring_function, words)
        stream.write(f"Result: {json.dumps(result)}\n")
        results.append(result)
    return results


if __name__ == "__main__":
    run_demo()
