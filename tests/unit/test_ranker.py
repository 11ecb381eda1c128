"""Tests for the word rankers."""

from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter

from wordrank.ranking import ranker as ranker_module
from wordrank.ranking.ranker import (
    ScoredWord,
    WordRanker,
    high_scoring_words,
    high_scoring_words_fn,
    rank_words,
    rank_words_with_comparator,
    ranked_words,
)
from wordrank.ranking.scoring import (
    bonus,
    combined_score,
    penalty,
    score,
    score_comparator,
    score_with_bonus,
    score_with_bonus_comparator,
)

BASE_ORDER = ["haskell", "rust", "scala", "java", "ada"]
BONUS_ORDER = ["scala", "haskell", "rust", "java", "ada"]
COMBINED_ORDER = ["java", "ada", "scala", "haskell", "rust"]


def test_mutating_ranker_changes_input(words, ranked_mut_words_with_hidden_flow):
    """Test the in-place ranker leaves its argument reordered."""
    original = list(words)
    result = ranked_mut_words_with_hidden_flow(words)
    assert result == words
    assert words != original
    assert words == BASE_ORDER


def test_rank_words_does_not_mutate(words):
    """Test rank_words returns a sorted copy."""
    original = list(words)
    result = rank_words(words)
    assert result == BASE_ORDER
    assert result is not words
    assert words == original


def test_rank_words_empty():
    """Test ranking an empty list."""
    assert rank_words([]) == []
    assert ranked_words(score, []) == []


def test_rank_words_accepts_tuple(words):
    """Test any sequence can be ranked."""
    assert rank_words(tuple(words)) == BASE_ORDER


class TestComparatorInjection:
    """Tests for rank_words_with_comparator."""

    def test_legacy_comparator(self, words):
        """Test ranking with the base score comparator."""
        assert rank_words_with_comparator(score_comparator, words) == BASE_ORDER

    def test_bonus_comparator(self, words):
        """Test ranking with the bonus comparator."""
        assert rank_words_with_comparator(score_with_bonus_comparator, words) == BONUS_ORDER

    def test_inline_comparator(self, words):
        """Test ranking with an inline comparator."""

        def by_bonus(w1, w2):
            return score_with_bonus(w2) - score_with_bonus(w1)

        assert rank_words_with_comparator(by_bonus, words) == BONUS_ORDER

    def test_input_unchanged(self, words):
        """Test the input is not modified."""
        original = list(words)
        rank_words_with_comparator(score_with_bonus_comparator, words)
        assert words == original


class TestScoringFunctionInjection:
    """Tests for ranked_words."""

    def test_legacy_scoring_function(self, words):
        """Test passing the base scoring function."""
        assert ranked_words(score, words) == BASE_ORDER

    def test_bonus_scoring_function(self, words):
        """Test passing the bonus scoring function."""
        assert ranked_words(score_with_bonus, words) == BONUS_ORDER

    def test_penalty_score(self, words):
        """Test a composed score with bonus and penalty."""
        result = ranked_words(lambda w: score(w) + bonus(w) - penalty(w), words)
        assert result == COMBINED_ORDER

    def test_stable_ties(self):
        """Test equal scores keep their input order."""
        assert ranked_words(score, ["java", "go", "ab", "to"]) == ["java", "go", "to", "ab"]
        assert ranked_words(len, ["bb", "aa", "ccc", "dd"]) == ["ccc", "bb", "aa", "dd"]

    def test_permutation(self, words):
        """Test the result holds the same words."""
        assert sorted(ranked_words(combined_score, words)) == sorted(words)


class TestThreshold:
    """Tests for threshold filtering."""

    def test_high_scoring_words(self, words):
        """Test filtering with the default threshold."""
        assert high_scoring_words(words, combined_score) == ["java"]

    def test_equal_to_threshold_excluded(self, words):
        """Test words scoring exactly the threshold are dropped."""
        assert high_scoring_words(words, combined_score, 2) == []

    def test_keeps_input_order(self, words):
        """Test filtered words stay in input order."""
        assert high_scoring_words(words, score, 1) == ["haskell", "scala", "java", "rust"]

    def test_deferred_threshold(self, words):
        """Test the returned closure applies a later threshold."""
        above = high_scoring_words_fn(words, combined_score)
        assert above(1) == ["java"]
        assert above(0) == ["ada", "scala", "java"]
        assert above(-5) == words

    def test_closure_captures_copy(self, words):
        """Test later changes to the caller's list do not leak in."""
        above = high_scoring_words_fn(words, score)
        words.append("kotlin")
        assert "kotlin" not in above(0)


class TestWordRanker:
    """Tests for WordRanker."""

    def test_default_scorer(self, words):
        """Test the default scorer is the base score."""
        ranked = WordRanker().rank(words)
        assert [item.word for item in ranked] == BASE_ORDER
        assert ranked[0] == ScoredWord(word="haskell", score=6)

    def test_injected_scorer(self, words):
        """Test ranking with an injected scorer."""
        ranker = WordRanker(combined_score)
        ranked = ranker.rank(words)
        assert [item.word for item in ranked] == COMBINED_ORDER
        assert [item.score for item in ranked] == [2, 1, 1, -1, -3]

    def test_select_above(self, words):
        """Test selecting words above a threshold from a ranking."""
        ranker = WordRanker()
        ranked = ranker.rank(words)
        assert ranker.select_above(ranked, 2) == ["haskell", "rust", "scala"]

    def test_select_top(self, words):
        """Test selecting the first words of a ranking."""
        ranker = WordRanker()
        ranked = ranker.rank(words)
        assert ranker.select_top(ranked, 2) == ["haskell", "rust"]
        assert ranker.select_top(ranked, 0) == []
        assert ranker.select_top(ranked, 10) == BASE_ORDER

    def test_rank_records_span(self, words, monkeypatch):
        """Test ranking emits a span with the word count."""
        exporter = InMemorySpanExporter()
        provider = TracerProvider()
        provider.add_span_processor(SimpleSpanProcessor(exporter))
        monkeypatch.setattr(ranker_module, "tracer", provider.get_tracer("test"))

        WordRanker(combined_score).rank(words)

        spans = exporter.get_finished_spans()
        assert len(spans) == 1
        assert spans[0].name == "wordrank.rank"
        assert spans[0].attributes["wordrank.word_count"] == 5
        assert spans[0].attributes["wordrank.scorer"] == "combined_score"
        assert spans[0].attributes["wordrank.top_score"] == 2
