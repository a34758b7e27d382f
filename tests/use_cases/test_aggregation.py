"""
Tests for result aggregation (aggregation.py)

Verifies:
- Flattening produces one row per score with NaN for failures
- Per-metric means match EvaluationResults.summary()
- Failed scores are counted but excluded from means
"""

import math

import pytest

from gauge_eval.domain.entities import EvaluationResult, EvaluationResults
from gauge_eval.domain.value_objects import ScoreResult, ScoreResults
from gauge_eval.use_cases.aggregation import (
    RESULT_COLUMNS,
    SUMMARY_COLUMNS,
    aggregate_results,
    results_to_frame,
)


def item(item_id, *scores, error=None):
    return EvaluationResult(item_id=item_id, scores=ScoreResults(scores), error=error)


@pytest.fixture
def results():
    return EvaluationResults([
        item("item-0", ScoreResult(name="bleu", value=0.5), ScoreResult(name="rouge_l", value=1.0)),
        item("item-1", ScoreResult(name="bleu", value=1.0), ScoreResult.failed("rouge_l", ValueError("bad"))),
        item("item-2", ScoreResult(name="bleu", value=0.0, reason="r")),
    ])


class TestResultsToFrame:
    def test_one_row_per_score(self, results):
        df = results_to_frame(results)
        assert list(df.columns) == RESULT_COLUMNS
        assert len(df) == 5

    def test_failed_score_row(self, results):
        df = results_to_frame(results)
        row = df[(df["item_id"] == "item-1") & (df["metric"] == "rouge_l")].iloc[0]
        assert math.isnan(row["value"])
        assert not row["success"]
        assert row["error"] == "bad"

    def test_empty(self):
        df = results_to_frame(EvaluationResults())
        assert df.empty
        assert list(df.columns) == RESULT_COLUMNS


class TestAggregateResults:
    def test_means_and_counts(self, results):
        summary = aggregate_results(results).set_index("metric")

        assert summary.loc["bleu", "mean"] == pytest.approx(0.5)
        assert summary.loc["bleu", "count"] == 3
        assert summary.loc["bleu", "failed"] == 0

        assert summary.loc["rouge_l", "mean"] == pytest.approx(1.0)
        assert summary.loc["rouge_l", "count"] == 1
        assert summary.loc["rouge_l", "failed"] == 1

    def test_matches_summary(self, results):
        summary = aggregate_results(results)
        expected = results.summary()
        for _, row in summary.iterrows():
            assert row["mean"] == pytest.approx(expected[row["metric"]])

    def test_sorted_by_metric(self, results):
        assert list(aggregate_results(results)["metric"]) == ["bleu", "rouge_l"]

    def test_only_first_score_per_item_counts(self):
        results = EvaluationResults([
            item("item-0", ScoreResult(name="m", value=0.2), ScoreResult(name="m", value=1.0)),
        ])
        summary = aggregate_results(results).set_index("metric")
        assert summary.loc["m", "mean"] == pytest.approx(0.2)
        assert summary.loc["m", "count"] == 1

    def test_metric_with_only_failures(self):
        results = EvaluationResults([item("item-0", ScoreResult.failed("m", RuntimeError("x")))])
        summary = aggregate_results(results).set_index("metric")
        assert summary.loc["m", "mean"] == 0.0
        assert summary.loc["m", "count"] == 0
        assert summary.loc["m", "failed"] == 1

    def test_empty(self):
        summary = aggregate_results(EvaluationResults())
        assert summary.empty
        assert list(summary.columns) == SUMMARY_COLUMNS
