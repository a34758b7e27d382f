"""Tests for domain entities"""

import pytest

from gauge_eval.domain.entities import EvaluationResult, EvaluationResults
from gauge_eval.domain.value_objects import MetricInput, ScoreResult, ScoreResults


def _scores(*pairs):
    return ScoreResults(ScoreResult(name=n, value=v) for n, v in pairs)


class TestEvaluationResult:
    def test_construction(self):
        result = EvaluationResult(
            item_id="item-1",
            input=MetricInput(input="test input", output="test output"),
            scores=_scores(("metric1", 0.8), ("metric2", 0.6)),
        )
        assert result.item_id == "item-1"
        assert result.is_success() is True
        assert result.error is None

    def test_defaults(self):
        result = EvaluationResult()
        assert result.item_id == ""
        assert result.input == MetricInput()
        assert len(result.scores) == 0

    def test_with_error(self):
        result = EvaluationResult(item_id="item-1", error=RuntimeError("evaluation failed"))
        assert result.is_success() is False

    def test_failed_scores_do_not_fail_the_item(self):
        result = EvaluationResult(scores=ScoreResults([ScoreResult.failed("m", RuntimeError("x"))]))
        assert result.is_success() is True

    def test_average_score(self):
        result = EvaluationResult(scores=_scores(("m1", 0.8), ("m2", 0.6)))
        assert result.average_score() == pytest.approx(0.7)


class TestEvaluationResults:
    def _results(self):
        return EvaluationResults([
            EvaluationResult(item_id="item-1", scores=_scores(("m1", 0.8))),
            EvaluationResult(item_id="item-2", scores=_scores(("m1", 0.6))),
            EvaluationResult(item_id="item-3", error=RuntimeError("failed")),
        ])

    def test_successful(self):
        assert len(self._results().successful()) == 2

    def test_failed(self):
        failed = self._results().failed()
        assert len(failed) == 1
        assert failed[0].item_id == "item-3"
        assert isinstance(failed, EvaluationResults)

    def test_average_by_metric(self):
        assert self._results().average_by_metric("m1") == pytest.approx(0.7)

    def test_average_by_metric_missing(self):
        assert self._results().average_by_metric("nonexistent") == 0.0

    def test_average_by_metric_uses_first_score_per_item(self):
        results = EvaluationResults([
            EvaluationResult(scores=_scores(("m", 0.2), ("m", 1.0))),
            EvaluationResult(scores=_scores(("m", 0.4))),
        ])
        assert results.average_by_metric("m") == pytest.approx(0.3)

    def test_average_by_metric_skips_failed_first_score(self):
        results = EvaluationResults([
            EvaluationResult(scores=ScoreResults([
                ScoreResult.failed("m", RuntimeError("x")),
                ScoreResult(name="m", value=1.0),
            ])),
            EvaluationResult(scores=_scores(("m", 0.5))),
        ])
        assert results.average_by_metric("m") == pytest.approx(0.5)

    def test_summary(self):
        results = EvaluationResults([
            EvaluationResult(scores=_scores(("accuracy", 0.9), ("relevance", 0.8))),
            EvaluationResult(scores=_scores(("accuracy", 0.8), ("relevance", 0.6))),
        ])
        summary = results.summary()
        assert set(summary) == {"accuracy", "relevance"}
        assert summary["accuracy"] == pytest.approx(0.85)
        assert summary["relevance"] == pytest.approx(0.7)

    def test_summary_includes_metrics_that_only_failed(self):
        results = EvaluationResults([
            EvaluationResult(scores=ScoreResults([ScoreResult.failed("broken", RuntimeError("x"))])),
        ])
        assert results.summary() == {"broken": 0.0}

    def test_summary_empty(self):
        assert EvaluationResults().summary() == {}

    def test_metric_names_in_first_appearance_order(self):
        results = EvaluationResults([
            EvaluationResult(scores=_scores(("b", 1.0), ("a", 1.0))),
            EvaluationResult(scores=_scores(("c", 1.0), ("a", 1.0))),
        ])
        assert results.metric_names() == ["b", "a", "c"]
