"""
Tests for the metric registry (scorer.py)

Verifies:
- Every registered name builds a metric reporting that name
- Similarity settings flow into the built metrics
- Unknown names raise ValueError
"""

import pytest

from gauge_eval.domain.value_objects import MetricInput
from gauge_eval.harness_config import SimilarityConfig
from gauge_eval.scoring.scorer import METRIC_FACTORIES, create_metric, create_metrics


class TestCreateMetric:
    """create_metric"""

    @pytest.mark.parametrize("name", sorted(METRIC_FACTORIES))
    def test_registered_name_matches_metric_name(self, name):
        metric = create_metric(name)
        assert metric.name == name

    @pytest.mark.parametrize("name", sorted(METRIC_FACTORIES))
    def test_registered_metrics_score_without_failing(self, name):
        result = create_metric(name).score(MetricInput(output="hello world", expected="hello world"))
        assert result.is_success()
        assert result.name == name

    def test_unknown_metric_raises(self):
        with pytest.raises(ValueError, match="Unknown metric: nonexistent"):
            create_metric("nonexistent")

    def test_default_config(self):
        metric = create_metric("bleu")
        assert metric.max_n == 4

    def test_config_is_applied(self):
        config = SimilarityConfig(case_sensitive=True, bleu_max_n=2, rouge_beta=2.0, fuzzy_threshold=0.5)
        assert create_metric("bleu", config).max_n == 2
        assert create_metric("rouge_l", config).beta == 2.0
        assert create_metric("fuzzy_match", config).threshold == 0.5

        equals = create_metric("equals", config)
        assert equals.score(MetricInput(output="A", expected="a")).value == 0.0


class TestCreateMetrics:
    """create_metrics"""

    def test_preserves_order(self):
        metrics = create_metrics(["rouge_l", "bleu", "is_json"])
        assert [m.name for m in metrics] == ["rouge_l", "bleu", "is_json"]

    def test_empty(self):
        assert create_metrics([]) == []

    def test_unknown_in_list_raises(self):
        with pytest.raises(ValueError):
            create_metrics(["bleu", "bogus"])
