"""Tests for domain constants"""

from gauge_eval.domain.constants import (
    BLEU_SMOOTHING_FLOOR,
    DEFAULT_BLEU_MAX_N,
    DEFAULT_CONCURRENCY,
    DEFAULT_METRICS,
    DEFAULT_ROUGE_BETA,
    ITEM_ID_FORMAT,
)
from gauge_eval.scoring.scorer import METRIC_FACTORIES


class TestEngineConstants:
    def test_default_concurrency_is_sequential(self):
        assert DEFAULT_CONCURRENCY == 1

    def test_item_id_format(self):
        assert ITEM_ID_FORMAT.format(index=3) == "item-3"


class TestSimilarityConstants:
    def test_bleu_defaults(self):
        assert DEFAULT_BLEU_MAX_N == 4
        assert BLEU_SMOOTHING_FLOOR == 0.01

    def test_rouge_default_beta(self):
        assert DEFAULT_ROUGE_BETA == 1.0


class TestDefaultMetrics:
    def test_all_registered(self):
        for name in DEFAULT_METRICS:
            assert name in METRIC_FACTORIES

    def test_no_duplicates(self):
        assert len(DEFAULT_METRICS) == len(set(DEFAULT_METRICS))
