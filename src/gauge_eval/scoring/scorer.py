"""
Metric registry

Builds argument-free heuristic metrics by name, using the similarity
settings from the harness configuration.
"""

from __future__ import annotations

import logging
from typing import Callable

from gauge_eval.harness_config import SimilarityConfig
from gauge_eval.scoring.base import Metric
from gauge_eval.scoring.parsing import IsBoolean, IsJSON, IsJSONArray, IsJSONObject, IsNumber, IsXML
from gauge_eval.scoring.pattern import DateFormat, EmailFormat, PhoneFormat, URLFormat, UUIDFormat
from gauge_eval.scoring.similarity import (
    BLEU,
    ROUGE,
    CosineSimilarity,
    FuzzyMatch,
    JaccardSimilarity,
    LevenshteinSimilarity,
    SemanticSimilarity,
)
from gauge_eval.scoring.string_metrics import Contains, EndsWith, Equals, NotEmpty, StartsWith

logger = logging.getLogger(__name__)

METRIC_FACTORIES: dict[str, Callable[[SimilarityConfig], Metric]] = {
    # similarity
    "levenshtein_similarity": lambda c: LevenshteinSimilarity(case_sensitive=c.case_sensitive),
    "jaccard_similarity": lambda c: JaccardSimilarity(case_sensitive=c.case_sensitive),
    "cosine_similarity": lambda c: CosineSimilarity(case_sensitive=c.case_sensitive),
    "bleu": lambda c: BLEU(max_n=c.bleu_max_n),
    "rouge_l": lambda c: ROUGE(beta=c.rouge_beta),
    "fuzzy_match": lambda c: FuzzyMatch(threshold=c.fuzzy_threshold, case_sensitive=c.case_sensitive),
    "semantic_similarity": lambda c: SemanticSimilarity(),
    # string
    "equals": lambda c: Equals(case_sensitive=c.case_sensitive),
    "contains": lambda c: Contains(case_sensitive=c.case_sensitive),
    "starts_with": lambda c: StartsWith(case_sensitive=c.case_sensitive),
    "ends_with": lambda c: EndsWith(case_sensitive=c.case_sensitive),
    "not_empty": lambda c: NotEmpty(),
    # parsing
    "is_json": lambda c: IsJSON(),
    "is_json_object": lambda c: IsJSONObject(),
    "is_json_array": lambda c: IsJSONArray(),
    "is_xml": lambda c: IsXML(),
    "is_number": lambda c: IsNumber(),
    "is_boolean": lambda c: IsBoolean(),
    # pattern
    "email_format": lambda c: EmailFormat(),
    "url_format": lambda c: URLFormat(),
    "phone_format": lambda c: PhoneFormat(),
    "date_format": lambda c: DateFormat(),
    "uuid_format": lambda c: UUIDFormat(),
}


def create_metric(name: str, config: SimilarityConfig | None = None) -> Metric:
    """
    Create a metric by name

    Args:
        name: Registered metric name (e.g. "bleu", "rouge_l")
        config: Similarity settings (defaults when not provided)

    Returns:
        Metric instance

    Raises:
        ValueError: When the metric name is unknown
    """
    factory = METRIC_FACTORIES.get(name)
    if factory is None:
        raise ValueError(f"Unknown metric: {name} (available: {sorted(METRIC_FACTORIES)})")
    return factory(config or SimilarityConfig())


def create_metrics(names: list[str], config: SimilarityConfig | None = None) -> list[Metric]:
    """Create metrics in the given order"""
    metrics = [create_metric(name, config) for name in names]
    logger.debug("Created metrics: %s", [m.name for m in metrics])
    return metrics
