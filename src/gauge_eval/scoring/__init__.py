"""
Scoring sub-package

Provides the metric capability, metric combinators, text similarity
algorithms and the heuristic metrics built on them.
"""

from gauge_eval.domain.value_objects import ScoreResult, ScoreResults
from gauge_eval.scoring.base import (
    BaseMetric,
    CompositeMetric,
    ConditionalMetric,
    FunctionMetric,
    Metric,
    WeightedMetric,
)
from gauge_eval.scoring.scorer import METRIC_FACTORIES, create_metric, create_metrics
from gauge_eval.scoring.similarity import (
    BLEU,
    ROUGE,
    CosineSimilarity,
    FuzzyMatch,
    JaccardSimilarity,
    LevenshteinSimilarity,
    SemanticSimilarity,
)
from gauge_eval.scoring.text_scorers import (
    bleu_score,
    cosine_similarity,
    jaccard_similarity,
    lcs_length,
    levenshtein_distance,
    levenshtein_similarity,
    rouge_l_score,
)

__all__ = [
    # value objects (re-exported from domain)
    "ScoreResult",
    "ScoreResults",
    # capability and combinators
    "Metric",
    "BaseMetric",
    "FunctionMetric",
    "CompositeMetric",
    "ConditionalMetric",
    "WeightedMetric",
    # registry
    "METRIC_FACTORIES",
    "create_metric",
    "create_metrics",
    # similarity metrics
    "LevenshteinSimilarity",
    "JaccardSimilarity",
    "CosineSimilarity",
    "BLEU",
    "ROUGE",
    "FuzzyMatch",
    "SemanticSimilarity",
    # text similarity functions
    "levenshtein_distance",
    "levenshtein_similarity",
    "jaccard_similarity",
    "cosine_similarity",
    "bleu_score",
    "lcs_length",
    "rouge_l_score",
]
