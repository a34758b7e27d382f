"""
Domain Layer

Defines constants, entities, and value objects that form the core of the evaluation engine.
Has no dependencies on external libraries.
"""

from gauge_eval.domain.constants import (
    BLEU_SMOOTHING_FLOOR,
    CONDITION_NOT_MET_REASON,
    DEFAULT_BLEU_MAX_N,
    DEFAULT_CONCURRENCY,
    DEFAULT_FUZZY_THRESHOLD,
    DEFAULT_METRICS,
    DEFAULT_ROUGE_BETA,
)
from gauge_eval.domain.entities import (
    EvaluationResult,
    EvaluationResults,
)
from gauge_eval.domain.value_objects import (
    MetricInput,
    ScoreResult,
    ScoreResults,
    boolean_score,
)

__all__ = [
    # constants
    "BLEU_SMOOTHING_FLOOR",
    "CONDITION_NOT_MET_REASON",
    "DEFAULT_BLEU_MAX_N",
    "DEFAULT_CONCURRENCY",
    "DEFAULT_FUZZY_THRESHOLD",
    "DEFAULT_METRICS",
    "DEFAULT_ROUGE_BETA",
    # entities
    "EvaluationResult",
    "EvaluationResults",
    # value objects
    "MetricInput",
    "ScoreResult",
    "ScoreResults",
    "boolean_score",
]
