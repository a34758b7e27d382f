"""
Use Cases Layer

Aggregates the evaluation engine, dataset evaluation and result aggregation
called from the runner.
"""

from gauge_eval.use_cases.aggregation import (
    aggregate_results,
    results_to_frame,
)
from gauge_eval.use_cases.dataset import (
    DatasetEvaluator,
    default_input_mapper,
)
from gauge_eval.use_cases.evaluation import (
    Engine,
    EvaluationCallback,
    evaluate,
    evaluate_single,
)

__all__ = [
    # aggregation
    "aggregate_results",
    "results_to_frame",
    # dataset
    "DatasetEvaluator",
    "default_input_mapper",
    # evaluation
    "Engine",
    "EvaluationCallback",
    "evaluate",
    "evaluate_single",
]
