"""
Domain Entities

Defines the per-item evaluation record and its collection.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from gauge_eval.domain.value_objects import MetricInput, ScoreResults


@dataclass
class EvaluationResult:
    """Result of evaluating one item against all metrics"""
    item_id: str = ""
    input: MetricInput = field(default_factory=MetricInput)
    scores: ScoreResults = field(default_factory=ScoreResults)
    error: Exception | None = None  # Set only when the evaluation itself failed (e.g. cancelled)

    def is_success(self) -> bool:
        """True when evaluation completed, regardless of individual score failures"""
        return self.error is None

    def average_score(self) -> float:
        return self.scores.average()


class EvaluationResults(list):
    """Ordered collection of evaluation results with cross-item aggregates"""

    def successful(self) -> EvaluationResults:
        return EvaluationResults(r for r in self if r.is_success())

    def failed(self) -> EvaluationResults:
        return EvaluationResults(r for r in self if not r.is_success())

    def average_by_metric(self, metric_name: str) -> float:
        """
        Average score of a metric across items

        Only the first score with the given name is considered for each item,
        and only when that score succeeded.

        Args:
            metric_name: Metric name

        Returns:
            The cross-item average, or 0.0 when no item contributes
        """
        values = []
        for result in self:
            score = result.scores.by_name(metric_name)
            if score is not None and score.is_success():
                values.append(score.value)
        if not values:
            return 0.0
        return sum(values) / len(values)

    def metric_names(self) -> list[str]:
        """Distinct metric names in order of first appearance"""
        names: dict[str, None] = {}
        for result in self:
            for score in result.scores:
                names.setdefault(score.name, None)
        return list(names)

    def summary(self) -> dict[str, float]:
        """Cross-item average for every metric name observed in the collection"""
        return {name: self.average_by_metric(name) for name in self.metric_names()}
