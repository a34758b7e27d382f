"""
Metric base class and combinators

Defines the abstract Metric inherited by every scoring unit, plus the
function-backed, composite, conditional and weighted metrics used to build
new metrics out of existing ones.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import replace
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from gauge_eval.context import EvaluationContext

from gauge_eval.domain.constants import CONDITION_NOT_MET_REASON
from gauge_eval.domain.value_objects import MetricInput, ScoreResult, ScoreResults


class Metric(ABC):
    """Abstract base class for metrics"""

    @property
    @abstractmethod
    def name(self) -> str:
        """Metric name"""
        pass

    @abstractmethod
    def score(self, metric_input: MetricInput, ctx: EvaluationContext | None = None) -> ScoreResult:
        """
        Score a single input

        Failures are reported through ScoreResult.error, not raised.
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class BaseMetric(Metric):
    """Metric that stores its own name. Subclasses implement score()."""

    def __init__(self, name: str) -> None:
        self._name = name

    @property
    def name(self) -> str:
        return self._name


class FunctionMetric(BaseMetric):
    """Metric backed by an arbitrary scoring function"""

    def __init__(
        self,
        name: str,
        fn: Callable[[MetricInput, EvaluationContext | None], ScoreResult],
    ) -> None:
        super().__init__(name)
        self._fn = fn

    def score(self, metric_input: MetricInput, ctx: EvaluationContext | None = None) -> ScoreResult:
        return self._fn(metric_input, ctx)


class CompositeMetric(BaseMetric):
    """
    Combines several metrics into one

    The composite score is the mean of the children that succeeded (0.0 when
    none did). The composite itself never fails.
    """

    def __init__(self, name: str, *metrics: Metric) -> None:
        super().__init__(name)
        self._metrics = list(metrics)

    @property
    def metrics(self) -> tuple[Metric, ...]:
        return tuple(self._metrics)

    def score_all(self, metric_input: MetricInput, ctx: EvaluationContext | None = None) -> ScoreResults:
        """Score every child in registration order and return the raw results"""
        return ScoreResults(metric.score(metric_input, ctx) for metric in self._metrics)

    def score(self, metric_input: MetricInput, ctx: EvaluationContext | None = None) -> ScoreResult:
        return ScoreResult(name=self.name, value=self.score_all(metric_input, ctx).average())


class ConditionalMetric(BaseMetric):
    """
    Evaluates the wrapped metric only when the condition holds

    When the condition is false the result is a zero score named after this
    metric. When it is true the wrapped metric's result is returned unchanged,
    including its name.
    """

    def __init__(
        self,
        name: str,
        condition: Callable[[MetricInput], bool],
        metric: Metric,
    ) -> None:
        super().__init__(name)
        self._condition = condition
        self._metric = metric

    def score(self, metric_input: MetricInput, ctx: EvaluationContext | None = None) -> ScoreResult:
        if not self._condition(metric_input):
            return ScoreResult(name=self.name, value=0.0, reason=CONDITION_NOT_MET_REASON)
        return self._metric.score(metric_input, ctx)


class WeightedMetric(Metric):
    """Scales the wrapped metric's value by a weight. Reports the wrapped metric's name."""

    def __init__(self, metric: Metric, weight: float) -> None:
        self._metric = metric
        self._weight = weight

    @property
    def name(self) -> str:
        return self._metric.name

    @property
    def weight(self) -> float:
        return self._weight

    def score(self, metric_input: MetricInput, ctx: EvaluationContext | None = None) -> ScoreResult:
        result = self._metric.score(metric_input, ctx)
        if not result.is_success():
            return result
        return replace(result, value=result.value * self._weight)
