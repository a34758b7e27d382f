"""
Evaluation Execution

Runs metrics against one or many inputs, sequentially or on a bounded
thread pool, with progress callbacks.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable, Mapping

from gauge_eval.context import EvaluationContext
from gauge_eval.domain.constants import DEFAULT_CONCURRENCY, ITEM_ID_FORMAT
from gauge_eval.domain.entities import EvaluationResult, EvaluationResults
from gauge_eval.domain.value_objects import MetricInput, ScoreResult
from gauge_eval.scoring.base import Metric

logger = logging.getLogger(__name__)

# (completed, total, result) -> None
EvaluationCallback = Callable[[int, int, EvaluationResult], None]


class Engine:
    """
    Evaluation engine

    With a concurrency of 1 items are evaluated one after another on the
    calling thread. With a higher concurrency up to that many items are
    evaluated at once on a thread pool; result slots, the completed counter
    and callback dispatch are guarded by a single lock, so callbacks never
    run concurrently with each other.
    """

    def __init__(
        self,
        metrics: Iterable[Metric],
        concurrency: int = DEFAULT_CONCURRENCY,
        callbacks: Iterable[EvaluationCallback] | None = None,
    ) -> None:
        self._metrics = list(metrics)
        self._concurrency = DEFAULT_CONCURRENCY
        # Non-positive values keep the default
        if concurrency > 0:
            self._concurrency = concurrency
        self._callbacks: list[EvaluationCallback] = list(callbacks or [])

    @property
    def metrics(self) -> tuple[Metric, ...]:
        return tuple(self._metrics)

    @property
    def concurrency(self) -> int:
        return self._concurrency

    def add_callback(self, callback: EvaluationCallback) -> None:
        """Register a progress callback, called once per completed item"""
        self._callbacks.append(callback)

    def evaluate_one(self, metric_input: MetricInput, ctx: EvaluationContext | None = None) -> EvaluationResult:
        """
        Evaluate a single input against all metrics in registration order

        The context is checked before each metric. If it has been cancelled,
        the result carries the cancellation error and only the scores
        computed so far.

        Args:
            metric_input: Input record
            ctx: Cancellation context (never cancelled when omitted)

        Returns:
            EvaluationResult (item_id is left empty)
        """
        if ctx is None:
            ctx = EvaluationContext.background()

        result = EvaluationResult(input=metric_input)
        for metric in self._metrics:
            if ctx.is_cancelled():
                logger.info(
                    "Evaluation cancelled after %d/%d metrics", len(result.scores), len(self._metrics)
                )
                result.error = ctx.error
                return result
            result.scores.append(self._score_metric(metric, metric_input, ctx))
        return result

    def evaluate_many(
        self,
        inputs: Iterable[MetricInput],
        ctx: EvaluationContext | None = None,
    ) -> EvaluationResults:
        """
        Evaluate multiple inputs

        Returns:
            One result per input, in input order, with item_id "item-<index>"
        """
        items = [
            (ITEM_ID_FORMAT.format(index=i), metric_input)
            for i, metric_input in enumerate(inputs)
        ]
        return self._run(items, ctx, keep_input_order=True)

    def evaluate_with_ids(
        self,
        items: Mapping[str, MetricInput],
        ctx: EvaluationContext | None = None,
    ) -> EvaluationResults:
        """
        Evaluate inputs keyed by explicit item IDs

        Returns:
            One result per ID. Order is unspecified; sort by item_id if needed.
        """
        return self._run(list(items.items()), ctx, keep_input_order=False)

    def _run(
        self,
        items: list[tuple[str, MetricInput]],
        ctx: EvaluationContext | None,
        keep_input_order: bool,
    ) -> EvaluationResults:
        total = len(items)
        logger.debug(
            "Evaluating %d items with %d metrics (concurrency=%d)",
            total, len(self._metrics), self._concurrency,
        )

        if self._concurrency <= 1:
            results = EvaluationResults()
            for item_id, metric_input in items:
                result = self.evaluate_one(metric_input, ctx)
                result.item_id = item_id
                results.append(result)
                self._notify_callbacks(len(results), total, result)
            logger.debug("Evaluated %d items", total)
            return results

        slots: list[EvaluationResult | None] = [None] * total
        completion_order = EvaluationResults()
        lock = threading.Lock()

        def run_item(index: int, item_id: str, metric_input: MetricInput) -> None:
            result = self.evaluate_one(metric_input, ctx)
            result.item_id = item_id
            with lock:
                slots[index] = result
                completion_order.append(result)
                self._notify_callbacks(len(completion_order), total, result)

        with ThreadPoolExecutor(max_workers=self._concurrency) as executor:
            futures = [
                executor.submit(run_item, index, item_id, metric_input)
                for index, (item_id, metric_input) in enumerate(items)
            ]

        # Every task has finished here; surface the first callback error, if any
        for future in futures:
            future.result()

        logger.debug("Evaluated %d items", total)
        if keep_input_order:
            return EvaluationResults(slots)
        return completion_order

    def _score_metric(
        self,
        metric: Metric,
        metric_input: MetricInput,
        ctx: EvaluationContext,
    ) -> ScoreResult:
        try:
            return metric.score(metric_input, ctx)
        except Exception as e:
            logger.warning("Metric '%s' raised %s: %s", metric.name, type(e).__name__, e)
            return ScoreResult.failed(metric.name, e)

    def _notify_callbacks(self, completed: int, total: int, result: EvaluationResult) -> None:
        for callback in self._callbacks:
            callback(completed, total, result)


def evaluate(
    metrics: Iterable[Metric],
    inputs: Iterable[MetricInput],
    ctx: EvaluationContext | None = None,
    concurrency: int = DEFAULT_CONCURRENCY,
    callbacks: Iterable[EvaluationCallback] | None = None,
) -> EvaluationResults:
    """Evaluate inputs with a one-off engine"""
    engine = Engine(metrics, concurrency=concurrency, callbacks=callbacks)
    return engine.evaluate_many(inputs, ctx)


def evaluate_single(
    metrics: Iterable[Metric],
    metric_input: MetricInput,
    ctx: EvaluationContext | None = None,
) -> EvaluationResult:
    """Evaluate a single input with a one-off engine"""
    return Engine(metrics).evaluate_one(metric_input, ctx)
