"""
Evaluation Context

Cooperative cancellation for evaluation runs. The engine only polls the
context between metric invocations; a metric already running is never
interrupted.
"""

from __future__ import annotations

import threading


class EvaluationCancelledError(Exception):
    """Error reported when an evaluation observes a cancelled context"""
    pass


class EvaluationContext:
    """
    Cancellation-capable context shared by every task of an evaluation run

    Example:
        ctx = EvaluationContext()
        threading.Timer(5.0, ctx.cancel).start()
        results = engine.evaluate_many(inputs, ctx)
    """

    def __init__(self) -> None:
        self._event = threading.Event()
        self._error: EvaluationCancelledError | None = None
        self._lock = threading.Lock()

    @classmethod
    def background(cls) -> EvaluationContext:
        """A fresh context that is never cancelled unless the caller cancels it"""
        return cls()

    def cancel(self, reason: str = "evaluation cancelled") -> None:
        """Cancel the context. Only the first call sets the error."""
        with self._lock:
            if self._error is None:
                self._error = EvaluationCancelledError(reason)
            self._event.set()

    def is_cancelled(self) -> bool:
        """Non-blocking done-query"""
        return self._event.is_set()

    @property
    def error(self) -> EvaluationCancelledError | None:
        """The cancellation error, or None while the context is live"""
        return self._error
