"""
Domain Value Objects

Defines the immutable metric input record and the score records produced by metrics.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Mapping


@dataclass(frozen=True)
class MetricInput:
    """
    Input record for metric evaluation

    Every mutator returns a modified copy, so a single instance can be shared
    across worker threads without synchronization.
    """

    input: str = ""
    output: str = ""
    expected: str = ""
    context: str = ""
    metadata: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self):
        # Detach from the caller's dict and freeze it
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata or {})))

    def with_expected(self, expected: str) -> MetricInput:
        """Return a copy with the expected value set"""
        return replace(self, expected=expected)

    def with_context(self, context: str) -> MetricInput:
        """Return a copy with the context value set"""
        return replace(self, context=context)

    def with_metadata(self, key: str, value: Any) -> MetricInput:
        """Return a copy with an additional metadata entry"""
        metadata = dict(self.metadata)
        metadata[key] = value
        return replace(self, metadata=metadata)

    def get(self, key: str, default: Any = None) -> Any:
        return self.metadata.get(key, default)

    def get_string(self, key: str) -> str:
        """Metadata value as a string ("" when absent or not a string)"""
        value = self.metadata.get(key)
        return value if isinstance(value, str) else ""

    def get_string_list(self, key: str) -> list[str]:
        """Metadata value as a list of strings (non-string items are dropped)"""
        value = self.metadata.get(key)
        if not isinstance(value, (list, tuple)):
            return []
        return [item for item in value if isinstance(item, str)]


@dataclass
class ScoreResult:
    """Result of a single metric (score + optional reason, metadata or error)"""

    name: str
    value: float = 0.0
    reason: str | None = None
    metadata: dict | None = None
    error: Exception | None = None

    def is_success(self) -> bool:
        return self.error is None

    @classmethod
    def failed(cls, name: str, error: Exception) -> ScoreResult:
        """Create a failed score result"""
        return cls(name=name, error=error)

    def to_dict(self) -> dict:
        """Convert to dictionary format (unset optional fields are omitted)"""
        data: dict[str, Any] = {"name": self.name, "value": self.value}
        if self.reason:
            data["reason"] = self.reason
        if self.metadata:
            data["metadata"] = self.metadata
        if self.error is not None:
            data["error"] = str(self.error)
        return data

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __str__(self) -> str:
        if self.error is not None:
            return f"{self.name}: error - {self.error}"
        if self.reason:
            return f"{self.name}: {self.value:.4f} ({self.reason})"
        return f"{self.name}: {self.value:.4f}"


def boolean_score(name: str, flag: bool, reason: str | None = None) -> ScoreResult:
    """Convert a boolean to a score (1.0 for True, 0.0 for False)"""
    return ScoreResult(name=name, value=1.0 if flag else 0.0, reason=reason)


def _mean(values: list[float]) -> float:
    if not values:
        return 0.0
    return sum(values) / len(values)


class ScoreResults(list):
    """Ordered collection of score results"""

    def by_name(self, name: str) -> ScoreResult | None:
        """First score result with the given name, or None"""
        for result in self:
            if result.name == name:
                return result
        return None

    def all_by_name(self, name: str) -> ScoreResults:
        return ScoreResults(r for r in self if r.name == name)

    def successful(self) -> ScoreResults:
        return ScoreResults(r for r in self if r.is_success())

    def failed(self) -> ScoreResults:
        return ScoreResults(r for r in self if not r.is_success())

    def average(self) -> float:
        """
        Average value of the successful scores

        Failed scores are excluded from both the sum and the count.

        Returns:
            The mean, or 0.0 when nothing succeeded
        """
        return _mean([r.value for r in self.successful()])

    def average_by_name(self, name: str) -> float:
        """Average value of the successful scores with the given name (0.0 if none)"""
        return _mean([r.value for r in self.all_by_name(name).successful()])
