"""
String-comparison metrics

Exact, prefix, suffix and containment checks on the output, plus simple
length and vocabulary guards.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gauge_eval.context import EvaluationContext

from gauge_eval.domain.value_objects import MetricInput, ScoreResult, boolean_score
from gauge_eval.scoring.base import BaseMetric
from gauge_eval.scoring.text_scorers import fold_case


class _ExpectedComparison(BaseMetric):
    """Compares the output with the expected value using a string predicate"""

    _match_reason = ""
    _miss_reason = ""

    def __init__(self, name: str, case_sensitive: bool = False) -> None:
        super().__init__(name)
        self.case_sensitive = case_sensitive

    @abstractmethod
    def _matches(self, output: str, expected: str) -> bool:
        """Predicate applied to the case-folded output and expected value"""
        pass

    def score(self, metric_input: MetricInput, ctx: EvaluationContext | None = None) -> ScoreResult:
        output = fold_case(metric_input.output, self.case_sensitive)
        expected = fold_case(metric_input.expected, self.case_sensitive)
        if self._matches(output, expected):
            return boolean_score(self.name, True, self._match_reason)
        return boolean_score(self.name, False, self._miss_reason)


class Equals(_ExpectedComparison):
    _match_reason = "exact match"
    _miss_reason = "no match"

    def __init__(self, case_sensitive: bool = False) -> None:
        super().__init__("equals", case_sensitive)

    def _matches(self, output: str, expected: str) -> bool:
        return output == expected


class Contains(_ExpectedComparison):
    _match_reason = "contains expected value"
    _miss_reason = "does not contain expected value"

    def __init__(self, case_sensitive: bool = False) -> None:
        super().__init__("contains", case_sensitive)

    def _matches(self, output: str, expected: str) -> bool:
        return expected in output


class StartsWith(_ExpectedComparison):
    _match_reason = "starts with expected value"
    _miss_reason = "does not start with expected value"

    def __init__(self, case_sensitive: bool = False) -> None:
        super().__init__("starts_with", case_sensitive)

    def _matches(self, output: str, expected: str) -> bool:
        return output.startswith(expected)


class EndsWith(_ExpectedComparison):
    _match_reason = "ends with expected value"
    _miss_reason = "does not end with expected value"

    def __init__(self, case_sensitive: bool = False) -> None:
        super().__init__("ends_with", case_sensitive)

    def _matches(self, output: str, expected: str) -> bool:
        return output.endswith(expected)


class ContainsAny(BaseMetric):
    """1.0 when the output contains at least one of the values"""

    def __init__(self, values: list[str], case_sensitive: bool = False) -> None:
        super().__init__("contains_any")
        self.values = list(values)
        self.case_sensitive = case_sensitive

    def score(self, metric_input: MetricInput, ctx: EvaluationContext | None = None) -> ScoreResult:
        output = fold_case(metric_input.output, self.case_sensitive)
        for value in self.values:
            if fold_case(value, self.case_sensitive) in output:
                return boolean_score(self.name, True, f"contains: {value}")
        return boolean_score(self.name, False, "does not contain any expected value")


class ContainsAll(BaseMetric):
    """Fraction of the values found in the output"""

    def __init__(self, values: list[str], case_sensitive: bool = False) -> None:
        super().__init__("contains_all")
        self.values = list(values)
        self.case_sensitive = case_sensitive

    def score(self, metric_input: MetricInput, ctx: EvaluationContext | None = None) -> ScoreResult:
        output = fold_case(metric_input.output, self.case_sensitive)
        missing = [v for v in self.values if fold_case(v, self.case_sensitive) not in output]
        if not missing:
            return ScoreResult(name=self.name, value=1.0, reason="contains all expected values")

        found = len(self.values) - len(missing)
        return ScoreResult(
            name=self.name,
            value=found / len(self.values),
            reason="missing: " + ", ".join(missing),
        )


class NotEmpty(BaseMetric):
    def __init__(self) -> None:
        super().__init__("not_empty")

    def score(self, metric_input: MetricInput, ctx: EvaluationContext | None = None) -> ScoreResult:
        if metric_input.output.strip():
            return boolean_score(self.name, True, "output is not empty")
        return boolean_score(self.name, False, "output is empty")


class LengthBetween(BaseMetric):
    """Output length in characters within [min_length, max_length]"""

    def __init__(self, min_length: int, max_length: int) -> None:
        super().__init__("length_between")
        self.min_length = min_length
        self.max_length = max_length

    def score(self, metric_input: MetricInput, ctx: EvaluationContext | None = None) -> ScoreResult:
        length = len(metric_input.output)
        if self.min_length <= length <= self.max_length:
            return boolean_score(self.name, True, "length within range")
        return boolean_score(self.name, False, f"length out of range: {length}")


class WordCount(BaseMetric):
    """Whitespace word count within [min_words, max_words]"""

    def __init__(self, min_words: int, max_words: int) -> None:
        super().__init__("word_count")
        self.min_words = min_words
        self.max_words = max_words

    def score(self, metric_input: MetricInput, ctx: EvaluationContext | None = None) -> ScoreResult:
        count = len(metric_input.output.split())
        if self.min_words <= count <= self.max_words:
            return boolean_score(self.name, True, "word count within range")
        return boolean_score(self.name, False, f"word count out of range: {count}")


class NoOffensiveLanguage(BaseMetric):
    """0.0 when the output contains any of the configured patterns (case-insensitive)"""

    def __init__(self, patterns: list[str]) -> None:
        super().__init__("no_offensive_language")
        self.patterns = list(patterns)

    def score(self, metric_input: MetricInput, ctx: EvaluationContext | None = None) -> ScoreResult:
        lower = metric_input.output.lower()
        for pattern in self.patterns:
            if pattern.lower() in lower:
                return boolean_score(self.name, False, "contains offensive pattern")
        return boolean_score(self.name, True, "no offensive language detected")
