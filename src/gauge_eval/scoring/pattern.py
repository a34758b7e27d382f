"""
Pattern metrics

Regular-expression checks and common format validators (email, URL, phone,
date, UUID). Invalid patterns raise re.error when the metric is constructed.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gauge_eval.context import EvaluationContext

from gauge_eval.domain.value_objects import MetricInput, ScoreResult, boolean_score
from gauge_eval.scoring.base import BaseMetric


class RegexMatch(BaseMetric):
    """1.0 when the pattern matches anywhere in the output"""

    def __init__(self, pattern: str) -> None:
        super().__init__("regex_match")
        self.pattern = re.compile(pattern)

    def score(self, metric_input: MetricInput, ctx: EvaluationContext | None = None) -> ScoreResult:
        if self.pattern.search(metric_input.output):
            return boolean_score(self.name, True, "matches pattern")
        return boolean_score(self.name, False, "does not match pattern")


class RegexNotMatch(BaseMetric):
    """1.0 when the pattern does not match anywhere in the output"""

    def __init__(self, pattern: str) -> None:
        super().__init__("regex_not_match")
        self.pattern = re.compile(pattern)

    def score(self, metric_input: MetricInput, ctx: EvaluationContext | None = None) -> ScoreResult:
        if not self.pattern.search(metric_input.output):
            return boolean_score(self.name, True, "does not match pattern")
        return boolean_score(self.name, False, "matches pattern (unexpected)")


class RegexFindAll(BaseMetric):
    """
    Scores the number of pattern occurrences

    With normalize_by > 0 the score is min(count / normalize_by, 1.0).
    Otherwise it is 1.0 when count is within [min_matches, max_matches];
    a max_matches of 0 or less means no upper bound.
    """

    def __init__(
        self,
        pattern: str,
        min_matches: int = 1,
        max_matches: int = 0,
        normalize_by: int = 0,
    ) -> None:
        super().__init__("regex_find_all")
        self.pattern = re.compile(pattern)
        self.min_matches = min_matches
        self.max_matches = max_matches
        self.normalize_by = normalize_by

    def score(self, metric_input: MetricInput, ctx: EvaluationContext | None = None) -> ScoreResult:
        count = sum(1 for _ in self.pattern.finditer(metric_input.output))

        if self.normalize_by > 0:
            return ScoreResult(
                name=self.name,
                value=min(count / self.normalize_by, 1.0),
                metadata={"matches": count},
            )

        in_range = count >= self.min_matches and (self.max_matches <= 0 or count <= self.max_matches)
        if in_range:
            return boolean_score(self.name, True, "match count within range")
        return boolean_score(self.name, False, "match count out of range")


class _FormatMetric(BaseMetric):
    """Full-match format check on the stripped output"""

    _label = ""

    def __init__(self, name: str, pattern: str | re.Pattern) -> None:
        super().__init__(name)
        self.pattern = re.compile(pattern)

    def _is_valid(self, output: str) -> bool:
        return self.pattern.match(output) is not None

    def score(self, metric_input: MetricInput, ctx: EvaluationContext | None = None) -> ScoreResult:
        if self._is_valid(metric_input.output.strip()):
            return boolean_score(self.name, True, f"valid {self._label} format")
        return boolean_score(self.name, False, f"invalid {self._label} format")


class EmailFormat(_FormatMetric):
    _label = "email"

    def __init__(self) -> None:
        super().__init__("email_format", r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


class URLFormat(_FormatMetric):
    _label = "URL"

    def __init__(self) -> None:
        super().__init__("url_format", r"^https?://[^\s/$.?#].[^\s]*$")


class PhoneFormat(_FormatMetric):
    """Common phone formats such as +1-234-567-8901 or (234) 567-8901, at least 7 characters"""

    _label = "phone"

    def __init__(self) -> None:
        super().__init__("phone_format", r"^[+]?[(]?[0-9]{1,4}[)]?[-\s./0-9]*$")

    def _is_valid(self, output: str) -> bool:
        return len(output) >= 7 and super()._is_valid(output)


class DateFormat(_FormatMetric):
    """ISO 8601 dates (optionally with a time) by default, or a custom pattern"""

    _label = "date"

    def __init__(self, pattern: str = r"^\d{4}[-/]\d{2}[-/]\d{2}(T\d{2}:\d{2}(:\d{2})?)?") -> None:
        super().__init__("date_format", pattern)


class UUIDFormat(_FormatMetric):
    _label = "UUID"

    def __init__(self) -> None:
        super().__init__(
            "uuid_format",
            r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$",
        )
