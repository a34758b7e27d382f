"""
Similarity metrics

Metric wrappers around the text similarity functions. Each compares the
input's output against its expected value and never fails.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gauge_eval.context import EvaluationContext

from gauge_eval.domain.constants import (
    DEFAULT_BLEU_MAX_N,
    DEFAULT_FUZZY_THRESHOLD,
    DEFAULT_ROUGE_BETA,
    FUZZY_ABOVE_THRESHOLD_REASON,
    FUZZY_BELOW_THRESHOLD_REASON,
    SEMANTIC_FALLBACK_REASON,
)
from gauge_eval.domain.value_objects import MetricInput, ScoreResult
from gauge_eval.scoring.base import BaseMetric
from gauge_eval.scoring.text_scorers import (
    bleu_score,
    cosine_similarity,
    fold_case,
    jaccard_similarity,
    levenshtein_similarity,
    rouge_l_score,
)


class LevenshteinSimilarity(BaseMetric):
    """Edit-distance similarity between output and expected"""

    def __init__(self, case_sensitive: bool = False) -> None:
        super().__init__("levenshtein_similarity")
        self.case_sensitive = case_sensitive

    def score(self, metric_input: MetricInput, ctx: EvaluationContext | None = None) -> ScoreResult:
        value = levenshtein_similarity(metric_input.output, metric_input.expected, self.case_sensitive)
        return ScoreResult(name=self.name, value=value)


class JaccardSimilarity(BaseMetric):
    """Jaccard coefficient of word or character sets"""

    def __init__(self, case_sensitive: bool = False, use_words: bool = True) -> None:
        super().__init__("jaccard_similarity")
        self.case_sensitive = case_sensitive
        self.use_words = use_words

    def score(self, metric_input: MetricInput, ctx: EvaluationContext | None = None) -> ScoreResult:
        value = jaccard_similarity(
            metric_input.output,
            metric_input.expected,
            case_sensitive=self.case_sensitive,
            use_words=self.use_words,
        )
        return ScoreResult(name=self.name, value=value)


class CosineSimilarity(BaseMetric):
    """Cosine similarity of word-frequency vectors"""

    def __init__(self, case_sensitive: bool = False) -> None:
        super().__init__("cosine_similarity")
        self.case_sensitive = case_sensitive

    def score(self, metric_input: MetricInput, ctx: EvaluationContext | None = None) -> ScoreResult:
        value = cosine_similarity(metric_input.output, metric_input.expected, self.case_sensitive)
        return ScoreResult(name=self.name, value=value)


class BLEU(BaseMetric):
    """Simplified BLEU (n-gram precision with brevity penalty)"""

    def __init__(self, max_n: int = DEFAULT_BLEU_MAX_N) -> None:
        super().__init__("bleu")
        self.max_n = max_n if max_n > 0 else DEFAULT_BLEU_MAX_N

    def score(self, metric_input: MetricInput, ctx: EvaluationContext | None = None) -> ScoreResult:
        value = bleu_score(metric_input.output, metric_input.expected, self.max_n)
        return ScoreResult(name=self.name, value=value)


class ROUGE(BaseMetric):
    """Simplified ROUGE-L (longest common subsequence F-score)"""

    def __init__(self, beta: float = DEFAULT_ROUGE_BETA) -> None:
        super().__init__("rouge_l")
        self.beta = beta if beta > 0 else DEFAULT_ROUGE_BETA

    def score(self, metric_input: MetricInput, ctx: EvaluationContext | None = None) -> ScoreResult:
        value = rouge_l_score(metric_input.output, metric_input.expected, self.beta)
        return ScoreResult(name=self.name, value=value)


class FuzzyMatch(BaseMetric):
    """
    Average of Levenshtein similarity and word-level Jaccard similarity

    The threshold only selects the reason; a score below it is still a
    successful result.
    """

    def __init__(self, threshold: float = DEFAULT_FUZZY_THRESHOLD, case_sensitive: bool = False) -> None:
        super().__init__("fuzzy_match")
        self.threshold = threshold
        self.case_sensitive = case_sensitive

    def score(self, metric_input: MetricInput, ctx: EvaluationContext | None = None) -> ScoreResult:
        output = fold_case(metric_input.output, self.case_sensitive)
        expected = fold_case(metric_input.expected, self.case_sensitive)

        lev = levenshtein_similarity(output, expected, case_sensitive=True)
        jac = jaccard_similarity(output, expected, case_sensitive=True, use_words=True)
        value = (lev + jac) / 2

        reason = FUZZY_ABOVE_THRESHOLD_REASON if value >= self.threshold else FUZZY_BELOW_THRESHOLD_REASON
        return ScoreResult(name=self.name, value=value, reason=reason)


class SemanticSimilarity(BaseMetric):
    """
    Placeholder for embedding-based semantic similarity

    Until an embedding backend is wired in, this degrades to case-insensitive
    word-based cosine similarity and says so in the reason.
    """

    def __init__(self) -> None:
        super().__init__("semantic_similarity")

    def score(self, metric_input: MetricInput, ctx: EvaluationContext | None = None) -> ScoreResult:
        value = cosine_similarity(metric_input.output, metric_input.expected, case_sensitive=False)
        return ScoreResult(name=self.name, value=value, reason=SEMANTIC_FALLBACK_REASON)
