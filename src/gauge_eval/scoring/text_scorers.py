"""
Text similarity functions

Implements the pure text-comparison algorithms behind the similarity metrics:
edit distance, token-set overlap, frequency-vector cosine, simplified BLEU
and simplified ROUGE-L. Every function handles its degenerate inputs by
convention and never raises for empty text.
"""

from __future__ import annotations

import math
from collections import Counter

from gauge_eval.domain.constants import (
    BLEU_SMOOTHING_FLOOR,
    DEFAULT_BLEU_MAX_N,
    DEFAULT_ROUGE_BETA,
)


def fold_case(text: str, case_sensitive: bool) -> str:
    """Lowercase the text unless comparisons are case sensitive"""
    return text if case_sensitive else text.lower()


def levenshtein_distance(s1: str, s2: str) -> int:
    """
    Edit distance between two strings over Unicode code points

    Args:
        s1: First string
        s2: Second string

    Returns:
        Minimum number of insertions, deletions and substitutions
    """
    if not s1:
        return len(s2)
    if not s2:
        return len(s1)

    # Two-row dynamic programming
    previous = list(range(len(s2) + 1))
    for i, c1 in enumerate(s1, start=1):
        current = [i]
        for j, c2 in enumerate(s2, start=1):
            cost = 0 if c1 == c2 else 1
            current.append(min(
                previous[j] + 1,         # deletion
                current[j - 1] + 1,      # insertion
                previous[j - 1] + cost,  # substitution
            ))
        previous = current
    return previous[-1]


def levenshtein_similarity(s1: str, s2: str, case_sensitive: bool = False) -> float:
    """
    Edit-distance similarity: 1 - distance / max(len1, len2)

    Returns:
        Similarity (0.0 to 1.0). Two empty strings are identical (1.0).
    """
    s1 = fold_case(s1, case_sensitive)
    s2 = fold_case(s2, case_sensitive)
    max_len = max(len(s1), len(s2))
    if max_len == 0:
        return 1.0
    return 1.0 - levenshtein_distance(s1, s2) / max_len


def jaccard_similarity(
    s1: str,
    s2: str,
    case_sensitive: bool = False,
    use_words: bool = True,
) -> float:
    """
    Jaccard coefficient of the deduplicated tokens

    Args:
        s1: First string
        s2: Second string
        case_sensitive: Compare without case folding
        use_words: Whitespace-separated words when True, single characters when False

    Returns:
        |intersection| / |union| (0.0 to 1.0). Two empty token sets give 1.0.
    """
    s1 = fold_case(s1, case_sensitive)
    s2 = fold_case(s2, case_sensitive)
    if use_words:
        set1, set2 = set(s1.split()), set(s2.split())
    else:
        set1, set2 = set(s1), set(s2)

    if not set1 and not set2:
        return 1.0
    return len(set1 & set2) / len(set1 | set2)


def _strip_non_alnum(word: str) -> str:
    """Strip leading and trailing characters that are neither letters nor digits"""
    start, end = 0, len(word)
    while start < end and not word[start].isalnum():
        start += 1
    while end > start and not word[end - 1].isalnum():
        end -= 1
    return word[start:end]


def word_frequency(text: str) -> Counter:
    """Word frequency vector with punctuation stripped from word edges"""
    freq: Counter = Counter()
    for word in text.split():
        word = _strip_non_alnum(word)
        if word:
            freq[word] += 1
    return freq


def cosine_similarity(s1: str, s2: str, case_sensitive: bool = False) -> float:
    """
    Cosine similarity of the word-frequency vectors

    Returns:
        Similarity (0.0 to 1.0). Both empty gives 1.0, exactly one empty gives 0.0.
    """
    vec1 = word_frequency(fold_case(s1, case_sensitive))
    vec2 = word_frequency(fold_case(s2, case_sensitive))

    if not vec1 or not vec2:
        return 1.0 if not vec1 and not vec2 else 0.0

    dot_product = sum(count * vec2[word] for word, count in vec1.items() if word in vec2)
    mag1 = math.sqrt(sum(count * count for count in vec1.values()))
    mag2 = math.sqrt(sum(count * count for count in vec2.values()))
    if mag1 == 0 or mag2 == 0:
        return 0.0
    return dot_product / (mag1 * mag2)


def ngram_counts(tokens: list[str], n: int) -> Counter:
    """Count the n-token sequences of a token list"""
    return Counter(tuple(tokens[i:i + n]) for i in range(len(tokens) - n + 1))


def ngram_precision(candidate: list[str], reference: list[str], n: int) -> float:
    """
    Clipped n-gram precision

    Each candidate n-gram counts as a match at most as many times as it
    appears in the reference.

    Returns:
        Matches / candidate n-gram count, or 0.0 when either side is shorter than n
    """
    if len(candidate) < n or len(reference) < n:
        return 0.0

    cand_ngrams = ngram_counts(candidate, n)
    ref_ngrams = ngram_counts(reference, n)
    matches = sum(min(count, ref_ngrams[ngram]) for ngram, count in cand_ngrams.items())
    return matches / (len(candidate) - n + 1)


def brevity_penalty(candidate_len: int, reference_len: int) -> float:
    """1.0 when the candidate is at least as long as the reference, else exp(1 - ref/cand)"""
    if candidate_len >= reference_len:
        return 1.0
    return math.exp(1.0 - reference_len / candidate_len)


def bleu_score(candidate: str, reference: str, max_n: int = DEFAULT_BLEU_MAX_N) -> float:
    """
    Simplified sentence-level BLEU

    score = brevity_penalty * exp(mean(log(precision_n))) for n = 1..max_n,
    where zero precisions are replaced by a smoothing floor of 0.01.
    Both texts are lowercased and split on whitespace.

    Args:
        candidate: Generated text
        reference: Reference text
        max_n: Largest n-gram order (non-positive values fall back to 4)

    Returns:
        BLEU score (0.0 to 1.0). An empty candidate scores 0.0.
    """
    if max_n <= 0:
        max_n = DEFAULT_BLEU_MAX_N

    cand_tokens = candidate.lower().split()
    ref_tokens = reference.lower().split()
    if not cand_tokens:
        return 0.0

    penalty = brevity_penalty(len(cand_tokens), len(ref_tokens))

    log_precision_sum = 0.0
    for n in range(1, max_n + 1):
        precision = ngram_precision(cand_tokens, ref_tokens, n)
        log_precision_sum += math.log(precision if precision > 0 else BLEU_SMOOTHING_FLOOR)

    return penalty * math.exp(log_precision_sum / max_n)


def lcs_length(a: list[str], b: list[str]) -> int:
    """Length of the longest common subsequence of two token lists"""
    previous = [0] * (len(b) + 1)
    for token_a in a:
        current = [0]
        for j, token_b in enumerate(b, start=1):
            if token_a == token_b:
                current.append(previous[j - 1] + 1)
            else:
                current.append(max(previous[j], current[j - 1]))
        previous = current
    return previous[-1]


def rouge_l_score(candidate: str, reference: str, beta: float = DEFAULT_ROUGE_BETA) -> float:
    """
    Simplified ROUGE-L F-score over lowercased whitespace tokens

    F = ((1 + beta^2) * P * R) / (beta^2 * P + R), where P and R are the LCS
    length divided by the candidate and reference token counts.

    Args:
        candidate: Generated text
        reference: Reference text
        beta: Recall weight (non-positive values fall back to 1.0)

    Returns:
        F-score (0.0 to 1.0). Both empty gives 1.0, exactly one empty gives 0.0.
    """
    if beta <= 0:
        beta = DEFAULT_ROUGE_BETA

    cand_tokens = candidate.lower().split()
    ref_tokens = reference.lower().split()
    if not cand_tokens or not ref_tokens:
        return 1.0 if not cand_tokens and not ref_tokens else 0.0

    lcs = lcs_length(cand_tokens, ref_tokens)
    precision = lcs / len(cand_tokens)
    recall = lcs / len(ref_tokens)
    if precision + recall == 0:
        return 0.0

    beta_sq = beta * beta
    return ((1 + beta_sq) * precision * recall) / (beta_sq * precision + recall)
