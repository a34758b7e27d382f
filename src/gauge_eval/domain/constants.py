"""
Domain Constants

Centrally manages constants shared across the evaluation engine and metrics.
"""

# Engine
DEFAULT_CONCURRENCY = 1
ITEM_ID_FORMAT = "item-{index}"

# Similarity algorithm defaults
DEFAULT_BLEU_MAX_N = 4
DEFAULT_ROUGE_BETA = 1.0
DEFAULT_FUZZY_THRESHOLD = 0.8
BLEU_SMOOTHING_FLOOR = 0.01  # Replaces zero n-gram precisions before log-averaging

# Reasons
CONDITION_NOT_MET_REASON = "condition not met"
FUZZY_ABOVE_THRESHOLD_REASON = "fuzzy match above threshold"
FUZZY_BELOW_THRESHOLD_REASON = "fuzzy match below threshold"
SEMANTIC_FALLBACK_REASON = "using word-based approximation (no embedding provider)"

# Default metric list used by the CLI runner
DEFAULT_METRICS = [
    "levenshtein_similarity",
    "jaccard_similarity",
    "cosine_similarity",
    "bleu",
    "rouge_l",
]
