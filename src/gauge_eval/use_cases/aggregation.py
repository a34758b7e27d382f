"""
Result Aggregation

Flattens evaluation results into pandas DataFrames and aggregates them per metric.
"""

from __future__ import annotations

import pandas as pd

from gauge_eval.domain.entities import EvaluationResults

RESULT_COLUMNS = [
    "item_index",
    "item_id",
    "item_success",
    "metric",
    "value",
    "success",
    "reason",
    "error",
]

SUMMARY_COLUMNS = ["metric", "mean", "count", "failed"]


def results_to_frame(results: EvaluationResults) -> pd.DataFrame:
    """
    Flatten evaluation results into one row per (item, score)

    Args:
        results: Evaluation results

    Returns:
        pd.DataFrame with RESULT_COLUMNS. Failed scores have a NaN value.
    """
    rows = []
    for index, result in enumerate(results):
        for score in result.scores:
            rows.append({
                "item_index": index,
                "item_id": result.item_id,
                "item_success": result.is_success(),
                "metric": score.name,
                "value": score.value if score.is_success() else float("nan"),
                "success": score.is_success(),
                "reason": score.reason,
                "error": str(score.error) if score.error is not None else None,
            })
    return pd.DataFrame(rows, columns=RESULT_COLUMNS)


def aggregate_results(results: EvaluationResults) -> pd.DataFrame:
    """
    Aggregate scores per metric name

    The mean follows EvaluationResults.summary(): for each item only the first
    score of a metric is considered, and only if it succeeded. Metrics with no
    contributing item have a mean of 0.0.

    Args:
        results: Evaluation results

    Returns:
        pd.DataFrame with columns metric, mean, count (contributing items) and
        failed (failed scores of that metric), sorted by metric name
    """
    df = results_to_frame(results)
    if df.empty:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)

    failed = df[~df["success"]].groupby("metric").size()

    first = df.drop_duplicates(subset=["item_index", "metric"], keep="first")
    contributing = first[first["success"]]
    grouped = contributing.groupby("metric")["value"]

    metrics = sorted(df["metric"].unique())
    summary = pd.DataFrame({
        "metric": metrics,
        "mean": grouped.mean().reindex(metrics, fill_value=0.0).to_numpy(),
        "count": grouped.size().reindex(metrics, fill_value=0).astype(int).to_numpy(),
        "failed": failed.reindex(metrics, fill_value=0).astype(int).to_numpy(),
    })
    return summary
