"""
gauge-eval CLI Runner

Minimal CLI for scoring a dataset of model outputs with heuristic metrics.

Usage:
    python -m gauge_eval.runner --dataset data/records.json
    python -m gauge_eval.runner --dataset data/records.jsonl --metrics bleu,rouge_l --concurrency 4

Records are JSON objects with the model input, output and expected output
(keys "input", "output" and "expected" unless overridden).
"""

from __future__ import annotations

import argparse
import logging
import sys

from dotenv import load_dotenv

from gauge_eval.domain.constants import DEFAULT_METRICS
from gauge_eval.domain.entities import EvaluationResult
from gauge_eval.harness_config import load_config
from gauge_eval.record_loader import load_records
from gauge_eval.scoring.scorer import create_metrics
from gauge_eval.use_cases.aggregation import aggregate_results
from gauge_eval.use_cases.dataset import DatasetEvaluator, default_input_mapper
from gauge_eval.use_cases.evaluation import Engine


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="gauge-eval: Score model outputs with heuristic metrics",
    )
    parser.add_argument(
        "--dataset",
        required=True,
        help="Path to the dataset (.json array of objects or .jsonl)",
    )
    parser.add_argument(
        "--metrics",
        default=None,
        help="Comma-separated list of metric names (default: DEFAULT_METRICS)",
    )
    parser.add_argument(
        "--concurrency",
        type=int,
        default=None,
        help="Number of items evaluated at once (default: GAUGE_EVAL_CONCURRENCY from .env)",
    )
    parser.add_argument("--input-key", default=None, help="Record key of the model input")
    parser.add_argument("--output-key", default=None, help="Record key of the model output")
    parser.add_argument("--expected-key", default=None, help="Record key of the expected output")
    return parser.parse_args(argv)


def print_progress(completed: int, total: int, result: EvaluationResult) -> None:
    """Progress callback printing one line per finished item"""
    if result.is_success():
        print(f"[{completed}/{total}] {result.item_id} | avg={result.average_score():.3f}")
    else:
        print(f"[{completed}/{total}] {result.item_id} | ERROR: {result.error}")


def main(argv: list[str] | None = None) -> None:
    load_dotenv()
    args = parse_args(argv)

    # Load config
    config = load_config()
    logging.basicConfig(
        level=config.logging.level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    metric_names = [m.strip() for m in args.metrics.split(",") if m.strip()] if args.metrics else DEFAULT_METRICS
    concurrency = args.concurrency if args.concurrency else config.engine.concurrency
    input_key = args.input_key or config.dataset.input_key
    output_key = args.output_key or config.dataset.output_key
    expected_key = args.expected_key or config.dataset.expected_key

    # Build metrics
    try:
        metrics = create_metrics(metric_names, config.similarity)
    except ValueError as e:
        print(f"ERROR: {e}")
        sys.exit(1)
    if not metrics:
        print("ERROR: No metrics selected. Exiting.")
        sys.exit(1)

    # Load dataset
    print(f"\n=== Loading dataset: {args.dataset} ===\n")
    try:
        records = load_records(args.dataset)
    except (FileNotFoundError, ValueError) as e:
        print(f"ERROR: {e}")
        sys.exit(1)
    if not records:
        print("ERROR: Dataset is empty. Exiting.")
        sys.exit(1)
    print(f"  Records: {len(records)}")
    print(f"  Metrics: {[m.name for m in metrics]}")
    print(f"  Concurrency: {concurrency}")
    print(f"  Keys: input={input_key}, output={output_key}, expected={expected_key}")
    print()

    # Run evaluations
    print(f"=== Running Evaluations ({len(records)} total) ===\n")
    engine = Engine(metrics, concurrency=concurrency, callbacks=[print_progress])
    evaluator = DatasetEvaluator(engine, default_input_mapper(input_key, output_key, expected_key))
    results = evaluator.evaluate(records)

    # Aggregate results
    print("\n=== Metrics Summary ===\n")
    summary_df = aggregate_results(results)
    print(f"  {'Metric':<28} {'mean':>8} {'count':>7} {'failed':>7}")
    print(f"  {'-'*28} {'-'*8} {'-'*7} {'-'*7}")
    for _, row in summary_df.iterrows():
        print(f"  {row['metric']:<28} {row['mean']:>8.4f} {row['count']:>7} {row['failed']:>7}")
    print()

    failed = results.failed()
    if failed:
        print(f"  WARNING: {len(failed)} item(s) did not complete evaluation")
        print()


if __name__ == "__main__":
    main()
