"""
Dataset Evaluation

Maps raw dataset records into metric inputs and evaluates them with an engine.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Mapping

from gauge_eval.context import EvaluationContext
from gauge_eval.domain.entities import EvaluationResults
from gauge_eval.domain.value_objects import MetricInput
from gauge_eval.use_cases.evaluation import Engine

InputMapper = Callable[[Mapping[str, Any]], MetricInput]


def default_input_mapper(input_key: str, output_key: str, expected_key: str) -> InputMapper:
    """
    Create a mapper for records with input/output/expected fields

    String values are read from the given keys; absent or non-string values
    become "". The whole record is kept as metadata.

    Args:
        input_key: Key of the model input
        output_key: Key of the model output
        expected_key: Key of the expected output

    Returns:
        Function mapping a record to a MetricInput
    """
    def _string_at(record: Mapping[str, Any], key: str) -> str:
        value = record.get(key)
        return value if isinstance(value, str) else ""

    def mapper(record: Mapping[str, Any]) -> MetricInput:
        return MetricInput(
            input=_string_at(record, input_key),
            output=_string_at(record, output_key),
            expected=_string_at(record, expected_key),
            metadata=record,
        )

    return mapper


class DatasetEvaluator:
    """Evaluates metrics against dataset records"""

    def __init__(self, engine: Engine, mapper: InputMapper) -> None:
        self.engine = engine
        self.mapper = mapper

    def evaluate(
        self,
        records: Iterable[Mapping[str, Any]],
        ctx: EvaluationContext | None = None,
    ) -> EvaluationResults:
        """Map every record and evaluate them in order (item IDs "item-<index>")"""
        inputs = [self.mapper(record) for record in records]
        return self.engine.evaluate_many(inputs, ctx)
