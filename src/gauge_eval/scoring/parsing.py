"""
Parsing metrics

Checks whether the output parses as JSON, XML, a number or a boolean, and
validates the shape of JSON objects.
"""

from __future__ import annotations

import json
import re
import xml.etree.ElementTree as ET
from dataclasses import replace
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from gauge_eval.context import EvaluationContext

from gauge_eval.domain.value_objects import MetricInput, ScoreResult, boolean_score
from gauge_eval.scoring.base import BaseMetric, Metric

_CODE_BLOCK_RE = re.compile(r"```(?:json)?\s*([\s\S]*?)```")
_OBJECT_RE = re.compile(r"\{[^{}]*\}")
_ARRAY_RE = re.compile(r"\[[^\[\]]*\]")


def _reject_constant(value: str) -> Any:
    # NaN / Infinity are not valid JSON
    raise ValueError(f"invalid JSON constant: {value}")


def _loads(text: str) -> Any:
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except RecursionError as e:
        raise ValueError(f"JSON nested too deeply: {e}") from e


def json_type(value: Any) -> str:
    """Name of the JSON type of a decoded value"""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return "unknown"


def extract_json_text(text: str) -> str:
    """
    Extract JSON text from a markdown code block or surrounding prose

    Returns:
        The extracted text, or "" when nothing JSON-like was found
    """
    match = _CODE_BLOCK_RE.search(text)
    if match:
        return match.group(1).strip()

    text = text.strip()
    if (text.startswith("{") and text.endswith("}")) or (text.startswith("[") and text.endswith("]")):
        return text

    for pattern in (_OBJECT_RE, _ARRAY_RE):
        match = pattern.search(text)
        if match:
            return match.group(0)
    return ""


class IsJSON(BaseMetric):
    def __init__(self) -> None:
        super().__init__("is_json")

    def score(self, metric_input: MetricInput, ctx: EvaluationContext | None = None) -> ScoreResult:
        try:
            _loads(metric_input.output)
        except ValueError as e:
            return boolean_score(self.name, False, f"invalid JSON: {e}")
        return boolean_score(self.name, True, "valid JSON")


class IsJSONObject(BaseMetric):
    def __init__(self) -> None:
        super().__init__("is_json_object")

    def score(self, metric_input: MetricInput, ctx: EvaluationContext | None = None) -> ScoreResult:
        try:
            valid = isinstance(_loads(metric_input.output), dict)
        except ValueError:
            valid = False
        if valid:
            return boolean_score(self.name, True, "valid JSON object")
        return boolean_score(self.name, False, "not a valid JSON object")


class IsJSONArray(BaseMetric):
    def __init__(self) -> None:
        super().__init__("is_json_array")

    def score(self, metric_input: MetricInput, ctx: EvaluationContext | None = None) -> ScoreResult:
        try:
            valid = isinstance(_loads(metric_input.output), list)
        except ValueError:
            valid = False
        if valid:
            return boolean_score(self.name, True, "valid JSON array")
        return boolean_score(self.name, False, "not a valid JSON array")


def _load_object(text: str) -> dict | None:
    try:
        value = _loads(text)
    except ValueError:
        return None
    return value if isinstance(value, dict) else None


class JSONHasKeys(BaseMetric):
    """Fraction of the required keys present in the JSON object output"""

    def __init__(self, keys: list[str]) -> None:
        super().__init__("json_has_keys")
        self.keys = list(keys)

    def score(self, metric_input: MetricInput, ctx: EvaluationContext | None = None) -> ScoreResult:
        obj = _load_object(metric_input.output)
        if obj is None:
            return boolean_score(self.name, False, "not a valid JSON object")

        missing = [key for key in self.keys if key not in obj]
        if not missing:
            return ScoreResult(name=self.name, value=1.0, reason="has all required keys")

        found = len(self.keys) - len(missing)
        return ScoreResult(
            name=self.name,
            value=found / len(self.keys),
            reason="missing keys: " + ", ".join(missing),
        )


class JSONSchemaValid(BaseMetric):
    """
    Checks required keys and their JSON types

    Args:
        required: key -> expected type (string, number, boolean, array, object, null)
    """

    def __init__(self, required: dict[str, str]) -> None:
        super().__init__("json_schema_valid")
        self.required = dict(required)

    def score(self, metric_input: MetricInput, ctx: EvaluationContext | None = None) -> ScoreResult:
        obj = _load_object(metric_input.output)
        if obj is None:
            return boolean_score(self.name, False, "not a valid JSON object")

        errors = []
        for key, expected_type in self.required.items():
            if key not in obj:
                errors.append(f"{key}: missing")
                continue
            actual_type = json_type(obj[key])
            if actual_type != expected_type:
                errors.append(f"{key}: expected {expected_type}, got {actual_type}")

        if not errors:
            return ScoreResult(name=self.name, value=1.0, reason="valid schema")

        valid = len(self.required) - len(errors)
        return ScoreResult(name=self.name, value=valid / len(self.required), reason="; ".join(errors))


class IsXML(BaseMetric):
    """1.0 when the output is a well-formed XML document"""

    def __init__(self) -> None:
        super().__init__("is_xml")

    def score(self, metric_input: MetricInput, ctx: EvaluationContext | None = None) -> ScoreResult:
        try:
            ET.fromstring(metric_input.output)
        except (ET.ParseError, ValueError) as e:
            # ValueError covers UnicodeEncodeError from unpaired surrogates
            return boolean_score(self.name, False, f"invalid XML: {e}")
        return boolean_score(self.name, True, "valid XML")


class ExtractJSON(BaseMetric):
    """Extracts JSON from the output and scores it with the wrapped metric"""

    def __init__(self, inner: Metric) -> None:
        super().__init__("extract_json")
        self.inner = inner

    def score(self, metric_input: MetricInput, ctx: EvaluationContext | None = None) -> ScoreResult:
        extracted = extract_json_text(metric_input.output)
        if not extracted:
            return ScoreResult(name=self.name, value=0.0, reason="no JSON found in output")
        return self.inner.score(replace(metric_input, output=extracted), ctx)


class IsNumber(BaseMetric):
    def __init__(self) -> None:
        super().__init__("is_number")

    def score(self, metric_input: MetricInput, ctx: EvaluationContext | None = None) -> ScoreResult:
        try:
            value = _loads(metric_input.output)
        except ValueError:
            value = None
        if json_type(value) == "number":
            return boolean_score(self.name, True, "valid number")
        return boolean_score(self.name, False, "not a valid number")


class IsBoolean(BaseMetric):
    """Accepts true/false, yes/no and 1/0 (case-insensitive)"""

    _VALUES = ("true", "false", "yes", "no", "1", "0")

    def __init__(self) -> None:
        super().__init__("is_boolean")

    def score(self, metric_input: MetricInput, ctx: EvaluationContext | None = None) -> ScoreResult:
        lower = metric_input.output.strip().lower()
        if lower in self._VALUES:
            return boolean_score(self.name, True, f"valid boolean: {lower}")
        return boolean_score(self.name, False, "not a valid boolean")
