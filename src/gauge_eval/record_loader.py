"""
Record Loader

Loads raw dataset records for evaluation from JSON files.
Supports a JSON array of objects (.json) and one object per line (.jsonl).
"""

import json
from pathlib import Path


def _validate_records(data, file_path: str) -> list[dict]:
    """Check that every record is a JSON object"""
    if not isinstance(data, list):
        raise ValueError(f"Dataset must be a JSON array of objects: {file_path}")
    for index, record in enumerate(data):
        if not isinstance(record, dict):
            raise ValueError(f"Record {index} is not a JSON object: {file_path}")
    return data


def load_records_jsonl(file_path: str) -> list[dict]:
    """
    Load records from a JSON Lines file (blank lines are skipped)

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If a line is not valid JSON or not an object
    """
    records = []
    with open(file_path, "r", encoding="utf-8") as f:
        for line_no, line in enumerate(f, start=1):
            line = line.strip()
            if not line:
                continue
            try:
                records.append(json.loads(line))
            except json.JSONDecodeError as e:
                raise ValueError(f"Invalid JSON on line {line_no}: {file_path}: {e}") from e
    return _validate_records(records, file_path)


def load_records(file_path: str) -> list[dict]:
    """
    Load dataset records

    Args:
        file_path: Path to a .json (array of objects) or .jsonl file

    Returns:
        list[dict]: Records in file order

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is not a valid dataset
    """
    if Path(file_path).suffix.lower() == ".jsonl":
        return load_records_jsonl(file_path)

    with open(file_path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON: {file_path}: {e}") from e
    return _validate_records(data, file_path)
