"""
Evaluation Harness Configuration

Manages loading from environment variables and default values.
"""

import os
from dataclasses import dataclass, field, asdict

from gauge_eval.domain.constants import (
    DEFAULT_BLEU_MAX_N,
    DEFAULT_CONCURRENCY,
    DEFAULT_FUZZY_THRESHOLD,
    DEFAULT_ROUGE_BETA,
)


def _env_bool(key: str, default: bool) -> bool:
    """Convert an environment variable to bool"""
    val = os.environ.get(key)
    if val is None:
        return default
    return val.lower() in ("true", "1", "yes")


def _env_int(key: str, default: int) -> int:
    """Convert an environment variable to int"""
    val = os.environ.get(key)
    if val is None:
        return default
    try:
        return int(val)
    except ValueError:
        raise ValueError(f"The value '{val}' of environment variable '{key}' cannot be converted to an integer.")


def _env_float(key: str, default: float) -> float:
    """Convert an environment variable to float"""
    val = os.environ.get(key)
    if val is None:
        return default
    try:
        return float(val)
    except ValueError:
        raise ValueError(f"The value '{val}' of environment variable '{key}' cannot be converted to a number.")


def _env_str(key: str, default: str) -> str:
    """Get an environment variable as a string"""
    return os.environ.get(key, default)


@dataclass
class EngineConfig:
    """Evaluation engine configuration"""
    concurrency: int = DEFAULT_CONCURRENCY  # 1 = sequential


@dataclass
class SimilarityConfig:
    """Similarity metric configuration"""
    case_sensitive: bool = False
    bleu_max_n: int = DEFAULT_BLEU_MAX_N
    rouge_beta: float = DEFAULT_ROUGE_BETA
    fuzzy_threshold: float = DEFAULT_FUZZY_THRESHOLD


@dataclass
class DatasetConfig:
    """Record field names used by the default input mapper"""
    input_key: str = "input"
    output_key: str = "output"
    expected_key: str = "expected"


@dataclass
class LoggingConfig:
    """Logging configuration"""
    level: str = "WARNING"


@dataclass
class HarnessConfig:
    """Overall evaluation harness configuration"""
    engine: EngineConfig = field(default_factory=EngineConfig)
    similarity: SimilarityConfig = field(default_factory=SimilarityConfig)
    dataset: DatasetConfig = field(default_factory=DatasetConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def to_dict(self) -> dict:
        """Convert to dictionary format"""
        return {"harness_config": asdict(self)}

    @classmethod
    def from_dict(cls, data: dict) -> "HarnessConfig":
        """Create from dictionary (handles presence/absence of harness_config key)"""
        config_data = data.get("harness_config", data)
        return cls(
            engine=EngineConfig(**config_data.get("engine", {})),
            similarity=SimilarityConfig(**config_data.get("similarity", {})),
            dataset=DatasetConfig(**config_data.get("dataset", {})),
            logging=LoggingConfig(**config_data.get("logging", {})),
        )


def load_config() -> HarnessConfig:
    """
    Load configuration from environment variables

    Uses default values when environment variables are not set.

    Returns:
        HarnessConfig
    """
    engine = EngineConfig(
        concurrency=_env_int("GAUGE_EVAL_CONCURRENCY", DEFAULT_CONCURRENCY),
    )
    similarity = SimilarityConfig(
        case_sensitive=_env_bool("GAUGE_EVAL_CASE_SENSITIVE", False),
        bleu_max_n=_env_int("GAUGE_EVAL_BLEU_MAX_N", DEFAULT_BLEU_MAX_N),
        rouge_beta=_env_float("GAUGE_EVAL_ROUGE_BETA", DEFAULT_ROUGE_BETA),
        fuzzy_threshold=_env_float("GAUGE_EVAL_FUZZY_THRESHOLD", DEFAULT_FUZZY_THRESHOLD),
    )
    dataset = DatasetConfig(
        input_key=_env_str("GAUGE_EVAL_INPUT_KEY", "input"),
        output_key=_env_str("GAUGE_EVAL_OUTPUT_KEY", "output"),
        expected_key=_env_str("GAUGE_EVAL_EXPECTED_KEY", "expected"),
    )
    logging_config = LoggingConfig(
        level=_env_str("GAUGE_EVAL_LOG_LEVEL", "WARNING").upper(),
    )
    return HarnessConfig(
        engine=engine,
        similarity=similarity,
        dataset=dataset,
        logging=logging_config,
    )
