# Area: Shared
"""
mind_reader._config — Game constants and advisory configuration
================================================================

Game constants plus loading and validation of the advisory service
settings. Settings come from the environment (optionally seeded from a
``.env`` file via python-dotenv); explicit overrides win. A missing API
key is not an error: the advisory path simply always falls back.
"""

from __future__ import annotations
import logging
import math
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger("mind_reader.config")

# Game rules
RANGE_MAX = 100
MAX_GUESSES = 10

# Default advisory settings
DEFAULT_MODEL = "claude-3-haiku-20240307"
DEFAULT_MAX_TOKENS = 256
DEFAULT_TIMEOUT_SECONDS = 10.0
DEFAULT_LOG_FILE = "mind_reader.log"

# Environment variable -> config key
ENV_MAPPINGS = {
    "ANTHROPIC_API_KEY": "api_key",
    "MIND_READER_MODEL": "model",
    "MIND_READER_MAX_TOKENS": "max_tokens",
    "MIND_READER_TIMEOUT_SECONDS": "timeout_seconds",
    "MIND_READER_LOG_FILE": "log_file",
}

NUMERIC_KEYS = {
    "max_tokens": int,
    "timeout_seconds": float,
}


@dataclass(frozen=True)
class AdvisoryConfig:
    """Settings for the advisory service client."""
    api_key: Optional[str] = None
    model: str = DEFAULT_MODEL
    max_tokens: int = DEFAULT_MAX_TOKENS
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    log_file: str = DEFAULT_LOG_FILE

    @property
    def has_credentials(self) -> bool:
        return bool(self.api_key)


def load_config(
    env_file: Optional[str] = None,
    overrides: Optional[Dict[str, Any]] = None,
) -> AdvisoryConfig:
    """
    Build an AdvisoryConfig from the environment.

    Args:
        env_file: Optional path to a .env file. When None, python-dotenv
            searches for one from the current directory upwards.
        overrides: Config keys that take precedence over the environment.

    Returns:
        The validated configuration.

    Raises:
        ValueError: If an override is unknown or not a positive finite number.
            Invalid environment values are logged and replaced by defaults.
    """
    load_dotenv(dotenv_path=env_file or find_dotenv(usecwd=True))

    config: Dict[str, Any] = {}
    for env_key, config_key in ENV_MAPPINGS.items():
        value = os.environ.get(env_key)
        if value is None or value.strip() == "":
            continue
        config[config_key] = value.strip()

    # Bad numbers from the environment degrade to defaults
    for key, cast in NUMERIC_KEYS.items():
        if key not in config:
            continue
        try:
            number = cast(config[key])
        except (TypeError, ValueError):
            number = None
        if number is None or not _is_positive_finite(number):
            logger.warning(f"Ignoring invalid {key}={config[key]!r}, using default")
            del config[key]
        else:
            config[key] = number

    if overrides:
        explicit = {k: v for k, v in overrides.items() if v is not None}
        for key, cast in NUMERIC_KEYS.items():
            if key in explicit:
                explicit[key] = cast(explicit[key])
        validate_config(explicit)
        config.update(explicit)

    validate_config(config)

    if not config.get("api_key"):
        logger.info("No ANTHROPIC_API_KEY configured; advisories will use fallback messages")

    return AdvisoryConfig(**config)


def validate_config(config: Dict[str, Any]) -> None:
    """
    Validate configuration values.

    Args:
        config: Configuration dict

    Raises:
        ValueError: If unknown keys are present or numeric values are not positive and finite
    """
    unknown = [k for k in config if k not in ENV_MAPPINGS.values()]
    if unknown:
        raise ValueError(f"Unknown config keys: {unknown}")

    invalid = [k for k in NUMERIC_KEYS if k in config and not _is_positive_finite(config[k])]
    if invalid:
        raise ValueError(f"Config values must be positive and finite: {invalid}")


def _is_positive_finite(value: Any) -> bool:
    return math.isfinite(value) and value > 0
