"""Process-wide defaults for building responses."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, replace
from typing import Any

from .logger import LogLevel, configure_logger
from .types import InclusionPredicate

logger = logging.getLogger(__name__)

DEFAULT_NULLABLE_PREFIX = "Null"

_VALID_LOG_LEVELS = ("silent", "error", "warn", "info", "debug")


def include_all(condition: str) -> bool:
    return True


@dataclass
class ResponderConfig:
    # Type name prefix of nullable wrappers such as NullInt or NullString.
    # An empty prefix turns the convention off.
    nullable_prefix: str = DEFAULT_NULLABLE_PREFIX
    # Metadata key consulted after "response" when resolving output keys.
    secondary_tag: str = "json"
    should_include: InclusionPredicate = field(default=include_all)
    json_indent: int | None = None
    json_ensure_ascii: bool = False
    log_level: LogLevel = "warn"


_config = ResponderConfig()


def get_config() -> ResponderConfig:
    return _config


def set_config(config: ResponderConfig) -> None:
    global _config
    _config = config


def set_should_include(predicate: InclusionPredicate | None) -> None:
    """Replace the default inclusion predicate; ``None`` restores include-all."""
    set_config(replace(_config, should_include=predicate or include_all))


def load_responder_config(**overrides: Any) -> ResponderConfig:
    """Build a config from defaults, then environment variables, then ``overrides``.

    Recognized environment variables:
        RESPONDERS_NULLABLE_PREFIX: nullable wrapper type name prefix
        RESPONDERS_JSON_INDENT: integer indent for the JSON codec
        RESPONDERS_LOG_LEVEL: silent, error, warn, info or debug

    Invalid environment values are logged and ignored.
    """
    values: dict[str, Any] = {}

    prefix = os.environ.get("RESPONDERS_NULLABLE_PREFIX")
    if prefix is not None:
        values["nullable_prefix"] = prefix

    indent = os.environ.get("RESPONDERS_JSON_INDENT")
    if indent:
        try:
            values["json_indent"] = int(indent)
        except ValueError:
            logger.warning(f"Invalid RESPONDERS_JSON_INDENT env var: {indent}")

    level = os.environ.get("RESPONDERS_LOG_LEVEL")
    if level:
        level = level.lower()
        if level in _VALID_LOG_LEVELS:
            values["log_level"] = level
        else:
            logger.warning(f"Invalid RESPONDERS_LOG_LEVEL env var: {level}")

    values.update({key: value for key, value in overrides.items() if value is not None})
    return ResponderConfig(**values)


def initialize(**overrides: Any) -> ResponderConfig:
    """Load the config, configure logging from it and install it as the default.

    Precedence (highest to lowest): ``overrides``, ``RESPONDERS_*`` environment
    variables, built-in defaults.
    """
    config = load_responder_config(**overrides)
    # Configure logger FIRST (before any logging calls)
    configure_logger(log_level=config.log_level, prefix="Responders")
    set_config(config)
    logger.debug(f"Responders initialized: nullable_prefix={config.nullable_prefix!r}")
    return config
