import logging
import os
import re
from typing import Any, Iterable

from infrastructure.observability.context import get_run_id


_SENSITIVE_ENV_KEYS = (
    "GITHUB_TOKEN",
    "GH_TOKEN",
    "INPUT_GITHUB-TOKEN",
)
_TOKEN_PATTERNS = (
    re.compile(r"(Bearer\s+)[A-Za-z0-9_\-.]+", re.IGNORECASE),
    re.compile(r"\bgh[pousr]_[A-Za-z0-9_]+\b"),
    re.compile(r"\bgithub_pat_[A-Za-z0-9_]+\b"),
)
_REGISTERED_SENSITIVE_VALUES: set[str] = set()


def register_sensitive_values(*values: str) -> None:
    for value in values:
        if value:
            _REGISTERED_SENSITIVE_VALUES.add(value)


def _sensitive_values() -> Iterable[str]:
    yield from _REGISTERED_SENSITIVE_VALUES
    for key in _SENSITIVE_ENV_KEYS:
        value = os.getenv(key)
        if value:
            yield value


def redact_secrets(text: str) -> str:
    redacted = text
    for value in _sensitive_values():
        redacted = redacted.replace(value, "[REDACTED]")
    for pattern in _TOKEN_PATTERNS:
        if pattern.groups > 0:
            redacted = pattern.sub(r"\1[REDACTED]", redacted)
        else:
            redacted = pattern.sub("[REDACTED]", redacted)
    return redacted


class RunIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.run_id = get_run_id()
        return True


def configure_logging(level: str | None = None) -> None:
    log_level = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    if not logging.getLogger().handlers:
        logging.basicConfig(
            level=log_level,
            format="%(asctime)s %(levelname)s [run_id=%(run_id)s] %(name)s - %(message)s",
        )

    for handler in logging.getLogger().handlers:
        has_run_id_filter = any(isinstance(f, RunIdFilter) for f in handler.filters)
        if not has_run_id_filter:
            handler.addFilter(RunIdFilter())


def safe_message(message: str) -> str:
    return redact_secrets(message)


def _format_field_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        return safe_message(value)
    return safe_message(repr(value))


def structured_message(event: str, **fields: Any) -> str:
    parts = [f"event={safe_message(event)}"]
    for key, value in fields.items():
        if value is None:
            continue
        formatted_value = _format_field_value(value).replace('"', '\\"')
        parts.append(f'{key}="{formatted_value}"')
    return " ".join(parts)


def log_event(logger: logging.Logger, level: int, event: str, **fields: Any) -> None:
    logger.log(level, structured_message(event, **fields))
