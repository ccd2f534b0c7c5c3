"""
Logging helpers with redaction so secrets never reach a log record.

The package logger has a NullHandler attached in __init__; applications
(or the CLI's --verbose flag) opt in with configure_logging().
"""

import logging
from typing import Any, Dict

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_SENSITIVE_KEYS = {"private_key", "secret", "nonce", "x", "r", "witness"}


def configure_logging(level: int = logging.INFO) -> None:
    """Attach a stream handler to the root logger using LOG_FORMAT."""
    logging.basicConfig(level=level, format=LOG_FORMAT)


def redact(fields: Dict[str, Any]) -> Dict[str, Any]:
    """
    Return a copy of ``fields`` with sensitive values replaced.

    Example:
        >>> redact({"public_key": 2, "private_key": 6})
        {'public_key': 2, 'private_key': '<REDACTED>'}
    """
    return {
        key: "<REDACTED>" if str(key).lower() in _SENSITIVE_KEYS else value
        for key, value in fields.items()
    }


def format_fields(**fields: Any) -> str:
    """Render redacted key=value pairs for a log message."""
    return " ".join(f"{key}={value}" for key, value in redact(fields).items())
