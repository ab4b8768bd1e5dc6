# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Logging configuration with secret redaction.

Library modules log through ``logging.getLogger(__name__)`` and never
configure handlers themselves.  Entry points call ``configure_logging()``.

Podman command lines can carry secrets in ``--env`` and ``--build-arg``
values, so they are passed through ``redact_command()`` before being
logged.

Usage:
    from podman_cli.logging import configure_logging
    configure_logging(level=logging.DEBUG)
"""

import logging
import re
from collections.abc import Sequence
from typing import ClassVar


#: Flags whose ``KEY=VALUE`` argument has its value masked in logs.
_SECRET_VALUE_FLAGS = frozenset({"--env", "-e", "--build-arg"})


class SecretFilter(logging.Filter):
    """Logging filter that redacts registered secrets from log output.

    Any registered secret appearing in a log message is replaced with
    '[REDACTED]'.
    """

    _secrets: ClassVar[set[str]] = set()
    _pattern: ClassVar[re.Pattern[str] | None] = None

    def filter(self, record: logging.LogRecord) -> bool:
        """Redact registered secrets from the record.

        Args:
            record: The log record to filter.

        Returns:
            Always True (record is never suppressed, only modified).
        """
        if self._pattern is not None:
            record.msg = self._pattern.sub("[REDACTED]", str(record.msg))
            if record.args:
                record.args = tuple(
                    self._pattern.sub("[REDACTED]", str(arg))
                    if isinstance(arg, str)
                    else arg
                    for arg in record.args
                )
        return True

    @classmethod
    def register_secret(cls, secret: str) -> None:
        """Register a secret to be redacted from all log output.

        Args:
            secret: The secret string to redact. Empty strings are ignored.
        """
        if secret:
            cls._secrets.add(secret)
            cls._rebuild_pattern()

    @classmethod
    def clear_secrets(cls) -> None:
        """Clear all registered secrets. Primarily for testing."""
        cls._secrets.clear()
        cls._pattern = None

    @classmethod
    def _rebuild_pattern(cls) -> None:
        if cls._secrets:
            escaped = [re.escape(s) for s in cls._secrets]
            cls._pattern = re.compile("|".join(escaped))
        else:
            cls._pattern = None


def redact_command(cmd: Sequence[str]) -> list[str]:
    """Mask ``KEY=VALUE`` values that follow secret-bearing flags.

    Args:
        cmd: Full command, including the executable.

    Returns:
        A copy of *cmd* with e.g. ``--env TOKEN=abc`` turned into
        ``--env TOKEN=***``.
    """
    redacted: list[str] = []
    mask_next = False
    for arg in cmd:
        if mask_next and "=" in arg:
            var_name = arg.split("=", 1)[0]
            redacted.append(f"{var_name}=***")
        else:
            redacted.append(arg)
        mask_next = arg in _SECRET_VALUE_FLAGS
    return redacted


def configure_logging(
    level: int = logging.INFO,
    format_string: str | None = None,
    add_secret_filter: bool = True,
) -> None:
    """Configure the root logger.

    Args:
        level: The logging level (e.g., logging.INFO, logging.DEBUG).
        format_string: Custom format string. If None, uses default format.
        add_secret_filter: Whether to add the SecretFilter to redact secrets.
    """
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(format_string))

    if add_secret_filter:
        handler.addFilter(SecretFilter())

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    for existing_handler in root_logger.handlers[:]:
        root_logger.removeHandler(existing_handler)

    root_logger.addHandler(handler)
