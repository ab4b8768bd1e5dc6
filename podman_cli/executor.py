# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Subprocess boundary for the Podman CLI.

The ``Executor`` is the only component that spawns ``podman``.  It runs a
command in one of two modes:

- **Captured**: stdout and stderr are piped and buffered until exit.
  Stripped stdout is returned on success.
- **Inherited**: the child shares the caller's stdin/stdout/stderr, for
  interactive use (``exec``/``run`` with a TTY).  Nothing is returned.

A non-zero exit raises ``CommandError`` carrying the command line, exit
code and (captured mode only) stderr.  JSON output is decoded by
``execute_json``; decoding failures raise ``ResultParseError``.

Each call is independent: no session, no retries, no timeout.  The
executable path is read-only after construction, so one executor may be
shared between threads.
"""

from __future__ import annotations

import json
import logging
import shlex
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from podman_cli.errors import (
    CommandError,
    PodmanNotFoundError,
    ResultParseError,
)
from podman_cli.logging import redact_command


logger = logging.getLogger(__name__)

#: Tokens appended to request JSON output.
JSON_FORMAT_ARGS = ("--format", "json")

#: Decoded JSON output: a list of objects, or a single object.
JSONValue = list[dict[str, Any]] | dict[str, Any]


@dataclass(frozen=True)
class ExecutionOutcome:
    """Raw result of one podman invocation.

    Attributes:
        command: Full command line, shell-quoted.
        exit_code: Process exit status.
        stdout: Captured stdout (empty in inherited mode).
        stderr: Captured stderr, or None in inherited mode.
    """

    command: str
    exit_code: int
    stdout: str = ""
    stderr: str | None = None

    @property
    def success(self) -> bool:
        """Whether the process exited with status 0."""
        return self.exit_code == 0


class Executor:
    """Runs podman commands and interprets their output.

    Attributes:
        podman_path: Path or command name of the podman executable.
    """

    def __init__(self, podman_path: str = "podman") -> None:
        """Initialize and verify that podman is invocable.

        Args:
            podman_path: Path to the podman executable, or a bare name
                resolved through ``PATH``.

        Raises:
            PodmanNotFoundError: If ``podman --version`` cannot be run
                successfully.
        """
        self._podman_path = podman_path
        self._validate_installation()

    @property
    def podman_path(self) -> str:
        return self._podman_path

    def run(
        self, args: Sequence[str], capture_output: bool = True
    ) -> ExecutionOutcome:
        """Run podman with *args* and return the raw outcome.

        The exit status is not checked; see ``execute`` for that.  Bytes
        that are not valid UTF-8 are decoded as U+FFFD.

        Args:
            args: Arguments following the executable name.
            capture_output: Pipe stdout/stderr instead of inheriting them.

        Returns:
            The execution outcome.

        Raises:
            CommandError: If the process could not be started.
        """
        cmd = [self._podman_path, *args]
        command = shlex.join(cmd)
        logger.debug("Running: %s", shlex.join(redact_command(cmd)))

        try:
            if capture_output:
                result = subprocess.run(
                    cmd, capture_output=True, text=True, errors="replace"
                )
            else:
                result = subprocess.run(cmd)
        except (OSError, ValueError) as e:
            raise CommandError(
                f"Command failed: {command}",
                command=command,
                stderr=str(e),
            ) from e

        logger.debug("Command exited with status %d", result.returncode)

        if capture_output:
            return ExecutionOutcome(
                command=command,
                exit_code=result.returncode,
                stdout=result.stdout,
                stderr=result.stderr,
            )
        return ExecutionOutcome(command=command, exit_code=result.returncode)

    def execute(
        self, args: Sequence[str], capture_output: bool = True
    ) -> str | None:
        """Execute a podman command.

        Args:
            args: Arguments following the executable name.
            capture_output: Capture and return output. When False the
                command is attached to the caller's terminal.

        Returns:
            Stripped stdout when capturing, otherwise None.

        Raises:
            CommandError: If the command exits with a non-zero status.
        """
        outcome = self.run(args, capture_output=capture_output)

        if not outcome.success:
            raise CommandError(
                f"Command failed: {outcome.command}",
                command=outcome.command,
                exit_code=outcome.exit_code,
                stderr=outcome.stderr,
            )

        if not capture_output:
            return None
        return outcome.stdout.strip()

    def execute_json(self, args: Sequence[str]) -> JSONValue:
        """Execute a podman command with JSON output and decode it.

        Args:
            args: Arguments following the executable name. The JSON
                format flags are appended after them.

        Returns:
            Decoded JSON. Empty output decodes to an empty list.

        Raises:
            CommandError: If the command exits with a non-zero status.
            ResultParseError: If the output is not valid JSON.
        """
        full_args = [*args, *JSON_FORMAT_ARGS]
        output = self.capture(full_args)
        if not output:
            return []

        try:
            return json.loads(output)
        except json.JSONDecodeError as e:
            raise ResultParseError(
                f"Failed to parse JSON output: {e}",
                command=shlex.join([self._podman_path, *full_args]),
            ) from e

    def version(self) -> dict[str, Any]:
        """Return podman version information.

        Podman releases that cannot format ``version`` as JSON fall back
        to ``{"version": <first line of plain output>}``.
        """
        output = self.capture(["version", *JSON_FORMAT_ARGS])
        try:
            return json.loads(output)
        except json.JSONDecodeError:
            logger.debug("JSON version output unsupported, using plain text")

        output = self.capture(["version"])
        lines = output.splitlines()
        return {"version": lines[0] if lines else ""}

    def info(self) -> JSONValue:
        """Return podman system information."""
        return self.execute_json(["info"])

    def capture(self, args: Sequence[str]) -> str:
        """Execute in captured mode and return the stripped stdout.

        Raises:
            CommandError: If the command exits with a non-zero status.
        """
        output = self.execute(args)
        assert output is not None
        return output

    def _validate_installation(self) -> None:
        try:
            self.execute(["--version"])
        except CommandError:
            raise PodmanNotFoundError(
                f"Podman not found at: {self._podman_path}",
                podman_path=self._podman_path,
            ) from None


def first_record(result: JSONValue) -> dict[str, Any] | None:
    """Return the single record of an ``inspect`` result.

    ``inspect`` prints a one-element array on most Podman releases and a
    bare object on some; an empty result yields None.
    """
    if isinstance(result, dict):
        return result
    return result[0] if result else None
