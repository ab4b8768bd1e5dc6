# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Shared pytest fixtures used across multiple test modules."""

from collections.abc import Iterator
from unittest.mock import MagicMock, patch

import pytest

from podman_cli.executor import Executor


def completed(
    returncode: int = 0, stdout: str = "", stderr: str = ""
) -> MagicMock:
    """Create a mock ``subprocess.CompletedProcess``."""
    return MagicMock(returncode=returncode, stdout=stdout, stderr=stderr)


@pytest.fixture
def mock_run() -> Iterator[MagicMock]:
    """Patch ``subprocess.run`` as seen by the executor.

    Succeeds with ``podman --version`` style output by default so that
    executors can be constructed.
    """
    with patch("podman_cli.executor.subprocess.run") as mock:
        mock.return_value = completed(stdout="podman version 5.3.1\n")
        yield mock


@pytest.fixture
def real_executor(mock_run: MagicMock) -> Executor:
    """Executor whose construction-time check has already run."""
    executor = Executor("podman")
    mock_run.reset_mock()
    return executor


@pytest.fixture
def executor() -> MagicMock:
    """Mock executor for facade tests."""
    return MagicMock(spec=Executor)
