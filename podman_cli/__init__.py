# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Python client for the Podman command-line tool.

The client builds podman argument lists, runs podman as a subprocess and
turns its text or JSON output into Python values.  Failures are raised as
``PodmanError`` subclasses carrying the command line, exit code and stderr.
"""

from podman_cli.client import PodmanClient
from podman_cli.config import ClientConfig, ConfigError
from podman_cli.container import Container
from podman_cli.errors import (
    NOT_FOUND_MARKERS,
    CommandError,
    ContainerNotFoundError,
    ErrorKind,
    ImageNotFoundError,
    InvalidArgumentError,
    PodmanError,
    PodmanNotFoundError,
    PodNotFoundError,
    ResourceKind,
    ResourceNotFoundError,
    ResultParseError,
)
from podman_cli.executor import ExecutionOutcome, Executor, JSONValue
from podman_cli.image import Image
from podman_cli.options import ContainerOptions
from podman_cli.pod import Pod


__all__ = [
    # client
    "PodmanClient",
    "ClientConfig",
    "ConfigError",
    # executor
    "Executor",
    "ExecutionOutcome",
    "JSONValue",
    # facades
    "Container",
    "ContainerOptions",
    "Image",
    "Pod",
    # errors
    "NOT_FOUND_MARKERS",
    "CommandError",
    "ContainerNotFoundError",
    "ErrorKind",
    "ImageNotFoundError",
    "InvalidArgumentError",
    "PodNotFoundError",
    "PodmanError",
    "PodmanNotFoundError",
    "ResourceKind",
    "ResourceNotFoundError",
    "ResultParseError",
]
