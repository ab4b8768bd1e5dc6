# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Error taxonomy for the Podman CLI client.

Every failure surfaces as a subclass of ``PodmanError``.  Each class carries
an ``ErrorKind`` so callers can dispatch on ``error.kind`` instead of on the
class hierarchy when that reads better.

Resource-specific not-found errors are derived from a failed command's
stderr.  The substrings Podman prints are kept in ``NOT_FOUND_MARKERS`` so
that a change in Podman's wording only needs updating in one place.
"""

from __future__ import annotations

from enum import Enum
from typing import ClassVar


class ErrorKind(Enum):
    """Discriminator for the closed set of client errors."""

    BINARY_NOT_FOUND = "binary_not_found"
    COMMAND_FAILED = "command_failed"
    RESULT_PARSE_FAILED = "result_parse_failed"
    RESOURCE_NOT_FOUND = "resource_not_found"
    INVALID_ARGUMENT = "invalid_argument"


class ResourceKind(Enum):
    """Podman resource types that can be looked up by name or ID."""

    CONTAINER = "container"
    IMAGE = "image"
    POD = "pod"


#: Substring of Podman's stderr that identifies a missing resource.
#: Matching is exact; localized or reworded messages are not recognized.
NOT_FOUND_MARKERS: dict[ResourceKind, str] = {
    ResourceKind.CONTAINER: "no such container",
    ResourceKind.IMAGE: "no such image",
    ResourceKind.POD: "no such pod",
}


class PodmanError(Exception):
    """Base exception for all Podman client errors."""

    kind: ClassVar[ErrorKind]


class PodmanNotFoundError(PodmanError):
    """Raised when the podman executable cannot be invoked at all."""

    kind = ErrorKind.BINARY_NOT_FOUND

    def __init__(self, message: str, *, podman_path: str | None = None):
        super().__init__(message)
        self.podman_path = podman_path


class CommandError(PodmanError):
    """Raised when a podman command exits with a non-zero status.

    Attributes:
        command: Full command line, shell-quoted.
        exit_code: Numeric exit status, or None if the process never ran.
        stderr: Captured standard error, or None in inherited mode.
    """

    kind = ErrorKind.COMMAND_FAILED

    def __init__(
        self,
        message: str,
        *,
        command: str | None = None,
        exit_code: int | None = None,
        stderr: str | None = None,
    ):
        super().__init__(message)
        self.command = command
        self.exit_code = exit_code
        self.stderr = stderr


class ResultParseError(CommandError):
    """Raised when output expected to be JSON cannot be decoded."""

    kind = ErrorKind.RESULT_PARSE_FAILED


class ResourceNotFoundError(PodmanError):
    """Raised when a looked-up resource does not exist.

    Attributes:
        resource: Which kind of resource was looked up.
        name: The name or ID that was requested.
    """

    kind = ErrorKind.RESOURCE_NOT_FOUND
    resource: ClassVar[ResourceKind]

    def __init__(self, name: str):
        label = self.resource.value.capitalize()
        super().__init__(f"{label} not found: {name}")
        self.name = name


class ContainerNotFoundError(ResourceNotFoundError):
    """Raised when a container is not found."""

    resource = ResourceKind.CONTAINER


class ImageNotFoundError(ResourceNotFoundError):
    """Raised when an image is not found."""

    resource = ResourceKind.IMAGE


class PodNotFoundError(ResourceNotFoundError):
    """Raised when a pod is not found."""

    resource = ResourceKind.POD


class InvalidArgumentError(PodmanError):
    """Raised when a caller supplies malformed input."""

    kind = ErrorKind.INVALID_ARGUMENT


_NOT_FOUND_CLASSES: dict[ResourceKind, type[ResourceNotFoundError]] = {
    ResourceKind.CONTAINER: ContainerNotFoundError,
    ResourceKind.IMAGE: ImageNotFoundError,
    ResourceKind.POD: PodNotFoundError,
}


def not_found_error(
    error: CommandError, resource: ResourceKind, name: str
) -> ResourceNotFoundError | None:
    """Re-classify a failed lookup as a resource-specific not-found error.

    Args:
        error: The failure raised by the executor.
        resource: Kind of resource that was looked up.
        name: Name or ID that was looked up.

    Returns:
        The not-found error to raise in place of *error*, or None when
        the stderr does not report a missing resource.
    """
    if error.stderr and NOT_FOUND_MARKERS[resource] in error.stderr:
        return _NOT_FOUND_CLASSES[resource](name)
    return None
