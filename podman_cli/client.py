# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Main entry point for driving Podman.

``PodmanClient`` owns one ``Executor`` and one facade per resource type,
all created up front::

    client = PodmanClient()
    client.containers.list(all=True)
    client.images.pull("nginx:latest")
    client.pods.create(name="web")
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from podman_cli.config import ClientConfig
from podman_cli.container import Container
from podman_cli.executor import Executor, JSONValue
from podman_cli.image import Image
from podman_cli.pod import Pod


class PodmanClient:
    """Client for the Podman command-line tool.

    Attributes:
        containers: Container operations.
        images: Image operations.
        pods: Pod operations.
    """

    def __init__(self, podman_path: str = "podman") -> None:
        """Initialize the client.

        Args:
            podman_path: Path to the podman executable.

        Raises:
            PodmanNotFoundError: If podman cannot be invoked.
        """
        self._executor = Executor(podman_path)
        self.containers = Container(self._executor)
        self.images = Image(self._executor)
        self.pods = Pod(self._executor)

    @classmethod
    def from_config(cls, config: ClientConfig | None = None) -> PodmanClient:
        """Create a client from configuration.

        Args:
            config: Client configuration. Loaded from the default config
                file when omitted.
        """
        if config is None:
            config = ClientConfig.from_yaml()
        return cls(podman_path=config.podman_path)

    @property
    def podman_path(self) -> str:
        return self._executor.podman_path

    @property
    def executor(self) -> Executor:
        return self._executor

    def execute(
        self, args: Sequence[str], capture_output: bool = True
    ) -> str | None:
        """Execute a raw podman command. See ``Executor.execute``."""
        return self._executor.execute(args, capture_output=capture_output)

    def execute_json(self, args: Sequence[str]) -> JSONValue:
        """Execute a raw podman command with JSON output."""
        return self._executor.execute_json(args)

    def version(self) -> dict[str, Any]:
        """Return podman version information."""
        return self._executor.version()

    def info(self) -> JSONValue:
        """Return podman system information."""
        return self._executor.info()
