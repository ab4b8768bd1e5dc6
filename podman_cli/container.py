# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Container operations."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from podman_cli.args import command_tokens, flag, option, pairs
from podman_cli.errors import CommandError, ResourceKind, not_found_error
from podman_cli.executor import Executor, JSONValue, first_record
from podman_cli.options import ContainerOptions


class Container:
    """Container management interface."""

    def __init__(self, executor: Executor) -> None:
        self._executor = executor

    def list(
        self, all: bool = False, filters: Mapping[str, object] | None = None
    ) -> JSONValue:
        """List containers.

        Args:
            all: Include stopped containers (default: running only).
            filters: Filters to apply, e.g. ``{"status": "running"}``.

        Returns:
            List of container records.
        """
        args = ["ps", *flag("--all", all), *pairs("--filter", filters)]
        return self._executor.execute_json(args)

    def inspect(self, name_or_id: str) -> dict[str, Any] | None:
        """Get detailed information about a container.

        Args:
            name_or_id: Container name or ID.

        Returns:
            Container record, or None if podman returned no records.

        Raises:
            ContainerNotFoundError: If the container does not exist.
        """
        try:
            result = self._executor.execute_json(["inspect", name_or_id])
        except CommandError as e:
            not_found = not_found_error(e, ResourceKind.CONTAINER, name_or_id)
            if not_found is not None:
                raise not_found from e
            raise
        return first_record(result)

    def create(
        self,
        image: str,
        command: str | Sequence[str] | None = None,
        options: ContainerOptions | None = None,
    ) -> str:
        """Create a container without starting it.

        Args:
            image: Image name or ID.
            command: Command to run; a string is passed as one argument.
            options: Container options.

        Returns:
            The new container ID.
        """
        options = options or ContainerOptions()
        args = [
            "create",
            *options.to_args(),
            image,
            *command_tokens(command),
        ]
        return self._executor.capture(args)

    def run(
        self,
        image: str,
        command: str | Sequence[str] | None = None,
        options: ContainerOptions | None = None,
    ) -> str | None:
        """Run a command in a new container.

        With ``options.tty`` the container is attached to the caller's
        terminal and nothing is returned.

        Args:
            image: Image name or ID.
            command: Command to run; a string is passed as one argument.
            options: Container options.

        Returns:
            Container output (the ID when detached), or None when
            attached to a TTY.
        """
        options = options or ContainerOptions()
        args = ["run", *options.to_args(), image, *command_tokens(command)]
        return self._executor.execute(args, capture_output=not options.tty)

    def start(self, name_or_id: str) -> str:
        """Start a container and return its ID."""
        return self._executor.capture(["start", name_or_id])

    def stop(self, name_or_id: str, timeout: int | None = None) -> str:
        """Stop a container.

        Args:
            name_or_id: Container name or ID.
            timeout: Seconds to wait before killing the container.

        Returns:
            Container ID.
        """
        args = ["stop", *option("--time", timeout), name_or_id]
        return self._executor.capture(args)

    def restart(self, name_or_id: str, timeout: int | None = None) -> str:
        """Restart a container.

        Args:
            name_or_id: Container name or ID.
            timeout: Seconds to wait before killing the container.

        Returns:
            Container ID.
        """
        return self._executor.capture(
            ["restart", *option("--time", timeout), name_or_id]
        )

    def kill(self, name_or_id: str, signal: str | None = None) -> str:
        """Send a signal (default SIGKILL) to a container."""
        args = ["kill", *option("--signal", signal), name_or_id]
        return self._executor.capture(args)

    def pause(self, name_or_id: str) -> str:
        return self._executor.capture(["pause", name_or_id])

    def unpause(self, name_or_id: str) -> str:
        return self._executor.capture(["unpause", name_or_id])

    def remove(
        self, name_or_id: str, force: bool = False, volumes: bool = False
    ) -> str:
        """Remove a container.

        Args:
            name_or_id: Container name or ID.
            force: Remove even if running.
            volumes: Remove anonymous volumes associated with it.

        Returns:
            Container ID.
        """
        args = [
            "rm",
            *flag("--force", force),
            *flag("--volumes", volumes),
            name_or_id,
        ]
        return self._executor.capture(args)

    def exec(
        self,
        name_or_id: str,
        command: str | Sequence[str],
        interactive: bool = False,
        tty: bool = False,
    ) -> str | None:
        """Execute a command in a running container.

        Args:
            name_or_id: Container name or ID.
            command: Command to execute; a string is passed as one argument.
            interactive: Keep STDIN open.
            tty: Allocate a pseudo-TTY and attach the caller's terminal.

        Returns:
            Command output, or None when attached to a TTY.
        """
        args = [
            "exec",
            *flag("--interactive", interactive),
            *flag("--tty", tty),
            name_or_id,
            *command_tokens(command),
        ]
        return self._executor.execute(args, capture_output=not tty)

    def logs(
        self,
        name_or_id: str,
        follow: bool = False,
        tail: int | None = None,
        timestamps: bool = False,
    ) -> str:
        """Get container logs.

        ``follow`` blocks until the container exits; output is returned
        only once the command completes.

        Args:
            name_or_id: Container name or ID.
            follow: Follow log output.
            tail: Number of lines to show from the end.
            timestamps: Show timestamps.

        Returns:
            Log output.
        """
        args = [
            "logs",
            *flag("--follow", follow),
            *option("--tail", tail),
            *flag("--timestamps", timestamps),
            name_or_id,
        ]
        return self._executor.capture(args)

    def prune(self, force: bool = False) -> str:
        """Remove all stopped containers."""
        args = ["container", "prune", *flag("--force", force)]
        return self._executor.capture(args)
