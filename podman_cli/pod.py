# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Pod operations.

All commands are issued under the ``pod`` subcommand group.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from podman_cli.args import flag, option, pairs, repeated
from podman_cli.errors import CommandError, ResourceKind, not_found_error
from podman_cli.executor import Executor, JSONValue, first_record


class Pod:
    """Pod management interface."""

    def __init__(self, executor: Executor) -> None:
        self._executor = executor

    def list(self, filters: Mapping[str, object] | None = None) -> JSONValue:
        """List pods.

        Args:
            filters: Filters to apply, e.g. ``{"status": "running"}``.

        Returns:
            List of pod records.
        """
        args = ["pod", "ps", *pairs("--filter", filters)]
        return self._executor.execute_json(args)

    def inspect(self, name_or_id: str) -> dict[str, Any] | None:
        """Get detailed information about a pod.

        Args:
            name_or_id: Pod name or ID.

        Returns:
            Pod record, or None if podman returned no records.

        Raises:
            PodNotFoundError: If the pod does not exist.
        """
        try:
            result = self._executor.execute_json(
                ["pod", "inspect", name_or_id]
            )
        except CommandError as e:
            not_found = not_found_error(e, ResourceKind.POD, name_or_id)
            if not_found is not None:
                raise not_found from e
            raise
        return first_record(result)

    def create(
        self,
        name: str | None = None,
        ports: Sequence[str] | None = None,
        labels: Mapping[str, object] | None = None,
        share: str | None = None,
    ) -> str:
        """Create a pod.

        Args:
            name: Pod name.
            ports: Port mappings (one ``--publish`` each).
            labels: Labels to apply to the pod.
            share: Comma-separated list of namespaces to share.

        Returns:
            The new pod ID.
        """
        args = [
            "pod",
            "create",
            *option("--name", name),
            *option("--share", share),
            *repeated("--publish", ports),
            *pairs("--label", labels),
        ]
        return self._executor.capture(args)

    def start(self, name_or_id: str) -> str:
        return self._executor.capture(["pod", "start", name_or_id])

    def stop(self, name_or_id: str, timeout: int | None = None) -> str:
        """Stop a pod, waiting *timeout* seconds before killing it."""
        args = ["pod", "stop", *option("--time", timeout), name_or_id]
        return self._executor.capture(args)

    def restart(self, name_or_id: str) -> str:
        return self._executor.capture(["pod", "restart", name_or_id])

    def pause(self, name_or_id: str) -> str:
        return self._executor.capture(["pod", "pause", name_or_id])

    def unpause(self, name_or_id: str) -> str:
        return self._executor.capture(["pod", "unpause", name_or_id])

    def remove(self, name_or_id: str, force: bool = False) -> str:
        """Remove a pod; *force* stops and removes running containers."""
        args = ["pod", "rm", *flag("--force", force), name_or_id]
        return self._executor.capture(args)

    def kill(self, name_or_id: str, signal: str | None = None) -> str:
        """Send a signal (default SIGKILL) to all containers in a pod."""
        args = ["pod", "kill", *option("--signal", signal), name_or_id]
        return self._executor.capture(args)

    def stats(
        self, name_or_id: str | None = None, no_stream: bool = True
    ) -> str:
        """Return resource usage statistics.

        Args:
            name_or_id: Pod name or ID; all pods when omitted.
            no_stream: Print a single snapshot instead of streaming.
                Streaming blocks until podman exits.

        Returns:
            Statistics output.
        """
        args = ["pod", "stats", *flag("--no-stream", no_stream)]
        if name_or_id:
            args.append(name_or_id)
        return self._executor.capture(args)

    def top(self, name_or_id: str, ps_options: str | None = None) -> str:
        """List the processes running in a pod.

        Args:
            name_or_id: Pod name or ID.
            ps_options: Format descriptors passed through to ``pod top``.

        Returns:
            Process list output.
        """
        args = ["pod", "top", name_or_id]
        if ps_options:
            args.append(ps_options)
        return self._executor.capture(args)

    def prune(self, force: bool = False) -> str:
        """Remove all stopped pods."""
        args = ["pod", "prune", *flag("--force", force)]
        return self._executor.capture(args)
