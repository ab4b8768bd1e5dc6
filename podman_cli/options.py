# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Option records for container creation.

Provides ``ContainerOptions``, the set of options accepted by
``Container.create`` and ``Container.run``.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from podman_cli.args import flag, option, pairs, repeated


@dataclass(frozen=True)
class ContainerOptions:
    """Options shared by ``podman create`` and ``podman run``.

    Attributes:
        name: Container name (``--name``).
        detach: Run in the background (``--detach``).
        interactive: Keep STDIN open (``--interactive``).
        tty: Allocate a pseudo-TTY (``--tty``). ``run`` attaches the
            caller's terminal instead of capturing output when set.
        rm: Remove the container when it exits (``--rm``).
        ports: Port mappings such as ``8080:80`` (one ``--publish`` each).
        volumes: Volume mappings such as ``/data:/data:ro`` (one
            ``--volume`` each).
        env: Environment variables (one ``--env KEY=VALUE`` each).
        labels: Container labels (one ``--label KEY=VALUE`` each).
    """

    name: str | None = None
    detach: bool = False
    interactive: bool = False
    tty: bool = False
    rm: bool = False
    ports: tuple[str, ...] = ()
    volumes: tuple[str, ...] = ()
    env: Mapping[str, str] = field(default_factory=dict)
    labels: Mapping[str, str] = field(default_factory=dict)

    def to_args(self) -> list[str]:
        """Encode the options as Podman flags."""
        return [
            *option("--name", self.name),
            *flag("--detach", self.detach),
            *flag("--interactive", self.interactive),
            *flag("--tty", self.tty),
            *flag("--rm", self.rm),
            *repeated("--publish", self.ports),
            *repeated("--volume", self.volumes),
            *pairs("--env", self.env),
            *pairs("--label", self.labels),
        ]
