# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""podman-cli command-line entry point.

Provides ``podman-cli <command>`` for quick inspection of the local Podman
installation through the client library.  Running ``podman-cli`` with no
arguments prints usage information.

Subcommands:

* ``check``: verify podman is invocable and meets the minimum version
* ``version``: print version information as JSON
* ``info``: print system information as JSON
* ``ps``: list containers as JSON (``--all`` for stopped ones too)
* ``images``: list images as JSON
* ``pods``: list pods as JSON
"""

from __future__ import annotations

import argparse
import json
import sys

from podman_cli.client import PodmanClient
from podman_cli.config import ClientConfig, ConfigError
from podman_cli.errors import PodmanError
from podman_cli.logging import configure_logging


#: Minimum podman version the client is tested against.
MIN_PODMAN_VERSION: tuple[int, ...] = (4, 0)

_USAGE = """\
usage: podman-cli <command> [args]

commands:
  check     Verify podman is installed and recent enough
  version   Print podman version information
  info      Print podman system information
  ps        List containers
  images    List images
  pods      List pods\
"""


def _parse_version(output: str) -> tuple[int, ...]:
    """Extract a numeric version tuple from command output.

    Looks for the first token that starts with a digit and parses it as a
    dotted version string::

        podman version 5.3.1 -> (5, 3, 1)

    Args:
        output: Raw stdout from ``podman --version``.

    Returns:
        Numeric version tuple.

    Raises:
        ValueError: If no version number is found.
    """
    for token in output.split():
        if token and token[0].isdigit():
            parts: list[int] = []
            for segment in token.split("."):
                # Strip non-numeric suffixes (e.g. "1.2.3-rc1")
                digits = ""
                for ch in segment:
                    if ch.isdigit():
                        digits += ch
                    else:
                        break
                if digits:
                    parts.append(int(digits))
            if parts:
                return tuple(parts)
    raise ValueError(f"Cannot parse version from: {output!r}")


def _fmt_version(v: tuple[int, ...]) -> str:
    return ".".join(str(p) for p in v)


def _client() -> PodmanClient:
    config = ClientConfig.from_yaml()
    configure_logging(level=config.logging_level)
    return PodmanClient.from_config(config)


def _print_json(value: object) -> None:
    print(json.dumps(value, indent=2))


def cmd_check(argv: list[str]) -> int:
    """Check that podman is invocable and recent enough.

    Args:
        argv: Extra arguments (currently unused).

    Returns:
        0 if the check passes, 1 otherwise.
    """
    client = _client()
    raw = client.execute(["--version"]) or ""

    try:
        version = _parse_version(raw)
    except ValueError:
        print(f"podman: cannot parse version from: {raw}")
        return 1

    if version < MIN_PODMAN_VERSION:
        print(
            f"podman: {_fmt_version(version)} "
            f"(need >= {_fmt_version(MIN_PODMAN_VERSION)})"
        )
        return 1

    print(f"podman: {_fmt_version(version)} at {client.podman_path}")
    return 0


def cmd_version(argv: list[str]) -> int:
    _print_json(_client().version())
    return 0


def cmd_info(argv: list[str]) -> int:
    _print_json(_client().info())
    return 0


def cmd_ps(argv: list[str]) -> int:
    """List containers.

    Args:
        argv: ``--all`` to include stopped containers.
    """
    parser = argparse.ArgumentParser(prog="podman-cli ps")
    parser.add_argument("-a", "--all", action="store_true")
    args = parser.parse_args(argv)
    _print_json(_client().containers.list(all=args.all))
    return 0


def cmd_images(argv: list[str]) -> int:
    _print_json(_client().images.list())
    return 0


def cmd_pods(argv: list[str]) -> int:
    _print_json(_client().pods.list())
    return 0


_DISPATCH: dict[str, str] = {
    "check": "cmd_check",
    "version": "cmd_version",
    "info": "cmd_info",
    "ps": "cmd_ps",
    "images": "cmd_images",
    "pods": "cmd_pods",
}


def cli() -> None:
    """Entry point for ``podman-cli``.

    Exits 0 on success, 1 when podman or the configuration reports an
    error, and 2 on usage errors.
    """
    argv = sys.argv[1:]

    if not argv or argv[0] == "--help":
        print(_USAGE)
        sys.exit(0)

    if argv[0] not in _DISPATCH:
        print(f"podman-cli: unknown command '{argv[0]}'", file=sys.stderr)
        print(_USAGE, file=sys.stderr)
        sys.exit(2)

    # Look up handler by name so tests can mock individual commands.
    import podman_cli.cli as _self

    handler = getattr(_self, _DISPATCH[argv[0]])
    try:
        exit_code = handler(argv[1:])
    except (PodmanError, ConfigError) as e:
        print(f"podman-cli: {e}", file=sys.stderr)
        exit_code = 1
    sys.exit(exit_code)
