# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Encoding rules for Podman command-line arguments.

Each helper returns a (possibly empty) token list that callers splice into
the argument list in the order the options should appear::

    args = ["ps", *flag("--all", all), *pairs("--filter", filters)]

Values are never validated here; Podman reports malformed input itself.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence


def flag(name: str, enabled: bool) -> list[str]:
    """Return ``[name]`` when *enabled*, otherwise nothing."""
    return [name] if enabled else []


def option(name: str, value: object | None) -> list[str]:
    """Return ``[name, value]`` when *value* is set, otherwise nothing."""
    if value is None:
        return []
    return [name, str(value)]


def repeated(name: str, values: Iterable[str] | None) -> list[str]:
    """Return one ``name value`` pair per entry, in the given order."""
    args: list[str] = []
    for value in values or ():
        args.extend([name, value])
    return args


def pairs(name: str, mapping: Mapping[str, object] | None) -> list[str]:
    """Return one ``name key=value`` pair per mapping item.

    Booleans are rendered the way Podman spells them (``true``/``false``).
    """
    args: list[str] = []
    for key, value in (mapping or {}).items():
        args.extend([name, f"{key}={_format_value(value)}"])
    return args


def command_tokens(command: str | Sequence[str] | None) -> list[str]:
    """Return the trailing command tokens.

    A string is one token (it is not split); any other sequence is
    appended element by element.
    """
    if command is None:
        return []
    if isinstance(command, str):
        return [command]
    return list(command)


def _format_value(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
