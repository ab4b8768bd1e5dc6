# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Client configuration.

Configuration is loaded from an optional YAML file.  The default location
follows the XDG Base Directory Specification:

    ``$XDG_CONFIG_HOME/podman-cli/config.yaml``
    (typically ``~/.config/podman-cli/config.yaml``)

Example::

    podman_path: !env PODMAN_PATH
    log_level: DEBUG
    secrets:
      - !env REGISTRY_TOKEN

``!env`` tags resolve values from environment variables.  Values listed
under ``secrets`` are redacted from log output.  A ``.env`` file
is loaded first if present.  When the file is missing or does not set
``podman_path``, the ``PODMAN_PATH`` environment variable is used, and
failing that the bare ``podman`` command.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

import yaml
from platformdirs import user_config_path

from podman_cli.dotenv_loader import load_dotenv_once
from podman_cli.logging import SecretFilter


logger = logging.getLogger(__name__)

#: Application name for XDG path resolution.
_APP_NAME = "podman-cli"

#: Environment variable consulted when the config file sets no path.
PODMAN_PATH_ENV = "PODMAN_PATH"

DEFAULT_PODMAN_PATH = "podman"

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


def get_config_path() -> Path:
    """Return the default config file path.

    Uses XDG: ``$XDG_CONFIG_HOME/podman-cli/config.yaml``.
    """
    return user_config_path(_APP_NAME) / "config.yaml"


def get_dotenv_path() -> Path:
    """Return the ``.env`` file path inside the XDG config directory."""
    return user_config_path(_APP_NAME) / ".env"


class ConfigError(Exception):
    """Raised when configuration is malformed."""


class _EnvVar:
    """Placeholder for an unresolved ``!env VAR_NAME`` tag."""

    def __init__(self, var_name: str) -> None:
        self.var_name = var_name


def _env_constructor(loader: yaml.SafeLoader, node: yaml.Node) -> _EnvVar:
    """Handle ``!env VAR_NAME`` in YAML."""
    value = loader.construct_scalar(node)
    return _EnvVar(str(value))


def _make_loader() -> type[yaml.SafeLoader]:
    """Create a YAML loader that understands ``!env``."""

    class EnvLoader(yaml.SafeLoader):
        pass

    EnvLoader.add_constructor("!env", _env_constructor)
    return EnvLoader


def _raw_resolve(value: object) -> str | None:
    """Resolve an ``_EnvVar`` to its string value, or stringify literals.

    Returns None if the value is None or the env var is not set.
    """
    if isinstance(value, _EnvVar):
        return os.environ.get(value.var_name)
    if value is None:
        return None
    return str(value)


@dataclass(frozen=True)
class ClientConfig:
    """Settings for ``PodmanClient``.

    Attributes:
        podman_path: Path to the podman executable, or a command name
            resolved through ``PATH``.
        log_level: Logging level name used by the command-line tool.
        secrets: Values to redact from log output, such as registry
            tokens passed to containers through ``--env``.
    """

    podman_path: str = DEFAULT_PODMAN_PATH
    log_level: str = "INFO"
    secrets: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Validate settings and register secrets.

        Raises:
            ConfigError: If a value is invalid.
        """
        for value in self.secrets:
            if value:
                SecretFilter.register_secret(value)

        if not self.podman_path:
            raise ConfigError("podman_path cannot be empty")
        if self.log_level.upper() not in _LOG_LEVELS:
            raise ConfigError(f"Unknown log_level: {self.log_level!r}")

    @property
    def logging_level(self) -> int:
        """The ``logging`` module constant for ``log_level``."""
        return logging.getLevelNamesMapping()[self.log_level.upper()]

    @classmethod
    def from_yaml(cls, config_path: Path | None = None) -> "ClientConfig":
        """Load configuration from a YAML file.

        Args:
            config_path: Path to YAML config file.  Defaults to
                ``~/.config/podman-cli/config.yaml`` (XDG).

        Returns:
            ClientConfig instance; defaults apply when the file is missing.

        Raises:
            ConfigError: If the file is not a valid YAML mapping.
        """
        load_dotenv_once()

        if config_path is None:
            config_path = get_config_path()

        raw: object = {}
        if config_path.exists():
            try:
                with open(config_path) as f:
                    raw = yaml.load(f, Loader=_make_loader())
            except yaml.YAMLError as e:
                raise ConfigError(
                    f"Invalid YAML in {config_path}: {e}"
                ) from e
            if raw is None:
                raw = {}
            if not isinstance(raw, dict):
                raise ConfigError(
                    f"Config file must be a YAML mapping: {config_path}"
                )
        else:
            logger.debug("No config file at %s, using defaults", config_path)

        return cls._from_raw(raw)

    @classmethod
    def _from_raw(cls, raw: dict) -> "ClientConfig":
        """Build config from parsed (but unresolved) YAML dict."""
        podman_path = (
            _raw_resolve(raw.get("podman_path"))
            or os.environ.get(PODMAN_PATH_ENV)
            or DEFAULT_PODMAN_PATH
        )
        log_level = _raw_resolve(raw.get("log_level")) or "INFO"

        raw_secrets = raw.get("secrets") or []
        if not isinstance(raw_secrets, list):
            raise ConfigError("secrets must be a list")
        secrets: list[str] = []
        for item in raw_secrets:
            value = _raw_resolve(item)
            if value:
                secrets.append(value)

        return cls(
            podman_path=podman_path,
            log_level=log_level,
            secrets=tuple(secrets),
        )
