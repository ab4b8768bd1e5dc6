# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Tests for podman_cli/container.py."""

from unittest.mock import MagicMock

import pytest

from podman_cli.container import Container
from podman_cli.errors import (
    CommandError,
    ContainerNotFoundError,
    ResultParseError,
)
from podman_cli.options import ContainerOptions


class TestList:
    """Tests for Container.list."""

    def test_default(self, executor: MagicMock) -> None:
        """Lists running containers as JSON."""
        executor.execute_json.return_value = [{"Id": "abc"}]
        assert Container(executor).list() == [{"Id": "abc"}]
        executor.execute_json.assert_called_once_with(["ps"])

    def test_all_and_filters(self, executor: MagicMock) -> None:
        """Flags precede filters, each filter as ``key=value``."""
        Container(executor).list(all=True, filters={"status": "running"})
        executor.execute_json.assert_called_once_with(
            ["ps", "--all", "--filter", "status=running"]
        )


class TestInspect:
    """Tests for Container.inspect."""

    def test_returns_first_record(self, executor: MagicMock) -> None:
        """Returns the single record from the inspect array."""
        executor.execute_json.return_value = [{"Id": "abc"}]
        assert Container(executor).inspect("web") == {"Id": "abc"}
        executor.execute_json.assert_called_once_with(["inspect", "web"])

    def test_empty_result(self, executor: MagicMock) -> None:
        """No records yields None."""
        executor.execute_json.return_value = []
        assert Container(executor).inspect("web") is None

    def test_not_found(self, executor: MagicMock) -> None:
        """``no such container`` becomes ContainerNotFoundError."""
        original = CommandError(
            "Command failed",
            exit_code=125,
            stderr="Error: no such container web\n",
        )
        executor.execute_json.side_effect = original
        with pytest.raises(ContainerNotFoundError) as exc_info:
            Container(executor).inspect("web")
        assert exc_info.value.name == "web"
        assert exc_info.value.__cause__ is original

    def test_other_failure_passes_through(self, executor: MagicMock) -> None:
        """Unrelated failures are re-raised unchanged."""
        original = CommandError(
            "Command failed", exit_code=125, stderr="Error: permission denied"
        )
        executor.execute_json.side_effect = original
        with pytest.raises(CommandError) as exc_info:
            Container(executor).inspect("web")
        assert exc_info.value is original

    def test_parse_error_passes_through(self, executor: MagicMock) -> None:
        """Parse failures are not re-classified."""
        executor.execute_json.side_effect = ResultParseError("bad json")
        with pytest.raises(ResultParseError):
            Container(executor).inspect("web")


class TestCreate:
    """Tests for Container.create."""

    def test_name_and_env(self, executor: MagicMock) -> None:
        """Options precede the image."""
        executor.capture.return_value = "abc123"
        options = ContainerOptions(name="web", env={"FOO": "bar"})
        result = Container(executor).create("nginx", options=options)
        assert result == "abc123"
        executor.capture.assert_called_once_with(
            ["create", "--name", "web", "--env", "FOO=bar", "nginx"]
        )

    def test_image_only(self, executor: MagicMock) -> None:
        """Without options only the image is passed."""
        Container(executor).create("nginx")
        executor.capture.assert_called_once_with(["create", "nginx"])

    def test_command_list_follows_image(self, executor: MagicMock) -> None:
        """Command tokens are appended after the image."""
        options = ContainerOptions(ports=("8080:80",), volumes=("/a:/b",))
        Container(executor).create(
            "alpine", command=["sleep", "60"], options=options
        )
        executor.capture.assert_called_once_with(
            [
                "create",
                "--publish",
                "8080:80",
                "--volume",
                "/a:/b",
                "alpine",
                "sleep",
                "60",
            ]
        )

    def test_command_string_is_one_token(self, executor: MagicMock) -> None:
        """A string command is passed as a single argument."""
        Container(executor).create("alpine", command="true")
        executor.capture.assert_called_once_with(["create", "alpine", "true"])


class TestRun:
    """Tests for Container.run."""

    def test_captured(self, executor: MagicMock) -> None:
        """Without a TTY, output is captured and returned."""
        executor.execute.return_value = "hello"
        options = ContainerOptions(rm=True, name="once")
        result = Container(executor).run(
            "alpine", command=["echo", "hello"], options=options
        )
        assert result == "hello"
        executor.execute.assert_called_once_with(
            ["run", "--name", "once", "--rm", "alpine", "echo", "hello"],
            capture_output=True,
        )

    def test_tty_inherits_terminal(self, executor: MagicMock) -> None:
        """With a TTY, the caller's terminal is attached."""
        executor.execute.return_value = None
        options = ContainerOptions(interactive=True, tty=True, rm=True)
        assert Container(executor).run("alpine", "sh", options) is None
        executor.execute.assert_called_once_with(
            ["run", "--interactive", "--tty", "--rm", "alpine", "sh"],
            capture_output=False,
        )


class TestLifecycle:
    """Tests for start/stop/restart/kill/pause/unpause/remove."""

    def test_start(self, executor: MagicMock) -> None:
        executor.capture.return_value = "web"
        assert Container(executor).start("web") == "web"
        executor.capture.assert_called_once_with(["start", "web"])

    def test_stop_with_timeout(self, executor: MagicMock) -> None:
        """The timeout is passed to podman, not enforced locally."""
        Container(executor).stop("web", timeout=10)
        executor.capture.assert_called_once_with(
            ["stop", "--time", "10", "web"]
        )

    def test_stop_without_timeout(self, executor: MagicMock) -> None:
        Container(executor).stop("web")
        executor.capture.assert_called_once_with(["stop", "web"])

    def test_restart_with_timeout(self, executor: MagicMock) -> None:
        Container(executor).restart("web", timeout=0)
        executor.capture.assert_called_once_with(
            ["restart", "--time", "0", "web"]
        )

    def test_kill_with_signal(self, executor: MagicMock) -> None:
        Container(executor).kill("web", signal="SIGTERM")
        executor.capture.assert_called_once_with(
            ["kill", "--signal", "SIGTERM", "web"]
        )

    def test_pause_and_unpause(self, executor: MagicMock) -> None:
        container = Container(executor)
        container.pause("web")
        container.unpause("web")
        assert [c.args[0] for c in executor.capture.call_args_list] == [
            ["pause", "web"],
            ["unpause", "web"],
        ]

    def test_remove_flags(self, executor: MagicMock) -> None:
        """Boolean flags precede the identifier."""
        Container(executor).remove("web", force=True, volumes=True)
        executor.capture.assert_called_once_with(
            ["rm", "--force", "--volumes", "web"]
        )

    def test_prune(self, executor: MagicMock) -> None:
        Container(executor).prune(force=True)
        executor.capture.assert_called_once_with(
            ["container", "prune", "--force"]
        )


class TestExec:
    """Tests for Container.exec."""

    def test_captured(self, executor: MagicMock) -> None:
        """Command tokens follow the container identifier."""
        executor.execute.return_value = "root"
        assert Container(executor).exec("web", ["whoami"]) == "root"
        executor.execute.assert_called_once_with(
            ["exec", "web", "whoami"], capture_output=True
        )

    def test_interactive_tty(self, executor: MagicMock) -> None:
        """A TTY attaches the caller's terminal."""
        executor.execute.return_value = None
        Container(executor).exec("web", "bash", interactive=True, tty=True)
        executor.execute.assert_called_once_with(
            ["exec", "--interactive", "--tty", "web", "bash"],
            capture_output=False,
        )


class TestLogs:
    """Tests for Container.logs."""

    def test_all_options(self, executor: MagicMock) -> None:
        executor.capture.return_value = "line"
        result = Container(executor).logs(
            "web", follow=True, tail=100, timestamps=True
        )
        assert result == "line"
        executor.capture.assert_called_once_with(
            ["logs", "--follow", "--tail", "100", "--timestamps", "web"]
        )

    def test_defaults(self, executor: MagicMock) -> None:
        Container(executor).logs("web")
        executor.capture.assert_called_once_with(["logs", "web"])
