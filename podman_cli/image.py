# Copyright (c) 2026 Pyry Haulos
#
# This software is released under the MIT License.
# https://opensource.org/licenses/MIT

"""Image operations."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from podman_cli.args import flag, option, pairs
from podman_cli.errors import CommandError, ResourceKind, not_found_error
from podman_cli.executor import Executor, JSONValue, first_record


class Image:
    """Image management interface."""

    def __init__(self, executor: Executor) -> None:
        self._executor = executor

    def list(
        self, all: bool = False, filters: Mapping[str, object] | None = None
    ) -> JSONValue:
        """List images.

        Args:
            all: Include intermediate layers.
            filters: Filters to apply, e.g. ``{"dangling": True}``.

        Returns:
            List of image records.
        """
        args = ["images", *flag("--all", all), *pairs("--filter", filters)]
        return self._executor.execute_json(args)

    def inspect(self, name_or_id: str) -> dict[str, Any] | None:
        """Get detailed information about an image.

        Args:
            name_or_id: Image name or ID.

        Returns:
            Image record, or None if podman returned no records.

        Raises:
            ImageNotFoundError: If the image does not exist.
        """
        try:
            result = self._executor.execute_json(["inspect", name_or_id])
        except CommandError as e:
            not_found = not_found_error(e, ResourceKind.IMAGE, name_or_id)
            if not_found is not None:
                raise not_found from e
            raise
        return first_record(result)

    def pull(self, name: str, all_tags: bool = False) -> str:
        """Pull an image (e.g. ``nginx:latest``) from a registry."""
        args = ["pull", *flag("--all-tags", all_tags), name]
        return self._executor.capture(args)

    def push(self, name: str, all_tags: bool = False) -> str:
        """Push an image to a registry."""
        args = ["push", *flag("--all-tags", all_tags), name]
        return self._executor.capture(args)

    def remove(self, name_or_id: str, force: bool = False) -> str:
        args = ["rmi", *flag("--force", force), name_or_id]
        return self._executor.capture(args)

    def tag(self, source: str, target: str) -> str:
        """Add the name *target* to the image *source*."""
        return self._executor.capture(["tag", source, target])

    def build(
        self,
        context: str,
        tag: str | None = None,
        dockerfile: str | None = None,
        build_args: Mapping[str, object] | None = None,
        no_cache: bool = False,
    ) -> str:
        """Build an image from a Containerfile/Dockerfile.

        Args:
            context: Build context path.
            tag: Name for the built image.
            dockerfile: Path to the Dockerfile (relative to context).
            build_args: Build-time variables (one ``--build-arg`` each).
            no_cache: Do not use cached layers.

        Returns:
            Build output.
        """
        args = [
            "build",
            *option("--tag", tag),
            *option("--file", dockerfile),
            *flag("--no-cache", no_cache),
            *pairs("--build-arg", build_args),
            context,
        ]
        return self._executor.capture(args)

    def search(
        self,
        term: str,
        limit: int | None = None,
        filters: Mapping[str, object] | None = None,
    ) -> JSONValue:
        """Search registries for images.

        Args:
            term: Search term.
            limit: Maximum number of results per registry.
            filters: Search filters, e.g. ``{"is-official": True}``.

        Returns:
            List of search results.
        """
        args = [
            "search",
            *option("--limit", limit),
            *pairs("--filter", filters),
            term,
        ]
        return self._executor.execute_json(args)

    def history(self, name_or_id: str) -> JSONValue:
        """Return the layer history of an image."""
        return self._executor.execute_json(["history", name_or_id])

    def save(self, images: Sequence[str], output: str) -> str:
        """Save one or more images to a tar archive at *output*."""
        return self._executor.capture(["save", "--output", output, *images])

    def load(self, input: str) -> str:
        """Load images from the tar archive at *input*."""
        return self._executor.capture(["load", "--input", input])

    def import_(self, source: str, reference: str | None = None) -> str:
        """Create a filesystem image from a tarball.

        Args:
            source: Tarball path or URL.
            reference: Name for the imported image.

        Returns:
            Import output (the image ID).
        """
        args = ["import", source]
        if reference is not None:
            args.append(reference)
        return self._executor.capture(args)

    def export(self, container: str, output: str) -> str:
        """Export a container's filesystem as a tar archive."""
        args = ["export", "--output", output, container]
        return self._executor.capture(args)

    def prune(self, all: bool = False, force: bool = False) -> str:
        """Remove dangling images, or all unused images with *all*."""
        args = ["image", "prune", *flag("--all", all), *flag("--force", force)]
        return self._executor.capture(args)
