"""Locate the root of a previously generated project.

A project root is a directory holding the parent ``pom.xml`` *and* at least
one of the layer directories the generator creates.  The layer check keeps a
stray ``pom.xml`` (e.g. inside a module) from being mistaken for the root.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from .errors import ProjectRootNotFoundError

DESCRIPTOR_FILE = "pom.xml"
ROOT_MARKER_DIRS: tuple[str, ...] = ("domain", "common", "application")


def is_project_root(
    directory: Path,
    descriptor: str = DESCRIPTOR_FILE,
    marker_dirs: Iterable[str] = ROOT_MARKER_DIRS,
) -> bool:
    """Return ``True`` if *directory* has the descriptor and a layer directory."""
    if not (directory / descriptor).is_file():
        return False
    return any((directory / name).is_dir() for name in marker_dirs)


def find_project_root(
    start: str | Path | None = None,
    descriptor: str = DESCRIPTOR_FILE,
    marker_dirs: Iterable[str] = ROOT_MARKER_DIRS,
) -> Path:
    """Walk upwards from *start* (default: the CWD) to the project root.

    Args:
        start: Directory to begin the search in.
        descriptor: Build descriptor file name expected at the root.
        marker_dirs: Layer directory names; at least one must sit next to
            the descriptor.

    Returns:
        The absolute path of the first matching directory.

    Raises:
        ProjectRootNotFoundError: If the filesystem root is reached without
            a match.
    """
    origin = Path(start) if start is not None else Path.cwd()
    origin = origin.resolve()
    markers = tuple(marker_dirs)

    current = origin
    while True:
        if is_project_root(current, descriptor, markers):
            return current
        if current.parent == current:
            raise ProjectRootNotFoundError(origin)
        current = current.parent
