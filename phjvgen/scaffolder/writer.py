"""Directory and file materialization.

``write_file`` and ``create_dirs`` are the one-shot helpers.  ``TreeWriter``
wraps a whole generation run: it remembers every directory and file it
creates (and the previous content of every file it overwrites) so that a
failure half-way through leaves the target tree as it was found.

Usage::

    with TreeWriter() as writer:
        writer.make_dirs(root / "common", root / "domain")
        writer.write_text(root / "pom.xml", content)
        ...  # any exception here rolls back everything above
"""

from __future__ import annotations

import contextlib
from pathlib import Path
from types import TracebackType

from .errors import MaterializationError


def write_file(path: str | Path, content: str) -> Path:
    """Create parent dirs and write *content* to *path* as UTF-8."""
    out = Path(path)
    try:
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise MaterializationError(out, exc) from exc
    return out


def create_dirs(*dirs: str | Path) -> list[Path]:
    """Create every directory in *dirs* (and parents)."""
    created: list[Path] = []
    for d in dirs:
        path = Path(d)
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise MaterializationError(path, exc) from exc
        created.append(path)
    return created


class TreeWriter:
    """Writes files and directories with all-or-nothing semantics.

    Used as a context manager, an exception escaping the ``with`` block
    triggers :meth:`rollback`: created files are deleted, overwritten files
    get their original bytes back, and created directories are removed when
    empty.  A clean exit keeps everything.

    Attributes:
        written: Every file path written so far, in write order.
    """

    def __init__(self) -> None:
        self.written: list[Path] = []
        self._created_files: list[Path] = []
        self._created_dirs: list[Path] = []
        self._backups: dict[Path, bytes] = {}

    def __enter__(self) -> TreeWriter:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if exc_type is not None:
            self.rollback()

    # -- Writing -----------------------------------------------------------

    def make_dirs(self, *dirs: str | Path) -> None:
        """Create each directory (and missing parents), remembering new ones."""
        for d in dirs:
            self._mkdir(Path(d))

    def write_text(self, path: str | Path, content: str) -> Path:
        """Write *content* to *path*, creating parent directories."""
        out = Path(path)
        self._mkdir(out.parent)

        existed = out.exists()
        if existed and out not in self._backups and out not in self._created_files:
            try:
                self._backups[out] = out.read_bytes()
            except OSError as exc:
                raise MaterializationError(out, exc) from exc

        try:
            out.write_text(content, encoding="utf-8")
        except OSError as exc:
            raise MaterializationError(out, exc) from exc

        if not existed:
            self._created_files.append(out)
        self.written.append(out)
        return out

    # -- Rollback ----------------------------------------------------------

    def rollback(self) -> None:
        """Undo every change made through this writer."""
        for path in reversed(self._created_files):
            path.unlink(missing_ok=True)
        for path, data in self._backups.items():
            path.write_bytes(data)
        # Innermost first; a directory holding foreign files stays.
        for directory in reversed(self._created_dirs):
            with contextlib.suppress(OSError):
                directory.rmdir()

        self.written.clear()
        self._created_files.clear()
        self._created_dirs.clear()
        self._backups.clear()

    # -- Internal helpers --------------------------------------------------

    def _mkdir(self, path: Path) -> None:
        missing: list[Path] = []
        probe = path
        while not probe.exists():
            missing.append(probe)
            if probe.parent == probe:
                break
            probe = probe.parent

        # Outermost first so rollback can walk the list backwards.
        self._created_dirs.extend(reversed(missing))

        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise MaterializationError(path, exc) from exc
