"""Exceptions raised by the scaffolder.

Every error derives from ``ScaffoldError`` so the CLI can report any
scaffolding failure with a single ``except`` clause and map the concrete
subclass to an exit code.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for all scaffolding failures."""


class InvalidNameError(ScaffoldError, ValueError):
    """Raised when a user-supplied identifier fails its naming pattern."""

    def __init__(self, kind: str, value: str, pattern: str) -> None:
        self.kind = kind
        self.value = value
        self.pattern = pattern
        super().__init__(f"Invalid {kind} {value!r}: must match {pattern}")


class ProjectRootNotFoundError(ScaffoldError):
    """Raised when no generated project root exists at or above a directory."""

    def __init__(self, start: Path) -> None:
        self.start = start
        super().__init__(
            f"No project root found from {start}: expected a pom.xml next to "
            "one of the layer directories (domain, common, application)"
        )


class DescriptorError(ScaffoldError):
    """Raised when a build descriptor cannot be read or lacks a required field."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(f"{path}: {message}")


class AnchorNotFoundError(DescriptorError):
    """Raised when the fixed insertion point for a descriptor patch is missing."""

    def __init__(self, path: Path, anchor: str) -> None:
        self.anchor = anchor
        super().__init__(path, f"could not find {anchor}")


class UnresolvedPlaceholderError(ScaffoldError):
    """Raised by strict rendering when tokens survive substitution."""

    def __init__(self, template: str, tokens: list[str]) -> None:
        self.template = template
        self.tokens = tokens
        super().__init__(
            f"Unresolved placeholder(s) in {template}: {', '.join(tokens)}"
        )


class MaterializationError(ScaffoldError):
    """Raised when a directory or file cannot be written."""

    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to write {path}: {cause.strerror or cause}")


class ModuleExistsError(ScaffoldError):
    """Raised when the directory for a new module is already present."""

    def __init__(self, module_dir: Path) -> None:
        self.module_dir = module_dir
        super().__init__(f"Module directory already exists: {module_dir}")


class TemplateSyntaxError(ScaffoldError):
    """Raised by strict rendering when a template cannot be parsed."""

    def __init__(self, template: str, message: str) -> None:
        self.template = template
        super().__init__(f"Invalid template {template}: {message}")
