"""Main scaffolding orchestrator.

Takes a ``ProjectConfig`` and generates a complete multi-module Maven
project: the layered directory layout, the parent and module ``pom.xml``
files, the starter class, Spring configuration, README/.gitignore and the
User CRUD example.  ``ProjectGenerator.generate_demo`` writes only the
example, into an existing project.

Every run goes through a single :class:`~.writer.TreeWriter`, so a failure
part-way leaves the target tree as it was found.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator

from . import manifest
from .naming import (
    ARTIFACT_ID_PATTERN,
    GROUP_ID_PATTERN,
    is_valid_artifact_id,
    is_valid_group_id,
    to_class_name,
    to_description,
    to_package_path,
    to_package_segment,
)
from .pom import PomCoordinates, read_coordinates
from .templates import Placeholder, TemplateRenderer
from .writer import TreeWriter


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

DEFAULT_VERSION = "1.0.0"
DEFAULT_DESCRIPTION = "A Java 25 LTS Project"

ProgressCallback = Callable[[str], None]

# Validation-context key set when values come from an existing pom.xml.
_FROM_DESCRIPTOR = "from_descriptor"


def _from_descriptor(info: ValidationInfo) -> bool:
    return bool(info.context and info.context.get(_FROM_DESCRIPTOR))


# ---------------------------------------------------------------------------
# Configuration model
# ---------------------------------------------------------------------------


class ProjectConfig(BaseModel):
    """Immutable description of the project to scaffold.

    ``project_name`` defaults to the artifact id, ``package_name`` to the
    group id and ``output_dir`` to ``./<artifact_id>``.
    """

    model_config = ConfigDict(frozen=True)

    group_id: str = Field(..., description="Maven groupId, e.g. com.mycompany")
    artifact_id: str = Field(..., description="Maven artifactId, e.g. my-app")
    version: str = Field(default=DEFAULT_VERSION, min_length=1)
    project_name: str = Field(default="", description="Human-readable project name")
    project_description: str = Field(default=DEFAULT_DESCRIPTION)
    package_name: str = Field(default="", description="Base Java package")
    output_dir: Path = Field(default=Path("."), description="Project root to write into")

    @model_validator(mode="before")
    @classmethod
    def _fill_derived_defaults(cls, data):
        if not isinstance(data, dict):
            return data
        data = dict(data)
        artifact_id = data.get("artifact_id") or ""
        if not data.get("project_name"):
            data["project_name"] = artifact_id
        if not data.get("package_name"):
            data["package_name"] = data.get("group_id") or ""
        if not data.get("output_dir"):
            data["output_dir"] = Path(".") / artifact_id
        return data

    @field_validator("group_id", "package_name")
    @classmethod
    def _check_group_id(cls, value: str, info: ValidationInfo) -> str:
        if _from_descriptor(info):
            return value
        if not is_valid_group_id(value):
            raise ValueError(f"{value!r} must match {GROUP_ID_PATTERN} (e.g. com.mycompany)")
        return value

    @field_validator("artifact_id")
    @classmethod
    def _check_artifact_id(cls, value: str, info: ValidationInfo) -> str:
        if _from_descriptor(info):
            return value
        if not is_valid_artifact_id(value):
            raise ValueError(
                f"{value!r} must match {ARTIFACT_ID_PATTERN} (lowercase letters, digits, hyphens)"
            )
        return value

    @property
    def package_path(self) -> str:
        """The package name as a directory path (``com/example/demo``)."""
        return to_package_path(self.package_name)

    # -- Constructors ------------------------------------------------------

    @classmethod
    def example(cls) -> ProjectConfig:
        """The preset configuration used by ``phjvgen example``."""
        return cls(
            group_id="com.example.demo",
            artifact_id="demo-app",
            version="1.0.0",
            project_name="Demo Application",
            project_description="A demo application for testing",
            output_dir=Path("./demo-app"),
        )

    @classmethod
    def from_coordinates(cls, coordinates: PomCoordinates, output_dir: str | Path) -> ProjectConfig:
        """Build a configuration for an existing project from its descriptor.

        Identifiers already in a descriptor are taken as they are; the
        naming patterns only apply to projects about to be created.
        """
        data = {
            "group_id": coordinates.group_id,
            "artifact_id": coordinates.artifact_id,
            "version": coordinates.version,
            "project_name": coordinates.name or coordinates.artifact_id,
            "project_description": coordinates.description or DEFAULT_DESCRIPTION,
            "output_dir": Path(output_dir),
        }
        return cls.model_validate(data, context={_FROM_DESCRIPTOR: True})

    @classmethod
    def from_project_root(cls, root: str | Path) -> ProjectConfig:
        """Read ``<root>/pom.xml`` and return the matching configuration."""
        root = Path(root)
        return cls.from_coordinates(read_coordinates(root / "pom.xml"), root)

    # -- Placeholders ------------------------------------------------------

    def placeholders(self) -> dict[str, str]:
        """Return the project-level placeholder mapping."""
        return {
            Placeholder.GROUP_ID.value: self.group_id,
            Placeholder.ARTIFACT_ID.value: self.artifact_id,
            Placeholder.VERSION.value: self.version,
            Placeholder.PROJECT_NAME.value: self.project_name,
            Placeholder.PROJECT_DESCRIPTION.value: self.project_description,
            Placeholder.PACKAGE_NAME.value: self.package_name,
            Placeholder.PACKAGE_PATH.value: self.package_path,
        }

    def module_placeholders(self, module_name: str) -> dict[str, str]:
        """Return the project mapping extended with the module tokens."""
        return {
            **self.placeholders(),
            Placeholder.MODULE_NAME.value: module_name,
            Placeholder.MODULE_DESCRIPTION.value: to_description(module_name),
            Placeholder.MODULE_PACKAGE.value: to_package_segment(module_name),
            Placeholder.MODULE_CLASS.value: to_class_name(module_name),
        }


class GenerationResult(BaseModel):
    """What a generation run wrote."""

    root: Path
    files: list[Path] = Field(default_factory=list)
    directories: int = 0


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Main scaffolding orchestrator.

    Given a ``ProjectConfig``, generates a complete directory tree containing:
    - common, domain, infrastructure, adapter-rest, adapter-schedule,
      application-user and starter modules
    - the parent ``pom.xml`` and one ``pom.xml`` per module
    - ``Application.java``, ``application.yml`` and ``application-dev.yml``
    - README.md and .gitignore
    - the User CRUD example across every layer
    """

    def __init__(
        self,
        config: ProjectConfig,
        renderer: TemplateRenderer | None = None,
        progress: ProgressCallback | None = None,
    ) -> None:
        self.config = config
        self.renderer = renderer or TemplateRenderer()
        self.progress = progress
        self.placeholders = config.placeholders()

    # -- Public API --------------------------------------------------------

    def generate(self) -> GenerationResult:
        """Generate the complete project structure under ``config.output_dir``.

        Returns:
            The project root and every file written.
        """
        root = self.config.output_dir
        with TreeWriter() as writer:
            # 1. Directory layout
            self._step("Creating directory structure")
            directories = self._create_dirs(writer, root, manifest.PROJECT_DIRS)

            # 2. Parent POM
            self._step("Generating parent pom.xml")
            self._render_all(writer, root, [manifest.PARENT_POM])

            # 3. Module POMs
            self._step("Generating module pom.xml files")
            self._render_all(writer, root, manifest.MODULE_POMS)

            # 4. Starter class
            self._step("Generating Application.java")
            self._render_all(writer, root, manifest.STARTER_FILES)

            # 5. Spring configuration
            self._step("Generating application.yml")
            self._render_all(writer, root, manifest.CONFIG_FILES)

            # 6. README and .gitignore
            self._step("Generating README.md and .gitignore")
            self._render_all(writer, root, manifest.DOC_FILES)

            # 7. CRUD example
            self._step("Generating User CRUD example")
            self._render_all(writer, root, manifest.DEMO_FILES)

        return GenerationResult(root=root, files=_unique(writer.written), directories=directories)

    def generate_demo(self) -> GenerationResult:
        """Write the User CRUD example into the project at ``config.output_dir``."""
        root = self.config.output_dir
        with TreeWriter() as writer:
            self._step("Generating User CRUD example")
            self._render_all(writer, root, manifest.DEMO_FILES)
        return GenerationResult(root=root, files=_unique(writer.written))

    # -- Helpers -----------------------------------------------------------

    def _step(self, message: str) -> None:
        if self.progress is not None:
            self.progress(message)

    def _create_dirs(self, writer: TreeWriter, root: Path, dirs: Iterable[str]) -> int:
        paths = [
            root / self.renderer.render_string(d, self.placeholders, strict=True)
            for d in dirs
        ]
        writer.make_dirs(*paths)
        return len(paths)

    def _render_all(
        self,
        writer: TreeWriter,
        root: Path,
        entries: Iterable[tuple[str, str]],
    ) -> None:
        for template_path, output_path in entries:
            out = root / self.renderer.render_string(output_path, self.placeholders, strict=True)
            self.renderer.render_to_file(template_path, out, self.placeholders, writer=writer)


def _unique(paths: Iterable[Path]) -> list[Path]:
    """Drop repeated paths, keeping first-write order."""
    return list(dict.fromkeys(paths))
