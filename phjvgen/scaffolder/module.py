"""Add an application module to an existing generated project.

The new module lives under ``application/application-<name>/`` and is wired
into the parent ``pom.xml`` in two places: a ``<module>`` declaration and a
``<dependencyManagement>`` entry placed after the anchor module's entry.

Both descriptor patches are applied to the parsed document before anything
is written, so a missing anchor aborts the run with the tree untouched.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from . import manifest
from .errors import ModuleExistsError, ScaffoldError
from .generator import ProgressCallback, ProjectConfig
from .naming import validate_module_name
from .pom import PomDocument
from .templates import TemplateRenderer
from .writer import TreeWriter

APPLICATION_DIR = "application"
DEFAULT_ANCHOR_MODULE = "application-user"


def module_artifact_id(name: str) -> str:
    """``payment`` -> ``application-payment``."""
    return f"application-{name}"


def module_path(name: str) -> str:
    """Module path as declared in ``<modules>``: ``application/application-payment``."""
    return f"{APPLICATION_DIR}/{module_artifact_id(name)}"


class ModuleResult(BaseModel):
    """Outcome of :meth:`ModuleGenerator.add`."""

    name: str
    module_dir: Path
    files: list[Path] = Field(default_factory=list)
    module_registered: bool = False
    dependency_registered: bool = False


class ModuleGenerator:
    """Creates ``application/application-<name>`` inside a project root.

    Args:
        project_root: Directory holding the parent ``pom.xml``.
        config: Project configuration; read from the parent descriptor when
            omitted.
        anchor: Artifact id of the managed dependency the new entry is
            inserted after.
    """

    def __init__(
        self,
        project_root: str | Path,
        config: ProjectConfig | None = None,
        renderer: TemplateRenderer | None = None,
        anchor: str = DEFAULT_ANCHOR_MODULE,
        progress: ProgressCallback | None = None,
    ) -> None:
        self.project_root = Path(project_root)
        self.pom_path = self.project_root / "pom.xml"
        self._config = config
        self.renderer = renderer or TemplateRenderer()
        self.anchor = anchor
        self.progress = progress

    @property
    def config(self) -> ProjectConfig:
        if self._config is None:
            self._config = ProjectConfig.from_project_root(self.project_root)
        return self._config

    def module_dir(self, name: str) -> Path:
        return self.project_root / module_path(name)

    def add(self, name: str) -> ModuleResult:
        """Create the module and register it in the parent descriptor.

        Raises:
            InvalidNameError: *name* is not a valid module name.
            ScaffoldError: The project has no ``application/`` directory.
            DescriptorError: The parent ``pom.xml`` is missing or unreadable.
            ModuleExistsError: The module directory already exists.
            AnchorNotFoundError: ``<modules>`` or the anchor dependency is
                missing from the parent descriptor.
        """
        validate_module_name(name)

        document = PomDocument.load(self.pom_path)
        if not (self.project_root / APPLICATION_DIR).is_dir():
            raise ScaffoldError(
                f"{self.project_root} has no {APPLICATION_DIR}/ directory; "
                "is this a generated project?"
            )
        if self._config is None:
            self._config = ProjectConfig.from_coordinates(document.coordinates(), self.project_root)

        module_dir = self.module_dir(name)
        if module_dir.exists():
            raise ModuleExistsError(module_dir)

        # Patch in memory first; anchor errors surface before any write.
        module_registered = document.add_module(module_path(name))
        dependency_registered = document.add_managed_dependency(
            self.config.group_id, module_artifact_id(name), after=self.anchor
        )

        placeholders = self.config.module_placeholders(name)
        with TreeWriter() as writer:
            self._step("Creating module directories")
            writer.make_dirs(
                *(
                    module_dir / self.renderer.render_string(d, placeholders, strict=True)
                    for d in manifest.MODULE_DIRS
                )
            )

            self._step("Generating module pom.xml")
            self._render(writer, module_dir, manifest.MODULE_POM, placeholders)

            if module_registered or dependency_registered:
                self._step("Updating parent pom.xml")
                document.save(writer)

            self._step("Generating sample service")
            self._render(writer, module_dir, manifest.MODULE_SERVICE, placeholders)

        return ModuleResult(
            name=name,
            module_dir=module_dir,
            files=list(dict.fromkeys(writer.written)),
            module_registered=module_registered,
            dependency_registered=dependency_registered,
        )

    # -- Helpers -----------------------------------------------------------

    def _step(self, message: str) -> None:
        if self.progress is not None:
            self.progress(message)

    def _render(
        self,
        writer: TreeWriter,
        base: Path,
        entry: tuple[str, str],
        placeholders: dict[str, str],
    ) -> Path:
        template_path, output_path = entry
        out = base / self.renderer.render_string(output_path, placeholders, strict=True)
        return self.renderer.render_to_file(template_path, out, placeholders, writer=writer)
