"""phjvgen scaffolder -- generates layered multi-module Maven projects.

This package renders the bundled Jinja2 templates into a complete project
tree (parent and module ``pom.xml`` files, starter class, Spring
configuration and a User CRUD example) and adds application modules to a
project generated earlier.

Quick usage::

    from phjvgen.scaffolder import ModuleGenerator, ProjectConfig, ProjectGenerator

    config = ProjectConfig(group_id="com.mycompany", artifact_id="my-app")
    result = ProjectGenerator(config).generate()

    ModuleGenerator(result.root).add("payment")
"""

from phjvgen.scaffolder.discovery import find_project_root
from phjvgen.scaffolder.errors import (
    AnchorNotFoundError,
    DescriptorError,
    InvalidNameError,
    MaterializationError,
    ModuleExistsError,
    ProjectRootNotFoundError,
    ScaffoldError,
    TemplateSyntaxError,
    UnresolvedPlaceholderError,
)
from phjvgen.scaffolder.generator import GenerationResult, ProjectConfig, ProjectGenerator
from phjvgen.scaffolder.module import ModuleGenerator, ModuleResult
from phjvgen.scaffolder.pom import PomCoordinates, PomDocument
from phjvgen.scaffolder.templates import Placeholder, TemplateRenderer

__all__ = [
    "AnchorNotFoundError",
    "DescriptorError",
    "GenerationResult",
    "InvalidNameError",
    "MaterializationError",
    "ModuleExistsError",
    "ModuleGenerator",
    "ModuleResult",
    "Placeholder",
    "PomCoordinates",
    "PomDocument",
    "ProjectConfig",
    "ProjectGenerator",
    "ProjectRootNotFoundError",
    "ScaffoldError",
    "TemplateRenderer",
    "TemplateSyntaxError",
    "UnresolvedPlaceholderError",
    "find_project_root",
]
