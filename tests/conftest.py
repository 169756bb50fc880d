"""Shared pytest fixtures for the phjvgen test suite.

Provides reusable fixtures for:
- Project configurations (custom and preset)
- A template renderer over the bundled templates
- Rendered parent descriptors
- Fully generated projects on disk
"""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from phjvgen.scaffolder.generator import ProjectConfig, ProjectGenerator
from phjvgen.scaffolder.templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Configurations
# ---------------------------------------------------------------------------

@pytest.fixture
def project_config(tmp_path: Path) -> ProjectConfig:
    """A ``com.example`` / ``demo-app`` configuration writing under tmp_path."""
    return ProjectConfig(
        group_id="com.example",
        artifact_id="demo-app",
        version="2.3.4",
        project_name="Demo App",
        project_description="A project for tests",
        output_dir=tmp_path / "demo-app",
    )


@pytest.fixture
def renderer() -> TemplateRenderer:
    """Renderer over the bundled templates."""
    return TemplateRenderer()


# ---------------------------------------------------------------------------
# Descriptors
# ---------------------------------------------------------------------------

@pytest.fixture
def parent_pom_text(project_config: ProjectConfig, renderer: TemplateRenderer) -> str:
    """The parent ``pom.xml`` rendered for ``project_config``."""
    return renderer.render("pom/parent.xml.j2", project_config.placeholders())


@pytest.fixture
def minimal_pom_text() -> str:
    """A small hand-written parent descriptor with both anchors."""
    return textwrap.dedent("""\
        <?xml version="1.0" encoding="UTF-8"?>
        <project xmlns="http://maven.apache.org/POM/4.0.0">
            <parent>
                <groupId>org.springframework.boot</groupId>
                <artifactId>spring-boot-starter-parent</artifactId>
                <version>3.3.0</version>
            </parent>
            <groupId>com.acme.shop</groupId>
            <artifactId>shop</artifactId>
            <version>0.9.0</version>

            <modules>
                <module>common</module>
                <module>application/application-user</module>
            </modules>

            <dependencyManagement>
                <dependencies>
                    <dependency>
                        <groupId>com.acme.shop</groupId>
                        <artifactId>application-user</artifactId>
                        <version>${project.version}</version>
                    </dependency>

                    <!-- Lombok -->
                    <dependency>
                        <groupId>org.projectlombok</groupId>
                        <artifactId>lombok</artifactId>
                        <version>1.18.34</version>
                    </dependency>
                </dependencies>
            </dependencyManagement>
        </project>
        """)


# ---------------------------------------------------------------------------
# Generated projects
# ---------------------------------------------------------------------------

@pytest.fixture
def generated_project(project_config: ProjectConfig) -> Path:
    """A complete project generated on disk; returns its root."""
    result = ProjectGenerator(project_config).generate()
    return result.root
