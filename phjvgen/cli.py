"""Command-line interface for phjvgen.

Sub-commands::

    phjvgen generate          # interactive (aliases: gen, g)
    phjvgen example           # preset demo-app project, no prompts
    phjvgen demo              # add the User CRUD example to the current project
    phjvgen add payment       # add application/application-payment
    phjvgen version

Exit codes: 0 on success or when the user declines a confirmation, 2 for
invalid input, 1 for every other failure.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from pydantic import ValidationError

from phjvgen import __version__
from phjvgen.config import Settings
from phjvgen.prompts import collect_project_config, confirm
from phjvgen.scaffolder.discovery import find_project_root
from phjvgen.scaffolder.errors import InvalidNameError, ModuleExistsError, ScaffoldError
from phjvgen.scaffolder.generator import ProjectConfig, ProjectGenerator
from phjvgen.scaffolder.module import ModuleGenerator, module_artifact_id, module_path
from phjvgen.scaffolder.naming import validate_module_name
from phjvgen.scaffolder.templates import TemplateRenderer
from phjvgen.utils import (
    console,
    print_banner,
    print_error,
    print_info,
    print_section,
    print_success,
    print_summary_table,
    print_warning,
)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INVALID_INPUT = 2


# ---------------------------------------------------------------------------
# Summaries
# ---------------------------------------------------------------------------


def _print_config(config: ProjectConfig) -> None:
    print_summary_table(
        {
            "Group ID": config.group_id,
            "Artifact ID": config.artifact_id,
            "Version": config.version,
            "Project Name": config.project_name,
            "Package Name": config.package_name,
            "Output Directory": str(config.output_dir),
        },
        title="Project configuration",
    )


def _print_generation_summary(config: ProjectConfig, file_count: int) -> None:
    print_section("Project generated")
    print_info(f"Location: {config.output_dir}")
    print_info(f"{file_count} files written, including the User CRUD example")
    console.print()
    print_info("Next steps:")
    console.print(f"  1. cd {config.output_dir}")
    console.print("  2. Configure the database in starter/src/main/resources/application-dev.yml")
    console.print(
        "  3. Run infrastructure/src/main/resources/db/migration/V1__create_user_table.sql"
    )
    console.print("  4. mvn clean install")
    console.print("  5. java --enable-preview -jar starter/target/starter-*.jar")
    console.print("  6. curl http://localhost:8080/api/health")
    console.print()
    print_info("Add a module: phjvgen add <module-name>")


def _print_demo_summary(file_count: int) -> None:
    print_section("CRUD example generated")
    print_info(f"{file_count} files written")
    print_info("Next steps:")
    console.print("  1. Review the generated code")
    console.print(
        "  2. mysql -u root -p < "
        "infrastructure/src/main/resources/db/migration/V1__create_user_table.sql"
    )
    console.print("  3. mvn clean install")
    console.print("  4. curl http://localhost:8080/api/users/1")


def _print_module_summary(config: ProjectConfig, name: str) -> None:
    print_section(f"Module {module_artifact_id(name)} created")
    print_info("Next steps:")
    console.print(f"  1. ls -la {module_path(name)}/")
    console.print("  2. mvn clean install")
    console.print()
    print_info("To use the module from adapter-rest, add this dependency:")
    console.print(
        "  <dependency>\n"
        f"      <groupId>{config.group_id}</groupId>\n"
        f"      <artifactId>{module_artifact_id(name)}</artifactId>\n"
        "  </dependency>",
        markup=False,
        highlight=False,
    )


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def cmd_generate(args: argparse.Namespace, settings: Settings) -> int:
    print_banner()
    if args.group_id and args.artifact_id:
        config = ProjectConfig(
            group_id=args.group_id,
            artifact_id=args.artifact_id,
            version=args.project_version or settings.default_version,
            project_name=args.name or "",
            project_description=args.description or settings.default_description,
            output_dir=Path(args.output) if args.output else None,
        )
    else:
        config = collect_project_config(settings)

    _print_config(config)
    if not confirm("Generate project?", default=True, assume_yes=args.yes):
        print_warning("Cancelled")
        return EXIT_OK

    return _generate(config, settings)


def cmd_example(args: argparse.Namespace, settings: Settings) -> int:
    print_banner()
    print_info("Generating the example project with preset configuration")
    config = ProjectConfig.example()
    _print_config(config)
    code = _generate(config, settings)
    if code == EXIT_OK:
        print_info("Quick start: cd demo-app && mvn clean install")
    return code


def _generate(config: ProjectConfig, settings: Settings) -> int:
    generator = ProjectGenerator(
        config, TemplateRenderer(settings.template_dir), progress=print_info
    )
    result = generator.generate()
    print_success("Project generated")
    _print_generation_summary(config, len(result.files))
    return EXIT_OK


def cmd_demo(args: argparse.Namespace, settings: Settings) -> int:
    root = find_project_root(
        descriptor=settings.descriptor_file, marker_dirs=settings.root_marker_dirs
    )
    print_info(f"Project root: {root}")
    config = ProjectConfig.from_project_root(root)
    print_info(f"Package: {config.package_name}")

    print_warning("This writes the full User CRUD example into every layer:")
    console.print("  - common: Result, BusinessException, ErrorCode")
    console.print("  - domain: User, UserRepository, UserDomainService, UserCreatedEvent")
    console.print("  - infrastructure: UserDO, UserMapper, UserRepositoryImpl, SQL migration")
    console.print("  - application: UserDTO, commands, UserAssembler, UserService")
    console.print("  - adapter: UserController, requests/responses, exception handler")
    console.print("  - starter: Application")
    if not confirm("Generate the example?", default=False, assume_yes=args.yes):
        print_warning("Cancelled")
        return EXIT_OK

    generator = ProjectGenerator(
        config, TemplateRenderer(settings.template_dir), progress=print_info
    )
    result = generator.generate_demo()
    print_success("CRUD example generated")
    _print_demo_summary(len(result.files))
    return EXIT_OK


def cmd_add(args: argparse.Namespace, settings: Settings) -> int:
    name = validate_module_name(args.module_name)
    root = find_project_root(
        descriptor=settings.descriptor_file, marker_dirs=settings.root_marker_dirs
    )
    generator = ModuleGenerator(
        root,
        renderer=TemplateRenderer(settings.template_dir),
        anchor=settings.anchor_module,
        progress=print_info,
    )
    config = generator.config
    print_summary_table(
        {
            "Project root": str(root),
            "Group ID": config.group_id,
            "Version": config.version,
            "Package": config.package_name,
        },
        title="Project",
    )

    module_dir = generator.module_dir(name)
    if module_dir.exists():
        raise ModuleExistsError(module_dir)

    if not confirm(
        f"Create module {module_artifact_id(name)}?", default=False, assume_yes=args.yes
    ):
        print_warning("Cancelled")
        return EXIT_OK

    result = generator.add(name)
    if not result.module_registered:
        print_warning(f"{module_path(name)} already declared in <modules>")
    if not result.dependency_registered:
        print_warning(f"{module_artifact_id(name)} already declared in <dependencyManagement>")
    print_success(f"Module {module_artifact_id(name)} created")
    _print_module_summary(config, name)
    return EXIT_OK


def cmd_version(args: argparse.Namespace, settings: Settings) -> int:
    console.print(f"phjvgen version {__version__}")
    return EXIT_OK


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="phjvgen",
        description="Generate layered multi-module Java 25 / Spring Boot projects",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  phjvgen generate\n"
            "  phjvgen generate --group-id com.mycompany --artifact-id my-app -y\n"
            "  phjvgen example\n"
            "  phjvgen add payment\n"
        ),
    )
    subparsers = parser.add_subparsers(dest="command", metavar="<command>")

    generate = subparsers.add_parser(
        "generate", aliases=["gen", "g"], help="Generate a new project"
    )
    generate.add_argument("--group-id", help="Maven groupId, e.g. com.mycompany")
    generate.add_argument("--artifact-id", help="Maven artifactId, e.g. my-app")
    generate.add_argument("--project-version", help="Project version (default: 1.0.0)")
    generate.add_argument("--name", help="Project name (default: the artifact id)")
    generate.add_argument("--description", help="Project description")
    generate.add_argument(
        "--output", "-o", help="Output directory (default: ./<artifact-id>)"
    )
    generate.add_argument("--yes", "-y", action="store_true", help="Skip confirmation")
    generate.set_defaults(handler=cmd_generate)

    example = subparsers.add_parser("example", help="Generate the preset example project")
    example.set_defaults(handler=cmd_example)

    demo = subparsers.add_parser(
        "demo", help="Add the User CRUD example to the current project"
    )
    demo.add_argument("--yes", "-y", action="store_true", help="Skip confirmation")
    demo.set_defaults(handler=cmd_demo)

    add = subparsers.add_parser("add", help="Add an application module")
    add.add_argument("module_name", metavar="module-name", help="e.g. payment, user-profile")
    add.add_argument("--yes", "-y", action="store_true", help="Skip confirmation")
    add.set_defaults(handler=cmd_add)

    version = subparsers.add_parser("version", help="Show the phjvgen version")
    version.set_defaults(handler=cmd_version)

    return parser


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def run(argv: list[str] | None = None, settings: Settings | None = None) -> int:
    """Parse *argv*, run the command and return its exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if getattr(args, "handler", None) is None:
        parser.print_help()
        return EXIT_OK

    settings = settings or Settings.from_env()
    try:
        return args.handler(args, settings)
    except (InvalidNameError, ValidationError) as exc:
        print_error(str(exc))
        return EXIT_INVALID_INPUT
    except ScaffoldError as exc:
        print_error(str(exc))
        return EXIT_FAILURE
    except KeyboardInterrupt:
        console.print()
        print_warning("Cancelled")
        return EXIT_FAILURE


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``phjvgen`` and ``python -m phjvgen``."""
    code = run(argv)
    if code != EXIT_OK:
        sys.exit(code)


if __name__ == "__main__":
    main()
