"""Interactive console prompts.

Thin wrappers around ``rich.prompt`` that re-ask until the answer passes
validation, plus :func:`collect_project_config` which gathers everything
``phjvgen generate`` needs.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from rich.prompt import Confirm, Prompt

from phjvgen.config import Settings
from phjvgen.scaffolder.generator import ProjectConfig
from phjvgen.scaffolder.naming import is_valid_artifact_id, is_valid_group_id
from phjvgen.utils import console, print_error


def ask_validated(
    prompt: str,
    validator: Callable[[str], bool],
    error_message: str,
    default: str | None = None,
) -> str:
    """Ask until *validator* accepts the (stripped) answer."""
    while True:
        if default is None:
            answer = Prompt.ask(prompt, console=console)
        else:
            answer = Prompt.ask(prompt, console=console, default=default)
        answer = (answer or "").strip()
        if validator(answer):
            return answer
        print_error(error_message)


def ask_with_default(prompt: str, default: str) -> str:
    """Ask once; an empty answer means *default*."""
    answer = Prompt.ask(prompt, console=console, default=default)
    return (answer or "").strip() or default


def confirm(prompt: str, default: bool = False, assume_yes: bool = False) -> bool:
    """Ask a yes/no question; ``assume_yes`` answers it without asking."""
    if assume_yes:
        return True
    return Confirm.ask(prompt, console=console, default=default)


def collect_project_config(settings: Settings | None = None) -> ProjectConfig:
    """Prompt for every project setting and return the validated config."""
    settings = settings or Settings()

    group_id = ask_validated(
        "Group ID (e.g. com.mycompany)",
        is_valid_group_id,
        "Invalid Group ID; use a dotted lowercase form like com.mycompany",
    )
    artifact_id = ask_validated(
        "Artifact ID (e.g. my-app)",
        is_valid_artifact_id,
        "Invalid Artifact ID; use lowercase letters, digits and hyphens",
    )
    version = ask_with_default("Version", settings.default_version)
    project_name = ask_with_default("Project name", artifact_id)
    description = ask_with_default("Project description", settings.default_description)
    output_dir = ask_with_default("Output directory", f"./{artifact_id}")

    return ProjectConfig(
        group_id=group_id,
        artifact_id=artifact_id,
        version=version,
        project_name=project_name,
        project_description=description,
        output_dir=Path(output_dir),
    )
