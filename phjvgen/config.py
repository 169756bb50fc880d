"""phjvgen configuration.

Tool-level settings: the defaults offered by the interactive prompts, the
anchor module used when registering new modules, and where templates are
loaded from.  Settings are Pydantic v2 models so they validate at
construction time and can be overridden from environment variables.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field

from phjvgen.scaffolder.discovery import DESCRIPTOR_FILE, ROOT_MARKER_DIRS
from phjvgen.scaffolder.generator import DEFAULT_DESCRIPTION, DEFAULT_VERSION
from phjvgen.scaffolder.module import DEFAULT_ANCHOR_MODULE


class Settings(BaseModel):
    """Global phjvgen settings.

    Instances are created once by the CLI entry point and passed to the
    commands that need them.
    """

    default_version: str = Field(default=DEFAULT_VERSION, min_length=1)
    default_description: str = Field(default=DEFAULT_DESCRIPTION)
    anchor_module: str = Field(
        default=DEFAULT_ANCHOR_MODULE,
        min_length=1,
        description="Managed dependency new application modules are inserted after",
    )
    descriptor_file: str = Field(default=DESCRIPTOR_FILE)
    root_marker_dirs: tuple[str, ...] = Field(default=ROOT_MARKER_DIRS)
    template_dir: Path | None = Field(
        default=None, description="Override for the bundled template directory"
    )

    @classmethod
    def from_env(cls) -> "Settings":
        """Build ``Settings`` from environment variables.

        Recognised variables (all optional):
            PHJVGEN_VERSION, PHJVGEN_DESCRIPTION, PHJVGEN_ANCHOR_MODULE,
            PHJVGEN_TEMPLATE_DIR.
        """
        kwargs: dict[str, object] = {}
        if os.environ.get("PHJVGEN_VERSION"):
            kwargs["default_version"] = os.environ["PHJVGEN_VERSION"]
        if os.environ.get("PHJVGEN_DESCRIPTION"):
            kwargs["default_description"] = os.environ["PHJVGEN_DESCRIPTION"]
        if os.environ.get("PHJVGEN_ANCHOR_MODULE"):
            kwargs["anchor_module"] = os.environ["PHJVGEN_ANCHOR_MODULE"]
        if os.environ.get("PHJVGEN_TEMPLATE_DIR"):
            kwargs["template_dir"] = Path(os.environ["PHJVGEN_TEMPLATE_DIR"])
        return cls(**kwargs)
