"""Jinja2 template rendering for project scaffolding.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``phjvgen/scaffolder/templates/`` directory and renders them with a
placeholder mapping built from the project configuration.  Templates refer
to values through ``{{TOKEN}}`` placeholders whose names are enumerated by
:class:`Placeholder`.

Rendering comes in two flavours:

* **strict** (the default for bundled templates): the text is rendered by
  Jinja2 and every placeholder it references must be present in the
  mapping, otherwise :class:`UnresolvedPlaceholderError` lists the missing
  tokens.
* **lenient**: a literal, single-pass replacement of each mapped
  ``{{KEY}}`` token.  Everything else in the text, including unknown
  tokens and anything that looks like Jinja2 syntax, is left untouched.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from enum import Enum
from pathlib import Path

import jinja2
from jinja2 import Environment, FileSystemLoader, StrictUndefined, meta

from .errors import TemplateSyntaxError, UnresolvedPlaceholderError
from .writer import TreeWriter, write_file


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# Placeholder keys
# ---------------------------------------------------------------------------


class Placeholder(str, Enum):
    """Every placeholder name a bundled template may reference."""

    GROUP_ID = "GROUP_ID"
    ARTIFACT_ID = "ARTIFACT_ID"
    VERSION = "VERSION"
    PROJECT_NAME = "PROJECT_NAME"
    PROJECT_DESCRIPTION = "PROJECT_DESCRIPTION"
    PACKAGE_NAME = "PACKAGE_NAME"
    PACKAGE_PATH = "PACKAGE_PATH"
    MODULE_NAME = "MODULE_NAME"
    MODULE_DESCRIPTION = "MODULE_DESCRIPTION"
    MODULE_PACKAGE = "MODULE_PACKAGE"
    MODULE_CLASS = "MODULE_CLASS"

    @property
    def token(self) -> str:
        """The literal form embedded in template text, e.g. ``{{GROUP_ID}}``."""
        return "{{" + self.value + "}}"


PlaceholderMapping = Mapping[str, str]


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for project scaffolding.

    The renderer discovers ``.j2`` template files under a configurable
    template directory.  Templates are rendered with a placeholder mapping
    (``{"GROUP_ID": "com.example", ...}``); values are inserted verbatim,
    without escaping and without being rendered again.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=False,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )

    # -- Single template rendering -----------------------------------------

    def render(
        self,
        template_path: str,
        placeholders: PlaceholderMapping,
        *,
        strict: bool = True,
    ) -> str:
        """Render a single template file with the provided placeholders.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"pom/parent.xml.j2"``).
            placeholders: Mapping of placeholder name to value.
            strict: Raise ``UnresolvedPlaceholderError`` when the template
                references a placeholder missing from *placeholders*.
                Otherwise substitute literally and keep unknown tokens.

        Returns:
            The rendered template content as a string.
        """
        context = _normalize(placeholders)
        source, _, _ = self.env.loader.get_source(self.env, template_path)
        if not strict:
            return substitute(source, context)
        self._check_resolved(template_path, source, context)
        template = self.env.get_template(template_path)
        return template.render(**context)

    def render_string(
        self,
        template_string: str,
        placeholders: PlaceholderMapping,
        *,
        strict: bool = False,
    ) -> str:
        """Render an inline template string with the provided placeholders.

        Used for output paths (``starter/src/main/java/{{PACKAGE_PATH}}``)
        and for ad-hoc text.  Lenient unless *strict* is set.
        """
        context = _normalize(placeholders)
        if not strict:
            return substitute(template_string, context)
        self._check_resolved("<string>", template_string, context)
        template = self.env.from_string(template_string)
        return template.render(**context)

    # -- File-based rendering ----------------------------------------------

    def render_to_file(
        self,
        template_path: str,
        output_path: str | Path,
        placeholders: PlaceholderMapping,
        writer: TreeWriter | None = None,
    ) -> Path:
        """Render a template and write the result to *output_path*.

        Parent directories are created automatically.  When a *writer* is
        given the file becomes part of its transaction.  Returns the output
        path.
        """
        content = self.render(template_path, placeholders)
        out = Path(output_path)
        if writer is not None:
            writer.write_text(out, content)
        else:
            write_file(out, content)
        return out

    # -- Utility -----------------------------------------------------------

    def list_templates(self, prefix: str = "") -> list[str]:
        """Return a sorted list of all ``.j2`` template paths under *prefix*.

        Paths are relative to the template root directory and use ``/``.
        """
        search_dir = self.template_dir / prefix if prefix else self.template_dir
        if not search_dir.is_dir():
            return []
        return sorted(
            p.relative_to(self.template_dir).as_posix()
            for p in search_dir.rglob("*.j2")
        )

    def referenced_placeholders(self, template_path: str) -> set[str]:
        """Return the placeholder names a template file refers to."""
        source, _, _ = self.env.loader.get_source(self.env, template_path)
        return self._undeclared(template_path, source)

    def _undeclared(self, name: str, source: str) -> set[str]:
        try:
            return meta.find_undeclared_variables(self.env.parse(source))
        except jinja2.TemplateSyntaxError as exc:
            raise TemplateSyntaxError(name, f"line {exc.lineno}: {exc.message}") from exc

    def _check_resolved(
        self, name: str, source: str, context: dict[str, str]
    ) -> None:
        missing = self._undeclared(name, source) - set(context)
        if missing:
            raise UnresolvedPlaceholderError(
                name, ["{{" + key + "}}" for key in sorted(missing)]
            )


# ---------------------------------------------------------------------------
# Literal substitution
# ---------------------------------------------------------------------------


def substitute(text: str, placeholders: PlaceholderMapping) -> str:
    """Replace every ``{{KEY}}`` of *placeholders* in *text*, in one pass.

    Tokens not in the mapping and all other text stay byte-for-byte as
    they are; inserted values are never scanned again.  Cannot fail.
    """
    context = _normalize(placeholders)
    if not context:
        return text
    pattern = re.compile("|".join(re.escape("{{" + key + "}}") for key in context))
    return pattern.sub(lambda match: context[match.group(0)[2:-2]], text)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _normalize(placeholders: PlaceholderMapping) -> dict[str, str]:
    """Accept ``Placeholder`` members or plain names as keys."""
    return {
        (key.value if isinstance(key, Placeholder) else str(key)): value
        for key, value in placeholders.items()
    }
