"""Read and patch Maven ``pom.xml`` build descriptors.

The descriptor is parsed with ``xml.etree.ElementTree`` (comments kept), so
lookups target the project-level elements rather than the first textual
match anywhere in the file: ``<groupId>`` inside ``<parent>`` or a
dependency never shadows the project's own coordinates.

Edits are limited to the two fixed insertion points used when a module is
added:

* a ``<module>`` entry appended at the end of ``<modules>``;
* a ``<dependency>`` block inserted right after a named reference entry in
  ``<dependencyManagement>``.

Edits are spliced into the original text at offsets located by the parser,
so everything outside the inserted fragment (prolog comments, CDATA,
attribute layout, line endings) is written back byte-for-byte. New
fragments copy the indentation of their neighbours.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path
from typing import NamedTuple
from xml.parsers import expat
from xml.sax.saxutils import escape

from pydantic import BaseModel, ConfigDict

from .errors import AnchorNotFoundError, DescriptorError
from .writer import TreeWriter, write_file

# XML namespace used by Maven POM files (POM model version 4.0.0).
POM_NAMESPACE = "http://maven.apache.org/POM/4.0.0"

DEFAULT_VERSION = "1.0.0"
DEFAULT_ARTIFACT_ID = "app"

_INDENT_STEP = "    "


class PomCoordinates(BaseModel):
    """Project-level identity read from a descriptor."""

    model_config = ConfigDict(frozen=True)

    group_id: str
    artifact_id: str
    version: str
    name: str | None = None
    description: str | None = None


class _Span(NamedTuple):
    """Byte offsets of one element in the encoded source."""

    start: int  # "<" of the start tag
    close: int  # "<" of the end tag; equals start for "<tag/>"
    end: int  # just past the element

    @property
    def self_closing(self) -> bool:
        return self.close == self.start


class PomDocument:
    """A parsed ``pom.xml`` that can be queried, patched and written back.

    Attributes:
        path: File the document was loaded from (and is saved to).
        text: Current source text, including every edit made so far.
        root: The ``<project>`` element parsed from :attr:`text`.
    """

    def __init__(self, path: Path, text: str) -> None:
        self.path = path
        self._set_text(text)

    def _set_text(self, text: str) -> None:
        parser = ET.XMLParser(target=ET.TreeBuilder(insert_comments=True))
        try:
            root = ET.fromstring(text, parser=parser)
        except ET.ParseError as exc:
            raise DescriptorError(self.path, f"not well-formed XML: {exc}") from exc
        self.text = text
        self.root = root
        self.newline = "\r\n" if "\r\n" in text else "\n"
        tag = root.tag
        self.namespace = tag[1:].split("}", 1)[0] if tag.startswith("{") else ""

    # -- Loading / saving --------------------------------------------------

    @classmethod
    def load(cls, path: str | Path) -> PomDocument:
        """Parse the descriptor at *path*.

        Raises:
            DescriptorError: If the file is missing, unreadable or not
                well-formed XML.
        """
        pom_path = Path(path)
        try:
            # Bytes, not read_text(): line endings must survive unchanged.
            text = pom_path.read_bytes().decode("utf-8")
        except FileNotFoundError:
            raise DescriptorError(pom_path, "file not found") from None
        except (OSError, UnicodeDecodeError) as exc:
            raise DescriptorError(pom_path, f"cannot read file: {exc}") from exc
        return cls(pom_path, text)

    @classmethod
    def from_string(cls, text: str, path: str | Path = "pom.xml") -> PomDocument:
        """Parse descriptor *text*; *path* is used for messages and saving."""
        return cls(Path(path), text)

    def to_string(self) -> str:
        """Return the document source with all edits applied."""
        return self.text

    def save(self, writer: TreeWriter | None = None) -> Path:
        """Write the document back to :attr:`path`."""
        if writer is not None:
            return writer.write_text(self.path, self.text)
        return write_file(self.path, self.text)

    # -- Coordinates -------------------------------------------------------

    def coordinates(self) -> PomCoordinates:
        """Return the project's groupId, artifactId and version.

        ``groupId`` and ``version`` fall back to the ``<parent>`` block;
        ``artifactId`` and ``version`` fall back to fixed defaults.

        Raises:
            DescriptorError: If no groupId can be determined.
        """
        parent = self._find(self.root, "parent")
        group_id = self._text(self.root, "groupId")
        version = self._text(self.root, "version")
        if parent is not None:
            group_id = group_id or self._text(parent, "groupId")
            version = version or self._text(parent, "version")

        if not group_id:
            raise DescriptorError(self.path, "could not extract groupId")

        return PomCoordinates(
            group_id=group_id,
            artifact_id=self._text(self.root, "artifactId") or DEFAULT_ARTIFACT_ID,
            version=version or DEFAULT_VERSION,
            name=self._text(self.root, "name"),
            description=self._text(self.root, "description"),
        )

    # -- Modules -----------------------------------------------------------

    def modules(self) -> list[str]:
        """Return the declared ``<module>`` paths in document order."""
        modules = self._find(self.root, "modules")
        if modules is None:
            return []
        return [(m.text or "").strip() for m in modules.findall(self._q("module"))]

    def has_module(self, module_path: str) -> bool:
        return module_path in self.modules()

    def add_module(self, module_path: str) -> bool:
        """Append ``<module>module_path</module>`` to ``<modules>``.

        Returns:
            ``False`` if the module is already declared (document unchanged),
            ``True`` if it was added.

        Raises:
            AnchorNotFoundError: If the descriptor has no ``<modules>``.
        """
        modules = self._find(self.root, "modules")
        if modules is None:
            raise AnchorNotFoundError(self.path, "</modules>")
        if self.has_module(module_path):
            return False

        entry = f"<module>{escape(module_path)}</module>"
        nl = self.newline
        data = self.text.encode("utf-8")
        spans = self._spans(data)
        children = modules.findall(self._q("module"))

        if children:
            last = spans[children[-1]]
            indent = _indent_at(data, last.start)
            fragment = entry if indent is None else nl + indent + entry
            self._splice(data, last.end, last.end, fragment)
            return True

        span = spans[modules]
        outer = _indent_at(data, span.start) or ""
        inner = outer + _INDENT_STEP
        if span.self_closing:
            name = data[span.start + 1 : span.end - 2].split()[0].decode("utf-8")
            fragment = f"<{name}>{nl}{inner}{entry}{nl}{outer}</{name}>"
            self._splice(data, span.start, span.end, fragment)
            return True

        closing_indent = _indent_at(data, span.close)
        if closing_indent is None:
            self._splice(data, span.close, span.close, f"{nl}{inner}{entry}{nl}{outer}")
        else:
            line_start = span.close - len(closing_indent.encode("utf-8"))
            fragment = f"{closing_indent}{_INDENT_STEP}{entry}{nl}"
            self._splice(data, line_start, line_start, fragment)
        return True

    # -- Managed dependencies ----------------------------------------------

    def managed_dependencies(self) -> ET.Element | None:
        """Return ``<dependencyManagement><dependencies>``, if present."""
        management = self._find(self.root, "dependencyManagement")
        if management is None:
            return None
        return self._find(management, "dependencies")

    def find_managed_dependency(self, artifact_id: str) -> ET.Element | None:
        """Return the managed ``<dependency>`` whose artifactId matches."""
        dependencies = self.managed_dependencies()
        if dependencies is None:
            return None
        for dependency in dependencies.findall(self._q("dependency")):
            if self._text(dependency, "artifactId") == artifact_id:
                return dependency
        return None

    def has_managed_dependency(self, artifact_id: str) -> bool:
        return self.find_managed_dependency(artifact_id) is not None

    def add_managed_dependency(
        self,
        group_id: str,
        artifact_id: str,
        after: str,
        version: str = "${project.version}",
    ) -> bool:
        """Insert a managed dependency right after the *after* entry.

        Returns:
            ``False`` if *artifact_id* is already managed (document
            unchanged), ``True`` if the block was inserted.

        Raises:
            AnchorNotFoundError: If the reference entry *after* is missing.
        """
        if self.has_managed_dependency(artifact_id):
            return False

        anchor = self.find_managed_dependency(after)
        if anchor is None:
            raise AnchorNotFoundError(self.path, f"managed dependency '{after}'")

        data = self.text.encode("utf-8")
        span = self._spans(data)[anchor]
        indent = _indent_at(data, span.start) or ""
        lines = ["<dependency>"]
        for tag, value in (("groupId", group_id), ("artifactId", artifact_id), ("version", version)):
            lines.append(f"{_INDENT_STEP}<{tag}>{escape(value)}</{tag}>")
        lines.append("</dependency>")

        fragment = "".join(self.newline + indent + line for line in lines)
        self._splice(data, span.end, span.end, fragment)
        return True

    # -- Element helpers ---------------------------------------------------

    def _q(self, tag: str) -> str:
        return f"{{{self.namespace}}}{tag}" if self.namespace else tag

    def _find(self, element: ET.Element, tag: str) -> ET.Element | None:
        """Find a direct child element by local name."""
        return element.find(self._q(tag))

    def _text(self, element: ET.Element, tag: str) -> str | None:
        """Stripped text of a direct child, or ``None`` if absent or empty."""
        child = self._find(element, tag)
        if child is not None and child.text and child.text.strip():
            return child.text.strip()
        return None

    # -- Source offsets ----------------------------------------------------

    def _spans(self, data: bytes) -> dict[ET.Element, _Span]:
        """Map every element of :attr:`root` to its offsets in *data*.

        Both parsers report elements in start-tag order, so the n-th tree
        element is the n-th start tag seen by the scanner.
        """
        elements = [e for e in self.root.iter() if isinstance(e.tag, str)]
        try:
            spans = _element_spans(data)
        except expat.ExpatError as exc:
            raise DescriptorError(self.path, f"not well-formed XML: {exc}") from exc
        return dict(zip(elements, spans))

    def _splice(self, data: bytes, start: int, end: int, fragment: str) -> None:
        """Replace ``data[start:end]`` with *fragment* and re-parse."""
        patched = data[:start] + fragment.encode("utf-8") + data[end:]
        self._set_text(patched.decode("utf-8"))


# ---------------------------------------------------------------------------
# Module-level shortcuts
# ---------------------------------------------------------------------------


def read_coordinates(path: str | Path) -> PomCoordinates:
    """Load the descriptor at *path* and return its coordinates."""
    return PomDocument.load(path).coordinates()


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _element_spans(data: bytes) -> list[_Span]:
    """Byte offsets of every element in *data*, in start-tag order."""
    parser = expat.ParserCreate()
    spans: list[_Span | None] = []
    open_elements: list[tuple[int, int]] = []

    def on_start(name, attrs):
        open_elements.append((len(spans), parser.CurrentByteIndex))
        spans.append(None)

    def on_end(name):
        index, start = open_elements.pop()
        position = parser.CurrentByteIndex
        if data.startswith(b"</", position):
            spans[index] = _Span(start, position, data.index(b">", position) + 1)
        else:
            spans[index] = _Span(start, start, data.index(b"/>", start) + 2)

    parser.StartElementHandler = on_start
    parser.EndElementHandler = on_end
    parser.Parse(data, True)
    return spans


def _indent_at(data: bytes, offset: int) -> str | None:
    """Whitespace from the start of the line up to *offset*.

    ``None`` when anything other than whitespace precedes *offset* on its
    line.
    """
    line_start = data.rfind(b"\n", 0, offset) + 1
    prefix = data[line_start:offset]
    if prefix.strip():
        return None
    return prefix.decode("utf-8")
